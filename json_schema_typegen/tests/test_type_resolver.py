import pytest

from json_schema_typegen.config import CSharpGeneratorSettings, NullHandling
from json_schema_typegen.csharp import CSharpGenerator, CSharpTypeResolver
from json_schema_typegen.schema import parse_schema


def resolve(schema, is_nullable=False, hint=None, **settings):
    resolver = CSharpTypeResolver(CSharpGeneratorSettings(**settings))
    return resolver.resolve(parse_schema(schema), is_nullable, hint)


@pytest.mark.parametrize(
    "schema,is_nullable,expected",
    [
        ({"type": "integer"}, False, "int"),
        ({"type": "integer"}, True, "int?"),
        ({"type": "integer", "format": "int64"}, False, "long"),
        ({"type": "integer", "format": "long"}, True, "long?"),
        ({"type": "integer", "format": "byte"}, False, "byte"),
        ({"type": "number"}, False, "double"),
        ({"type": "number", "format": "decimal"}, True, "decimal?"),
        ({"type": "boolean"}, False, "bool"),
        ({"type": "boolean"}, True, "bool?"),
        ({"type": "string"}, False, "string"),
        ({"type": "string"}, True, "string"),
        ({"type": "string", "format": "date-time"}, False, "System.DateTimeOffset"),
        ({"type": "string", "format": "date"}, True, "System.DateTimeOffset?"),
        ({"type": "string", "format": "time"}, False, "System.TimeSpan"),
        ({"type": "string", "format": "duration"}, False, "System.TimeSpan"),
        ({"type": "string", "format": "time-span"}, True, "System.TimeSpan?"),
        ({"type": "string", "format": "uuid"}, False, "System.Guid"),
        ({"type": "string", "format": "guid"}, True, "System.Guid?"),
        ({"type": "string", "format": "byte"}, False, "byte[]"),
        ({"type": "string", "format": "base64"}, True, "byte[]"),
        ({"type": "string", "format": "email"}, False, "string"),
        ({"type": "file"}, False, "byte[]"),
    ],
)
def test_primitive_types(schema, is_nullable, expected):
    assert resolve(schema, is_nullable) == expected


@pytest.mark.parametrize(
    "schema",
    [
        {},
        True,
        {"type": "object"},
        {"type": "null"},
        {"oneOf": [{"type": "string"}, {"type": "integer"}]},
        {"anyOf": [{"type": "null"}, {"type": "string"}, {"type": "boolean"}]},
    ],
)
def test_any_type(schema):
    assert resolve(schema) == "object"


def test_nullable_marker_is_not_repeated():
    resolver = CSharpTypeResolver(CSharpGeneratorSettings())
    schema = parse_schema({"type": ["integer", "null"]})
    assert resolver.resolve(schema, True) == "int?"
    assert resolver.resolve(schema, True) == "int?"


def test_configured_date_type():
    assert resolve({"type": "string", "format": "date-time"}, True, date_time_type="System.DateTime") == "System.DateTime?"
    # A type configured as string never gets a marker
    assert resolve({"type": "string", "format": "date"}, True, date_type="string") == "string"


class TestArrays:
    """Test cases for sequences and tuples"""

    def test_array_of_items(self):
        assert resolve({"type": "array", "items": {"type": "string"}}) == "System.Collections.Generic.ICollection<string>"

    def test_array_items_are_not_nullable(self):
        schema = {"type": "array", "items": {"type": ["integer", "null"]}}
        assert resolve(schema) == "System.Collections.Generic.ICollection<int>"

    def test_array_without_items(self):
        assert resolve({"type": "array"}) == "System.Collections.Generic.ICollection<object>"

    def test_tuple(self):
        schema = {"type": "array", "items": [{"type": "string"}, {"type": "integer"}, {"type": "boolean"}]}
        assert resolve(schema) == "System.Tuple<string, int, bool>"

    def test_configured_array_type(self):
        schema = {"type": "array", "items": {"type": "number"}}
        assert resolve(schema, array_type="System.Collections.Generic.List") == "System.Collections.Generic.List<double>"

    def test_nested_arrays(self):
        schema = {"type": "array", "items": {"type": "array", "items": {"type": "boolean"}}}
        expected = "System.Collections.Generic.ICollection<System.Collections.Generic.ICollection<bool>>"
        assert resolve(schema) == expected


class TestDictionaries:
    """Test cases for string keyed maps"""

    def test_typed_values(self):
        schema = {"type": "object", "additionalProperties": {"type": "integer"}}
        assert resolve(schema) == "System.Collections.Generic.IDictionary<string, int>"

    def test_untyped_values(self):
        schema = {"type": "object", "additionalProperties": True, "patternProperties": {}}
        # No properties and no value schema: this is the any type
        assert resolve(schema) == "object"

    def test_pattern_properties(self):
        schema = {"type": "object", "patternProperties": {"^x-": {"type": "string"}}}
        assert resolve(schema) == "System.Collections.Generic.IDictionary<string, string>"

    def test_nullable_values(self):
        schema = {"type": "object", "additionalProperties": {"type": ["number", "null"]}}
        assert resolve(schema) == "System.Collections.Generic.IDictionary<string, double?>"
        assert resolve(schema, dictionary_value_nullable=False) == "System.Collections.Generic.IDictionary<string, double>"

    def test_configured_dictionary_type(self):
        schema = {"additionalProperties": {"type": "string"}}
        assert resolve(schema, dictionary_type="Dictionary") == "Dictionary<string, string>"


class TestNamedTypes:
    """Test cases for types that get a generator"""

    def test_object_gets_generator(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        schema = parse_schema({"type": "object", "properties": {"a": {"type": "string"}}})
        assert resolver.resolve(schema, False, "Thing") == "Thing"
        assert isinstance(resolver.registry.get("Thing"), CSharpGenerator)

    def test_same_node_resolves_to_same_name(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        schema = parse_schema({"title": "Thing", "type": "object", "properties": {"a": {"type": "string"}}})
        assert resolver.resolve(schema, False, None) == "Thing"
        assert resolver.resolve(schema, True, "Other") == "Thing"
        assert len(resolver.registry) == 1

    def test_string_enum(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        schema = parse_schema({"type": "string", "enum": ["a", "b"]})
        assert resolver.resolve(schema, False, "Letter") == "Letter"
        assert resolver.resolve(schema, True, "Letter") == "Letter?"

    def test_integer_enum_has_no_nullable_marker(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        schema = parse_schema({"type": "integer", "enum": [1, 2]})
        assert resolver.resolve(schema, True, "Level") == "Level"
        assert resolver.registry.get("Level").enum_value_type == "integer"

    def test_untyped_enum_inference(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        integers = parse_schema({"enum": [1, 2, None]})
        strings = parse_schema({"enum": ["a", 1]})
        assert resolver.resolve(integers, True, "Numbers") == "Numbers"
        assert resolver.resolve(strings, True, "Mixed") == "Mixed?"
        assert resolver.registry.get("Numbers").resolved_enum_value_type == "integer"
        assert resolver.registry.get("Mixed").resolved_enum_value_type == "string"

    def test_reference_resolves_to_target(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        root = parse_schema(
            {
                "properties": {"a": {"$ref": "#/definitions/Item"}},
                "definitions": {"Item": {"type": "object", "properties": {"x": {"type": "string"}}}},
            }
        )
        assert resolver.resolve(root.properties["a"].schema, False, None) == "Item"
        assert resolver.resolve(root.definitions["Item"], False, "A") == "Item"

    def test_support_type_names_are_reserved(self):
        resolver = CSharpTypeResolver(CSharpGeneratorSettings())
        schema = parse_schema({"type": "object", "properties": {"a": {"type": "string"}}})
        assert resolver.resolve(schema, False, "JsonInheritanceConverter") == "JsonInheritanceConverter2"

    def test_swagger_dictionary_values(self):
        schema = {"type": "object", "additionalProperties": {"type": "integer", "x-nullable": True}}
        expected = "System.Collections.Generic.IDictionary<string, int?>"
        assert resolve(schema, null_handling=NullHandling.SWAGGER) == expected


@pytest.mark.parametrize(
    "enumeration,expected",
    [
        ([1, 2, 3], "integer"),
        (["a", "b"], "string"),
        (["a", 1], "string"),
        ([True, False], "string"),
    ],
)
def test_enumeration_backing_inference(enumeration, expected):
    resolver = CSharpTypeResolver(CSharpGeneratorSettings())
    name = resolver.resolve(parse_schema({"enum": enumeration}), False, "Choice")
    assert resolver.registry.get(name).resolved_enum_value_type == expected


def test_dictionary_of_booleans():
    schema = {"type": "object", "additionalProperties": {"type": "boolean"}}
    assert resolve(schema) == "System.Collections.Generic.IDictionary<string, bool>"


def test_declared_string_type_decides_enum_backing():
    resolver = CSharpTypeResolver(CSharpGeneratorSettings())
    assert resolver.resolve(parse_schema({"type": "string", "enum": [1, 2]}), True, "Code") == "Code?"
    assert resolver.registry.get("Code").resolved_enum_value_type == "string"

    code = resolver.generate_types()[0].code
    assert "[Newtonsoft.Json.JsonConverter(typeof(Newtonsoft.Json.Converters.StringEnumConverter))]" in code
    assert '[System.Runtime.Serialization.EnumMember(Value = @"1")]' in code
    assert "_1 = 0," in code


def test_integral_float_literals_infer_integer_enum():
    resolver = CSharpTypeResolver(CSharpGeneratorSettings())
    assert resolver.resolve(parse_schema({"enum": [1.0, 2.0]}), True, "Steps") == "Steps"
    assert resolver.registry.get("Steps").resolved_enum_value_type == "integer"
