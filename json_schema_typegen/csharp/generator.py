"""
C# type generator.

Builds the class or enum model of one named type, resolving member types
through the run's resolver, and renders it with the configured template
package.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ..config import CSharpGeneratorSettings
from ..generation.generator import TypeGeneratorBase, TypeGeneratorResult
from ..generation.naming import TypeNameGenerator
from ..schema.nodes import JsonObjectType, JsonProperty, JsonSchema
from ..utils import snake_to_pascal_case, to_csharp_identifier
from .models import (
    ClassTemplateModel,
    DerivedTypeModel,
    EnumMemberModel,
    EnumTemplateModel,
    PropertyModel,
)

if TYPE_CHECKING:
    from .resolver import CSharpTypeResolver

logger = logging.getLogger(__name__)

DATA_ANNOTATIONS = "System.ComponentModel.DataAnnotations"

INTEGER_ENUM = "integer"
STRING_ENUM = "string"


def is_integer_literal(value: Any) -> bool:
    # JSON Schema counts 5.0 as an integer
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int) and not isinstance(value, bool)


def enum_member_names(schema: JsonSchema) -> list[tuple[Any, str]]:
    """
    Pair each non-null enumeration literal with a unique C# member name.

    Names come from x-enumNames when given, otherwise from the literal.
    """
    result: list[tuple[Any, str]] = []
    used: set[str] = set()
    for i, value in enumerate(schema.enumeration):
        if value is None:
            continue
        name = ""
        if i < len(schema.enumeration_names):
            name = to_csharp_identifier(schema.enumeration_names[i])
        if not name:
            name = _member_name_from_literal(value)
        if not name:
            logger.warning("Cannot derive an enum member name from %r in %s", value, schema.source_path or "#")
            name = f"Value{i}"
        name = TypeNameGenerator.make_unique(name, used)
        used.add(name)
        result.append((value, name))
    return result


def _member_name_from_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "True" if value else "False"
    if is_integer_literal(value):
        value = int(value)
    if isinstance(value, (int, float)):
        return "_" + str(value).replace("-", "Minus").replace(".", "_")
    return to_csharp_identifier(str(value))


def _integer_value(value: Any, fallback: int) -> int:
    if is_integer_literal(value):
        return int(value)
    if isinstance(value, str) and value.lstrip("-").isdigit():
        return int(value)
    return fallback


class CSharpGenerator(TypeGeneratorBase):
    """Generates the C# declaration of one class or enum."""

    def __init__(
        self,
        schema: JsonSchema,
        settings: CSharpGeneratorSettings,
        resolver: CSharpTypeResolver,
        enum_value_type: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: The schema of the type
            settings: The generator settings
            resolver: The resolver of the current run, used for member types
            enum_value_type: Explicit backing of an enum ("integer" or "string");
                inferred from the literals when not given
        """
        self.schema = schema.actual_schema
        self.settings = settings
        self.resolver = resolver
        self.enum_value_type = enum_value_type

    def generate_type(self, type_name: str) -> TypeGeneratorResult:
        if self.schema.is_enumeration:
            model = self.create_enum_model(type_name)
            code = self.resolver.template_factory.render(self.settings.template_package, "Enum", model)
            return TypeGeneratorResult(type_name=type_name, code=code)

        model = self.create_class_model(type_name)
        code = self.resolver.template_factory.render(self.settings.template_package, "Class", model)
        return TypeGeneratorResult(type_name=type_name, code=code, base_type_name=model.base_class)

    @property
    def resolved_enum_value_type(self) -> str:
        """The explicit backing, else the declared type, else the one the literals imply."""
        if self.enum_value_type is not None:
            return self.enum_value_type
        if JsonObjectType.INTEGER in self.schema.type:
            return INTEGER_ENUM
        if JsonObjectType.STRING in self.schema.type:
            return STRING_ENUM
        literals = [v for v in self.schema.enumeration if v is not None]
        return INTEGER_ENUM if literals and all(is_integer_literal(v) for v in literals) else STRING_ENUM

    def create_enum_model(self, type_name: str) -> EnumTemplateModel:
        is_string_enum = self.resolved_enum_value_type == STRING_ENUM
        members = []
        for index, (value, name) in enumerate(enum_member_names(self.schema)):
            if is_string_enum:
                json_value = value if isinstance(value, str) else json.dumps(value)
                members.append(EnumMemberModel(name=name, value=index, json_value=json_value))
            else:
                members.append(EnumMemberModel(name=name, value=_integer_value(value, index)))

        return EnumTemplateModel(
            name=type_name,
            description=self.schema.description,
            is_string_enum=is_string_enum,
            members=members,
        )

    def create_class_model(self, type_name: str) -> ClassTemplateModel:
        base_class = None
        base_schema = self.schema.inherited_schema
        if base_schema is not None:
            base_class = self.resolver.resolve(base_schema, False, base_schema.definition_name)

        discriminator = self.schema.discriminator
        properties = []
        used_names = {type_name}
        for prop in self.schema.actual_properties.values():
            if discriminator and prop.name == discriminator:
                # Written and read by JsonInheritanceConverter
                continue
            property_model = self.create_property_model(prop, type_name)
            property_model.name = TypeNameGenerator.make_unique(property_model.name, used_names)
            used_names.add(property_model.name)
            properties.append(property_model)

        derived_types = []
        if discriminator:
            for derived in self._descendants():
                derived_name = self.resolver.resolve(derived, False, derived.definition_name)
                value = self.schema.discriminator_value_for(derived) or derived_name
                derived_types.append(DerivedTypeModel(discriminator_value=value, type_name=derived_name))

        return ClassTemplateModel(
            class_name=type_name,
            description=self.schema.description,
            base_class=base_class,
            discriminator=discriminator,
            derived_types=derived_types,
            properties=properties,
        )

    def _descendants(self) -> list[JsonSchema]:
        result: list[JsonSchema] = []
        stack = list(reversed(self.schema.derived_schemas))
        while stack:
            schema = stack.pop()
            if schema in result or schema is self.schema:
                continue
            result.append(schema)
            stack.extend(reversed(schema.derived_schemas))
        return result

    def create_property_model(self, prop: JsonProperty, class_name: str) -> PropertyModel:
        is_nullable = prop.is_nullable(self.settings.null_handling)
        type_expression = self.resolver.resolve(prop.schema, is_nullable, snake_to_pascal_case(prop.name))

        model = PropertyModel(
            name=self._property_name(prop.name, class_name),
            json_name=prop.name,
            type=type_expression,
            description=prop.schema.description or prop.schema.actual_schema.description,
            is_required=prop.is_required,
            is_nullable=is_nullable,
            required_level=self._required_level(prop.is_required, is_nullable),
        )
        if self.settings.generate_default_values:
            model.default_value = self._default_value(prop, type_expression, is_nullable)
        if self.settings.generate_data_annotations:
            model.attributes = self._data_annotations(prop, type_expression, is_nullable)
        return model

    @staticmethod
    def _property_name(json_name: str, class_name: str) -> str:
        name = snake_to_pascal_case(json_name) or "Property"
        if name[0].isdigit():
            name = "_" + name
        # A member cannot have the name of its enclosing type
        if name == class_name:
            name += "Property"
        return name

    @staticmethod
    def _required_level(is_required: bool, is_nullable: bool) -> str:
        if is_required:
            return "AllowNull" if is_nullable else "Always"
        return "Default" if is_nullable else "DisallowNull"

    def _default_value(self, prop: JsonProperty, type_expression: str, is_nullable: bool) -> str | None:
        schema = prop.schema if prop.schema.has_default else prop.schema.actual_schema
        base_type = type_expression.rstrip("?")

        if schema.has_default:
            return self._format_default_value(schema.default, prop.schema.actual_schema, base_type)

        if not prop.is_required or is_nullable:
            return None

        array_prefix = self.settings.array_type + "<"
        if type_expression.startswith(array_prefix):
            return f"new {self.settings.array_instance_type}<{type_expression[len(array_prefix):]}()"

        dictionary_prefix = self.settings.dictionary_type + "<"
        if type_expression.startswith(dictionary_prefix):
            return f"new {self.settings.dictionary_instance_type}<{type_expression[len(dictionary_prefix):]}()"

        generator = self.resolver.registry.get(type_expression)
        if isinstance(generator, CSharpGenerator) and not generator.schema.is_enumeration:
            return f"new {type_expression}()"
        return None

    def _format_default_value(self, value: Any, actual_schema: JsonSchema, base_type: str) -> str | None:
        if value is None:
            return None

        if actual_schema.is_enumeration:
            for literal, member in enum_member_names(actual_schema):
                if literal == value:
                    return f"{base_type}.{member}"
            return None

        if isinstance(value, bool):
            return "true" if value else "false"

        if isinstance(value, str):
            if base_type == "string":
                return json.dumps(value)
            return None

        if isinstance(value, (int, float)):
            match base_type:
                case "decimal":
                    return f"{value}m"
                case "long":
                    return f"{int(value)}L"
                case "double":
                    return repr(float(value))
                case "int" | "byte":
                    return str(int(value))
        return None

    def _data_annotations(self, prop: JsonProperty, type_expression: str, is_nullable: bool) -> list[str]:
        schema = prop.schema.actual_schema
        attributes = []

        if prop.is_required and not is_nullable:
            if type_expression == "string":
                attributes.append(f"{DATA_ANNOTATIONS}.Required(AllowEmptyStrings = true)")
            else:
                attributes.append(f"{DATA_ANNOTATIONS}.Required")

        if type_expression == "string" and (schema.min_length is not None or schema.max_length is not None):
            maximum = schema.max_length if schema.max_length is not None else "int.MaxValue"
            if schema.min_length:
                attributes.append(f"{DATA_ANNOTATIONS}.StringLength({maximum}, MinimumLength = {schema.min_length})")
            else:
                attributes.append(f"{DATA_ANNOTATIONS}.StringLength({maximum})")

        base_type = type_expression.rstrip("?")
        if base_type in ("int", "long", "byte", "double", "decimal") and (schema.minimum is not None or schema.maximum is not None):
            limit_type = "int" if base_type == "int" else "double"
            minimum = self._format_limit(schema.minimum, f"{limit_type}.MinValue")
            maximum = self._format_limit(schema.maximum, f"{limit_type}.MaxValue")
            attributes.append(f"{DATA_ANNOTATIONS}.Range({minimum}, {maximum})")

        if schema.pattern and type_expression == "string":
            pattern = schema.pattern.replace('"', '""')
            attributes.append(f'{DATA_ANNOTATIONS}.RegularExpression(@"{pattern}")')

        return attributes

    @staticmethod
    def _format_limit(value: float | None, fallback: str) -> str:
        if value is None:
            return fallback
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
