"""
C# type resolver.

Converts schema nodes to C# type expressions and registers a
CSharpGenerator for every node that needs a named type.
"""

from __future__ import annotations

import logging

from ..config import CSharpGeneratorSettings
from ..generation.naming import TypeNameGenerator
from ..generation.resolver import TypeResolverBase
from ..generation.templates import TemplateFactory
from ..schema import formats
from ..schema.nodes import JsonObjectType, JsonSchema
from .generator import INTEGER_ENUM, CSharpGenerator, is_integer_literal
from .models import JsonInheritanceConverterTemplateModel

logger = logging.getLogger(__name__)

ANY_TYPE = "object"
BYTE_ARRAY_TYPE = "byte[]"

# Support types emitted by the JsonInheritanceConverter template
INHERITANCE_CONVERTER_TYPE_NAME = "JsonInheritanceConverter"
INHERITANCE_ATTRIBUTE_TYPE_NAME = "JsonInheritanceAttribute"


class CSharpTypeResolver(TypeResolverBase):
    """Manages the generated types and converts JSON types to C# types."""

    def __init__(
        self,
        settings: CSharpGeneratorSettings,
        template_factory: TemplateFactory | None = None,
        type_name_generator: TypeNameGenerator | None = None,
    ):
        super().__init__(
            template_factory=template_factory,
            type_name_generator=type_name_generator,
            reserved_type_names=(INHERITANCE_CONVERTER_TYPE_NAME, INHERITANCE_ATTRIBUTE_TYPE_NAME),
        )
        self.settings = settings

    def resolve(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None = None) -> str:
        schema = schema.actual_schema

        if schema.is_any_type:
            return ANY_TYPE

        type = schema.type
        if type == JsonObjectType.NONE and schema.is_enumeration:
            literals = [v for v in schema.enumeration if v is not None]
            type = JsonObjectType.INTEGER if literals and all(is_integer_literal(v) for v in literals) else JsonObjectType.STRING

        if JsonObjectType.ARRAY in type:
            return self._resolve_array(schema)

        if JsonObjectType.NUMBER in type:
            return self._resolve_number(schema, is_nullable)

        if JsonObjectType.INTEGER in type:
            return self._resolve_integer(schema, is_nullable, type_name_hint)

        if JsonObjectType.BOOLEAN in type:
            return "bool?" if is_nullable else "bool"

        if JsonObjectType.STRING in type:
            return self._resolve_string(schema, is_nullable, type_name_hint)

        if JsonObjectType.FILE in type:
            return BYTE_ARRAY_TYPE

        if schema.is_dictionary:
            value_type = self.resolve_dictionary_value_type(
                schema,
                ANY_TYPE,
                self.settings.null_handling,
                allow_nullable=self.settings.dictionary_value_nullable,
            )
            return f"{self.settings.dictionary_type}<string, {value_type}>"

        return self.add_generator(schema, type_name_hint)

    def generate_classes(self) -> str:
        """
        Generate all registered types.

        Returns:
            The code of every type, followed by the inheritance support
            types when any of them uses the converter
        """
        classes = "\n\n".join(result.code.strip("\n") for result in self.generate_types())
        if INHERITANCE_CONVERTER_TYPE_NAME in classes:
            converter = self.template_factory.render(
                self.settings.template_package,
                INHERITANCE_CONVERTER_TYPE_NAME,
                JsonInheritanceConverterTemplateModel(),
            )
            classes += "\n\n" + converter.strip("\n")
        return classes

    def add_generator(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        schema = schema.actual_schema
        if schema.is_enumeration and schema.type == JsonObjectType.INTEGER:
            # A generator knowing the explicit integer backing beats one that had to guess it
            type_name = self.get_or_generate_type_name(schema, type_name_hint)
            current = self.registry.get(type_name)
            if not isinstance(current, CSharpGenerator) or current.enum_value_type != INTEGER_ENUM:
                if current is not None:
                    logger.debug("Upgrading generator of %s to an integer enum", type_name)
                self.add_or_replace_type_generator(type_name, self.create_type_generator(schema, enum_value_type=INTEGER_ENUM))

        return super().add_generator(schema, type_name_hint)

    def create_type_generator(self, schema: JsonSchema, enum_value_type: str | None = None) -> CSharpGenerator:
        return CSharpGenerator(schema, self.settings, self, enum_value_type=enum_value_type)

    def _resolve_string(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None) -> str:
        match schema.format:
            case formats.DATE:
                return self._configured_scalar(self.settings.date_type, is_nullable)
            case formats.DATE_TIME:
                return self._configured_scalar(self.settings.date_time_type, is_nullable)
            case formats.TIME:
                return self._configured_scalar(self.settings.time_type, is_nullable)
            case formats.DURATION | formats.TIME_SPAN:
                return self._configured_scalar(self.settings.time_span_type, is_nullable)
            case formats.GUID | formats.UUID:
                return "System.Guid?" if is_nullable else "System.Guid"
            case formats.BASE64 | formats.BYTE:
                return BYTE_ARRAY_TYPE

        if schema.is_enumeration:
            return self.add_generator(schema, type_name_hint) + ("?" if is_nullable else "")

        return "string"

    @staticmethod
    def _configured_scalar(type_name: str, is_nullable: bool) -> str:
        # A type configured as "string" is a reference type already
        if is_nullable and (type_name or "").lower() != "string":
            return type_name + "?"
        return type_name

    def _resolve_integer(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None) -> str:
        if schema.is_enumeration:
            return self.add_generator(schema, type_name_hint)

        if schema.format == formats.BYTE:
            return "byte?" if is_nullable else "byte"

        if schema.format in (formats.LONG, formats.LONG_LEGACY):
            return "long?" if is_nullable else "long"

        return "int?" if is_nullable else "int"

    @staticmethod
    def _resolve_number(schema: JsonSchema, is_nullable: bool) -> str:
        if schema.format == formats.DECIMAL:
            return "decimal?" if is_nullable else "decimal"

        return "double?" if is_nullable else "double"

    def _resolve_array(self, schema: JsonSchema) -> str:
        if schema.item is not None:
            return f"{self.settings.array_type}<{self.resolve(schema.item, False, None)}>"

        if schema.items:
            item_types = ", ".join(self.resolve(item, False, None) for item in schema.items)
            return f"System.Tuple<{item_types}>"

        return f"{self.settings.array_type}<{ANY_TYPE}>"
