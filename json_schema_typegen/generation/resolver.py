"""
Base class for type resolvers.

A resolver maps schema nodes to type expressions. Named types are
reserved in the allocator and bound to a generator in the registry
before any of their members are resolved; one resolver instance is the
context of exactly one generation run.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..config import NullHandling
from ..schema.nodes import JsonSchema
from .generator import TypeGeneratorBase, TypeGeneratorResult
from .naming import TypeNameAllocator, TypeNameGenerator
from .registry import GeneratorRegistry
from .templates import TemplateFactory, default_template_factory

logger = logging.getLogger(__name__)


class TypeResolverBase(ABC):
    """Manages the generated types of one run and converts schemas to type expressions."""

    def __init__(
        self,
        template_factory: TemplateFactory | None = None,
        type_name_generator: TypeNameGenerator | None = None,
        reserved_type_names: Iterable[str] = (),
    ):
        """
        Initialize the resolver.

        Args:
            template_factory: Templates used by the generators (bundled ones by default)
            type_name_generator: Naming strategy for new types
            reserved_type_names: Names that must never be allocated
        """
        self.template_factory = template_factory or default_template_factory()
        self.type_names = TypeNameAllocator(type_name_generator, reserved_type_names)
        self.registry = GeneratorRegistry()

    @abstractmethod
    def resolve(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None = None) -> str:
        """
        Resolve and possibly generate the specified schema.

        Args:
            schema: The schema
            is_nullable: Whether the given type usage is nullable
            type_name_hint: Name to use when a new type has to be generated

        Returns:
            The type expression
        """

    @abstractmethod
    def create_type_generator(self, schema: JsonSchema) -> TypeGeneratorBase:
        """Create the generator for a named type."""

    def get_or_generate_type_name(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        """Return the name of the (dereferenced) schema, reserving one if needed."""
        return self.type_names.get_or_generate(schema.actual_schema, type_name_hint)

    def add_or_replace_type_generator(self, type_name: str, generator: TypeGeneratorBase) -> None:
        self.registry.add_or_replace(type_name, generator)

    def add_generator(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        """
        Reserve a name for the schema and bind a generator to it if none is bound yet.

        Args:
            schema: The schema
            type_name_hint: The type name hint

        Returns:
            The type name of the generator
        """
        schema = schema.actual_schema
        type_name = self.get_or_generate_type_name(schema, type_name_hint)
        if type_name not in self.registry:
            self.add_or_replace_type_generator(type_name, self.create_type_generator(schema))
        return type_name

    def resolve_dictionary_value_type(
        self,
        schema: JsonSchema,
        fallback_type: str,
        null_handling: NullHandling,
        allow_nullable: bool = True,
    ) -> str:
        """
        Resolve the value type of a dictionary schema.

        Args:
            schema: The dictionary schema
            fallback_type: Type used when no value schema is declared
            null_handling: How nullability of the value schema is decided
            allow_nullable: Whether the value type may carry a nullable marker

        Returns:
            The value type expression
        """
        value_schema = schema.additional_properties_schema
        if value_schema is None and schema.pattern_properties:
            value_schema = next(iter(schema.pattern_properties.values()))
        if value_schema is None:
            return fallback_type

        is_nullable = allow_nullable and (value_schema.is_nullable(null_handling) or value_schema.actual_schema.is_nullable(null_handling))
        return self.resolve(value_schema, is_nullable, None)

    def generate_types(self) -> list[TypeGeneratorResult]:
        """
        Render every registered generator.

        Rendering resolves members, which can register new types or rebind
        existing names, so this loops until every record has been rendered
        at its current revision.

        Returns:
            The rendered types in registration order
        """
        rendered: dict[str, tuple[int, TypeGeneratorResult]] = {}
        passes = 0
        while True:
            pending = [r for r in self.registry.records() if r.name not in rendered or rendered[r.name][0] != r.revision]
            if not pending:
                break
            passes += 1
            logger.debug("Render pass %d: %d type(s)", passes, len(pending))
            for record in pending:
                revision = record.revision
                result = record.generator.generate_type(record.name)
                rendered[record.name] = (revision, result)

        return [rendered[name][1] for name in self.registry.names()]
