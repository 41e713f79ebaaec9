"""
Generation entry point.

Drives one full run: parses the schema if needed, resolves the root and
every definition, drains the registry and renders the output file.
"""

from __future__ import annotations

import logging
from typing import Any

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import CSharpGeneratorSettings
from .csharp.models import FileTemplateModel
from .csharp.resolver import CSharpTypeResolver
from .generation.templates import TemplateFactory, default_template_factory
from .schema.nodes import JsonSchema
from .schema.parser import parse_schema

logger = logging.getLogger(__name__)


class CSharpCodeGenerator:
    """Generates C# types from a JSON Schema."""

    def __init__(
        self,
        schema: JsonSchema | dict[str, Any],
        settings: CSharpGeneratorSettings | None = None,
        template_factory: TemplateFactory | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: The root schema node, or a JSON Schema document to parse
            settings: Generator settings (defaults when omitted)
            template_factory: Templates to render with (bundled ones when omitted)
        """
        self.schema = schema if isinstance(schema, JsonSchema) else parse_schema(schema)
        self.settings = settings or CSharpGeneratorSettings()
        self.template_factory = template_factory or default_template_factory()

    def create_resolver(self) -> CSharpTypeResolver:
        """A fresh resolver, i.e. an isolated naming and registry context."""
        return CSharpTypeResolver(self.settings, self.template_factory)

    def generate_types(self, root_type_name: str | None = None) -> str:
        """
        Generate the declarations of all types, without the file wrapper.

        Args:
            root_type_name: Name of the root type (falls back to the schema title)

        Returns:
            The concatenated type declarations
        """
        resolver = self.create_resolver()
        self._register_types(resolver, root_type_name)
        classes = resolver.generate_classes()
        logger.info("Generated %d type(s)", len(resolver.registry))
        return classes

    def generate_file(self, root_type_name: str | None = None) -> str:
        """
        Generate a complete C# source file.

        Args:
            root_type_name: Name of the root type (falls back to the schema title)

        Returns:
            The file content

        Raises:
            TemplateNotFoundError: If the configured template package lacks a template
        """
        model = FileTemplateModel(
            namespace=self.settings.namespace,
            generation_comment=self._generate_command_comment(),
            usings=list(self.settings.additional_usings),
            classes=self.generate_types(root_type_name),
        )
        return self.template_factory.render(self.settings.template_package, "File", model)

    def _register_types(self, resolver: CSharpTypeResolver, root_type_name: str | None) -> None:
        # The root goes first so that it keeps the requested name
        resolver.resolve(self.schema, False, root_type_name)
        for name, definition in self.schema.definitions.items():
            resolver.resolve(definition, False, name)

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.settings.add_generation_comment:
            return ""

        try:
            from .json_schema_typegen import json_schema_typegen as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "json_schema_typegen"

        return f"// Generated by json_schema_typegen v{__version__} : {command_line}"
