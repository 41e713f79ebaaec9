"""
Configuration for the C# type generator.

Maps schema primitives onto target-language type names and controls
the optional parts of the generated output.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum


class NullHandling(str, Enum):
    """How nullability of a property or value schema is decided.

    JSON_SCHEMA: nullable when "null" is one of the types (or a null variant in oneOf/anyOf)
    SWAGGER: nullable when "x-nullable" is true, or when the property is not required
    """

    JSON_SCHEMA = "json_schema"
    SWAGGER = "swagger"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class CSharpGeneratorSettings:
    """Configuration options for C# code generation."""

    # Namespace wrapping all generated types
    namespace: str = "MyNamespace"

    # Sequence container (declared type and the type used to initialise required properties)
    array_type: str = "System.Collections.Generic.ICollection"
    array_instance_type: str = "System.Collections.ObjectModel.Collection"

    # String-keyed map container
    dictionary_type: str = "System.Collections.Generic.IDictionary"
    dictionary_instance_type: str = "System.Collections.Generic.Dictionary"

    # Scalar types for string formats
    date_type: str = "System.DateTimeOffset"
    date_time_type: str = "System.DateTimeOffset"
    time_type: str = "System.TimeSpan"
    time_span_type: str = "System.TimeSpan"

    null_handling: NullHandling = NullHandling.JSON_SCHEMA

    # When false, dictionary values are never nullable-marked
    dictionary_value_nullable: bool = True

    # Emit System.ComponentModel.DataAnnotations attributes
    generate_data_annotations: bool = True

    # Emit property initialisers for schema defaults and required collections
    generate_default_values: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Template set used for rendering
    template_package: str = "CSharp"

    # Extra using statements for the generated file
    additional_usings: list[str] = field(default_factory=list)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CSharpGeneratorSettings:
        """Create settings from a dictionary, ignoring unknown keys.

        Raises:
            ValueError: If null_handling or output.mode is not a known value
        """
        settings = CSharpGeneratorSettings()
        for k, v in d.items():
            if k == "null_handling":
                settings.null_handling = NullHandling(v)
            elif k == "output" and isinstance(v, dict):
                settings.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.ERROR_IF_EXISTS)),
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(settings, k):
                setattr(settings, k, v)
        return settings

    def to_dict(self) -> dict:
        """Convert settings to a dictionary."""
        d = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, OutputConfig):
                value = {"mode": value.mode.value, "validate_before_write": value.validate_before_write}
            elif isinstance(value, list):
                value = list(value)
            d[f.name] = value
        return d
