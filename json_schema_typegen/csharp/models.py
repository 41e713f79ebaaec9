"""
Template models for the C# templates.

These are the values handed to the template factory; they hold resolved
type expressions only, no schema nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .. import __version__

GENERATED_CODE_ATTRIBUTE = f'[System.CodeDom.Compiler.GeneratedCode("json_schema_typegen", "{__version__}")]'


@dataclass
class PropertyModel:
    """A property of a generated class."""

    name: str = ""
    json_name: str = ""
    type: str = ""
    description: str | None = None
    is_required: bool = False
    is_nullable: bool = False

    # Newtonsoft.Json.Required member: Always, AllowNull, DisallowNull or Default
    required_level: str = "Default"

    # C# initialiser expression, if any
    default_value: str | None = None

    # Data annotation attributes (without brackets)
    attributes: list[str] = field(default_factory=list)


@dataclass
class DerivedTypeModel:
    """A subtype known to a discriminated base class."""

    discriminator_value: str = ""
    type_name: str = ""


@dataclass
class ClassTemplateModel:
    """Model of the "Class" template."""

    class_name: str = ""
    description: str | None = None
    base_class: str | None = None

    # Discriminator property name, set on base classes of a hierarchy
    discriminator: str | None = None
    derived_types: list[DerivedTypeModel] = field(default_factory=list)

    properties: list[PropertyModel] = field(default_factory=list)
    generated_code_attribute: str = GENERATED_CODE_ATTRIBUTE


@dataclass
class EnumMemberModel:
    name: str = ""
    value: int = 0
    # JSON text of the literal for string backed enums
    json_value: str | None = None


@dataclass
class EnumTemplateModel:
    """Model of the "Enum" template."""

    name: str = ""
    description: str | None = None
    is_string_enum: bool = True
    members: list[EnumMemberModel] = field(default_factory=list)
    generated_code_attribute: str = GENERATED_CODE_ATTRIBUTE


@dataclass
class FileTemplateModel:
    """Model of the "File" template."""

    namespace: str = ""
    generation_comment: str = ""
    usings: list[str] = field(default_factory=list)
    classes: str = ""


@dataclass
class JsonInheritanceConverterTemplateModel:
    generated_code_attribute: str = GENERATED_CODE_ATTRIBUTE
