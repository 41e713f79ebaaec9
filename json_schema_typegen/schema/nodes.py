"""
Schema graph node definitions.

A parsed JSON Schema is a graph of JsonSchema nodes. Every JSON pointer
maps to exactly one node, so a $ref to an already parsed location shares
the node, and node identity is what the generator keys its names on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Any

from ..config import NullHandling
from ..exceptions import SchemaReferenceError


class JsonObjectType(Flag):
    """Structural type of a schema node. A node may carry several flags."""

    NONE = 0
    ARRAY = auto()
    BOOLEAN = auto()
    INTEGER = auto()
    NULL = auto()
    NUMBER = auto()
    OBJECT = auto()
    STRING = auto()
    FILE = auto()

    @classmethod
    def from_json(cls, value: str | list[str] | None) -> JsonObjectType:
        """Build the flag set from a "type" keyword value (string or list of strings)."""
        if value is None:
            return cls.NONE
        if isinstance(value, str):
            value = [value]
        result = cls.NONE
        for name in value:
            member = cls.__members__.get(str(name).upper())
            if member is not None:
                result |= member
        return result


@dataclass(eq=False, repr=False)
class JsonProperty:
    """A named property of an object schema."""

    name: str
    schema: JsonSchema
    is_required: bool = False

    def is_nullable(self, null_handling: NullHandling) -> bool:
        """Whether a value of this property may be null."""
        if null_handling == NullHandling.SWAGGER:
            x_nullable = self.schema.extension_data.get("x-nullable")
            if x_nullable is not None:
                return bool(x_nullable)
            return not self.is_required
        return self.schema.is_nullable(null_handling)

    def __repr__(self) -> str:
        return f"JsonProperty(name={self.name!r}, is_required={self.is_required})"


@dataclass(eq=False, repr=False)
class JsonSchema:
    """A single schema node.

    Nodes compare and hash by identity. Links to other nodes form a
    possibly cyclic graph, so the default dataclass repr is replaced.
    """

    type: JsonObjectType = JsonObjectType.NONE
    format: str | None = None
    title: str | None = None
    description: str | None = None

    default: Any = None
    has_default: bool = False

    # Array of T
    item: JsonSchema | None = None
    # Fixed tuple
    items: list[JsonSchema] = field(default_factory=list)

    enumeration: list[Any] = field(default_factory=list)
    enumeration_names: list[str] = field(default_factory=list)

    properties: dict[str, JsonProperty] = field(default_factory=dict)
    additional_properties_schema: JsonSchema | None = None
    allow_additional_properties: bool = True
    pattern_properties: dict[str, JsonSchema] = field(default_factory=dict)

    all_of: list[JsonSchema] = field(default_factory=list)
    any_of: list[JsonSchema] = field(default_factory=list)
    one_of: list[JsonSchema] = field(default_factory=list)

    # Target of "$ref", set once the parser has resolved the pointer
    reference: JsonSchema | None = None

    discriminator: str | None = None
    discriminator_mapping: dict[str, JsonSchema] = field(default_factory=dict)

    # Validation constraints
    min_length: int | None = None
    max_length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    pattern: str | None = None

    definitions: dict[str, JsonSchema] = field(default_factory=dict)

    # Key under "definitions"/"$defs" this node was declared with
    definition_name: str | None = None

    # Schemas whose allOf references this node as base
    derived_schemas: list[JsonSchema] = field(default_factory=list)

    # Raw x-* extension keywords
    extension_data: dict[str, Any] = field(default_factory=dict)

    # JSON pointer of the node in its document (for messages)
    source_path: str = ""

    def __repr__(self) -> str:
        return f"JsonSchema(source_path={self.source_path!r}, type={self.type!r})"

    @property
    def is_enumeration(self) -> bool:
        return len(self.enumeration) > 0

    @property
    def actual_schema(self) -> JsonSchema:
        """The concrete node behind any $ref / wrapper indirection.

        Raises:
            SchemaReferenceError: If the chain of references loops
        """
        schema = self
        visited: set[int] = set()
        while True:
            target = schema._indirection_target()
            if target is None:
                return schema
            if id(schema) in visited:
                raise SchemaReferenceError(f"Cyclic $ref chain at {schema.source_path or '#'}")
            visited.add(id(schema))
            schema = target

    def _indirection_target(self) -> JsonSchema | None:
        if self.reference is not None:
            return self.reference

        has_own_shape = self.type != JsonObjectType.NONE or self.properties or self.is_enumeration or self.item is not None or self.items
        if has_own_shape:
            return None

        # {"allOf": [{"$ref": ...}]} is used to attach a description to a reference
        if len(self.all_of) == 1 and not self.any_of and not self.one_of:
            return self.all_of[0]

        variants = self.non_null_variants
        if len(variants) == 1 and not self.all_of:
            return variants[0]
        return None

    @property
    def non_null_variants(self) -> list[JsonSchema]:
        """oneOf/anyOf variants that are not the null type."""
        return [s for s in self.one_of + self.any_of if not s.is_null_type]

    @property
    def is_null_type(self) -> bool:
        return self.type == JsonObjectType.NULL

    @property
    def is_any_type(self) -> bool:
        """Whether the node accepts any JSON value."""
        structural = self.type & ~JsonObjectType.NULL
        if structural not in (JsonObjectType.NONE, JsonObjectType.OBJECT):
            return False
        if self.one_of or self.any_of:
            # Unions that cannot be narrowed to one variant accept "anything" from our point of view
            return len(self.non_null_variants) > 1
        return (
            not self.all_of
            and self.reference is None
            and not self.properties
            and not self.pattern_properties
            and not self.is_enumeration
            and self.item is None
            and not self.items
            and self.allow_additional_properties
            and self.additional_properties_schema is None
        )

    @property
    def is_dictionary(self) -> bool:
        """Whether the node is a string-keyed map rather than a class."""
        structural = self.type & ~JsonObjectType.NULL
        if structural not in (JsonObjectType.NONE, JsonObjectType.OBJECT):
            return False
        if self.properties or self.all_of or self.is_enumeration:
            return False
        if self.additional_properties_schema is not None or self.pattern_properties:
            return True
        return structural == JsonObjectType.OBJECT and self.allow_additional_properties

    def is_nullable(self, null_handling: NullHandling) -> bool:
        """Whether a value described by this node may be null."""
        if null_handling == NullHandling.SWAGGER:
            return bool(self.extension_data.get("x-nullable", False))
        if JsonObjectType.NULL in self.type:
            return True
        if any(s.is_null_type for s in self.one_of + self.any_of):
            return True
        return self.is_enumeration and None in self.enumeration

    @property
    def inherited_schema(self) -> JsonSchema | None:
        """The base class schema: the allOf member that is a reference."""
        for schema in self.all_of:
            if schema.reference is not None:
                return schema.actual_schema
        return None

    @property
    def actual_properties(self) -> dict[str, JsonProperty]:
        """Own properties plus the ones contributed by non-base allOf members."""
        result: dict[str, JsonProperty] = dict(self.properties)
        for schema in self.all_of:
            if schema.reference is not None:
                continue
            for name, prop in schema.actual_schema.actual_properties.items():
                result.setdefault(name, prop)
        return result

    def discriminator_value_for(self, derived: JsonSchema) -> str | None:
        """Look up the discriminator value mapped to a derived schema."""
        for value, schema in self.discriminator_mapping.items():
            if schema.actual_schema is derived:
                return value
        return None
