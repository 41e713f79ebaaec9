"""
JSON Schema parser that builds the schema graph.

Every JSON pointer in the document is parsed into exactly one JsonSchema
node. References are resolved after the tree walk, so self-references and
mutually recursive definitions share nodes instead of being copied.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import SchemaReferenceError
from .nodes import JsonObjectType, JsonProperty, JsonSchema

logger = logging.getLogger(__name__)


def _escape_pointer_segment(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def _unescape_pointer_segment(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


class SchemaParser:
    """Parses a JSON Schema document into a JsonSchema graph."""

    # Keywords holding named sub-schemas that become definitions of the root
    DEFINITION_KEYWORDS = ("definitions", "$defs")

    def __init__(self):
        self._document: Any = None
        self._nodes: dict[str, JsonSchema] = {}
        self._pending_refs: list[tuple[JsonSchema, str]] = []
        self._pending_mappings: list[tuple[JsonSchema, str, str]] = []

    def parse(self, document: dict[str, Any] | bool) -> JsonSchema:
        """
        Parse a JSON Schema document.

        Args:
            document: The JSON Schema (a dict, or a boolean schema)

        Returns:
            The root node of the graph

        Raises:
            SchemaReferenceError: If a $ref cannot be resolved
        """
        self._document = document
        self._nodes = {}
        self._pending_refs = []
        self._pending_mappings = []

        root = self._parse_node(document, "#")

        # Resolving a pointer may parse new locations, which may add refs of their own
        while self._pending_refs or self._pending_mappings:
            if self._pending_refs:
                node, ref = self._pending_refs.pop(0)
                node.reference = self._resolve_pointer(ref, node.source_path)
            else:
                node, value, ref = self._pending_mappings.pop(0)
                node.discriminator_mapping[value] = self._resolve_pointer(ref, node.source_path)

        self._link_derived_schemas()

        logger.debug("Parsed %d schema nodes", len(self._nodes))
        return root

    def _parse_node(self, schema: Any, path: str) -> JsonSchema:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema value (dict or boolean)
            path: JSON pointer of the value

        Returns:
            The node registered for the pointer
        """
        if path in self._nodes:
            return self._nodes[path]

        node = JsonSchema(source_path=path)
        self._nodes[path] = node

        if not isinstance(schema, dict):
            # Boolean schemas (true/false) and garbage both accept anything as far as typing goes
            return node

        if "$ref" in schema:
            self._pending_refs.append((node, schema["$ref"]))

        node.type = JsonObjectType.from_json(schema.get("type"))
        node.format = schema.get("format")
        node.title = schema.get("title")
        node.description = schema.get("description")
        if "default" in schema:
            node.default = schema["default"]
            node.has_default = True

        node.min_length = schema.get("minLength")
        node.max_length = schema.get("maxLength")
        node.minimum = schema.get("minimum")
        node.maximum = schema.get("maximum")
        node.pattern = schema.get("pattern")

        node.extension_data = {k: v for k, v in schema.items() if k.startswith("x-")}

        self._parse_enumeration(node, schema)
        self._parse_items(node, schema, path)
        self._parse_object(node, schema, path)

        node.all_of = self._parse_list(schema.get("allOf"), f"{path}/allOf")
        node.any_of = self._parse_list(schema.get("anyOf"), f"{path}/anyOf")
        node.one_of = self._parse_list(schema.get("oneOf"), f"{path}/oneOf")

        self._parse_discriminator(node, schema)

        for keyword in self.DEFINITION_KEYWORDS:
            for name, definition in (schema.get(keyword) or {}).items():
                # Skip comment entries
                if isinstance(definition, str) or name.startswith("_comment"):
                    continue
                child = self._parse_node(definition, f"{path}/{keyword}/{_escape_pointer_segment(name)}")
                if child.definition_name is None:
                    child.definition_name = name
                node.definitions[name] = child

        return node

    def _parse_list(self, schemas: Any, path: str) -> list[JsonSchema]:
        if not isinstance(schemas, list):
            return []
        return [self._parse_node(s, f"{path}/{i}") for i, s in enumerate(schemas)]

    def _parse_enumeration(self, node: JsonSchema, schema: dict[str, Any]) -> None:
        if "enum" not in schema:
            return
        node.enumeration = list(schema["enum"])

        names = schema.get("x-enumNames")
        if isinstance(names, list):
            node.enumeration_names = [str(n) for n in names]
            return

        # x-enum-members maps JSON values to member names
        members = schema.get("x-enum-members")
        if isinstance(members, dict):
            by_value = {str(v): k for k, v in members.items()}
            node.enumeration_names = [by_value.get(str(v), "") for v in node.enumeration]

    def _parse_items(self, node: JsonSchema, schema: dict[str, Any], path: str) -> None:
        items = schema.get("items")
        if isinstance(items, list):
            node.items = self._parse_list(items, f"{path}/items")
        elif items is not None:
            node.item = self._parse_node(items, f"{path}/items")

        prefix_items = schema.get("prefixItems")
        if isinstance(prefix_items, list) and not node.items:
            node.items = self._parse_list(prefix_items, f"{path}/prefixItems")
            # "items" next to "prefixItems" describes the rest of the tuple, not the elements
            if items is not None and not isinstance(items, list):
                node.item = None

    def _parse_object(self, node: JsonSchema, schema: dict[str, Any], path: str) -> None:
        required = schema.get("required")
        required_names = set(required) if isinstance(required, list) else set()

        for name, prop_schema in (schema.get("properties") or {}).items():
            child = self._parse_node(prop_schema, f"{path}/properties/{_escape_pointer_segment(name)}")
            node.properties[name] = JsonProperty(name=name, schema=child, is_required=name in required_names)

        additional = schema.get("additionalProperties")
        if additional is False:
            node.allow_additional_properties = False
        elif isinstance(additional, dict):
            node.additional_properties_schema = self._parse_node(additional, f"{path}/additionalProperties")

        for pattern, pattern_schema in (schema.get("patternProperties") or {}).items():
            node.pattern_properties[pattern] = self._parse_node(pattern_schema, f"{path}/patternProperties/{_escape_pointer_segment(pattern)}")

    def _parse_discriminator(self, node: JsonSchema, schema: dict[str, Any]) -> None:
        discriminator = schema.get("discriminator")
        if isinstance(discriminator, str):
            node.discriminator = discriminator
        elif isinstance(discriminator, dict):
            node.discriminator = discriminator.get("propertyName")
            # Mapping targets are resolved once the tree walk is done
            for value, ref in (discriminator.get("mapping") or {}).items():
                self._pending_mappings.append((node, str(value), ref))

    def _resolve_pointer(self, ref: str, source_path: str) -> JsonSchema:
        """
        Resolve a local JSON pointer to its node, parsing the location on demand.

        Raises:
            SchemaReferenceError: If the reference is external or points nowhere
        """
        if not ref.startswith("#"):
            raise SchemaReferenceError(f"External reference '{ref}' at {source_path} is not supported")

        segments = [_unescape_pointer_segment(s) for s in ref[1:].split("/") if s]
        path = "#" + "".join("/" + _escape_pointer_segment(s) for s in segments)
        if path in self._nodes:
            return self._nodes[path]

        value = self._document
        for segment in segments:
            if isinstance(value, dict) and segment in value:
                value = value[segment]
            elif isinstance(value, list) and segment.isdigit() and int(segment) < len(value):
                value = value[int(segment)]
            else:
                raise SchemaReferenceError(f"Could not resolve '{ref}' at {source_path}")

        node = self._parse_node(value, path)
        # Locations like "#/components/schemas/Pet" are named by their last segment
        if node.definition_name is None and segments:
            node.definition_name = segments[-1]
        return node

    def _link_derived_schemas(self) -> None:
        """Record on every base schema the schemas extending it through allOf."""
        for node in list(self._nodes.values()):
            base = node.inherited_schema
            if base is not None and base is not node and node not in base.derived_schemas:
                base.derived_schemas.append(node)


def parse_schema(document: dict[str, Any] | bool) -> JsonSchema:
    """Parse a JSON Schema document into its root node."""
    return SchemaParser().parse(document)
