"""
Type name allocation.

Names are handed out once per schema node (by identity) and stay fixed
for the rest of the run, which is what lets cyclic schemas resolve.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable

from ..schema.nodes import JsonSchema
from ..utils import to_csharp_identifier

logger = logging.getLogger(__name__)


class TypeNameGenerator:
    """Derives a unique type name from a hint, the schema title or its definition key."""

    ANONYMOUS_TYPE_NAME = "Anonymous"

    def generate(self, schema: JsonSchema, type_name_hint: str | None, reserved_names: Collection[str]) -> str:
        """
        Generate a type name that is not in reserved_names.

        Args:
            schema: The (dereferenced) schema the name is for
            type_name_hint: Caller supplied hint, may be empty
            reserved_names: Names already in use

        Returns:
            The new type name
        """
        hint = type_name_hint or schema.title or schema.definition_name
        candidate = ""
        if hint:
            # "Namespace.Type" hints only contribute their last segment
            candidate = to_csharp_identifier(hint.split(".")[-1])
        if not candidate:
            logger.warning("No usable name for schema at %s, using '%s'", schema.source_path or "#", self.ANONYMOUS_TYPE_NAME)
            candidate = self.ANONYMOUS_TYPE_NAME
        return self.make_unique(candidate, reserved_names)

    @staticmethod
    def make_unique(name: str, reserved_names: Collection[str]) -> str:
        """Append the first free numeric suffix (2, 3, ...) if the name is taken."""
        if name not in reserved_names:
            return name
        count = 2
        while f"{name}{count}" in reserved_names:
            count += 1
        return f"{name}{count}"


class TypeNameAllocator:
    """Maps schema nodes to the names allocated for them in one generation run."""

    def __init__(self, generator: TypeNameGenerator | None = None, reserved_names: Iterable[str] = ()):
        self.generator = generator or TypeNameGenerator()
        self._names: dict[JsonSchema, str] = {}
        self._reserved: set[str] = set(reserved_names)

    def get_or_generate(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        """Return the name allocated for the node, allocating one on first sight.

        Later hints for an already named node are ignored.
        """
        name = self._names.get(schema)
        if name is None:
            name = self.generator.generate(schema, type_name_hint, self._reserved)
            self._names[schema] = name
            self._reserved.add(name)
            logger.debug("Reserved type name %s for %s", name, schema.source_path or "#")
        return name

    def get(self, schema: JsonSchema) -> str | None:
        return self._names.get(schema)

    def __contains__(self, schema: JsonSchema) -> bool:
        return schema in self._names

    def __len__(self) -> int:
        return len(self._names)

    @property
    def reserved_names(self) -> frozenset[str]:
        return frozenset(self._reserved)
