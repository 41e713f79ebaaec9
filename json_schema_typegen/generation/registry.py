"""
Generator registry.

Owns the mapping from allocated type names to the generators producing
them. Records live in an arena indexed by name, so replacing a generator
keeps both the name and its position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .generator import TypeGeneratorBase

logger = logging.getLogger(__name__)


@dataclass
class GeneratorRecord:
    """A registry slot: the name, its current generator and how often it was rebound."""

    name: str
    generator: TypeGeneratorBase
    revision: int = 0


class GeneratorRegistry:
    """Insertion ordered name -> generator table supporting in-place replacement."""

    def __init__(self):
        self._records: list[GeneratorRecord] = []
        self._index: dict[str, int] = {}

    def add_or_replace(self, name: str, generator: TypeGeneratorBase) -> GeneratorRecord:
        """
        Bind a generator to a name.

        A new name is appended at the end. An existing name keeps its slot,
        its generator is swapped and its revision bumped.

        Args:
            name: Allocated type name
            generator: The generator responsible for the name

        Returns:
            The record holding the name
        """
        index = self._index.get(name)
        if index is None:
            record = GeneratorRecord(name=name, generator=generator)
            self._index[name] = len(self._records)
            self._records.append(record)
            logger.debug("Registered generator for %s", name)
        else:
            record = self._records[index]
            record.generator = generator
            record.revision += 1
            logger.debug("Replaced generator for %s (revision %d)", name, record.revision)
        return record

    def get(self, name: str) -> TypeGeneratorBase | None:
        record = self.record(name)
        return record.generator if record is not None else None

    def record(self, name: str) -> GeneratorRecord | None:
        index = self._index.get(name)
        return self._records[index] if index is not None else None

    def records(self) -> list[GeneratorRecord]:
        """Snapshot of all records in insertion order."""
        return list(self._records)

    def names(self) -> list[str]:
        return [record.name for record in self._records]

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[tuple[str, TypeGeneratorBase]]:
        for record in self.records():
            yield record.name, record.generator
