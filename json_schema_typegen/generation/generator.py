"""
Base class for per-type generators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class TypeGeneratorResult:
    """Rendered source of one named type."""

    type_name: str = ""
    code: str = ""
    # Name of the base type, if the type extends another generated type
    base_type_name: str | None = None


class TypeGeneratorBase(ABC):
    """Produces the declaration of one named type.

    Generators are created when their name is reserved; member types are
    resolved only when generate_type is called.
    """

    @abstractmethod
    def generate_type(self, type_name: str) -> TypeGeneratorResult:
        """
        Render the declaration of the type.

        Args:
            type_name: The name allocated for the type

        Returns:
            The rendered code
        """
