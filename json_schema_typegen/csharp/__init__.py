"""
C# backend: type resolver, type generator and template models.
"""

from __future__ import annotations

from .generator import CSharpGenerator
from .resolver import CSharpTypeResolver

__all__ = [
    "CSharpGenerator",
    "CSharpTypeResolver",
]
