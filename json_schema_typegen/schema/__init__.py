"""
Schema graph.

Parses JSON Schema documents into a graph of JsonSchema nodes with
resolved references and structural type flags.
"""

from __future__ import annotations

from . import formats
from .nodes import JsonObjectType, JsonProperty, JsonSchema
from .parser import SchemaParser, parse_schema

__all__ = [
    "JsonObjectType",
    "JsonProperty",
    "JsonSchema",
    "SchemaParser",
    "formats",
    "parse_schema",
]
