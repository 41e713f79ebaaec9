"""
Type resolution engine.

Language independent parts of the generator: name allocation, the
generator registry, the resolver base class and template lookup.
"""

from __future__ import annotations

from .generator import TypeGeneratorBase, TypeGeneratorResult
from .naming import TypeNameAllocator, TypeNameGenerator
from .registry import GeneratorRecord, GeneratorRegistry
from .resolver import TypeResolverBase
from .templates import TEMPLATES_DIR, JinjaTemplate, TemplateFactory, default_template_factory

__all__ = [
    "GeneratorRecord",
    "GeneratorRegistry",
    "JinjaTemplate",
    "TEMPLATES_DIR",
    "TemplateFactory",
    "TypeGeneratorBase",
    "TypeGeneratorResult",
    "TypeNameAllocator",
    "TypeNameGenerator",
    "TypeResolverBase",
    "default_template_factory",
]
