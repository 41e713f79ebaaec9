"""JSON Schema to C# type generator

Resolves JSON Schema nodes to C# type expressions, allocates stable
unique type names and renders one class or enum per named type through
jinja2 templates.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .codegen import CSharpCodeGenerator  # noqa: E402
from .config import CSharpGeneratorSettings, NullHandling, OutputConfig, OutputMode  # noqa: E402
from .csharp import CSharpGenerator, CSharpTypeResolver  # noqa: E402
from .exceptions import (  # noqa: E402
    CodeGenerationError,
    OutputValidationError,
    SchemaReferenceError,
    TemplateNotFoundError,
)
from .generation import TemplateFactory  # noqa: E402
from .schema import parse_schema  # noqa: E402
from .writer import AtomicWriter  # noqa: E402

__all__ = [
    "CSharpCodeGenerator",
    "CSharpGeneratorSettings",
    "NullHandling",
    "OutputConfig",
    "OutputMode",
    "CSharpGenerator",
    "CSharpTypeResolver",
    "TemplateFactory",
    "parse_schema",
    "AtomicWriter",
    "CodeGenerationError",
    "OutputValidationError",
    "SchemaReferenceError",
    "TemplateNotFoundError",
]
