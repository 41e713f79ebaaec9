"""
Exceptions raised by the type generator.

Schema input problems are degraded to permissive types by the resolver;
only packaging and reference defects surface as exceptions.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for errors that abort a generation run."""

    pass


class TemplateNotFoundError(CodeGenerationError):
    """Raised when no template is registered for a (package, template) pair.

    This indicates a packaging defect, the run cannot proceed.
    """

    def __init__(self, package: str, template: str):
        self.package = package
        self.template = template
        super().__init__(f"Could not load template '{template}' for package '{package}'.")


class SchemaReferenceError(CodeGenerationError):
    """Raised when a $ref cannot be followed.

    This can happen when:
    - The JSON pointer does not exist in the document
    - The reference is external (not supported)
    - A chain of references loops back onto itself
    """

    pass


class OutputValidationError(CodeGenerationError):
    """Raised when generated code fails the structural checks before writing."""

    pass
