"""
Template lookup and rendering.

Templates are registered under an explicit (package, template) key when
the factory is built. A lookup miss is fatal: there is no fallback
template.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Any

import jinja2

from ..exceptions import TemplateNotFoundError
from ..utils import to_csharp_string_literal, to_single_line

TEMPLATES_DIR = Path(__file__).parent.parent.resolve() / "templates"


class JinjaTemplate:
    """A compiled jinja2 template bound to its model."""

    def __init__(self, template: jinja2.Template, model: Any):
        self.template = template
        self.model = model

    def render(self) -> str:
        return self.template.render(self._context())

    def _context(self) -> dict[str, Any]:
        if isinstance(self.model, dict):
            return self.model
        if dataclasses.is_dataclass(self.model):
            return dataclasses.asdict(self.model)
        return vars(self.model)


TemplateFactoryFunction = Callable[[Any], JinjaTemplate]


class TemplateFactory:
    """Registry of template factories keyed by (package, template name)."""

    def __init__(self):
        self._factories: dict[tuple[str, str], TemplateFactoryFunction] = {}

    def register(self, package: str, template: str, factory: TemplateFactoryFunction) -> None:
        """Register (or override) the factory for a template."""
        self._factories[(package, template)] = factory

    def has_template(self, package: str, template: str) -> bool:
        return (package, template) in self._factories

    def create_template(self, package: str, template: str, model: Any) -> JinjaTemplate:
        """
        Create a template for the given package, template name and model.

        Args:
            package: The package name (i.e. language template set)
            template: The template name
            model: The template model

        Returns:
            The template, ready to render

        Raises:
            TemplateNotFoundError: If no template is registered for the pair
        """
        factory = self._factories.get((package, template))
        if factory is None:
            raise TemplateNotFoundError(package, template)
        return factory(model)

    def render(self, package: str, template: str, model: Any) -> str:
        return self.create_template(package, template, model).render()

    @classmethod
    def from_directory(cls, directory: Path) -> TemplateFactory:
        """
        Build a factory from a template tree.

        Every "<directory>/<package>/<Template>.<ext>.jinja2" file is
        registered under (package, Template).
        """
        jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(directory)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        jinja_env.filters["csharp_string"] = to_csharp_string_literal
        jinja_env.filters["single_line"] = to_single_line

        factory = cls()
        for package_dir in sorted(p for p in directory.iterdir() if p.is_dir()):
            for template_file in sorted(package_dir.glob("*.jinja2")):
                template_name = template_file.name.split(".")[0]
                jinja_template = jinja_env.get_template(f"{package_dir.name}/{template_file.name}")
                factory.register(package_dir.name, template_name, partial(JinjaTemplate, jinja_template))
        return factory


def default_template_factory() -> TemplateFactory:
    """Factory holding the bundled templates."""
    return TemplateFactory.from_directory(TEMPLATES_DIR)
