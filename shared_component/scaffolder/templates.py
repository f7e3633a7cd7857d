"""Jinja2 template rendering for component scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``shared_component/scaffolder/templates/`` directory and turns them into
unformatted source text.  Rendering is pure: it never touches the output
tree, which is the materializer's job.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..config import GenerationOptions, NamingCase, PropsDeclaration

ContentGenerator = Callable[[str, GenerationOptions], str]


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the component templates.

    Templates are addressed by their path relative to the template directory
    without the ``.j2`` suffix (``"web/functional_with_props"``).  Every
    template receives the component name plus the flags derived from
    ``GenerationOptions``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["kebab_case"] = _kebab_case_filter
        self.env.filters["camel_case"] = _camel_case_filter

    # -- Rendering ---------------------------------------------------------

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render *template_name* (without ``.j2``) with *context*."""
        template = self.env.get_template(f"{template_name}.j2")
        return template.render(**context)

    def render_component(
        self,
        template_name: str,
        name: str,
        options: GenerationOptions,
        **extra: Any,
    ) -> str:
        """Render a per-component template for the canonical *name*."""
        return self.render(template_name, {**build_context(name, options), **extra})

    def generator(self, template_name: str, **extra: Any) -> ContentGenerator:
        """Bind *template_name* into a ``(name, options) -> str`` generator.

        *extra* is merged into the context on every call, which lets one
        template serve several file kinds (e.g. the style sheet syntax).
        """

        def generate(name: str, options: GenerationOptions) -> str:
            return self.render_component(template_name, name, options, **extra)

        generate.template_name = template_name  # type: ignore[attr-defined]
        return generate

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return the sorted names of every template, without ``.j2``."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir).as_posix())[: -len(".j2")]
            for p in self.template_dir.rglob("*.j2")
        )


def build_context(name: str, options: GenerationOptions) -> dict[str, Any]:
    """Template variables shared by every per-component template.

    ``name`` is the canonical name used in module paths; ``identifier`` is
    the JSX-safe binding, which must start with an uppercase letter
    whatever the naming policy is.
    """
    return {
        "name": name,
        "identifier": to_identifier(name),
        "typed": options.typed,
        "with_props": options.props_declaration is PropsDeclaration.DECLARED,
        "uppercase": options.naming_case is NamingCase.UPPERCASE_FIRST,
        "ext": options.source_extension,
    }


def to_identifier(name: str) -> str:
    """``button`` -> ``Button``; JSX treats lowercase tags as DOM elements."""
    if name:
        return name[0].upper() + name[1:]
    return ""


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _kebab_case_filter(value: str) -> str:
    """Convert ``SomeThing`` to ``some-thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1-\2", value)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", s1).lower()


def _camel_case_filter(value: str) -> str:
    """Convert ``SomeThing`` to ``someThing``."""
    if value:
        return value[0].lower() + value[1:]
    return ""
