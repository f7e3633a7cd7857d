"""Component scaffolding engine.

Normalises component names, selects a template per file role and writes the
resulting files concurrently.

Quick usage::

    from shared_component.config import GenerationOptions
    from shared_component.scaffolder import ComponentGenerator

    generator = ComponentGenerator(GenerationOptions(), cwd="src/components")
    result = await generator.generate(["Button", "forms/Input"])
"""

from shared_component.scaffolder.generator import (
    ComponentGenerator,
    ComponentResult,
    ScaffoldResult,
    gather_settled,
    validate_arguments,
)
from shared_component.scaffolder.naming import ComponentRequest, normalize
from shared_component.scaffolder.selector import FileRole, FileSpec, select_template
from shared_component.scaffolder.templates import TemplateRenderer

__all__ = [
    "ComponentGenerator",
    "ComponentRequest",
    "ComponentResult",
    "FileRole",
    "FileSpec",
    "ScaffoldResult",
    "TemplateRenderer",
    "gather_settled",
    "normalize",
    "select_template",
    "validate_arguments",
]
