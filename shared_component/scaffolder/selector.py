"""Template selection and per-component file planning.

All flag-dependent branching lives in ``BODY_TEMPLATES``: a table keyed by
``(platform, state style, props declaration)``.  The rest of this module only
composes file names and pairs each one with its content generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..config import GenerationOptions, Platform, PropsDeclaration, StateStyle, StyleSheet
from .naming import ComponentRequest, apply_case
from .templates import ContentGenerator, TemplateRenderer


class FileRole(str, Enum):
    INDEX = "index"
    BODY = "body"
    TEST = "test"
    STYLE = "style"


INDEX_TEMPLATE = "index"
TEST_TEMPLATE = "test"
STYLE_TEMPLATE = "style"

# Native has no functional variant: both state styles map to the class shape.
BODY_TEMPLATES: dict[tuple[Platform, StateStyle, PropsDeclaration], str] = {
    (Platform.WEB, StateStyle.STATEFUL, PropsDeclaration.NONE): "web/component",
    (Platform.WEB, StateStyle.STATEFUL, PropsDeclaration.DECLARED): "web/component_with_props",
    (Platform.WEB, StateStyle.FUNCTIONAL, PropsDeclaration.NONE): "web/functional",
    (Platform.WEB, StateStyle.FUNCTIONAL, PropsDeclaration.DECLARED): "web/functional_with_props",
    (Platform.NATIVE, StateStyle.STATEFUL, PropsDeclaration.NONE): "native/component",
    (Platform.NATIVE, StateStyle.STATEFUL, PropsDeclaration.DECLARED): "native/component_with_props",
    (Platform.NATIVE, StateStyle.FUNCTIONAL, PropsDeclaration.NONE): "native/component",
    (Platform.NATIVE, StateStyle.FUNCTIONAL, PropsDeclaration.DECLARED): "native/component_with_props",
}


def select_template(
    role: FileRole,
    options: GenerationOptions,
    platform: Platform | None = None,
) -> str:
    """Return the template name for a file role.

    Raises:
        ValueError: If a body file is requested without a platform.
    """
    if role is FileRole.INDEX:
        return INDEX_TEMPLATE
    if role is FileRole.TEST:
        return TEST_TEMPLATE
    if role is FileRole.STYLE:
        return STYLE_TEMPLATE
    if platform is None:
        raise ValueError("body files need a platform")
    return BODY_TEMPLATES[(platform, options.state_style, options.props_declaration)]


@dataclass(frozen=True)
class FileSpec:
    """One file to write, relative to its batch directory."""

    role: FileRole
    relative_path: str
    generator: ContentGenerator
    platform: Platform | None = None

    def render(self, name: str, options: GenerationOptions) -> str:
        return self.generator(name, options)


@dataclass(frozen=True)
class Batch:
    """FileSpecs written together under one directory."""

    kind: str
    directory: Path
    specs: tuple[FileSpec, ...]

    @property
    def paths(self) -> list[Path]:
        return [self.directory / spec.relative_path for spec in self.specs]


def body_file_name(name: str, platform: Platform, options: GenerationOptions) -> str:
    return f"{apply_case(name, options)}.{platform.value}.{options.source_extension}"


def unit_test_file_name(name: str, platform: Platform, options: GenerationOptions) -> str:
    return f"{apply_case(name, options)}.test.{platform.value}.{options.source_extension}"


def style_file_name(name: str, sheet: StyleSheet, options: GenerationOptions) -> str:
    return f"{apply_case(name, options)}.{sheet.value}"


def index_file_name(options: GenerationOptions) -> str:
    return f"index.{options.index_extension}"


def build_batches(
    request: ComponentRequest,
    options: GenerationOptions,
    renderer: TemplateRenderer,
) -> tuple[Batch, Batch]:
    """Plan the source batch and the test batch for one component.

    Platforms missing from ``options.platforms`` are left out of both
    batches; the test batch is empty when tests are disabled.
    """
    name = request.base_name

    source: list[FileSpec] = [
        FileSpec(
            role=FileRole.INDEX,
            relative_path=index_file_name(options),
            generator=renderer.generator(select_template(FileRole.INDEX, options)),
        )
    ]
    for platform in options.platforms:
        source.append(
            FileSpec(
                role=FileRole.BODY,
                relative_path=body_file_name(name, platform, options),
                generator=renderer.generator(select_template(FileRole.BODY, options, platform)),
                platform=platform,
            )
        )
    for sheet in options.style_sheets:
        source.append(
            FileSpec(
                role=FileRole.STYLE,
                relative_path=style_file_name(name, sheet, options),
                generator=renderer.generator(
                    select_template(FileRole.STYLE, options), syntax=sheet.value
                ),
            )
        )

    tests: list[FileSpec] = []
    if options.emit_tests:
        for platform in options.platforms:
            tests.append(
                FileSpec(
                    role=FileRole.TEST,
                    relative_path=unit_test_file_name(name, platform, options),
                    generator=renderer.generator(select_template(FileRole.TEST, options, platform)),
                    platform=platform,
                )
            )

    return (
        Batch(kind="source", directory=request.directory, specs=tuple(source)),
        Batch(kind="test", directory=request.test_directory, specs=tuple(tests)),
    )
