"""Shared pytest fixtures for the create-shared-component test suite.

Provides reusable fixtures for:
- A temporary working directory components are generated into
- Default and customised ``GenerationOptions``
- A pass-through formatter so unit tests see raw template output
- A helper that lists every file under a directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from shared_component.config import GenerationOptions
from shared_component.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Working directory component paths are resolved against."""
    directory = tmp_path / "app" / "src"
    directory.mkdir(parents=True)
    yield directory


def list_files(root: Path) -> list[str]:
    """Every file under *root* as sorted POSIX paths relative to it."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


@pytest.fixture
def tree():
    """Expose :func:`list_files` to tests."""
    return list_files


# ---------------------------------------------------------------------------
# Options & collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def default_options() -> GenerationOptions:
    return GenerationOptions()


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def passthrough(source: str) -> str:
    return source


@pytest.fixture
def raw_formatter():
    """Formatter that leaves template output untouched."""
    return passthrough
