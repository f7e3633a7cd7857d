"""Directory creation, overwrite guarding and formatted file writes.

Every blocking file-system call is handed to ``asyncio.to_thread`` so each
directory creation and each write is a suspension point on the event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

import cssbeautifier
import jsbeautifier

from ..errors import DirectoryExistsError, WriteError

Formatter = Callable[[str], str]

STYLE_SUFFIXES = frozenset({".css", ".less", ".scss"})
# jsbeautifier has no TypeScript grammar: it splits `?:` and spaces out generics.
TYPESCRIPT_SUFFIXES = frozenset({".ts", ".tsx"})


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_javascript(source: str) -> str:
    """Pretty-print JavaScript and JSX."""
    opts = jsbeautifier.default_options()
    opts.indent_size = 2
    opts.brace_style = "collapse,preserve-inline"
    opts.e4x = True
    opts.end_with_newline = True
    opts.preserve_newlines = True
    opts.max_preserve_newlines = 2
    return jsbeautifier.beautify(source, opts)


def format_typescript(source: str) -> str:
    """Tidy TypeScript without reflowing it.

    Trailing whitespace is stripped, runs of blank lines collapse to one and
    the file ends with a single newline.
    """
    lines = [line.rstrip() for line in source.strip("\n").splitlines()]
    tidied: list[str] = []
    for line in lines:
        if not line and tidied and not tidied[-1]:
            continue
        tidied.append(line)
    return "\n".join(tidied) + "\n"


def format_stylesheet(source: str) -> str:
    """Pretty-print CSS, Less or SCSS."""
    opts = cssbeautifier.default_options()
    opts.indent_size = 2
    opts.end_with_newline = True
    return cssbeautifier.beautify(source, opts)


def formatter_for(path: Path) -> Formatter:
    """Pick the default formatter from the file suffix."""
    if path.suffix in STYLE_SUFFIXES:
        return format_stylesheet
    if path.suffix in TYPESCRIPT_SUFFIXES:
        return format_typescript
    return format_javascript


# ---------------------------------------------------------------------------
# File-system operations
# ---------------------------------------------------------------------------


async def ensure_directory(path: Path) -> Path:
    """Create *path* and any missing parents; a no-op if it already exists.

    Raises:
        WriteError: If the directory cannot be created.
    """
    try:
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc
    return path


async def guard_not_exists(path: Path) -> None:
    """Refuse to continue when *path* is already on disk.

    Raises:
        DirectoryExistsError: If *path* exists.
    """
    if await asyncio.to_thread(path.exists):
        raise DirectoryExistsError(path)


async def write_formatted(
    path: Path,
    content: str,
    formatter: Formatter | None = None,
) -> Path:
    """Format *content* and write it to *path*.

    The parent directory must already exist.  Nothing is retried.

    Raises:
        WriteError: If the formatter raises or the write fails.
    """
    format_source = formatter or formatter_for(path)
    try:
        formatted = format_source(content)
    except Exception as exc:
        raise WriteError(path, f"formatter failed: {exc}") from exc

    try:
        await asyncio.to_thread(_write_file, path, formatted)
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc
    return path


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write content, creating the file."""
    path.write_text(content, encoding="utf-8")
