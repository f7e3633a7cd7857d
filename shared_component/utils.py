"""Shared console and network helpers.

Provides the Rich console used for all output, success/error/warning
printers, the spinner shown while files are written, the created-file tree,
and the advisory version check against the package index.
"""

from __future__ import annotations

import re
from pathlib import Path

import httpx
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.tree import Tree

console = Console()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.0421) -> "42ms"
        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(f"[cyan]{escape(message)}[/cyan]")


def create_progress() -> Progress:
    """Create a transient Rich spinner with elapsed time.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def build_file_tree(root: Path, files: list[Path]) -> Tree:
    """Build a Rich tree of *files* relative to *root*.

    Files outside *root* are shown with their full path at the top level.
    Path segments are escaped so brackets in folder names print literally.
    """
    tree = Tree(f"[bold]{escape(str(root))}[/bold]")
    nodes: dict[tuple[str, ...], Tree] = {(): tree}
    for path in sorted(files):
        try:
            parts = path.relative_to(root).parts
        except ValueError:
            parts = (str(path),)
        for depth in range(1, len(parts)):
            key = parts[:depth]
            if key not in nodes:
                label = f"[bold blue]{escape(parts[depth - 1])}/[/bold blue]"
                nodes[key] = nodes[parts[: depth - 1]].add(label)
        nodes[parts[:-1]].add(escape(parts[-1]))
    return tree


def print_file_tree(root: Path, files: list[Path]) -> None:
    console.print(build_file_tree(root, files))


# ---------------------------------------------------------------------------
# Version check
# ---------------------------------------------------------------------------


def parse_version(version: str) -> tuple[int, ...]:
    """Parse the numeric release part of *version* (``"1.10.0rc1"`` -> ``(1, 10, 0)``)."""
    release = re.match(r"\d+(?:\.\d+)*", version.strip())
    if release is None:
        raise ValueError(f"Not a version: {version!r}")
    return tuple(int(part) for part in release.group(0).split("."))


async def check_latest_version(
    current: str,
    url: str,
    timeout: float = 3.0,
) -> str | None:
    """Return the newest published version if it is newer than *current*.

    Advisory only: any network, HTTP or payload problem yields ``None``.
    """
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout)) as client:
            response = await client.get(url)
            response.raise_for_status()
            latest = response.json()["info"]["version"]
        if parse_version(latest) > parse_version(current):
            return latest
    except (httpx.HTTPError, ValueError, KeyError, TypeError):
        return None
    return None
