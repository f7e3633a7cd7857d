"""Exceptions raised while scaffolding components.

Every failure the CLI reports derives from ``ScaffoldError`` so a single
``except`` clause in the entry point can turn it into a red error line and a
non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidArgumentsError(ScaffoldError):
    """Raised when the names/flags combination is inconsistent.

    Always raised before anything is written to disk.
    """


class InvalidNameError(InvalidArgumentsError):
    """Raised when a component name contains anything other than letters."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid component name {name!r}: only letters (a-z, A-Z) are allowed"
        )


class DirectoryExistsError(ScaffoldError):
    """Raised when the primary target directory is already on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Folder already exists at {path}")


class WriteError(ScaffoldError):
    """Raised when creating a directory, formatting or writing a file fails.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
