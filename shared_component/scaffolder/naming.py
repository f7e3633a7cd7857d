"""Component name and destination path normalisation.

A raw command-line argument may carry a relative path (``Sub/Folder/Name``).
The final segment is the component name; everything before it is resolved
against the invocation's working directory.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..config import GenerationOptions, NamingCase
from ..errors import InvalidNameError

TEST_DIRECTORY = "__tests__"

_LETTERS_ONLY = re.compile(r"[A-Za-z]+")


class ComponentRequest(BaseModel):
    """One requested component, derived from a single CLI argument."""

    model_config = ConfigDict(frozen=True)

    raw: str
    base_name: str
    canonical_name: str
    parent_directory: Path

    @property
    def directory(self) -> Path:
        return self.parent_directory / self.canonical_name

    @property
    def test_directory(self) -> Path:
        return self.directory / TEST_DIRECTORY


def split_segments(raw: str) -> list[str]:
    """Split *raw* on ``/`` and the OS separator, dropping empty segments."""
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    pattern = "|".join(re.escape(sep) for sep in separators)
    return [segment for segment in re.split(pattern, raw) if segment]


def is_letters_only(name: str) -> bool:
    return bool(_LETTERS_ONLY.fullmatch(name))


def apply_case(name: str, options: GenerationOptions) -> str:
    """Apply the run's casing policy to *name*.

    Used for the component name itself and for every file name that embeds
    it, so all generated files share one casing.
    """
    if options.naming_case is NamingCase.UPPERCASE_FIRST and name:
        return name[0].upper() + name[1:]
    return name


def component_name(raw: str) -> str:
    """Return the validated final path segment of *raw*.

    Raises:
        InvalidNameError: If the segment is empty or contains anything but
            ASCII letters.
    """
    segments = split_segments(raw)
    name = segments[-1] if segments else ""
    if not is_letters_only(name):
        raise InvalidNameError(name or raw)
    return name


def normalize(raw: str, options: GenerationOptions, cwd: Path) -> ComponentRequest:
    """Build a ``ComponentRequest`` for *raw* relative to *cwd*."""
    base_name = component_name(raw)
    parents = split_segments(raw)[:-1]
    return ComponentRequest(
        raw=raw,
        base_name=base_name,
        canonical_name=apply_case(base_name, options),
        parent_directory=Path(cwd).joinpath(*parents),
    )
