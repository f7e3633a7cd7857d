"""Typed configuration for a scaffolding run.

``GenerationOptions`` is the immutable record every template and file-name
computation reads.  It is built once from the command-line flags and then
passed explicitly through the rest of the system.  ``Settings`` holds the
run-level knobs that do not influence generated content (working directory,
version check).
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    STANDARD = "standard"
    TYPED = "typed"


class Platform(str, Enum):
    WEB = "web"
    NATIVE = "native"


class StateStyle(str, Enum):
    STATEFUL = "stateful"
    FUNCTIONAL = "functional"


class PropsDeclaration(str, Enum):
    NONE = "none"
    DECLARED = "declared"


class NamingCase(str, Enum):
    AS_GIVEN = "as_given"
    UPPERCASE_FIRST = "uppercase_first"


class StyleSheet(str, Enum):
    LESS = "less"
    SCSS = "scss"


class GenerationOptions(BaseModel):
    """Flags that decide which files are produced and what they contain."""

    model_config = ConfigDict(frozen=True)

    language: Language = Field(default=Language.STANDARD, description="JavaScript or TypeScript output")
    platforms: tuple[Platform, ...] = Field(
        default=(Platform.WEB, Platform.NATIVE),
        description="Platforms that get a body and a test file",
    )
    state_style: StateStyle = Field(default=StateStyle.STATEFUL, description="Class or function component")
    props_declaration: PropsDeclaration = Field(
        default=PropsDeclaration.NONE, description="Whether prop-types are declared"
    )
    naming_case: NamingCase = Field(default=NamingCase.AS_GIVEN, description="Casing of the component name")
    emit_index: bool = Field(default=False, description="Write a multi-component index beside the components")
    emit_tests: bool = Field(default=True, description="Write the __tests__ batch")
    jsx: bool = Field(default=False, description="Use the .jsx extension for component and test files")
    styles: tuple[StyleSheet, ...] = Field(default=(), description="Style sheets added to each component")
    no_style: bool = Field(default=False, description="Suppress every style sheet")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def typed(self) -> bool:
        return self.language is Language.TYPED

    @property
    def source_extension(self) -> str:
        """Extension of body and test files."""
        if self.typed:
            return "tsx"
        return "jsx" if self.jsx else "js"

    @property
    def index_extension(self) -> str:
        return "ts" if self.typed else "js"

    @property
    def style_sheets(self) -> tuple[StyleSheet, ...]:
        if self.no_style:
            return ()
        return self.styles

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_flags(cls, flags: Any) -> "GenerationOptions":
        """Build options from an ``argparse.Namespace`` (or any attribute bag).

        Missing attributes fall back to the defaults above.
        """

        def flag(name: str) -> bool:
            return bool(getattr(flags, name, False))

        styles: list[StyleSheet] = []
        if flag("less"):
            styles.append(StyleSheet.LESS)
        if flag("scss"):
            styles.append(StyleSheet.SCSS)

        return cls(
            language=Language.TYPED if flag("typescript") else Language.STANDARD,
            platforms=(Platform.NATIVE,) if flag("reactnative") else (Platform.WEB, Platform.NATIVE),
            state_style=StateStyle.FUNCTIONAL if flag("functional") else StateStyle.STATEFUL,
            props_declaration=PropsDeclaration.DECLARED if flag("proptypes") else PropsDeclaration.NONE,
            naming_case=NamingCase.UPPERCASE_FIRST if flag("uppercase") else NamingCase.AS_GIVEN,
            emit_index=flag("createindex"),
            emit_tests=not flag("notest"),
            jsx=flag("jsx"),
            styles=tuple(styles),
            no_style=flag("nocss"),
        )


DEFAULT_VERSION_URL = "https://pypi.org/pypi/create-shared-component/json"


class Settings(BaseModel):
    """Run-level settings that never reach a template."""

    cwd: Path = Field(default_factory=Path.cwd, description="Directory component paths are resolved against")
    check_version: bool = Field(default=True, description="Query the package index for a newer release")
    version_url: str = Field(default=DEFAULT_VERSION_URL)
    version_timeout: float = Field(default=3.0, gt=0, description="Version check timeout in seconds")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SHARED_COMPONENT_CWD, SHARED_COMPONENT_NO_VERSION_CHECK,
            SHARED_COMPONENT_VERSION_URL, SHARED_COMPONENT_VERSION_TIMEOUT.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SHARED_COMPONENT_CWD"):
            kwargs["cwd"] = Path(os.environ["SHARED_COMPONENT_CWD"])
        if os.environ.get("SHARED_COMPONENT_NO_VERSION_CHECK", "").lower() in ("1", "true", "yes"):
            kwargs["check_version"] = False
        if os.environ.get("SHARED_COMPONENT_VERSION_URL"):
            kwargs["version_url"] = os.environ["SHARED_COMPONENT_VERSION_URL"]
        if os.environ.get("SHARED_COMPONENT_VERSION_TIMEOUT"):
            kwargs["version_timeout"] = os.environ["SHARED_COMPONENT_VERSION_TIMEOUT"]
        return cls(**kwargs)
