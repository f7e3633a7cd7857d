"""Integration tests for complete scaffolding runs.

These tests run the real renderer and formatter end-to-end against a
temporary working directory and verify the generated component trees.

No external services are required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from shared_component.config import (
    GenerationOptions,
    Language,
    NamingCase,
    PropsDeclaration,
    StateStyle,
    StyleSheet,
)
from shared_component.errors import DirectoryExistsError
from shared_component.scaffolder import ComponentGenerator


@pytest.mark.integration
class TestScaffoldRuns:
    async def test_button_defaults(self, workdir: Path, tree) -> None:
        await ComponentGenerator(GenerationOptions(), workdir).generate(["Button"])

        assert tree(workdir) == [
            "Button/Button.native.js",
            "Button/Button.web.js",
            "Button/__tests__/Button.test.native.js",
            "Button/__tests__/Button.test.web.js",
            "Button/index.js",
        ]
        web = (workdir / "Button" / "Button.web.js").read_text(encoding="utf-8")
        assert "class Button extends Component {" in web
        assert "  render() {" in web
        assert web.endswith("\n")

    async def test_functional_with_props(self, workdir: Path) -> None:
        options = GenerationOptions(
            state_style=StateStyle.FUNCTIONAL,
            props_declaration=PropsDeclaration.DECLARED,
        )
        await ComponentGenerator(options, workdir).generate(["Button"])

        web = (workdir / "Button" / "Button.web.js").read_text(encoding="utf-8")
        native = (workdir / "Button" / "Button.native.js").read_text(encoding="utf-8")
        assert "const Button = ({" in web
        assert "Button.propTypes = {" in web
        assert "class Button extends Component {" in native
        assert "Button.propTypes = {" in native

    async def test_full_feature_run(self, workdir: Path, tree) -> None:
        options = GenerationOptions(
            language=Language.TYPED,
            naming_case=NamingCase.UPPERCASE_FIRST,
            emit_index=True,
            styles=(StyleSheet.SCSS,),
        )
        result = await ComponentGenerator(options, workdir).generate(["header", "layout/footer"])

        files = tree(workdir)
        assert "Header/Header.web.tsx" in files
        assert "Header/Header.scss" in files
        assert "Header/__tests__/Header.test.native.tsx" in files
        assert "layout/Footer/index.ts" in files
        assert "index.ts" in files
        assert "layout/index.ts" in files
        assert len(result.components) == 2

        scss = (workdir / "Header" / "Header.scss").read_text(encoding="utf-8")
        assert ".header {" in scss
        index = (workdir / "index.ts").read_text(encoding="utf-8")
        assert "Header" in index

    async def test_typed_props_keep_typescript_syntax(self, workdir: Path) -> None:
        options = GenerationOptions(
            language=Language.TYPED,
            props_declaration=PropsDeclaration.DECLARED,
        )
        await ComponentGenerator(options, workdir).generate(["Card"])

        native = (workdir / "Card" / "Card.native.tsx").read_text(encoding="utf-8")
        assert "children?: React.ReactNode;" in native
        assert "class Card extends Component<Props, State> {" in native
        assert "static defaultProps: Partial<Props> = {" in native
        index = (workdir / "Card" / "index.ts").read_text(encoding="utf-8")
        assert index.endswith("\n")

    async def test_rerun_is_refused(self, workdir: Path, tree) -> None:
        generator = ComponentGenerator(GenerationOptions(), workdir)
        await generator.generate(["Button"])
        before = tree(workdir)
        with pytest.raises(DirectoryExistsError):
            await generator.generate(["Button"])
        assert tree(workdir) == before
