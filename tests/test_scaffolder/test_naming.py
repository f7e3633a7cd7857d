"""Tests for component name and path normalisation.

Covers:
- Letters-only validation of the final path segment
- Casing policy applied to names
- Parent directory resolution against the working directory
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from shared_component.config import GenerationOptions, NamingCase
from shared_component.errors import InvalidArgumentsError, InvalidNameError
from shared_component.scaffolder.naming import (
    apply_case,
    component_name,
    is_letters_only,
    normalize,
    split_segments,
)

pytestmark = pytest.mark.unit


UPPER = GenerationOptions(naming_case=NamingCase.UPPERCASE_FIRST)


class TestSplitSegments:
    def test_plain_name(self):
        assert split_segments("Button") == ["Button"]

    def test_nested(self):
        assert split_segments("Sub/Folder/Name") == ["Sub", "Folder", "Name"]

    def test_drops_empty_segments(self):
        assert split_segments("/Sub//Name/") == ["Sub", "Name"]


class TestComponentName:
    @pytest.mark.parametrize("raw", ["Button", "button", "forms/Input", "a/b/c/Card"])
    def test_valid(self, raw):
        assert component_name(raw) == raw.split("/")[-1]

    @pytest.mark.parametrize(
        "raw", ["Button2", "my-button", "my_button", "Btn.web", "forms/In put", "", "Bütton"]
    )
    def test_invalid(self, raw):
        with pytest.raises(InvalidNameError):
            component_name(raw)

    def test_invalid_name_is_an_argument_error(self):
        with pytest.raises(InvalidArgumentsError):
            component_name("9lives")

    def test_only_last_segment_is_checked(self):
        assert component_name("my-folder_2/Button") == "Button"

    def test_is_letters_only(self):
        assert is_letters_only("Card")
        assert not is_letters_only("")


class TestApplyCase:
    def test_as_given(self, default_options):
        assert apply_case("button", default_options) == "button"

    def test_uppercase_first(self):
        assert apply_case("button", UPPER) == "Button"
        assert apply_case("Button", UPPER) == "Button"

    def test_only_first_character_changes(self):
        assert apply_case("myButton", UPPER) == "MyButton"

    def test_empty(self):
        assert apply_case("", UPPER) == ""


class TestNormalize:
    def test_flat_name(self, default_options, workdir):
        request = normalize("Button", default_options, workdir)
        assert request.base_name == "Button"
        assert request.canonical_name == "Button"
        assert request.parent_directory == workdir
        assert request.directory == workdir / "Button"
        assert request.test_directory == workdir / "Button" / "__tests__"

    def test_nested_name(self, default_options, workdir):
        request = normalize("shared/forms/Input", default_options, workdir)
        assert request.parent_directory == workdir / "shared" / "forms"
        assert request.directory == workdir / "shared" / "forms" / "Input"

    def test_uppercase_policy(self, workdir):
        request = normalize("ui/card", UPPER, workdir)
        assert request.base_name == "card"
        assert request.canonical_name == "Card"
        assert request.directory == workdir / "ui" / "Card"

    def test_cwd_accepts_string(self, default_options, tmp_path):
        request = normalize("Button", default_options, str(tmp_path))
        assert request.parent_directory == Path(tmp_path)

    def test_request_is_immutable(self, default_options, workdir):
        request = normalize("Button", default_options, workdir)
        with pytest.raises(ValidationError):
            request.base_name = "Other"

    def test_invalid(self, default_options, workdir):
        with pytest.raises(InvalidNameError) as exc_info:
            normalize("forms/Input2", default_options, workdir)
        assert exc_info.value.name == "Input2"
