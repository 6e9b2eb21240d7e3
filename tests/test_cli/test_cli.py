"""Tests for the stylesheet CLI."""

import logging
import textwrap

import pytest
from click.testing import CliRunner

from stylesheet.cli.inspect import LoadError, load_object
from stylesheet.cli.main import cli


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_THEME = textwrap.dedent(
    """
    from stylesheet import Style, StyleSheet, style


    class Primary:
        pass


    class View:
        pass


    class Button(View):
        pass


    class Label(View):
        pass


    @style(Button, Primary)
    def primary_button(obj):
        obj.color = "blue"


    STYLES = [
        primary_button,
        Style.build(Button, body=lambda obj: None),
        Style.build(View, body=lambda obj: None),
        Style.build(Label, body=lambda obj: None),
    ]

    SHEET = StyleSheet.build(STYLES)

    DUPLICATES = [
        Style.build(View, body=lambda obj: None),
        Style.build(View, body=lambda obj: None),
    ]

    NOT_A_SHEET = 42
    """
)


@pytest.fixture
def theme_module(tmp_path, monkeypatch):
    (tmp_path / "cli_theme.py").write_text(_THEME, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_theme"


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class TestCliGroup:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "explain" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "stylesheet" in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspect:
    def test_inspect_sheet(self, theme_module):
        result = CliRunner().invoke(cli, ["inspect", f"{theme_module}:SHEET"])
        assert result.exit_code == 0
        assert "Styles: 4" in result.output
        lines = [line.strip() for line in result.output.splitlines() if ". " in line]
        assert lines == ["1. View", "2. Button", "3. Button[Primary]", "4. Label"]

    def test_inspect_style_list(self, theme_module):
        result = CliRunner().invoke(cli, ["inspect", f"{theme_module}:STYLES"])
        assert result.exit_code == 0
        assert "Styles: 4" in result.output

    def test_inspect_duplicates_fail(self, theme_module):
        result = CliRunner().invoke(cli, ["inspect", f"{theme_module}:DUPLICATES"])
        assert result.exit_code == 1
        assert "Redundant styles for View" in result.output

    def test_inspect_wrong_object(self, theme_module):
        result = CliRunner().invoke(cli, ["inspect", f"{theme_module}:NOT_A_SHEET"])
        assert result.exit_code == 1
        assert "neither a StyleSheet nor a list of styles" in result.output

    def test_inspect_missing_module(self):
        result = CliRunner().invoke(cli, ["inspect", "no_such_module_xyz:SHEET"])
        assert result.exit_code == 1
        assert "Cannot import module" in result.output

    def test_verbose_flag(self, theme_module, monkeypatch):
        configured = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: configured.append(kw))
        result = CliRunner().invoke(cli, ["-v", "inspect", f"{theme_module}:SHEET"])
        assert result.exit_code == 0
        assert configured[0]["level"] == logging.DEBUG


# ---------------------------------------------------------------------------
# explain
# ---------------------------------------------------------------------------


class TestExplain:
    def test_explain_class(self, theme_module):
        result = CliRunner().invoke(
            cli, ["explain", f"{theme_module}:SHEET", f"{theme_module}:Button"]
        )
        assert result.exit_code == 0
        assert "Styles applied to Button:" in result.output
        assert "1. View" in result.output
        assert "2. Button" in result.output
        assert "Primary" not in result.output

    def test_explain_with_marker(self, theme_module):
        result = CliRunner().invoke(
            cli,
            [
                "explain",
                f"{theme_module}:SHEET",
                f"{theme_module}:Button",
                "--marker",
                f"{theme_module}:Primary",
            ],
        )
        assert result.exit_code == 0
        assert "1. Button[Primary]" in result.output

    def test_explain_no_match(self, theme_module):
        result = CliRunner().invoke(
            cli, ["explain", f"{theme_module}:SHEET", f"{theme_module}:Primary"]
        )
        assert result.exit_code == 0
        assert "No styles apply to Primary" in result.output

    def test_explain_requires_class(self, theme_module):
        result = CliRunner().invoke(
            cli, ["explain", f"{theme_module}:SHEET", f"{theme_module}:NOT_A_SHEET"]
        )
        assert result.exit_code == 1
        assert "is not a class" in result.output


# ---------------------------------------------------------------------------
# load_object
# ---------------------------------------------------------------------------


class TestLoadObject:
    def test_dotted_attribute(self):
        assert load_object("stylesheet:StyleSheet.build").__name__ == "build"

    def test_missing_separator(self):
        with pytest.raises(LoadError):
            load_object("stylesheet")

    def test_missing_attribute(self):
        with pytest.raises(LoadError, match="has no attribute"):
            load_object("stylesheet:NoSuchThing")
