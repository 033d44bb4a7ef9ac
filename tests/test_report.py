"""Tests for the scripts table."""

from npm_inspector.models import ManifestDocument
from npm_inspector.report import (
    NO_SCRIPTS_MESSAGE,
    render_scripts,
    terminal_width,
    truncate,
)
from npm_inspector.styling import ClickStyler, PlainStyler

LONG_BUILD = "webpack --config a-very-long-configuration-path-string"


def _manifest(scripts):
    return ManifestDocument(path="package.json", scripts=scripts)


class TestTruncate:
    def test_short_untouched(self):
        assert truncate("jest", 10) == "jest"

    def test_exact_fit_untouched(self):
        assert truncate("abcd", 4) == "abcd"

    def test_cut_with_ellipsis(self):
        assert truncate("abcdef", 3) == "abc..."

    def test_negative_limit_clamped(self):
        assert truncate("abc", -5) == "..."


class TestRenderScripts:
    def test_no_scripts(self):
        assert render_scripts(_manifest({}), 80, PlainStyler()) == [NO_SCRIPTS_MESSAGE]
        assert NO_SCRIPTS_MESSAGE == "No scripts found in package.json."

    def test_header_then_rows_in_order(self):
        lines = render_scripts(_manifest({"test": "jest", "build": "tsc", "lint": "eslint ."}), 80, PlainStyler())

        assert lines == [
            "Available scripts:",
            "test  jest",
            "build tsc",
            "lint  eslint .",
        ]

    def test_narrow_terminal_truncates_long_commands(self):
        width = 40
        lines = render_scripts(_manifest({"build": LONG_BUILD, "test": "jest"}), width, PlainStyler())

        available = width - len("build") - 8
        assert lines[1] == "build " + LONG_BUILD[:available] + "..."
        assert lines[2] == "test  jest"
        assert len(lines[1]) == width - 8 + 1 + 3

    def test_wide_terminal_keeps_commands(self):
        lines = render_scripts(_manifest({"build": LONG_BUILD}), 200, PlainStyler())

        assert lines[1] == "build " + LONG_BUILD

    def test_styled_segments(self):
        lines = render_scripts(_manifest({"test": "jest"}), 80, ClickStyler())

        assert lines[1].startswith("\x1b[")
        assert "test" in lines[1] and "jest" in lines[1]


class TestTerminalWidth:
    def test_uses_columns_env(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "123")

        assert terminal_width() == 123

    def test_fallback_when_unknown(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        monkeypatch.setattr("os.get_terminal_size", _raise_oserror)

        assert terminal_width() == 80
        assert terminal_width(fallback=100) == 100


def _raise_oserror(*args, **kwargs):
    raise OSError("not a terminal")
