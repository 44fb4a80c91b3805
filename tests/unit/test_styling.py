#!/usr/bin/env python3
"""
Tests for Style / Styling.
"""

import io

import pytest

from ante.shared.styling import Style, Styling


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


class TestStyle:
    def test_plain_style_is_noop(self):
        assert Style().paint("Int") == "Int"
        assert Style().is_plain()

    def test_codes_wrap_text(self):
        assert Style().green().paint("Int") == "\x1b[32mInt\x1b[0m"
        assert Style().red().bold().paint("error:") == "\x1b[31m\x1b[1merror:\x1b[0m"

    def test_builders_do_not_mutate(self):
        base = Style()
        base.red()
        assert base.is_plain()


class TestStyling:
    def test_no_color(self, no_color):
        assert no_color.underline is True
        for style in (
            no_color.location, no_color.header_error, no_color.header_warning,
            no_color.header_note, no_color.type_, no_color.wrong_type,
            no_color.trait_, no_color.line_wrong_part,
        ):
            assert style.is_plain()

    def test_colored(self, colored):
        assert colored.underline is False
        assert colored.location == Style().italic()
        assert colored.header_error == Style().red().bold()
        assert colored.header_warning == Style().yellow().bold()
        assert colored.header_note == Style().purple().bold()
        assert colored.type_ == Style().green()
        assert colored.wrong_type == Style().red()
        assert colored.trait_ == Style().blue()
        assert colored.line_wrong_part == Style().red()

    def test_canonical_values_are_equal(self):
        assert Styling.colored() == Styling.colored()
        assert Styling.no_color() != Styling.colored()

    def test_immutable(self, colored):
        with pytest.raises(AttributeError):
            colored.underline = True


class TestStylingFromEnvironment:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("ANTE_COLOR", raising=False)

    def test_tty_gets_color(self):
        assert Styling.from_environment(_TtyStream()) == Styling.colored()

    def test_pipe_gets_no_color(self):
        assert Styling.from_environment(io.StringIO()) == Styling.no_color()

    def test_no_color_wins(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("ANTE_COLOR", "always")
        assert Styling.from_environment(_TtyStream()) == Styling.no_color()

    @pytest.mark.parametrize("value", ["0", "false", "No", "never"])
    def test_forced_off(self, monkeypatch, value):
        monkeypatch.setenv("ANTE_COLOR", value)
        assert Styling.from_environment(_TtyStream()) == Styling.no_color()

    @pytest.mark.parametrize("value", ["1", "true", "YES", "always"])
    def test_forced_on(self, monkeypatch, value):
        monkeypatch.setenv("ANTE_COLOR", value)
        assert Styling.from_environment(io.StringIO()) == Styling.colored()
