"""Tests for stybulate.unstyle -- text values with and without styling."""

from __future__ import annotations

import pytest

from stybulate.unstyle import AsciiEscapedString, PlainText, Unstyle, to_unstylable
from stybulate.utils import strip_ansi, visible_width


def _assert_structure_preserved(value: Unstyle) -> None:
    """Styled and unstyled forms share line breaks and visible text."""
    styled = str(value).split("\n")
    unstyled = value.unstyle().split("\n")
    assert len(styled) == len(unstyled) == value.nb_of_lines()
    for styled_line, unstyled_line in zip(styled, unstyled):
        assert strip_ansi(styled_line) == unstyled_line
        assert visible_width(styled_line) == visible_width(unstyled_line)


class TestPlainText:
    def test_unstyle_is_identity(self) -> None:
        assert PlainText("foo\nbar").unstyle() == "foo\nbar"

    def test_str(self) -> None:
        assert str(PlainText("spam")) == "spam"

    def test_nb_of_lines(self) -> None:
        assert PlainText("").nb_of_lines() == 1
        assert PlainText("foo bar\nbaz\nbau").nb_of_lines() == 3

    def test_structure_preserved(self) -> None:
        _assert_structure_preserved(PlainText("a\nbc"))


class TestAsciiEscapedString:
    def test_unstyle_strips_escapes(self) -> None:
        s = AsciiEscapedString("This is \x1b[1;31;44mbold red with blue background\x1b[0m")
        assert s.unstyle() == "This is bold red with blue background"

    def test_str_keeps_escapes(self) -> None:
        assert str(AsciiEscapedString("\x1b[31mred\x1b[0m")) == "\x1b[31mred\x1b[0m"

    def test_nb_of_lines(self) -> None:
        assert AsciiEscapedString("more\nspam \x1b[31meggs\x1b[0m").nb_of_lines() == 2

    @pytest.mark.parametrize(
        "text",
        [
            "\x1b[31mStybulate\x1b[0m",
            "more\nspam \x1b[31meggs\x1b[0m",
            "\x1b[5;30mS\x1b[31mt\x1b[32my\x1b[33mb\x1b[0m",
        ],
    )
    def test_structure_preserved(self, text: str) -> None:
        _assert_structure_preserved(AsciiEscapedString(text))


class TestRichText:
    def test_renders_and_unstyles(self) -> None:
        pytest.importorskip("rich")
        from rich.text import Text

        from stybulate.unstyle import RichText

        text = Text("plain ")
        text.append("bold", style="bold")
        text.append("\nsecond line", style="green")
        value = RichText(text)
        assert value.unstyle() == "plain bold\nsecond line"
        assert value.nb_of_lines() == 2
        _assert_structure_preserved(value)


class TestToUnstylable:
    def test_wraps_str(self) -> None:
        assert to_unstylable("foo") == PlainText("foo")

    def test_passes_unstyle_through(self) -> None:
        value = AsciiEscapedString("\x1b[1mfoo\x1b[0m")
        assert to_unstylable(value) is value

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="list"):
            to_unstylable(["foo"])
