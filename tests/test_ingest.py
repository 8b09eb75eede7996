"""Tests for stybulate.ingest -- token classification and table reading."""

from __future__ import annotations

import math

import pytest

from stybulate.cell import Cell
from stybulate.ingest import parse_token, read_table
from stybulate.unstyle import PlainText


class TestParseToken:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [("451", 451), ("-12", -12), ("+7", 7), ("007", 7), ("2147483647", 2147483647)],
    )
    def test_integers(self, token: str, expected: int) -> None:
        cell = parse_token(token)
        assert cell == Cell(expected)
        assert isinstance(cell.value, int)

    def test_out_of_range_integer_becomes_float(self) -> None:
        cell = parse_token("2147483648")
        assert isinstance(cell.value, float)
        assert cell.render() == "2147483648"

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("41.9999", 41.9999), ("-0.5", -0.5), ("1e3", 1000.0), (".5", 0.5), ("inf", math.inf)],
    )
    def test_floats(self, token: str, expected: float) -> None:
        assert parse_token(token) == Cell(expected)

    def test_nan(self) -> None:
        cell = parse_token("nan")
        assert cell.is_numeric()
        assert math.isnan(cell.value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("token", ["spam", "1_000", "4.2.1", "0x1f", "١٢"])
    def test_text(self, token: str) -> None:
        cell = parse_token(token)
        assert not cell.is_numeric()
        assert cell.as_text() == PlainText(token)


class TestReadTable:
    def test_without_header(self) -> None:
        contents, headers = read_table(["spam 41.9999\n", "eggs\t451\n"])
        assert headers is None
        assert contents == [[Cell("spam"), Cell(41.9999)], [Cell("eggs"), Cell(451)]]

    def test_with_header(self) -> None:
        contents, headers = read_table(["strings numbers", "spam 41.9999"], header=True)
        assert headers == ["strings", "numbers"]
        assert contents == [[Cell("spam"), Cell(41.9999)]]

    def test_header_tokens_are_not_parsed(self) -> None:
        _, headers = read_table(["1 2.5"], header=True)
        assert headers == ["1", "2.5"]

    def test_blank_line_is_empty_row(self) -> None:
        contents, _ = read_table(["a b", "   ", "c"])
        assert contents == [[Cell("a"), Cell("b")], [], [Cell("c")]]

    def test_ragged_rows(self) -> None:
        contents, _ = read_table(["1 2 3", "4"])
        assert [len(row) for row in contents] == [3, 1]

    def test_empty_input(self) -> None:
        assert read_table([], header=True) == ([], None)
