"""Row splitting and line assembly.

A logical row whose values contain line breaks is split into physical lines,
then every physical line is justified column by column and framed by the
style's decorations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from stybulate.columns import ColumnSpec
from stybulate.style import Align, DataRow, Line
from stybulate.unstyle import Unstyle
from stybulate.utils import visible_width


@dataclass(frozen=True)
class Fragment:
    """One line of a cell value, as printed and as measured."""

    styled: str
    unstyled: str


PhysicalLine = list[Optional[Fragment]]


# ---------------------------------------------------------------------------
# Row splitter
# ---------------------------------------------------------------------------


def split_row(values: Sequence[Unstyle]) -> list[PhysicalLine]:
    """Split a row of values on embedded line breaks.

    The row spans as many physical lines as its tallest value; shorter values
    yield ``None`` for the lines they do not have.
    """
    nb_lines = max((value.nb_of_lines() for value in values), default=1)
    columns: list[tuple[list[str], list[str]]] = [
        (str(value).split("\n"), value.unstyle().split("\n")) for value in values
    ]
    lines: list[PhysicalLine] = []
    for i in range(nb_lines):
        line: PhysicalLine = []
        for styled, unstyled in columns:
            if i < len(unstyled):
                line.append(Fragment(styled=styled[i], unstyled=unstyled[i]))
            else:
                line.append(None)
        lines.append(line)
    return lines


# ---------------------------------------------------------------------------
# Justification
# ---------------------------------------------------------------------------


def justify(text: str, align: Align, width: int) -> str:
    """Pad *text* (without escape sequences) to *width* display columns."""
    # Pad by display columns, wide characters take two.
    padding = max(width - visible_width(text), 0)
    if align == "left":
        return text + " " * padding
    if align == "right":
        return " " * padding + text
    if align == "center":
        left = padding // 2
        return " " * left + text + " " * (padding - left)

    out = " " * padding + text
    dot = out.rfind(".")
    if dot != -1 and all(c == "0" for c in out[dot + 1 :]):
        out = out[:dot] + " " * (len(out) - dot)
    return out


def format_fragment(fragment: Fragment | None, align: Align, width: int) -> str:
    if fragment is None:
        return " " * width
    formatted = justify(fragment.unstyled, align, width)
    if fragment.styled != fragment.unstyled:
        # Put the escape sequences back around the same visible characters.
        return formatted.replace(fragment.unstyled, fragment.styled, 1)
    return formatted


def create_data_lines(
    values: Sequence[Unstyle],
    str_align: Align,
    num_align: Align,
    col_width: Sequence[int],
    col_spec: Sequence[ColumnSpec],
) -> list[list[str]]:
    """Split a row and justify every fragment for its column."""
    lines: list[list[str]] = []
    for physical in split_row(values):
        formatted: list[str] = []
        for col, fragment in enumerate(physical):
            align = num_align if col_spec[col].all_numeric else str_align
            formatted.append(format_fragment(fragment, align, col_width[col]))
        lines.append(formatted)
    return lines


# ---------------------------------------------------------------------------
# Line assembly
# ---------------------------------------------------------------------------


def create_line(line: Line, col_width: Sequence[int]) -> str:
    """Render a horizontal border across columns of the given widths."""
    fill = line.sep.join(line.hline * w for w in col_width)
    return (line.begin + fill + line.end).rstrip()


def create_data_line(row: DataRow, col_nb: int, content: Sequence[str]) -> str:
    cells = [content[col] if col < len(content) else "" for col in range(col_nb)]
    return (row.begin + row.sep.join(cells) + row.end).rstrip()
