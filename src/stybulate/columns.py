"""Per-column analysis: numeric detection, decimal precision and widths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from stybulate.cell import Cell
from stybulate.style import Align
from stybulate.unstyle import Unstyle
from stybulate.utils import max_line_width

# Extra room given to header cells.
MIN_PADDING = 2


@dataclass(frozen=True)
class ColumnSpec:
    all_numeric: bool
    max_fraction_digits: int

    def fixed_precision(self, num_align: Align) -> bool:
        """Whether numbers of this column print at ``max_fraction_digits``.

        Only a decimal-aligned numeric column with fractional digits pads its
        numbers to a common precision; elsewhere numbers keep their natural
        form.
        """
        return self.all_numeric and num_align == "decimal" and self.max_fraction_digits > 0


def column_count(contents: Sequence[Sequence[Cell]], headers: Sequence[Unstyle] | None) -> int:
    header_len = len(headers) if headers is not None else 0
    return max(header_len, max((len(row) for row in contents), default=0))


def get_col_specs(col_nb: int, contents: Sequence[Sequence[Cell]]) -> list[ColumnSpec]:
    """Compute, for each column, whether every present cell is a number and
    the largest fractional digit count among its numbers.

    Rows shorter than *col_nb* do not disqualify a column; a column with no
    cell at all is treated as text.
    """
    specs: list[ColumnSpec] = []
    for col in range(col_nb):
        present = False
        all_numeric = True
        max_digits = 0
        for row in contents:
            if col >= len(row):
                continue
            present = True
            cell = row[col]
            if cell.is_numeric():
                max_digits = max(max_digits, cell.fraction_digit_count())
            else:
                all_numeric = False
        specs.append(ColumnSpec(all_numeric=present and all_numeric, max_fraction_digits=max_digits))
    return specs


def render_number(cell: Cell, spec: ColumnSpec, num_align: Align) -> str:
    """Return the printed form of a numeric *cell* in its column."""
    if spec.fixed_precision(num_align):
        rendered = cell.render_with_precision(spec.max_fraction_digits)
    else:
        rendered = cell.render()
    assert rendered is not None
    return rendered


def _cell_width(cell: Cell, spec: ColumnSpec, num_align: Align) -> int:
    text = cell.as_text()
    if text is not None:
        return max_line_width(text.unstyle())
    # Plain ASCII, so the character count is the display width.
    return len(render_number(cell, spec, num_align))


def get_col_widths(
    col_nb: int,
    headers: Sequence[Unstyle] | None,
    contents: Sequence[Sequence[Cell]],
    specs: Sequence[ColumnSpec],
    num_align: Align,
) -> list[int]:
    """Compute the content width of each column.

    Header cells count with ``MIN_PADDING`` extra columns. Text is measured
    on its unstyled form by display width, taking the widest embedded line.
    Numbers are measured at the column precision when the column is
    decimal-aligned with fractional digits, on their natural form otherwise.
    """
    widths: list[int] = []
    for col in range(col_nb):
        width = 0
        if headers is not None and col < len(headers):
            width = max_line_width(headers[col].unstyle()) + MIN_PADDING
        for row in contents:
            if col < len(row):
                width = max(width, _cell_width(row[col], specs[col], num_align))
        widths.append(width)
    return widths
