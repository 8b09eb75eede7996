"""The Table: a grid of cells, optional headers and a style, rendered as text.

Example::

    >>> table = Table(
    ...     "fancy",
    ...     [["spam", 41.9999], ["eggs", 451]],
    ...     headers=["strings", "numbers"],
    ... )
    >>> print(table.tabulate())
    ╒═══════════╤═══════════╕
    │ strings   │   numbers │
    ╞═══════════╪═══════════╡
    │ spam      │   41.9999 │
    ├───────────┼───────────┤
    │ eggs      │  451      │
    ╘═══════════╧═══════════╛
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence, Union

from stybulate.cell import Cell
from stybulate.columns import column_count, get_col_specs, get_col_widths, render_number
from stybulate.layout import create_data_line, create_data_lines, create_line
from stybulate.style import Align, StyleName, TableFormat, check_align, get_format
from stybulate.unstyle import Unstyle, to_unstylable

logger = logging.getLogger(__name__)


class Table:
    """A table ready to be rendered.

    Default alignments are ``"left"`` for text columns and ``"decimal"`` for
    numeric columns.
    """

    def __init__(
        self,
        style: Union[StyleName, str, TableFormat],
        contents: Iterable[Iterable[Any]],
        headers: Iterable[Union[str, Unstyle]] | None = None,
    ) -> None:
        self._style = style
        self._contents: list[list[Cell]] = [[Cell.of(value) for value in row] for row in contents]
        self._headers: list[Unstyle] | None = (
            [to_unstylable(h) for h in headers] if headers is not None else None
        )
        self._str_align: Align = "left"
        self._num_align: Align = "decimal"
        self._border_style: Callable[[str], str] | None = None

    @property
    def contents(self) -> list[list[Cell]]:
        return self._contents

    @property
    def headers(self) -> list[Unstyle] | None:
        return self._headers

    @property
    def align(self) -> tuple[Align, Align]:
        return (self._str_align, self._num_align)

    def set_align(self, str_align: Align, num_align: Align) -> None:
        """Set the text and number alignments.

        Raises:
            ValueError: If *str_align* is ``"decimal"``; only numeric columns
                can be decimal-aligned.
        """
        if str_align == "decimal":
            raise ValueError("str_align should not be set to decimal, only num_align can")
        check_align(str_align)
        check_align(num_align)
        self._str_align = str_align
        self._num_align = num_align

    def set_border_style(self, paint: Callable[[str], str] | None) -> None:
        """Style the borders: *paint* is applied to every border piece."""
        self._border_style = paint

    def tabulate(self) -> str:
        """Render the table as a string (no trailing newline)."""
        fmt = get_format(self._style)
        if self._border_style is not None:
            fmt = fmt.painted(self._border_style)
        headers = self._headers
        contents = self._contents
        str_align, num_align = self._str_align, self._num_align

        col_nb = column_count(contents, headers)
        col_spec = get_col_specs(col_nb, contents)
        col_width = get_col_widths(col_nb, headers, contents, col_spec, num_align)
        logger.debug("Rendering %d rows x %d columns, widths=%s", len(contents), col_nb, col_width)

        lines: list[str] = []

        if fmt.lineabove is not None and not (headers is not None and fmt.hidelineaboveifheader):
            lines.append(create_line(fmt.lineabove, col_width))

        if headers is not None:
            for data in create_data_lines(
                _pad(headers, col_nb), str_align, num_align, col_width, col_spec
            ):
                lines.append(create_data_line(fmt.headerrow, col_nb, data))
            if fmt.linebelowheader is not None:
                lines.append(create_line(fmt.linebelowheader, col_width))

        for i, row in enumerate(contents):
            if i != 0 and fmt.linebetweenrows is not None:
                lines.append(create_line(fmt.linebetweenrows, col_width))
            values: list[Unstyle] = []
            for col, cell in enumerate(row):
                text = cell.as_text()
                if text is None:
                    text = to_unstylable(render_number(cell, col_spec[col], num_align))
                values.append(text)
            for data in create_data_lines(
                _pad(values, col_nb), str_align, num_align, col_width, col_spec
            ):
                lines.append(create_data_line(fmt.datarow, col_nb, data))

        if fmt.linebelow is not None and not (headers is not None and fmt.hidelinebelowifheader):
            lines.append(create_line(fmt.linebelow, col_width))

        return "\n".join(lines)


def _pad(values: Sequence[Unstyle], col_nb: int) -> list[Unstyle]:
    """Fill missing trailing cells with empty text."""
    return list(values) + [to_unstylable("")] * (col_nb - len(values))


def tabulate(
    style: Union[StyleName, str, TableFormat],
    contents: Iterable[Iterable[Any]],
    headers: Iterable[Union[str, Unstyle]] | None = None,
    align: tuple[Align, Align] | None = None,
) -> str:
    """Render *contents* as a table in one call.

    Raises:
        UnsupportedFormatError: If *style* is not a known style name.
        ValueError: If the text alignment in *align* is ``"decimal"``.
    """
    table = Table(style, contents, headers)
    if align is not None:
        table.set_align(*align)
    return table.tabulate()
