"""Table styles: the border and separator decorations of each named format.

A table is structured like so::

    --- lineabove ---------
        headerrow
    --- linebelowheader ---
        datarow
    --- linebetweenrows ---
    ... (more datarows) ...
    --- linebetweenrows ---
        last datarow
    --- linebelow ---------
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Literal, Union, get_args

StyleName = Literal[
    "plain",
    "simple",
    "github",
    "grid",
    "fancy",
    "presto",
    "fancygithub",
    "fancypresto",
]

# Column alignments. "decimal" right-aligns numbers on their fractional dot
# and is only valid for numeric columns.
Align = Literal["left", "center", "right", "decimal"]

ALIGNMENTS: tuple[str, ...] = get_args(Align)


class UnsupportedFormatError(ValueError):
    """Raised when a style name is not one of the known formats."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unsupported format "{name}"')
        self.name = name


@dataclass(frozen=True)
class Line:
    """A horizontal border line."""

    begin: str
    hline: str
    sep: str
    end: str

    def painted(self, paint: Callable[[str], str]) -> Line:
        return Line(paint(self.begin), paint(self.hline), paint(self.sep), paint(self.end))


@dataclass(frozen=True)
class DataRow:
    """Decorations around the cells of a header or data line."""

    begin: str
    sep: str
    end: str

    def painted(self, paint: Callable[[str], str]) -> DataRow:
        return DataRow(paint(self.begin), paint(self.sep), paint(self.end))


@dataclass(frozen=True)
class TableFormat:
    lineabove: Line | None
    linebelowheader: Line | None
    linebetweenrows: Line | None
    linebelow: Line | None
    headerrow: DataRow
    datarow: DataRow
    # Styles whose outer border already separates the header hide it.
    hidelineaboveifheader: bool = False
    hidelinebelowifheader: bool = False

    def painted(self, paint: Callable[[str], str]) -> TableFormat:
        """Return a copy with every border piece passed through *paint*."""

        def line(value: Line | None) -> Line | None:
            return value.painted(paint) if value is not None else None

        return replace(
            self,
            lineabove=line(self.lineabove),
            linebelowheader=line(self.linebelowheader),
            linebetweenrows=line(self.linebetweenrows),
            linebelow=line(self.linebelow),
            headerrow=self.headerrow.painted(paint),
            datarow=self.datarow.painted(paint),
        )


def ansi_paint(sgr: str) -> Callable[[str], str]:
    """Return a function wrapping text in the SGR sequence *sgr* (``"1;32"``)."""

    def paint(text: str) -> str:
        if not text:
            return text
        return f"\x1b[{sgr}m{text}\x1b[0m"

    return paint


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

_BASIC_ROW = DataRow("", "  ", "")
_BASIC_LINE = Line("", "-", "  ", "")
_PIPE_ROW = DataRow("| ", " | ", " |")
_SINGLE_LINE = Line("", "─", "─┼─", "")
_SINGLE_LINE_WITH_ENDS = Line("├─", "─", "─┼─", "─┤")
_ROW_LINE = DataRow("", " │ ", "")
_ROW_LINE_WITH_ENDS = DataRow("│ ", " │ ", " │")
_GITHUB_LINE = Line("|-", "-", "-|-", "-|")
_GRID_LINE = Line("+-", "-", "-+-", "-+")
_PRESTO_ROW = DataRow(" ", " | ", " ")

STYLES: dict[str, TableFormat] = {
    # item      qty
    # spam       42
    "plain": TableFormat(
        lineabove=None,
        linebelowheader=None,
        linebetweenrows=None,
        linebelow=None,
        headerrow=_BASIC_ROW,
        datarow=_BASIC_ROW,
    ),
    # item      qty
    # ------  -----
    # spam       42
    "simple": TableFormat(
        lineabove=_BASIC_LINE,
        linebelowheader=_BASIC_LINE,
        linebetweenrows=None,
        linebelow=_BASIC_LINE,
        headerrow=_BASIC_ROW,
        datarow=_BASIC_ROW,
        hidelineaboveifheader=True,
        hidelinebelowifheader=True,
    ),
    # | item   |   qty |
    # |--------|-------|
    # | spam   |    42 |
    "github": TableFormat(
        lineabove=_GITHUB_LINE,
        linebelowheader=_GITHUB_LINE,
        linebetweenrows=None,
        linebelow=None,
        headerrow=_PIPE_ROW,
        datarow=_PIPE_ROW,
        hidelineaboveifheader=True,
    ),
    # +--------+-------+
    # | item   |   qty |
    # +========+=======+
    # | spam   |    42 |
    # +--------+-------+
    "grid": TableFormat(
        lineabove=_GRID_LINE,
        linebelowheader=Line("+=", "=", "=+=", "=+"),
        linebetweenrows=_GRID_LINE,
        linebelow=_GRID_LINE,
        headerrow=_PIPE_ROW,
        datarow=_PIPE_ROW,
    ),
    # ╒════════╤═══════╕
    # │ item   │   qty │
    # ╞════════╪═══════╡
    # │ spam   │    42 │
    # ├────────┼───────┤
    # │ eggs   │   451 │
    # ╘════════╧═══════╛
    "fancy": TableFormat(
        lineabove=Line("╒═", "═", "═╤═", "═╕"),
        linebelowheader=Line("╞═", "═", "═╪═", "═╡"),
        linebetweenrows=_SINGLE_LINE_WITH_ENDS,
        linebelow=Line("╘═", "═", "═╧═", "═╛"),
        headerrow=_ROW_LINE_WITH_ENDS,
        datarow=_ROW_LINE_WITH_ENDS,
    ),
    #  item   |   qty
    # --------+-------
    #  spam   |    42
    "presto": TableFormat(
        lineabove=None,
        linebelowheader=Line("-", "-", "-+-", "-"),
        linebetweenrows=None,
        linebelow=None,
        headerrow=_PRESTO_ROW,
        datarow=_PRESTO_ROW,
    ),
    # │ item   │   qty │
    # ├────────┼───────┤
    # │ spam   │    42 │
    "fancygithub": TableFormat(
        lineabove=None,
        linebelowheader=_SINGLE_LINE_WITH_ENDS,
        linebetweenrows=None,
        linebelow=None,
        headerrow=_ROW_LINE_WITH_ENDS,
        datarow=_ROW_LINE_WITH_ENDS,
    ),
    # item   │   qty
    # ───────┼──────
    # spam   │    42
    "fancypresto": TableFormat(
        lineabove=None,
        linebelowheader=_SINGLE_LINE,
        linebetweenrows=None,
        linebelow=None,
        headerrow=_ROW_LINE,
        datarow=_ROW_LINE,
    ),
}


def get_format(style: Union[StyleName, str, TableFormat]) -> TableFormat:
    """Resolve a style name (or pass through a custom ``TableFormat``).

    Raises:
        UnsupportedFormatError: If *style* is not a known style name.
    """
    if isinstance(style, TableFormat):
        return style
    try:
        return STYLES[style]
    except KeyError:
        raise UnsupportedFormatError(style) from None


def check_align(align: str) -> None:
    if align not in ALIGNMENTS:
        raise ValueError(
            f"Unknown alignment {align!r}, expected one of: {', '.join(ALIGNMENTS)}"
        )
