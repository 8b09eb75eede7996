"""stybulate: tabulate with style.

Renders grids of strings and numbers as text tables with styled borders,
decimal-aligned numbers, multi-line cells and ANSI-colored content.
"""

# Cells
from stybulate.cell import Cell

# Column analysis
from stybulate.columns import MIN_PADDING, ColumnSpec

# Styles
from stybulate.style import (
    STYLES,
    Align,
    DataRow,
    Line,
    StyleName,
    TableFormat,
    UnsupportedFormatError,
    ansi_paint,
    get_format,
)

# Table
from stybulate.table import Table, tabulate

# Styled text
from stybulate.unstyle import AsciiEscapedString, PlainText, RichText, Unstyle, to_unstylable

# Utilities
from stybulate.utils import strip_ansi, visible_width

__all__ = [
    # Cells
    "Cell",
    # Columns
    "ColumnSpec",
    "MIN_PADDING",
    # Styles
    "Align",
    "DataRow",
    "Line",
    "STYLES",
    "StyleName",
    "TableFormat",
    "UnsupportedFormatError",
    "ansi_paint",
    "get_format",
    # Table
    "Table",
    "tabulate",
    # Styled text
    "AsciiEscapedString",
    "PlainText",
    "RichText",
    "Unstyle",
    "to_unstylable",
    # Utilities
    "strip_ansi",
    "visible_width",
]
