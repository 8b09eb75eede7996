"""Turn whitespace-separated text into table cells."""

from __future__ import annotations

import re
from typing import Iterable

from stybulate.cell import Cell

_INT_RE = re.compile(r"[+-]?[0-9]+")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def parse_token(token: str) -> Cell:
    """Classify *token* as an Integer (32-bit), a Float or Text."""
    if _INT_RE.fullmatch(token):
        value = int(token)
        if _I32_MIN <= value <= _I32_MAX:
            return Cell(value)
    if "_" not in token and token.isascii():
        try:
            return Cell(float(token))
        except ValueError:
            pass
    return Cell(token)


def read_table(
    lines: Iterable[str], header: bool = False
) -> tuple[list[list[Cell]], list[str] | None]:
    """Parse *lines* into table contents, taking the first line as headers
    when *header* is set.
    """
    headers: list[str] | None = None
    contents: list[list[Cell]] = []
    first = True
    for line in lines:
        tokens = line.split()
        if header and first:
            first = False
            headers = tokens
            continue
        contents.append([parse_token(token) for token in tokens])
    return contents, headers
