"""Table cell values: integers, floats or styled text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from stybulate.unstyle import PlainText, Unstyle, to_unstylable

CellValue = Union[int, float, Unstyle]


def _format_float(value: float) -> str:
    """Shortest round-trip digits of *value* in positional notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Cell:
    """The content of one table cell.

    ``Cell(42)`` is an Integer, ``Cell(3.1415)`` a Float and ``Cell("spam")``
    (or any ``Unstyle`` value) a Text cell.

    Integers are Python ints and are not limited to 32 bits here; only text
    ingestion (``stybulate.ingest.parse_token``) applies the 32-bit range.
    Large ints keep their exact digits at any precision instead of going
    through a float.
    """

    value: CellValue

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            object.__setattr__(self, "value", to_unstylable(value))

    @classmethod
    def of(cls, value: Any) -> Cell:
        """Coerce a raw grid value into a ``Cell``.

        Booleans are shown as text and ``None`` as an empty cell.
        """
        if isinstance(value, Cell):
            return value
        if value is None:
            return cls(PlainText(""))
        if isinstance(value, bool):
            return cls(PlainText(str(value)))
        return cls(value)

    def is_numeric(self) -> bool:
        return isinstance(self.value, (int, float))

    def as_text(self) -> Unstyle | None:
        """Return the text value of a Text cell, ``None`` for numbers."""
        if isinstance(self.value, Unstyle):
            return self.value
        return None

    def render(self) -> str | None:
        """Return the natural string form of a number, ``None`` for text."""
        if isinstance(self.value, float):
            return _format_float(self.value)
        if isinstance(self.value, int):
            return str(self.value)
        return None

    def render_with_precision(self, digits: int) -> str | None:
        """Same as ``render`` but with exactly *digits* fractional digits."""
        if isinstance(self.value, float):
            if not math.isfinite(self.value):
                return _format_float(self.value)
            return f"{self.value:.{digits}f}"
        if isinstance(self.value, int):
            if digits == 0:
                return str(self.value)
            return f"{self.value}.{'0' * digits}"
        return None

    def fraction_digit_count(self) -> int:
        """Number of digits after the dot in a float, 0 otherwise."""
        if not isinstance(self.value, float):
            return 0
        text = _format_float(self.value)
        dot = text.find(".")
        if dot == -1:
            return 0
        return len(text) - (dot + 1)
