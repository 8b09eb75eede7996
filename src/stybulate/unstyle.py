"""Text values that know how to drop their own styling.

A table measures every text value on its *unstyled* form and prints the
styled one, so each implementation must keep visible characters and line
breaks identical between ``str(value)`` and ``value.unstyle()``.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from stybulate.utils import strip_ansi

if TYPE_CHECKING:
    from rich.text import Text as _RichTextType


class Unstyle:
    """Base class for text that may carry invisible formatting.

    Subclasses implement ``__str__``; ``unstyle`` defaults to the identity
    and ``nb_of_lines`` counts embedded line breaks.
    """

    def unstyle(self) -> str:
        """Return the text without its style-related characters."""
        return str(self)

    def nb_of_lines(self) -> int:
        """Return the number of ``\\n``-separated lines."""
        return str(self).count("\n") + 1


@dataclass(frozen=True)
class PlainText(Unstyle):
    """A plain string, no styling."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class AsciiEscapedString(Unstyle):
    """A string with ANSI escape sequences embedded in it.

    Example::

        >>> s = AsciiEscapedString("This is \\x1b[1;31;44mbold red\\x1b[0m")
        >>> s.unstyle()
        'This is bold red'
    """

    text: str

    def __str__(self) -> str:
        return self.text

    def unstyle(self) -> str:
        return strip_ansi(self.text)


class RichText(Unstyle):
    """A ``rich.text.Text`` rendered to ANSI for table cells and headers.

    Raises:
        ImportError: If rich is not installed. The message includes the
            extra to install.
    """

    def __init__(self, text: _RichTextType, color_system: str = "standard") -> None:
        try:
            from rich.console import Console
        except ImportError as e:
            raise ImportError(
                "rich is required for RichText. "
                "Install with: pip install 'stybulate[rich]'"
            ) from e

        self._text = text
        console = Console(
            file=io.StringIO(),
            force_terminal=True,
            color_system=color_system,  # type: ignore[arg-type]
            highlight=False,
        )
        with console.capture() as capture:
            console.print(text, end="", soft_wrap=True)
        self._rendered = capture.get()

    @property
    def text(self) -> _RichTextType:
        return self._text

    def __str__(self) -> str:
        return self._rendered

    def __repr__(self) -> str:
        return f"RichText({self._text.plain!r})"

    def unstyle(self) -> str:
        return strip_ansi(self._rendered)


def to_unstylable(value: Any) -> Unstyle:
    """Wrap *value* as an ``Unstyle``; plain strings become ``PlainText``."""
    if isinstance(value, Unstyle):
        return value
    if isinstance(value, str):
        return PlainText(value)
    raise TypeError(f"Expected str or Unstyle, got {type(value).__name__}")
