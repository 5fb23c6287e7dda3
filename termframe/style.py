"""Colours, text attributes and styled text spans."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union


class Color(enum.Enum):
    """A named terminal colour. ``RESET`` restores the terminal default."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class Rgb:
    """A full 24-bit colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))


@dataclass(frozen=True)
class Indexed:
    """An entry of the 256-colour palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)


AnyColor = Union[Color, Rgb, Indexed]


@dataclass(frozen=True)
class Style:
    """Text appearance applied to a cell or span.

    ``None`` colours inherit from whatever is beneath them.
    """

    fg: Optional[AnyColor] = None
    bg: Optional[AnyColor] = None
    bold: bool = False
    underline: bool = False
    italic: bool = False

    def patch(self, other: Style) -> Style:
        """Layer ``other`` on top: its set colours and true flags win."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
            underline=self.underline or other.underline,
            italic=self.italic or other.italic,
        )


@dataclass(frozen=True)
class Span:
    """A string fragment paired with a style."""

    content: str
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> Span:
        """A span with the default, unstyled appearance."""
        return cls(str(content), Style())

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        """A span carrying ``style``."""
        return cls(str(content), style)