"""Vertical and horizontal layout containers."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..buffer import Buffer
from ..geometry import Rect
from ..layout import Constraint, solve
from .base import Widget
from .text import Text

Child = Tuple[Constraint, Widget]


class _Stack(Widget):
    def __init__(self, children: Iterable[Child] = ()) -> None:
        self.children: List[Child] = list(children)

    def _lengths(self, total: int) -> List[int]:
        return solve([constraint for constraint, _ in self.children], total)


class VStack(_Stack):
    """Lays out children top to bottom, each sized by its constraint."""

    def render(self, area: Rect, buf: Buffer) -> None:
        y = area.y
        for (_, child), height in zip(self.children, self._lengths(area.height)):
            if height > 0:
                child.render(Rect(area.x, y, area.width, height), buf)
            y += height


class HStack(_Stack):
    """Lays out children left to right, each sized by its constraint."""

    def render(self, area: Rect, buf: Buffer) -> None:
        x = area.x
        for (_, child), width in zip(self.children, self._lengths(area.width)):
            if width > 0:
                child.render(Rect(x, area.y, width, area.height), buf)
            x += width


def vstack(*args: str) -> VStack:
    """A vertical stack of plain-text lines, one row each."""
    return VStack((Constraint.fixed(1), Text.raw(line)) for line in args)


def hstack(*args: str) -> HStack:
    """A horizontal stack of plain-text columns sharing the width equally."""
    return HStack((Constraint.fill(), Text.raw(col)) for col in args)