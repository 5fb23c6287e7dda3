"""Insets a child's render area."""

from __future__ import annotations

from typing import Optional, Tuple

from ..buffer import Buffer
from ..geometry import Rect
from .base import MAX_EXTENT, Widget


class Padding(Widget):
    """Renders its child inset by a given amount on each side."""

    def __init__(self, top: int, right: int, bottom: int, left: int, child: Widget) -> None:
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left
        self.child = child

    @classmethod
    def all(cls, amount: int, child: Widget) -> Padding:
        """The same padding on all four sides."""
        return cls(amount, amount, amount, amount, child)

    @classmethod
    def axes(cls, horizontal: int, vertical: int, child: Widget) -> Padding:
        """Separate left/right and top/bottom padding."""
        return cls(vertical, horizontal, vertical, horizontal, child)

    def render(self, area: Rect, buf: Buffer) -> None:
        inner = Rect(
            x=area.x + min(self.left, area.width),
            y=area.y + min(self.top, area.height),
            width=max(0, area.width - (self.left + self.right)),
            height=max(0, area.height - (self.top + self.bottom)),
        )
        self.child.render(inner, buf)

    def natural_size(self) -> Optional[Tuple[int, int]]:
        size = self.child.natural_size()
        if size is None:
            return None
        w, h = size
        return (
            min(w + self.left + self.right, MAX_EXTENT),
            min(h + self.top + self.bottom, MAX_EXTENT),
        )