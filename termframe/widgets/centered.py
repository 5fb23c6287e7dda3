"""Renders a child in the middle of the available area."""

from __future__ import annotations

from ..buffer import Buffer
from ..geometry import Rect
from .base import Widget


class Centered(Widget):
    """Centres its child using the child's natural size.

    A child without a natural size is rendered into the full area.
    """

    def __init__(self, child: Widget) -> None:
        self.child = child

    def render(self, area: Rect, buf: Buffer) -> None:
        size = self.child.natural_size()
        if size is None:
            target = area
        else:
            child_w, child_h = size
            target = Rect(
                x=area.x + max(0, area.width - child_w) // 2,
                y=area.y + max(0, area.height - child_h) // 2,
                width=min(child_w, area.width),
                height=min(child_h, area.height),
            )
        self.child.render(target, buf)