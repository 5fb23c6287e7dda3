"""A horizontal or vertical rule."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..buffer import Buffer, Cell
from ..geometry import Rect
from ..style import Style
from .base import Widget


@dataclass
class Divider(Widget):
    """A rule spanning its area.

    Horizontal (``─``) on the first row when ``width >= height``, otherwise
    vertical (``│``) in the first column.
    """

    style: Style = field(default_factory=Style)

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.width == 0 or area.height == 0:
            return
        if area.width >= area.height:
            cell = Cell("─", self.style)
            for x in range(area.x, area.x + area.width):
                buf.set_cell(x, area.y, cell)
        else:
            cell = Cell("│", self.style)
            for y in range(area.y, area.y + area.height):
                buf.set_cell(area.x, y, cell)