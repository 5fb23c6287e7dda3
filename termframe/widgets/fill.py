"""A solid box painted in one style."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..buffer import Buffer, Cell
from ..geometry import Rect
from ..style import Style
from .base import Widget


@dataclass
class Fill(Widget):
    """Covers its whole area with blank cells in ``style``."""

    style: Style = field(default_factory=Style)

    def render(self, area: Rect, buf: Buffer) -> None:
        cell = Cell(" ", self.style)
        for y in range(area.y, area.y + area.height):
            for x in range(area.x, area.x + area.width):
                buf.set_cell(x, y, cell)