"""Ring gauge that fills clockwise from the top."""

from __future__ import annotations

import math

from ..buffer import Buffer, Cell
from ..geometry import Rect
from ..style import Style
from .base import Widget

FILL = "█"
EMPTY = "░"
INNER_RATIO = 0.65


class Gauge(Widget):
    """An elliptical ring filled clockwise from the top by ``value`` (0.0 to 1.0).

    A percentage label is drawn over the middle row.
    """

    def __init__(self, value: float, fill_style: Style = Style()) -> None:
        self.value = min(max(float(value), 0.0), 1.0)
        self.fill_style = fill_style

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.width == 0 or area.height == 0:
            return

        half_w = area.width / 2.0
        half_h = area.height / 2.0
        cx = area.x + half_w
        cy = area.y + half_h
        filled_angle = self.value * 2.0 * math.pi
        empty_cell = Cell(EMPTY, Style())
        fill_cell = Cell(FILL, self.fill_style)

        for row in range(area.y, area.y + area.height):
            for col in range(area.x, area.x + area.width):
                # Sample the centre of each cell; rows are about twice as tall as columns.
                dx = (col + 0.5 - cx) / half_w
                dy = (row + 0.5 - cy) / half_h * 2.0
                d = math.hypot(dx, dy)
                if not INNER_RATIO <= d <= 1.0:
                    continue

                angle = math.atan2(dx, -dy)
                if angle < 0.0:
                    angle += 2.0 * math.pi

                buf.set_cell(col, row, fill_cell if angle < filled_angle else empty_cell)

        label = f"{int(self.value * 100.0)}%"
        offset = max(0, area.width - len(label)) // 2
        buf.set_str(area.x + offset, area.y + area.height // 2, label, Style())