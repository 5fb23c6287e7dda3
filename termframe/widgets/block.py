"""A box border with an optional title."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..buffer import Buffer, Cell, char_width
from ..geometry import Rect
from ..style import Style
from .base import Widget


@dataclass
class Block(Widget):
    """A box drawn with line-drawing characters, titled on its top edge."""

    title: Optional[str] = None
    border_style: Style = field(default_factory=Style)

    def inner(self, area: Rect) -> Rect:
        """The area inside the border."""
        return Rect(
            x=area.x + 1,
            y=area.y + 1,
            width=max(0, area.width - 2),
            height=max(0, area.height - 2),
        )

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.width < 2 or area.height < 2:
            return

        style = self.border_style
        x0, y0 = area.x, area.y
        x1 = area.x + area.width - 1
        y1 = area.y + area.height - 1

        buf.set_cell(x0, y0, Cell("┌", style))
        buf.set_cell(x1, y0, Cell("┐", style))
        buf.set_cell(x0, y1, Cell("└", style))
        buf.set_cell(x1, y1, Cell("┘", style))

        for x in range(x0 + 1, x1):
            buf.set_cell(x, y0, Cell("─", style))
            buf.set_cell(x, y1, Cell("─", style))
        for y in range(y0 + 1, y1):
            buf.set_cell(x0, y, Cell("│", style))
            buf.set_cell(x1, y, Cell("│", style))

        if self.title is not None:
            x = x0 + 1
            for ch in self.title:
                w = char_width(ch)
                if x + w > x1:
                    break
                buf.set_cell(x, y0, Cell(ch, style))
                x += w