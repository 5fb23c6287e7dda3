"""Horizontal progress bar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..buffer import Buffer
from ..geometry import Rect
from ..style import Color, Span, Style
from .base import Widget
from .text import Text

FILL = "█"
EMPTY = "░"


@dataclass
class ProgressBar(Widget):
    """A bar rendered as ``[████░░░░] 50% (5/10)``.

    Without a ``total`` the label shows the item count instead.
    """

    current: int = 0
    total: Optional[int] = None

    def _label(self) -> str:
        if self.total is None:
            return f" {self.current} items"
        if self.total > 0:
            pct = self.current * 100 // self.total
            return f" {pct}% ({self.current}/{self.total})"
        return " 0% (0/0)"

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.width == 0 or area.height == 0:
            return

        label = self._label()
        bar_width = max(0, area.width - (2 + len(label)))

        if self.total is not None and self.total > 0 and bar_width > 0:
            fill_count = min(bar_width * self.current // self.total, bar_width)
        else:
            fill_count = 0
        empty_count = max(0, bar_width - fill_count)

        spans = []
        if bar_width > 0:
            spans += [
                Span.raw("["),
                Span.styled(FILL * fill_count, Style(fg=Color.GREEN)),
                Span.raw(EMPTY * empty_count),
                Span.raw("]"),
            ]
        spans.append(Span.raw(label))
        Text(spans).render(area, buf)