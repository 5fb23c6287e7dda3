"""Single-line styled text."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from ..buffer import Buffer, Cell, char_width
from ..geometry import Rect
from ..style import Span, Style
from .base import MAX_EXTENT, Widget


class Text(Widget):
    """One line of styled text made of spans.

    Content wider than the area is clipped. Newlines are not interpreted; stack
    several ``Text`` widgets for multi-line output.
    """

    def __init__(self, spans: Iterable[Span] = ()) -> None:
        self.spans = tuple(spans)

    @classmethod
    def raw(cls, content: str) -> Text:
        """Unstyled text from a single string."""
        return cls([Span.raw(content)])

    def _glyphs(self) -> Iterator[Tuple[str, Style]]:
        for span in self.spans:
            for ch in span.content:
                yield ch, span.style

    def render(self, area: Rect, buf: Buffer) -> None:
        x = area.x
        right = area.x + area.width
        for ch, style in self._glyphs():
            w = char_width(ch)
            if x + w > right:
                break
            buf.set_cell(x, area.y, Cell(ch, style))
            x += w

    def natural_size(self) -> Optional[Tuple[int, int]]:
        total = sum(char_width(ch) for ch, _ in self._glyphs())
        return min(total, MAX_EXTENT), 1