"""A widget framed by a block border."""

from __future__ import annotations

from typing import Optional, Tuple

from ..buffer import Buffer
from ..geometry import Rect
from .base import MAX_EXTENT, Widget
from .block import Block


class Bordered(Widget):
    """Draws a block border, then the child inside it."""

    def __init__(self, block: Block, child: Widget) -> None:
        self.block = block
        self.child = child

    def render(self, area: Rect, buf: Buffer) -> None:
        inner = self.block.inner(area)
        self.block.render(area, buf)
        self.child.render(inner, buf)

    def natural_size(self) -> Optional[Tuple[int, int]]:
        size = self.child.natural_size()
        if size is None:
            return None
        w, h = size
        return min(w + 2, MAX_EXTENT), min(h + 2, MAX_EXTENT)