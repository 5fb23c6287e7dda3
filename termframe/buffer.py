"""A 2D grid of cells that widgets render into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from wcwidth import wcwidth

from .geometry import Rect
from .style import Style

CONTINUATION = "\0"


def char_width(ch: str) -> int:
    """Display width of ``ch`` for cursor advancement: always 1 or 2."""
    return 2 if wcwidth(ch) == 2 else 1


@dataclass(frozen=True)
class Cell:
    """One terminal position: a glyph and its style."""

    ch: str = " "
    style: Style = field(default_factory=Style)


class Buffer:
    """A grid of cells covering a rect, addressed in absolute coordinates."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._cells: List[Cell] = [Cell()] * area.area()
        self.animated = False

    def mark_animated(self) -> None:
        """Flag the frame as needing periodic redraws."""
        self.animated = True

    def _index(self, x: int, y: int) -> Optional[int]:
        rx = x - self.area.x
        ry = y - self.area.y
        if not (0 <= rx < self.area.width and 0 <= ry < self.area.height):
            return None
        return ry * self.area.width + rx

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """The cell at ``(x, y)``, or ``None`` outside the buffer."""
        index = self._index(x, y)
        return None if index is None else self._cells[index]

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Write ``cell`` at ``(x, y)``; out-of-bounds writes are ignored.

        A double-width glyph also writes a continuation sentinel at ``(x + 1, y)``.
        """
        index = self._index(x, y)
        if index is None:
            return
        self._cells[index] = cell
        if char_width(cell.ch) == 2:
            cont = self._index(x + 1, y)
            if cont is not None:
                self._cells[cont] = Cell(CONTINUATION, cell.style)

    def set_str(self, x: int, y: int, text: str, style: Style) -> None:
        """Write ``text`` left to right from ``(x, y)`` in a single style."""
        for ch in text:
            self.set_cell(x, y, Cell(ch, style))
            x += char_width(ch)

    def diff(self, prev: Buffer) -> Optional[List[Tuple[int, int, Cell]]]:
        """Cells that differ from ``prev`` as ``(x, y, cell)``.

        Returns ``None`` when the two buffers differ in size.
        """
        if self.area.width != prev.area.width or self.area.height != prev.area.height:
            return None
        changes = []
        for i, (cell, old) in enumerate(zip(self._cells, prev._cells)):
            if cell != old:
                row, col = divmod(i, self.area.width)
                changes.append((self.area.x + col, self.area.y + row, cell))
        return changes