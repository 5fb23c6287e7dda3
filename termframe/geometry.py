"""Rectangular regions of the terminal, in cell coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangular region of the terminal, in cell coordinates."""

    x: int
    y: int
    width: int
    height: int

    def area(self) -> int:
        """Total number of cells covered by this rect."""
        return self.width * self.height

    def inner(self, margin: int) -> Rect:
        """Shrink the rect by ``margin`` on all four sides, clamping at zero."""
        return Rect(
            x=self.x + min(margin, self.width),
            y=self.y + min(margin, self.height),
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )