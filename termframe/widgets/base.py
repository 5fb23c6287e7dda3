"""The widget interface and helpers for sizing widgets inside stacks."""

from __future__ import annotations

import abc
from typing import Optional, Tuple

from ..buffer import Buffer
from ..geometry import Rect
from ..layout import Constraint

MAX_EXTENT = 0xFFFF
"""Largest width or height a widget can report."""


class Widget(abc.ABC):
    """Something that draws itself into a buffer within a given area.

    Writes outside the area are either clipped by the widget or ignored by the
    buffer. Widgets whose output changes over time should call
    :meth:`Buffer.mark_animated` while rendering.
    """

    @abc.abstractmethod
    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw into ``buf`` within ``area``."""

    def natural_size(self) -> Optional[Tuple[int, int]]:
        """The intrinsic ``(width, height)`` in cells, or ``None`` if the widget has none."""
        return None

    def fill(self) -> Tuple[Constraint, Widget]:
        """Pair with a constraint that shares the remaining space equally."""
        return Constraint.fill(), self

    def fixed(self, n: int) -> Tuple[Constraint, Widget]:
        """Pair with a constraint that takes exactly ``n`` rows or columns."""
        return Constraint.fixed(n), self

    def ratio(self, num: int, den: int) -> Tuple[Constraint, Widget]:
        """Pair with a constraint that takes ``num/den`` of the total space."""
        return Constraint.ratio(num, den), self