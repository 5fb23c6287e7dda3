"""Rows of styled-span cells laid out in a column grid."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, List, Optional, Sequence, Tuple

from ..buffer import Buffer, Cell, char_width
from ..geometry import Rect
from ..layout import Constraint, solve
from ..style import Color, Span, Style
from .base import Widget

_HEADER_STYLE = Style(bold=True)


class Row:
    """One data row; each cell is a sequence of spans."""

    def __init__(self, cells: Iterable[Iterable[Span]] = ()) -> None:
        self.cells: Tuple[Tuple[Span, ...], ...] = tuple(tuple(cell) for cell in cells)

    def __repr__(self) -> str:
        return f"Row({list(map(list, self.cells))!r})"


def _clip(text: str, width: int) -> str:
    """The longest prefix of ``text`` that fits in ``width`` columns."""
    used = 0
    kept = []
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        kept.append(ch)
        used += w
    return "".join(kept)


class Table(Widget):
    """Tabular data in a column grid.

    Column widths come from ``column_constraints``. Optional ``headers`` are
    drawn in bold on the first row. The row at index ``selected`` is drawn
    with ``highlight_style`` layered over its spans and across the full width.
    """

    def __init__(
        self,
        column_constraints: Sequence[Constraint],
        rows: Iterable[Row] = (),
        headers: Optional[Sequence[str]] = None,
        selected: Optional[int] = None,
        highlight_style: Style = Style(bg=Color.BLUE),
    ) -> None:
        self.column_constraints: List[Constraint] = list(column_constraints)
        self.rows: List[Row] = list(rows)
        self.headers: Optional[List[str]] = None if headers is None else list(headers)
        self.selected = selected
        self.highlight_style = highlight_style

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.width == 0 or area.height == 0:
            return

        col_widths = solve(self.column_constraints, area.width)
        col_xs = list(accumulate(col_widths[:-1], initial=area.x)) if col_widths else []
        bottom = area.y + area.height
        row_y = area.y

        if self.headers is not None and row_y < bottom:
            for header, x, width in zip(self.headers, col_xs, col_widths):
                buf.set_str(x, row_y, _clip(header, width), _HEADER_STYLE)
            row_y += 1

        for row_idx, row in enumerate(self.rows):
            if row_y >= bottom:
                break
            is_selected = self.selected == row_idx
            if is_selected:
                buf.set_str(area.x, row_y, " " * area.width, self.highlight_style)

            for x_start, width, spans in zip(col_xs, col_widths, row.cells):
                self._render_cell(buf, row_y, x_start, x_start + width, spans, is_selected)

            row_y += 1

    def _render_cell(
        self,
        buf: Buffer,
        y: int,
        x_start: int,
        x_limit: int,
        spans: Sequence[Span],
        is_selected: bool,
    ) -> None:
        x = x_start
        for span in spans:
            style = span.style.patch(self.highlight_style) if is_selected else span.style
            for ch in span.content:
                w = char_width(ch)
                if x + w > x_limit:
                    return
                buf.set_cell(x, y, Cell(ch, style))
                x += w