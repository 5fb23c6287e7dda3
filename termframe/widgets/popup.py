"""A background widget with an overlay centred on top."""

from __future__ import annotations

from ..buffer import Buffer
from ..geometry import Rect
from .base import Widget

_DEFAULT_PERCENT = 20


class Popup(Widget):
    """Renders ``background`` into the full area, then ``overlay`` centred over it.

    The overlay rect is at least 20 % of the area in each dimension. It grows
    to fit the overlay's natural size when that is larger, but never exceeds
    the area.
    """

    def __init__(self, background: Widget, overlay: Widget) -> None:
        self.background = background
        self.overlay = overlay

    def render(self, area: Rect, buf: Buffer) -> None:
        self.background.render(area, buf)

        if area.width == 0 or area.height == 0:
            return

        default_w = max(1, area.width * _DEFAULT_PERCENT // 100)
        default_h = max(1, area.height * _DEFAULT_PERCENT // 100)

        size = self.overlay.natural_size()
        if size is None:
            popup_w, popup_h = default_w, default_h
        else:
            popup_w, popup_h = max(size[0], default_w), max(size[1], default_h)

        popup_w = min(popup_w, area.width)
        popup_h = min(popup_h, area.height)

        self.overlay.render(
            Rect(
                x=area.x + (area.width - popup_w) // 2,
                y=area.y + (area.height - popup_h) // 2,
                width=popup_w,
                height=popup_h,
            ),
            buf,
        )