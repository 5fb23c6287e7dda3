"""Animated spinner driven by the wall clock."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..buffer import Buffer
from ..geometry import Rect
from ..style import Span, Style
from .base import Widget
from .text import Text


class SpinnerStyle(enum.Enum):
    """Built-in frame sequences, each with its frame duration in milliseconds."""

    DOTS = (("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"), 80)
    LINE = (("-", "\\", "|", "/"), 120)
    ARC = (("◜", "◠", "◝", "◞", "◡", "◟"), 100)

    @property
    def frames(self) -> Tuple[str, ...]:
        return self.value[0]

    @property
    def frame_ms(self) -> int:
        return self.value[1]


@dataclass
class Spinner(Widget):
    """A stateless spinner whose frame is derived from the current time.

    Rendering it marks the buffer as animated so the frame gets redrawn.
    """

    spinner_style: SpinnerStyle = SpinnerStyle.DOTS
    style: Style = field(default_factory=Style)

    def render(self, area: Rect, buf: Buffer) -> None:
        buf.mark_animated()
        frames = self.spinner_style.frames
        ms = max(0, int(time.time() * 1000))
        frame = frames[(ms // self.spinner_style.frame_ms) % len(frames)]
        Text([Span.styled(frame, self.style)]).render(area, buf)

    def natural_size(self) -> Optional[Tuple[int, int]]:
        return 1, 1