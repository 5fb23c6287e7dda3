"""Terminal setup, the background render loop, and the handle that feeds it."""

from __future__ import annotations

import os
import queue
import signal
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Tuple

from .buffer import CONTINUATION, Buffer
from .geometry import Rect
from .style import Color, Indexed, Rgb, Style
from .widgets.base import Widget

try:
    import termios
    import tty as _ttymod
except ImportError:  # pragma: no cover - platforms without termios
    termios = None
    _ttymod = None

CSI = "\x1b["
ENTER_ALTERNATE_SCREEN = CSI + "?1049h"
LEAVE_ALTERNATE_SCREEN = CSI + "?1049l"
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"
CLEAR_ALL = CSI + "2J"
RESET_COLOR = CSI + "0m"
TICK_INTERVAL = (1000 // 24) / 1000
_CTRL_C = b"\x03"

_NAMED_CODES = {
    Color.BLACK: 0,
    Color.RED: 1,
    Color.GREEN: 2,
    Color.YELLOW: 3,
    Color.BLUE: 4,
    Color.MAGENTA: 5,
    Color.CYAN: 6,
    Color.WHITE: 7,
    Color.BRIGHT_BLACK: 8,
    Color.BRIGHT_RED: 9,
    Color.BRIGHT_GREEN: 10,
    Color.BRIGHT_YELLOW: 11,
    Color.BRIGHT_BLUE: 12,
    Color.BRIGHT_MAGENTA: 13,
    Color.BRIGHT_CYAN: 14,
    Color.BRIGHT_WHITE: 15,
}

RenderFn = Callable[["Frame"], None]


@dataclass(frozen=True)
class _Render:
    fn: RenderFn


@dataclass(frozen=True)
class _Resize:
    width: int
    height: int


_TICK = object()
_SHUTDOWN = object()


def _move_to(x: int, y: int) -> str:
    return f"{CSI}{y + 1};{x + 1}H"


def _color_sgr(color, base: int) -> str:
    if color is Color.RESET:
        return f"{CSI}{base + 1}m"
    if isinstance(color, Rgb):
        return f"{CSI}{base};2;{color.r};{color.g};{color.b}m"
    if isinstance(color, Indexed):
        return f"{CSI}{base};5;{color.index}m"
    return f"{CSI}{base};5;{_NAMED_CODES[color]}m"


def _style_sequence(style: Style) -> str:
    parts = [RESET_COLOR]
    if style.fg is not None:
        parts.append(_color_sgr(style.fg, 38))
    if style.bg is not None:
        parts.append(_color_sgr(style.bg, 48))
    if style.bold:
        parts.append(CSI + "1m")
    if style.underline:
        parts.append(CSI + "4m")
    if style.italic:
        parts.append(CSI + "3m")
    return "".join(parts)


def render_diff(curr: Buffer, prev: Buffer) -> str:
    """Escape sequences that turn the screen showing ``prev`` into ``curr``.

    Continuation cells of double-width glyphs are skipped. Returns an empty
    string when the two buffers differ in size.
    """
    changes = curr.diff(prev)
    if changes is None:
        return ""
    parts = []
    for x, y, cell in changes:
        if cell.ch == CONTINUATION:
            continue
        parts.append(_move_to(x, y))
        parts.append(_style_sequence(cell.style))
        parts.append(cell.ch)
    parts.append(RESET_COLOR)
    return "".join(parts)


class Frame:
    """The drawing context handed to a render function for one frame."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self.buffer = Buffer(area)

    def render(self, widget: Widget, area: Rect) -> None:
        """Draw ``widget`` into ``area`` of this frame."""
        widget.render(area, self.buffer)


def _tick(commands: queue.SimpleQueue, stop: threading.Event) -> None:
    while not stop.is_set():
        commands.put(_TICK)
        stop.wait(TICK_INTERVAL)


class Terminal:
    """Owns the terminal: raw mode, the alternate screen and a hidden cursor.

    Call :meth:`run` to hand it over to a background render thread.
    """

    def __init__(
        self,
        writer: Optional[TextIO] = None,
        *,
        size: Optional[Tuple[int, int]] = None,
        raw_mode: bool = True,
    ) -> None:
        self.writer = writer if writer is not None else sys.stdout
        self._raw_mode = raw_mode
        self._fd: Optional[int] = None
        self._saved_mode = None
        if size is None:
            size = tuple(os.get_terminal_size(sys.stdout.fileno()))
        width, height = size
        self.area = Rect(0, 0, width, height)
        if raw_mode:
            self._enable_raw_mode()
        try:
            self.writer.write(ENTER_ALTERNATE_SCREEN + HIDE_CURSOR)
            self.writer.flush()
        except BaseException:
            self._restore_mode()
            raise

    def _enable_raw_mode(self) -> None:
        if termios is None:
            raise OSError("raw mode is not supported on this platform")
        fd = sys.stdin.fileno()
        try:
            saved = termios.tcgetattr(fd)
            _ttymod.setraw(fd)
        except termios.error as exc:
            raise OSError(*exc.args) from exc
        self._fd = fd
        self._saved_mode = saved

    def _restore_mode(self) -> None:
        if self._fd is None or self._saved_mode is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_mode)
        except (termios.error, OSError):
            pass
        self._saved_mode = None

    def _emit(self, text: str) -> None:
        try:
            self.writer.write(text)
            self.writer.flush()
        except (OSError, ValueError):
            pass

    def run(self) -> TerminalHandle:
        """Start the render thread (and, on a real terminal, input handling)."""
        commands: queue.SimpleQueue = queue.SimpleQueue()
        finished = threading.Event()
        render_thread = threading.Thread(
            target=self._render_loop, args=(commands, finished), daemon=True
        )
        render_thread.start()

        if self._fd is not None:
            threading.Thread(target=self._event_loop, args=(commands,), daemon=True).start()
            self._watch_resize(commands)

        return TerminalHandle(commands, render_thread, finished)

    def _watch_resize(self, commands: queue.SimpleQueue) -> None:
        if not hasattr(signal, "SIGWINCH"):
            return
        if threading.current_thread() is not threading.main_thread():
            return
        fd = self._fd

        def on_resize(signum, frame) -> None:
            try:
                width, height = os.get_terminal_size(fd)
            except OSError:
                return
            commands.put(_Resize(width, height))

        signal.signal(signal.SIGWINCH, on_resize)

    def _event_loop(self, commands: queue.SimpleQueue) -> None:
        while True:
            try:
                data = os.read(self._fd, 64)
            except OSError:
                return
            if not data:
                return
            if _CTRL_C in data:
                commands.put(_SHUTDOWN)
                return

    def _render_loop(self, commands: queue.SimpleQueue, finished: threading.Event) -> None:
        area = self.area
        prev = Buffer(area)
        draw: Optional[RenderFn] = None
        stop_ticks = threading.Event()
        ticking = False
        try:
            while True:
                cmd = commands.get()
                if cmd is _SHUTDOWN:
                    break
                if isinstance(cmd, _Render):
                    draw = cmd.fn
                elif isinstance(cmd, _Resize):
                    area = Rect(0, 0, cmd.width, cmd.height)
                    prev = Buffer(area)
                    self._emit(CLEAR_ALL + _move_to(0, 0))
                if draw is None:
                    continue
                frame = Frame(area)
                draw(frame)
                curr = frame.buffer
                if curr.animated and not ticking:
                    threading.Thread(
                        target=_tick, args=(commands, stop_ticks), daemon=True
                    ).start()
                    ticking = True
                self._emit(render_diff(curr, prev))
                prev = curr
        finally:
            stop_ticks.set()
            self._emit(LEAVE_ALTERNATE_SCREEN + SHOW_CURSOR)
            self._restore_mode()
            finished.set()


class TerminalHandle:
    """Sends render functions to the background render thread.

    ``finished`` is set once the render thread has restored the terminal.
    """

    def __init__(
        self,
        commands: queue.SimpleQueue,
        thread: threading.Thread,
        finished: threading.Event,
    ) -> None:
        self._commands = commands
        self._thread = thread
        self.finished = finished

    def render(self, fn: RenderFn) -> None:
        """Replace the current render function and redraw.

        The function is called again on every resize and animation tick.
        Ignored once the terminal has shut down.
        """
        if not self.finished.is_set():
            self._commands.put(_Render(fn))

    def shutdown(self) -> None:
        """Restore the terminal, stop the render thread and wait for it."""
        self._commands.put(_SHUTDOWN)
        if threading.current_thread() is not self._thread:
            self._thread.join()