"""An iterator wrapper that draws a live progress bar as a loop advances."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .terminal import Frame, TerminalHandle
from .widgets.progress_bar import ProgressBar

T = TypeVar("T")


def _draw(current: int, total: Optional[int]) -> Callable[[Frame], None]:
    def render(frame: Frame) -> None:
        frame.render(ProgressBar(current, total), frame.area)

    return render


class ProgressIter(Generic[T]):
    """Yields the items of an iterable while rendering a progress bar.

    The total is known when the iterable has a length. The bar is completed
    when iteration ends, when :meth:`close` is called, or when the ``with``
    block around it exits, even after an early ``break``.
    """

    def __init__(self, iterable: Iterable[T], handle: TerminalHandle) -> None:
        try:
            self.total: Optional[int] = len(iterable)  # type: ignore[arg-type]
        except TypeError:
            self.total = None
        self._inner: Iterator[T] = iter(iterable)
        self._handle = handle
        self.current = 0
        self._closed = False
        handle.render(_draw(0, self.total))

    def __iter__(self) -> ProgressIter[T]:
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        try:
            item = next(self._inner)
        except StopIteration:
            self.close()
            raise
        self.current += 1
        self._handle.render(_draw(self.current, self.total))
        return item

    def close(self) -> None:
        """Render the bar as complete. Further calls do nothing."""
        if self._closed:
            return
        self._closed = True
        final = self.total if self.total is not None else self.current
        self._handle.render(_draw(final, self.total))

    def __enter__(self) -> ProgressIter[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()


def with_progress(iterable: Iterable[T], handle: TerminalHandle) -> ProgressIter[T]:
    """Wrap ``iterable`` so that iterating it renders a progress bar to ``handle``."""
    return ProgressIter(iterable, handle)