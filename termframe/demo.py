"""Demonstration screens: a stats dashboard, a table, a layout and a progress bar."""

from __future__ import annotations

import argparse
from typing import Callable, List, Optional, Sequence

from .layout import Constraint
from .progress import with_progress
from .style import Color, Span, Style
from .terminal import Frame, Terminal, TerminalHandle
from .widgets.base import Widget
from .widgets.block import Block
from .widgets.bordered import Bordered
from .widgets.stack import HStack, VStack
from .widgets.table import Row, Table
from .widgets.text import Text

DEMOS = ("stats", "table", "layout", "progress")

RenderFn = Callable[[Frame], None]


def _core_panel(name: str, cpu: int, mem: int, mem_color: Color) -> Widget:
    return Bordered(
        Block(title=name),
        VStack(
            [
                Text.raw(f"CPU: {cpu}%").fixed(1),
                Text([Span.raw("MEM: "), Span.styled(f"{mem}%", Style(fg=mem_color))]).fixed(1),
            ]
        ),
    )


def stats_view(cpu: int, mem: int) -> RenderFn:
    """A dashboard with two core panels showing ``cpu`` and ``mem`` percentages."""

    def draw(frame: Frame) -> None:
        block = Block(title="Stats")
        inner = block.inner(frame.area)
        frame.render(block, frame.area)
        frame.render(
            HStack(
                [
                    _core_panel("Core 0", cpu, mem, Color.RED).fill(),
                    _core_panel("Core 1", cpu, mem, Color.BLUE).fill(),
                ]
            ),
            inner,
        )

    return draw


def table_view() -> RenderFn:
    """A staff table with a bold header, coloured statuses and row 1 selected."""
    green = Style(fg=Color.GREEN)
    red = Style(fg=Color.RED)
    yellow = Style(fg=Color.YELLOW)
    people = [
        ("alice", "Platform Engineer", "active", green),
        ("bob", "Product Manager", "active", green),
        ("carol", "Designer", "away", yellow),
        ("dave", "Backend Engineer", "offline", red),
    ]

    def draw(frame: Frame) -> None:
        rows = [
            Row([[Span.raw(name)], [Span.raw(role)], [Span.styled(status, style)]])
            for name, role, status, style in people
        ]
        table = Table(
            [Constraint.fixed(10), Constraint.fill(), Constraint.fixed(8)],
            rows,
            headers=["Name", "Role", "Status"],
            selected=1,
        )
        frame.render(table, frame.area)

    return draw


def layout_view() -> RenderFn:
    """Three bordered bands sized by fixed, ratio and fill constraints."""

    def draw(frame: Frame) -> None:
        frame.render(
            VStack(
                [
                    Bordered(
                        Block(title="Fixed(3)"),
                        Text.raw("This band is always 3 rows tall."),
                    ).fixed(3),
                    Bordered(
                        Block(title="Ratio(1,3)"),
                        HStack(
                            [
                                Text.raw("left column").fill(),
                                Text.raw("right column").fill(),
                            ]
                        ),
                    ).ratio(1, 3),
                    Bordered(
                        Block(title="Fill"),
                        Text.raw("This band fills whatever is left."),
                    ).fill(),
                ]
            ),
            frame.area,
        )

    return draw


def _run_stats(handle: TerminalHandle) -> None:
    cpu, mem = 0, 100
    while True:
        handle.render(stats_view(cpu, mem))
        if handle.finished.wait(0.5):
            return
        cpu += 1
        mem = max(0, mem - 1)


def _run_progress(handle: TerminalHandle) -> None:
    with with_progress(range(1, 101), handle) as items:
        for _ in items:
            if handle.finished.wait(0.05):
                return
    handle.finished.wait(0.5)


def _run_static(handle: TerminalHandle, draw: RenderFn) -> None:
    handle.render(draw)
    handle.finished.wait()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show one of the demo screens until Ctrl-C (or, for progress, until done)."""
    parser = argparse.ArgumentParser(
        prog="termframe-demo", description="Show a demonstration screen."
    )
    parser.add_argument("demo", choices=DEMOS, help="which screen to show")
    args = parser.parse_args(argv)

    handle = Terminal().run()
    try:
        if args.demo == "stats":
            _run_stats(handle)
        elif args.demo == "progress":
            _run_progress(handle)
        elif args.demo == "table":
            _run_static(handle, table_view())
        else:
            _run_static(handle, layout_view())
    finally:
        handle.shutdown()
    return 0