from unittest.mock import patch

import pytest

from termframe.buffer import Buffer
from termframe.geometry import Rect
from termframe.style import Style
from termframe.widgets.spinner import Spinner, SpinnerStyle


def rect(w, h):
    return Rect(0, 0, w, h)


def test_renders_a_frame_character_from_dots():
    buf = Buffer(rect(1, 1))
    Spinner(SpinnerStyle.DOTS, Style()).render(rect(1, 1), buf)
    assert buf.get_cell(0, 0).ch in SpinnerStyle.DOTS.frames


@pytest.mark.parametrize("spinner_style", list(SpinnerStyle))
def test_all_styles_render_a_frame(spinner_style):
    buf = Buffer(rect(2, 1))
    Spinner(spinner_style, Style()).render(rect(2, 1), buf)
    assert buf.get_cell(0, 0).ch in spinner_style.frames


def test_style_is_applied_to_rendered_cell():
    buf = Buffer(rect(1, 1))
    Spinner(SpinnerStyle.LINE, Style(bold=True)).render(rect(1, 1), buf)
    assert buf.get_cell(0, 0).style.bold


def test_natural_size_is_one_by_one():
    assert Spinner(SpinnerStyle.DOTS, Style()).natural_size() == (1, 1)


def test_render_marks_buffer_animated():
    buf = Buffer(rect(1, 1))
    assert buf.animated is False
    Spinner(SpinnerStyle.ARC, Style()).render(rect(1, 1), buf)
    assert buf.animated is True


@pytest.mark.parametrize(
    "seconds, expected",
    [(0.0, "⣾"), (0.08, "⣽"), (0.16, "⣻"), (0.64, "⣾")],
)
def test_frame_follows_clock(seconds, expected):
    buf = Buffer(rect(1, 1))
    with patch("time.time", return_value=seconds):
        Spinner(SpinnerStyle.DOTS, Style()).render(rect(1, 1), buf)
    assert buf.get_cell(0, 0).ch == expected


def test_line_frame_duration():
    buf = Buffer(rect(1, 1))
    with patch("time.time", return_value=0.25):
        Spinner(SpinnerStyle.LINE, Style()).render(rect(1, 1), buf)
    assert buf.get_cell(0, 0).ch == "|"