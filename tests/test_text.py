from termframe.buffer import Buffer
from termframe.geometry import Rect
from termframe.style import Color, Span, Style
from termframe.widgets.text import Text


def area(w):
    return Rect(0, 0, w, 1)


def test_renders_plain_span():
    buf = Buffer(area(10))
    Text([Span.raw("hello")]).render(area(10), buf)
    assert buf.get_cell(0, 0).ch == "h"
    assert buf.get_cell(4, 0).ch == "o"
    assert buf.get_cell(5, 0).ch == " "


def test_clips_to_area_width():
    buf = Buffer(area(3))
    Text([Span.raw("hello")]).render(area(3), buf)
    assert buf.get_cell(2, 0).ch == "l"
    assert buf.get_cell(3, 0) is None


def test_multiple_spans_with_different_styles():
    red = Style(fg=Color.RED)
    buf = Buffer(area(10))
    Text([Span.raw("ab"), Span.styled("cd", red)]).render(area(10), buf)
    assert buf.get_cell(0, 0).ch == "a"
    assert buf.get_cell(2, 0).ch == "c"
    assert buf.get_cell(2, 0).style.fg == Color.RED
    assert buf.get_cell(0, 0).style.fg is None


def test_natural_size_sums_chars_across_spans():
    t = Text([Span.raw("hello"), Span.raw("world")])
    assert t.natural_size() == (10, 1)


def test_natural_size_of_empty_spans_is_zero_width():
    assert Text([]).natural_size() == (0, 1)


def test_natural_size_counts_display_columns_not_bytes():
    assert Text.raw("caf\u00e9").natural_size() == (4, 1)


def test_wide_char_at_area_right_edge_is_clipped():
    a = Rect(0, 0, 2, 1)
    buf = Buffer(a)
    Text.raw("a中").render(a, buf)
    assert buf.get_cell(0, 0).ch == "a"
    assert buf.get_cell(1, 0).ch == " "


def test_natural_size_counts_display_columns():
    assert Text.raw("中文").natural_size() == (4, 1)


def test_render_wide_text_correct_columns():
    a = Rect(0, 0, 6, 1)
    buf = Buffer(a)
    Text.raw("a中b").render(a, buf)
    assert buf.get_cell(0, 0).ch == "a"
    assert buf.get_cell(1, 0).ch == "中"
    assert buf.get_cell(2, 0).ch == "\0"
    assert buf.get_cell(3, 0).ch == "b"


def test_raw_has_default_style():
    t = Text.raw("hi")
    assert t.spans == (Span("hi", Style()),)


def test_renders_at_area_origin():
    a = Rect(3, 2, 5, 1)
    buf = Buffer(Rect(0, 0, 10, 4))
    Text.raw("ok").render(a, buf)
    assert buf.get_cell(3, 2).ch == "o"
    assert buf.get_cell(4, 2).ch == "k"
    assert buf.get_cell(0, 0).ch == " "