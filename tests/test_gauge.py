from termframe.buffer import Buffer
from termframe.geometry import Rect
from termframe.style import Color, Style
from termframe.widgets.gauge import EMPTY, FILL, Gauge


def rect(w, h):
    return Rect(0, 0, w, h)


def rendered(value, fill_style, w, h):
    area = rect(w, h)
    buf = Buffer(area)
    Gauge(value, fill_style).render(area, buf)
    return buf


def all_cells(buf, w, h):
    return [buf.get_cell(x, y) for y in range(h) for x in range(w)]


def test_zero_area_writes_nothing():
    buf = Buffer(rect(1, 1))
    Gauge(0.5).render(Rect(0, 0, 0, 0), buf)
    assert buf.get_cell(0, 0).ch == " "


def test_zero_value_no_fill():
    buf = rendered(0.0, Style(), 30, 15)
    chars = [c.ch for c in all_cells(buf, 30, 15)]
    assert FILL not in chars
    assert EMPTY in chars


def test_full_value_no_empty_ring_cells():
    buf = rendered(1.0, Style(), 30, 15)
    chars = [c.ch for c in all_cells(buf, 30, 15)]
    assert FILL in chars
    assert EMPTY not in chars


def test_label_shows_percentage():
    buf = rendered(0.5, Style(), 30, 15)
    row = "".join(buf.get_cell(x, 7).ch for x in range(30))
    assert "%" in row
    assert row[13:16] == "50%"


def test_fill_style_applied_to_filled_cells():
    green = Style(fg=Color.GREEN)
    buf = rendered(1.0, green, 30, 15)
    filled = [c for c in all_cells(buf, 30, 15) if c.ch == FILL]
    assert filled
    assert all(c.style.fg == Color.GREEN for c in filled)


def test_value_is_clamped():
    assert Gauge(2.5).value == 1.0
    assert Gauge(-1.0).value == 0.0


def test_over_range_label_reads_hundred():
    buf = rendered(3.0, Style(), 30, 15)
    row = "".join(buf.get_cell(x, 7).ch for x in range(30))
    assert "100%" in row


def test_half_value_fills_right_side_only():
    buf = rendered(0.5, Style(), 30, 15)
    for y in range(15):
        for x in range(30):
            if buf.get_cell(x, y).ch == FILL:
                assert x >= 15