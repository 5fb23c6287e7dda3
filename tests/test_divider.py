from termframe.buffer import Buffer, Cell
from termframe.geometry import Rect
from termframe.style import Style
from termframe.widgets.divider import Divider


def rect(w, h):
    return Rect(0, 0, w, h)


def test_horizontal_fills_row_with_dash():
    buf = Buffer(rect(5, 1))
    Divider().render(rect(5, 1), buf)
    assert [buf.get_cell(x, 0).ch for x in range(5)] == ["─"] * 5


def test_vertical_fills_column_with_pipe():
    buf = Buffer(rect(1, 5))
    Divider().render(rect(1, 5), buf)
    assert [buf.get_cell(0, y).ch for y in range(5)] == ["│"] * 5


def test_square_area_draws_horizontal():
    buf = Buffer(rect(4, 4))
    Divider().render(rect(4, 4), buf)
    assert buf.get_cell(0, 0).ch == "─"
    assert buf.get_cell(0, 1).ch == " "


def test_styled_applies_to_cells():
    style = Style(bold=True)
    buf = Buffer(rect(3, 1))
    Divider(style).render(rect(3, 1), buf)
    assert buf.get_cell(0, 0).style.bold
    assert buf.get_cell(2, 0).style.bold


def test_zero_width_draws_nothing():
    buf = Buffer(rect(1, 1))
    Divider().render(Rect(0, 0, 0, 1), buf)
    assert buf.get_cell(0, 0) == Cell()