from termframe.buffer import Buffer
from termframe.geometry import Rect
from termframe.widgets.base import Widget
from termframe.widgets.padding import Padding
from termframe.widgets.text import Text


def rect(w, h):
    return Rect(0, 0, w, h)


class OneByOne(Widget):
    def render(self, area, buf):
        pass

    def natural_size(self):
        return (1, 1)


class NoSizeWidget(Widget):
    def render(self, area, buf):
        pass


class MaxSizeWidget(Widget):
    def render(self, area, buf):
        pass

    def natural_size(self):
        return (0xFFFF, 0xFFFF)


class Recorder(Widget):
    def __init__(self):
        self.areas = []

    def render(self, area, buf):
        self.areas.append(area)


def test_all_insets_uniformly():
    buf = Buffer(rect(10, 6))
    Padding.all(2, Text.raw("X")).render(rect(10, 6), buf)
    assert buf.get_cell(2, 2).ch == "X"
    assert buf.get_cell(0, 0).ch == " "
    assert buf.get_cell(1, 2).ch == " "


def test_axes_insets_independently():
    buf = Buffer(rect(14, 5))
    Padding.axes(3, 1, Text.raw("X")).render(rect(14, 5), buf)
    assert buf.get_cell(3, 1).ch == "X"
    assert buf.get_cell(0, 0).ch == " "
    assert buf.get_cell(2, 1).ch == " "


def test_per_side_padding_gives_expected_inner_area():
    rec = Recorder()
    Padding(0, 4, 2, 1, rec).render(rect(10, 6), Buffer(rect(10, 6)))
    assert rec.areas == [Rect(1, 0, 5, 4)]


def test_padding_larger_than_area_collapses_inner_area():
    a = rect(5, 5)
    buf = Buffer(a)
    rec = Recorder()
    Padding.all(100, rec).render(a, buf)
    Padding.all(100, Text.raw("X")).render(a, buf)
    assert rec.areas == [Rect(5, 5, 0, 0)]
    assert all(buf.get_cell(x, y).ch == " " for x in range(5) for y in range(5))


def test_natural_size_adds_padding_to_child_size():
    assert Padding.all(2, OneByOne()).natural_size() == (5, 5)


def test_natural_size_none_when_child_has_none():
    assert Padding.all(2, NoSizeWidget()).natural_size() is None


def test_natural_size_saturates_at_max():
    assert Padding.all(10, MaxSizeWidget()).natural_size() == (0xFFFF, 0xFFFF)


def test_render_respects_non_zero_area_origin():
    a = Rect(5, 3, 10, 6)
    buf = Buffer(a)
    Padding.all(2, Text.raw("X")).render(a, buf)
    assert buf.get_cell(7, 5).ch == "X"
    assert buf.get_cell(5, 3).ch == " "