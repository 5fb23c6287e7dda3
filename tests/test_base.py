import pytest

from termframe.buffer import Buffer, Cell
from termframe.geometry import Rect
from termframe.layout import Constraint, ConstraintKind
from termframe.widgets.base import Widget


class Marker(Widget):
    def render(self, area, buf):
        buf.set_cell(area.x, area.y, Cell("M"))


def test_widget_is_abstract():
    with pytest.raises(TypeError):
        Widget()


def test_default_natural_size_is_none():
    assert Widget.natural_size(Marker()) is None


def test_fill_pairs_widget_with_fill_constraint():
    w = Marker()
    constraint, child = w.fill()
    assert constraint == Constraint.fill()
    assert constraint.kind is ConstraintKind.FILL
    assert child is w


def test_fixed_pairs_widget_with_fixed_constraint():
    w = Marker()
    constraint, child = w.fixed(3)
    assert constraint == Constraint.fixed(3)
    assert child is w


def test_ratio_pairs_widget_with_ratio_constraint():
    w = Marker()
    constraint, child = w.ratio(1, 3)
    assert constraint == Constraint.ratio(1, 3)
    assert child is w


def test_subclass_render_writes_to_buffer():
    area = Rect(2, 1, 4, 3)
    buf = Buffer(area)
    Marker().render(area, buf)
    assert buf.get_cell(2, 1).ch == "M"
    assert buf.get_cell(3, 1).ch == " "