from termframe.geometry import Rect


def test_rect_area():
    assert Rect(0, 0, 10, 5).area() == 50


def test_rect_zero_area():
    assert Rect(5, 5, 0, 10).area() == 0


def test_rect_inner_shrinks_by_margin():
    assert Rect(0, 0, 10, 6).inner(1) == Rect(1, 1, 8, 4)


def test_rect_inner_clamps_when_too_small():
    assert Rect(0, 0, 1, 1).inner(1) == Rect(1, 1, 0, 0)


def test_rect_inner_zero_margin_is_identity():
    r = Rect(3, 4, 7, 2)
    assert r.inner(0) == r


def test_rect_inner_large_margin_clamps_offset_to_size():
    assert Rect(2, 3, 4, 6).inner(10) == Rect(6, 9, 0, 0)