import pytest

from tilecore.spacing import Gutter, Margins, Side, Size


def test_pixel_size_is_returned_as_is():
    assert Size.pixel(37).into_absolute(1000) == 37


def test_ratio_size_is_relative_to_whole():
    assert Size.ratio(0.5).into_absolute(200) == 100


def test_ratio_size_is_floored():
    assert Size.ratio(0.25).into_absolute(10) == 2


def test_ratio_of_one_is_whole():
    assert Size.ratio(1.0).into_absolute(777) == 777


def test_ratio_of_zero_is_zero_for_any_whole():
    assert {Size.ratio(0.0).into_absolute(w) for w in (1, 50, 9999)} == {0}


def test_size_kinds_differ():
    assert Size.pixel(1) != Size.ratio(1.0)
    assert Size.ratio(0.3).is_ratio is True
    assert Size.pixel(3).is_ratio is False


def test_margins_uniform():
    assert Margins.uniform(10) == Margins(top=10, right=10, bottom=10, left=10)


def test_margins_from_pair():
    m = Margins.from_pair(4, 7)
    assert (m.top, m.right, m.bottom, m.left) == (4, 7, 4, 7)


def test_margins_from_triple():
    m = Margins.from_triple(1, 2, 3)
    assert (m.top, m.right, m.bottom, m.left) == (1, 2, 3, 2)


def test_negative_margin_is_rejected():
    with pytest.raises(ValueError):
        Margins.uniform(-1)


def test_gutter_default():
    g = Gutter()
    assert (g.side, g.value, g.id) == (Side.TOP, 0, None)


def test_gutter_fields():
    g = Gutter(Side.LEFT, 12, 3)
    assert g == Gutter(side=Side.LEFT, value=12, id=3)


def test_gutters_sort_by_side_in_declared_order():
    gutters = [
        Gutter(Side.RIGHT, 4, None),
        Gutter(Side.TOP, 1, None),
        Gutter(Side.LEFT, 3, None),
        Gutter(Side.BOTTOM, 2, None),
    ]
    ordered = sorted(gutters, key=lambda g: g.side)
    assert [g.value for g in ordered] == [1, 2, 3, 4]
    assert [g.side for g in ordered] == [
        Side.TOP,
        Side.BOTTOM,
        Side.LEFT,
        Side.RIGHT,
    ]