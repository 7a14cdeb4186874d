import pytest

from tilecore.geometry import MAX_LIMIT, MIN_LIMIT, Xyhw


def test_center_halfed():
    a = Xyhw(x=10, y=10, w=2000, h=1000)
    assert a.center_halfed() == Xyhw(x=510, y=260, w=1000, h=500)


def test_without_should_trim_from_the_top():
    a = Xyhw(y=5, h=1000, w=1000)
    b = Xyhw(h=10, w=100)
    assert a.without(b) == Xyhw(x=0, y=10, h=995, w=1000)


def test_without_should_trim_from_the_left():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(h=100, w=10)
    assert a.without(b) == Xyhw(x=10, y=0, w=990, h=1000)


def test_without_should_trim_from_the_bottom():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(y=990, x=0, h=10, w=100)
    assert a.without(b) == Xyhw(x=0, y=0, h=990, w=1000)


def test_without_should_trim_from_the_right():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(x=990, y=0, h=100, w=10)
    assert a.without(b) == Xyhw(x=0, y=0, w=990, h=1000)


def test_without_leaves_original_untouched():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    a.without(Xyhw(x=990, y=0, h=100, w=10))
    assert a == Xyhw(x=0, y=0, h=1000, w=1000)


def test_contains_xyhw_should_detect_a_inner_window():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(x=100, y=100, h=800, w=800)
    assert a.contains_xyhw(b)


def test_contains_xyhw_should_detect_a_upper_left_corner_outside():
    a = Xyhw(x=100, y=100, h=800, w=800)
    b = Xyhw(x=0, y=0, h=200, w=200)
    assert not a.contains_xyhw(b)


def test_contains_xyhw_should_detect_a_lower_right_corner_outside():
    a = Xyhw(x=100, y=100, h=800, w=800)
    b = Xyhw(x=800, y=800, h=200, w=200)
    assert not a.contains_xyhw(b)


@pytest.mark.parametrize(
    "point, inside",
    [((0, 0), True), ((1000, 1000), True), ((1001, 5), False), ((5, -1), False)],
)
def test_contains_point_edges_are_inclusive(point, inside):
    assert Xyhw(x=0, y=0, h=1000, w=1000).contains_point(*point) is inside


def test_default_limits():
    box = Xyhw()
    assert (box.minw, box.maxw, box.minh, box.maxh) == (
        MIN_LIMIT,
        MAX_LIMIT,
        MIN_LIMIT,
        MAX_LIMIT,
    )


def test_size_is_clamped_to_limits():
    box = Xyhw(w=50, h=70, maxw=40, minh=80)
    assert box.w == 40
    assert box.h == 80


def test_setting_limit_clamps_existing_size():
    box = Xyhw(w=500, h=500)
    box.maxw = 300
    box.minh = 600
    assert (box.w, box.h) == (300, 600)


def test_add_and_sub_round_trip():
    a = Xyhw(x=3, y=4, h=5, w=6)
    b = Xyhw(x=10, y=20, h=30, w=40)
    assert (a + b) - b == a


def test_add_combines_limits():
    a = Xyhw(minw=5, maxw=100)
    b = Xyhw(minw=10, maxw=50)
    total = a + b
    assert (total.minw, total.maxw) == (10, 50)


def test_copy_is_independent():
    a = Xyhw(x=1, y=2, h=3, w=4)
    b = a.copy()
    b.x = 99
    assert a.x == 1
    assert b == Xyhw(x=99, y=2, h=3, w=4)


def test_center_of_box():
    assert Xyhw(x=10, y=10, w=2000, h=1000).center() == (1010, 510)


def test_center_relative_puts_box_in_middle_of_outer():
    outer = Xyhw(x=0, y=0, w=1000, h=1000)
    inner = Xyhw(w=200, h=200)
    inner.center_relative(outer, 0)
    assert inner.center() == outer.center()


def test_center_relative_subtracts_border():
    outer = Xyhw(x=0, y=0, w=1000, h=1000)
    plain = Xyhw(w=200, h=200)
    bordered = Xyhw(w=200, h=200)
    plain.center_relative(outer, 0)
    bordered.center_relative(outer, 5)
    assert (plain.x - bordered.x, plain.y - bordered.y) == (5, 5)


def test_volume_is_area():
    assert Xyhw(w=20, h=30).volume() == 600


def test_equality_rejects_other_types():
    assert (Xyhw() == (0, 0, 0, 0)) is False