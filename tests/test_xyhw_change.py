from tilecore.geometry import Xyhw
from tilecore.kinds import WindowHandle
from tilecore.window import Window
from tilecore.xyhw_change import XyhwChange


def test_from_xyhw_round_trip():
    source = Xyhw(x=7, y=8, w=100, h=50, maxw=150)
    change = XyhwChange.from_xyhw(source)
    target = Xyhw()
    assert change.update(target)
    assert target == source


def test_empty_change_does_nothing():
    target = Xyhw(x=1, y=2, w=3, h=4)
    before = target.copy()
    assert not XyhwChange().update(target)
    assert target == before


def test_same_values_report_no_change():
    target = Xyhw(x=1, y=2, w=3, h=4)
    assert not XyhwChange.from_xyhw(target).update(target)


def test_limit_clamps_size():
    target = Xyhw(w=100, h=100)
    assert XyhwChange(maxw=50).update(target)
    assert target.w == 50
    assert target.maxw == 50


def test_floating_update_ignored_for_tiled_window():
    window = Window(WindowHandle.mock(1))
    assert not XyhwChange(x=300).update_window_floating(window)
    assert window.get_floating_offsets() is None


def test_floating_update_moves_floating_window():
    window = Window(WindowHandle.mock(1))
    window.normal = Xyhw(x=10, y=10, w=400, h=300)
    window.set_floating(True)
    assert XyhwChange(x=300, y=200).update_window_floating(window)
    assert window.x() == 300
    assert window.y() == 200


def test_strut_created_when_missing():
    window = Window(WindowHandle.mock(1))
    assert XyhwChange().update_window_strut(window)
    assert window.strut == Xyhw()


def test_strut_update_and_repeat():
    window = Window(WindowHandle.mock(1))
    change = XyhwChange(h=30, w=1920)
    assert change.update_window_strut(window)
    assert window.strut.h == 30
    assert window.strut.w == 1920
    assert not change.update_window_strut(window)