from tilecore.geometry import Xyhw
from tilecore.kinds import WindowHandle, WindowState, WindowType
from tilecore.spacing import Margins
from tilecore.window import Window
from tilecore.window_change import WindowChange
from tilecore.xyhw_change import XyhwChange

HANDLE = WindowHandle.mock(1)


def make_window():
    return Window(HANDLE)


def test_empty_change_reports_nothing():
    window = make_window()
    assert not WindowChange(HANDLE).update(window, None)
    assert window.name is None
    assert window.states == []


def test_urgent_change_and_repeat():
    window = make_window()
    change = WindowChange(HANDLE, urgent=True)
    assert change.update(window, None)
    assert window.urgent
    assert not change.update(window, None)


def test_name_change_and_repeat():
    window = make_window()
    change = WindowChange(HANDLE, name="term")
    assert change.update(window, None)
    assert window.name == "term"
    assert not change.update(window, None)


def test_clearing_absent_transient_counts_as_change():
    window = make_window()
    assert WindowChange(HANDLE, transient=None).update(window, None)
    assert window.transient is None


def test_transient_set():
    window = make_window()
    parent = WindowHandle.mock(2)
    assert WindowChange(HANDLE, transient=parent).update(window, None)
    assert window.transient == parent
    assert window.must_float()


def test_unmanaged_type_drops_border_and_margin():
    window = make_window()
    assert WindowChange(HANDLE, window_type=WindowType.DOCK).update(window, None)
    assert window.window_type is WindowType.DOCK
    assert window.border == 0
    assert window.margin == Margins.uniform(0)


def test_states_always_change():
    window = make_window()
    change = WindowChange(HANDLE, states=[WindowState.FULLSCREEN])
    assert change.update(window, None)
    assert window.is_fullscreen()
    assert change.update(window, None)


def test_requested_is_stored_without_reporting_change():
    window = make_window()
    requested = Xyhw(x=1, y=2, w=300, h=200)
    assert not WindowChange(HANDLE, requested=requested).update(window, None)
    assert window.requested == requested


def test_floating_change_is_centred_in_container():
    window = make_window()
    window.set_floating(True)
    container = Xyhw(x=0, y=0, w=1000, h=800)
    change = WindowChange(HANDLE, floating=XyhwChange(w=200, h=100))
    assert change.update(window, container)
    assert window.x() == 399
    assert window.y() == 349
    assert change.floating.x is None


def test_strut_change_sets_strut():
    window = make_window()
    assert WindowChange(HANDLE, strut=XyhwChange(h=25)).update(window, None)
    assert window.strut.h == 25