"""Managed windows and their geometry."""

from __future__ import annotations

import logging
import struct

from tilecore.geometry import Xyhw
from tilecore.kinds import WindowHandle, WindowState, WindowType
from tilecore.spacing import Margins

log = logging.getLogger(__name__)

_MIN_SIZE = 100


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scaled(amount: int, multiplier: float) -> int:
    """Scale a margin by a multiplier with single precision, truncating."""
    return int(_f32(_f32(float(amount)) * _f32(multiplier)))


class Window:
    """A window known to the manager, with its placement and state."""

    def __init__(
        self,
        handle: WindowHandle,
        name: str | None = None,
        pid: int | None = None,
    ) -> None:
        self.handle = handle
        self.transient: WindowHandle | None = None
        self._visible = False
        self.resizable = True
        self._is_floating = False
        self.force_float = False
        self._floating: Xyhw | None = None
        self.never_focus = False
        self.urgent = False
        self.debugging = False
        self.name = name
        self.legacy_name: str | None = None
        self.pid = pid
        self.window_type = WindowType.NORMAL
        self.tag: int | None = None
        self.border = 1
        self.margin = Margins.uniform(10)
        self.margin_multiplier = 1.0
        self.states: list[WindowState] = []
        self.requested: Xyhw | None = None
        self.normal = Xyhw()
        self.start_loc: Xyhw | None = None
        self.container_size: Xyhw | None = None
        self.strut: Xyhw | None = None
        self.res_name: str | None = None
        self.res_class: str | None = None

    def __repr__(self) -> str:
        return (
            f"Window(handle={self.handle!r}, name={self.name!r}, "
            f"type={self.window_type.name}, tag={self.tag!r})"
        )

    def set_visible(self, value: bool) -> None:
        self._visible = value

    def visible(self) -> bool:
        return self._visible or self.window_type in (
            WindowType.MENU,
            WindowType.SPLASH,
            WindowType.TOOLBAR,
        )

    def set_floating(self, value: bool) -> None:
        if not self._is_floating and value and self._floating is None:
            # Floating is relative to the normal position.
            self.reset_float_offset()
        self._is_floating = value

    def floating(self) -> bool:
        return self._is_floating or self.must_float()

    def get_floating_offsets(self) -> Xyhw | None:
        return None if self._floating is None else self._floating.copy()

    def reset_float_offset(self) -> None:
        offset = Xyhw()
        offset.clear_minmax()
        self._floating = offset

    def set_floating_offsets(self, value: Xyhw | None) -> None:
        if value is None:
            self._floating = None
            return
        offset = value.copy()
        offset.clear_minmax()
        self._floating = offset

    def set_floating_exact(self, value: Xyhw) -> None:
        offset = value - self.normal
        offset.clear_minmax()
        self._floating = offset

    def is_fullscreen(self) -> bool:
        return WindowState.FULLSCREEN in self.states

    def is_maximized(self) -> bool:
        return WindowState.MAXIMIZED in self.states

    def is_sticky(self) -> bool:
        return WindowState.STICKY in self.states

    def must_float(self) -> bool:
        return (
            self.force_float
            or self.transient is not None
            or not self.is_managed()
            or self.window_type is WindowType.SPLASH
        )

    def can_move(self) -> bool:
        return self.is_managed()

    def can_resize(self) -> bool:
        return self.resizable and self.is_managed()

    def can_focus(self) -> bool:
        return not self.never_focus and self.is_managed() and self.visible()

    def apply_margin_multiplier(self, value: float) -> None:
        self.margin_multiplier = _f32(abs(value))
        if value < 0:
            log.warning(
                "Negative margin multiplier detected. Will be applied as absolute: %s",
                self.margin_multiplier,
            )

    def _uses_float_offsets(self) -> bool:
        return self.floating() and self._floating is not None and not self.is_maximized()

    def _relative(self) -> Xyhw:
        return self.normal + (self._floating if self._floating is not None else Xyhw())

    def _apply_limit(self, value: int, requested_min: int | None) -> int:
        if requested_min is not None and requested_min > 0 and self.floating():
            limit = requested_min
        else:
            limit = _MIN_SIZE
        if value < limit and self.is_managed():
            return limit
        return value

    def width(self) -> int:
        if self.is_fullscreen():
            value = self.normal.w
        elif self._uses_float_offsets():
            value = self._relative().w - self.border * 2
        else:
            margins = self.margin.left + self.margin.right
            value = (
                self.normal.w
                - _scaled(margins, self.margin_multiplier)
                - self.border * 2
            )
        requested = self.requested.minw if self.requested is not None else None
        return self._apply_limit(value, requested)

    def height(self) -> int:
        if self.is_fullscreen():
            value = self.normal.h
        elif self._uses_float_offsets():
            value = self._relative().h - self.border * 2
        else:
            margins = self.margin.top + self.margin.bottom
            value = (
                self.normal.h
                - _scaled(margins, self.margin_multiplier)
                - self.border * 2
            )
        requested = self.requested.minh if self.requested is not None else None
        return self._apply_limit(value, requested)

    def effective_border(self) -> int:
        """The border width as drawn: none while fullscreen."""
        return 0 if self.is_fullscreen() else self.border

    def x(self) -> int:
        if self.is_fullscreen():
            return self.normal.x
        if self._uses_float_offsets():
            return self._relative().x
        return self.normal.x + _scaled(self.margin.left, self.margin_multiplier)

    def y(self) -> int:
        if self.is_fullscreen():
            return self.normal.y
        if self._uses_float_offsets():
            return self._relative().y
        return self.normal.y + _scaled(self.margin.top, self.margin_multiplier)

    def calculated_xyhw(self) -> Xyhw:
        return Xyhw(x=self.x(), y=self.y(), h=self.height(), w=self.width())

    def exact_xyhw(self) -> Xyhw:
        if self.floating() and self._floating is not None:
            return self.normal + self._floating
        return self.normal.copy()

    def contains_point(self, x: int, y: int) -> bool:
        return self.calculated_xyhw().contains_point(x, y)

    def tag_with(self, tag: int) -> None:
        self.tag = tag

    def has_tag(self, tag: int) -> bool:
        return tag is not None and self.tag == tag

    def untag(self) -> None:
        self.tag = None

    def is_managed(self) -> bool:
        return self.window_type not in (WindowType.DESKTOP, WindowType.DOCK)

    def is_normal(self) -> bool:
        return self.window_type is WindowType.NORMAL

    def snap_to_workspace(self, workspace) -> bool:
        """Tile the window on ``workspace``, moving it there if needed."""
        self.set_floating(False)

        if self.tag != workspace.tag:
            self.tag = workspace.tag
            area = workspace.xyhw

            offset = self.get_floating_offsets() or Xyhw()
            offset.x = offset.x + self.normal.x - area.x
            offset.y = offset.y + self.normal.y - area.y
            self.set_floating_offsets(offset)

            start = self.start_loc.copy() if self.start_loc is not None else Xyhw()
            start.x = start.x + self.normal.x - area.x
            start.y = start.y + self.normal.y - area.y
            self.start_loc = start
        return True