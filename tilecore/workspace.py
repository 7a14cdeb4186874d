"""Workspaces: the areas of the screen that display one tag."""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

from tilecore.geometry import Xyhw
from tilecore.spacing import Gutter, Margins, Side

if TYPE_CHECKING:
    from tilecore.screen import BBox
    from tilecore.window import Window


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scaled(multiplier: float, amount: float) -> int:
    """Multiply in single precision and truncate toward zero."""
    return int(_f32(_f32(multiplier) * _f32(amount)))


class Workspace:
    """A division of the screen showing one tag. Ids start at 1."""

    def __init__(self, bbox: BBox, id: int) -> None:
        self.tag: int | None = None
        self.margin = Margins.uniform(10)
        self.margin_multiplier = 1.0
        self.gutters: list[Gutter] = []
        self.avoid: list[Xyhw] = []
        self.xyhw = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)
        self.xyhw_avoided = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)
        self.id = id

    def __repr__(self) -> str:
        return (
            f"Workspace {{ id: {self.id}, tags: {self.tag!r}, "
            f"x: {self.xyhw.x}, y: {self.xyhw.y} }}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Workspace):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def select_gutters(self, gutters: list[Gutter]) -> list[Gutter]:
        """Pick the gutters that apply here, one per side, and use them.

        Gutters for this workspace's id win over gutters without an id.
        """
        selected: list[Gutter] = []
        for gutter in gutters:
            if gutter.id is not None and gutter.id != self.id:
                continue
            existing = next(
                (i for i, g in enumerate(selected) if g.side == gutter.side), None
            )
            if existing is None:
                selected.append(gutter)
            elif selected[existing].id is None:
                selected[existing] = gutter
        self.gutters = selected
        return selected

    def show_tag(self, tag: int) -> None:
        self.tag = tag

    def contains_point(self, x: int, y: int) -> bool:
        return self.xyhw.contains_point(x, y)

    def has_tag(self, tag: int) -> bool:
        return tag is not None and self.tag == tag

    def is_displaying(self, window: Window) -> bool:
        """Whether the window is on the tag this workspace shows."""
        if window.tag is None:
            return False
        return self.has_tag(window.tag)

    def is_managed(self, window: Window) -> bool:
        """Whether this workspace places the window."""
        return self.is_displaying(window) and window.is_managed()

    def _gutter(self, side: Side) -> int:
        return next((g.value for g in self.gutters if g.side == side), 0)

    def x(self) -> int:
        """Left edge inside margins and gutters, ignoring any max window width."""
        return (
            self.xyhw_avoided.x
            + _scaled(self.margin_multiplier, float(self.margin.left))
            + self._gutter(Side.LEFT)
        )

    def y(self) -> int:
        return (
            self.xyhw_avoided.y
            + _scaled(self.margin_multiplier, float(self.margin.top))
            + self._gutter(Side.TOP)
        )

    def height(self) -> int:
        margins = _f32(_f32(float(self.margin.top)) + _f32(float(self.margin.bottom)))
        gutter = self._gutter(Side.TOP) + self._gutter(Side.BOTTOM)
        return self.xyhw_avoided.h - _scaled(self.margin_multiplier, margins) - gutter

    def width(self) -> int:
        """Width inside margins and gutters, ignoring any max window width."""
        margins = _f32(_f32(float(self.margin.left)) + _f32(float(self.margin.right)))
        gutter = self._gutter(Side.LEFT) + self._gutter(Side.RIGHT)
        return self.xyhw_avoided.w - _scaled(self.margin_multiplier, margins) - gutter

    def center_halfed(self) -> Xyhw:
        return self.xyhw_avoided.center_halfed()

    def update_avoided_areas(self) -> None:
        """Recompute the usable area by trimming every area to avoid."""
        area = self.xyhw.copy()
        for other in self.avoid:
            area = area.without(other)
        self.xyhw_avoided = area