"""Areas reserved by docks, as reported in strut properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from tilecore.geometry import Xyhw

if TYPE_CHECKING:
    from tilecore.screen import Screen

_ORDER = (
    "left",
    "right",
    "top",
    "bottom",
    "left_start_y",
    "left_end_y",
    "right_start_y",
    "right_end_y",
    "top_start_x",
    "top_end_x",
    "bottom_start_x",
    "bottom_end_x",
)


def _to_i32(value: int) -> int:
    return ((int(value) + 2**31) % 2**32) - 2**31


@dataclass
class DockArea:
    """Space a dock reserves on each edge of the combined screens."""

    top: int = 0
    top_start_x: int = 0
    top_end_x: int = 0

    bottom: int = 0
    bottom_start_x: int = 0
    bottom_end_x: int = 0

    right: int = 0
    right_start_y: int = 0
    right_end_y: int = 0

    left: int = 0
    left_start_y: int = 0
    left_end_y: int = 0

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> DockArea:
        """Build from the twelve values of a partial strut, in property order."""
        if len(values) < len(_ORDER):
            raise ValueError(
                f"a dock area needs {len(_ORDER)} values, got {len(values)}"
            )
        return cls(**{name: _to_i32(v) for name, v in zip(_ORDER, values)})

    def as_xyhw(
        self, screens_height: int, screens_width: int, screen: Screen
    ) -> Xyhw | None:
        """The reserved rectangle on ``screen``, or None if nothing is reserved."""
        box = screen.bbox
        if self.top > 0:
            return self.xyhw_from_top(box.y)
        if self.bottom > 0:
            return self.xyhw_from_bottom(screens_height, box.y + box.height)
        if self.left > 0:
            return self.xyhw_from_left(box.x)
        if self.right > 0:
            return self.xyhw_from_right(screens_width, box.x + box.width)
        return None

    def xyhw_from_top(self, screen_y: int) -> Xyhw:
        return Xyhw(
            x=self.top_start_x,
            y=screen_y,
            h=self.top - screen_y,
            w=self.top_end_x - self.top_start_x,
        )

    def xyhw_from_bottom(self, screens_height: int, screen_bottom: int) -> Xyhw:
        return Xyhw(
            x=self.bottom_start_x,
            y=screens_height - self.bottom,
            h=self.bottom - (screens_height - screen_bottom),
            w=self.bottom_end_x - self.bottom_start_x,
        )

    def xyhw_from_left(self, screen_x: int) -> Xyhw:
        return Xyhw(
            x=screen_x,
            y=self.left_start_y,
            h=self.left_end_y - self.left_start_y,
            w=self.left - screen_x,
        )

    def xyhw_from_right(self, screens_width: int, screen_right: int) -> Xyhw:
        return Xyhw(
            x=screens_width - self.right,
            y=self.right_start_y,
            h=self.right_end_y - self.right_start_y,
            w=self.right - (screens_width - screen_right),
        )