"""Scratchpads: floating windows summoned on demand."""

from __future__ import annotations

from dataclasses import dataclass

from tilecore.geometry import Xyhw
from tilecore.spacing import Size, _f32


def sane_dimension(config_value: Size | None, default_ratio: float, max_pixel: int) -> int:
    """Turn a configured size into pixels, falling back to ``default_ratio``.

    Ratios must lie in 0..1 and pixel values in 0..max_pixel to be used.
    """
    if config_value is not None:
        if config_value.is_ratio:
            if 0.0 <= _f32(config_value.value) <= 1.0:
                return config_value.into_absolute(max_pixel)
        elif 0 <= config_value.value <= max_pixel:
            return int(config_value.value)
    return Size.ratio(default_ratio).into_absolute(max_pixel)


@dataclass
class ScratchPad:
    """A named scratchpad with the command that starts it and its placement."""

    name: str
    value: str
    x: Size | None = None
    y: Size | None = None
    height: Size | None = None
    width: Size | None = None

    def xyhw(self, area: Xyhw) -> Xyhw:
        """Position and size of the scratchpad within ``area``."""
        return Xyhw(
            x=area.x + sane_dimension(self.x, 0.25, area.w),
            y=area.y + sane_dimension(self.y, 0.25, area.h),
            h=sane_dimension(self.height, 0.50, area.h),
            w=sane_dimension(self.width, 0.50, area.w),
        )