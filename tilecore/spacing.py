"""Sizes, margins and gutters."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Size:
    """A size that is either an absolute pixel count or a ratio of a whole."""

    value: float
    is_ratio: bool = False

    @classmethod
    def pixel(cls, value: int) -> Size:
        return cls(int(value), False)

    @classmethod
    def ratio(cls, value: float) -> Size:
        return cls(float(value), True)

    def into_absolute(self, whole: int) -> int:
        """Pixels are returned as they are; ratios are multiplied by ``whole``."""
        if not self.is_ratio:
            return int(self.value)
        return int(math.floor(_f32(_f32(float(whole)) * _f32(self.value))))


@dataclass(frozen=True)
class Margins:
    """Non-negative margins on the four sides."""

    top: int
    right: int
    bottom: int
    left: int

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            if getattr(self, name) < 0:
                raise ValueError(f"margin {name} must not be negative")

    @classmethod
    def uniform(cls, size: int) -> Margins:
        return cls(size, size, size, size)

    @classmethod
    def from_pair(cls, top_and_bottom: int, left_and_right: int) -> Margins:
        return cls(top_and_bottom, left_and_right, top_and_bottom, left_and_right)

    @classmethod
    def from_triple(cls, top: int, left_and_right: int, bottom: int) -> Margins:
        return cls(top, left_and_right, bottom, left_and_right)


class Side(Enum):
    """Side of a workspace; ordered as declared."""

    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Side):
            return NotImplemented
        return self.value < other.value


@dataclass
class Gutter:
    """Extra space on one side of a workspace, optionally for one workspace id."""

    side: Side = Side.TOP
    value: int = 0
    id: int | None = None