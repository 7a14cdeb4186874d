"""Rectangles with position, size and size limits."""

from __future__ import annotations

MIN_LIMIT = -999_999_999
MAX_LIMIT = 999_999_999

_U64 = 2**64


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Xyhw:
    """A rectangle (x, y from the top left) with min/max width and height.

    Assigning ``w`` or ``h`` or any of the limits clamps the size to the limits.
    """

    __slots__ = ("_x", "_y", "_h", "_w", "_minw", "_maxw", "_minh", "_maxh")

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        h: int = 0,
        w: int = 0,
        minw: int = MIN_LIMIT,
        maxw: int = MAX_LIMIT,
        minh: int = MIN_LIMIT,
        maxh: int = MAX_LIMIT,
    ) -> None:
        self._x = x
        self._y = y
        self._h = h
        self._w = w
        self._minw = minw
        self._maxw = maxw
        self._minh = minh
        self._maxh = maxh
        self._update_limits()

    @classmethod
    def _raw(cls, x, y, h, w, minw, maxw, minh, maxh) -> Xyhw:
        obj = cls.__new__(cls)
        obj._x, obj._y, obj._h, obj._w = x, y, h, w
        obj._minw, obj._maxw, obj._minh, obj._maxh = minw, maxw, minh, maxh
        return obj

    def _fields(self) -> tuple:
        return (
            self._x,
            self._y,
            self._h,
            self._w,
            self._minw,
            self._maxw,
            self._minh,
            self._maxh,
        )

    def _update_limits(self) -> None:
        if self._h > self._maxh:
            self._h = self._maxh
        if self._w > self._maxw:
            self._w = self._maxw
        if self._h < self._minh:
            self._h = self._minh
        if self._w < self._minw:
            self._w = self._minw

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        self._x = value
        self._update_limits()

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        self._y = value
        self._update_limits()

    @property
    def h(self) -> int:
        return self._h

    @h.setter
    def h(self, value: int) -> None:
        self._h = value
        self._update_limits()

    @property
    def w(self) -> int:
        return self._w

    @w.setter
    def w(self, value: int) -> None:
        self._w = value
        self._update_limits()

    @property
    def minw(self) -> int:
        return self._minw

    @minw.setter
    def minw(self, value: int) -> None:
        self._minw = value
        self._update_limits()

    @property
    def maxw(self) -> int:
        return self._maxw

    @maxw.setter
    def maxw(self, value: int) -> None:
        self._maxw = value
        self._update_limits()

    @property
    def minh(self) -> int:
        return self._minh

    @minh.setter
    def minh(self, value: int) -> None:
        self._minh = value
        self._update_limits()

    @property
    def maxh(self) -> int:
        return self._maxh

    @maxh.setter
    def maxh(self, value: int) -> None:
        self._maxh = value
        self._update_limits()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Xyhw(x={self._x}, y={self._y}, h={self._h}, w={self._w}, "
            f"minw={self._minw}, maxw={self._maxw}, "
            f"minh={self._minh}, maxh={self._maxh})"
        )

    def __add__(self, other: Xyhw) -> Xyhw:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return Xyhw._raw(
            self._x + other._x,
            self._y + other._y,
            self._h + other._h,
            self._w + other._w,
            max(self._minw, other._minw),
            min(self._maxw, other._maxw),
            max(self._minh, other._minh),
            min(self._maxh, other._maxh),
        )

    def __sub__(self, other: Xyhw) -> Xyhw:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return Xyhw._raw(
            self._x - other._x,
            self._y - other._y,
            self._h - other._h,
            self._w - other._w,
            max(self._minw, other._minw),
            min(self._maxw, other._maxw),
            max(self._minh, other._minh),
            min(self._maxh, other._maxh),
        )

    def copy(self) -> Xyhw:
        """Return an independent copy."""
        return Xyhw._raw(*self._fields())

    def clear_minmax(self) -> None:
        """Reset the size limits to their widest values."""
        self._minw = MIN_LIMIT
        self._maxw = MAX_LIMIT
        self._minh = MIN_LIMIT
        self._maxh = MAX_LIMIT
        self._update_limits()

    def contains_point(self, x: int, y: int) -> bool:
        max_x = self._x + self._w
        max_y = self._y + self._h
        return self._x <= x <= max_x and self._y <= y <= max_y

    def contains_xyhw(self, other: Xyhw) -> bool:
        return self.contains_point(other._x, other._y) and self.contains_point(
            other._x + other._w, other._y + other._h
        )

    def volume(self) -> int:
        """Area as an unsigned 64-bit product."""
        return ((self._h % _U64) * (self._w % _U64)) % _U64

    def without(self, other: Xyhw) -> Xyhw:
        """Trim ``other`` out of this rectangle so that they don't overlap."""
        result = self.copy()
        if other._w > other._h:
            # horizontal trim
            if other._y > self._y + _tdiv(self._h, 2):
                bottom_over = (result._y + result._h) - other._y
                if bottom_over > 0:
                    result._h -= bottom_over
            else:
                top_over = (other._y + other._h) - result._y
                if top_over > 0:
                    result._y += top_over
                    result._h -= top_over
        else:
            # vertical trim
            left_over = (other._x + other._w) - result._x
            if other._x > self._x + _tdiv(self._w, 2):
                right_over = (result._x + result._w) - other._x
                if right_over > 0:
                    result._w -= right_over
            elif left_over > 0:
                result._x += left_over
                result._w -= left_over
        return result

    def center_halfed(self) -> Xyhw:
        """A rectangle of half the size, centred in this one."""
        return Xyhw(
            x=self._x + _tdiv(self._w, 2) - _tdiv(self._w, 4),
            y=self._y + _tdiv(self._h, 2) - _tdiv(self._h, 4),
            h=_tdiv(self._h, 2),
            w=_tdiv(self._w, 2),
        )

    def center_relative(self, outer: Xyhw, border: int) -> None:
        """Move this rectangle to the centre of ``outer``."""
        self._x = outer._x + _tdiv(outer._w, 2) - _tdiv(self._w, 2) - border
        self._y = outer._y + _tdiv(outer._h, 2) - _tdiv(self._h, 2) - border

    def center(self) -> tuple[int, int]:
        return (self._x + _tdiv(self._w, 2), self._y + _tdiv(self._h, 2))