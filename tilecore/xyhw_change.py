"""Partial updates to rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from tilecore.geometry import Xyhw

_FIELDS = ("x", "y", "w", "h", "minw", "maxw", "minh", "maxh")


@dataclass
class XyhwChange:
    """A set of rectangle fields to change; ``None`` leaves a field as it is."""

    x: int | None = None
    y: int | None = None
    h: int | None = None
    w: int | None = None
    minw: int | None = None
    maxw: int | None = None
    minh: int | None = None
    maxh: int | None = None

    @classmethod
    def from_xyhw(cls, xyhw: Xyhw) -> XyhwChange:
        return cls(**{name: getattr(xyhw, name) for name in _FIELDS})

    def update(self, xyhw: Xyhw) -> bool:
        """Apply the change to ``xyhw`` in place; report whether anything changed."""
        changed = False
        for name in _FIELDS:
            value = getattr(self, name)
            if value is not None and getattr(xyhw, name) != value:
                setattr(xyhw, name, value)
                changed = True
        return changed

    def update_window_floating(self, window) -> bool:
        """Apply the change to a floating window's placement."""
        if not window.floating():
            return False
        current = window.calculated_xyhw()
        changed = self.update(current)
        window.set_floating_exact(current)
        return changed

    def update_window_strut(self, window) -> bool:
        """Apply the change to a window's strut, creating it if missing."""
        if window.strut is None:
            strut = Xyhw()
            changed = True
        else:
            strut = window.strut.copy()
            changed = False
        changed = self.update(strut) or changed
        window.strut = strut
        return changed