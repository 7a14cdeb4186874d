"""Changes to a window reported by the display server."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from tilecore.geometry import Xyhw
from tilecore.kinds import WindowHandle, WindowState, WindowType
from tilecore.spacing import Margins
from tilecore.xyhw_change import XyhwChange


class _Unchanged(Enum):
    UNCHANGED = "unchanged"


UNCHANGED = _Unchanged.UNCHANGED
"""Marks a field that may legitimately be set to ``None`` as left alone."""


@dataclass
class WindowChange:
    """Fields of a window to change; unset fields are left as they are."""

    handle: WindowHandle
    transient: WindowHandle | None | _Unchanged = UNCHANGED
    never_focus: bool | None = None
    urgent: bool | None = None
    name: str | None | _Unchanged = UNCHANGED
    window_type: WindowType | None = None
    floating: XyhwChange | None = None
    strut: XyhwChange | None = None
    requested: Xyhw | None = None
    states: list[WindowState] | None = field(default=None)

    def update(self, window, container: Xyhw | None) -> bool:
        """Apply the change to ``window``; report whether it needs redrawing.

        ``container`` is the area a dialog or transient window is centred in.
        """
        changed = False
        if self.transient is not UNCHANGED:
            changed = changed or window.transient is None or window.transient != self.transient
            window.transient = self.transient
        if self.name is not UNCHANGED:
            changed = changed or window.name is None or window.name != self.name
            window.name = self.name
        if self.never_focus is not None:
            changed = changed or window.never_focus != self.never_focus
            window.never_focus = self.never_focus
        if self.urgent is not None:
            changed = changed or window.urgent != self.urgent
            window.urgent = self.urgent
        if self.floating is not None:
            floating_change = dataclasses.replace(self.floating)
            if container is not None:
                # Reposition dialogs and transients within their container.
                area = Xyhw()
                floating_change.update(area)
                area.center_relative(container, window.border)
                floating_change.x = area.x
                floating_change.y = area.y
            changed = floating_change.update_window_floating(window) or changed
        if self.strut is not None:
            changed = self.strut.update_window_strut(window) or changed
        if self.requested is not None:
            window.requested = self.requested.copy()
        if self.window_type is not None:
            changed = changed or window.window_type is not self.window_type
            window.window_type = self.window_type
            if not window.is_managed():
                window.border = 0
                window.margin = Margins.uniform(0)
        if self.states is not None:
            changed = True
            window.states = list(self.states)
        return changed