"""History of which workspaces, tags and windows had focus."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from tilecore.kinds import FocusBehaviour, WindowHandle

if TYPE_CHECKING:
    from tilecore.window import Window
    from tilecore.workspace import Workspace


@dataclass
class FocusManager:
    """Focus history, most recent first, plus the focus settings.

    ``workspace_history`` holds indexes into the list of workspaces.
    ``window_history`` may hold None, meaning nothing had focus.
    The settings (``behaviour`` and the flags below it) are fixed at creation.
    """

    workspace_history: deque[int] = field(default_factory=deque)
    window_history: deque[WindowHandle | None] = field(default_factory=deque)
    tag_history: deque[int] = field(default_factory=deque)
    tags_last_window: dict[int, WindowHandle] = field(default_factory=dict)
    last_mouse_position: tuple[int, int] | None = None
    behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_new_windows: bool = False
    sloppy_mouse_follows_focus: bool = False
    create_under_cursor: bool = False

    def workspace(self, workspaces: Sequence[Workspace]) -> Workspace | None:
        """The currently focused workspace, or None."""
        if not self.workspace_history:
            return None
        index = self.workspace_history[0]
        if 0 <= index < len(workspaces):
            return workspaces[index]
        return None

    def tag(self, offset: int) -> int | None:
        """The focused tag for offset 0; larger offsets reach further back."""
        if 0 <= offset < len(self.tag_history):
            return self.tag_history[offset]
        return None

    def window(self, windows: Sequence[Window]) -> Window | None:
        """The currently focused window, or None."""
        if not self.window_history:
            return None
        handle = self.window_history[0]
        if handle is None:
            return None
        return next((w for w in windows if w.handle == handle), None)

    def create_follows_cursor(self) -> bool:
        """Whether new windows open on the workspace under the cursor."""
        return self.create_under_cursor