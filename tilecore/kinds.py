"""Enumerations and small value types for windows and modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class WindowState(Enum):
    MODAL = auto()
    STICKY = auto()
    MAXIMIZED_VERT = auto()
    MAXIMIZED_HORZ = auto()
    MAXIMIZED = auto()
    SHADED = auto()
    SKIP_TASKBAR = auto()
    SKIP_PAGER = auto()
    HIDDEN = auto()
    FULLSCREEN = auto()
    ABOVE = auto()
    BELOW = auto()


class WindowType(Enum):
    DESKTOP = auto()
    DOCK = auto()
    TOOLBAR = auto()
    MENU = auto()
    UTILITY = auto()
    SPLASH = auto()
    DIALOG = auto()
    NORMAL = auto()


class LayoutMode(Enum):
    """Whether layouts are remembered per tag (the default) or per workspace."""

    TAG = auto()
    WORKSPACE = auto()


class FocusBehaviour(Enum):
    """How focus follows the user; ``SLOPPY`` is the default."""

    SLOPPY = auto()
    CLICK_TO = auto()
    DRIVEN = auto()

    def is_sloppy(self) -> bool:
        return self is FocusBehaviour.SLOPPY

    def is_clickto(self) -> bool:
        return self is FocusBehaviour.CLICK_TO

    def is_driven(self) -> bool:
        return self is FocusBehaviour.DRIVEN


@dataclass(frozen=True)
class WindowHandle:
    """Identifies a window, either a test handle or an X window id."""

    value: int
    is_xlib: bool = False

    @classmethod
    def mock(cls, value: int) -> WindowHandle:
        return cls(value, False)

    @classmethod
    def xlib(cls, value: int) -> WindowHandle:
        return cls(value, True)

    def xlib_handle(self) -> int | None:
        """The X window id, or None for a test handle."""
        return self.value if self.is_xlib else None


class ModeKind(Enum):
    READY_TO_RESIZE = auto()
    READY_TO_MOVE = auto()
    RESIZING_WINDOW = auto()
    MOVING_WINDOW = auto()
    NORMAL = auto()


@dataclass(frozen=True)
class Mode:
    """Interaction mode; every kind except NORMAL refers to a window."""

    kind: ModeKind = ModeKind.NORMAL
    handle: WindowHandle | None = None

    def __post_init__(self) -> None:
        if self.kind is ModeKind.NORMAL:
            if self.handle is not None:
                raise ValueError("normal mode takes no window handle")
        elif self.handle is None:
            raise ValueError(f"{self.kind.name} mode requires a window handle")

    @classmethod
    def normal(cls) -> Mode:
        return cls(ModeKind.NORMAL, None)