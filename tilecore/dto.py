"""Snapshots of manager state shared with status bars and other clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class Viewport:
    """A workspace as seen from outside: its output, shown tag and area."""

    id: int
    output: str
    tag: str
    h: int
    w: int
    x: int
    y: int
    layout: str


@dataclass
class ManagerState:
    """The state of the manager as published to clients."""

    window_title: str | None = None
    desktop_names: list[str] = field(default_factory=list)
    viewports: list[Viewport] = field(default_factory=list)
    active_desktop: list[str] = field(default_factory=list)
    working_tags: list[str] = field(default_factory=list)
    urgent_tags: list[str] = field(default_factory=list)


@dataclass
class TagsForWorkspace:
    """One tag as seen from one workspace."""

    name: str
    index: int
    mine: bool
    visible: bool
    focused: bool
    urgent: bool
    busy: bool


@dataclass
class DisplayWorkspace:
    """A workspace with the state of every tag relative to it."""

    id: int
    output: str
    h: int
    w: int
    x: int
    y: int
    layout: str
    index: int
    tags: list[TagsForWorkspace] = field(default_factory=list)


@dataclass
class DisplayState:
    """What a status bar needs to draw: the title and every workspace."""

    window_title: str = ""
    workspaces: list[DisplayWorkspace] = field(default_factory=list)

    @classmethod
    def from_manager_state(cls, state: ManagerState) -> DisplayState:
        visible = [vp.tag for vp in state.viewports]
        workspaces = [
            viewport_into_display_workspace(
                state.desktop_names,
                state.active_desktop,
                visible,
                state.working_tags,
                state.urgent_tags,
                viewport,
                index,
            )
            for index, viewport in enumerate(state.viewports)
        ]
        return cls(
            window_title=state.window_title or "",
            workspaces=workspaces,
        )


def viewport_into_display_workspace(
    all_tags: Sequence[str],
    focused: Sequence[str],
    visible: Sequence[str],
    working_tags: Sequence[str],
    urgent_tags: Sequence[str],
    viewport: Viewport,
    ws_index: int,
) -> DisplayWorkspace:
    """Describe ``viewport`` with the state of each tag in ``all_tags``."""
    tags = [
        TagsForWorkspace(
            name=name,
            index=index,
            mine=viewport.tag == name,
            visible=name in visible,
            focused=name in focused,
            urgent=name in urgent_tags,
            busy=name in working_tags,
        )
        for index, name in enumerate(all_tags)
    ]
    return DisplayWorkspace(
        id=viewport.id,
        output=viewport.output,
        h=viewport.h,
        w=viewport.w,
        x=viewport.x,
        y=viewport.y,
        layout=viewport.layout,
        index=ws_index,
        tags=tags,
    )