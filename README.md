# tilecore

The data models behind a tiling window manager, in plain Python with no
dependencies outside the standard library. It covers:

- rectangles with position, size and size limits: `tilecore.geometry.Xyhw`;
- sizes, margins and gutters: `Size`, `Margins`, `Side` and `Gutter` in
  `tilecore.spacing`;
- window states, window types, layout modes, focus behaviour, window handles
  and interaction modes: `WindowState`, `WindowType`, `LayoutMode`,
  `FocusBehaviour`, `WindowHandle`, `ModeKind` and `Mode` in `tilecore.kinds`;
- windows and their computed geometry: `tilecore.window.Window`;
- partial updates reported for a window: `tilecore.xyhw_change.XyhwChange`
  and `tilecore.window_change.WindowChange`;
- screens and their bounding boxes: `BBox` and `Screen` in `tilecore.screen`;
- workspaces with margins, gutters and areas to avoid:
  `tilecore.workspace.Workspace`;
- areas reserved by docks: `tilecore.dock_area.DockArea`;
- scratchpads and their placement: `tilecore.scratchpad.ScratchPad`;
- tags, both normal and hidden: `Tag` and `Tags` in `tilecore.tags`;
- focus history: `tilecore.focus.FocusManager`;
- snapshots for status bars: `Viewport`, `ManagerState`, `TagsForWorkspace`,
  `DisplayWorkspace` and `DisplayState` in `tilecore.dto`.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Examples

Trim a dock strip out of a workspace area:

```python
from tilecore.geometry import Xyhw

area = Xyhw(x=0, y=0, w=1000, h=1000)
bar = Xyhw(w=100, h=10)
trimmed = area.without(bar)
print(trimmed.y, trimmed.h)  # 10 990
print(area.center())         # (500, 500)
```

Number tags. Normal tags count up from 1; hidden tags count down from
`tilecore.tags.HIGHEST_TAG_ID` and must have unique labels:

```python
from tilecore.tags import Tags

tags = Tags()
tags.add_new("home")         # 1
tags.add_new("chat")         # 2
tags.add_new_hidden("NSP")   # HIGHEST_TAG_ID
tags.add_new_hidden("NSP")   # None: the label is taken
print([tag.label for tag in tags.all()])  # ['home', 'chat', 'NSP']
```

Put a window on a tag and check which workspace shows it:

```python
from tilecore.kinds import WindowHandle
from tilecore.screen import BBox
from tilecore.window import Window
from tilecore.workspace import Workspace

workspace = Workspace(BBox(x=0, y=0, width=800, height=600), 1)
workspace.show_tag(1)

window = Window(WindowHandle.mock(1))
window.tag_with(1)
print(workspace.is_displaying(window))  # True
```

Place a scratchpad. Sizes left unset default to a quarter of the area for the
position and half of it for the size:

```python
from tilecore.geometry import Xyhw
from tilecore.scratchpad import ScratchPad

pad = ScratchPad(name="term", value="term")
place = pad.xyhw(Xyhw(x=0, y=0, w=1000, h=800))
print(place.x, place.y, place.w, place.h)  # 250 200 500 400
```

Turn a published state into what a status bar draws:

```python
from tilecore.dto import DisplayState, ManagerState, Viewport

state = ManagerState(
    desktop_names=["1", "2"],
    viewports=[Viewport(id=1, output="HDMI-1", tag="1", h=600, w=800, x=0, y=0, layout="Monocle")],
    active_desktop=["1"],
)
display = DisplayState.from_manager_state(state)
print([(t.name, t.mine, t.focused) for t in display.workspaces[0].tags])
# [('1', True, True), ('2', False, False)]
```

## What this package does not do

tilecore is a library of models only. It does not talk to a display server,
has no event loop or event handlers, does not compute tiling layouts, does not
read configuration files, and installs no command.

## Running the tests

```
pytest
```