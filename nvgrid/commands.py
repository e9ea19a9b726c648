"""Commands passed from the editor to the window and renderer."""

from __future__ import annotations

from dataclasses import dataclass

from nvgrid.cursor import Cursor
from nvgrid.events import EditorMode, WindowAnchor
from nvgrid.style import Style


@dataclass(frozen=True)
class AnchorInfo:
    """Where a floating or message window is attached to its parent grid."""

    anchor_grid_id: int
    anchor_type: WindowAnchor
    anchor_left: float
    anchor_top: float
    sort_order: int


class WindowDrawCommand:
    """Base class of commands that draw into a single window."""

    __slots__ = ()


@dataclass(frozen=True)
class DrawPosition(WindowDrawCommand):
    grid_position: tuple[float, float]
    grid_size: tuple[int, int]
    floating_order: int | None = None


@dataclass(frozen=True)
class DrawCells(WindowDrawCommand):
    cells: tuple[str, ...]
    window_left: int
    window_top: int
    width: int
    style: Style | None = None


@dataclass(frozen=True)
class DrawScroll(WindowDrawCommand):
    top: int
    bottom: int
    left: int
    right: int
    rows: int
    cols: int


@dataclass(frozen=True)
class DrawClear(WindowDrawCommand):
    pass


@dataclass(frozen=True)
class DrawShow(WindowDrawCommand):
    pass


@dataclass(frozen=True)
class DrawHide(WindowDrawCommand):
    pass


@dataclass(frozen=True)
class DrawClose(WindowDrawCommand):
    pass


@dataclass(frozen=True)
class DrawViewport(WindowDrawCommand):
    top_line: float
    bottom_line: float


class DrawCommand:
    """Base class of commands sent to the renderer in batches."""

    __slots__ = ()


@dataclass(frozen=True)
class CloseWindow(DrawCommand):
    grid_id: int


@dataclass(frozen=True)
class WindowDraw(DrawCommand):
    grid_id: int
    command: WindowDrawCommand


@dataclass(frozen=True)
class UpdateCursor(DrawCommand):
    cursor: Cursor


@dataclass(frozen=True)
class FontChanged(DrawCommand):
    font: str


@dataclass(frozen=True)
class DefaultStyleChanged(DrawCommand):
    style: Style


@dataclass(frozen=True)
class ModeChanged(DrawCommand):
    mode: EditorMode


class WindowCommand:
    """Base class of commands for the operating-system window."""

    __slots__ = ()


@dataclass(frozen=True)
class TitleChanged(WindowCommand):
    title: str


@dataclass(frozen=True)
class SetMouseEnabled(WindowCommand):
    enabled: bool