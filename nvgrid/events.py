"""Redraw events sent by the editor, as typed Python objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from nvgrid.cursor import CursorMode
from nvgrid.style import Colors, Style

StyledContent = list[tuple[int, str]]


@dataclass(frozen=True)
class GridLineCell:
    """One cell entry of a grid_line event."""

    text: str
    highlight_id: int | None = None
    repeat: int | None = None


class MessageKind(Enum):
    UNKNOWN = ""
    CONFIRM = "confirm"
    CONFIRM_SUBSTITUTE = "confirm_sub"
    ERROR = "emsg"
    ECHO = "echo"
    ECHO_MESSAGE = "echomsg"
    ECHO_ERROR = "echoerr"
    LUA_ERROR = "lua_error"
    RPC_ERROR = "rpc_error"
    RETURN_PROMPT = "return_prompt"
    QUICK_FIX = "quickfix"
    SEARCH_COUNT = "search_count"
    WARNING = "wmsg"

    @classmethod
    def parse(cls, kind: str) -> MessageKind:
        """Kind for a msg_show kind name; unknown names give UNKNOWN."""
        try:
            return cls(kind)
        except ValueError:
            return cls.UNKNOWN


class GuiOptionKind(Enum):
    UNKNOWN = ""
    ARABIC_SHAPE = "arabicshape"
    AMBI_WIDTH = "ambiwidth"
    EMOJI = "emoji"
    GUI_FONT = "guifont"
    GUI_FONT_SET = "guifontset"
    GUI_FONT_WIDE = "guifontwide"
    LINE_SPACE = "linespace"
    PUMBLEND = "pumblend"
    SHOW_TAB_LINE = "showtabline"
    TERM_GUI_COLORS = "termguicolors"


@dataclass(frozen=True)
class GuiOption:
    """A UI option reported by option_set."""

    name: str
    value: Any

    @property
    def kind(self) -> GuiOptionKind:
        try:
            return GuiOptionKind(self.name)
        except ValueError:
            return GuiOptionKind.UNKNOWN


class WindowAnchor(Enum):
    NORTH_WEST = "NW"
    NORTH_EAST = "NE"
    SOUTH_WEST = "SW"
    SOUTH_EAST = "SE"

    def modified_top_left(
        self, grid_left: float, grid_top: float, width: int, height: int
    ) -> tuple[float, float]:
        """Top-left corner of a window of the given size anchored at a point."""
        left = grid_left - width if self in (WindowAnchor.NORTH_EAST, WindowAnchor.SOUTH_EAST) else grid_left
        top = grid_top - height if self in (WindowAnchor.SOUTH_WEST, WindowAnchor.SOUTH_EAST) else grid_top
        return (float(left), float(top))


class Mode(Enum):
    UNKNOWN = ""
    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    REPLACE = "replace"
    CMDLINE = "cmdline_normal"


@dataclass(frozen=True)
class EditorMode:
    """The editor's main mode, keeping the reported name."""

    name: str

    @property
    def mode(self) -> Mode:
        try:
            return Mode(self.name)
        except ValueError:
            return Mode.UNKNOWN


class RedrawEvent:
    """Base class of all redraw events."""

    __slots__ = ()


@dataclass(frozen=True)
class SetTitle(RedrawEvent):
    title: str


@dataclass(frozen=True)
class ModeInfoSet(RedrawEvent):
    cursor_modes: list[CursorMode] = field(default_factory=list)


@dataclass(frozen=True)
class OptionSet(RedrawEvent):
    gui_option: GuiOption


@dataclass(frozen=True)
class ModeChange(RedrawEvent):
    mode: EditorMode
    mode_index: int


@dataclass(frozen=True)
class MouseOn(RedrawEvent):
    pass


@dataclass(frozen=True)
class MouseOff(RedrawEvent):
    pass


@dataclass(frozen=True)
class BusyStart(RedrawEvent):
    pass


@dataclass(frozen=True)
class BusyStop(RedrawEvent):
    pass


@dataclass(frozen=True)
class Flush(RedrawEvent):
    pass


@dataclass(frozen=True)
class Resize(RedrawEvent):
    grid: int
    width: int
    height: int


@dataclass(frozen=True)
class DefaultColorsSet(RedrawEvent):
    colors: Colors


@dataclass(frozen=True)
class HighlightAttributesDefine(RedrawEvent):
    id: int
    style: Style


@dataclass(frozen=True)
class GridLine(RedrawEvent):
    grid: int
    row: int
    column_start: int
    cells: list[GridLineCell] = field(default_factory=list)


@dataclass(frozen=True)
class Clear(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class Destroy(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class CursorGoto(RedrawEvent):
    grid: int
    row: int
    column: int


@dataclass(frozen=True)
class Scroll(RedrawEvent):
    grid: int
    top: int
    bottom: int
    left: int
    right: int
    rows: int
    columns: int


@dataclass(frozen=True)
class WindowPosition(RedrawEvent):
    grid: int
    start_row: int
    start_column: int
    width: int
    height: int


@dataclass(frozen=True)
class WindowFloatPosition(RedrawEvent):
    grid: int
    anchor: WindowAnchor
    anchor_grid: int
    anchor_row: float
    anchor_column: float
    focusable: bool
    sort_order: int | None = None


@dataclass(frozen=True)
class WindowExternalPosition(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class WindowHide(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class WindowClose(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class MessageSetPosition(RedrawEvent):
    grid: int
    row: int
    scrolled: bool
    separator_character: str


@dataclass(frozen=True)
class WindowViewport(RedrawEvent):
    grid: int
    top_line: float
    bottom_line: float
    current_line: float
    current_column: float


@dataclass(frozen=True)
class CommandLineShow(RedrawEvent):
    content: StyledContent
    position: int
    first_character: str
    prompt: str
    indent: int
    level: int


@dataclass(frozen=True)
class CommandLinePosition(RedrawEvent):
    position: int
    level: int


@dataclass(frozen=True)
class CommandLineSpecialCharacter(RedrawEvent):
    character: str
    shift: bool
    level: int


@dataclass(frozen=True)
class CommandLineHide(RedrawEvent):
    pass


@dataclass(frozen=True)
class CommandLineBlockShow(RedrawEvent):
    lines: list[StyledContent] = field(default_factory=list)


@dataclass(frozen=True)
class CommandLineBlockAppend(RedrawEvent):
    line: StyledContent


@dataclass(frozen=True)
class CommandLineBlockHide(RedrawEvent):
    pass


@dataclass(frozen=True)
class MessageShow(RedrawEvent):
    kind: MessageKind
    content: StyledContent
    replace_last: bool


@dataclass(frozen=True)
class MessageClear(RedrawEvent):
    pass


@dataclass(frozen=True)
class MessageShowMode(RedrawEvent):
    content: StyledContent


@dataclass(frozen=True)
class MessageShowCommand(RedrawEvent):
    content: StyledContent


@dataclass(frozen=True)
class MessageRuler(RedrawEvent):
    content: StyledContent


@dataclass(frozen=True)
class MessageHistoryShow(RedrawEvent):
    entries: list[tuple[MessageKind, StyledContent]] = field(default_factory=list)