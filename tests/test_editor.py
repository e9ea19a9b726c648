import queue

import pytest

from nvgrid.channels import LoggingSender
from nvgrid.commands import (
    CloseWindow,
    DefaultStyleChanged,
    DrawHide,
    DrawViewport,
    FontChanged,
    ModeChanged,
    SetMouseEnabled,
    TitleChanged,
    UpdateCursor,
    WindowDraw,
)
from nvgrid.cursor import CursorMode, CursorShape
from nvgrid.editor import Editor, start_editor
from nvgrid.events import (
    BusyStart,
    BusyStop,
    Clear,
    CursorGoto,
    DefaultColorsSet,
    Destroy,
    EditorMode,
    Flush,
    GridLine,
    GridLineCell,
    GuiOption,
    HighlightAttributesDefine,
    MessageSetPosition,
    ModeChange,
    ModeInfoSet,
    MouseOff,
    MouseOn,
    OptionSet,
    Resize,
    Scroll,
    SetTitle,
    WindowAnchor,
    WindowClose,
    WindowFloatPosition,
    WindowHide,
    WindowViewport,
)
from nvgrid.scheduler import RedrawScheduler
from nvgrid.style import Color, Colors, Style
from nvgrid.window import WindowType


class Harness:
    def __init__(self):
        self.batches = queue.Queue()
        self.window_commands = queue.Queue()
        self.scheduler = RedrawScheduler()
        self.editor = Editor(
            LoggingSender(self.batches, "batched_draw_command"),
            LoggingSender(self.window_commands, "window_command"),
            self.scheduler,
        )

    def handle(self, *events):
        for event in events:
            self.editor.handle_redraw_event(event)

    def flush(self):
        self.handle(Flush())
        return self.batches.get_nowait()


@pytest.fixture
def harness():
    return Harness()


def test_set_title_sends_window_command(harness):
    harness.handle(SetTitle("hello"))
    assert harness.window_commands.get_nowait() == TitleChanged("hello")


def test_mouse_on_and_off(harness):
    harness.handle(MouseOn(), MouseOff())
    assert harness.window_commands.get_nowait() == SetMouseEnabled(True)
    assert harness.window_commands.get_nowait() == SetMouseEnabled(False)


def test_busy_toggles_cursor(harness):
    harness.handle(BusyStart())
    assert harness.editor.cursor.enabled is False
    harness.handle(BusyStop())
    assert harness.editor.cursor.enabled is True


def test_resize_creates_then_resizes_window(harness):
    harness.handle(Resize(1, 10, 3))
    window = harness.editor.windows[1]
    assert (window.width, window.height) == (10, 3)
    harness.handle(Resize(1, 20, 5))
    assert harness.editor.windows[1] is window
    assert (window.width, window.height) == (20, 5)


def test_flush_sends_cursor_character(harness):
    harness.handle(
        Resize(1, 10, 3),
        GridLine(1, 0, 0, [GridLineCell("a"), GridLineCell("b")]),
        CursorGoto(1, 0, 1),
    )
    batch = harness.flush()
    cursors = [command.cursor for command in batch if isinstance(command, UpdateCursor)]
    assert len(cursors) == 1
    assert cursors[0].character == "b"
    assert cursors[0].double_width is False
    assert cursors[0].grid_position == (1, 0)


def test_flush_detects_double_width(harness):
    harness.handle(
        Resize(1, 10, 3),
        GridLine(1, 0, 0, [GridLineCell("字"), GridLineCell("")]),
        CursorGoto(1, 0, 0),
    )
    batch = harness.flush()
    cursor = next(c.cursor for c in batch if isinstance(c, UpdateCursor))
    assert cursor.character == "字"
    assert cursor.double_width is True


def test_flush_without_window_uses_blank(harness):
    harness.handle(CursorGoto(7, 2, 2))
    batch = harness.flush()
    cursor = next(c.cursor for c in batch if isinstance(c, UpdateCursor))
    assert cursor.character == " "
    assert cursor.double_width is False


def test_flush_queues_next_frame():
    scheduler = RedrawScheduler()
    batches = queue.Queue()
    editor = Editor(
        LoggingSender(batches, "batched_draw_command"),
        LoggingSender(queue.Queue(), "window_command"),
        scheduler,
    )
    assert scheduler.should_draw() is True
    assert scheduler.should_draw() is False
    editor.handle_redraw_event(Flush())
    assert scheduler.should_draw() is True
    assert batches.qsize() == 1


def test_mode_change_applies_cursor_mode(harness):
    style = Style(Colors(Color(1.0, 0.0, 0.0)))
    harness.handle(
        HighlightAttributesDefine(5, style),
        ModeInfoSet([CursorMode(shape=CursorShape.HORIZONTAL, style_id=5, blinkon=3)]),
        ModeChange(EditorMode("insert"), 0),
    )
    cursor = harness.editor.cursor
    assert cursor.shape is CursorShape.HORIZONTAL
    assert cursor.style is style
    assert cursor.blinkon == 3
    batch = harness.flush()
    assert ModeChanged(EditorMode("insert")) in batch


def test_mode_change_out_of_range_keeps_cursor(harness):
    harness.handle(ModeChange(EditorMode("normal"), 4))
    assert harness.editor.cursor.shape is CursorShape.BLOCK
    assert ModeChanged(EditorMode("normal")) in harness.flush()


def test_default_colors_set(harness):
    colors = Colors(Color(1.0, 1.0, 1.0), Color(0.0, 0.0, 0.0), Color(1.0, 0.0, 0.0))
    harness.handle(DefaultColorsSet(colors))
    assert DefaultStyleChanged(Style(colors)) in harness.flush()


def test_guifont_option_queues_font_change(harness):
    harness.handle(OptionSet(GuiOption("guifont", "Mono:h12")))
    assert FontChanged("Mono:h12") in harness.flush()


def test_other_option_is_ignored(harness):
    harness.handle(OptionSet(GuiOption("linespace", 2)))
    batch = harness.flush()
    assert [type(command) for command in batch] == [UpdateCursor]
    assert [command for command in batch if isinstance(command, FontChanged)] == []


def test_destroy_and_close_remove_window(harness):
    harness.handle(Resize(2, 4, 4), Resize(3, 4, 4), Destroy(2), WindowClose(3))
    assert 2 not in harness.editor.windows
    assert 3 not in harness.editor.windows
    batch = harness.flush()
    assert CloseWindow(2) in batch
    assert CloseWindow(3) in batch


def test_clear_resets_cells(harness):
    harness.handle(Resize(1, 5, 2), GridLine(1, 0, 0, [GridLineCell("x")]), Clear(1))
    assert harness.editor.windows[1].grid.get_cell(0, 0) == (" ", None)


def test_scroll_moves_cells(harness):
    harness.handle(
        Resize(1, 10, 3),
        GridLine(1, 1, 0, [GridLineCell("x")]),
        Scroll(1, 0, 3, 0, 10, 1, 0),
    )
    assert harness.editor.windows[1].grid.get_cell(0, 0)[0] == "x"


def test_float_position_relative_to_parent(harness):
    harness.handle(
        Resize(1, 40, 20),
        Resize(2, 10, 5),
        WindowFloatPosition(2, WindowAnchor.NORTH_WEST, 1, 3.0, 4.0, True),
    )
    window = harness.editor.windows[2]
    assert window.grid_position == (4.0, 3.0)
    assert window.anchor_info.sort_order == 2
    assert window.anchor_info.anchor_grid_id == 1


def test_float_position_uses_given_sort_order(harness):
    harness.handle(
        Resize(1, 40, 20),
        Resize(2, 10, 5),
        WindowFloatPosition(2, WindowAnchor.NORTH_WEST, 1, 3.0, 4.0, True, 50),
    )
    assert harness.editor.windows[2].anchor_info.sort_order == 50


def test_nested_float_adds_parent_offsets(harness):
    harness.handle(
        Resize(1, 40, 20),
        Resize(2, 10, 5),
        Resize(3, 2, 2),
        WindowFloatPosition(2, WindowAnchor.NORTH_WEST, 1, 3.0, 4.0, True),
        WindowFloatPosition(3, WindowAnchor.NORTH_WEST, 2, 1.0, 1.0, True),
    )
    assert harness.editor.windows[3].grid_position == (5.0, 4.0)


def test_float_of_missing_window_does_nothing(harness):
    harness.handle(Resize(1, 40, 20), WindowFloatPosition(9, WindowAnchor.SOUTH_EAST, 1, 3.0, 4.0, True))
    assert set(harness.editor.windows) == {1}


def test_message_position_creates_message_window(harness):
    harness.handle(Resize(1, 40, 20), MessageSetPosition(4, 18, False, ""))
    window = harness.editor.windows[4]
    assert window.window_type is WindowType.MESSAGE
    assert (window.width, window.height) == (40, 1)
    assert window.grid_position == (0.0, 18.0)
    assert window.anchor_info.sort_order == 2**64 - 1


def test_cursor_into_message_window_needs_column_one(harness):
    harness.handle(Resize(1, 40, 20), MessageSetPosition(4, 18, False, ""))
    harness.handle(CursorGoto(4, 0, 5))
    assert harness.editor.cursor.parent_window_id == 0
    harness.handle(CursorGoto(4, 0, 1))
    assert harness.editor.cursor.parent_window_id == 4
    harness.handle(CursorGoto(4, 0, 3))
    assert harness.editor.cursor.grid_position == (3, 0)


def test_hide_and_viewport_commands(harness):
    harness.handle(Resize(1, 4, 4), WindowHide(1), WindowViewport(1, 0.0, 10.0, 2.0, 1.0))
    batch = harness.flush()
    assert WindowDraw(1, DrawHide()) in batch
    assert WindowDraw(1, DrawViewport(0.0, 10.0)) in batch


def test_start_editor_processes_queue():
    events = queue.Queue()
    batches = queue.Queue()
    window_commands = queue.Queue()
    events.put(SetTitle("threaded"))
    events.put(None)
    thread = start_editor(
        events,
        LoggingSender(batches, "batched_draw_command"),
        LoggingSender(window_commands, "window_command"),
    )
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert window_commands.get_nowait() == TitleChanged("threaded")