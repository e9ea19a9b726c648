# nvgrid

`nvgrid` turns the redraw notifications that Neovim sends to an attached UI
into a model of the editor: character grids, windows, the cursor and
highlight styles. Out of that model it produces batches of draw commands
that a front end can render.

It handles the "linegrid" UI protocol, including the multigrid extensions
(floating windows, message grids, viewports).

## Installation

```
pip install nvgrid
```

For running the test suite:

```
pip install "nvgrid[test]"
pytest
```

## How it fits together

Data flows through three stages:

1. **Parsing** – `nvgrid.redraw_parser.parse_redraw_event` takes one decoded
   entry of a `redraw` notification (an event name followed by any number of
   argument lists) and returns a list of typed events from `nvgrid.events`,
   such as `GridLine`, `CursorGoto`, `Resize` or `WindowFloatPosition`.
   Malformed input raises `nvgrid.values.ParseError` (a `ValueError`). Event
   names the parser does not know produce no events.

2. **Editing** – `nvgrid.editor.Editor` consumes those events with
   `handle_redraw_event`. It keeps one `nvgrid.window.Window` per grid, each
   backed by a `nvgrid.grid.CharacterGrid`, tracks defined highlight styles
   (`nvgrid.style.Style`) and the `nvgrid.cursor.Cursor`, and positions
   floating and message windows relative to their anchors. Text in
   `grid_line` cells is split into grapheme clusters, one per grid cell.

3. **Drawing** – every change queues a command from `nvgrid.commands`
   (`WindowDraw` wrapping `DrawCells`, `DrawScroll`, `DrawPosition` and so on,
   or `UpdateCursor`, `FontChanged`, `DefaultStyleChanged`, `ModeChanged`,
   `CloseWindow`). On a `Flush` event the editor updates the cursor, hands
   the whole batch as one list to its draw command sender through a
   `nvgrid.batcher.DrawCommandBatcher`, and queues a frame on its
   `RedrawScheduler`. Window-level notifications, `TitleChanged` and
   `SetMouseEnabled`, go to a separate window command sender.

A sender is any object with a `send(message)` method.

## Parsing an event

```python
from nvgrid.redraw_parser import parse_redraw_event

events = parse_redraw_event(["grid_resize", [1, 80, 24]])
# -> [Resize(grid=1, width=80, height=24)]
```

## Running an editor

```python
import queue

from nvgrid.channels import LoggingSender
from nvgrid.editor import start_editor

events = queue.Queue()
batches = queue.Queue()
window_commands = queue.Queue()

thread = start_editor(
    events,
    LoggingSender(batches, "batched_draw_command"),
    LoggingSender(window_commands, "window_command"),
)
# put parsed redraw events on `events`; put None to stop the thread
```

`start_editor` runs an `Editor` on a daemon thread, handling events taken
from the queue until it receives `None`, and returns the thread.

## Other pieces

- `nvgrid.channel_info` parses the result of `nvim_list_chans` into
  `ChannelInfo` records (`parse_channel_list`).
- `nvgrid.scheduler.RedrawScheduler` decides whether a frame should be
  drawn: either one was queued with `queue_next_frame`, or a time given to
  `schedule` (on the scheduler's clock, `time.monotonic` by default) has
  passed. `nvgrid.scheduler.REDRAW_SCHEDULER` is the shared instance the
  editor uses unless given its own.
- `nvgrid.channels.LoggingSender` wraps a `queue.Queue` or `asyncio.Queue`
  and logs every message at debug level before putting it on the queue.
- `nvgrid.values` has the checked conversions (`parse_u64`, `parse_string`,
  `parse_array` and so on) the parsers are built from.

## What it does not do

`nvgrid` works on values that have already been decoded from msgpack. It
does not start or connect to a Neovim process, does not attach a UI or send
input back, and does not render anything: it has no command to run and no
window of its own. Those parts are left to the program that uses it.