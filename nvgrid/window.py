"""One editor grid and the draw commands that keep its rendering in sync."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum, auto

import regex

from nvgrid.batcher import DrawCommandBatcher
from nvgrid.commands import (
    AnchorInfo,
    DrawCells,
    DrawClear,
    DrawClose,
    DrawHide,
    DrawPosition,
    DrawScroll,
    DrawShow,
    DrawViewport,
    WindowDraw,
    WindowDrawCommand,
)
from nvgrid.events import GridLineCell
from nvgrid.grid import CharacterGrid
from nvgrid.style import Style

logger = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


class WindowType(Enum):
    EDITOR = auto()
    MESSAGE = auto()


def _scroll_range(start: int, end: int, delta: int) -> Iterable[int]:
    if delta > 0:
        return range(start + delta, end)
    return reversed(range(start, end + delta))


class Window:
    """A grid of cells belonging to one editor window."""

    def __init__(
        self,
        grid_id: int,
        window_type: WindowType,
        anchor_info: AnchorInfo | None,
        grid_position: tuple[float, float],
        grid_size: tuple[int, int],
        draw_command_batcher: DrawCommandBatcher,
    ) -> None:
        self.grid_id = grid_id
        self.grid = CharacterGrid(grid_size)
        self.window_type = window_type
        self.anchor_info = anchor_info
        self.grid_position = grid_position
        self._batcher = draw_command_batcher
        self._send_updated_position()

    def _send(self, command: WindowDrawCommand) -> None:
        self._batcher.queue(WindowDraw(self.grid_id, command))

    def _send_updated_position(self) -> None:
        floating_order = None if self.anchor_info is None else self.anchor_info.sort_order
        self._send(
            DrawPosition(
                self.grid_position, (self.grid.width, self.grid.height), floating_order
            )
        )

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def get_cursor_character(self, window_left: int, window_top: int) -> tuple[str, bool]:
        """Character under the cursor and whether it is double width."""
        cell = self.grid.get_cell(window_left, window_top)
        character = " " if cell is None else cell[0]
        following = self.grid.get_cell(window_left + 1, window_top)
        double_width = following is not None and following[0] == ""
        return character, double_width

    def position(
        self,
        anchor_info: AnchorInfo | None,
        grid_size: tuple[int, int],
        grid_position: tuple[float, float],
    ) -> None:
        """Move and resize the window, then redraw it."""
        self.grid.resize(grid_size)
        self.anchor_info = anchor_info
        self.grid_position = grid_position
        self._send_updated_position()
        self.redraw()

    def resize(self, new_size: tuple[int, int]) -> None:
        """Resize the window, keeping cells that still fit, then redraw it."""
        self.grid.resize(new_size)
        self._send_updated_position()
        self.redraw()

    def _write_cell(
        self,
        row: int,
        column: int,
        cell: GridLineCell,
        defined_styles: Mapping[int, Style],
        previous_style: Style | None,
    ) -> tuple[int, Style | None]:
        if cell.highlight_id is None:
            style = previous_style
        elif cell.highlight_id == 0:
            style = None
        else:
            style = defined_styles.get(cell.highlight_id)

        text = cell.text
        if cell.repeat is not None:
            text = text * cell.repeat

        if not text:
            self.grid.set_cell(column, row, (text, style))
            return column + 1, style
        for character in _GRAPHEME.findall(text):
            self.grid.set_cell(column, row, (character, style))
            column += 1
        return column, style

    def _send_draw_command(self, row_index: int, start: int) -> int:
        """Draw from start to the next style change or double-width cell; return the next start."""
        row = self.grid.row(row_index)
        assert row is not None
        style = row[start][1]
        cells: list[str] = []
        width = 0
        for character, cell_style in row[start:]:
            if cell_style != style:
                break
            width += 1
            if character == "":
                break
            cells.append(character)
        self._send(DrawCells(tuple(cells), start, row_index, width, style))
        return start + width

    def _send_row(self, row_index: int) -> None:
        start = 0
        while start < self.grid.width:
            start = self._send_draw_command(row_index, start)

    def draw_grid_line(
        self,
        row: int,
        column_start: int,
        cells: Iterable[GridLineCell],
        defined_styles: Mapping[int, Style],
    ) -> None:
        """Apply a grid_line update to one row and redraw that row."""
        if row >= self.grid.height:
            logger.warning("Draw command out of bounds")
            return
        column = column_start
        previous_style: Style | None = None
        for cell in cells:
            column, previous_style = self._write_cell(
                row, column, cell, defined_styles, previous_style
            )
        self._send_row(row)

    def scroll_region(
        self, top: int, bottom: int, left: int, right: int, rows: int, cols: int
    ) -> None:
        """Scroll a region of the grid by rows and cols, moving the stored cells too."""
        self._send(DrawScroll(top, bottom, left, right, rows, cols))
        for y in _scroll_range(top, bottom, rows):
            dest_y = y - rows
            if not 0 <= dest_y < self.grid.height:
                continue
            for x in _scroll_range(left, right, cols):
                cell = self.grid.get_cell(x, y)
                if cell is not None:
                    self.grid.set_cell(x - cols, dest_y, cell)

    def clear(self) -> None:
        """Reset every cell and tell the renderer to clear."""
        self.grid.clear()
        self._send(DrawClear())

    def redraw(self) -> None:
        """Clear the rendering and draw every row again."""
        self._send(DrawClear())
        for row in range(self.grid.height):
            self._send_row(row)

    def hide(self) -> None:
        self._send(DrawHide())

    def show(self) -> None:
        self._send(DrawShow())

    def close(self) -> None:
        self._send(DrawClose())

    def update_viewport(self, top_line: float, bottom_line: float) -> None:
        self._send(DrawViewport(top_line, bottom_line))