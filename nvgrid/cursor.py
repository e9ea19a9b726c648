"""Editor cursor state and cursor modes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from nvgrid.style import Color, Colors, Style


class CursorShape(Enum):
    BLOCK = "block"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def from_type_name(cls, name: str) -> CursorShape | None:
        """Shape for a mode_info cursor_shape name, or None if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass
class CursorMode:
    """Cursor appearance for one editor mode; unset fields are None."""

    shape: CursorShape | None = None
    style_id: int | None = None
    cell_percentage: float | None = None
    blinkwait: int | None = None
    blinkon: int | None = None
    blinkoff: int | None = None


def _required(color: Color | None, name: str) -> Color:
    if color is None:
        raise ValueError(f"default {name} color is not set")
    return color


@dataclass
class Cursor:
    """The cursor as it should be drawn."""

    grid_position: tuple[int, int] = (0, 0)
    parent_window_id: int = 0
    shape: CursorShape = CursorShape.BLOCK
    cell_percentage: float | None = None
    blinkwait: int | None = None
    blinkon: int | None = None
    blinkoff: int | None = None
    style: Style | None = None
    enabled: bool = True
    double_width: bool = False
    character: str = " "

    def foreground(self, default_colors: Colors) -> Color:
        """Colour of the character under the cursor."""
        if self.style is not None and self.style.colors.foreground is not None:
            return self.style.colors.foreground
        return _required(default_colors.background, "background")

    def background(self, default_colors: Colors) -> Color:
        """Colour of the cursor itself."""
        if self.style is not None and self.style.colors.background is not None:
            return self.style.colors.background
        return _required(default_colors.foreground, "foreground")

    def change_mode(self, cursor_mode: CursorMode, styles: Mapping[int, Style]) -> None:
        """Adopt the appearance given by a cursor mode."""
        if cursor_mode.shape is not None:
            self.shape = cursor_mode.shape
        if cursor_mode.style_id is not None:
            self.style = styles.get(cursor_mode.style_id)
        self.cell_percentage = cursor_mode.cell_percentage
        self.blinkwait = cursor_mode.blinkwait
        self.blinkon = cursor_mode.blinkon
        self.blinkoff = cursor_mode.blinkoff