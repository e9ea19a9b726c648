"""A fixed-size grid of character cells."""

from __future__ import annotations

from nvgrid.style import Style

GridCell = tuple[str, "Style | None"]


def default_cell() -> GridCell:
    """An empty cell: a single space without a style."""
    return (" ", None)


class CharacterGrid:
    """Row-major storage of cells for one editor grid."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.width, self.height = size
        self.characters: list[GridCell] = [default_cell()] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return x + y * self.width

    def resize(self, size: tuple[int, int]) -> None:
        """Change the dimensions, keeping cells that still fit."""
        width, height = size
        cells = [default_cell()] * (width * height)
        for y in range(min(self.height, height)):
            for x in range(min(self.width, width)):
                cells[x + y * width] = self.characters[x + y * self.width]
        self.width, self.height = width, height
        self.characters = cells

    def clear(self) -> None:
        """Reset every cell to the default cell."""
        self.set_all_characters(default_cell())

    def get_cell(self, x: int, y: int) -> GridCell | None:
        """The cell at (x, y), or None when outside the grid."""
        index = self._index(x, y)
        return None if index is None else self.characters[index]

    def set_cell(self, x: int, y: int, cell: GridCell) -> bool:
        """Store a cell at (x, y); return False when outside the grid."""
        index = self._index(x, y)
        if index is None:
            return False
        self.characters[index] = cell
        return True

    def set_all_characters(self, value: GridCell) -> None:
        """Fill the whole grid with one cell value."""
        self.characters = [value] * (self.width * self.height)

    def row(self, row_index: int) -> list[GridCell] | None:
        """The cells of one row, or None when the row does not exist."""
        if not 0 <= row_index < self.height:
            return None
        start = row_index * self.width
        return self.characters[start : start + self.width]