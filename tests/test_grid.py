import random

import pytest

from nvgrid.grid import CharacterGrid, default_cell
from nvgrid.style import Colors, Style

SIZES = [(1, 1), (3, 5), (17, 9), (120, 40)]


def positions(size, seed=0):
    rng = random.Random(seed)
    return rng.randrange(size[0]), rng.randrange(size[1])


def test_default_cell():
    assert default_cell() == (" ", None)


@pytest.mark.parametrize("size", SIZES)
def test_new_constructs_grid(size):
    grid = CharacterGrid(size)
    assert grid.width == size[0]
    assert grid.height == size[1]
    assert grid.characters == [default_cell()] * (size[0] * size[1])


@pytest.mark.parametrize("size", SIZES)
def test_get_cell_returns_expected_cell(size):
    grid = CharacterGrid(size)
    x, y = positions(size)
    grid.characters[x + y * size[0]] = ("foo", Style(Colors()))
    assert grid.get_cell(x, y) == ("foo", Style(Colors()))


@pytest.mark.parametrize("size", SIZES)
def test_set_cell_modifies_grid(size):
    grid = CharacterGrid(size)
    x, y = positions(size, seed=1)
    grid.characters[x + y * size[0]] = ("foo", Style(Colors()))
    assert grid.set_cell(x, y, ("bar", Style(Colors()))) is True
    assert grid.get_cell(x, y) == ("bar", Style(Colors()))


def test_out_of_bounds_access():
    grid = CharacterGrid((4, 3))
    assert grid.get_cell(4, 0) is None
    assert grid.get_cell(0, 3) is None
    assert grid.get_cell(-1, 0) is None
    assert grid.set_cell(4, 0, ("x", None)) is False
    assert grid.characters == [default_cell()] * 12


@pytest.mark.parametrize("size", SIZES)
def test_set_all_characters(size):
    grid = CharacterGrid(size)
    cell = ("foo", Style(Colors()))
    grid.set_all_characters(cell)
    assert grid.characters == [cell] * (size[0] * size[1])


@pytest.mark.parametrize("size", SIZES)
def test_clear_empties_buffer(size):
    grid = CharacterGrid(size)
    grid.characters = [("foo", Style(Colors()))] * (size[0] * size[1])
    grid.clear()
    assert grid.width == size[0]
    assert grid.height == size[1]
    assert grid.characters == [default_cell()] * (size[0] * size[1])


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("new_size", [(1, 1), (10, 2), (200, 60)])
def test_resize_keeps_overlap_and_resizes(size, new_size):
    grid = CharacterGrid(size)
    cell = ("foo", Style(Colors()))
    grid.characters = [cell] * (size[0] * size[1])

    grid.resize(new_size)
    width, height = new_size
    assert grid.width == width
    assert grid.height == height
    assert len(grid.characters) == width * height

    for x in range(min(size[0], width)):
        for y in range(min(size[1], height)):
            assert grid.get_cell(x, y) == cell
    for x in range(size[0], width):
        for y in range(size[1], height):
            assert grid.get_cell(x, y) == default_cell()


def test_resize_preserves_positions():
    grid = CharacterGrid((3, 2))
    grid.set_cell(2, 1, ("z", None))
    grid.set_cell(0, 1, ("a", None))
    grid.resize((5, 4))
    assert grid.get_cell(2, 1) == ("z", None)
    assert grid.get_cell(0, 1) == ("a", None)
    assert grid.get_cell(3, 1) == default_cell()


def test_row():
    grid = CharacterGrid((3, 2))
    grid.set_cell(1, 1, ("q", None))
    assert grid.row(1) == [default_cell(), ("q", None), default_cell()]
    assert grid.row(0) == [default_cell()] * 3
    assert grid.row(2) is None