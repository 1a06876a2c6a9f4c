import random

import pytest

from takuzu.src.errors import EmptyGridError, InvalidCharError, WidthMismatchError
from takuzu.src.grid import Cell, Grid

from conftest import SCENARIO_4X4


def test_parse_scenario(scenario_grid):
    assert scenario_grid.width == 4
    assert scenario_grid.height == 4
    assert scenario_grid[0, 0] is Cell.ONE
    assert scenario_grid[0, 1] is Cell.ZERO
    assert scenario_grid[0, 2] is None
    assert scenario_grid[3, 2] is Cell.ONE


def test_parse_ignores_blank_lines_tabs_and_newlines():
    grid = Grid.parse(["0\t1\n", "\n", "   \n", "1 0\r\n"])
    assert grid.height == 2
    assert grid.to_rows() == [[0, 1], [1, 0]]


def test_parse_without_separators():
    assert Grid.parse(["01-"]).to_rows() == [[0, 1, None]]


def test_invalid_char():
    with pytest.raises(InvalidCharError) as excinfo:
        Grid.from_text("0 1\n1 x")
    assert excinfo.value.char == "x"


def test_width_mismatch():
    with pytest.raises(WidthMismatchError) as excinfo:
        Grid.parse(["0 1", "0 1 0"])
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 3)


@pytest.mark.parametrize("lines", [[], [""], ["   ", "\t", ""]])
def test_empty_grid(lines):
    with pytest.raises(EmptyGridError):
        Grid.parse(lines)


def test_render(scenario_grid):
    assert str(scenario_grid) == SCENARIO_4X4
    assert not str(scenario_grid).endswith("\n")


def test_render_then_parse_gives_equal_grid(scenario_grid):
    assert Grid.from_text(str(scenario_grid)) == scenario_grid


@pytest.mark.parametrize("seed", range(5))
def test_render_then_parse_random_grids(seed):
    rng = random.Random(seed)
    height, width = rng.randint(1, 8), rng.randint(1, 8)
    grid = Grid([[rng.choice([None, Cell.ZERO, Cell.ONE]) for _ in range(width)] for _ in range(height)])
    assert Grid.from_text(str(grid)) == grid


def test_cell_negation():
    assert ~Cell.ZERO is Cell.ONE
    assert ~Cell.ONE is Cell.ZERO
    assert str(Cell.ONE) == "1"


def test_lines(scenario_grid):
    assert scenario_grid.row(1) == [Cell.ZERO, None, None, Cell.ONE]
    assert scenario_grid.column(3) == [None, Cell.ONE, Cell.ONE, None]


def test_unknown_cells_in_reading_order(scenario_grid):
    assert list(scenario_grid.unknown_cells()) == [
        (0, 2), (0, 3), (1, 1), (1, 2), (2, 0), (2, 1), (3, 0), (3, 3),
    ]
    assert not scenario_grid.is_filled()


def test_copy_is_independent(scenario_grid):
    copy = scenario_grid.copy()
    copy[0, 2] = Cell.ONE
    assert scenario_grid[0, 2] is None
    assert copy != scenario_grid


def test_from_rows_round_trip():
    rows = [[0, 1, None], [None, 1, 0]]
    assert Grid.from_rows(rows).to_rows() == rows


@pytest.mark.parametrize("rows", [[[0, 2]], [["0", 1]], [[True, 0]]])
def test_from_rows_rejects_other_values(rows):
    with pytest.raises(InvalidCharError):
        Grid.from_rows(rows)


def test_from_rows_width_mismatch():
    with pytest.raises(WidthMismatchError):
        Grid.from_rows([[0, 1], [1]])


def test_out_of_range_index_is_index_error(scenario_grid):
    with pytest.raises(IndexError):
        scenario_grid[4, 0]
