import itertools

import pytest

from takuzu.src.grid import Cell, Grid
from takuzu.src.validity_checker import ValidityChecker

SCENARIO_4X4 = "1 0 - -\n0 - - 1\n- - 0 1\n- 1 1 -"


@pytest.fixture
def scenario_grid():
    return Grid.from_text(SCENARIO_4X4)


def brute_force_solutions(grid):
    """Every full assignment of the unknown cells that passes the checker"""
    unknown = list(grid.unknown_cells())
    solutions = []
    for values in itertools.product((Cell.ZERO, Cell.ONE), repeat=len(unknown)):
        candidate = grid.copy()
        for (row, col), value in zip(unknown, values):
            candidate[row, col] = value
        if ValidityChecker(candidate).is_valid():
            solutions.append(candidate)
    return solutions
