import random

import pytest

from takuzu.src.errors import AdjacentCellsError, SearchLimitError, UnsatisfiableError
from takuzu.src.grid import Grid
from takuzu.src.solver import Solver, solve
from takuzu.src.validity_checker import ValidityChecker

from conftest import brute_force_solutions

SOLVED_4X4 = "1 0 1 0\n0 1 0 1\n1 0 0 1\n0 1 1 0"

UNSATISFIABLE_4X4 = "0 0 1 -\n- - - -\n- - - -\n0 0 1 -"


def test_solves_scenario(scenario_grid):
    result = solve(scenario_grid)
    assert result is scenario_grid
    assert str(result) == SOLVED_4X4


def test_solution_is_filled_and_valid(scenario_grid):
    Solver(scenario_grid).solve()
    assert scenario_grid.is_filled()
    assert ValidityChecker(scenario_grid).is_valid()
    for i in range(4):
        assert scenario_grid.row(i).count(0) == 2
        assert scenario_grid.column(i).count(0) == 2


def test_scenario_has_exactly_one_solution(scenario_grid):
    assert Solver(scenario_grid).count_solutions() == 1
    assert len(brute_force_solutions(scenario_grid)) == 1


def test_filled_valid_grid_is_returned_as_is():
    grid = Grid.from_text(SOLVED_4X4)
    assert str(Solver(grid).solve()) == SOLVED_4X4


def test_invalid_grid_is_rejected_before_search():
    grid = Grid.from_text("0 0 0 -\n- - - -")
    with pytest.raises(AdjacentCellsError):
        Solver(grid).solve()
    assert str(grid) == "0 0 0 -\n- - - -"


def test_odd_width_is_unsatisfiable_and_grid_is_restored():
    grid = Grid.from_text("- - -")
    with pytest.raises(UnsatisfiableError):
        Solver(grid).solve()
    assert str(grid) == "- - -"


def test_unsatisfiable_means_no_completion_exists():
    grid = Grid.from_text(UNSATISFIABLE_4X4)
    assert ValidityChecker(grid).is_valid()
    assert brute_force_solutions(grid) == []
    with pytest.raises(UnsatisfiableError):
        Solver(grid).solve()
    assert str(grid) == UNSATISFIABLE_4X4


@pytest.mark.parametrize("text", [
    "- - - -\n- - - -\n- - - -\n- - - -",
    "0 - - -\n- - 1 -\n- - - -\n- 1 - -",
    "- - 1 -\n- 0 - -\n0 - - -\n- - - 1",
    UNSATISFIABLE_4X4,
])
def test_count_matches_brute_force(text):
    grid = Grid.from_text(text)
    expected = brute_force_solutions(grid)
    assert Solver(grid).count_solutions() == len(expected)
    assert str(grid) == text


def test_iter_solutions_yields_distinct_valid_grids():
    grid = Grid.from_text("0 - - -\n- - 1 -\n- - - -\n- 1 - -")
    solutions = list(Solver(grid).iter_solutions())
    assert len(solutions) == len(brute_force_solutions(grid))
    assert len({str(s) for s in solutions}) == len(solutions)
    for solution in solutions:
        assert solution.is_filled()
        assert ValidityChecker(solution).is_valid()
    assert str(grid) == "0 - - -\n- - 1 -\n- - - -\n- 1 - -"


def test_count_solutions_stops_at_limit():
    grid = Grid([[None] * 4 for _ in range(4)])
    assert Solver(grid).count_solutions(limit=2) == 2
    assert not any(cell is not None for row in grid.cells for cell in row)


def test_search_is_deterministic():
    first = Grid([[None] * 6 for _ in range(6)])
    second = first.copy()
    assert str(solve(first)) == str(solve(second))
    assert ValidityChecker(first).is_valid()


def test_shuffled_search_still_finds_valid_solution():
    grid = Grid([[None] * 6 for _ in range(6)])
    Solver(grid, rng=random.Random(7)).solve()
    assert grid.is_filled()
    assert ValidityChecker(grid).is_valid()


def test_max_steps_restores_grid():
    grid = Grid([[None] * 6 for _ in range(6)])
    solver = Solver(grid, max_steps=1)
    with pytest.raises(SearchLimitError):
        solver.solve()
    assert list(grid.unknown_cells()) == [(i, j) for i in range(6) for j in range(6)]


def test_counters_are_updated(scenario_grid):
    solver = Solver(scenario_grid)
    solver.solve()
    assert solver.assignments >= 8


def test_count_solutions_with_zero_limit():
    grid = Grid([[None] * 4 for _ in range(4)])
    solver = Solver(grid)
    assert solver.count_solutions(limit=0) == 0
    assert solver.assignments == 0


def test_partly_consumed_iterator_leaves_grid_untouched():
    grid = Grid([[None] * 4 for _ in range(4)])
    solutions = Solver(grid).iter_solutions()
    first = next(solutions)
    assert first.is_filled()
    assert list(grid.unknown_cells()) == [(i, j) for i in range(4) for j in range(4)]
    second = next(solutions)
    assert str(second) != str(first)
    assert not grid.is_filled()
    solutions.close()


def test_solves_empty_10x10():
    grid = Grid([[None] * 10 for _ in range(10)])
    Solver(grid).solve()
    assert grid.is_filled()
    assert ValidityChecker(grid).is_valid()
