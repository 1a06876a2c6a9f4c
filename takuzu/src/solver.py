import logging
import os
from typing import Iterator, List, Optional, Tuple

from takuzu.src.errors import SearchLimitError, UnsatisfiableError, ViolationError
from takuzu.src.grid import Cell, Grid
from takuzu.src.validity_checker import ValidityChecker

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("TAKUZU_LOGGING_LEVEL", "WARN"))

VALUE_ORDER = (Cell.ZERO, Cell.ONE)


class _ChoicePoint:
    __slots__ = ("row", "col", "remaining")

    def __init__(self, row: int, col: int, candidates: List[Cell]):
        self.row = row
        self.col = col
        self.remaining = candidates


class Solver:
    """
    Backtracking solver with most-constrained-cell selection.

    The grid is mutated in place. On success it holds one complete valid
    solution; when no completion exists every assignment is undone before
    UnsatisfiableError is raised.

    Args:
        grid: a grid that passes the validity checker
        rng: optional random source (anything with a random() method); when
            given, the candidate order is shuffled at every choice point
        max_steps: optional limit on the number of tentative assignments
    """

    def __init__(self, grid: Grid, rng=None, max_steps: Optional[int] = None):
        self.grid = grid
        self.checker = ValidityChecker(grid)
        self.rng = rng
        self.max_steps = max_steps
        self.assignments = 0
        self.backtracks = 0
        self._stack: List[_ChoicePoint] = []

    def solve(self) -> Grid:
        search = self._search()
        try:
            next(search)
        except StopIteration:
            raise UnsatisfiableError() from None
        finally:
            self._log_stats("solve")
        # leave the grid at the solution instead of resuming the search
        search.close()
        return self.grid

    def iter_solutions(self) -> Iterator[Grid]:
        """
        Yield a copy of every completion.

        The search runs on a private copy, so the grid stays untouched even
        while the iterator is only partly consumed.
        """
        inner = Solver(self.grid.copy(), rng=self.rng, max_steps=self.max_steps)
        try:
            for _ in inner._search():
                yield inner.grid.copy()
        finally:
            self.assignments += inner.assignments
            self.backtracks += inner.backtracks
            self._log_stats("iter_solutions")

    def count_solutions(self, limit: Optional[int] = None) -> int:
        count = 0
        if limit is not None and limit <= 0:
            return count
        search = self._search()
        try:
            for _ in search:
                count += 1
                if limit is not None and count >= limit:
                    break
        finally:
            search.close()
            self._restore()
        return count

    def _search(self) -> Iterator[None]:
        self.checker.check()
        self._stack = []

        while True:
            choice = self._select_cell()
            if choice is None:
                # every cell was checked when it was set
                yield None
                if not self._backtrack():
                    return
                continue

            row, col, candidates = choice
            self._stack.append(_ChoicePoint(row, col, candidates))
            if not self._backtrack():
                return

    def _backtrack(self) -> bool:
        """
        Move the top choice point to its next legal value, popping exhausted
        choice points. Returns False once the stack is empty.
        """
        stack = self._stack
        while stack:
            point = stack[-1]
            self.grid[point.row, point.col] = None
            while point.remaining:
                value = point.remaining.pop(0)
                if self._try_assign(point.row, point.col, value):
                    return True
            stack.pop()
            self.backtracks += 1
        return False

    def _try_assign(self, row: int, col: int, value: Cell) -> bool:
        if self.max_steps is not None and self.assignments >= self.max_steps:
            self._restore()
            raise SearchLimitError(self.max_steps)
        self.assignments += 1

        self.grid[row, col] = value
        try:
            self.checker.check_cell(row, col)
        except ViolationError:
            self.grid[row, col] = None
            return False
        return True

    def _restore(self) -> None:
        for point in self._stack:
            self.grid[point.row, point.col] = None
        self._stack = []

    def _select_cell(self) -> Optional[Tuple[int, int, List[Cell]]]:
        """
        Pick the unknown cell with the fewest legal values, ties going to the
        first one in reading order. None means the grid is filled.
        """
        grid = self.grid
        row_counts = [_symbol_counts(grid.row(i)) for i in range(grid.height)]
        col_counts = [_symbol_counts(grid.column(j)) for j in range(grid.width)]

        best = None
        for row, col in grid.unknown_cells():
            candidates = self._legal_values(row, col, row_counts[row], col_counts[col])
            if best is None or len(candidates) < len(best[2]):
                best = (row, col, candidates)
                if not candidates:
                    break

        if best is not None and self.rng is not None and len(best[2]) == 2:
            if self.rng.random() < 0.5:
                best[2].reverse()
        return best

    def _legal_values(self, row: int, col: int, row_counts: List[int], col_counts: List[int]) -> List[Cell]:
        grid = self.grid
        legal = []
        for value in VALUE_ORDER:
            # a lane can hold at most half of its cells of each symbol
            if (row_counts[value] + 1) * 2 > grid.width:
                continue
            if (col_counts[value] + 1) * 2 > grid.height:
                continue
            grid[row, col] = value
            try:
                self.checker.check_cell(row, col)
            except ViolationError:
                continue
            else:
                legal.append(value)
            finally:
                grid[row, col] = None
        return legal

    def _log_stats(self, operation: str) -> None:
        logger.debug(
            f"{operation} on {self.grid.height}x{self.grid.width} grid: "
            f"{self.assignments} assignments, {self.backtracks} backtracks"
        )


def _symbol_counts(lane: List[Optional[Cell]]) -> List[int]:
    """[zeros, ones] in a lane, indexed by Cell"""
    return [lane.count(Cell.ZERO), lane.count(Cell.ONE)]


def solve(grid: Grid, **kwargs) -> Grid:
    return Solver(grid, **kwargs).solve()
