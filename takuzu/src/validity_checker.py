from typing import Iterator, List, Optional, Sequence

from takuzu.src.errors import AdjacentCellsError, LaneUnbalancedError, SameLanesError, ViolationError
from takuzu.src.grid import Cell, Grid


ROW = "row"
COLUMN = "column"


class ValidityChecker:
    """
    Read-only rule checks over a (possibly partial) grid.

    Violations are reported in a fixed priority order: triple runs in rows,
    then columns; unbalanced full rows, then columns; identical full row
    pairs, then column pairs.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def check(self) -> None:
        """Raise the first violation found, if any"""
        for violation in self._iter_violations():
            raise violation

    def violations(self) -> List[ViolationError]:
        return list(self._iter_violations())

    def is_valid(self) -> bool:
        for _ in self._iter_violations():
            return False
        return True

    def check_cell(self, row: int, col: int) -> None:
        """
        只检查经过 (row, col) 的窗口、行列和行列对

        For a grid that was valid before (row, col) was set, this gives the
        same verdict as check().
        """
        grid = self.grid
        row_lane = grid.row(row)
        col_lane = grid.column(col)

        for start in range(max(0, col - 2), min(col, grid.width - 3) + 1):
            self._check_window(row_lane, ROW, row, start)
        for start in range(max(0, row - 2), min(row, grid.height - 3) + 1):
            self._check_window(col_lane, COLUMN, col, start)

        self._check_balance(row_lane, ROW, row)
        self._check_balance(col_lane, COLUMN, col)

        # only a full lane can repeat another one
        if None not in row_lane:
            self._check_distinct_from_all(row_lane, ROW, row, grid.cells)
        if None not in col_lane:
            self._check_distinct_from_all(col_lane, COLUMN, col, list(zip(*grid.cells)))

    def _iter_violations(self) -> Iterator[ViolationError]:
        grid = self.grid
        rows = [grid.row(i) for i in range(grid.height)]
        columns = [grid.column(j) for j in range(grid.width)]

        # No more than 2 consecutive values in a line
        for axis, lanes in ((ROW, rows), (COLUMN, columns)):
            for index, lane in enumerate(lanes):
                for start in range(len(lane) - 2):
                    violation = self._window_violation(lane, axis, index, start)
                    if violation:
                        yield violation

        # Full lines are balanced
        for axis, lanes in ((ROW, rows), (COLUMN, columns)):
            for index, lane in enumerate(lanes):
                violation = self._balance_violation(lane, axis, index)
                if violation:
                    yield violation

        # Full lines are pairwise different
        for axis, lanes in ((ROW, rows), (COLUMN, columns)):
            for first in range(len(lanes) - 1):
                for second in range(first + 1, len(lanes)):
                    if _same_full_lanes(lanes[first], lanes[second]):
                        yield SameLanesError(axis, first, second)

    def _check_window(self, lane, axis, index, start) -> None:
        violation = self._window_violation(lane, axis, index, start)
        if violation:
            raise violation

    def _check_balance(self, lane, axis, index) -> None:
        violation = self._balance_violation(lane, axis, index)
        if violation:
            raise violation

    def _check_distinct_from_all(self, lane, axis, index, lanes) -> None:
        for other, other_lane in enumerate(lanes):
            if other != index and _same_full_lanes(lane, other_lane):
                first, second = sorted((index, other))
                raise SameLanesError(axis, first, second)

    @staticmethod
    def _window_violation(lane, axis, index, start) -> Optional[AdjacentCellsError]:
        first, second, third = lane[start], lane[start + 1], lane[start + 2]
        if first is not None and first == second == third:
            return AdjacentCellsError(axis, index, start)
        return None

    @staticmethod
    def _balance_violation(lane, axis, index) -> Optional[LaneUnbalancedError]:
        # a lane with an unknown cell can still be balanced later
        if None in lane:
            return None
        zeros = lane.count(Cell.ZERO)
        ones = len(lane) - zeros
        if zeros != ones:
            return LaneUnbalancedError(axis, index, zeros, ones)
        return None


def _same_full_lanes(first: Sequence[Optional[Cell]], second: Sequence[Optional[Cell]]) -> bool:
    for a, b in zip(first, second):
        if a is None or b is None or a != b:
            return False
    return True


def check_grid(grid: Grid) -> None:
    ValidityChecker(grid).check()
