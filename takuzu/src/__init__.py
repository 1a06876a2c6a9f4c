from .errors import (
    AdjacentCellsError,
    EmptyGridError,
    GridError,
    GridReadError,
    InvalidCharError,
    LaneUnbalancedError,
    SameLanesError,
    SearchLimitError,
    UnsatisfiableError,
    ViolationError,
    WidthMismatchError,
)
from .grid import Cell, Grid
from .validity_checker import ValidityChecker, check_grid
from .solver import Solver, solve

__all__ = [
    "Cell",
    "Grid",
    "ValidityChecker",
    "check_grid",
    "Solver",
    "solve",
    "GridError",
    "GridReadError",
    "InvalidCharError",
    "WidthMismatchError",
    "EmptyGridError",
    "ViolationError",
    "AdjacentCellsError",
    "LaneUnbalancedError",
    "SameLanesError",
    "UnsatisfiableError",
    "SearchLimitError",
]
