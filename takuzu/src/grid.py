from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from takuzu.src.errors import EmptyGridError, InvalidCharError, WidthMismatchError


class Cell(IntEnum):
    ZERO = 0
    ONE = 1

    def __invert__(self) -> "Cell":
        return Cell.ONE if self is Cell.ZERO else Cell.ZERO

    def __str__(self) -> str:
        return str(self.value)


UNKNOWN_SYMBOL = "-"
IGNORED_CHARS = " \t\r\n"
SYMBOLS = {"0": Cell.ZERO, "1": Cell.ONE, UNKNOWN_SYMBOL: None}

Coordinate = Tuple[int, int]


class Grid:
    """
    Rectangular grid of optional cells (None means unknown).

    Holds no rule knowledge; see ValidityChecker and Solver.
    """

    def __init__(self, cells: List[List[Optional[Cell]]]):
        if not cells:
            raise EmptyGridError()
        width = len(cells[0])
        if width == 0:
            raise EmptyGridError()
        for row in cells:
            if len(row) != width:
                raise WidthMismatchError(width, len(row))
        self.cells = cells
        self.width = width
        self.height = len(cells)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> "Grid":
        """
        从文本行构建网格

        Args:
            lines: text lines, '0', '1' and '-' are cells, spaces and tabs are ignored

        Returns:
            Grid: the parsed grid

        Raises:
            InvalidCharError: on any other character
            WidthMismatchError: if a row's length differs from the first row
            EmptyGridError: if no non-blank line was found
        """
        cells: List[List[Optional[Cell]]] = []
        for line in lines:
            row = []
            for char in line:
                if char in IGNORED_CHARS:
                    continue
                if char not in SYMBOLS:
                    raise InvalidCharError(char)
                row.append(SYMBOLS[char])

            # blank lines do not count toward the height
            if not row:
                continue
            if cells and len(row) != len(cells[0]):
                raise WidthMismatchError(len(cells[0]), len(row))
            cells.append(row)

        return cls(cells)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return cls.parse(text.splitlines())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> "Grid":
        """Build a grid from nested lists of 0, 1 and None"""
        cells = []
        for row in rows:
            converted = []
            for value in row:
                if value is None:
                    converted.append(None)
                elif isinstance(value, bool) or value not in (0, 1):
                    raise InvalidCharError(value)
                else:
                    converted.append(Cell(value))
            if cells and len(converted) != len(cells[0]):
                raise WidthMismatchError(len(cells[0]), len(converted))
            cells.append(converted)
        return cls(cells)

    def to_rows(self) -> List[List[Optional[int]]]:
        return [[None if cell is None else int(cell) for cell in row] for row in self.cells]

    def __getitem__(self, index: Coordinate) -> Optional[Cell]:
        row, col = index
        return self.cells[row][col]

    def __setitem__(self, index: Coordinate, value: Optional[Cell]) -> None:
        row, col = index
        self.cells[row][col] = value

    def row(self, index: int) -> List[Optional[Cell]]:
        return list(self.cells[index])

    def column(self, index: int) -> List[Optional[Cell]]:
        return [self.cells[i][index] for i in range(self.height)]

    def is_filled(self) -> bool:
        return all(cell is not None for row in self.cells for cell in row)

    def unknown_cells(self) -> Iterator[Coordinate]:
        for i in range(self.height):
            for j in range(self.width):
                if self.cells[i][j] is None:
                    yield (i, j)

    def copy(self) -> "Grid":
        return Grid([list(row) for row in self.cells])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return "\n".join(
            " ".join(UNKNOWN_SYMBOL if cell is None else str(cell) for cell in row)
            for row in self.cells
        )
