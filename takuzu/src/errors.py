from typing import Optional


class GridError(Exception):
    """Base class of every error raised while parsing, checking or solving a grid"""
    pass


class GridReadError(GridError):
    """读取谜题来源失败（包装底层 I/O 异常）"""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to read grid from {source}: {reason}")
        self.source = source
        self.reason = reason


class InvalidCharError(GridError):
    def __init__(self, char):
        super().__init__(f"Invalid character: {char!r}")
        self.char = char


class WidthMismatchError(GridError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Width mismatch: expected {expected} cells, got {actual}")
        self.expected = expected
        self.actual = actual


class EmptyGridError(GridError):
    def __init__(self):
        super().__init__("Grid is empty")


class ViolationError(GridError):
    """
    A rule violation found by the validity checker.

    Args:
        axis: "row" or "column"
        index: index of the offending line
    """

    description = "Rule violation"

    def __init__(self, axis: str, index: int, detail: Optional[str] = None):
        message = f"{self.description} in {axis} {index}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.axis = axis
        self.index = index

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class AdjacentCellsError(ViolationError):
    description = "Three adjacent equal cells"

    def __init__(self, axis: str, index: int, position: int):
        super().__init__(axis, index, f"starting at {position}")
        self.position = position


class LaneUnbalancedError(ViolationError):
    description = "Unbalanced lane"

    def __init__(self, axis: str, index: int, zeros: int, ones: int):
        super().__init__(axis, index, f"{zeros} zeros, {ones} ones")
        self.zeros = zeros
        self.ones = ones


class SameLanesError(ViolationError):
    description = "Identical lanes"

    def __init__(self, axis: str, index: int, other: int):
        super().__init__(axis, index, f"same as {axis} {other}")
        self.other = other


class UnsatisfiableError(GridError):
    def __init__(self):
        super().__init__("Grid has no valid completion")


class SearchLimitError(GridError):
    """搜索步数超过上限"""

    def __init__(self, max_steps: int):
        super().__init__(f"Search gave up after {max_steps} steps")
        self.max_steps = max_steps
