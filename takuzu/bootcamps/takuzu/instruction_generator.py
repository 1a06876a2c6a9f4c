import logging
import os
from typing import Any, Dict, Optional

import numpy as np

from takuzu.src.base_instruction_generator import BaseInstructionGenerator
from takuzu.src.errors import SearchLimitError
from takuzu.src.grid import Grid
from takuzu.src.solver import Solver
from .puzzle_image import render_puzzle_image

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("TAKUZU_LOGGING_LEVEL", "WARN"))

# difficulty 1-5 -> share of cells kept as clues
DIFFICULTY_CLUE_DENSITY = {
    1: 0.8,
    2: 0.65,
    3: 0.55,
    4: 0.45,
    5: 0.35,
}

QUESTION_TEMPLATE = """Please examine the grid carefully. It shows a Takuzu (Binairo) puzzle with 0s and 1s. Empty cells are marked with '-' and need to be filled.

## Rules:
1. Fill every empty cell with 0 or 1
2. Each row must contain exactly {row_half} 0s and {row_half} 1s, each column exactly {col_half} 0s and {col_half} 1s
3. No three consecutive identical digits in any row or column
4. All rows must be unique and all columns must be unique

### Current Game State:
{grid_text}

### Game State Explanation:
- Grid dimensions: {height} rows x {width} columns
- Filled cells: {filled}
- Empty cells: {empty}

### Output Format:
Your answer must be the complete grid of 0s and 1s separated by spaces, with rows separated by newlines, after the line "Answer:". For example:

Answer:
{example}
"""


class TakuzuInstructionGenerator(BaseInstructionGenerator):
    """
    Takuzu 题目生成器

    A solution is built by the solver with a shuffled candidate order, then
    clues are removed in random order until the requested clue density is
    reached. With unique=True a clue is only removed if the puzzle keeps
    exactly one completion.
    """

    def __init__(self,
                 width: int = 6,
                 height: Optional[int] = None,
                 clue_density: float = 0.5,
                 difficulty: Optional[int] = None,
                 unique: bool = True,
                 seed: Optional[int] = None,
                 max_steps: Optional[int] = None,
                 image_dir: Optional[str] = None):
        """
        Args:
            width (int): 列数，必须为偶数
            height (Optional[int]): 行数，默认与 width 相同
            clue_density (float): share of cells kept as clues, in (0, 1]
            difficulty (Optional[int]): 1-5, overrides clue_density
            unique (bool): only produce puzzles with a single solution
            seed (Optional[int]): 随机种子
            max_steps (Optional[int]): search limit for each solver call
            image_dir (Optional[str]): if set, a PNG of every puzzle is saved there
        """
        super().__init__()
        self.width = width
        self.height = height if height is not None else width
        self.unique = unique
        self.seed = seed
        self.max_steps = max_steps
        self.image_dir = image_dir

        if difficulty is not None:
            if difficulty not in DIFFICULTY_CLUE_DENSITY:
                raise ValueError(f"difficulty must be one of {sorted(DIFFICULTY_CLUE_DENSITY)}, got {difficulty}")
            clue_density = DIFFICULTY_CLUE_DENSITY[difficulty]
        self.difficulty = difficulty
        self.clue_density = clue_density

        if self.width < 2 or self.height < 2 or self.width % 2 or self.height % 2:
            raise ValueError(f"Grid size must be even, got {self.height}x{self.width}")
        if not 0.0 < self.clue_density <= 1.0:
            raise ValueError(f"clue_density must be in (0, 1], got {self.clue_density}")

        self.rng = np.random.default_rng(seed)
        self._case_count = 0

    def case_generator(self) -> Dict[str, Any]:
        solution = self.generate_solution()
        puzzle = self.carve_puzzle(solution)
        self._case_count += 1

        identity = {
            "puzzle": puzzle.to_rows(),
            "solution": solution.to_rows(),
            "answer": str(solution),
            "width": self.width,
            "height": self.height,
            "clue_density": self.clue_density,
            "difficulty": self.difficulty,
        }

        if self.image_dir:
            os.makedirs(self.image_dir, exist_ok=True)
            image_path = os.path.join(self.image_dir, f"takuzu_{self.height}x{self.width}_{self._case_count}.png")
            render_puzzle_image(puzzle).save(image_path)
            identity["image"] = image_path

        return identity

    def generate_solution(self) -> Grid:
        grid = Grid([[None] * self.width for _ in range(self.height)])
        return Solver(grid, rng=self.rng, max_steps=self.max_steps).solve()

    def carve_puzzle(self, solution: Grid) -> Grid:
        puzzle = solution.copy()
        coordinates = [(i, j) for i in range(self.height) for j in range(self.width)]
        clues = len(coordinates)
        target = max(1, int(round(self.clue_density * clues)))

        for k in self.rng.permutation(len(coordinates)):
            if clues <= target:
                break
            row, col = coordinates[k]
            value = puzzle[row, col]
            puzzle[row, col] = None
            if self.unique and not self._has_unique_solution(puzzle):
                puzzle[row, col] = value
                continue
            clues -= 1

        if clues > target:
            logger.info(f"Stopped at {clues} clues (target {target}), more removals would break uniqueness")
        return puzzle

    def _has_unique_solution(self, puzzle: Grid) -> bool:
        try:
            return Solver(puzzle, max_steps=self.max_steps).count_solutions(limit=2) == 1
        except SearchLimitError as e:
            logger.debug(f"Keeping clue, uniqueness check aborted: {e}")
            return False

    def prompt_func(self, identity: Dict[str, Any]) -> str:
        puzzle = Grid.from_rows(identity["puzzle"])
        filled = sum(1 for row in identity["puzzle"] for cell in row if cell is not None)
        return QUESTION_TEMPLATE.format(
            row_half=puzzle.width // 2,
            col_half=puzzle.height // 2,
            grid_text=str(puzzle),
            height=puzzle.height,
            width=puzzle.width,
            filled=filled,
            empty=puzzle.width * puzzle.height - filled,
            example=_example_answer(puzzle.width, puzzle.height),
        )


def _example_answer(width: int, height: int) -> str:
    # placeholder rows in the shape of the puzzle
    return "\n".join(" ".join("x" for _ in range(width)) for _ in range(height))
