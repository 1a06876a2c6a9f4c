import json
import logging
import os
import re
from typing import List, Optional

from takuzu.src.base_reward_calculator import BaseRewardCalculator
from takuzu.src.errors import GridError
from takuzu.src.grid import Grid
from takuzu.src.validity_checker import ValidityChecker

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("TAKUZU_LOGGING_LEVEL", "WARN"))

GRID_ROW_PATTERN = re.compile(r"^[01](?:[ \t]*[01])*$")
JSON_GRID_PATTERN = re.compile(r"\[\s*\[.*?\]\s*\]", re.DOTALL)


class TakuzuRewardCalculator(BaseRewardCalculator):
    """Takuzu 奖励计算器: any valid completion that keeps the clues scores 1.0"""

    @staticmethod
    def extract_output(output_str: str) -> Optional[List[List[int]]]:
        """
        从模型输出中提取答案网格

        Text after the last "Answer:" is preferred. Inside it, a JSON list of
        lists wins over plain rows of 0s and 1s; for plain rows the last
        contiguous block is taken.

        Returns:
            Optional[List[List[int]]]: rows of 0/1, or None if nothing was found
        """
        if not output_str:
            return None
        if "Answer:" in output_str:
            output_str = output_str.split("Answer:")[-1]

        for match in reversed(JSON_GRID_PATTERN.findall(output_str)):
            try:
                rows = json.loads(match)
            except json.JSONDecodeError:
                continue
            if isinstance(rows, list) and all(isinstance(row, list) for row in rows):
                return rows

        blocks = []
        current = []
        for line in output_str.splitlines():
            line = line.strip()
            if GRID_ROW_PATTERN.match(line):
                current.append(line)
            elif current:
                blocks.append(current)
                current = []
        if current:
            blocks.append(current)
        if not blocks:
            return None
        return [[int(char) for char in row if char in "01"] for row in blocks[-1]]

    @classmethod
    def _verify_correction(cls, extracted_output, identity: dict, **kwargs) -> float:
        """
        Args:
            extracted_output: rows returned by extract_output
            identity (dict): 任务信息，包含 puzzle

        Returns:
            float: 1.0 if the answer solves the puzzle, otherwise 0.0
        """
        try:
            answer = Grid.from_rows(extracted_output)
            puzzle = Grid.from_rows(identity["puzzle"])
        except GridError as e:
            logger.debug(f"Rejecting malformed answer: {e}")
            return 0.0

        if (answer.height, answer.width) != (puzzle.height, puzzle.width):
            return 0.0
        if not answer.is_filled():
            return 0.0
        for i in range(puzzle.height):
            for j in range(puzzle.width):
                if puzzle[i, j] is not None and puzzle[i, j] != answer[i, j]:
                    return 0.0

        if not ValidityChecker(answer).is_valid():
            return 0.0
        return 1.0
