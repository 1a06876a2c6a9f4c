from .instruction_generator import TakuzuInstructionGenerator
from .reward_calculator import TakuzuRewardCalculator
from .puzzle_image import render_puzzle_image

__all__ = [
    "TakuzuInstructionGenerator",
    "TakuzuRewardCalculator",
    "render_puzzle_image",
]
