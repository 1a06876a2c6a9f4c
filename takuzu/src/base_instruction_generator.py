import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Tuple

from takuzu.src.errors import GridError

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("TAKUZU_LOGGING_LEVEL", "WARN"))


class BaseInstructionGenerator(ABC):
    """
    指令生成器基类

    Subclasses produce an identity dict (case_generator) and turn it into a
    prompt (prompt_func). data_source ties generated records to the reward
    calculator of the same name.
    """

    def __init__(self, *args, **kwargs):
        self.data_source = f"bootcamp/{self.__class__.__name__.replace('InstructionGenerator', '')}"

    @abstractmethod
    def prompt_func(self, identity: Dict) -> str:
        pass

    @abstractmethod
    def case_generator(self) -> Dict:
        pass

    def generate_case(self, max_attempts: int = 20) -> Tuple[Dict, str]:
        """Retry case generation on grid errors, e.g. a solver search limit"""
        for attempt in range(max_attempts):
            try:
                identity = self.case_generator()
                return identity, self.prompt_func(identity)
            except GridError as e:
                logger.warning(f"Case generation attempt {attempt + 1} failed: {e}")
        raise RuntimeError(f"Failed to generate example after {max_attempts} attempts.")
