from abc import ABC, abstractmethod
from typing import Any


class BaseRewardCalculator(ABC):
    """
    奖励计算器基类

    Subclasses extract an answer from the raw model output and score it
    against the identity produced by the matching instruction generator.
    """

    @staticmethod
    @abstractmethod
    def extract_output(output_str: str) -> Any:
        pass

    @classmethod
    @abstractmethod
    def _verify_correction(cls, extracted_output, identity: dict, **kwargs) -> float:
        pass

    @classmethod
    def verify_score(cls, model_output: str, identity: dict, format_score: float = 0.0, **kwargs) -> float:
        """
        Args:
            model_output: 模型的原始输出
            identity: 任务信息（来自 case_generator）
            format_score: score given when an answer was extracted but is wrong

        Returns:
            float: 得分
        """
        extracted_output = cls.extract_output(model_output)
        if extracted_output is None:
            return 0.0
        score = cls._verify_correction(extracted_output, identity, **kwargs)
        if score <= 0.0:
            return format_score
        return score
