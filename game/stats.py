"""
Quiz Statistics

Running counters for the star quiz session.
"""

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


@dataclass
class QuizStats:
    """Answered / correct counters"""
    answered: int = 0
    correct: int = 0

    @property
    def success_rate(self) -> int:
        """Percentage of correct answers, 0 before the first answer."""
        if self.answered <= 0:
            return 0
        return round_half_up(self.correct / self.answered * 100)

    def record(self, is_correct: bool):
        """
        Count one submitted answer

        Args:
            is_correct: True if the chosen option was the quizzed star
        """
        self.answered += 1
        if is_correct:
            self.correct += 1

    def reset(self):
        """Zero both counters together"""
        self.answered = 0
        self.correct = 0

    def summary(self) -> str:
        return f"Answered: {self.answered}  Correct: {self.correct}  Rate: {self.success_rate}%"
