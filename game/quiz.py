"""
Star Quiz Engine

One multiple-choice question at a time: "which star is this?"
Distractors are the named stars nearest in 3D space, so the options
are plausible neighbours rather than random names.

States:  IDLE --start()--> ACTIVE --submit()/skip()--> IDLE
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, MutableSequence, Optional, Sequence, Tuple, TypeVar

import numpy as np

from core.celestial_math import distances_from
from core.errors import NoSelectionError, QuizActiveError
from core.types import StarRecord
from .stats import QuizStats

logger = logging.getLogger("Quiz")

T = TypeVar("T")


def fisher_yates_shuffle(items: MutableSequence[T],
                         rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Unbiased in-place shuffle. Returns `items` for convenience."""
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


class QuizPhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"


@dataclass(frozen=True)
class QuizQuestion:
    """The open question: correct star plus shuffled options"""
    star: StarRecord
    options: Tuple[StarRecord, ...]


@dataclass(frozen=True)
class QuizOutcome:
    """Result of one submitted answer"""
    is_correct: bool
    selected_id: int
    answer: StarRecord

    @property
    def message(self) -> str:
        if self.is_correct:
            return "Correct!"
        return f"Incorrect. The correct answer was {self.answer.proper}"


class QuizEngine:
    """
    Quiz state machine

    Owns the quiz counters (QuizStats) and the single active question.
    """

    def __init__(self, named_stars: Sequence[StarRecord],
                 rng: Optional[random.Random] = None,
                 distractor_count: int = 3):
        self.named_stars: Tuple[StarRecord, ...] = tuple(named_stars)
        self.rng = rng or random.Random()
        self.distractor_count = distractor_count
        self.stats = QuizStats()

        self.phase = QuizPhase.IDLE
        self.current_star: Optional[StarRecord] = None
        self.correct_answer: Optional[StarRecord] = None
        self.question: Optional[QuizQuestion] = None

    @property
    def quiz_active(self) -> bool:
        return self.phase == QuizPhase.ACTIVE

    # -----------------------------------------------------------------------
    # Distractors
    # -----------------------------------------------------------------------

    def nearest_stars(self, star: StarRecord, count: Optional[int] = None) -> List[StarRecord]:
        """
        The `count` named stars closest to `star` in 3D, nearest first.
        Ties keep catalog order (stable sort).
        """
        if count is None:
            count = self.distractor_count
        others = [s for s in self.named_stars if s.id != star.id]
        if not others or count <= 0:
            return []
        order = np.argsort(distances_from(star, others), kind="stable")
        return [others[i] for i in order[:count]]

    # -----------------------------------------------------------------------
    # Transitions
    # -----------------------------------------------------------------------

    def start(self, star: StarRecord) -> QuizQuestion:
        """
        Open a question about `star`.

        Raises:
            QuizActiveError: a question is already open
        """
        if self.quiz_active:
            raise QuizActiveError(f"Quiz already active for {self.current_star.proper}")

        options = [star] + self.nearest_stars(star)
        fisher_yates_shuffle(options, self.rng)

        self.current_star = star
        self.correct_answer = star
        self.question = QuizQuestion(star=star, options=tuple(options))
        self.phase = QuizPhase.ACTIVE
        logger.debug("Quiz started for %s with %d options", star.proper, len(options))
        return self.question

    def submit(self, selected_id: Optional[int]) -> QuizOutcome:
        """
        Score the selected option and close the question.

        Raises:
            NoSelectionError: nothing was selected (state unchanged)
            QuizActiveError: no question is open
        """
        if not self.quiz_active:
            raise QuizActiveError("No active quiz question to answer")
        if selected_id is None:
            raise NoSelectionError("Please select an answer")

        answer = self.correct_answer
        is_correct = int(selected_id) == answer.id
        self.stats.record(is_correct)
        self._close()
        logger.info("Answered %s: %s (%s)", answer.proper,
                    "correct" if is_correct else "wrong", self.stats.summary())
        return QuizOutcome(is_correct=is_correct, selected_id=int(selected_id), answer=answer)

    def skip(self):
        """Close the question without scoring it"""
        if self.quiz_active:
            logger.debug("Skipped %s", self.current_star.proper)
        self._close()

    def reset(self):
        """Clear the counters and any open question together"""
        self._close()
        self.current_star = None
        self.correct_answer = None
        self.stats.reset()

    def _close(self):
        self.phase = QuizPhase.IDLE
        self.question = None
