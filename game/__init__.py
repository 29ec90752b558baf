"""
Game package - quiz engine, statistics and application state
"""
from .stats import QuizStats
from .quiz import QuizEngine, QuizOutcome, QuizQuestion, fisher_yates_shuffle
from .state_manager import AppState, StateManager

__all__ = [
    "QuizStats",
    "QuizEngine", "QuizOutcome", "QuizQuestion", "fisher_yates_shuffle",
    "AppState", "StateManager",
]
