"""
UI Module - User Interface Components and Screens
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Button, Label, Checkbox, RadioGroup
from .popups import QuizPopup, FeedbackPopup, ResultsPopup, ErrorNotice
from .screen_starfield import StarfieldScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen",
    "Button", "Label", "Checkbox", "RadioGroup",
    "QuizPopup", "FeedbackPopup", "ResultsPopup", "ErrorNotice",
    "StarfieldScreen",
]
