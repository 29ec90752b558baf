"""
Popups - modal dialogs drawn over the star field

- QuizPopup: "Which star is this?" with radio options, Submit / Skip
- FeedbackPopup: correct / incorrect verdict
- ResultsPopup: final counters with Reset
- ErrorNotice: blocking data-load failure message

Popups are positioned each frame (layout) so they stay centred when the
window is resized.
"""

from typing import Callable, List, Optional

import pygame

from game.quiz import QuizOutcome, QuizQuestion
from game.stats import QuizStats
from .components import Button, RadioGroup
from .theme import get_theme


class Popup:
    """Centred modal panel"""

    width = 360
    height = 200

    def __init__(self, title: str):
        self.title = title
        self.rect = pygame.Rect(0, 0, self.width, self.height)
        self.buttons: List[Button] = []
        self.theme = get_theme()

    def layout(self, surface_size):
        W, H = surface_size
        self.rect.size = (self.width, self.height)
        self.rect.center = (W // 2, H // 2)
        self._place_children()

    def _place_children(self):
        pass

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event belonged to the popup."""
        for btn in self.buttons:
            if btn.handle_event(event):
                return True
        pos = getattr(event, "pos", None)
        return pos is not None and self.rect.collidepoint(pos)

    def update_hover(self, mouse_pos) -> bool:
        changed = False
        for btn in self.buttons:
            changed |= btn.update(mouse_pos)
        return changed

    def draw(self, surface: pygame.Surface):
        self.theme.draw_panel(surface, self.rect, self.title)
        for btn in self.buttons:
            btn.draw(surface)

    def _text(self, surface, text, dy, color=None, size='normal'):
        font = self.theme.fonts.get(size)
        self.theme.draw_text(surface, font, self.rect.centerx, self.rect.y + dy,
                             text, color or self.theme.colors.FG_PRIMARY, align='center')


class QuizPopup(Popup):
    """Multiple-choice question about the clicked star"""

    width = 380

    def __init__(self, on_submit: Callable[[Optional[int]], None], on_skip: Callable[[], None]):
        super().__init__("Which star is this?")
        self.options = RadioGroup(0, 0, self.width - 40)
        self.submit_btn = Button(0, 0, 140, 32, "SUBMIT",
                                 callback=lambda: on_submit(self.options.selected_value()))
        self.skip_btn = Button(0, 0, 140, 32, "SKIP", callback=on_skip)
        self.buttons = [self.submit_btn, self.skip_btn]
        self.question: Optional[QuizQuestion] = None
        self.prompt: Optional[str] = None

    def set_question(self, question: QuizQuestion):
        """Load a new question; clears any previous selection"""
        if question is self.question:
            return
        self.question = question
        self.options.set_options([(s.id, s.proper) for s in question.options])
        self.height = 44 + len(question.options) * self.options.item_height + 90

    def _place_children(self):
        self.options.x = self.rect.x + 20
        self.options.y = self.rect.y + 44
        by = self.rect.bottom - 46
        self.submit_btn.rect.topleft = (self.rect.x + 30, by)
        self.skip_btn.rect.topright = (self.rect.right - 30, by)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if self.options.handle_event(event):
            return True
        return super().handle_event(event)

    def draw(self, surface: pygame.Surface):
        super().draw(surface)
        self.options.draw(surface)
        if self.prompt:
            self._text(surface, self.prompt, self.rect.height - 78,
                       self.theme.colors.WARNING, 'small')


class FeedbackPopup(Popup):
    """Result of the last answer"""

    width = 460
    height = 150

    def __init__(self, on_close: Callable[[], None]):
        super().__init__("")
        self.close_btn = Button(0, 0, 120, 32, "CLOSE", callback=on_close)
        self.buttons = [self.close_btn]
        self.outcome: Optional[QuizOutcome] = None

    def _place_children(self):
        self.close_btn.rect.midbottom = (self.rect.centerx, self.rect.bottom - 14)

    def draw(self, surface: pygame.Surface):
        super().draw(surface)
        if self.outcome is None:
            return
        colors = self.theme.colors
        if self.outcome.is_correct:
            icon, color = "✓", colors.SUCCESS
        else:
            icon, color = "✗", colors.ERROR
        self._text(surface, icon, 16, color, 'title')
        self._text(surface, self.outcome.message, 56, color)


class ResultsPopup(Popup):
    """Session summary"""

    height = 220

    def __init__(self, on_reset: Callable[[], None]):
        super().__init__("Results")
        self.reset_btn = Button(0, 0, 140, 32, "RESET", callback=on_reset)
        self.buttons = [self.reset_btn]
        self.stats: Optional[QuizStats] = None

    def _place_children(self):
        self.reset_btn.rect.midbottom = (self.rect.centerx, self.rect.bottom - 14)

    def draw(self, surface: pygame.Surface):
        super().draw(surface)
        if self.stats is None:
            return
        self._text(surface, f"Answered: {self.stats.answered}", 50)
        self._text(surface, f"Correct: {self.stats.correct}", 80)
        self._text(surface, f"Success rate: {self.stats.success_rate}%", 110)


class ErrorNotice(Popup):
    """Blocking notice: the star data could not be loaded"""

    width = 560
    height = 130

    def __init__(self):
        super().__init__("Error")
        self.message = ""

    def handle_event(self, event: pygame.event.Event) -> bool:
        # Swallows everything; the user must restart
        return True

    def draw(self, surface: pygame.Surface):
        super().draw(surface)
        colors = self.theme.colors
        msg = self.message
        # wrap to two lines
        cut = msg.rfind(" ", 0, 60) if len(msg) > 60 else -1
        lines = [msg[:cut], msg[cut + 1:]] if cut > 0 else [msg]
        for i, line in enumerate(lines[:2]):
            self._text(surface, line[:70], 46 + i * 22, colors.ERROR, 'small')
        self._text(surface, "Check the data file and restart.", 98, colors.FG_DIM, 'small')
