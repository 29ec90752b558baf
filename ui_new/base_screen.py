"""
Base Screen

A screen turns pygame events into state changes and draws the current
state. The app loop only redraws when handle_input() asks for it.
"""

import pygame
from abc import ABC, abstractmethod
from .theme import get_theme


class BaseScreen(ABC):
    """Interface the application loop talks to"""

    def __init__(self, screen_name: str):
        self.screen_name = screen_name
        self.active = False
        self.theme = get_theme()

    def on_enter(self):
        self.active = True

    def on_exit(self):
        self.active = False

    @abstractmethod
    def handle_input(self, events: list[pygame.event.Event]) -> bool:
        """
        Process the events queued since the last call.

        Returns:
            True if the screen must be redrawn
        """

    @abstractmethod
    def render(self, surface: pygame.Surface):
        """Full redraw onto `surface`"""

    def draw_footer(self, surface: pygame.Surface, rect: pygame.Rect, text: str):
        """Status strip along the bottom edge (key hints, cursor readout)"""
        pygame.draw.rect(surface, self.theme.colors.BG_PANEL, rect)
        pygame.draw.line(surface, self.theme.colors.BORDER_NORMAL,
                         rect.topleft, rect.topright)
        font = self.theme.fonts.small()
        self.theme.draw_text(surface, font, rect.x + 10,
                             rect.centery - font.get_height() // 2,
                             text, self.theme.colors.FG_DIM)
