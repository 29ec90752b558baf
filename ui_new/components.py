"""
UI Components

Small pygame widgets for the star quiz:
- Button: click fires a callback on release inside the button
- Label: one line of text
- Checkbox: boolean toggle with label
- RadioGroup: single-select list of (value, label) options
"""

import pygame
from typing import Callable, List, Optional, Sequence, Tuple
from .theme import get_theme


class Button:
    """
    Push button

    The callback runs on mouse-up, and only if the press also started on
    the button (dragging off cancels).
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, callback: Optional[Callable[[], object]] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.hovered = False
        self.pressed = False
        self.theme = get_theme()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was a press or release on this button"""
        if getattr(event, "button", None) != 1:
            return False
        inside = self.rect.collidepoint(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.pressed = inside
            return inside
        if event.type == pygame.MOUSEBUTTONUP:
            fire = self.pressed and inside
            self.pressed = False
            if fire and self.callback:
                self.callback()
            return fire
        return False

    def update(self, mouse_pos: Tuple[int, int]) -> bool:
        """Track hover. Returns True if the hover state changed."""
        hovered = self.rect.collidepoint(mouse_pos)
        changed = hovered != self.hovered
        self.hovered = hovered
        return changed

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        if self.pressed:
            fill, text_color = colors.BUTTON_PRESSED, colors.BG_DARK
        elif self.hovered:
            fill, text_color = colors.BG_PANEL_LIGHT, colors.BUTTON_HOVER
        else:
            fill, text_color = colors.BG_PANEL, colors.BUTTON_NORMAL
        border = colors.BORDER_FOCUS if self.hovered else colors.BORDER_NORMAL

        pygame.draw.rect(surface, fill, self.rect, border_radius=4)
        pygame.draw.rect(surface, border, self.rect, 1, border_radius=4)
        font = self.theme.fonts.normal()
        self.theme.draw_text(surface, font, self.rect.centerx,
                             self.rect.centery - font.get_height() // 2,
                             self.text, text_color, align='center')


class Label:
    """One line of text at a fixed position"""

    def __init__(self, x: int, y: int, text: str = "",
                 size: str = 'normal', color: Optional[Tuple[int, int, int]] = None):
        self.x = x
        self.y = y
        self.text = text
        self.size = size
        self.color = color
        self.theme = get_theme()

    def set_text(self, text: str):
        self.text = text

    def draw(self, surface: pygame.Surface):
        self.theme.draw_text(surface, self.theme.fonts.get(self.size), self.x, self.y,
                             self.text, self.color or self.theme.colors.FG_PRIMARY)


class Checkbox:
    """
    Boolean toggle

    Clicking the box or its label flips `checked` and calls
    callback(checked).
    """

    BOX = 18

    def __init__(self, x: int, y: int, label: str, checked: bool = False,
                 callback: Optional[Callable[[bool], object]] = None):
        self.rect = pygame.Rect(x, y, self.BOX, self.BOX)
        self.label = label
        self.checked = checked
        self.callback = callback
        self.theme = get_theme()

    @property
    def hit_rect(self) -> pygame.Rect:
        label_w = self.theme.fonts.normal().size(self.label)[0]
        return pygame.Rect(self.rect.x, self.rect.y, self.BOX + 8 + label_w, self.BOX)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the click toggled the box"""
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        if not self.hit_rect.collidepoint(event.pos):
            return False
        self.checked = not self.checked
        if self.callback:
            self.callback(self.checked)
        return True

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        pygame.draw.rect(surface, colors.BG_INPUT, self.rect)
        pygame.draw.rect(surface, colors.BORDER_NORMAL, self.rect, 1)
        if self.checked:
            pygame.draw.rect(surface, colors.ACCENT, self.rect.inflate(-8, -8))
        font = self.theme.fonts.normal()
        self.theme.draw_text(surface, font, self.rect.right + 8,
                             self.rect.centery - font.get_height() // 2,
                             self.label, colors.FG_PRIMARY)


class RadioGroup:
    """
    Radio buttons stacked vertically

    Options are (value, label) pairs. Nothing is selected after
    set_options(); selected_value() is then None.
    """

    def __init__(self, x: int, y: int, width: int,
                 options: Sequence[Tuple[int, str]] = (), item_height: int = 30):
        self.x = x
        self.y = y
        self.width = width
        self.item_height = item_height
        self.options: List[Tuple[int, str]] = list(options)
        self.selected_index = -1
        self.theme = get_theme()

    def set_options(self, options: Sequence[Tuple[int, str]]):
        self.options = list(options)
        self.selected_index = -1

    def item_rect(self, index: int) -> pygame.Rect:
        return pygame.Rect(self.x, self.y + index * self.item_height,
                           self.width, self.item_height)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width,
                           self.item_height * len(self.options))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Select the clicked option. Returns True if the click hit an option."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i in range(len(self.options)):
                if self.item_rect(i).collidepoint(event.pos):
                    self.selected_index = i
                    return True
        return False

    def selected_value(self) -> Optional[int]:
        if 0 <= self.selected_index < len(self.options):
            return self.options[self.selected_index][0]
        return None

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        font = self.theme.fonts.normal()
        for i, (_, label) in enumerate(self.options):
            r = self.item_rect(i)
            selected = i == self.selected_index
            if selected:
                pygame.draw.rect(surface, colors.BG_PANEL_LIGHT, r, border_radius=3)
            dot = (r.x + 14, r.centery)
            pygame.draw.circle(surface, colors.BORDER_NORMAL, dot, 7, 1)
            if selected:
                pygame.draw.circle(surface, colors.ACCENT_BRIGHT, dot, 4)
            self.theme.draw_text(surface, font, r.x + 30, r.centery - font.get_height() // 2,
                                 label, colors.ACCENT_BRIGHT if selected else colors.FG_PRIMARY)
