"""
UI Theme - Night Chart Style

Colors, fonts and drawing helpers shared by the star quiz widgets.
Dark navy panels over a pure black sky, chart-blue accents.
"""

import pygame
from typing import Dict, Optional, Tuple
from dataclasses import dataclass

RGB = Tuple[int, int, int]


class Colors:
    """
    Night chart palette

    The sky itself is black (see rendering.sky_renderer); everything here
    is for panels drawn on top of it.
    """

    # Panels
    BG_DARK = (4, 6, 14)             # window clear colour
    BG_PANEL = (12, 18, 36)          # controls panel / popup body
    BG_PANEL_LIGHT = (24, 36, 66)    # hovered button, selected option
    BG_INPUT = (8, 12, 26)           # checkbox / radio well
    BG_OVERLAY = (0, 0, 0, 150)      # dims the chart behind a popup

    # Text
    FG_PRIMARY = (225, 232, 245)
    FG_DIM = (140, 155, 185)
    FG_DARK = (70, 82, 110)

    # Chart blue (same hue as the RA/Dec grid)
    ACCENT = (74, 144, 217)
    ACCENT_BRIGHT = (130, 190, 255)

    # Widget states
    BUTTON_NORMAL = FG_PRIMARY
    BUTTON_HOVER = ACCENT_BRIGHT
    BUTTON_PRESSED = ACCENT
    BORDER_NORMAL = (52, 76, 120)
    BORDER_FOCUS = ACCENT_BRIGHT

    # Quiz feedback
    SUCCESS = (76, 175, 80)
    WARNING = (255, 193, 7)
    ERROR = (244, 67, 54)


@dataclass
class FontConfig:
    """Font families and point sizes"""
    families: Tuple[str, ...] = ("DejaVu Sans", "Segoe UI", "Helvetica", "Arial")
    size_title: int = 26
    size_large: int = 20
    size_normal: int = 17
    size_small: int = 14


class Fonts:
    """
    Font cache

    SysFont is slow, so every size is created once on first use.
    """

    _config = FontConfig()
    _cache: Dict[str, pygame.font.Font] = {}

    @classmethod
    def initialize(cls, config: Optional[FontConfig] = None):
        """Drop the cache and (optionally) switch font configuration"""
        if config is not None:
            cls._config = config
        cls._cache = {}
        pygame.font.init()

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        """Font for 'title', 'large', 'normal' or 'small' (unknown -> normal)"""
        if size not in ('title', 'large', 'normal', 'small'):
            size = 'normal'
        font = cls._cache.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            points = getattr(cls._config, f"size_{size}")
            # SysFont takes a comma list and falls back to the default font
            font = pygame.font.SysFont(",".join(cls._config.families), points,
                                       bold=(size == 'title'))
            cls._cache[size] = font
        return font

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.get('normal')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')


class Theme:
    """Palette + fonts + the few primitives every widget draws with"""

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()
        self.border_width = 1

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   title: str = "",
                   border: Optional[RGB] = None):
        """Filled panel with a thin border and optional title line"""
        pygame.draw.rect(surface, self.colors.BG_PANEL, rect, border_radius=4)
        pygame.draw.rect(surface, border or self.colors.BORDER_NORMAL, rect,
                         self.border_width, border_radius=4)
        if title:
            self.draw_text(surface, self.fonts.get('large'), rect.x + 14, rect.y + 10,
                           title, self.colors.FG_PRIMARY)

    def draw_overlay(self, surface: pygame.Surface):
        """Dim everything behind a modal popup"""
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(self.colors.BG_OVERLAY)
        surface.blit(shade, (0, 0))

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: RGB,
                  align: str = 'left') -> pygame.Rect:
        """
        Blit one line of text. `align` anchors x at the 'left',
        'center' or 'right' of the line. Returns the blitted rect.
        """
        rendered = font.render(text, True, color)
        rect = rendered.get_rect(top=y)
        if align == 'center':
            rect.centerx = x
        elif align == 'right':
            rect.right = x
        else:
            rect.left = x
        surface.blit(rendered, rect)
        return rect


_theme: Optional[Theme] = None


def get_theme() -> Theme:
    """Shared theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
