"""
Sky Renderer - full redraw of the flat star chart

Each frame: background, optional RA/Dec grid, then every star that is
inside the view bounds rectangle and still on the canvas after mapping.
No scene graph is kept; the caller re-renders after every state change.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import pygame

from core.celestial_math import magnitude_to_alpha, magnitude_to_radius
from core.config import ChartConfig
from core.coords import CoordinateMapper
from core.hit_test import iter_visible
from core.types import StarRecord

BG_COLOR = (0, 0, 0)
GRID_COLOR = (74, 144, 217, 77)      # rgba, ~0.3 opacity
STAR_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (255, 255, 0)


@dataclass(frozen=True)
class DrawnStar:
    star: StarRecord
    x: float
    y: float
    radius: float
    alpha: float


def grid_lines(mapper: CoordinateMapper, ra_step: int = 2,
               dec_step: int = 30) -> Tuple[List[float], List[float]]:
    """Screen X of each meridian (ra 0..24) and screen Y of each parallel (dec -90..90)."""
    xs = [mapper.world_to_screen(ra, 0)[0] for ra in range(0, 25, ra_step)]
    ys = [mapper.world_to_screen(0, dec)[1] for dec in range(-90, 91, dec_step)]
    return xs, ys


class SkyRenderer:
    """Draws stars and grid for a CoordinateMapper onto a pygame surface."""

    def __init__(self, config: ChartConfig = ChartConfig()):
        self.config = config

    def visible_stars(self, stars: Iterable[StarRecord],
                      mapper: CoordinateMapper) -> List[DrawnStar]:
        """Stars that would be drawn this frame, with their size and opacity."""
        cfg = self.config
        zoom = mapper.view.zoom
        drawn = []
        for star, x, y in iter_visible(stars, mapper):
            # bounds come from the corners; re-check after mapping
            if not mapper.is_on_canvas(x, y):
                continue
            radius = magnitude_to_radius(star.mag, zoom,
                                         cfg.base_star_size, cfg.star_size_range,
                                         cfg.max_magnitude, cfg.min_magnitude)
            alpha = magnitude_to_alpha(star.mag, cfg.max_magnitude,
                                       cfg.min_magnitude, cfg.min_star_alpha)
            drawn.append(DrawnStar(star, x, y, radius, alpha))
        return drawn

    def render(self, surface: pygame.Surface, stars: Iterable[StarRecord],
               mapper: CoordinateMapper, show_grid: bool = False) -> List[DrawnStar]:
        """Full redraw. Returns the stars drawn."""
        surface.fill(BG_COLOR)

        # Alpha layer: grid and stars are translucent
        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        if show_grid:
            self._draw_grid(layer, mapper)

        drawn = self.visible_stars(stars, mapper)
        for d in drawn:
            color = (*STAR_COLOR, int(round(min(1.0, d.alpha) * 255)))
            pygame.draw.circle(layer, color, (d.x, d.y), max(1.0, d.radius))

        surface.blit(layer, (0, 0))
        return drawn

    def draw_highlight(self, surface: pygame.Surface, star: StarRecord,
                       mapper: CoordinateMapper):
        """Ring around the star being quizzed."""
        x, y = mapper.world_to_screen(star.ra, star.dec)
        if not mapper.is_on_canvas(x, y):
            return
        r = magnitude_to_radius(star.mag, mapper.view.zoom,
                                self.config.base_star_size, self.config.star_size_range,
                                self.config.max_magnitude, self.config.min_magnitude)
        pygame.draw.circle(surface, HIGHLIGHT_COLOR, (x, y), r + 4, 1)

    def _draw_grid(self, layer: pygame.Surface, mapper: CoordinateMapper):
        W, H = layer.get_size()
        xs, ys = grid_lines(mapper, self.config.grid_ra_step_h,
                            self.config.grid_dec_step_deg)
        for x in xs:
            pygame.draw.line(layer, GRID_COLOR, (x, 0), (x, H), 1)
        for y in ys:
            pygame.draw.line(layer, GRID_COLOR, (0, y), (W, y), 1)
