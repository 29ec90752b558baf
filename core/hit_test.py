from __future__ import annotations
import math
from typing import Iterable, Iterator, Optional, Tuple

from .coords import CoordinateMapper
from .types import StarRecord


def iter_visible(stars: Iterable[StarRecord],
                 mapper: CoordinateMapper) -> Iterator[Tuple[StarRecord, float, float]]:
    """Stars inside the view bounds rectangle, with their screen positions."""
    bounds = mapper.view_bounds()
    for star in stars:
        if not bounds.contains(star.ra, star.dec):
            continue
        x, y = mapper.world_to_screen(star.ra, star.dec)
        yield star, x, y


def nearest_star(stars: Iterable[StarRecord], mapper: CoordinateMapper,
                 sx: float, sy: float) -> Tuple[Optional[StarRecord], float]:
    """Nearest visible star to (sx, sy) in screen pixels, with its distance."""
    best, best_dist = None, math.inf
    for star, x, y in iter_visible(stars, mapper):
        d = math.hypot(sx - x, sy - y)
        if d < best_dist:
            best, best_dist = star, d
    return best, best_dist


def find_star_at(stars: Iterable[StarRecord], mapper: CoordinateMapper,
                 sx: float, sy: float,
                 click_radius: float = 10.0) -> Optional[StarRecord]:
    """
    Click selection: the nearest visible star, if it lies within
    click_radius * zoom pixels and has a quizzable name (not the Sun).
    """
    star, dist = nearest_star(stars, mapper, sx, sy)
    if star is None or dist >= click_radius * mapper.view.zoom:
        return None
    if not star.has_name:
        return None
    return star
