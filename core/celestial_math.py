"""
Celestial Math - magnitude scaling and 3D star distances

Magnitude is logarithmic and inverted: -1.5 (Sirius) is the brightest
star we draw, 8 is the dimmest.
"""

from __future__ import annotations
import math
from typing import Sequence

import numpy as np

from .types import StarRecord

MAX_MAGNITUDE = 8.0
MIN_MAGNITUDE = -1.5
BASE_STAR_SIZE = 2.0
STAR_SIZE_RANGE = 8.0


def normalize_magnitude(mag: float,
                        max_mag: float = MAX_MAGNITUDE,
                        min_mag: float = MIN_MAGNITUDE) -> float:
    """Linear map: max_mag -> 0.0, min_mag -> 1.0."""
    return (mag - max_mag) / (min_mag - max_mag)


def magnitude_to_radius(mag: float, zoom: float = 1.0,
                        base_size: float = BASE_STAR_SIZE,
                        size_range: float = STAR_SIZE_RANGE,
                        max_mag: float = MAX_MAGNITUDE,
                        min_mag: float = MIN_MAGNITUDE) -> float:
    """
    Convert star magnitude to pixel radius.

    Scale: mag -1.5 -> base + range (10 px), mag 8 -> base (2 px),
    then multiplied by the current zoom.
    """
    return (base_size + normalize_magnitude(mag, max_mag, min_mag) * size_range) * zoom


def magnitude_to_alpha(mag: float,
                       max_mag: float = MAX_MAGNITUDE,
                       min_mag: float = MIN_MAGNITUDE,
                       floor: float = 0.1) -> float:
    """Opacity 0..1, never below `floor` so faint stars stay visible."""
    return max(floor, 1.0 - (mag - min_mag) / (max_mag - min_mag))


def star_distance(a: StarRecord, b: StarRecord) -> float:
    """Euclidean distance between two stars' cartesian positions."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def distances_from(star: StarRecord, others: Sequence[StarRecord]) -> np.ndarray:
    """Vectorised star_distance() from one star to many."""
    if not others:
        return np.empty(0, dtype=np.float64)
    xyz = np.array([(s.x, s.y, s.z) for s in others], dtype=np.float64)
    origin = np.array((star.x, star.y, star.z), dtype=np.float64)
    return np.linalg.norm(xyz - origin, axis=1)
