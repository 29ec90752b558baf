"""
Core package - star data, coordinates and hit testing

Main exports:
    StarRecord        - one catalog star (immutable)
    StarCatalog       - all stars + named-star quiz pool
    CoordinateMapper  - RA/Dec <-> canvas pixels, anchored zoom
    find_star_at      - nearest named star under a click
"""
from .types import StarRecord, ViewBounds, ViewState
from .catalog import StarCatalog, load_catalog
from .coords import CoordinateMapper, wheel_zoom_factor
from .hit_test import find_star_at
from .errors import StarQuizError, CatalogLoadError, NoSelectionError, QuizActiveError

__all__ = [
    "StarRecord", "ViewBounds", "ViewState",
    "StarCatalog", "load_catalog",
    "CoordinateMapper", "wheel_zoom_factor",
    "find_star_at",
    "StarQuizError", "CatalogLoadError", "NoSelectionError", "QuizActiveError",
]
