"""
Chart configuration

Every tunable of the star chart and the quiz in one frozen dataclass.
The launcher overrides fields with dataclasses.replace().
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent   # core/ -> project root
DEFAULT_DATA_PATH = PROJECT_ROOT / "data" / "stars.json"


@dataclass(frozen=True)
class ChartConfig:
    """Star chart + quiz settings"""
    # Window
    width: int = 1280
    height: int = 800
    title: str = "Star Quiz"
    data_path: Path = DEFAULT_DATA_PATH
    show_grid: bool = False

    # Magnitude scale (lower = brighter)
    max_magnitude: float = 8.0      # dimmest rendered, smallest radius
    min_magnitude: float = -1.5     # brightest, largest radius
    base_star_size: float = 2.0
    star_size_range: float = 8.0
    min_star_alpha: float = 0.1

    # Named-star subset
    named_max_magnitude: float = 8.0

    # Zoom / pan
    min_zoom: float = 0.5
    max_zoom: float = 5.0
    zoom_in_step: float = 1.1
    zoom_out_step: float = 0.9
    click_tolerance_px: float = 3.0

    # Hit testing
    click_radius_px: float = 10.0

    # Grid
    grid_ra_step_h: int = 2
    grid_dec_step_deg: int = 30

    # Quiz
    distractor_count: int = 3
