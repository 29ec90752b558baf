from __future__ import annotations
from typing import Tuple

from .types import ViewBounds, ViewState

RA_SPAN_H = 24.0
DEC_SPAN_DEG = 180.0
CENTER_RA_H = 12.0


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def wheel_zoom_factor(wheel_y: float, zoom_in: float = 1.1, zoom_out: float = 0.9) -> float:
    """Wheel up (y > 0) zooms in, wheel down zooms out."""
    return zoom_in if wheel_y > 0 else zoom_out


class CoordinateMapper:
    """
    Flat equirectangular chart: RA on X, Dec on Y.

    Coordinate system
    -----------------
    - Screen centre + pan offset = (ra 12h, dec 0°)
    - Screen +X = increasing RA
    - Screen +Y = down (decreasing Dec)
    - min(width, height) spans 24h horizontally and 180° vertically at zoom 1

    No wraparound at 0h/24h: stars across the seam are culled by the
    bounds rectangle at extreme pan.
    """

    def __init__(self, view: ViewState, width: int, height: int,
                 min_zoom: float = 0.5, max_zoom: float = 5.0):
        self.view = view
        self.width = width
        self.height = height
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom

    @property
    def px_per_hour(self) -> float:
        return min(self.width, self.height) / RA_SPAN_H * self.view.zoom

    @property
    def px_per_degree(self) -> float:
        return min(self.width, self.height) / DEC_SPAN_DEG * self.view.zoom

    @property
    def origin(self) -> Tuple[float, float]:
        """Screen position of (ra 12h, dec 0°)."""
        return (self.width / 2 + self.view.offset_x,
                self.height / 2 + self.view.offset_y)

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    def world_to_screen(self, ra: float, dec: float) -> Tuple[float, float]:
        ox, oy = self.origin
        return (ox + (ra - CENTER_RA_H) * self.px_per_hour,
                oy - dec * self.px_per_degree)

    def screen_to_world(self, x: float, y: float) -> Tuple[float, float]:
        ox, oy = self.origin
        return (CENTER_RA_H + (x - ox) / self.px_per_hour,
                -(y - oy) / self.px_per_degree)

    def view_bounds(self) -> ViewBounds:
        """World rectangle covered by the canvas (axis aligned, so two corners suffice)."""
        ra0, dec0 = self.screen_to_world(0, 0)
        ra1, dec1 = self.screen_to_world(self.width, self.height)
        return ViewBounds(min(ra0, ra1), max(ra0, ra1),
                          min(dec0, dec1), max(dec0, dec1))

    def is_on_canvas(self, x: float, y: float) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height

    def set_zoom(self, zoom: float):
        self.view.zoom = clamp(zoom, self.min_zoom, self.max_zoom)

    def zoom_at(self, sx: float, sy: float, factor: float):
        """
        Zoom by `factor` keeping the world point under (sx, sy) fixed.
        """
        ra, dec = self.screen_to_world(sx, sy)
        self.set_zoom(self.view.zoom * factor)

        # Re-solve the offset so (ra, dec) maps back onto (sx, sy)
        self.view.offset_x = sx - self.width / 2 - (ra - CENTER_RA_H) * self.px_per_hour
        self.view.offset_y = sy - self.height / 2 + dec * self.px_per_degree
