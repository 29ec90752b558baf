from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

SUN_NAME = "Sol"


@dataclass(frozen=True, slots=True)
class StarRecord:
    id: int
    proper: str = ""
    ra: float = 0.0      # hours, 0..24
    dec: float = 0.0     # degrees, -90..90
    dist: float = 0.0
    mag: float = 0.0     # apparent magnitude, lower = brighter
    x: float = 0.0       # cartesian position, only used for relative distance
    y: float = 0.0
    z: float = 0.0

    @property
    def has_name(self) -> bool:
        """Named and not the Sun: the stars a click may quiz on."""
        return bool(self.proper) and self.proper != SUN_NAME

    def is_named(self, max_mag: float = 8.0) -> bool:
        """Member of the named-star subset (quiz pool)."""
        return self.has_name and self.mag <= max_mag

    def radec_str(self) -> str:
        rh = int(self.ra)
        rm = int((self.ra - rh) * 60)
        return f"RA {rh:02d}h{rm:02d}m  Dec {self.dec:+.1f}°"


@dataclass(frozen=True, slots=True)
class ViewBounds:
    min_ra: float
    max_ra: float
    min_dec: float
    max_dec: float

    def contains(self, ra: float, dec: float) -> bool:
        return (self.min_ra <= ra <= self.max_ra
                and self.min_dec <= dec <= self.max_dec)


@dataclass(slots=True)
class ViewState:
    # pan offset in pixels, relative to canvas centre
    offset_x: float = 0.0
    offset_y: float = 0.0
    zoom: float = 1.0
    # drag tracking
    dragging: bool = False
    last_x: float = 0.0
    last_y: float = 0.0
    press_x: float = 0.0
    press_y: float = 0.0
    drag_moved: bool = False

    def begin_drag(self, x: float, y: float):
        self.dragging = True
        self.last_x = self.press_x = x
        self.last_y = self.press_y = y
        self.drag_moved = False

    def update_drag(self, x: float, y: float, click_tolerance: float = 3.0) -> Tuple[float, float]:
        """Move the pan offset by the pointer delta. Returns (dx, dy)."""
        if not self.dragging:
            return 0.0, 0.0
        dx = x - self.last_x
        dy = y - self.last_y
        self.offset_x += dx
        self.offset_y += dy
        self.last_x = x
        self.last_y = y
        if abs(x - self.press_x) > click_tolerance or abs(y - self.press_y) > click_tolerance:
            self.drag_moved = True
        return dx, dy

    def end_drag(self) -> bool:
        """Stop dragging. Returns True if the press was a click (no real motion)."""
        was_click = self.dragging and not self.drag_moved
        self.dragging = False
        self.drag_moved = False
        return was_click

    def reset(self):
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom = 1.0
        self.dragging = False
        self.drag_moved = False
