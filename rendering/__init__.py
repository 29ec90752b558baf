"""Rendering package - star field drawing"""
from .sky_renderer import DrawnStar, SkyRenderer, grid_lines

__all__ = ["DrawnStar", "SkyRenderer", "grid_lines"]
