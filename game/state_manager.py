"""
Star Quiz State Manager

Owns the whole application state and exposes one entry point per input
event. The UI screen translates pygame events into these calls and
re-renders whenever a call reports a change.

    drag/wheel   -> ViewState / CoordinateMapper -> redraw
    click        -> hit test -> QuizEngine.start -> quiz popup
    submit/skip  -> QuizEngine -> QuizStats -> feedback popup
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from core.catalog import StarCatalog, load_catalog
from core.config import ChartConfig
from core.coords import CoordinateMapper, wheel_zoom_factor
from core.errors import CatalogLoadError, NoSelectionError
from core.hit_test import find_star_at
from core.types import StarRecord, ViewState
from .quiz import QuizEngine, QuizOutcome, QuizQuestion

logger = logging.getLogger("StateManager")

NO_SELECTION_PROMPT = "Please select an answer"


@dataclass
class AppState:
    """Everything the screen needs to draw a frame"""
    catalog: StarCatalog = field(default_factory=lambda: StarCatalog((), ()))
    view: ViewState = field(default_factory=ViewState)
    show_grid: bool = False

    # Popups
    feedback: Optional[QuizOutcome] = None
    results_visible: bool = False
    prompt: Optional[str] = None          # inline message in the quiz popup
    load_error: Optional[str] = None      # blocking notice


class StateManager:
    """
    Application controller

    Every on_* method returns True if the frame must be redrawn.
    """

    def __init__(self, config: ChartConfig = ChartConfig(),
                 rng: Optional[random.Random] = None):
        self.config = config
        self.state = AppState(show_grid=config.show_grid)
        self.mapper = CoordinateMapper(self.state.view, config.width, config.height,
                                       config.min_zoom, config.max_zoom)
        self._rng = rng
        self.quiz = QuizEngine((), rng, config.distractor_count)
        self.dirty = True

    # -----------------------------------------------------------------------
    # Catalog
    # -----------------------------------------------------------------------

    def set_catalog(self, catalog: StarCatalog):
        self.state.catalog = catalog
        self.quiz = QuizEngine(catalog.named_stars, self._rng, self.config.distractor_count)
        self.state.view.reset()
        self.state.load_error = None
        self.dirty = True

    def load_catalog(self, path: Optional[Path] = None) -> bool:
        """
        Startup load. On failure the chart stays empty and a blocking
        notice is recorded; there is no retry.
        """
        path = path or self.config.data_path
        try:
            catalog = load_catalog(path, self.config.named_max_magnitude)
        except CatalogLoadError as e:
            logger.error("Error loading star data: %s", e)
            self.state.load_error = f"Error loading star data. {e}"
            self.dirty = True
            return False
        self.set_catalog(catalog)
        return True

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------

    @property
    def stars(self):
        return self.state.catalog.stars

    @property
    def stats(self):
        return self.quiz.stats

    @property
    def question(self) -> Optional[QuizQuestion]:
        return self.quiz.question

    def _changed(self) -> bool:
        self.dirty = True
        return True

    # -----------------------------------------------------------------------
    # Pan / zoom
    # -----------------------------------------------------------------------

    def on_drag_start(self, x: float, y: float) -> bool:
        self.state.view.begin_drag(x, y)
        return False

    def on_drag_move(self, x: float, y: float) -> bool:
        if not self.state.view.dragging:
            return False
        dx, dy = self.state.view.update_drag(x, y, self.config.click_tolerance_px)
        if dx == 0 and dy == 0:
            return False
        return self._changed()

    def on_drag_end(self, x: float, y: float) -> bool:
        """Release. A press without real motion counts as a click."""
        if self.state.view.end_drag():
            return self.on_click(x, y)
        return False

    def on_wheel(self, x: float, y: float, wheel_y: float) -> bool:
        if wheel_y == 0:
            return False
        factor = wheel_zoom_factor(wheel_y, self.config.zoom_in_step,
                                   self.config.zoom_out_step)
        self.mapper.zoom_at(x, y, factor)
        return self._changed()

    def on_resize(self, width: int, height: int) -> bool:
        self.mapper.resize(width, height)
        return self._changed()

    def on_toggle_grid(self, value: Optional[bool] = None) -> bool:
        self.state.show_grid = (not self.state.show_grid) if value is None else bool(value)
        return self._changed()

    # -----------------------------------------------------------------------
    # Quiz
    # -----------------------------------------------------------------------

    def star_at(self, x: float, y: float) -> Optional[StarRecord]:
        return find_star_at(self.stars, self.mapper, x, y, self.config.click_radius_px)

    def on_click(self, x: float, y: float) -> bool:
        if self.quiz.quiz_active or self.state.load_error:
            return False
        star = self.star_at(x, y)
        if star is None:
            return False
        self.state.prompt = None
        self.quiz.start(star)
        return self._changed()

    def on_submit(self, selected_id: Optional[int]) -> bool:
        if not self.quiz.quiz_active:
            return False
        try:
            outcome = self.quiz.submit(selected_id)
        except NoSelectionError:
            self.state.prompt = NO_SELECTION_PROMPT
            return self._changed()
        self.state.prompt = None
        self.state.feedback = outcome
        return self._changed()

    def on_skip(self) -> bool:
        if not self.quiz.quiz_active:
            return False
        self.quiz.skip()
        self.state.prompt = None
        return self._changed()

    def on_close_feedback(self) -> bool:
        if self.state.feedback is None:
            return False
        self.state.feedback = None
        return self._changed()

    def on_done(self) -> bool:
        """Show the results summary"""
        self.state.results_visible = True
        return self._changed()

    def on_reset(self) -> bool:
        """Zero the counters, close the quiz and hide the results summary"""
        self.quiz.reset()
        self.state.prompt = None
        self.state.feedback = None
        self.state.results_visible = False
        logger.info("Quiz reset")
        return self._changed()
