"""
Star Field - flat RA/Dec chart with the star quiz

Renders every catalog star on an equirectangular chart (RA across,
Dec up). Clicking a named star opens a multiple-choice question whose
distractors are its nearest named neighbours in space.

Controls
--------
  Drag mouse        Pan
  Scroll            Zoom (anchored at the cursor)
  Click star        Quiz on that star
  G                 Toggle RA/Dec grid
  ESC               Skip question / close popup
  Q                 Quit
"""

import pygame
from typing import List, Optional, Tuple

from .base_screen import BaseScreen
from .components import Button, Checkbox, Label
from .popups import ErrorNotice, FeedbackPopup, Popup, QuizPopup, ResultsPopup
from game.state_manager import StateManager
from rendering.sky_renderer import DrawnStar, SkyRenderer

PANEL_RECT = pygame.Rect(10, 10, 220, 160)
FOOTER_HEIGHT = 26


class StarfieldScreen(BaseScreen):
    """Star chart + quiz screen"""

    def __init__(self, manager: StateManager, renderer: Optional[SkyRenderer] = None):
        super().__init__("STARFIELD")
        self.manager = manager
        self.renderer = renderer or SkyRenderer(manager.config)
        self.quit_requested = False
        self.last_drawn: List[DrawnStar] = []
        self._mouse_pos: Optional[Tuple[int, int]] = None

        self._create_controls()

        self.quiz_popup = QuizPopup(on_submit=manager.on_submit, on_skip=manager.on_skip)
        self.feedback_popup = FeedbackPopup(on_close=manager.on_close_feedback)
        self.results_popup = ResultsPopup(on_reset=manager.on_reset)
        self.error_notice = ErrorNotice()

    # -----------------------------------------------------------------------
    # Setup
    # -----------------------------------------------------------------------

    def _create_controls(self):
        x, y = PANEL_RECT.x + 12, PANEL_RECT.y + 10
        self.lbl_answered = Label(x, y, "")
        self.lbl_correct = Label(x, y + 24, "")
        self.lbl_rate = Label(x, y + 48, "")
        self.grid_checkbox = Checkbox(x, y + 78, "Show grid",
                                      checked=self.manager.state.show_grid,
                                      callback=self.manager.on_toggle_grid)
        self.done_btn = Button(x, y + 108, 100, 30, "DONE", callback=self.manager.on_done)

    # -----------------------------------------------------------------------
    # Popup stack
    # -----------------------------------------------------------------------

    def _sync_popups(self, surface_size):
        """Mirror AppState into the popup widgets"""
        state = self.manager.state
        question = self.manager.question
        if question is not None:
            self.quiz_popup.set_question(question)
        else:
            self.quiz_popup.question = None
        self.quiz_popup.prompt = state.prompt
        self.feedback_popup.outcome = state.feedback
        self.results_popup.stats = self.manager.stats
        self.error_notice.message = state.load_error or ""
        for popup in self.visible_popups():
            popup.layout(surface_size)

    def visible_popups(self) -> List[Popup]:
        """Bottom to top"""
        state = self.manager.state
        popups: List[Popup] = []
        if state.results_visible:
            popups.append(self.results_popup)
        if self.manager.quiz.quiz_active:
            popups.append(self.quiz_popup)
        if state.feedback is not None:
            popups.append(self.feedback_popup)
        if state.load_error:
            popups.append(self.error_notice)
        return popups

    def _close_top_popup(self) -> bool:
        state = self.manager.state
        if state.feedback is not None:
            return self.manager.on_close_feedback()
        if self.manager.quiz.quiz_active:
            return self.manager.on_skip()
        if state.results_visible:
            state.results_visible = False
            return True
        return False

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def _surface_size(self) -> Tuple[int, int]:
        return self.manager.mapper.width, self.manager.mapper.height

    def handle_input(self, events) -> bool:
        redraw = False
        self._sync_popups(self._surface_size())

        for event in events:
            if event.type == pygame.KEYDOWN:
                redraw |= self._handle_key(event.key)

            elif event.type == pygame.MOUSEMOTION:
                self._mouse_pos = event.pos
                self._update_hover(event.pos)
                self.manager.on_drag_move(*event.pos)
                redraw = True   # footer shows the cursor position

            elif event.type == pygame.MOUSEWHEEL:
                if self.manager.state.load_error:
                    continue
                x, y = self._mouse_pos or pygame.mouse.get_pos()
                redraw |= self.manager.on_wheel(x, y, event.y)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._mouse_pos = event.pos
                if self._dispatch_to_ui(event):
                    redraw = True
                else:
                    self.manager.on_drag_start(*event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                consumed = self._dispatch_to_ui(event)
                if self.manager.state.view.dragging:
                    redraw |= self.manager.on_drag_end(*event.pos)
                redraw |= consumed

            # state may have changed under the popups
            self._sync_popups(self._surface_size())

        return redraw or self.manager.dirty

    def _handle_key(self, key) -> bool:
        if key == pygame.K_q:
            self.quit_requested = True
            return False
        if self.manager.state.load_error:
            return False
        if key == pygame.K_ESCAPE:
            return self._close_top_popup()
        if key == pygame.K_g:
            self.manager.on_toggle_grid()
            self.grid_checkbox.checked = self.manager.state.show_grid
            return True
        return False

    def _dispatch_to_ui(self, event) -> bool:
        """Top popup first, then the controls panel. True if consumed."""
        popups = self.visible_popups()
        if popups:
            top = popups[-1]
            if top.handle_event(event):
                return True
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.grid_checkbox.handle_event(event):
                return True
        if self.done_btn.handle_event(event):
            return True
        return PANEL_RECT.collidepoint(event.pos)

    def _update_hover(self, pos) -> bool:
        changed = self.done_btn.update(pos)
        for popup in self.visible_popups():
            changed |= popup.update_hover(pos)
        return changed

    # -----------------------------------------------------------------------
    # Render
    # -----------------------------------------------------------------------

    def render(self, surface: pygame.Surface):
        W, H = surface.get_size()
        mapper = self.manager.mapper
        if (mapper.width, mapper.height) != (W, H):
            self.manager.on_resize(W, H)

        state = self.manager.state
        self.last_drawn = self.renderer.render(surface, self.manager.stars, mapper,
                                               state.show_grid)
        quiz = self.manager.quiz
        if quiz.quiz_active and quiz.current_star is not None:
            self.renderer.draw_highlight(surface, quiz.current_star, mapper)

        self._draw_controls(surface)
        self._draw_hud(surface, W, H)

        self._sync_popups((W, H))
        popups = self.visible_popups()
        if popups:
            self.theme.draw_overlay(surface)
            for popup in popups:
                popup.draw(surface)

        self.manager.dirty = False

    def _draw_controls(self, surface: pygame.Surface):
        stats = self.manager.stats
        self.lbl_answered.set_text(f"Answered: {stats.answered}")
        self.lbl_correct.set_text(f"Correct:  {stats.correct}")
        self.lbl_rate.set_text(f"Rate:     {stats.success_rate}%")

        self.theme.draw_panel(surface, PANEL_RECT)
        for widget in (self.lbl_answered, self.lbl_correct, self.lbl_rate,
                       self.grid_checkbox, self.done_btn):
            widget.draw(surface)

    def _draw_hud(self, surface: pygame.Surface, W: int, H: int):
        mapper = self.manager.mapper
        info = f"Zoom x{mapper.view.zoom:.2f}  Stars: {len(self.last_drawn):,}"
        if self._mouse_pos is not None:
            ra, dec = mapper.screen_to_world(*self._mouse_pos)
            info += f"  |  Cursor RA {ra:5.2f}h  Dec {dec:+6.1f}°"
        hint = "  [Drag] Pan  [Scroll] Zoom  [Click] Quiz  [G]rid  [ESC] Close  [Q]uit"
        footer = pygame.Rect(0, H - FOOTER_HEIGHT, W, FOOTER_HEIGHT)
        self.draw_footer(surface, footer, f"{info}{hint}")
