"""
Headless smoke tests: pygame events through the star field screen
"""
import pygame
import pytest

from game.state_manager import NO_SELECTION_PROMPT, StateManager
from tests.sample_stars import CANVAS_H, CANVAS_W, SIRIUS
from ui_new.screen_starfield import StarfieldScreen

SIRIUS_PX = (269, 356)


def ev(event_type, **attrs):
    return pygame.event.Event(event_type, **attrs)


def press(screen, pos):
    pos = (int(pos[0]), int(pos[1]))
    return screen.handle_input([
        ev(pygame.MOUSEBUTTONDOWN, pos=pos, button=1),
        ev(pygame.MOUSEBUTTONUP, pos=pos, button=1),
    ])


def key(screen, k):
    return screen.handle_input([ev(pygame.KEYDOWN, key=k)])


@pytest.fixture
def surface():
    pygame.font.init()
    return pygame.Surface((CANVAS_W, CANVAS_H))


@pytest.fixture
def screen(manager, surface):
    s = StarfieldScreen(manager)
    s.on_enter()
    s.render(surface)
    return s


@pytest.mark.smoke
class TestStarfieldScreen:
    def test_first_frame(self, screen, manager):
        assert SIRIUS in [d.star for d in screen.last_drawn]
        assert not manager.dirty
        assert screen.visible_popups() == []

    def test_quiz_round_trip(self, screen, manager, surface):
        assert press(screen, SIRIUS_PX)
        assert manager.quiz.current_star == SIRIUS
        assert screen.visible_popups() == [screen.quiz_popup]
        screen.render(surface)

        # Submit with nothing selected
        press(screen, screen.quiz_popup.submit_btn.rect.center)
        assert manager.state.prompt == NO_SELECTION_PROMPT
        assert manager.quiz.quiz_active
        screen.render(surface)

        # Pick Sirius and submit
        radio = screen.quiz_popup.options
        index = [value for value, _ in radio.options].index(SIRIUS.id)
        press(screen, radio.item_rect(index).center)
        assert radio.selected_value() == SIRIUS.id
        press(screen, screen.quiz_popup.submit_btn.rect.center)

        assert manager.state.feedback.is_correct
        assert screen.visible_popups() == [screen.feedback_popup]
        screen.render(surface)

        press(screen, screen.feedback_popup.close_btn.rect.center)
        assert manager.state.feedback is None
        assert (manager.stats.answered, manager.stats.correct) == (1, 1)

    def test_skip_button(self, screen, manager):
        press(screen, SIRIUS_PX)
        press(screen, screen.quiz_popup.skip_btn.rect.center)
        assert not manager.quiz.quiz_active
        assert manager.stats.answered == 0

    def test_done_and_reset(self, screen, manager, surface):
        press(screen, screen.done_btn.rect.center)
        assert manager.state.results_visible
        screen.render(surface)
        press(screen, screen.results_popup.reset_btn.rect.center)
        assert not manager.state.results_visible

    def test_drag_pans_without_quiz(self, screen, manager):
        screen.handle_input([
            ev(pygame.MOUSEBUTTONDOWN, pos=(600, 500), button=1),
            ev(pygame.MOUSEMOTION, pos=(650, 480), rel=(50, -20), buttons=(1, 0, 0)),
            ev(pygame.MOUSEBUTTONUP, pos=(650, 480), button=1),
        ])
        view = manager.state.view
        assert (view.offset_x, view.offset_y) == (50, -20)
        assert not manager.quiz.quiz_active

    def test_wheel_zooms(self, screen, manager):
        screen.handle_input([
            ev(pygame.MOUSEMOTION, pos=(400, 300), rel=(0, 0), buttons=(0, 0, 0)),
            ev(pygame.MOUSEWHEEL, x=0, y=1),
        ])
        assert manager.state.view.zoom == pytest.approx(1.1)

    def test_grid_key_and_checkbox(self, screen, manager):
        assert key(screen, pygame.K_g)
        assert manager.state.show_grid
        assert screen.grid_checkbox.checked
        press(screen, screen.grid_checkbox.rect.center)
        assert not manager.state.show_grid

    def test_escape_skips_question(self, screen, manager):
        press(screen, SIRIUS_PX)
        key(screen, pygame.K_ESCAPE)
        assert not manager.quiz.quiz_active

    def test_quit_key(self, screen):
        key(screen, pygame.K_q)
        assert screen.quit_requested

    def test_render_follows_surface_size(self, screen, manager):
        big = pygame.Surface((1000, 700))
        screen.render(big)
        assert (manager.mapper.width, manager.mapper.height) == (1000, 700)


@pytest.mark.smoke
def test_load_error_blocks_input(chart_config, surface, tmp_path):
    sm = StateManager(chart_config)
    sm.load_catalog(tmp_path / "missing.json")
    screen = StarfieldScreen(sm)
    screen.render(surface)

    assert screen.visible_popups() == [screen.error_notice]
    press(screen, SIRIUS_PX)
    key(screen, pygame.K_g)
    screen.handle_input([ev(pygame.MOUSEWHEEL, x=0, y=1)])
    assert not sm.quiz.quiz_active
    assert not sm.state.show_grid
    assert sm.state.view.zoom == 1.0
    screen.render(surface)
