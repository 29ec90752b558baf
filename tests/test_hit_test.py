"""
Unit tests for click selection
"""
import pytest

from core.hit_test import find_star_at, iter_visible, nearest_star
from tests.sample_stars import ALL_STARS, CANOPUS, SIRIUS, SIRIUS_XY, SOL, UNNAMED


@pytest.mark.unit
class TestFindStarAt:
    def test_click_on_sirius(self, mapper):
        assert find_star_at(ALL_STARS, mapper, *SIRIUS_XY) == SIRIUS

    def test_click_near_sirius(self, mapper):
        x, y = SIRIUS_XY
        assert find_star_at(ALL_STARS, mapper, x + 6, y - 6) == SIRIUS

    def test_click_outside_radius(self, mapper):
        x, y = SIRIUS_XY
        assert find_star_at(ALL_STARS, mapper, x + 10.5, y) is None

    def test_radius_scales_with_zoom(self, view, mapper):
        mapper.zoom_at(SIRIUS_XY[0], SIRIUS_XY[1], 1.1)
        mapper.zoom_at(SIRIUS_XY[0], SIRIUS_XY[1], 1.1)
        assert view.zoom == pytest.approx(1.21)
        x, y = SIRIUS_XY
        # 11 px is outside 10 px at zoom 1 but inside 12.1 px at zoom 1.21
        assert find_star_at(ALL_STARS, mapper, x, y + 11) == SIRIUS

    def test_unnamed_star_is_not_selectable(self, mapper):
        x, y = mapper.world_to_screen(UNNAMED.ra, UNNAMED.dec)
        assert find_star_at(ALL_STARS, mapper, x, y) is None

    def test_sun_is_not_selectable(self, mapper):
        x, y = mapper.world_to_screen(SOL.ra, SOL.dec)
        assert find_star_at(ALL_STARS, mapper, x, y) is None

    def test_nearest_unnamed_star_blocks_selection(self, mapper):
        # Only the single nearest star counts, even if a named one is in range too
        x, y = mapper.world_to_screen(UNNAMED.ra, UNNAMED.dec)
        star, dist = nearest_star(ALL_STARS, mapper, x + 1, y)
        assert star == UNNAMED
        assert dist == pytest.approx(1.0)

    def test_stars_outside_view_are_not_candidates(self, view, mapper):
        view.offset_y = -400   # pan south
        visible = [s for s, _, _ in iter_visible(ALL_STARS, mapper)]
        assert CANOPUS in visible
        view.offset_x = 2000
        assert find_star_at(ALL_STARS, mapper, *SIRIUS_XY) is None

    def test_empty_catalog(self, mapper):
        assert find_star_at((), mapper, 100, 100) is None
        assert nearest_star((), mapper, 100, 100) == (None, float("inf"))
