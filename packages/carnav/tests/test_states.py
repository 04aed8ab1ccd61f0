"""Tests for navigation states and the transitions between them."""

import logging
from unittest.mock import patch

import pytest

from carnav import AtFrontState, NearbyState, SearchState
from carnav.states import BACKGROUND_ENLARGE, TRACK_ENLARGE, TRANSITION_DURATION


class TestTransitions:
    """Which state a progress or nearby signal leads to."""

    def test_starts_in_search(self, view):
        assert isinstance(view.state, SearchState)

    def test_progress_one_goes_to_at_front(self, view):
        view.progress = 1.0
        assert isinstance(view.state, AtFrontState)

    def test_progress_zero_goes_to_at_front(self, view):
        view.progress = 0.5
        view.progress = 0.0
        assert isinstance(view.state, AtFrontState)

    def test_other_progress_returns_to_search(self, view):
        view.progress = 1.0
        view.progress = 0.3
        assert isinstance(view.state, SearchState)

    def test_nearby_signal(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        assert isinstance(view.state, NearbyState)

    def test_nearby_cleared_at_full_progress_goes_to_at_front(self, view):
        view.progress = 1.0
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        view.set_nearby_state(False)
        assert isinstance(view.state, AtFrontState)

    def test_nearby_cleared_mid_way_goes_to_search(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        view.set_nearby_state(False)
        assert isinstance(view.state, SearchState)

    def test_progress_write_after_transition_leaves_nearby(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        view.progress = 0.5
        assert isinstance(view.state, SearchState)

    def test_state_change_is_logged(self, view, caplog):
        with caplog.at_level(logging.DEBUG, logger="carnav.view"):
            view.progress = 1.0
        assert "[change_state] from SearchState to AtFrontState" in caplog.text


class TestExitEnterOrdering:
    """Exit of the old state always precedes enter of the new one."""

    def test_second_nearby_signal_is_noop(self, view):
        view.progress = 0.4
        with patch.object(SearchState, "on_exit_state", autospec=True) as exit_search, \
                patch.object(NearbyState, "on_enter_state", autospec=True) as enter_nearby:
            view.set_nearby_state(True)
            view.set_nearby_state(True)
        assert exit_search.call_count == 1
        assert enter_nearby.call_count == 1

    def test_exit_then_init_then_enter(self, view):
        calls = []
        with patch.object(SearchState, "on_exit_state", autospec=True,
                          side_effect=lambda s: calls.append("exit search")), \
                patch.object(AtFrontState, "init_params", autospec=True,
                             side_effect=lambda s: calls.append("init at_front")), \
                patch.object(AtFrontState, "on_enter_state", autospec=True,
                             side_effect=lambda s: calls.append("enter at_front")):
            view.progress = 1.0
        assert calls == ["exit search", "init at_front", "enter at_front"]


class TestSearchState:

    def test_progress_moves_car_along_ring(self, view):
        view.progress = 0.25
        for part in (view.icon_car, view.icon_car_background, view.water_wave, view.progress_bar):
            assert part.params.position.angle == pytest.approx(0.0)
            assert part.params.position.radius == 100
        view.progress = 0.5
        assert view.icon_car.params.position.angle == pytest.approx(90.0)

    def test_progress_change_requests_one_redraw(self, view):
        view.engine.step()
        before = view.redraw_count
        view.progress = 0.3
        view.engine.step()
        assert view.redraw_count == before + 1

    def test_enter_fades_arrow_out(self, view):
        view.attach()
        assert view.car_arrow.fading
        view.engine.run(650)
        assert view.car_arrow.params.alpha == 0.0

    def test_leaving_the_front_fades_arrow_out(self, view):
        view.progress = 1.0
        view.progress = 0.5
        view.engine.run(650)
        assert view.car_arrow.params.alpha == 0.0


class TestAtFrontState:

    def test_layout_parks_car_at_top(self, view):
        view.progress = 0.4
        view.progress = 1.0
        for part in (view.icon_car, view.icon_car_background, view.water_wave):
            assert part.params.position.angle == -90.0
            assert part.params.scale == 1.0
            assert part.params.alpha == 1.0
        assert view.progress_bar.params.position.angle == -90.0

    def test_enter_starts_wave_and_exit_stops_it(self, view):
        view.progress = 1.0
        assert view.water_wave.running
        view.engine.run(1500)
        assert len(view.water_wave.rings) == 2
        view.progress = 0.5
        assert not view.water_wave.running
        assert view.water_wave.rings == ()

    def test_enter_fades_arrow_in(self, view):
        view.attach()
        view.engine.run(650)
        view.progress = 1.0
        assert view.car_arrow.fading
        view.engine.run(325)
        assert 0.0 < view.car_arrow.params.alpha < 1.0
        view.engine.run(325)
        assert view.car_arrow.params.alpha == 1.0


class TestNearbyState:

    def test_transition_guards_progress(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        assert view.is_in_guarded_transition
        view.engine.run(100)
        assert view.try_set_progress(0.7) is False
        view.progress = 0.9
        assert view.progress == 0.4
        view.engine.run(TRANSITION_DURATION - 100)
        assert not view.is_in_guarded_transition
        assert view.try_set_progress(0.7) is True

    def test_reverse_transition_guards_progress_too(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        view.set_nearby_state(False)
        assert view.is_in_guarded_transition
        view.progress = 0.9
        assert view.progress == 0.4
        view.engine.run(TRANSITION_DURATION)
        assert not view.is_in_guarded_transition

    def test_transition_end_layout(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        assert view.icon_car.params.position.radius == pytest.approx(0.0)
        assert view.icon_car.params.alpha == 0.0
        assert view.front_sector.params.alpha == 0.0
        assert view.empty_progress_bar.params.scale == TRACK_ENLARGE
        assert view.icon_car_background.params.scale == BACKGROUND_ENLARGE
        assert view.water_wave.params.scale == BACKGROUND_ENLARGE
        assert view.progress_bar.params.position.angle == -90.0

    def test_continuous_wave_runs_in_nearby(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        assert view.water_wave.running
        view.engine.run(3000)
        assert len(view.water_wave.rings) >= 3

    def test_exit_plays_transition_back(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        view.set_nearby_state(False)
        assert not view.water_wave.running
        view.engine.run(TRANSITION_DURATION)
        assert view.icon_car.params.position.radius == pytest.approx(100.0)
        assert view.icon_car.params.alpha == 1.0
        assert view.empty_progress_bar.params.scale == 1.0
        assert view.icon_car_background.params.scale == 1.0

    def test_exit_mid_transition_cancels_forward_set(self, view):
        view.progress = 0.4
        view.set_nearby_state(True)
        view.engine.run(200)
        view.set_nearby_state(False)
        assert view.nearby_state.transitioning
        assert view.is_in_guarded_transition
        view.engine.run(TRANSITION_DURATION)
        assert not view.nearby_state.transitioning
        assert not view.is_in_guarded_transition

    def test_progress_shadow_does_not_move_parts(self, view):
        view.set_nearby_state(True)
        view.engine.run(TRANSITION_DURATION)
        angle = view.icon_car.params.position.angle
        view.nearby_state.progress = 0.8
        assert view.icon_car.params.position.angle == angle
