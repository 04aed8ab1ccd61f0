"""Tests for the water-wave emitter."""

import pytest

from carnav.wave import GROW_DURATION, WAVE_INTERVAL


@pytest.fixture
def wave(view):
    return view.water_wave


class TestLiveness:
    """Rings keep coming while running, and stay bounded."""

    def test_rings_live_at_1500(self, view, wave):
        wave.start(0.2, 1.6)
        view.engine.run(1500)
        assert len(wave.rings) == 2

    def test_ring_count_stays_bounded(self, view, wave):
        wave.start(0.2, 1.6)
        counts = []
        for _ in range(100):
            view.engine.run(100)
            counts.append(len(wave.rings))
        assert min(counts) >= 1
        assert max(counts) <= GROW_DURATION // WAVE_INTERVAL + 1

    def test_first_ring_appears_on_start(self, wave):
        wave.start(1.0, 1.92)
        assert len(wave.rings) == 1
        assert wave.running

    def test_start_while_running_is_noop(self, view, wave):
        wave.start(0.2, 1.6)
        view.engine.run(10)
        wave.start(1.0, 1.92)
        assert len(wave.rings) == 1
        view.engine.run(990)
        assert len(wave.rings) == 2


class TestStop:
    """Stop clears everything and nothing comes back."""

    def test_stop_clears_rings_and_schedule(self, view, wave):
        wave.start(0.2, 1.6)
        view.engine.run(1500)
        wave.stop()
        assert wave.rings == ()
        assert not wave.running
        view.engine.run(3 * WAVE_INTERVAL)
        assert wave.rings == ()

    def test_stop_silences_ring_updates(self, view, wave):
        wave.start(0.2, 1.6)
        view.engine.run(200)
        ring = wave.rings[0]
        radius = ring.radius
        wave.stop()
        view.engine.run(500)
        assert ring.radius == radius

    def test_stop_is_idempotent_and_safe_when_never_started(self, view, wave):
        wave.stop()
        wave.stop()
        wave.start(0.2, 1.6)
        wave.stop()
        wave.stop()
        assert wave.rings == ()

    def test_restart_after_stop(self, view, wave):
        wave.start(0.2, 1.6)
        view.engine.run(700)
        wave.stop()
        wave.start(1.0, 1.92)
        view.engine.run(1000)
        assert len(wave.rings) == 2


class TestRingValues:
    """Each ring grows and fades on its own schedule."""

    def test_ring_grows_from_scale_start_to_scale_end(self, view, wave):
        wave.start(0.2, 1.6)
        ring = wave.rings[0]
        view.engine.run(1)
        assert ring.radius == pytest.approx(20 * 0.2, abs=0.5)
        view.engine.run(GROW_DURATION - 2)
        assert ring.radius == pytest.approx(20 * 1.6, abs=0.1)

    def test_radius_follows_part_scale(self, view, wave):
        wave.update_params(scale=3.7)
        wave.start(1.0, 1.92)
        ring = wave.rings[0]
        view.engine.run(GROW_DURATION - 1)
        assert ring.radius == pytest.approx(20 * 3.7 * 1.92, abs=0.1)

    def test_alpha_peaks_then_fades(self, view, wave):
        wave.start(0.2, 1.6)
        ring = wave.rings[0]
        view.engine.run(500)
        assert ring.alpha == pytest.approx(0.2)
        view.engine.run(1500)
        assert ring.alpha == pytest.approx(0.2)
        assert ring.blur == 0.0
        view.engine.run(2499)
        assert ring.alpha == pytest.approx(0.0, abs=1e-3)
        assert ring.blur == pytest.approx(20.0, abs=0.1)

    def test_ring_removed_when_its_cycle_ends(self, view, wave):
        wave.start(0.2, 1.6)
        first = wave.rings[0]
        view.engine.run(GROW_DURATION)
        assert first not in wave.rings

    def test_draw_emits_one_circle_per_ring(self, view, wave, canvas):
        wave.start(0.2, 1.6)
        view.engine.run(2500)
        wave.draw(canvas)
        assert len(canvas.calls) == 3
        assert all(call[0] == "circle" for call in canvas.calls)
        alphas = [call[4].alpha for call in canvas.calls]
        assert alphas == [round(ring.alpha * 255) for ring in wave.rings]
