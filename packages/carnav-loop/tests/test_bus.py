"""Unit tests for SignalBus and the signal flush system."""
from __future__ import annotations

from carnav_loop import Engine, SignalBus, make_signal_system


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append((signal_name, data))

    bus.subscribe("invalidate", handler)
    bus.publish("invalidate", source="test")
    assert received == []
    bus.flush()

    assert received == [("invalidate", {"source": "test"})]


def test_publish_without_subscribe():
    """Publish with no subscribers; flush is a no-op."""
    bus = SignalBus()
    bus.publish("nobody_listens", value=1)
    bus.flush()


def test_pending_reports_queued_signals():
    bus = SignalBus()
    assert not bus.pending("invalidate")
    bus.publish("invalidate")
    assert bus.pending("invalidate")
    bus.flush()
    assert not bus.pending("invalidate")


def test_signals_published_during_flush_wait_for_next_flush():
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append(signal_name)
        if signal_name == "first":
            bus.publish("second")

    bus.subscribe("first", handler)
    bus.subscribe("second", handler)
    bus.publish("first")
    bus.flush()
    assert received == ["first"]
    bus.flush()
    assert received == ["first", "second"]


def test_signal_system_flushes_once_per_tick():
    engine = Engine()
    bus = SignalBus()
    received = []
    bus.subscribe("invalidate", lambda name, data: received.append(engine.clock.tick_number))
    engine.add_system(make_signal_system(bus))

    bus.publish("invalidate")
    engine.run(3)
    assert received == [1]
