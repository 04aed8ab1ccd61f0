"""Cooperative tasks resumed by the engine between ticks."""

from __future__ import annotations

from carnav_loop.types import TaskBody


class Task:
    """A generator-driven job scheduled on an Engine.

    The body yields how many ticks to sleep. Cancelling closes the
    generator right away, so its ``finally`` blocks have run by the time
    ``cancel()`` returns.
    """

    __slots__ = ("_body", "_wake_tick", "_done")

    def __init__(self, body: TaskBody, wake_tick: int) -> None:
        self._body = body
        self._wake_tick = wake_tick
        self._done = False

    @property
    def active(self) -> bool:
        return not self._done

    @property
    def wake_tick(self) -> int:
        return self._wake_tick

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._body.close()

    def _resume(self, tick_number: int) -> None:
        try:
            delay = next(self._body)
        except StopIteration:
            self._done = True
            return
        except BaseException:
            self._done = True
            raise
        self._wake_tick = tick_number + max(int(delay), 1)
