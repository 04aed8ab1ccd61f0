"""Eases the dial's progress toward a target in small fixed steps."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from carnav_loop import Engine, Task
    from carnav_loop.types import TaskBody

logger = logging.getLogger(__name__)

STEP_TICKS = 5
STEP_DIVISOR = 20
SNAP_EPSILON = 0.0001


class SmoothProgressDriver:
    """Runs at most one stepping task on the engine at a time.

    Every STEP_TICKS the task moves the current value 1/STEP_DIVISOR of
    the way to the target, which reads as an exponential ease. Retargeting
    while the task runs only changes the goal it is chasing.
    """

    def __init__(
        self,
        engine: Engine,
        read: Callable[[], float],
        write: Callable[[float], bool],
    ) -> None:
        self._engine = engine
        self._read = read
        self._write = write
        self._target = 0.0
        self._task: Task | None = None

    @property
    def target(self) -> float:
        return self._target

    @property
    def active(self) -> bool:
        return self._task is not None and self._task.active

    def smoothly_set_progress(self, target: float) -> None:
        if math.isnan(target):
            logger.warning("Ignoring NaN progress target")
            return
        if not 0.0 <= target <= 1.0:
            logger.warning("Progress target %r out of range, clamping", target)
            target = min(max(target, 0.0), 1.0)
        self._target = target
        if self.active:
            return
        self._task = self._engine.launch(self._drive(self._task))

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()

    def _drive(self, previous: Task | None) -> TaskBody:
        if previous is not None:
            previous.cancel()
        logger.debug("[smooth_progress] chasing %.4f", self._target)
        while True:
            current = self._read()
            target = self._target
            delta = (target - current) / STEP_DIVISOR
            if current == target:
                break
            if abs(delta) < SNAP_EPSILON:
                self._write(target)
                break
            step = current + delta
            if (delta > 0 and step >= target) or (delta < 0 and step <= target):
                step = target
            elif step <= 0.0:
                step = 0.0
            elif step >= 1.0:
                step = 1.0
            self._write(step)
            yield STEP_TICKS
        logger.debug("[smooth_progress] settled at %.4f", self._read())
