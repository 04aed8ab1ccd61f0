"""Engine - core loop, systems and cooperative tasks."""

from carnav_loop.clock import Clock
from carnav_loop.tasks import Task
from carnav_loop.types import System, TaskBody
from carnav_loop.world import World


class Engine:
    def __init__(self, tps: int = 1000) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        self._tasks: list[Task] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def launch(self, body: TaskBody) -> Task:
        """Schedule a task body; its first step runs on the next tick."""
        task = Task(body, self._clock.tick_number + 1)
        self._tasks.append(task)
        return task

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _run_tasks(self, tick_number: int) -> None:
        for task in list(self._tasks):
            if task.active and task.wake_tick <= tick_number:
                task._resume(tick_number)
        self._tasks = [task for task in self._tasks if task.active]

    def _tick(self) -> None:
        tick_number = self._clock.advance()
        self._run_tasks(tick_number)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
