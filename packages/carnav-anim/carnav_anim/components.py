"""Animation, AnimationSet and Timer components."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from carnav_anim.easing import EASINGS


@dataclass
class Animation:
    """One eased value running from start_val to end_val.

    ``on_update`` receives every interpolated value once the start delay
    has passed; the last call always carries the exact end value.
    Durations and delays are in ticks.
    """

    start_val: float
    end_val: float
    duration: int
    on_update: Callable[[float], None]
    easing: str = "linear"
    delay: int = 0
    finished: bool = False

    def __post_init__(self) -> None:
        if self.easing not in EASINGS:
            raise KeyError(f"Unknown easing {self.easing!r}")
        if self.duration < 0 or self.delay < 0:
            raise ValueError("duration and delay must be non-negative")

    @property
    def span(self) -> int:
        return self.delay + self.duration

    def value_at(self, fraction: float) -> float:
        eased = EASINGS[self.easing](fraction)
        return self.start_val + (self.end_val - self.start_val) * eased


@dataclass
class AnimationSet:
    """Animations played together, with hooks around the whole group.

    With ``reverse`` set the group plays backwards: every child's window
    is mirrored inside the group span and its values run end to start.
    """

    animations: list[Animation]
    on_start: Callable[[], None] | None = None
    on_end: Callable[[], None] | None = None
    reverse: bool = False
    elapsed: int = 0

    @property
    def span(self) -> int:
        return max((anim.span for anim in self.animations), default=0)


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then auto-detaches."""

    name: str
    remaining: int
    on_fire: Callable[[], None] | None = field(default=None, repr=False)
