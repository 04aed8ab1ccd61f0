"""carnav-anim - Eased value animations and timers on the carnav loop."""
from __future__ import annotations

from carnav_anim.animator import Animator
from carnav_anim.components import Animation, AnimationSet, Timer
from carnav_anim.easing import EASINGS, cubic_bezier
from carnav_anim.systems import make_animation_system, make_timer_system

__all__ = [
    "Animation",
    "AnimationSet",
    "Animator",
    "Timer",
    "EASINGS",
    "cubic_bezier",
    "make_animation_system",
    "make_timer_system",
]
