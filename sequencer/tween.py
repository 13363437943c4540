from __future__ import annotations
from enum import Enum
from typing import Callable, Dict


# Easing curves for timed commands (Move). t is normalized 0..1.

def ease_linear(t: float) -> float:
    return t


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EaseFunc = Callable[[float], float]


class Ease(Enum):
    """Easing names as written in scripts, e.g. Move|1|0|0|2|OUT_QUAD."""

    LINEAR = 0
    OUT_QUAD = 1
    IN_OUT_QUAD = 2


EASE_FUNCS: Dict[Ease, EaseFunc] = {
    Ease.LINEAR: ease_linear,
    Ease.OUT_QUAD: ease_out_quad,
    Ease.IN_OUT_QUAD: ease_in_out_quad,
}


def apply_ease(ease: Ease, t: float) -> float:
    t = max(0.0, min(1.0, t))
    return EASE_FUNCS[ease](t)
