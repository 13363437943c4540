from __future__ import annotations
from typing import Optional, Protocol

import pygame


class Clock(Protocol):
    """Per-tick elapsed time, in seconds, as seen by timed commands."""

    delta: float


class FrameClock:
    """pygame-backed frame clock.

    Call tick() once per frame before Sequencer.tick(); timed commands
    read `delta` during their update().
    """

    def __init__(self, fps: int = 60, max_delta: Optional[float] = 0.25):
        self.fps = fps
        self.max_delta = max_delta
        self.delta = 0.0
        self._clock = pygame.time.Clock()

    def tick(self) -> float:
        dt = self._clock.tick(self.fps) / 1000.0
        # Clamp hitches (window drag, breakpoints) so waits don't skip.
        if self.max_delta is not None:
            dt = min(dt, self.max_delta)
        self.delta = dt
        return dt

    def get_fps(self) -> float:
        return self._clock.get_fps()


class StepClock:
    """Fixed-step clock for tests and headless runs."""

    def __init__(self, delta: float = 1.0 / 60.0):
        self.delta = delta

    def tick(self) -> float:
        return self.delta

    def set_delta(self, delta: float) -> None:
        self.delta = delta
