from __future__ import annotations
from typing import Callable

from sequencer.arguments import ArgumentDecoder
from sequencer.clock import Clock
from sequencer.command import Command
from sequencer.debug_logger import log


InputPredicate = Callable[[], bool]


class WaitCommand(Command):
    """Wait|seconds

    Accumulates the clock's per-tick delta; never sleeps.
    """

    def __init__(self, args: ArgumentDecoder, clock: Clock):
        self.clock = clock
        self.seconds = args.as_float(1)
        self.elapsed = 0.0

    def is_end(self) -> bool:
        return self.seconds <= self.elapsed

    def on_start(self) -> None:
        log("command", f"wait {self.seconds:.2f}s")

    def on_update(self) -> None:
        self.elapsed += self.clock.delta

    def on_dispose(self) -> None:
        log("command", "wait done")


class ClickCommand(Command):
    """Click

    Ends on the tick the host input predicate reports a press.
    """

    def __init__(self, args: ArgumentDecoder, pressed: InputPredicate):
        self.pressed = pressed

    def is_end(self) -> bool:
        return self.pressed()

    def on_start(self) -> None:
        log("command", "waiting for click")

    def on_dispose(self) -> None:
        log("command", "click received")
