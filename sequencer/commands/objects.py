from __future__ import annotations

import pygame

from sequencer.arguments import ArgumentDecoder
from sequencer.clock import Clock
from sequencer.command import Command
from sequencer.debug_logger import log
from sequencer.router import EventRouter, Topic
from sequencer.tween import Ease, apply_ease


def _read_pos(args: ArgumentDecoder, first: int) -> pygame.Vector3:
    return pygame.Vector3(
        args.as_float(first),
        args.as_float(first + 1),
        args.as_float(first + 2),
    )


class CreateCommand(Command):
    """Create|name|x|y|z

    Publishes "object.create"; the host builds whatever the object is.
    """

    def __init__(self, args: ArgumentDecoder, router: EventRouter):
        self.router = router
        self.name = args.as_string(1)
        self.pos = _read_pos(args, 2)

    def on_start(self) -> None:
        self.router.emit(Topic.OBJECT_CREATE, name=self.name, pos=pygame.Vector3(self.pos))
        log("command", f"created {self.name!r} at {tuple(self.pos)}")


class SetPositionCommand(Command):
    """SetPosition|x|y|z"""

    def __init__(self, args: ArgumentDecoder, router: EventRouter):
        self.router = router
        self.pos = _read_pos(args, 1)

    def on_start(self) -> None:
        self.router.emit(Topic.OBJECT_SET_POSITION, pos=pygame.Vector3(self.pos))
        log("command", f"position set to {tuple(self.pos)}")


class MoveCommand(Command):
    """Move|x|y|z|duration|ease

    Timed. Publishes:
      - "object.move_start" (pos) on start
      - "object.move" (amount, eased 0..1) every update
      - "object.move_end" on dispose
    """

    def __init__(self, args: ArgumentDecoder, router: EventRouter, clock: Clock):
        self.router = router
        self.clock = clock
        self.pos = _read_pos(args, 1)
        self.duration = args.as_float(4)
        self.ease = args.as_enum(Ease, 5)
        self.elapsed = 0.0

    def is_end(self) -> bool:
        return self.duration <= self.elapsed

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    def on_start(self) -> None:
        self.router.emit(Topic.OBJECT_MOVE_START, pos=pygame.Vector3(self.pos))
        log("command", f"move to {tuple(self.pos)} over {self.duration:.2f}s")

    def on_update(self) -> None:
        self.elapsed += self.clock.delta
        self.router.emit(Topic.OBJECT_MOVE, amount=apply_ease(self.ease, self.progress))

    def on_dispose(self) -> None:
        self.router.emit(Topic.OBJECT_MOVE_END)
        log("command", "move finished")
