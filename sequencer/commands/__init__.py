# sequencer/commands/__init__.py
from __future__ import annotations

from sequencer.clock import Clock
from sequencer.registry import CommandRegistry
from sequencer.router import EventRouter

from .flow import JumpCommand, JumpLabelCommand, LabelCommand, find_label, wire_flow
from .log import LogCommand
from .objects import CreateCommand, MoveCommand, SetPositionCommand
from .wait import ClickCommand, InputPredicate, WaitCommand


def register_default_commands(
    registry: CommandRegistry,
    router: EventRouter,
    clock: Clock,
    pressed: InputPredicate,
) -> CommandRegistry:
    """Bind the stock commands to one router / clock / input source."""
    registry.register("Log", lambda args: LogCommand(args, router))
    registry.register("Create", lambda args: CreateCommand(args, router))
    registry.register("SetPosition", lambda args: SetPositionCommand(args, router))
    registry.register("Move", lambda args: MoveCommand(args, router, clock))
    registry.register("Jump", lambda args: JumpCommand(args, router))
    registry.register("Label", LabelCommand)
    registry.register("JumpLabel", lambda args: JumpLabelCommand(args, router))
    registry.register("Wait", lambda args: WaitCommand(args, clock))
    registry.register("Click", lambda args: ClickCommand(args, pressed))
    return registry
