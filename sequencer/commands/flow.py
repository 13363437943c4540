from __future__ import annotations
from typing import Any, Dict, List

from sequencer.arguments import ArgumentDecoder
from sequencer.command import Command
from sequencer.controller import Sequencer
from sequencer.router import EventRouter, Topic, Unsubscribe
from sequencer.script import NOT_FOUND


LABEL = "Label"


class JumpCommand(Command):
    """Jump|index"""

    def __init__(self, args: ArgumentDecoder, router: EventRouter):
        self.router = router
        self.index = args.as_int(1)

    def on_start(self) -> None:
        self.router.emit(Topic.FLOW_JUMP, index=self.index)


class LabelCommand(Command):
    """Label|name -- marks a jump target, does nothing when run."""

    def __init__(self, args: ArgumentDecoder):
        self.name = args.as_string(1)


class JumpLabelCommand(Command):
    """JumpLabel|name"""

    def __init__(self, args: ArgumentDecoder, router: EventRouter):
        self.router = router
        self.label = args.as_string(1)

    def on_start(self) -> None:
        self.router.emit(Topic.FLOW_JUMP_LABEL, label=self.label)


def find_label(sequencer: Sequencer, label: str) -> int:
    """Index of the Label line named `label`, or NOT_FOUND."""
    index = sequencer.find_index_of_tag(0, label, 1)
    while index != NOT_FOUND:
        if sequencer.store.split(sequencer.store[index])[0] == LABEL:
            return index
        index = sequencer.find_index_of_tag(index + 1, label, 1)
    return NOT_FOUND


def wire_flow(router: EventRouter, sequencer: Sequencer) -> List[Unsubscribe]:
    """Route the flow.* topics published by Jump / JumpLabel into `sequencer`.

    Returns the unsubscribe handles.
    """

    def _on_jump(topic: str, payload: Dict[str, Any]) -> None:
        sequencer.jump_to_index(payload["index"])

    def _on_jump_label(topic: str, payload: Dict[str, Any]) -> None:
        label = payload["label"]
        index = find_label(sequencer, label)
        if index == NOT_FOUND:
            raise KeyError(f"Unknown label {label!r}")
        sequencer.jump_to_index(index)

    return [
        router.subscribe(Topic.FLOW_JUMP, _on_jump),
        router.subscribe(Topic.FLOW_JUMP_LABEL, _on_jump_label),
    ]
