from __future__ import annotations

from sequencer.arguments import ArgumentDecoder
from sequencer.command import Command
from sequencer.debug_logger import log
from sequencer.router import EventRouter, Topic


class LogCommand(Command):
    """Log|message"""

    def __init__(self, args: ArgumentDecoder, router: EventRouter):
        self.router = router
        self.message = args.as_string(1)

    def on_start(self) -> None:
        log("script", self.message)
        self.router.emit(Topic.SCRIPT_LOG, message=self.message)
