# sequencer/controller.py
from __future__ import annotations
from enum import Enum
from typing import Callable, Iterable, List, Mapping, Optional, Union

from .arguments import ArgumentDecoder
from .command import CommandLike
from .config import SequencerConfig
from .debug_logger import log
from .registry import CommandFactory, missing_commands, unknown_command
from .script import LinePredicate, ScriptStore


EndListener = Callable[[], None]


class SequencerState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class Sequencer:
    """
    Runs a script one command at a time.

    You call:
      - seq.start(lines)
      - seq.tick() once per frame
    and it advances whenever the active command reports is_end().

    Control flow requests are deferred to the next completion:
      - jump_to_index(i): the next transition goes to i instead of +1
      - end(): the next tick finishes the run whatever the command says

    A newly started command that is already ended is skipped over in the
    same tick, so runs of instant commands finish in one frame.
    """

    def __init__(
        self,
        registry: Mapping[str, CommandFactory],
        config: Optional[SequencerConfig] = None,
    ):
        self.registry = registry
        self.config = config or SequencerConfig()
        self.store = ScriptStore(separator=self.config.separator)

        self._current_index = 0
        self._pending_jump: Optional[int] = None
        self._force_end = False
        self._active: Optional[CommandLike] = None
        self._state = SequencerState.NOT_STARTED
        self._end_listeners: List[EndListener] = []

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def count(self) -> int:
        return len(self.store)

    @property
    def state(self) -> SequencerState:
        return self._state

    @property
    def active(self) -> Optional[CommandLike]:
        return self._active

    @property
    def pending_jump(self) -> Optional[int]:
        return self._pending_jump

    def is_ended(self) -> bool:
        return self._state is SequencerState.ENDED

    @property
    def separator(self) -> str:
        return self.store.separator

    @separator.setter
    def separator(self, value: str) -> None:
        if not value:
            raise ValueError("separator must be a non-empty string")
        self.store.separator = value

    # ------------------------------------------------------------------
    # End notification
    # ------------------------------------------------------------------
    def add_end_listener(self, listener: EndListener) -> None:
        self._end_listeners.append(listener)

    def remove_end_listener(self, listener: EndListener) -> None:
        self._end_listeners = [fn for fn in self._end_listeners if fn is not listener]

    def _fire_end(self) -> None:
        log("sequencer", f"script ended ({self.count} lines)")
        for listener in list(self._end_listeners):
            listener()

    # ------------------------------------------------------------------
    # Driver API
    # ------------------------------------------------------------------
    def start(self, script: Union[ScriptStore, Iterable[str]]) -> None:
        """Install a script (copied) and run it from the top."""
        lines = list(script)
        if self.config.validate_on_start:
            missing = missing_commands(self.registry, lines, self.separator)
            if missing:
                raise unknown_command(missing[0], self.registry)

        self.store.set(lines)
        self.restart()

    def restart(self) -> None:
        if not self.store.count:
            raise ValueError("Cannot start an empty script")

        if self._active is not None:
            self._active.dispose()
            self._active = None

        self._current_index = 0
        self._pending_jump = None
        self._force_end = False

        self._active = self._create(0)
        self._state = SequencerState.RUNNING
        if self.config.log_transitions:
            log("sequencer", f"start @000 {self.store[0]}")
        self._active.start()

    def tick(self) -> None:
        """Advance the script by one host time step."""
        if self._state is not SequencerState.RUNNING or self._active is None:
            return

        self._active.update()

        if self._force_end or self._active.is_end():
            self._force_end = False
            self._advance(self._next_target())

            # A jump is honoured once, then forgotten.
            if self._current_index == self._pending_jump:
                self._pending_jump = None

        if self._current_index >= self.count:
            self._state = SequencerState.ENDED
            self._fire_end()

    def jump_to_index(self, index: int) -> None:
        """Send the next transition to `index` (last call wins)."""
        if not 0 <= index <= self.count:
            raise IndexError(f"jump target {index} out of range (count={self.count})")
        self._pending_jump = index

    def end(self) -> None:
        """Finish the run on the next tick, bypassing the command's is_end()."""
        self._pending_jump = self.count
        self._force_end = True

    def clear(self) -> None:
        """Drop the script. A running command is disposed; no end is fired."""
        if self._active is not None:
            self._active.dispose()
            self._active = None
        self.store.clear()
        self._current_index = 0
        self._pending_jump = None
        self._force_end = False
        self._state = SequencerState.NOT_STARTED

    def dispose(self) -> None:
        """Detach end listeners. An in-flight command is left to the caller."""
        self._end_listeners = []

    # ------------------------------------------------------------------
    # Search pass-throughs
    # ------------------------------------------------------------------
    def find_index(
        self,
        predicate: LinePredicate,
        start_index: int = 0,
        count: Optional[int] = None,
    ) -> int:
        return self.store.find_index(predicate, start_index, count)

    def find_last_index(self, predicate: LinePredicate) -> int:
        return self.store.find_last_index(predicate)

    def find_index_of_command(self, start_index: int, name: str) -> int:
        return self.store.find_index_of_command(start_index, name)

    def find_index_of_tag(self, start_index: int, tag: str, field_offset: int) -> int:
        return self.store.find_index_of_tag(start_index, tag, field_offset)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _next_target(self) -> int:
        if self._pending_jump is not None:
            return self._pending_jump
        return self._current_index + 1

    def _create(self, index: int) -> CommandLike:
        args = ArgumentDecoder.from_line(self.store[index], self.separator)
        factory = self.registry.get(args.name)
        if factory is None:
            raise unknown_command(args.name, self.registry)
        return factory(args)

    def _advance(self, target: int) -> None:
        # Loops while each freshly started command is already ended.
        # Stops when the target is the current index (e.g. a pending
        # jump that was just reached).
        while target != self._current_index:
            if self._active is not None:
                self._active.dispose()
                self._active = None

            self._current_index = target
            if self._current_index >= self.count:
                return

            if self.config.log_transitions:
                log("sequencer", f"-> @{target:03d} {self.store[target]}")

            command = self._create(self._current_index)
            self._active = command
            command.start()

            if not command.is_end():
                return

            target = self._next_target()
