from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from sequencer import ArgumentDecoder, Command, CommandRegistry, EventRouter
from sequencer import debug_logger
from sequencer.clock import StepClock


class Recorder:
    """Shared journal of lifecycle calls, as (event, line_index_tag) tuples."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def of(self, event: str) -> List[str]:
        return [tag for ev, tag in self.calls if ev == event]


class ScriptedCommand(Command):
    """Test|tag|updates_until_end

    Ends after the given number of update() calls (0 = instant).
    """

    def __init__(self, args: ArgumentDecoder, recorder: Recorder):
        self.recorder = recorder
        self.tag = args.as_string(1)
        self.updates_needed = args.as_int(2)
        self.updates = 0

    def is_end(self) -> bool:
        return self.updates >= self.updates_needed

    def on_start(self) -> None:
        self.recorder.calls.append(("start", self.tag))

    def on_update(self) -> None:
        self.updates += 1
        self.recorder.calls.append(("update", self.tag))

    def on_dispose(self) -> None:
        self.recorder.calls.append(("dispose", self.tag))


@pytest.fixture(autouse=True)
def _quiet_debug_log():
    """Keep test output clean; individual tests can re-enable categories."""
    saved = set(debug_logger.ENABLED_CATEGORIES)
    debug_logger.set_categories(set())
    yield
    debug_logger.set_categories(saved)


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def registry(recorder: Recorder) -> CommandRegistry:
    reg = CommandRegistry()
    reg.register("Test", lambda args: ScriptedCommand(args, recorder))
    return reg


@pytest.fixture()
def clock() -> StepClock:
    return StepClock(delta=0.25)


@pytest.fixture()
def router() -> EventRouter:
    return EventRouter()


@pytest.fixture()
def captured(router: EventRouter):
    """Returns a function that subscribes to topics and collects their payloads."""
    events: List[Tuple[str, Dict[str, Any]]] = []

    def _capture(*topics: str) -> List[Tuple[str, Dict[str, Any]]]:
        for t in topics:
            router.subscribe(t, lambda topic, payload: events.append((topic, payload)))
        return events

    return _capture
