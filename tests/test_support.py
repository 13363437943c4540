from __future__ import annotations

import pytest

from sequencer import CommandRegistry, EventRouter, Sequencer
from sequencer import debug_logger
from sequencer.clock import StepClock
from sequencer.router import Topic, unsubscribe_all
from sequencer.tween import Ease, apply_ease, ease_in_out_quad, ease_out_quad


def test_router_delivers_in_registration_order() -> None:
    router = EventRouter()
    seen = []
    first = lambda topic, payload: seen.append(("first", payload["message"]))
    router.subscribe(Topic.SCRIPT_LOG, first)
    router.subscribe(Topic.SCRIPT_LOG, lambda topic, payload: seen.append(("second", payload["message"])))
    router.emit(Topic.SCRIPT_LOG, message="a")
    router.unsubscribe(Topic.SCRIPT_LOG, first)
    router.emit(Topic.SCRIPT_LOG, message="b")
    router.emit(Topic.FLOW_JUMP, index=3)
    assert seen == [("first", "a"), ("second", "a"), ("second", "b")]


def test_subscribe_returns_unsubscribe_handle() -> None:
    router = EventRouter()
    seen = []
    handles = [
        router.subscribe(Topic.OBJECT_MOVE, lambda topic, payload: seen.append(payload["amount"])),
        router.subscribe(Topic.OBJECT_MOVE_END, lambda topic, payload: seen.append("end")),
    ]
    router.emit(Topic.OBJECT_MOVE, amount=0.5)
    unsubscribe_all(handles)
    router.emit(Topic.OBJECT_MOVE, amount=1.0)
    router.emit(Topic.OBJECT_MOVE_END)
    assert seen == [0.5]


def test_undeclared_topic_is_rejected() -> None:
    router = EventRouter()
    with pytest.raises(KeyError, match="object.teleport"):
        router.emit("object.teleport", pos=(0, 0, 0))
    with pytest.raises(KeyError):
        router.subscribe("object.teleport", lambda topic, payload: None)


def test_declared_topic_can_be_used() -> None:
    router = EventRouter()
    router.declare("object.teleport", ("pos",))
    seen = []
    router.subscribe("object.teleport", lambda topic, payload: seen.append(payload))
    router.emit("object.teleport", pos=(1, 2, 3))
    assert seen == [{"pos": (1, 2, 3)}]


@pytest.mark.parametrize("payload", [{}, {"name": "cube"}, {"name": "cube", "pos": (0, 0, 0), "extra": 1}])
def test_payload_fields_must_match_topic(payload) -> None:
    router = EventRouter()
    with pytest.raises(ValueError, match="object.create"):
        router.emit(Topic.OBJECT_CREATE, **payload)


@pytest.mark.parametrize("ease", list(Ease))
def test_every_ease_spans_zero_to_one(ease: Ease) -> None:
    assert apply_ease(ease, 0.0) == 0.0
    assert apply_ease(ease, 1.0) == 1.0
    assert apply_ease(ease, 2.0) == 1.0
    assert apply_ease(ease, -1.0) == 0.0


def test_ease_shapes() -> None:
    assert ease_out_quad(0.5) == 0.75
    assert ease_in_out_quad(0.25) == 0.125
    assert ease_in_out_quad(0.75) == 0.875


def test_step_clock() -> None:
    clock = StepClock(delta=0.5)
    assert clock.tick() == 0.5
    clock.set_delta(0.25)
    assert clock.tick() == 0.25
    assert clock.delta == 0.25


def test_log_respects_categories(capsys) -> None:
    debug_logger.set_categories({"script"})
    debug_logger.log("script", "shown")
    debug_logger.log("sequencer", "hidden")
    assert capsys.readouterr().out == "[SEQ SCRIPT] shown\n"

    debug_logger.enable_categories("sequencer")
    debug_logger.disable_categories("script")
    debug_logger.log("script", "hidden")
    debug_logger.log("sequencer", "shown")
    assert capsys.readouterr().out == "[SEQ SEQUENCER] shown\n"


def test_log_master_switch(capsys, monkeypatch) -> None:
    debug_logger.set_categories({"script"})
    monkeypatch.setattr(debug_logger, "DEBUG_ENABLED", False)
    debug_logger.log("script", "hidden")
    assert capsys.readouterr().out == ""


def test_sequencer_snapshot(capsys) -> None:
    registry = CommandRegistry({"Log": lambda args: _Blocking()})
    seq = Sequencer(registry)
    seq.start(["Log|a", "Log|b", "Log|c"])
    debug_logger.set_categories({"sequencer"})
    debug_logger.SequencerDebug().snapshot(seq)
    out = capsys.readouterr().out
    assert "index: 0 / 3" in out
    assert ">[000] Log|a" in out
    assert "[002] Log|c" in out


class _Blocking:
    def is_end(self) -> bool:
        return False

    def start(self) -> None:
        pass

    def update(self) -> None:
        pass

    def dispose(self) -> None:
        pass
