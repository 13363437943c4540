# sequencer/router.py
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple


EventHandler = Callable[[str, Dict[str, Any]], None]
Unsubscribe = Callable[[], None]


class Topic:
    """Topics published by the stock commands."""

    SCRIPT_LOG = "script.log"

    OBJECT_CREATE = "object.create"
    OBJECT_SET_POSITION = "object.set_position"
    OBJECT_MOVE_START = "object.move_start"
    OBJECT_MOVE = "object.move"
    OBJECT_MOVE_END = "object.move_end"

    FLOW_JUMP = "flow.jump"
    FLOW_JUMP_LABEL = "flow.jump_label"


# topic -> payload field names
SCRIPT_TOPICS: Dict[str, Tuple[str, ...]] = {
    Topic.SCRIPT_LOG: ("message",),
    Topic.OBJECT_CREATE: ("name", "pos"),
    Topic.OBJECT_SET_POSITION: ("pos",),
    Topic.OBJECT_MOVE_START: ("pos",),
    Topic.OBJECT_MOVE: ("amount",),
    Topic.OBJECT_MOVE_END: (),
    Topic.FLOW_JUMP: ("index",),
    Topic.FLOW_JUMP_LABEL: ("label",),
}


class EventRouter:
    """
    Synchronous bus carrying command side effects to the host.

    Topics are declared up front with their payload fields; subscribing
    to or emitting an undeclared topic, or emitting the wrong fields,
    raises. subscribe() returns a handle that removes the handler again.
    """

    def __init__(self, topics: Mapping[str, Iterable[str]] = SCRIPT_TOPICS) -> None:
        self._topics: Dict[str, frozenset] = {t: frozenset(f) for t, f in topics.items()}
        self._listeners: Dict[str, List[EventHandler]] = defaultdict(list)

    def declare(self, topic: str, fields: Iterable[str] = ()) -> None:
        """Add a host-specific topic."""
        self._topics[topic] = frozenset(fields)

    def _check_topic(self, topic: str) -> frozenset:
        try:
            return self._topics[topic]
        except KeyError as e:
            known = ", ".join(sorted(self._topics))
            raise KeyError(f"Unknown topic {topic!r}. Known: {known}") from e

    def subscribe(self, topic: str, handler: EventHandler) -> Unsubscribe:
        """
        Register handler(topic, payload_dict) for a topic.

        Returns a callable that unsubscribes this handler.
        """
        self._check_topic(topic)
        self._listeners[topic].append(handler)
        return lambda: self.unsubscribe(topic, handler)

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        if topic in self._listeners:
            self._listeners[topic] = [
                h for h in self._listeners[topic] if h is not handler
            ]
            if not self._listeners[topic]:
                del self._listeners[topic]

    def emit(self, topic: str, **payload: Any) -> None:
        """
        Emit an event. All handlers for this topic are invoked
        synchronously in registration order.
        """
        fields = self._check_topic(topic)
        if set(payload) != fields:
            raise ValueError(
                f"Topic {topic!r} expects fields {sorted(fields)}, got {sorted(payload)}"
            )

        for handler in list(self._listeners.get(topic, [])):
            handler(topic, dict(payload))


def unsubscribe_all(handles: Iterable[Unsubscribe]) -> None:
    for handle in handles:
        handle()
