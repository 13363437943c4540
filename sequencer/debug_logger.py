# sequencer/debug_logger.py

from __future__ import annotations
from typing import Iterable, Any

# ----------------------------------------------------------------------
# Core debug toggles
# ----------------------------------------------------------------------

DEBUG_ENABLED: bool = True

ENABLED_CATEGORIES: set[str] = {
    "sequencer",  # index transitions, start / end of a run
    "script",     # output of Log lines
    "harness",
}

def enable_categories(*cats: str) -> None:
    ENABLED_CATEGORIES.update(cats)

def disable_categories(*cats: str) -> None:
    for c in cats:
        ENABLED_CATEGORIES.discard(c)

def set_categories(cats: Iterable[str]) -> None:
    global ENABLED_CATEGORIES
    ENABLED_CATEGORIES = set(cats)

def is_enabled(category: str) -> bool:
    return DEBUG_ENABLED and category in ENABLED_CATEGORIES

def log(category: str, message: str) -> None:
    if not is_enabled(category):
        return
    print(f"[SEQ {category.upper()}] {message}")


# ----------------------------------------------------------------------
# High-level Sequencer Debug Helper
# ----------------------------------------------------------------------

class SequencerDebug:
    """
    Helper that formats structured debug messages for a Sequencer.

    Harness code calls these instead of hand-rolling state dumps.
    """

    def harness(self, msg: str) -> None:
        log("harness", msg)

    def snapshot(self, sequencer: Any) -> None:
        """Dump position, pending jump and the surrounding lines."""
        index = getattr(sequencer, "current_index", 0)
        count = getattr(sequencer, "count", 0)
        state = getattr(sequencer, "state", None)
        pending = getattr(sequencer, "pending_jump", None)
        active = getattr(sequencer, "active", None)
        store = getattr(sequencer, "store", None)

        lines: list[str] = []
        lines.append("=== DEBUG: Sequencer State ===")
        lines.append(f"state: {state!r}")
        lines.append(f"index: {index} / {count}")
        lines.append(f"pending_jump: {pending!r}")
        lines.append(f"active: {type(active).__name__ if active is not None else None}")

        if store is not None and count:
            lines.append("")
            lines.append("Script:")
            lo = max(0, index - 2)
            hi = min(count, index + 3)
            for i in range(lo, hi):
                marker = ">" if i == index else " "
                lines.append(f" {marker}[{i:03d}] {store[i]}")

        lines.append("=== END SEQUENCER DEBUG ===")
        log("sequencer", "\n".join(lines))
