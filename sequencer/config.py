from __future__ import annotations

from dataclasses import dataclass

from .script import DEFAULT_SEPARATOR


@dataclass
class SequencerConfig:
    # Field separator inside a script line
    separator: str = DEFAULT_SEPARATOR

    # Check every command name against the registry in start(), before
    # anything runs. Off by default: unknown names fail when reached.
    validate_on_start: bool = False

    # Log every index change on the "sequencer" debug category
    log_transitions: bool = True
