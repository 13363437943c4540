# sequencer/__init__.py
from .arguments import ArgumentDecoder
from .command import Command, CommandLike
from .config import SequencerConfig
from .controller import Sequencer, SequencerState
from .registry import CommandFactory, CommandRegistry
from .router import EventRouter
from .script import DEFAULT_SEPARATOR, NOT_FOUND, ScriptStore
