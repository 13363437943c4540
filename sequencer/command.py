from __future__ import annotations
from typing import Protocol


class CommandLike(Protocol):
    """Anything the Sequencer can run as one script line.

    The Sequencer guarantees:
      - start() exactly once, before the first update()
      - update() zero or more times while not ended
      - dispose() exactly once, before the next command starts
    """

    def is_end(self) -> bool:
        ...

    def start(self) -> None:
        ...

    def update(self) -> None:
        ...

    def dispose(self) -> None:
        ...


class Command:
    """
    Base class for script commands.

    Ends immediately unless a subclass overrides is_end(). Subclasses
    normally fill in the on_start / on_update / on_dispose hooks and
    leave the public methods alone.
    """

    def is_end(self) -> bool:
        return True

    def start(self) -> None:
        self.on_start()

    def update(self) -> None:
        self.on_update()

    def dispose(self) -> None:
        self.on_dispose()

    # Hooks
    def on_start(self) -> None:
        pass

    def on_update(self) -> None:
        pass

    def on_dispose(self) -> None:
        pass
