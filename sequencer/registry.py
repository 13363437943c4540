"""
sequencer/registry.py

Maps command names (field 0 of a script line) to factories.

A factory is any callable taking an ArgumentDecoder and returning a
command. Host wiring (router, clock, input) goes in through closures:

    registry.register("Wait", lambda args: WaitCommand(args, clock=clock))

The Sequencer only reads from the registry.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Callable, Dict, Iterable, Iterator, List, TypeVar

from .arguments import ArgumentDecoder
from .command import CommandLike
from .script import DEFAULT_SEPARATOR


CommandFactory = Callable[[ArgumentDecoder], CommandLike]

F = TypeVar("F", bound=CommandFactory)


def unknown_command(name: str, known: Iterable[str]) -> KeyError:
    known_str = ", ".join(sorted(known))
    return KeyError(f"Unknown command name {name!r}. Known: {known_str}")


class CommandRegistry(Mapping):
    """Name -> factory table. Behaves as a read-only Mapping."""

    def __init__(self, factories: Dict[str, CommandFactory] | None = None):
        self._factories: Dict[str, CommandFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: CommandFactory) -> None:
        if not isinstance(name, str) or not name or any(c.isspace() for c in name):
            raise ValueError(f"command name must be a non-empty string without whitespace (got {name!r})")
        if not callable(factory):
            raise TypeError(f"factory for {name!r} must be callable (got {factory!r})")
        # Last registration wins.
        self._factories[name] = factory

    def command(self, name: str) -> Callable[[F], F]:
        """Decorator form of register()."""

        def deco(factory: F) -> F:
            self.register(name, factory)
            return factory

        return deco

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def create(self, args: ArgumentDecoder) -> CommandLike:
        factory = self._factories.get(args.name)
        if factory is None:
            raise unknown_command(args.name, self._factories)
        return factory(args)

    def missing(self, lines: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> List[str]:
        """Command names used by `lines` that have no factory, in first-use order."""
        return missing_commands(self, lines, separator)

    # Mapping interface
    def __getitem__(self, name: str) -> CommandFactory:
        try:
            return self._factories[name]
        except KeyError as e:
            raise unknown_command(name, self._factories) from e

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"CommandRegistry({sorted(self._factories)!r})"


def missing_commands(
    registry: Mapping, lines: Iterable[str], separator: str = DEFAULT_SEPARATOR
) -> List[str]:
    result: List[str] = []
    for line in lines:
        name = line.split(separator)[0] if line else ""
        if name not in registry and name not in result:
            result.append(name)
    return result
