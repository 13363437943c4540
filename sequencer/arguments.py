from __future__ import annotations
import re
from enum import Enum
from typing import Iterable, List, Type, TypeVar

from .script import DEFAULT_SEPARATOR


E = TypeVar("E", bound=Enum)

# Plain ASCII decimal only: no "1_000", no non-ASCII digits, no inf/nan.
_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
_FLOAT_RE = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")


class ArgumentDecoder:
    """Typed access to the fields of one script line.

    Index 0 is the command name, so arguments start at index 1:

      args = ArgumentDecoder.from_line("Move|-1|0|1|2.5")
      args.as_float(4)   # 2.5
      args.as_int(9)     # 0  (missing -> default "0")

    Defaults only cover missing fields. A field that is present but
    malformed raises ValueError.
    """

    def __init__(self, fields: Iterable[str]):
        self._fields: List[str] = list(fields)

    @classmethod
    def from_line(cls, line: str, separator: str = DEFAULT_SEPARATOR) -> "ArgumentDecoder":
        return cls(line.split(separator))

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._fields):
            raise IndexError(
                f"argument index {index} out of range for {self.name!r} "
                f"(fields={len(self._fields)})"
            )
        return self._fields[index]

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def name(self) -> str:
        return self._fields[0] if self._fields else ""

    @property
    def count(self) -> int:
        return len(self._fields)

    def _resolve(self, index: int, default: str) -> str:
        if 0 <= index < len(self._fields):
            return self._fields[index]
        return default

    def _fail(self, index: int, text: str, expected: str) -> ValueError:
        return ValueError(
            f"{self.name!r} argument {index}: expected {expected}, got {text!r}"
        )

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------
    def as_string(self, index: int, default: str = "") -> str:
        return self._resolve(index, default)

    def as_int(self, index: int, default: str = "0") -> int:
        text = self._resolve(index, default)
        if not _INT_RE.fullmatch(text):
            raise self._fail(index, text, "an integer")
        return int(text)

    def as_float(self, index: int, default: str = "0") -> float:
        text = self._resolve(index, default)
        if not _FLOAT_RE.fullmatch(text):
            raise self._fail(index, text, "a number")
        return float(text)

    def as_bool(self, index: int, default: str = "0") -> bool:
        return self.as_int(index, default) != 0

    def as_enum(self, enum_type: Type[E], index: int, default: str = "0") -> E:
        """Resolve a member by name; a numeric string resolves by value."""
        text = self._resolve(index, default)
        member = enum_type.__members__.get(text)
        if member is not None:
            return member

        try:
            if not _INT_RE.fullmatch(text):
                raise ValueError(text)
            return enum_type(int(text))
        except ValueError as e:
            known = ", ".join(enum_type.__members__)
            raise self._fail(index, text, f"one of {enum_type.__name__} ({known})") from e

    def __str__(self) -> str:
        return ",".join(self._fields)

    def __repr__(self) -> str:
        return f"ArgumentDecoder({self._fields!r})"
