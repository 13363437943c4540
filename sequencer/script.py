from __future__ import annotations
from typing import Callable, Iterable, Iterator, List, Optional


DEFAULT_SEPARATOR = "|"

# Returned by every search when nothing matches.
NOT_FOUND = -1

LinePredicate = Callable[[str], bool]


class ScriptStore:
    """An ordered list of raw script lines.

    Line order is execution order. Lines are stored as-is and only split
    into fields when searched or decoded, e.g.

      "Create|cube|0|1|2"  ->  ["Create", "cube", "0", "1", "2"]
    """

    def __init__(self, lines: Iterable[str] = (), separator: str = DEFAULT_SEPARATOR):
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self.separator = separator
        self._lines: List[str] = list(lines)

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------
    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def get(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            raise IndexError(
                f"script index {index} out of range (count={len(self._lines)})"
            )
        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    @property
    def count(self) -> int:
        return len(self._lines)

    def split(self, line: str) -> List[str]:
        return line.split(self.separator)

    # ------------------------------------------------------------------
    # Whole-store mutation
    # ------------------------------------------------------------------
    def set(self, lines: Iterable[str]) -> None:
        """Replace the contents with a copy of `lines` (another store works too)."""
        new_lines = list(lines)
        self._lines.clear()
        self._lines.extend(new_lines)

    def clear(self) -> None:
        self._lines.clear()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def find_index(
        self,
        predicate: LinePredicate,
        start_index: int = 0,
        count: Optional[int] = None,
    ) -> int:
        """First index in [start_index, start_index + count) whose line matches."""
        total = len(self._lines)
        if count is None:
            count = total - start_index
        if start_index < 0 or start_index > total:
            raise IndexError(f"start_index {start_index} out of range (count={total})")
        if count < 0 or start_index + count > total:
            raise IndexError(
                f"search range [{start_index}, {start_index + count}) exceeds count={total}"
            )

        for i in range(start_index, start_index + count):
            if predicate(self._lines[i]):
                return i
        return NOT_FOUND

    def find_last_index(self, predicate: LinePredicate) -> int:
        for i in range(len(self._lines) - 1, -1, -1):
            if predicate(self._lines[i]):
                return i
        return NOT_FOUND

    def find_index_of_command(self, start_index: int, name: str) -> int:
        """First non-empty line at or after start_index whose command name is `name`."""
        for i in range(max(start_index, 0), len(self._lines)):
            line = self._lines[i]
            if not line:
                continue
            if self.split(line)[0] == name:
                return i
        return NOT_FOUND

    def find_index_of_tag(self, start_index: int, tag: str, field_offset: int) -> int:
        """First non-empty line whose field at `field_offset` equals `tag`.

        Lines too short to have that field are skipped.
        """
        for i in range(max(start_index, 0), len(self._lines)):
            line = self._lines[i]
            if not line:
                continue
            fields = self.split(line)
            if len(fields) <= field_offset:
                continue
            if fields[field_offset] == tag:
                return i
        return NOT_FOUND

    def __repr__(self) -> str:
        return f"ScriptStore(count={len(self._lines)}, separator={self.separator!r})"
