from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload


@dataclass(slots=True)
class Entry:
    key: str
    value: str
    comment: str | None = None  # "" is a present-but-empty comment


class StringsFile:
    """Ordered key/value table; duplicates and file order are preserved."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self.entries: list[Entry] = list(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    @overload
    def __getitem__(self, index: int) -> Entry: ...

    @overload
    def __getitem__(self, index: slice) -> list[Entry]: ...

    def __getitem__(self, index: int | slice) -> Entry | list[Entry]:
        return self.entries[index]

    def __setitem__(self, index: int, entry: Entry) -> None:
        self.entries[index] = entry

    def __delitem__(self, index: int | slice) -> None:
        del self.entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringsFile):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"StringsFile({self.entries!r})"

    def append(self, entry: Entry) -> None:
        self.entries.append(entry)

    def insert(self, index: int, entry: Entry) -> None:
        self.entries.insert(index, entry)

    # read-only helpers
    def get_entry(self, key: str) -> Entry | None:
        return next((e for e in self.entries if e.key == key), None)

    def keys(self) -> list[str]:
        return [e.key for e in self.entries]
