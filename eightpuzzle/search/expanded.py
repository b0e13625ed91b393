from __future__ import annotations
from typing import Set


class ExpandedSet:
    """Encodings of states already expanded in this run. Entries are never removed."""

    def __init__(self):
        self._seen: Set[str] = set()

    def __len__(self) -> int:
        return len(self._seen)

    def __contains__(self, encoding: str) -> bool:
        return encoding in self._seen

    def contains(self, encoding: str) -> bool:
        return encoding in self._seen

    def insert(self, encoding: str) -> None:
        self._seen.add(encoding)
