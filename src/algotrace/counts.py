# -----------------------------------------------------------------------------
# Character count table
# Purpose:
#   Multiset of characters stored as counts. A key is present only while its
#   count is positive: reaching zero deletes the key, so "absent" is the single
#   way a character reads as used up (the engine's not_found condition).
# -----------------------------------------------------------------------------

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, ItemsView, Mapping


class CharCountTable:
    def __init__(self):
        self._counts: Dict[str, int] = {}

    def increment(self, c: str) -> int:
        # Absent counts as zero.
        self._counts[c] = self._counts.get(c, 0) + 1
        return self._counts[c]

    def decrement(self, c: str) -> bool:
        """
        Consume one occurrence of `c`.
        Returns False (table untouched) when `c` is absent, True otherwise.
        A count that hits zero is removed rather than stored.
        """
        current = self._counts.get(c)
        if current is None:
            return False
        if current <= 1:
            del self._counts[c]
        else:
            self._counts[c] = current - 1
        return True

    def snapshot(self) -> Mapping[str, int]:
        # Fresh dict behind a read-only view: no aliasing with the live table.
        return MappingProxyType(dict(self._counts))

    def is_empty(self) -> bool:
        return not self._counts

    def count(self, c: str) -> int:
        return self._counts.get(c, 0)

    def items(self) -> ItemsView[str, int]:
        return self._counts.items()

    def __contains__(self, c: object) -> bool:
        return c in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"CharCountTable({self._counts!r})"
