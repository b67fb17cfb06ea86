from __future__ import annotations

from typing import Iterable


class IdGenerator:
    """Monotonic id source seeded from the ids already in a collection.

    Issued ids are never reused within the process, even if the collection
    shrinks.
    """

    def __init__(self, existing: Iterable[int] = ()):
        self._last = max((int(i) for i in existing), default=0)

    def next_id(self) -> int:
        self._last += 1
        return self._last
