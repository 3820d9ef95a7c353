"""Process-wide registry of interned log levels."""

from __future__ import annotations

import threading

from logtrail.models import Level


class LevelCache:
    """Deduplicating, case-insensitive store of Level handles.

    Safe to share between tailing threads: the first caller to see a given
    text creates the Level, every later caller gets the same handle.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_key: dict[str, Level] = {}
        self._ordered: list[Level] = []

    def intern(self, text: str) -> Level:
        """Return the Level for ``text``, creating it on first sighting."""
        key = text.casefold()
        with self._lock:
            level = self._by_key.get(key)
            if level is None:
                level = Level(text)
                self._by_key[key] = level
                self._ordered.append(level)
            return level

    def all_levels(self) -> list[Level]:
        """All levels seen so far, in first-seen order."""
        with self._lock:
            return list(self._ordered)

    def __len__(self) -> int:
        with self._lock:
            return len(self._ordered)
