"""Per-file log state shared between a tailing worker and the UI."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from logtrail.errors import NoPriorEntryError, OrphanContinuationError
from logtrail.models import Continuation
from logtrail.parser import parse_line

if TYPE_CHECKING:
    from logtrail.levels import LevelCache
    from logtrail.models import Entry


class Selection:
    """A cursor into a list whose length can change between moves.

    The index never leaves ``[0, count - 1]`` (0 for an empty list). When
    ``follow`` is set the cursor sticks to the last item as the list grows.
    """

    def __init__(self) -> None:
        self.index = 0
        self.follow = False

    def previous(self, count: int) -> None:
        self.follow = False
        self.index = max(self.index - 1, 0)
        self.clamp(count)

    def next(self, count: int) -> None:
        self.index = min(self.index + 1, max(count - 1, 0))

    def first(self) -> None:
        self.follow = False
        self.index = 0

    def last(self, count: int) -> None:
        self.follow = True
        self.index = max(count - 1, 0)

    def clamp(self, count: int) -> int:
        """Bring the index back in range for ``count`` items and return it."""
        if self.follow:
            self.index = max(count - 1, 0)
        else:
            self.index = min(self.index, max(count - 1, 0))
        return self.index


class LogStore:
    """Ordered, append-only entries of one monitored file plus a selection cursor.

    All mutation goes through the store's lock, which is held for a single
    append. Readers get a snapshot from entries() and never see the lock.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.selection = Selection()
        self._entries: list[Entry] = []
        self._dropped = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"LogStore(name={self.name!r}, entries={len(self)})"

    @property
    def dropped(self) -> int:
        """Number of lines rejected while ingesting this log."""
        with self._lock:
            return self._dropped

    def record_dropped(self) -> None:
        with self._lock:
            self._dropped += 1

    def add_entry(self, entry: Entry) -> None:
        """Append a new entry."""
        with self._lock:
            self._entries.append(entry)

    def append_last(self, text: str) -> None:
        """Append ``text`` on a new line of the most recent entry's message."""
        with self._lock:
            self._append_last(text)

    def _append_last(self, text: str) -> None:
        if not self._entries:
            msg = f"{self.name} has no entry to append to"
            raise NoPriorEntryError(msg)
        last = self._entries[-1]
        last.message = f"{last.message}\n{text}"

    def ingest(self, raw: str, cache: LevelCache) -> None:
        """Parse one raw line and apply it to this log.

        Raises MalformedTimestampError or OrphanContinuationError; the log is
        left untouched in both cases.
        """
        with self._lock:
            result = parse_line(raw, cache)
            if isinstance(result, Continuation):
                try:
                    self._append_last(result.text)
                except NoPriorEntryError as e:
                    msg = f"Continuation line before any entry in {self.name}"
                    raise OrphanContinuationError(msg, result.text) from e
            else:
                self._entries.append(result)

    def entries(self) -> tuple[Entry, ...]:
        """A consistent snapshot of the entries, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def _bound(self, count: int | None) -> int:
        return len(self) if count is None else count

    def select_previous(self, count: int | None = None) -> None:
        self.selection.previous(self._bound(count))

    def select_next(self, count: int | None = None) -> None:
        self.selection.next(self._bound(count))

    def select_first(self) -> None:
        self.selection.first()

    def select_last(self, count: int | None = None) -> None:
        self.selection.last(self._bound(count))

    def clamp_selection(self, count: int | None = None) -> int:
        """Clamp the cursor to ``count`` items (default: all entries) and return it."""
        return self.selection.clamp(self._bound(count))
