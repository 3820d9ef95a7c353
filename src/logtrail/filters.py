"""Filter engine for log entries."""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING

from textual.fuzzy import FuzzySearch

from logtrail.models import FilterMode

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from logtrail.models import Entry, Level

_MODE_CYCLE: tuple[FilterMode, ...] = (FilterMode.EXACT, FilterMode.FUZZY, FilterMode.REGEX)


class FilterState:
    """Active level exclusions and text query.

    In regex mode the query is recompiled on every change. A query that does
    not compile leaves ``pattern`` as None: matching then lets every entry
    through, and ``is_valid`` is False so the UI can flag the input.
    """

    def __init__(
        self,
        query: str = "",
        mode: FilterMode = FilterMode.EXACT,
        excluded_levels: Iterable[Level] = (),
    ) -> None:
        self.excluded_levels: set[Level] = set(excluded_levels)
        self.mode = mode
        self.query = query
        self.pattern: re.Pattern[str] | None = None
        self.error: str | None = None
        self._fuzzy: FuzzySearch | None = None
        self._refresh()

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def _refresh(self) -> None:
        self.pattern = None
        self.error = None
        self._fuzzy = None
        if self.mode == FilterMode.REGEX:
            try:
                self.pattern = re.compile(self.query)
            except re.error as e:
                self.error = str(e)
        elif self.mode == FilterMode.FUZZY and self.query:
            # Smart case: an uppercase letter in the query makes it case-sensitive.
            case_sensitive = any(c.isupper() for c in self.query)
            self._fuzzy = FuzzySearch(case_sensitive=case_sensitive)

    def set_query(self, query: str) -> None:
        self.query = query
        self._refresh()

    def set_mode(self, mode: FilterMode) -> None:
        self.mode = mode
        self._refresh()

    def cycle_mode(self, *, reverse: bool = False) -> FilterMode:
        """Move to the next mode (exact -> fuzzy -> regex -> exact), or the previous one."""
        step = -1 if reverse else 1
        idx = _MODE_CYCLE.index(self.mode)
        self.set_mode(_MODE_CYCLE[(idx + step) % len(_MODE_CYCLE)])
        return self.mode

    def toggle_level(self, level: Level) -> bool:
        """Exclude ``level`` or include it again. Returns True if it is now excluded."""
        if level in self.excluded_levels:
            self.excluded_levels.discard(level)
            return False
        self.excluded_levels.add(level)
        return True

    def fuzzy_match(self, text: str) -> bool:
        if self._fuzzy is None:
            return False
        score, _offsets = self._fuzzy.match(self.query, text)
        return score > 0


def matches(entry: Entry, state: FilterState) -> bool:
    """Check if a single entry passes the level exclusions and the text query."""
    if entry.level in state.excluded_levels:
        return False
    if not state.query:
        return True

    if state.mode == FilterMode.EXACT:
        return state.query in entry.message
    if state.mode == FilterMode.FUZZY:
        return state.fuzzy_match(entry.message)
    # Fail open while the regex does not compile.
    return state.pattern is None or state.pattern.search(entry.message) is not None


def apply_filter(entries: Sequence[Entry], state: FilterState) -> list[int]:
    """Return the indices of the entries that pass the filter, in order."""
    if not state.query and not state.excluded_levels:
        return list(range(len(entries)))
    return [i for i, entry in enumerate(entries) if matches(entry, state)]


def level_counts(entries: Iterable[Entry]) -> Counter[Level]:
    """Count entries per level."""
    return Counter(entry.level for entry in entries)
