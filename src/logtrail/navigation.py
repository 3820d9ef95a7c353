"""Selection and input-focus state driven by keys and mouse events.

Everything here runs on the UI thread. Log stores are only read through
their snapshot methods, so tailing threads can keep appending meanwhile.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from logtrail.filters import apply_filter, level_counts
from logtrail.store import Selection

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from logtrail.filters import FilterState
    from logtrail.models import Entry, FilterMode, Level
    from logtrail.store import LogStore


class Pane(StrEnum):
    """Which list responds to direction keys."""

    FILES = "files"
    ENTRIES = "entries"


class InputFocus(StrEnum):
    """Whether keys navigate or edit the filter query."""

    BROWSING = "browsing"
    EDITING_FILTER = "editing_filter"


class QueryEditor:
    """Single-line text buffer with a cursor."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = len(text)

    def insert(self, chars: str) -> None:
        self.text = self.text[: self.cursor] + chars + self.text[self.cursor :]
        self.cursor += len(chars)

    def backspace(self) -> None:
        if self.cursor > 0:
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
            self.cursor -= 1

    def delete(self) -> None:
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def left(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def right(self) -> None:
        self.cursor = min(self.cursor + 1, len(self.text))

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.text)


@dataclass(frozen=True, slots=True)
class FileView:
    name: str
    total: int
    dropped: int


@dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Everything the renderer needs for one frame."""

    files: tuple[FileView, ...]
    file_index: int
    entries: tuple[Entry, ...]
    entry_index: int
    pane: Pane
    focus: InputFocus
    query: str
    query_cursor: int
    mode: FilterMode
    query_valid: bool
    levels: tuple[Level, ...]
    excluded_levels: frozenset[Level]
    level_popup: int | None
    level_counts: Mapping[Level, int]


_EDIT_KEYS: dict[str, Callable[[QueryEditor], None]] = {
    "backspace": QueryEditor.backspace,
    "delete": QueryEditor.delete,
    "left": QueryEditor.left,
    "right": QueryEditor.right,
    "home": QueryEditor.home,
    "end": QueryEditor.end,
}


class NavigationState:
    """File/entry cursors, pane focus, filter editing and the level popup."""

    def __init__(
        self,
        logs: Sequence[LogStore],
        filter_state: FilterState,
        levels: Callable[[], list[Level]],
    ) -> None:
        self.logs = logs
        self.filter = filter_state
        self._levels = levels
        self.pane = Pane.FILES
        self.focus = InputFocus.BROWSING
        self.file_selection = Selection()
        self.level_popup: Selection | None = None
        self.editor = QueryEditor(filter_state.query)
        self.should_quit = False

    # --- Queries ---

    @property
    def selected_log(self) -> LogStore | None:
        if not self.logs:
            return None
        return self.logs[self.file_selection.clamp(len(self.logs))]

    def visible_entries(self, log: LogStore) -> list[Entry]:
        """Entries of ``log`` that pass the current filter."""
        entries = log.entries()
        return [entries[i] for i in apply_filter(entries, self.filter)]

    def snapshot(self) -> ViewSnapshot:
        """Read a consistent view of the navigation state and the selected log."""
        log = self.selected_log
        entries: tuple[Entry, ...] = ()
        entry_index = 0
        counts: Mapping[Level, int] = {}
        if log is not None:
            entries = tuple(self.visible_entries(log))
            entry_index = log.clamp_selection(len(entries))
            if self.level_popup is not None:
                counts = level_counts(log.entries())
        levels = tuple(self._levels())
        popup = None if self.level_popup is None else self.level_popup.clamp(len(levels))
        return ViewSnapshot(
            files=tuple(FileView(name=lg.name, total=len(lg), dropped=lg.dropped) for lg in self.logs),
            file_index=self.file_selection.clamp(len(self.logs)),
            entries=entries,
            entry_index=entry_index,
            pane=self.pane,
            focus=self.focus,
            query=self.editor.text,
            query_cursor=self.editor.cursor,
            mode=self.filter.mode,
            query_valid=self.filter.is_valid,
            levels=levels,
            excluded_levels=frozenset(self.filter.excluded_levels),
            level_popup=popup,
            level_counts=counts,
        )

    def _active_cursor(self) -> tuple[Selection, int] | None:
        """The cursor that direction keys move, with the length it is bounded by."""
        if self.level_popup is not None:
            return self.level_popup, len(self._levels())
        if self.pane == Pane.FILES:
            return self.file_selection, len(self.logs)
        log = self.selected_log
        if log is None:
            return None
        return log.selection, len(self.visible_entries(log))

    # --- Browsing ---

    def up(self) -> None:
        if active := self._active_cursor():
            cursor, count = active
            cursor.previous(count)

    def down(self) -> None:
        if active := self._active_cursor():
            cursor, count = active
            cursor.next(count)

    def home(self) -> None:
        if active := self._active_cursor():
            active[0].first()

    def end(self) -> None:
        if active := self._active_cursor():
            cursor, count = active
            cursor.last(count)

    def left(self) -> None:
        self.pane = Pane.FILES

    def right(self) -> None:
        self.pane = Pane.ENTRIES

    def toggle_level_popup(self) -> None:
        self.level_popup = Selection() if self.level_popup is None else None

    def activate(self) -> None:
        """Toggle exclusion of the level highlighted in the popup."""
        if self.level_popup is None:
            return
        levels = self._levels()
        if levels:
            self.filter.toggle_level(levels[self.level_popup.clamp(len(levels))])

    def escape(self) -> None:
        if self.level_popup is not None:
            self.level_popup = None
        else:
            self.should_quit = True

    # --- Filter editing ---

    def start_editing(self) -> None:
        self.focus = InputFocus.EDITING_FILTER

    def stop_editing(self) -> None:
        self.focus = InputFocus.BROWSING

    def cycle_mode(self, *, reverse: bool = False) -> None:
        self.filter.cycle_mode(reverse=reverse)

    def _edit(self, action: Callable[[QueryEditor], None]) -> None:
        action(self.editor)
        if self.editor.text != self.filter.query:
            self.filter.set_query(self.editor.text)

    # --- Input dispatch ---

    def handle_key(self, key: str, character: str | None = None) -> bool:
        """Apply a key press (textual key name). Returns False if the key was ignored."""
        if self.focus == InputFocus.EDITING_FILTER:
            return self._handle_editing_key(key, character)
        return self._handle_browsing_key(key)

    def _handle_browsing_key(self, key: str) -> bool:  # noqa: C901, PLR0911, PLR0912
        if key in {"escape", "q", "Q"}:
            self.escape()
        elif key == "ctrl+c":
            self.should_quit = True
        elif key == "up":
            self.up()
        elif key == "down":
            self.down()
        elif key == "left":
            self.left()
        elif key == "right":
            self.right()
        elif key == "home":
            self.home()
        elif key == "end":
            self.end()
        elif key in {"enter", "space"}:
            self.activate()
        elif key in {"ctrl+f", "slash"}:
            self.start_editing()
        elif key == "F":
            self.toggle_level_popup()
        else:
            return False
        return True

    def _handle_editing_key(self, key: str, character: str | None) -> bool:
        if key in {"escape", "enter"}:
            self.stop_editing()
        elif key == "tab":
            self.cycle_mode()
        elif key == "shift+tab":
            self.cycle_mode(reverse=True)
        elif key in _EDIT_KEYS:
            self._edit(_EDIT_KEYS[key])
        elif character is not None and len(character) == 1 and character.isprintable():
            self._edit(lambda editor: editor.insert(character))
        else:
            return False
        return True

    def click(self, target: Pane | None) -> None:
        """Mouse click on a pane, or on the filter bar when ``target`` is None."""
        if target is None:
            self.start_editing()
            return
        self.stop_editing()
        self.pane = target

    def scroll(self, *, down: bool) -> None:
        """Mouse wheel: move the cursor while browsing, change mode while editing."""
        if self.focus == InputFocus.EDITING_FILTER:
            self.cycle_mode(reverse=not down)
        elif down:
            self.down()
        else:
            self.up()
