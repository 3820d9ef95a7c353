"""Right pane: entries of the selected file."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, override

from rich.text import Text

from logtrail.navigation import Pane
from logtrail.widgets.base import SnapshotWidget
from logtrail.widgets.styles import level_style

if TYPE_CHECKING:
    from logtrail.models import Entry
    from logtrail.navigation import ViewSnapshot

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
_INDENT = "    "


def format_entry(entry: Entry) -> Text:
    """One entry as styled text; continuation lines are indented under the header."""
    text = Text()
    text.append(entry.timestamp.strftime(_TIMESTAMP_FORMAT), style="dim")
    text.append(" ")
    text.append(f"[{entry.level}]", style=level_style(entry.level))
    text.append(" ")
    first, *rest = entry.message.split("\n")
    text.append(first)
    for line in rest:
        text.append(f"\n{_INDENT}{line}")
    return text


class EntryList(SnapshotWidget):
    """Filtered entries of the selected file, scrolled to keep the cursor visible."""

    DEFAULT_CSS = """
    EntryList {
        width: 1fr;
        height: 1fr;
        border: round $panel-lighten-2;
        border-title-align: center;
    }

    EntryList.-focused {
        border: round $accent;
    }
    """

    target: ClassVar[Pane | None] = Pane.ENTRIES

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.border_title = "Entries"
        self._top = 0

    @override
    def show(self, snapshot: ViewSnapshot) -> None:
        self.set_class(snapshot.pane == Pane.ENTRIES, "-focused")
        if snapshot.files:
            self.border_title = snapshot.files[snapshot.file_index].name
        super().show(snapshot)

    def _scroll_to(self, heights: list[int], selected: int, height: int) -> int:
        """First visible entry so that ``selected`` is fully on screen when possible."""
        top = min(self._top, selected)
        total = sum(heights[top : selected + 1])
        while top < selected and total > height:
            total -= heights[top]
            top += 1
        self._top = top
        return top

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        snapshot = self.snapshot
        if snapshot is None:
            return text
        if not snapshot.entries:
            text.append("no entries", style="dim italic")
            return text

        height = max(self.content_size.height, 1)
        heights = [entry.message.count("\n") + 1 for entry in snapshot.entries]
        top = self._scroll_to(heights, snapshot.entry_index, height)

        highlight = "reverse" if snapshot.pane == Pane.ENTRIES else "reverse dim"
        used = 0
        for i in range(top, len(snapshot.entries)):
            if used >= height:
                break
            if i > top:
                text.append("\n")
            row = format_entry(snapshot.entries[i])
            if i == snapshot.entry_index:
                row.stylize(highlight)
            text.append_text(row)
            used += heights[i]
        return text
