"""Filter input bar at the top."""

from __future__ import annotations

from rich.text import Text

from logtrail.navigation import InputFocus
from logtrail.widgets.base import SnapshotWidget


class FilterBar(SnapshotWidget):
    """Shows the filter query, its mode and whether it is being edited."""

    DEFAULT_CSS = """
    FilterBar {
        height: 1;
        dock: top;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        snapshot = self.snapshot
        if snapshot is None:
            return text
        editing = snapshot.focus == InputFocus.EDITING_FILTER

        text.append(f" {snapshot.mode.value.upper()} ", style="bold reverse" if editing else "reverse dim")
        text.append(" ")
        if not snapshot.query and not editing:
            text.append("ctrl+f / to filter", style="dim")
        elif editing:
            before = snapshot.query[: snapshot.query_cursor]
            at = snapshot.query[snapshot.query_cursor : snapshot.query_cursor + 1] or " "
            after = snapshot.query[snapshot.query_cursor + 1 :]
            text.append(before)
            text.append(at, style="reverse")
            text.append(after)
        else:
            text.append(snapshot.query, style="bold")

        if not snapshot.query_valid:
            text.append("  invalid pattern", style="bold red")

        if editing:
            hints = "tab mode  esc done"
        else:
            hints = "F levels  ? help  q quit"
        padding = max(1, self.size.width - len(text.plain) - len(hints) - 2)
        text.append(" " * padding)
        text.append(hints, style="dim")
        return text
