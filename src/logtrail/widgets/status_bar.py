"""Bottom status bar."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from logtrail.widgets.base import SnapshotWidget
from logtrail.widgets.styles import level_style

if TYPE_CHECKING:
    from textual import events


class StatusBar(SnapshotWidget):
    """Entry counts, excluded levels and dropped lines of the selected file."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: $primary;
        color: $text;
        padding: 0 1;
    }
    """

    def on_click(self, event: events.Click) -> None:
        """Clicks on the status bar do nothing."""
        event.stop()

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        snapshot = self.snapshot
        if snapshot is None or not snapshot.files:
            return text
        file = snapshot.files[snapshot.file_index]

        text.append(" TAIL ", style="bold reverse")
        text.append(" ")
        shown = len(snapshot.entries)
        if shown != file.total:
            text.append(f"{shown} of {file.total} entries")
        else:
            text.append(f"{file.total} entries")

        if snapshot.excluded_levels:
            text.append("  hidden:")
            for level in snapshot.levels:
                if level in snapshot.excluded_levels:
                    text.append(f" {level}", style=f"{level_style(level)} strike")

        if file.dropped:
            text.append(f"  {file.dropped} dropped", style="bold")

        right_part = file.name
        padding = max(1, self.size.width - len(text.plain) - len(right_part) - 2)
        text.append(" " * padding)
        text.append(right_part)
        return text
