"""Popup listing every level seen so far, for toggling level exclusions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.widget import Widget

from logtrail.widgets.styles import level_style

if TYPE_CHECKING:
    from logtrail.navigation import ViewSnapshot


class LevelPopup(Widget):
    """Checkbox list of levels; hidden while the popup is closed."""

    DEFAULT_CSS = """
    LevelPopup {
        layer: overlay;
        dock: right;
        width: 28;
        height: auto;
        max-height: 80%;
        margin: 2 2;
        background: $surface;
        border: tall $accent;
        border-title-align: center;
        padding: 0 1;
        display: none;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.border_title = "Levels"
        self.snapshot: ViewSnapshot | None = None

    def show(self, snapshot: ViewSnapshot) -> None:
        self.snapshot = snapshot
        self.display = snapshot.level_popup is not None
        self.refresh(layout=True)

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        snapshot = self.snapshot
        if snapshot is None or snapshot.level_popup is None:
            return text
        if not snapshot.levels:
            text.append("no levels yet", style="dim italic")
            return text
        for i, level in enumerate(snapshot.levels):
            if i:
                text.append("\n")
            mark = "[ ]" if level in snapshot.excluded_levels else "[x]"
            row = Text(f"{mark} ")
            row.append(level.name, style=level_style(level))
            row.append(f" {snapshot.level_counts.get(level, 0)}", style="dim")
            if i == snapshot.level_popup:
                row.stylize("reverse")
            text.append_text(row)
        return text
