"""Left pane: the monitored files."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, override

from rich.text import Text

from logtrail.navigation import Pane
from logtrail.widgets.base import SnapshotWidget

if TYPE_CHECKING:
    from logtrail.navigation import ViewSnapshot


class FileList(SnapshotWidget):
    """List of monitored files with their entry counts."""

    DEFAULT_CSS = """
    FileList {
        width: 20%;
        min-width: 16;
        height: 1fr;
        border: round $panel-lighten-2;
        border-title-align: center;
    }

    FileList.-focused {
        border: round $accent;
    }
    """

    target: ClassVar[Pane | None] = Pane.FILES

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.border_title = "Files"
        self._top = 0

    @override
    def show(self, snapshot: ViewSnapshot) -> None:
        self.set_class(snapshot.pane == Pane.FILES, "-focused")
        super().show(snapshot)

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        snapshot = self.snapshot
        if snapshot is None or not snapshot.files:
            text.append("no files", style="dim italic")
            return text

        height = max(self.content_size.height, 1)
        selected = snapshot.file_index
        self._top = min(self._top, selected)
        self._top = max(self._top, selected - height + 1)

        highlight = "reverse" if snapshot.pane == Pane.FILES else "reverse dim"
        for i, file in enumerate(snapshot.files[self._top : self._top + height], start=self._top):
            if i > self._top:
                text.append("\n")
            row = Text(f"{file.name} ({file.total})")
            if file.dropped:
                row.append(f" !{file.dropped}", style="red")
            if i == selected:
                row.stylize(highlight)
            text.append_text(row)
        return text
