"""Shared base for widgets that draw a ViewSnapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.message import Message
from textual.widget import Widget

if TYPE_CHECKING:
    from textual import events

    from logtrail.navigation import Pane, ViewSnapshot


class SnapshotWidget(Widget):
    """Render-only widget fed with a fresh snapshot on every tick.

    Mouse input is forwarded to the screen as messages; the widget itself
    never touches navigation state.
    """

    target: ClassVar[Pane | None] = None

    class Clicked(Message):
        """A pane (or the filter bar, when ``target`` is None) was clicked."""

        def __init__(self, target: Pane | None) -> None:
            super().__init__()
            self.target = target

    class Scrolled(Message):
        """The mouse wheel moved over the widget."""

        def __init__(self, *, down: bool) -> None:
            super().__init__()
            self.down = down

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.snapshot: ViewSnapshot | None = None

    def show(self, snapshot: ViewSnapshot) -> None:
        self.snapshot = snapshot
        self.refresh()

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Clicked(self.target))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self.post_message(self.Scrolled(down=True))

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self.post_message(self.Scrolled(down=False))
