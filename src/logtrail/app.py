"""Textual application for logtrail."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal
from textual.screen import Screen

from logtrail.filters import FilterState
from logtrail.models import AppConfig
from logtrail.navigation import InputFocus, NavigationState
from logtrail.widgets.base import SnapshotWidget
from logtrail.widgets.entry_list import EntryList
from logtrail.widgets.file_list import FileList
from logtrail.widgets.filter_bar import FilterBar
from logtrail.widgets.help_screen import HelpScreen
from logtrail.widgets.level_popup import LevelPopup
from logtrail.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from textual import events

    from logtrail.tailer import TailCoordinator


class LogScreen(Screen[None]):
    """Main screen: files on the left, entries on the right.

    Nothing on this screen takes focus, so every key reaches on_key here and
    is handed to the navigation state. The view is redrawn from a snapshot on
    every tick and after every input.
    """

    DEFAULT_CSS = """
    LogScreen {
        layers: base overlay;
    }

    LogScreen > #panes {
        height: 1fr;
    }
    """

    def __init__(self, navigation: NavigationState, tick_rate: float) -> None:
        super().__init__()
        self.navigation = navigation
        self.tick_rate = tick_rate

    def compose(self) -> ComposeResult:
        yield FilterBar(id="filter-bar")
        with Horizontal(id="panes"):
            yield FileList(id="file-list")
            yield EntryList(id="entry-list")
        yield LevelPopup(id="level-popup")
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        self.refresh_view()
        self.set_interval(self.tick_rate, self.refresh_view)

    def refresh_view(self) -> None:
        if self.navigation.should_quit:
            self.app.exit()
            return
        snapshot = self.navigation.snapshot()
        for widget in self.query(SnapshotWidget):
            widget.show(snapshot)
        self.query_one(LevelPopup).show(snapshot)

    def on_key(self, event: events.Key) -> None:
        if event.key == "question_mark" and self.navigation.focus == InputFocus.BROWSING:
            event.stop()
            self.app.push_screen(HelpScreen())
            return
        if self.navigation.handle_key(event.key, event.character):
            event.stop()
            event.prevent_default()
            self.refresh_view()

    def on_snapshot_widget_clicked(self, message: SnapshotWidget.Clicked) -> None:
        self.navigation.click(message.target)
        self.refresh_view()

    def on_snapshot_widget_scrolled(self, message: SnapshotWidget.Scrolled) -> None:
        self.navigation.scroll(down=message.down)
        self.refresh_view()


class LogtrailApp(App[None]):
    """Log tailing TUI application."""

    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, coordinator: TailCoordinator, config: AppConfig | None = None) -> None:
        super().__init__()
        self.coordinator = coordinator
        self.config = config or AppConfig()
        self.filter_state = FilterState()
        self.navigation = NavigationState(coordinator.logs, self.filter_state, coordinator.cache.all_levels)
        self.theme = self.config.theme

    def on_mount(self) -> None:
        self.push_screen(LogScreen(self.navigation, self.config.tick_rate))
