"""Help screen showing all keyboard shortcuts."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, override

from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

HELP_TEXT = """\
[bold]Navigation[/bold]
  Up/Down                               Move in the focused list
  Left/Right                            Focus files / entries
  Home/End                              Jump to first/last (End follows new entries)

[bold]Filtering[/bold]
  Ctrl+F or /                           Edit the filter query
  Tab / Shift+Tab                       Cycle mode: exact, fuzzy, regex
  Esc or Enter                          Stop editing
  F                                     Open/close the level list
  Enter/Space                           Show or hide the highlighted level

  Fuzzy matching is case-sensitive only when the query has an uppercase letter.
  An invalid regex is flagged and filters nothing until it is fixed.

[bold]Mouse[/bold]
  Click                                 Focus a pane or the filter bar
  Wheel                                 Move, or cycle the mode while editing

[bold]General[/bold]
  ?                                     Show this help
  Esc or q                              Close the level list, or quit
  Ctrl+C                                Quit
"""


class HelpScreen(ModalScreen[None]):
    """Modal help screen with keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 70%;
        height: 90%;
        max-height: 30;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("question_mark", "dismiss_help", "Close"),
        ("q", "dismiss_help", "Close"),
    ]

    @override
    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
