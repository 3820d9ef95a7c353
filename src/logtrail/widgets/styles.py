"""Colors for log levels."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logtrail.models import Level

_LEVEL_STYLES: dict[str, str] = {
    "trace": "dim",
    "debug": "dim",
    "info": "green",
    "information": "green",
    "notice": "cyan",
    "warn": "yellow",
    "warning": "yellow",
    "error": "bold red",
    "err": "bold red",
    "critical": "bold white on red",
    "fatal": "bold white on red",
}


def level_style(level: Level) -> str:
    """Rich style for a level label; unknown levels are left unstyled."""
    return _LEVEL_STYLES.get(level.name.casefold(), "")
