"""Data models for logtrail."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - Pydantic needs this at runtime for model field resolution
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, eq=False, slots=True)
class Level:
    """An interned log level label.

    Levels are compared by identity: two handles are equal only when they come
    from the same LevelCache insertion. Use LevelCache.intern() to obtain one.
    """

    name: str

    def __str__(self) -> str:
        return self.name


class Entry(BaseModel):
    """A single parsed log record.

    Continuation lines grow ``message`` after creation; ``timestamp`` and
    ``level`` are fixed once the entry exists.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    timestamp: datetime = Field(frozen=True)
    level: Level = Field(frozen=True)
    message: str


@dataclass(frozen=True, slots=True)
class Continuation:
    """A raw line without a header, to be merged into the previous entry."""

    text: str


class FilterMode(StrEnum):
    """How the filter query is matched against entry messages."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    REGEX = "regex"


class AppConfig(BaseModel):
    """Application configuration read from disk."""

    theme: str = "textual-dark"
    extension: str = "txt"
    tick_rate: float = Field(default=0.03, gt=0)
    poll_interval: float = Field(default=1.0, gt=0)
    log_level: str = "WARNING"
