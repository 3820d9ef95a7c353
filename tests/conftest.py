"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from logtrail.levels import LevelCache
from logtrail.models import Entry
from logtrail.store import LogStore

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_LINES = [
    "Mon Jan 02 2023 13:45:07.123456 [Error] - boot failed",
    "  at frame 3",
    "Mon Jan 02 2023 13:45:08.000001 [Info] - retrying boot",
    "Mon Jan 02 2023 13:45:09.500000 [Warning] - disk almost full",
    "Mon Jan 02 2023 13:45:10.000000 [INFO] - shutdown ok",
]


@pytest.fixture
def cache() -> LevelCache:
    """A fresh level registry for each test."""
    return LevelCache()


@pytest.fixture
def make_entry(cache: LevelCache):  # noqa: ANN201
    """Factory for entries with an interned level."""

    def _make(message: str, level: str = "Info", second: int = 0) -> Entry:
        return Entry(
            timestamp=datetime(2023, 1, 2, 13, 45, second),
            level=cache.intern(level),
            message=message,
        )

    return _make


@pytest.fixture
def sample_log(cache: LevelCache) -> LogStore:
    """A log store fed with SAMPLE_LINES."""
    log = LogStore("sample.txt")
    for raw in SAMPLE_LINES:
        log.ingest(raw, cache)
    return log


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Create a temporary log file with sample content."""
    log_file = tmp_path / "sample.txt"
    log_file.write_text("\n".join(SAMPLE_LINES) + "\n")
    return log_file
