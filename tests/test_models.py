"""Tests for data models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from logtrail.models import AppConfig, Entry, FilterMode

if TYPE_CHECKING:
    from logtrail.levels import LevelCache


class TestEntry:
    def test_message_is_mutable(self, cache: LevelCache) -> None:
        entry = Entry(timestamp=datetime(2023, 1, 2), level=cache.intern("Info"), message="a")
        entry.message = "a\nb"
        assert entry.message == "a\nb"

    def test_timestamp_is_frozen(self, cache: LevelCache) -> None:
        entry = Entry(timestamp=datetime(2023, 1, 2), level=cache.intern("Info"), message="a")
        with pytest.raises(ValidationError):
            entry.timestamp = datetime(2024, 1, 1)

    def test_level_is_frozen(self, cache: LevelCache) -> None:
        entry = Entry(timestamp=datetime(2023, 1, 2), level=cache.intern("Info"), message="a")
        with pytest.raises(ValidationError):
            entry.level = cache.intern("Error")

    def test_level_kept_by_identity(self, cache: LevelCache) -> None:
        level = cache.intern("Info")
        entry = Entry(timestamp=datetime(2023, 1, 2), level=level, message="a")
        assert entry.level is level

    def test_level_must_be_level(self) -> None:
        with pytest.raises(ValidationError):
            Entry(timestamp=datetime(2023, 1, 2), level="Info", message="a")  # type: ignore[arg-type]


class TestFilterMode:
    def test_values(self) -> None:
        assert [mode.value for mode in FilterMode] == ["exact", "fuzzy", "regex"]

    def test_str_enum(self) -> None:
        assert str(FilterMode.REGEX) == "regex"


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.extension == "txt"
        assert config.tick_rate == pytest.approx(0.03)
        assert config.poll_interval == pytest.approx(1.0)
        assert config.theme == "textual-dark"

    def test_rejects_non_positive_tick(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(tick_rate=0)
