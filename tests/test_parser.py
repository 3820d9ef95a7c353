"""Tests for log line parsing."""

from __future__ import annotations

from datetime import date, time
from typing import TYPE_CHECKING

import pytest

from logtrail.errors import MalformedTimestampError
from logtrail.models import Continuation, Entry
from logtrail.parser import parse_line

if TYPE_CHECKING:
    from logtrail.levels import LevelCache

HEADER = "Mon Jan 02 2023 13:45:07.123456 [Error] - boot failed"


class TestHeaderLines:
    def test_basic_header(self, cache: LevelCache) -> None:
        result = parse_line(HEADER, cache)
        assert isinstance(result, Entry)
        assert result.timestamp.date() == date(2023, 1, 2)
        assert result.timestamp.time() == time(13, 45, 7, 123456)
        assert result.level is cache.intern("Error")
        assert result.level.name == "Error"
        assert result.message == "boot failed"

    def test_weekday_not_validated(self, cache: LevelCache) -> None:
        # 2023-01-02 was a Monday
        result = parse_line("Fri Jan 02 2023 13:45:07.123456 [Error] - boot failed", cache)
        assert isinstance(result, Entry)
        assert result.timestamp.date() == date(2023, 1, 2)

    def test_month_case_insensitive(self, cache: LevelCache) -> None:
        result = parse_line("Tue DEC 31 2024 23:59:59.999999 [Info] - end of year", cache)
        assert isinstance(result, Entry)
        assert result.timestamp.month == 12

    def test_message_taken_verbatim(self, cache: LevelCache) -> None:
        raw = "Mon Jan 02 2023 13:45:07.000000 [Info] - a - b [c] \\n {json: true}  "
        result = parse_line(raw, cache)
        assert isinstance(result, Entry)
        assert result.message == "a - b [c] \\n {json: true}  "

    def test_empty_message(self, cache: LevelCache) -> None:
        result = parse_line("Mon Jan 02 2023 13:45:07.000000 [Info] - ", cache)
        assert isinstance(result, Entry)
        assert result.message == ""

    def test_short_fraction_is_decimal(self, cache: LevelCache) -> None:
        result = parse_line("Mon Jan 02 2023 13:45:07.5 [Info] - half", cache)
        assert isinstance(result, Entry)
        assert result.timestamp.microsecond == 500000

    def test_long_fraction_truncated(self, cache: LevelCache) -> None:
        result = parse_line("Mon Jan 02 2023 13:45:07.123456789 [Info] - nanos", cache)
        assert isinstance(result, Entry)
        assert result.timestamp.microsecond == 123456

    def test_trailing_newline_stripped(self, cache: LevelCache) -> None:
        result = parse_line(HEADER + "\r\n", cache)
        assert isinstance(result, Entry)
        assert result.message == "boot failed"

    def test_level_interned(self, cache: LevelCache) -> None:
        first = parse_line("Mon Jan 02 2023 13:45:07.000000 [WARNING] - a", cache)
        second = parse_line("Mon Jan 02 2023 13:45:08.000000 [warning] - b", cache)
        assert isinstance(first, Entry)
        assert isinstance(second, Entry)
        assert first.level is second.level

    def test_level_with_spaces(self, cache: LevelCache) -> None:
        result = parse_line("Mon Jan 02 2023 13:45:07.000000 [Very Verbose] - x", cache)
        assert isinstance(result, Entry)
        assert result.level.name == "Very Verbose"


class TestContinuationLines:
    @pytest.mark.parametrize(
        "raw",
        [
            "  at frame 3",
            "",
            "Traceback (most recent call last):",
            "Mon Jan 02 2023 13:45:07 [Error] - missing fraction",
            "Mon Jan 02 2023 13:45:07.123456 Error - missing brackets",
            "Mon Jan 02 2023 13:45:07.123456 [Error] boot failed",
            "Mon Jan 2 2023 13:45:07.123456 [Error] - single digit day",
            " Mon Jan 02 2023 13:45:07.123456 [Error] - leading space",
        ],
    )
    def test_non_header_is_continuation(self, cache: LevelCache, raw: str) -> None:
        result = parse_line(raw, cache)
        assert result == Continuation(raw)

    def test_continuation_does_not_intern(self, cache: LevelCache) -> None:
        parse_line("plain [Error] text", cache)
        assert cache.all_levels() == []


class TestMalformedTimestamp:
    @pytest.mark.parametrize(
        "raw",
        [
            "Mon Jan 02 2023 25:45:07.123456 [Error] - hour 25",
            "Mon Jan 02 2023 13:60:07.123456 [Error] - minute 60",
            "Mon Jan 02 2023 13:45:61.123456 [Error] - second 61",
            "Mon Jan 32 2023 13:45:07.123456 [Error] - day 32",
            "Mon Jan 00 2023 13:45:07.123456 [Error] - day 0",
            "Mon Feb 30 2023 13:45:07.123456 [Error] - february 30",
            "Mon Foo 02 2023 13:45:07.123456 [Error] - bad month",
            "Mon Jan 02 0000 13:45:07.123456 [Error] - year 0",
        ],
    )
    def test_out_of_range_raises(self, cache: LevelCache, raw: str) -> None:
        with pytest.raises(MalformedTimestampError) as exc_info:
            parse_line(raw, cache)
        assert exc_info.value.line == raw

    def test_is_value_error(self, cache: LevelCache) -> None:
        with pytest.raises(ValueError, match="Invalid time"):
            parse_line("Mon Jan 02 2023 25:00:00.0 [Error] - x", cache)

    def test_leap_day(self, cache: LevelCache) -> None:
        result = parse_line("Thu Feb 29 2024 00:00:00.0 [Info] - leap", cache)
        assert isinstance(result, Entry)
        assert result.timestamp.day == 29
