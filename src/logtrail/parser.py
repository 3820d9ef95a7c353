"""Parsing of raw log lines into entries.

A header line looks like::

    Mon Jan 02 2023 13:45:07.123456 [Error] - boot failed

Any line that does not match is a continuation of the previous entry
(stack traces, payload dumps, ...).
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import TYPE_CHECKING

from logtrail.errors import MalformedTimestampError
from logtrail.models import Continuation, Entry

if TYPE_CHECKING:
    from logtrail.levels import LevelCache

MONTH_MAP: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MICROSECOND_DIGITS = 6

_HEADER_RE = re.compile(
    r"^(?P<weekday>[A-Za-z]{3}) (?P<month>[A-Za-z]{3}) (?P<day>\d{2}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})\.(?P<fraction>\d+) "
    r"\[(?P<level>[^\]]+)\] - (?P<message>.*)$"
)


def _parse_date(month: str, day: str, year: str, raw: str) -> date:
    month_number = MONTH_MAP.get(month.lower())
    if month_number is None:
        msg = f"Unknown month {month!r}"
        raise MalformedTimestampError(msg, raw)
    try:
        return date(int(year), month_number, int(day))
    except ValueError as e:
        msg = f"Invalid date {month} {day} {year}: {e}"
        raise MalformedTimestampError(msg, raw) from e


def _parse_time(hour: str, minute: str, second: str, fraction: str, raw: str) -> time:
    # Read the fraction as a decimal part of a second, truncated to microseconds.
    microsecond = int(fraction[:_MICROSECOND_DIGITS].ljust(_MICROSECOND_DIGITS, "0"))
    try:
        return time(int(hour), int(minute), int(second), microsecond)
    except ValueError as e:
        msg = f"Invalid time {hour}:{minute}:{second}.{fraction}: {e}"
        raise MalformedTimestampError(msg, raw) from e


def parse_line(raw: str, cache: LevelCache) -> Entry | Continuation:
    """Parse one raw line.

    Returns an Entry for header lines and a Continuation for everything else.
    Raises MalformedTimestampError when the header matched but its date or
    time is out of range; no entry is produced in that case.
    """
    line = raw.rstrip("\r\n")
    m = _HEADER_RE.match(line)
    if m is None:
        return Continuation(line)

    timestamp = datetime.combine(
        _parse_date(m.group("month"), m.group("day"), m.group("year"), line),
        _parse_time(m.group("hour"), m.group("minute"), m.group("second"), m.group("fraction"), line),
    )
    return Entry(
        timestamp=timestamp,
        level=cache.intern(m.group("level")),
        message=m.group("message"),
    )
