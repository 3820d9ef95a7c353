"""Exception types raised by logtrail."""

from __future__ import annotations


class LogtrailError(Exception):
    """Base class for logtrail errors."""


class LineError(LogtrailError):
    """A single raw line could not be applied to its log.

    Line errors never stop a tailing worker: the line is reported and dropped.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class MalformedTimestampError(LineError, ValueError):
    """A header line matched but one of its date/time components is out of range."""


class OrphanContinuationError(LineError):
    """A continuation line arrived before any entry existed in the log."""


class NoPriorEntryError(LogtrailError, IndexError):
    """append_last() was called on a log without entries."""


class PathError(LogtrailError, OSError):
    """A path given on the command line cannot be monitored."""

    def __init__(self, message: str, path: object) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(PathError):
    """The path does not exist."""


class NotReadableError(PathError):
    """The path exists but cannot be read."""
