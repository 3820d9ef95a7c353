"""Feeding monitored files into their log stores."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from logtrail.errors import LineError, NotReadableError
from logtrail.store import LogStore
from logtrail.watcher import FileWatcher

if TYPE_CHECKING:
    from pathlib import Path

    from logtrail.levels import LevelCache

logger = logging.getLogger(__name__)


class TailCoordinator:
    """Owns one LogStore and one background tailing thread per monitored file.

    Tailing threads are daemons and are never joined: they spend their life
    blocked on the file watcher and hold no unflushed state, so the process
    is free to exit underneath them.
    """

    def __init__(self, cache: LevelCache, poll_interval: float = 1.0) -> None:
        self.cache = cache
        self.poll_interval = poll_interval
        self.logs: list[LogStore] = []

    def ingest(self, log: LogStore, raw: str) -> bool:
        """Apply one raw line to ``log``. Returns False if the line was dropped."""
        try:
            log.ingest(raw, self.cache)
        except LineError as e:
            log.record_dropped()
            logger.warning("%s: dropped line %r: %s", log.name, e.line, e)
            return False
        return True

    def load(self, log: LogStore, watcher: FileWatcher) -> int:
        """Ingest everything currently in the file, in file order. Returns the line count.

        The last line counts even without a trailing newline.
        """
        lines = watcher.read_available() + watcher.flush_partial()
        for raw in lines:
            self.ingest(log, raw)
        return len(lines)

    def add_file(self, path: Path) -> LogStore:
        """Start monitoring ``path``.

        Raises PathNotFoundError or NotReadableError if the file cannot be
        monitored; other files are unaffected.
        """
        watcher = FileWatcher.register(path, self.poll_interval)
        log = LogStore(path.name)
        try:
            count = self.load(log, watcher)
        except OSError as e:
            msg = f"{path} could not be read: {e}"
            raise NotReadableError(msg, path) from e
        logger.info("Loaded %d lines from %s (%d entries)", count, path, len(log))

        threading.Thread(
            target=watcher.watch,
            args=(lambda raw: self.ingest(log, raw),),
            name=f"tail-{log.name}",
            daemon=True,
        ).start()
        self.logs.append(log)
        return log
