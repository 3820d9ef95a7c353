"""Line-oriented blocking file tail built on watchdog notifications."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import TYPE_CHECKING, override

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from logtrail.errors import NotReadableError, PathNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from watchdog.observers.api import BaseObserver

logger = logging.getLogger(__name__)

_observer: BaseObserver | None = None
_observer_lock = threading.Lock()


def _get_observer() -> BaseObserver:
    """Shared watchdog observer, started on first use."""
    global _observer  # noqa: PLW0603
    with _observer_lock:
        if _observer is None:
            _observer = Observer()
            _observer.daemon = True
            _observer.start()
        return _observer


class _ChangeHandler(FileSystemEventHandler):
    """Wake a FileWatcher when its file is touched."""

    def __init__(self, path: Path, changed: threading.Event) -> None:
        super().__init__()
        self._path = os.fsdecode(path)
        self._changed = changed

    @override
    def on_any_event(self, event: FileSystemEvent) -> None:
        paths = {os.fsdecode(event.src_path), os.fsdecode(getattr(event, "dest_path", "") or "")}
        if self._path in paths:
            self._changed.set()


class FileWatcher:
    """Read complete lines from a file as they are appended.

    The watcher keeps a single byte offset: read_available() returns whatever
    complete lines exist now, and watch() keeps going from the same offset, so
    no line is skipped or repeated between the two. While tailing, a trailing
    line without a newline is held back until it is completed; flush_partial()
    hands it over anyway.
    """

    def __init__(self, path: Path, poll_interval: float = 1.0) -> None:
        self.path = path
        self.poll_interval = poll_interval
        self._offset = 0
        self._partial = b""
        self._changed = threading.Event()

    @classmethod
    def register(cls, path: Path, poll_interval: float = 1.0, *, notify: bool = True) -> FileWatcher:
        """Check that ``path`` is a readable file and start listening for changes."""
        if not path.exists():
            msg = f"{path} does not exist"
            raise PathNotFoundError(msg, path)
        if not path.is_file() or not os.access(path, os.R_OK):
            msg = f"{path} is not a readable file"
            raise NotReadableError(msg, path)
        watcher = cls(path.resolve(), poll_interval)
        if notify:
            _get_observer().schedule(_ChangeHandler(watcher.path, watcher._changed), str(watcher.path.parent))
        return watcher

    def read_available(self) -> list[str]:
        """Return the complete lines appended since the last read."""
        size = self.path.stat().st_size
        if size < self._offset:
            logger.info("%s shrank from %d to %d bytes, reading from the start", self.path, self._offset, size)
            self._offset = 0
            self._partial = b""
        if size == self._offset:
            return []
        with self.path.open("rb") as f:
            f.seek(self._offset)
            data = f.read()
        self._offset += len(data)
        chunks = (self._partial + data).split(b"\n")
        self._partial = chunks.pop()
        return [chunk.decode("utf-8", errors="replace").removesuffix("\r") for chunk in chunks]

    def flush_partial(self) -> list[str]:
        """Give up waiting for the held-back line and return it, if any."""
        if not self._partial:
            return []
        line = self._partial.decode("utf-8", errors="replace").removesuffix("\r")
        self._partial = b""
        return [line]

    def watch(self, callback: Callable[[str], object]) -> None:
        """Block forever, calling ``callback`` once per newly appended line."""
        failing = False
        while True:
            self._changed.wait(self.poll_interval)
            self._changed.clear()
            try:
                lines = self.read_available()
            except OSError as e:
                if not failing:
                    logger.warning("Cannot read %s: %s", self.path, e)
                failing = True
                continue
            failing = False
            for line in lines:
                callback(line)
