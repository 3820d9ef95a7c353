from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def setup_logging(level: str, logfile: Path) -> None:
    """Send log records to ``logfile`` only; the terminal belongs to the UI."""
    logfile.parent.mkdir(parents=True, exist_ok=True)

    log_level = getattr(logging, level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(log_level)

    # Clear existing handlers to avoid duplicates when called twice.
    for h in list(root.handlers):
        root.removeHandler(h)

    fh = logging.FileHandler(logfile, encoding="utf-8")
    fh.setLevel(log_level)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

    # watchdog is chatty at DEBUG.
    logging.getLogger("watchdog").setLevel(max(log_level, logging.INFO))

    root.info("logging initialized")
