from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from logtrail.logging_setup import setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    watchdog_level = logging.getLogger("watchdog").level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.getLogger("watchdog").setLevel(watchdog_level)


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    def test_writes_to_logfile(self, tmp_path: Path) -> None:
        logfile = tmp_path / "nested" / "logtrail.log"
        setup_logging("info", logfile)
        logging.getLogger("logtrail.test").info("hello from test")
        for h in logging.getLogger().handlers:
            h.flush()
        content = logfile.read_text(encoding="utf-8")
        assert "logging initialized" in content
        assert "[INFO] [logtrail.test] hello from test" in content

    def test_single_file_handler_after_repeat_calls(self, tmp_path: Path) -> None:
        logfile = tmp_path / "logtrail.log"
        setup_logging("warning", logfile)
        setup_logging("warning", logfile)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.FileHandler)

    def test_unknown_level_falls_back_to_warning(self, tmp_path: Path) -> None:
        setup_logging("chatty", tmp_path / "logtrail.log")
        assert logging.getLogger().level == logging.WARNING

    def test_watchdog_kept_at_info_or_above(self, tmp_path: Path) -> None:
        setup_logging("debug", tmp_path / "logtrail.log")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("watchdog").level == logging.INFO
