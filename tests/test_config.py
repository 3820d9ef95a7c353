"""Tests for configuration loading."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from logtrail.config import get_config_dir, get_log_dir, load_config
from logtrail.logging_setup import setup_logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("LOGTRAIL_CONFIG_DIR", str(tmp_path))
    return tmp_path


class TestConfig:
    def test_env_override(self, config_dir: Path) -> None:
        assert get_config_dir() == config_dir

    def test_log_dir_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGTRAIL_LOG_DIR", str(tmp_path / "logs"))
        assert get_log_dir() == tmp_path / "logs"

    def test_defaults_when_missing(self, config_dir: Path) -> None:  # noqa: ARG002
        config = load_config()
        assert config.extension == "txt"

    def test_load_values(self, config_dir: Path) -> None:
        (config_dir / "config.toml").write_text('extension = "log"\ntick_rate = 0.1\ntheme = "nord"\n')
        config = load_config()
        assert config.extension == "log"
        assert config.tick_rate == pytest.approx(0.1)
        assert config.theme == "nord"

    def test_invalid_toml_falls_back(self, config_dir: Path) -> None:
        (config_dir / "config.toml").write_text("extension = \n")
        assert load_config().extension == "txt"

    def test_invalid_value_falls_back(self, config_dir: Path) -> None:
        (config_dir / "config.toml").write_text("tick_rate = -1\n")
        assert load_config().tick_rate == pytest.approx(0.03)


class TestSetupLogging:
    def test_writes_to_file(self, tmp_path: Path) -> None:
        logfile = tmp_path / "logs" / "logtrail.log"
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            setup_logging("info", logfile)
            logging.getLogger("logtrail.test").info("hello from test")
            for h in root.handlers:
                h.flush()
            content = logfile.read_text()
            assert "[INFO] [logtrail.test] hello from test" in content
        finally:
            for h in list(root.handlers):
                root.removeHandler(h)
                h.close()
            for h in saved_handlers:
                root.addHandler(h)
            root.setLevel(saved_level)
