"""XDG directory management and configuration for logtrail."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_log_dir

from logtrail.models import AppConfig

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the logtrail config directory.

    Respects LOGTRAIL_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("LOGTRAIL_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("logtrail"))


def get_log_dir() -> Path:
    """Get the directory for logtrail's own log file (LOGTRAIL_LOG_DIR overrides)."""
    if override := os.environ.get("LOGTRAIL_LOG_DIR"):
        return Path(override)
    return Path(user_log_dir("logtrail"))


def load_config() -> AppConfig:
    """Load application config from disk, returning defaults if not found or invalid."""
    path = get_config_dir() / "config.toml"
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        return AppConfig(**data)
    except (OSError, ValueError, TypeError, KeyError) as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return AppConfig()
