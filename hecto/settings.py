"""User settings for the hecto editor.

Settings are read from a JSON file in the OS-appropriate config directory.
A missing or broken file never stops the editor from starting; bad values
are logged and replaced by defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

logger = logging.getLogger(__name__)

APP_NAME = "hecto"
LOG_LEVEL_ENV = "HECTO_LOG_LEVEL"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config_dir() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME))


def default_log_file() -> Path:
    return Path(platformdirs.user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


@dataclass
class Settings:
    """Editor settings with their defaults."""
    log_level: str = "WARNING"
    log_file: Path = field(default_factory=default_log_file)
    alternate_screen: bool = False


def _read_settings_file(settings_file: Path) -> Dict[str, Any]:
    if not settings_file.exists():
        return {}
    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {settings_file}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def _parse_log_level(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    logger.warning(f"Invalid log level {value!r}, ignoring")
    return None


def load_settings(settings_file: Optional[Path] = None,
                  environ: Optional[Dict[str, str]] = None) -> Settings:
    """Load settings from ``settings_file`` and the environment.

    Args:
        settings_file: JSON file to read; defaults to settings.json in the
            user config directory.
        environ: Environment to consult; defaults to ``os.environ``.

    Returns:
        Settings with every invalid or missing value set to its default.
    """
    if settings_file is None:
        settings_file = default_config_dir() / "settings.json"
    if environ is None:
        environ = dict(os.environ)

    settings = Settings()
    data = _read_settings_file(settings_file)

    if "log_level" in data:
        level = _parse_log_level(data["log_level"])
        if level:
            settings.log_level = level

    if "log_file" in data:
        if isinstance(data["log_file"], str) and data["log_file"]:
            settings.log_file = Path(data["log_file"]).expanduser()
        else:
            logger.warning(f"Invalid log file {data['log_file']!r}, ignoring")

    if "alternate_screen" in data:
        if isinstance(data["alternate_screen"], bool):
            settings.alternate_screen = data["alternate_screen"]
        else:
            logger.warning(f"Invalid alternate_screen {data['alternate_screen']!r}, ignoring")

    if environ.get(LOG_LEVEL_ENV):
        level = _parse_log_level(environ[LOG_LEVEL_ENV])
        if level:
            settings.log_level = level

    return settings
