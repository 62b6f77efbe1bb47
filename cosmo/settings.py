"""User settings for the cosmo editor.

Settings are read from a JSON file in the OS-appropriate config directory.
A missing or broken file is never fatal; every key falls back to its
default independently.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorSettings:
    """Settings consumed by the renderer, the loader and logging setup."""
    title: str = EditorConstants.TITLE
    highlight_symbol: str = EditorConstants.HIGHLIGHT_SYMBOL
    welcome_text: str = EditorConstants.WELCOME_TEXT
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL


def get_settings_path() -> Path:
    """Path of the settings file in the user's config directory."""
    return Path(platformdirs.user_config_dir("cosmo")) / "settings.json"


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if the value can be used for the key.
    """
    if key in ('title', 'highlight_symbol'):
        return isinstance(value, str)
    if key == 'welcome_text':
        # Stored as a single buffer line
        return isinstance(value, str) and '\n' not in value
    if key == 'log_level':
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    return False


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings, falling back to defaults for anything unusable.

    Args:
        path: Settings file to read. Defaults to ``get_settings_path()``.

    Returns:
        The effective settings.
    """
    path = path or get_settings_path()
    data = _read_settings_file(path)
    known = {f.name for f in fields(EditorSettings)}
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.debug(f"Ignoring unknown setting {key!r}")
            continue
        if not validate_setting(key, value):
            logger.warning(f"Invalid value for setting {key!r}: {value!r}, using default")
            continue
        values[key] = value.upper() if key == 'log_level' else value
    return EditorSettings(**values)
