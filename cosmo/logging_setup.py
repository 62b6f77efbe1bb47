"""File-based logging.

The terminal belongs to the renderer while the editor runs, so log records
go to a file in the user's log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants


def get_log_path() -> Path:
    return Path(platformdirs.user_log_dir("cosmo")) / EditorConstants.LOG_FILENAME


def configure_logging(level: str = EditorConstants.DEFAULT_LOG_LEVEL,
                      log_path: Optional[Path] = None) -> logging.Logger:
    """Attach a file handler to the ``cosmo`` logger.

    Args:
        level: Name of the logging level.
        log_path: Log file. Defaults to ``get_log_path()``.

    Returns:
        The configured package logger.
    """
    root = logging.getLogger("cosmo")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    log_path = log_path or get_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError:
        # Nowhere to write; never let log output reach the editor's screen
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(EditorConstants.LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
