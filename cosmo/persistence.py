"""Loading and saving the line sequence.

Both operations are synchronous whole-file operations done once per
session, before and after the interactive loop.
"""

from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split file content into lines without their terminators.

    A final terminator does not start an extra empty line, and a "\\r"
    before each "\\n" is dropped.
    """
    if not content:
        return []
    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def load_lines(filename: str, placeholder: str) -> list[str]:
    """Read ``filename`` as UTF-8 and return its lines.

    Args:
        filename: Path to the file to open
        placeholder: Single line used when the file does not exist yet

    Returns:
        The lines of the file; may be empty for an empty file.

    Raises:
        OSError: The file exists but cannot be read.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    try:
        with open(filename, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except FileNotFoundError:
        logger.info("%s does not exist, starting a new file", filename)
        return [placeholder]
    lines = split_lines(content)
    logger.info("Loaded %d lines from %s", len(lines), filename)
    return lines


def save_lines(filename: str, lines: Iterable[str]) -> None:
    """Write each line followed by "\\n" to ``filename``.

    The file is created or truncated first. Errors propagate to the caller
    and a partially written file is left as is.

    Raises:
        OSError: The file cannot be created or written.
    """
    count = 0
    with open(filename, 'w', encoding='utf-8', newline='') as f:
        for line in lines:
            f.write(line + '\n')
            count += 1
    logger.info("Saved %d lines to %s", count, filename)
