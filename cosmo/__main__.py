"""Cosmo CLI entry point.

Allows running via `python -m cosmo` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import EditorConstants
from .version import get_version_string

logger = logging.getLogger(__name__)


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed key events and the action each maps to in Reading mode.

    Quit with ESC.
    """
    from .actions import Mode
    from .keyboard import KeyboardHandler, action_for_key
    from .terminal import TerminalInterface

    print("Keyboard test mode: press keys to see parsed events.")
    print("Quit with ESC.")

    with TerminalInterface() as term:
        kb = KeyboardHandler(term)
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.value == 'escape':
                print("Exiting keyboard test.\r")
                break
            action = action_for_key(ev, Mode.READING)
            print(f"type={ev.key_type.value} value={ev.value} "
                  f"raw='{_escape_bytes(ev.raw)}' action={action.kind.value}\r")


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, keyboard test, or the file to edit
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return 0
    if len(args) != 1 or args[0].startswith('-'):
        print(EditorConstants.USAGE_MESSAGE, file=sys.stderr)
        return 2
    filename = args[0]

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .logging_setup import configure_logging
    from .settings import load_settings

    settings = load_settings()
    configure_logging(settings.log_level)

    editor = Editor(settings=settings)
    try:
        editor.load_file(filename)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot open %s: %s", filename, e)
        print(f"cosmo: cannot open {filename}: {e}", file=sys.stderr)
        return 1

    # Terminal state is restored by the time run() returns or raises
    if not editor.run():
        return 0
    try:
        editor.save_file(filename)
    except OSError as e:
        logger.error("Cannot save %s: %s", filename, e)
        print(f"cosmo: cannot save {filename}: {e}", file=sys.stderr)
        return 1
    print(EditorConstants.SAVED_MESSAGE)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
