"""Terminal interface using Blessed for display and Curtsies for input."""

import select
import sys
from typing import Optional

import blessed
from curtsies import Input


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Raw mode and fullscreen are process-wide state. Use the interface as a
    context manager so they are restored on every exit path:

        with TerminalInterface() as terminal:
            ...
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def setup(self):
        """Enter fullscreen and raw mode."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._input is None:
            # SIGINT is delivered as an event so Ctrl-C can ask for exit
            self._input = Input(keynames='curtsies', sigint_event=True)
            self._input.__enter__()

    def cleanup(self):
        """Leave raw mode and fullscreen. Safe to call more than once."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def write(self, text: str, flush: bool = False):
        print(text, end='', flush=flush)

    def clear_screen(self):
        print(self.term.home + self.term.clear, end='')

    def get_key(self, timeout=None) -> Optional[str]:
        """Get a single key token from the user.

        Args:
            timeout: Timeout in seconds (None blocks until a key arrives)

        Returns:
            A curtsies key name such as '<LEFT>' or a plain character, or
            None if the timeout expired or input is not set up.
        """
        if self._input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        return str(next(self._input))

    @property
    def width(self) -> int:
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self) -> int:
        """Terminal height in rows."""
        return self.term.height
