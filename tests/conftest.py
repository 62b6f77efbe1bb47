"""Shared test helpers."""

import blessed
import pytest


class FakeTerminal:
    """Terminal interface double that replays key tokens and records output."""

    def __init__(self, keys=(), width=80, height=24):
        # Styling disabled: capabilities render as empty strings
        self.term = blessed.Terminal(force_styling=None)
        self._keys = list(keys)
        self._width = width
        self._height = height
        self.output = []
        self.entered = 0
        self.exited = 0

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1

    def get_key(self, timeout=None):
        if not self._keys:
            raise RuntimeError("No more keys queued")
        return self._keys.pop(0)

    def write(self, text, flush=False):
        self.output.append(text)

    def clear_screen(self):
        self.output.clear()

    @property
    def screen(self):
        return ''.join(self.output)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height


@pytest.fixture
def fake_terminal():
    return FakeTerminal()
