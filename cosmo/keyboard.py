"""Keyboard input handling using curtsies-style tokens."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .actions import Action, Direction, Mode


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key token from curtsies
    is_ctrl: bool = False


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'tab', 'page_up', 'page_down', 'insert',
}

ARROW_DIRECTIONS = {
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


class KeyboardHandler:
    """Handles keyboard input using curtsies-style key names."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: Token such as '<LEFT>', '<Ctrl-c>', '<SPACE>' or 'a'

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            lower = key_str[1:-1].lower()
            # SIGINT arrives as a curtsies event rather than a key
            if 'sigint' in lower:
                return KeyEvent(key_type=KeyType.CTRL, value='c', raw='\x03', is_ctrl=True)
            parts = lower.replace('+', '-').split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are what terminals send for Enter
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                if base == 'i':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
            # Unknown tokens are specials too, so they never become text
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str == '\t':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if key_str in ('\r', '\n'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if key_str in ('\x7f', '\x08'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)


def action_for_key(key_event: Optional[KeyEvent], mode: Mode) -> Action:
    """Translate a key event into an Action for the given mode.

    While the exit prompt is showing only y/Y (save) and n/N (discard)
    mean anything. Otherwise the mapping does not depend on the mode; the
    dispatcher decides which actions apply.
    """
    if key_event is None:
        return Action.none()

    if mode is Mode.EXITING:
        if key_event.key_type == KeyType.REGULAR:
            if key_event.value in ('y', 'Y'):
                return Action.save()
            if key_event.value in ('n', 'N'):
                return Action.exit()
        return Action.none()

    if key_event.key_type == KeyType.SPECIAL:
        if key_event.value == 'backspace':
            return Action.remove_char()
        if key_event.value == 'enter':
            return Action.add_line()
        if key_event.value in ARROW_DIRECTIONS:
            return Action.move(ARROW_DIRECTIONS[key_event.value])
        if key_event.value == 'tab':
            target = Mode.EDITING if mode is Mode.READING else Mode.READING
            return Action.change_mode(target)
        if key_event.value == 'escape':
            return Action.change_mode(Mode.EXITING)
        return Action.none()

    if key_event.key_type == KeyType.CTRL:
        if key_event.value == 'c':
            return Action.change_mode(Mode.EXITING)
        return Action.none()

    if key_event.value.isprintable():
        return Action.add_char(key_event.value)
    return Action.none()
