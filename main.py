#!/usr/bin/env python3
"""Cosmo - a line-oriented terminal text editor.

Usage:
    python main.py filename

Controls:
    Up/Down: Select line (Reading mode)
    Tab: Toggle Reading/Editing mode (leaving Editing keeps the edit)
    Left/Right: Move within the line (Editing mode)
    Type to insert text, Backspace deletes under the cursor
    Enter: Add a line below the current one
    ESC: Quit (prompts to save)
"""

import sys
from cosmo.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
