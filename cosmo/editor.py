"""Main editor controller."""

import logging
from typing import Optional

from .commands import ActionDispatcher, Outcome
from .keyboard import KeyboardHandler, KeyEvent, action_for_key
from .model import BufferModel
from .persistence import load_lines, save_lines
from .settings import EditorSettings
from .terminal import TerminalInterface
from .view import ScreenRenderer

logger = logging.getLogger(__name__)


class Editor:
    """Runs the read-dispatch-render loop over one buffer."""

    def __init__(self, settings: Optional[EditorSettings] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = ScreenRenderer(self.terminal, self.settings)
        self.dispatcher = ActionDispatcher()
        self.model = BufferModel()
        self.filename: Optional[str] = None
        self.running = False
        self.save_requested = False

    def load_file(self, filename: str):
        """Load a file into the editor.

        A missing file starts a new buffer holding the welcome line.

        Raises:
            OSError: The file exists but cannot be read.
            UnicodeDecodeError: The file is not valid UTF-8.
        """
        lines = load_lines(filename, self.settings.welcome_text)
        self.filename = filename
        self.model = BufferModel(lines)

    def save_file(self, filename: Optional[str] = None):
        """Write the committed line sequence to ``filename``.

        Edits still staged in the working line are not part of the save.

        Raises:
            OSError: The file cannot be written.
        """
        filename = filename or self.filename
        if filename is None:
            raise ValueError("No filename to save to")
        save_lines(filename, self.model.lines)
        self.filename = filename

    def handle_key_event(self, key_event: Optional[KeyEvent]) -> Outcome:
        """Translate a key event and dispatch it to the model."""
        action = action_for_key(key_event, self.model.mode)
        outcome = self.dispatcher.dispatch(self.model, action)
        if outcome is Outcome.QUIT:
            self.running = False
        elif outcome is Outcome.SAVE_AND_QUIT:
            self.running = False
            self.save_requested = True
        return outcome

    def draw(self):
        """Recompute the horizontal window, then draw the frame."""
        window = self.model.calculate_offset(self.view.editing_width())
        self.view.draw(self.model, window)

    def run(self) -> bool:
        """Run the main editor loop.

        Returns:
            True if the user confirmed saving before quitting. The save is
            left to the caller so it happens with the terminal restored.
        """
        self.running = True
        self.save_requested = False
        with self.terminal:
            while self.running:
                self.draw()
                key_event = self.keyboard.get_key_event(timeout=None)
                if key_event is None:
                    continue
                self.handle_key_event(key_event)
        logger.info("Editor loop finished (save requested: %s)", self.save_requested)
        return self.save_requested
