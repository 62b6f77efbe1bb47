"""Cursor and buffer model of the editor.

The model owns the authoritative line sequence, a detached working copy of
the selected line, the cursor and the horizontal scroll offset. Only the
working line is edited interactively; it is copied back into the sequence
when the user leaves Editing mode for Reading mode.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from . import graphemes
from .actions import Mode
from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass
class CursorPosition:
    line: int = 0
    column: int = 0


@dataclass
class ListState:
    """Selection and vertical scroll state of the rendered line list.

    The model updates ``selected`` when the current line changes; ``offset``
    belongs to the renderer.
    """
    selected: Optional[int] = 0
    offset: int = 0

    def select(self, index: Optional[int]) -> None:
        self.selected = index

    def scroll_into_view(self, height: int) -> int:
        """Adjust ``offset`` so the selected row is one of ``height`` visible rows."""
        if self.selected is None or height <= 0:
            return self.offset
        if self.selected < self.offset:
            self.offset = self.selected
        elif self.selected >= self.offset + height:
            self.offset = self.selected - height + 1
        return self.offset


class BufferModel:
    """Line sequence, working line, cursor, offset and mode of one file."""

    def __init__(self, lines: Iterable[str] = ()):
        self._lines: list[str] = list(lines)
        if not self._lines:
            self._lines = [EditorConstants.NEW_LINE_PLACEHOLDER]
        self._current_line: str = self._lines[0]
        self._position = CursorPosition()
        self._offset = 0
        self._mode = Mode.READING
        self._list_state = ListState(selected=0)

    # --- Read-only accessors used by the renderer and the save path ---

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def current_line(self) -> str:
        """The working line: a staged copy of the selected line."""
        return self._current_line

    def current_line_len(self) -> int:
        return graphemes.length(self._current_line)

    @property
    def line_pos(self) -> int:
        return self._position.line

    @property
    def column_pos(self) -> int:
        return self._position.column

    @property
    def position(self) -> CursorPosition:
        return CursorPosition(self._position.line, self._position.column)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def list_state(self) -> ListState:
        return self._list_state

    # --- Line navigation ---

    def select_line(self, line_num: int) -> None:
        """Select line ``line_num`` and re-derive the working line from it.

        Any uncommitted edit of the previous working line is discarded.
        """
        line_num = max(0, line_num)
        self._position.line = line_num
        self._position.column = 0
        self._offset = 0
        self._list_state.select(line_num)
        self._current_line = self._lines[line_num] if line_num < len(self._lines) else ""

    def move_next_line(self) -> None:
        """Select the following line; stays put on the last line."""
        target = min(max(len(self._lines) - 1, 0), self.line_pos + 1)
        self.select_line(target)

    def move_previous_line(self) -> None:
        """Select the preceding line; stays put on the first line."""
        self.select_line(max(0, self.line_pos - 1))

    # --- Column navigation ---

    def select_column(self, column_num: int) -> None:
        """Move the cursor to grapheme ``column_num`` of the working line.

        Targets past the end are clamped to the end of the line. Landing
        just past the last grapheme grows the line by one space, unless the
        last grapheme already is a space; then the cursor steps back
        instead, so trailing whitespace never piles up.
        """
        column_num = min(column_num, self.current_line_len())
        self._position.column = column_num
        if column_num != self.current_line_len():
            return
        previous = graphemes.grapheme_at(self._current_line, max(0, column_num - 1))
        if previous != " ":
            self._current_line += " "
        else:
            self.move_previous_column()

    def move_next_column(self) -> None:
        self.select_column(self.column_pos + 1)

    def move_previous_column(self) -> None:
        self.select_column(max(0, self.column_pos - 1))

    # --- Editing ---

    def insert_char(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and advance one column."""
        column = self.column_pos
        if column == self.current_line_len() + 1:
            target = column + 1
        else:
            target = column
        self._current_line = graphemes.insert_at(self._current_line, target, ch)
        self.move_next_column()

    def remove_char(self) -> None:
        """Remove the grapheme under the cursor and step one column left."""
        self._current_line = graphemes.remove_at(self._current_line, self.column_pos)
        self.move_previous_column()

    def insert_newline(self) -> None:
        """Insert a placeholder line after the current line."""
        if not self._lines:
            self._lines.append(EditorConstants.NEW_LINE_PLACEHOLDER)
            return
        self._lines.insert(self.line_pos + 1, EditorConstants.NEW_LINE_PLACEHOLDER)

    # --- Mode ---

    def set_mode(self, mode: Mode) -> None:
        """Switch modes, committing the working line on Editing -> Reading.

        Exiting is terminal: once entered, the mode no longer changes.
        """
        if self._mode is Mode.EXITING:
            logger.debug("Ignoring mode change to %s while exiting", mode)
            return
        if self._mode is Mode.EDITING and mode is Mode.READING and self._lines:
            self._lines[self.line_pos] = self._current_line
            logger.debug("Committed working line %d", self.line_pos)
        logger.debug("Mode %s -> %s", self._mode, mode)
        self._mode = mode

    # --- Horizontal scrolling ---

    def calculate_offset(self, width: int) -> tuple[int, int]:
        """Return the inclusive grapheme window visible in ``width`` columns.

        ``width`` is the content width, with borders already removed. The
        window follows the cursor one column per call instead of
        re-centering, so this must run once before every render.
        """
        line_len = self.current_line_len()
        if line_len == 0:
            return (0, 0)
        num_columns = max(1, width)
        column = self.column_pos
        leftmost = self._offset
        rightmost = min(line_len - 1, (num_columns - 1) + self._offset)
        if column < leftmost:
            self._offset = max(0, self._offset - 1)
            return (max(0, leftmost - 1), max(0, rightmost - 1))
        if column > rightmost:
            self._offset += 1
            return (leftmost + 1, rightmost + 1)
        return (leftmost, rightmost)
