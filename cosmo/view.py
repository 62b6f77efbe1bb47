"""Blessed renderer for the buffer model.

The renderer only reads the model. The one piece of state it writes is the
model's ``ListState``, which exists for the renderer's benefit.
"""

from __future__ import annotations

from typing import Optional

from . import graphemes
from .actions import Mode
from .constants import EditorConstants
from .model import BufferModel
from .settings import EditorSettings


def box_top(width: int, title: str = "") -> str:
    """Top border of a box with an optional centered title."""
    inner = max(0, width - 2)
    return "┌" + title[:inner].center(inner, "─") + "┐"


def box_bottom(width: int) -> str:
    return "└" + "─" * max(0, width - 2) + "┘"


def box_row(text: str, width: int) -> str:
    inner = max(0, width - 2)
    return "│" + text[:inner].ljust(inner) + "│"


def numbered_line(index: int, text: str) -> str:
    """Format a buffer line for the list, numbering from 1."""
    return EditorConstants.LINE_NUMBER_FORMAT.format(number=index + 1, text=text)


def list_rows(model: BufferModel, height: int, highlight_symbol: str) -> list[tuple[str, bool]]:
    """Rows of the line list visible in ``height`` rows.

    Returns:
        (text, is_selected) pairs. Unselected rows are indented by the
        width of the highlight symbol so the numbers line up.
    """
    state = model.list_state
    start = state.scroll_into_view(height)
    lines = model.lines
    rows = []
    for index in range(start, min(len(lines), start + max(0, height))):
        selected = index == state.selected
        prefix = highlight_symbol if selected else " " * len(highlight_symbol)
        rows.append((prefix + numbered_line(index, lines[index]), selected))
    return rows


def split_at_cursor(text: str, column: int, window: tuple[int, int]) -> tuple[str, str, str]:
    """Split the visible part of the working line around the cursor.

    Args:
        text: The working line
        column: Cursor column (grapheme index)
        window: Inclusive (leftmost, rightmost) grapheme window

    Returns:
        (before, cursor, after). ``cursor`` is a space when the cursor sits
        past the last grapheme.
    """
    left, right = window
    if not text:
        return ("", " ", "")
    before = graphemes.window(text, left, column - 1)
    cursor = graphemes.grapheme_at(text, column) or " "
    after = graphemes.window(text, column + 1, right)
    return (before, cursor, after)


def info_text(model: BufferModel) -> str:
    return (
        f"Line (↑↓): {model.line_pos + 1} | Column (←→): {model.column_pos + 1}"
        f" | Newline (Enter) | Mode (Tab): {model.mode} | Exit (ESC)"
    )


def center(total: int, size: int) -> int:
    """Start coordinate that centers ``size`` cells within ``total``."""
    return max(0, (total - size) // 2)


class ScreenRenderer:
    """Draws the line list, the editing line, the info bar and the exit popup."""

    def __init__(self, terminal, settings: Optional[EditorSettings] = None):
        self.terminal = terminal
        self.settings = settings or EditorSettings()

    @property
    def term(self):
        return self.terminal.term

    def editing_width(self) -> int:
        """Columns available for the working line inside its border."""
        return max(1, self.terminal.width - EditorConstants.BORDER_WIDTH)

    def list_height(self) -> int:
        """Rows available for buffer lines inside the list border."""
        return max(0, self.terminal.height - EditorConstants.EDITING_BOX_HEIGHT
                   - EditorConstants.INFO_BAR_HEIGHT - 2)

    def draw(self, model: BufferModel, window: tuple[int, int]):
        """Draw a full frame.

        Args:
            model: Model to draw
            window: Visible grapheme window from ``model.calculate_offset``
        """
        self.terminal.clear_screen()
        if model.mode is Mode.EXITING:
            self._draw_exit_popup()
        else:
            self._draw_lines(model)
            self._draw_editing_line(model, window)
            self._draw_info(model)
        self.terminal.write("", flush=True)

    def _draw_lines(self, model: BufferModel):
        term = self.term
        width = self.terminal.width
        height = self.list_height()
        out = [term.move_yx(0, 0) + box_top(width, self.settings.title)]
        rows = list_rows(model, height, self.settings.highlight_symbol)
        dim = model.mode is Mode.EDITING
        for y in range(height):
            text, selected = rows[y] if y < len(rows) else ("", False)
            row = box_row(text, width)
            if selected and dim:
                row = row[0] + term.bright_black(row[1:-1]) + row[-1]
            out.append(term.move_yx(y + 1, 0) + row)
        out.append(term.move_yx(height + 1, 0) + box_bottom(width))
        self.terminal.write(''.join(out))

    def _draw_editing_line(self, model: BufferModel, window: tuple[int, int]):
        term = self.term
        width = self.terminal.width
        top = self.list_height() + 2
        editing = model.mode is Mode.EDITING
        before, cursor, after = split_at_cursor(model.current_line, model.column_pos, window)
        inner = max(0, width - 2)
        # Pad with plain text so the border stays in place
        padding = " " * max(0, inner - graphemes.length(before + cursor + after))
        if editing:
            content = before + term.reverse(cursor) + after + padding
        else:
            content = term.bright_black(before + cursor + after) + padding
        self.terminal.write(
            term.move_yx(top, 0) + box_top(width)
            + term.move_yx(top + 1, 0) + "│" + content + "│"
            + term.move_yx(top + 2, 0) + box_bottom(width)
        )

    def _draw_info(self, model: BufferModel):
        width = self.terminal.width
        text = info_text(model)[:width]
        y = self.terminal.height - 1
        self.terminal.write(self.term.move_yx(y, center(width, len(text))) + text)

    def _draw_exit_popup(self):
        term = self.term
        width = min(self.terminal.width,
                    max(len(EditorConstants.EXIT_PROMPT) + EditorConstants.BORDER_WIDTH,
                        self.terminal.width // 2))
        height = max(4, self.terminal.height // 2)
        left = center(self.terminal.width, width)
        top = center(self.terminal.height, height)
        # The prompt box takes 80% of the popup, the options line sits below it
        box_height = max(3, (height * 4) // 5)
        out = [term.move_yx(top, left) + box_top(width, EditorConstants.POPUP_TITLE)]
        for y in range(1, box_height - 1):
            text = EditorConstants.EXIT_PROMPT if y == 1 else ""
            out.append(term.move_yx(top + y, left) + box_row(text, width))
        out.append(term.move_yx(top + box_height - 1, left) + box_bottom(width))
        out.append(term.move_yx(top + box_height, left) + EditorConstants.EXIT_OPTIONS[:width])
        self.terminal.write(''.join(out))
