"""Test the editor controller and end-to-end key scenarios."""

import pytest
from cosmo.actions import Mode
from cosmo.commands import Outcome
from cosmo.editor import Editor
from cosmo.keyboard import KeyEvent, KeyType
from cosmo.settings import EditorSettings

from conftest import FakeTerminal


def make_editor(keys=(), lines_file=None):
    editor = Editor(settings=EditorSettings(welcome_text="Hello there"),
                    terminal=FakeTerminal(keys=keys))
    if lines_file is not None:
        editor.load_file(str(lines_file))
    return editor


@pytest.fixture
def two_line_file(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text("ab\ncd\n", encoding="utf-8")
    return path


def test_load_missing_file_shows_welcome(tmp_path):
    """A missing file opens as one welcome line in Reading mode."""
    editor = make_editor(lines_file=tmp_path / "missing.txt")

    assert editor.model.lines == ("Hello there",)
    assert editor.model.mode == Mode.READING
    assert (editor.model.line_pos, editor.model.column_pos) == (0, 0)
    assert editor.filename == str(tmp_path / "missing.txt")


def test_load_empty_file_is_seeded(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    editor = make_editor(lines_file=path)
    assert editor.model.lines == (" ",)


def test_load_file_error_propagates(tmp_path):
    editor = make_editor()
    with pytest.raises(OSError):
        editor.load_file(str(tmp_path))
    assert editor.filename is None


def test_edit_commit_and_save(two_line_file):
    """Tab, type, Tab, Esc, y: the committed edit is saved."""
    editor = make_editor(keys=['<TAB>', 'X', '<TAB>', '<ESC>', 'y'], lines_file=two_line_file)

    assert editor.run() is True

    assert editor.model.lines == ("Xab", "cd")
    editor.save_file()
    assert two_line_file.read_text(encoding="utf-8") == "Xab\ncd\n"


def test_exit_without_saving(two_line_file):
    editor = make_editor(keys=['<TAB>', 'X', '<TAB>', '<ESC>', 'n'], lines_file=two_line_file)

    assert editor.run() is False

    assert two_line_file.read_text(encoding="utf-8") == "ab\ncd\n"


def test_exit_prompt_ignores_other_keys(two_line_file):
    editor = make_editor(keys=['<ESC>', 'q', '<UP>', '<TAB>', '<ESC>', 'N'],
                         lines_file=two_line_file)
    assert editor.run() is False
    assert editor.model.mode == Mode.EXITING


def test_run_restores_terminal_on_error(two_line_file):
    """The terminal guard is released even when the loop raises."""
    terminal = FakeTerminal(keys=['<TAB>'])
    editor = Editor(terminal=terminal)
    editor.load_file(str(two_line_file))

    with pytest.raises(RuntimeError):
        editor.run()

    assert terminal.entered == 1
    assert terminal.exited == 1


def test_uncommitted_edit_is_not_saved(two_line_file):
    editor = make_editor(keys=['<TAB>', 'X', '<ESC>', 'Y'], lines_file=two_line_file)
    assert editor.run() is True
    editor.save_file()
    assert two_line_file.read_text(encoding="utf-8") == "ab\ncd\n"


def test_navigation_and_new_line(two_line_file):
    keys = ['<DOWN>', '<TAB>', '<Ctrl-j>', '<TAB>', '<ESC>', 'y']
    editor = make_editor(keys=keys, lines_file=two_line_file)
    assert editor.run() is True
    assert editor.model.lines == ("ab", "cd", " ")


def test_move_up_while_editing_changes_nothing(two_line_file):
    editor = make_editor(lines_file=two_line_file)
    editor.model.move_next_line()
    editor.model.set_mode(Mode.EDITING)

    outcome = editor.handle_key_event(KeyEvent(key_type=KeyType.SPECIAL, value='up', raw='<UP>'))

    assert outcome == Outcome.CONTINUE
    assert editor.model.line_pos == 1
    assert editor.model.mode == Mode.EDITING


def test_draw_scrolls_long_line(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("x" * 200 + "\n", encoding="utf-8")
    keys = ['<TAB>'] + ['<RIGHT>'] * 100 + ['<ESC>', 'n']
    editor = make_editor(keys=keys, lines_file=path)

    editor.run()

    width = editor.view.editing_width()
    assert editor.model.offset == 100 - width + 1


def test_save_file_without_filename_raises():
    editor = make_editor()
    with pytest.raises(ValueError):
        editor.save_file()
