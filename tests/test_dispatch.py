"""Test mode-gated action dispatch."""

import pytest
from cosmo.actions import Action, ActionKind, Direction, Mode
from cosmo.commands import ActionDispatcher, Outcome
from cosmo.model import BufferModel


def model_in(mode, lines=("ab", "cd")):
    model = BufferModel(list(lines))
    if mode is Mode.EXITING:
        model.set_mode(Mode.EXITING)
    elif mode is Mode.EDITING:
        model.set_mode(Mode.EDITING)
    return model


def snapshot(model):
    return (model.lines, model.current_line, model.line_pos, model.column_pos,
            model.offset, model.mode)


ALL_ACTIONS = [
    Action.none(),
    Action.exit(),
    Action.save(),
    Action.move(Direction.UP),
    Action.move(Direction.DOWN),
    Action.move(Direction.LEFT),
    Action.move(Direction.RIGHT),
    Action.change_mode(Mode.EDITING),
    Action.change_mode(Mode.READING),
    Action.change_mode(Mode.EXITING),
    Action.add_char("x"),
    Action.remove_char(),
    Action.add_line(),
]

LEGAL = {
    Mode.READING: {
        (ActionKind.EXIT, None),
        (ActionKind.SAVE, None),
        (ActionKind.MOVE, Direction.UP),
        (ActionKind.MOVE, Direction.DOWN),
        (ActionKind.CHANGE_MODE, None),
    },
    Mode.EDITING: {
        (ActionKind.EXIT, None),
        (ActionKind.SAVE, None),
        (ActionKind.MOVE, Direction.LEFT),
        (ActionKind.MOVE, Direction.RIGHT),
        (ActionKind.CHANGE_MODE, None),
        (ActionKind.ADD_CHAR, None),
        (ActionKind.REMOVE_CHAR, None),
        (ActionKind.ADD_LINE, None),
    },
    Mode.EXITING: {
        (ActionKind.EXIT, None),
        (ActionKind.SAVE, None),
    },
}


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("action", ALL_ACTIONS)
def test_legality_table(mode, action):
    dispatcher = ActionDispatcher()
    direction = action.direction if action.kind is ActionKind.MOVE else None
    expected = (action.kind, direction) in LEGAL[mode]
    assert dispatcher.is_legal(mode, action) == expected


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("action", ALL_ACTIONS)
def test_illegal_actions_leave_model_untouched(mode, action):
    """Every action can be dispatched in every mode without failing."""
    dispatcher = ActionDispatcher()
    model = model_in(mode)
    before = snapshot(model)

    outcome = dispatcher.dispatch(model, action)

    if not dispatcher.is_legal(mode, action):
        assert outcome == Outcome.CONTINUE
        assert snapshot(model) == before


def test_move_up_ignored_while_editing():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EDITING)
    model.move_next_line()  # Direct model call, bypassing the dispatcher
    before = snapshot(model)

    dispatcher.dispatch(model, Action.move(Direction.UP))

    assert snapshot(model) == before
    assert model.line_pos == 1


def test_move_down_in_reading_mode():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.READING)
    assert dispatcher.dispatch(model, Action.move(Direction.DOWN)) == Outcome.CONTINUE
    assert model.line_pos == 1
    assert model.current_line == "cd"


def test_horizontal_moves_in_editing_mode():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EDITING)
    dispatcher.dispatch(model, Action.move(Direction.RIGHT))
    assert model.column_pos == 1
    dispatcher.dispatch(model, Action.move(Direction.LEFT))
    assert model.column_pos == 0


def test_add_char_in_editing_mode():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EDITING)
    dispatcher.dispatch(model, Action.add_char("X"))
    assert model.current_line == "Xab"


def test_add_char_ignored_in_reading_mode():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.READING)
    dispatcher.dispatch(model, Action.add_char("X"))
    assert model.current_line == "ab"


def test_add_line_in_editing_mode():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EDITING)
    dispatcher.dispatch(model, Action.add_line())
    assert model.lines == ("ab", " ", "cd")


def test_change_mode_commits_through_dispatcher():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.READING)
    dispatcher.dispatch(model, Action.change_mode(Mode.EDITING))
    dispatcher.dispatch(model, Action.add_char("X"))
    dispatcher.dispatch(model, Action.change_mode(Mode.READING))
    assert model.lines == ("Xab", "cd")


def test_exit_request_enters_exiting():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EDITING)
    assert dispatcher.dispatch(model, Action.change_mode(Mode.EXITING)) == Outcome.CONTINUE
    assert model.mode == Mode.EXITING


def test_confirmation_outcomes():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EXITING)
    assert dispatcher.dispatch(model, Action.save()) == Outcome.SAVE_AND_QUIT
    assert dispatcher.dispatch(model, Action.exit()) == Outcome.QUIT


@pytest.mark.parametrize("mode", [Mode.READING, Mode.EDITING])
def test_exit_and_save_end_the_loop_in_any_mode(mode):
    """Exit and Save terminate the loop without a detour through Exiting."""
    dispatcher = ActionDispatcher()
    model = model_in(mode)
    assert dispatcher.dispatch(model, Action.save()) == Outcome.SAVE_AND_QUIT
    assert dispatcher.dispatch(model, Action.exit()) == Outcome.QUIT
    assert model.mode == mode


def test_empty_add_char_is_dropped():
    dispatcher = ActionDispatcher()
    model = model_in(Mode.EDITING)
    dispatcher.dispatch(model, Action(ActionKind.ADD_CHAR))
    assert model.current_line == "ab"
