"""Command pattern implementation of mode-gated action dispatch."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, FrozenSet, Optional

from .actions import Action, ActionKind, Direction, Mode
from .model import BufferModel

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """What the control loop should do after an action was dispatched."""
    CONTINUE = "continue"
    QUIT = "quit"
    SAVE_AND_QUIT = "save_and_quit"


class ActionCommand(ABC):
    """Base class for the handler of one action kind."""

    # Modes in which the action is applied; it is dropped in every other mode
    modes: FrozenSet[Mode] = frozenset()

    def is_legal(self, mode: Mode, action: Action) -> bool:
        return mode in self.modes

    @abstractmethod
    def execute(self, model: BufferModel, action: Action) -> Outcome:
        """Apply the action to the model.

        Args:
            model: Buffer model to mutate
            action: The action being applied

        Returns:
            Outcome telling the control loop whether to keep running
        """


class ExitCommand(ActionCommand):
    modes = frozenset(Mode)

    def execute(self, model, action):
        return Outcome.QUIT


class SaveCommand(ActionCommand):
    modes = frozenset(Mode)

    def execute(self, model, action):
        return Outcome.SAVE_AND_QUIT


class MoveCommand(ActionCommand):
    """Vertical moves outside Editing, horizontal moves inside it."""

    modes = frozenset({Mode.READING, Mode.EDITING})

    def is_legal(self, mode, action):
        if mode not in self.modes or action.direction is None:
            return False
        if action.direction.is_vertical:
            return mode is not Mode.EDITING
        return mode is Mode.EDITING

    def execute(self, model, action):
        if action.direction is Direction.UP:
            model.move_previous_line()
        elif action.direction is Direction.DOWN:
            model.move_next_line()
        elif action.direction is Direction.LEFT:
            model.move_previous_column()
        elif action.direction is Direction.RIGHT:
            model.move_next_column()
        return Outcome.CONTINUE


class ChangeModeCommand(ActionCommand):
    modes = frozenset({Mode.READING, Mode.EDITING})

    def is_legal(self, mode, action):
        return super().is_legal(mode, action) and action.mode is not None

    def execute(self, model, action):
        model.set_mode(action.mode)
        return Outcome.CONTINUE


class AddCharCommand(ActionCommand):
    modes = frozenset({Mode.EDITING})

    def is_legal(self, mode, action):
        return super().is_legal(mode, action) and bool(action.char)

    def execute(self, model, action):
        model.insert_char(action.char)
        return Outcome.CONTINUE


class RemoveCharCommand(ActionCommand):
    modes = frozenset({Mode.EDITING})

    def execute(self, model, action):
        model.remove_char()
        return Outcome.CONTINUE


class AddLineCommand(ActionCommand):
    modes = frozenset({Mode.EDITING})

    def execute(self, model, action):
        model.insert_newline()
        return Outcome.CONTINUE


class ActionDispatcher:
    """Routes actions to commands; the only place legality is decided.

    Every action is safe to dispatch in every mode. Combinations that are
    not legal are dropped without touching the model.
    """

    def __init__(self):
        self._commands: Dict[ActionKind, ActionCommand] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        self.register(ActionKind.EXIT, ExitCommand())
        self.register(ActionKind.SAVE, SaveCommand())
        self.register(ActionKind.MOVE, MoveCommand())
        self.register(ActionKind.CHANGE_MODE, ChangeModeCommand())
        self.register(ActionKind.ADD_CHAR, AddCharCommand())
        self.register(ActionKind.REMOVE_CHAR, RemoveCharCommand())
        self.register(ActionKind.ADD_LINE, AddLineCommand())

    def register(self, kind: ActionKind, command: ActionCommand):
        """Register the command handling an action kind."""
        self._commands[kind] = command

    def get_command(self, kind: ActionKind) -> Optional[ActionCommand]:
        return self._commands.get(kind)

    def is_legal(self, mode: Mode, action: Action) -> bool:
        command = self.get_command(action.kind)
        return command is not None and command.is_legal(mode, action)

    def dispatch(self, model: BufferModel, action: Action) -> Outcome:
        """Apply ``action`` to ``model`` if it is legal in the current mode."""
        command = self.get_command(action.kind)
        if command is None:
            return Outcome.CONTINUE
        if not command.is_legal(model.mode, action):
            logger.debug("Dropped %s in %s mode", action.kind.value, model.mode)
            return Outcome.CONTINUE
        return command.execute(model, action)
