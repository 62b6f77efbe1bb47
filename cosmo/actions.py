"""Input-device independent descriptions of what the user wants to do."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(Enum):
    """Editor modes; each one gates which actions are accepted."""
    READING = "Reading"  # Navigate between lines
    EDITING = "Editing"  # Mutate the working line
    EXITING = "Exiting"  # Save confirmation prompt is showing

    def __str__(self) -> str:
        return self.value


class Direction(Enum):
    """Cursor movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


class ActionKind(Enum):
    """Kinds of user intent understood by the dispatcher."""
    NONE = "none"
    EXIT = "exit"
    SAVE = "save"
    MOVE = "move"
    CHANGE_MODE = "change_mode"
    ADD_CHAR = "add_char"
    REMOVE_CHAR = "remove_char"
    ADD_LINE = "add_line"


@dataclass(frozen=True)
class Action:
    """A decoded user intent.

    Only the payload field matching ``kind`` is set: ``direction`` for MOVE,
    ``mode`` for CHANGE_MODE and ``char`` for ADD_CHAR.
    """
    kind: ActionKind
    direction: Optional[Direction] = None
    mode: Optional[Mode] = None
    char: Optional[str] = None

    @classmethod
    def none(cls) -> "Action":
        return cls(ActionKind.NONE)

    @classmethod
    def exit(cls) -> "Action":
        return cls(ActionKind.EXIT)

    @classmethod
    def save(cls) -> "Action":
        return cls(ActionKind.SAVE)

    @classmethod
    def move(cls, direction: Direction) -> "Action":
        return cls(ActionKind.MOVE, direction=direction)

    @classmethod
    def change_mode(cls, mode: Mode) -> "Action":
        return cls(ActionKind.CHANGE_MODE, mode=mode)

    @classmethod
    def add_char(cls, char: str) -> "Action":
        return cls(ActionKind.ADD_CHAR, char=char)

    @classmethod
    def remove_char(cls) -> "Action":
        return cls(ActionKind.REMOVE_CHAR)

    @classmethod
    def add_line(cls) -> "Action":
        return cls(ActionKind.ADD_LINE)
