"""Cosmo - a line-oriented terminal text editor."""

from .actions import Action, ActionKind, Direction, Mode
from .commands import ActionDispatcher, Outcome
from .model import BufferModel, CursorPosition, ListState

__all__ = [
    'Action',
    'ActionKind',
    'ActionDispatcher',
    'BufferModel',
    'CursorPosition',
    'Direction',
    'ListState',
    'Mode',
    'Outcome',
]
