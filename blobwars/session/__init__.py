"""Session handling: commands, turn controller and application screens."""

from .commands import DIRECTION_OFFSETS, KEY_BINDINGS, Command
from .board_state import BoardState
from .application import ApplicationState, Screen

__all__ = [
    "Command",
    "DIRECTION_OFFSETS",
    "KEY_BINDINGS",
    "BoardState",
    "ApplicationState",
    "Screen",
]
