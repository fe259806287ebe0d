from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from blobwars.errors import UnknownKeyError


class Command(Enum):
    BACK = "back"
    EXIT = "exit"
    RESET = "reset"
    SELECT = "select"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def is_direction(self) -> bool:
        return self in DIRECTION_OFFSETS

    @staticmethod
    def from_key(key: str) -> "Command":
        """Decode a key name into a command.

        An empty string stands for the enter key, as typed on a console.
        """
        normalized = key.strip().lower()
        try:
            return KEY_BINDINGS[normalized]
        except KeyError:
            raise UnknownKeyError(f"The key {key!r} is not recognized as a valid command.") from None


DIRECTION_OFFSETS: Dict[Command, Tuple[int, int]] = {
    Command.LEFT: (0, -1),
    Command.RIGHT: (0, 1),
    Command.UP: (-1, 0),
    Command.DOWN: (1, 0),
}

KEY_BINDINGS: Dict[str, Command] = {
    "backspace": Command.RESET,
    "x": Command.RESET,
    "enter": Command.SELECT,
    "": Command.SELECT,
    "left": Command.LEFT,
    "a": Command.LEFT,
    "right": Command.RIGHT,
    "d": Command.RIGHT,
    "up": Command.UP,
    "w": Command.UP,
    "down": Command.DOWN,
    "s": Command.DOWN,
    "q": Command.EXIT,
    "esc": Command.BACK,
    "b": Command.BACK,
}
