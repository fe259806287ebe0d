import pytest

from blobwars.errors import UnknownKeyError
from blobwars.session import Command


@pytest.mark.parametrize(
    "key, command",
    [
        ("enter", Command.SELECT),
        ("", Command.SELECT),
        ("backspace", Command.RESET),
        ("x", Command.RESET),
        ("Left", Command.LEFT),
        ("d", Command.RIGHT),
        ("w", Command.UP),
        ("down", Command.DOWN),
        ("q", Command.EXIT),
        ("esc", Command.BACK),
    ],
)
def test_from_key(key, command) -> None:
    assert Command.from_key(key) is command


def test_unknown_key_raises() -> None:
    with pytest.raises(UnknownKeyError):
        Command.from_key("z")
    with pytest.raises(ValueError):
        Command.from_key("tab")


def test_is_direction() -> None:
    directions = {command for command in Command if command.is_direction}
    assert directions == {Command.LEFT, Command.RIGHT, Command.UP, Command.DOWN}
