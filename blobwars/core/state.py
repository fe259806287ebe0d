from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Player(Enum):
    RED = 1
    BLUE = 2

    def __neg__(self) -> "Player":
        # 1 <-> 2
        return Player(3 - self.value)

    @property
    def opponent(self) -> "Player":
        return -self


class CellState(IntEnum):
    """Content of a single grid cell.

    Occupied variants share their value with the owning ``Player`` so that a
    board can live in a plain ``int8`` array.
    """

    FREE = 0
    RED = 1
    BLUE = 2
    RESTRICTED = 3

    @staticmethod
    def from_player(player: Player) -> "CellState":
        return CellState(player.value)

    @property
    def player(self) -> Optional[Player]:
        if self.is_playable():
            return Player(int(self))
        return None

    def is_red(self) -> bool:
        return self == CellState.RED

    def is_blue(self) -> bool:
        return self == CellState.BLUE

    def is_free(self) -> bool:
        return self == CellState.FREE

    def is_restricted(self) -> bool:
        return self == CellState.RESTRICTED

    def is_occupied(self) -> bool:
        return self in (CellState.RED, CellState.BLUE)

    def is_playable(self) -> bool:
        return self.is_occupied()

    def is_opponent_of(self, other: "CellState") -> bool:
        if not (self.is_occupied() and other.is_occupied()):
            return False
        return self != other


@dataclass(frozen=True)
class JumpRecord:
    origin: Tuple[int, int]
    destination: Tuple[int, int]
    mover: Player
    distance: int
    captured_positions: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)

    @property
    def is_clone(self) -> bool:
        return self.distance == 1


# Convenient tuple aliases used across modules
Position = Tuple[int, int]
