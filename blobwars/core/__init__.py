"""Core game logic for blob wars."""

from .state import CellState, JumpRecord, Player, Position
from .board import Board
from .rules import (
    CAPTURE_RADIUS,
    MAX_JUMP_DISTANCE,
    blob,
    chebyshev_distance,
    legal_destinations,
    neighbor_window,
)
from .layouts import (
    DEFAULT_FIRST_PLAYER,
    DEFAULT_LAYOUT,
    default_board,
    format_layout,
    parse_layout,
)

__all__ = [
    "Board",
    "CellState",
    "JumpRecord",
    "Player",
    "Position",
    "CAPTURE_RADIUS",
    "MAX_JUMP_DISTANCE",
    "blob",
    "chebyshev_distance",
    "legal_destinations",
    "neighbor_window",
    "DEFAULT_FIRST_PLAYER",
    "DEFAULT_LAYOUT",
    "default_board",
    "format_layout",
    "parse_layout",
]
