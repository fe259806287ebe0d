from __future__ import annotations

import logging
from typing import Optional

from blobwars.core import Board, Player, Position
from blobwars.errors import BoardShapeError

from .commands import DIRECTION_OFFSETS, Command

logger = logging.getLogger(__name__)


class BoardState:
    """Turn controller of a game session.

    A move is picked in two steps: the cursor is moved onto one of the
    current player's blobs and confirmed (origin), then onto a free cell and
    confirmed (destination). A third confirmation attempts the jump and clears
    both picks whatever the outcome.
    """

    def __init__(self, board: Board, current_player: Player, *, always_advance_turn: bool = True) -> None:
        if board.is_empty():
            raise BoardShapeError("A session needs a board with at least one cell.")
        self._board = board
        self._current_player = current_player
        self._cursor: Position = (0, 0)
        self._origin: Optional[Position] = None
        self._destination: Optional[Position] = None
        self.always_advance_turn = always_advance_turn

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def origin(self) -> Optional[Position]:
        return self._origin

    @property
    def destination(self) -> Optional[Position]:
        return self._destination

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def width(self) -> int:
        return self._board.width

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------
    def move_cursor(self, direction: Command) -> None:
        d_row, d_col = DIRECTION_OFFSETS[direction]
        row, col = self._cursor[0] + d_row, self._cursor[1] + d_col
        if self._board.contains(row, col):
            self._cursor = (row, col)

    def left(self) -> None:
        self.move_cursor(Command.LEFT)

    def right(self) -> None:
        self.move_cursor(Command.RIGHT)

    def up(self) -> None:
        self.move_cursor(Command.UP)

    def down(self) -> None:
        self.move_cursor(Command.DOWN)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def confirm(self) -> bool:
        """Pick the cell under the cursor, or play the pending move.

        Returns ``True`` only when a jump was attempted and applied.
        """
        cell = self._board.get(*self._cursor)

        if self._origin is None:
            if cell is not None and cell.player == self._current_player:
                self._origin = self._cursor
            return False

        if self._destination is None:
            if cell is not None and cell.is_free():
                self._destination = self._cursor
            return False

        applied = self._board.jump(self._origin, self._destination)
        if not applied:
            logger.info(
                "%s could not jump %s -> %s", self._current_player.name, self._origin, self._destination
            )
        self._origin = None
        self._destination = None
        return applied

    def cancel(self) -> None:
        if self._destination is not None:
            self._destination = None
        else:
            self._origin = None

    def advance_turn(self) -> None:
        self._current_player = -self._current_player

    def handle_command(self, command: Command) -> None:
        if command.is_direction:
            self.move_cursor(command)
        elif command is Command.RESET:
            self.cancel()
        elif command is Command.SELECT:
            applied = self.confirm()
            if applied or self.always_advance_turn:
                self.advance_turn()
        # BACK and EXIT switch screens and are handled by the application.

    def __repr__(self) -> str:
        return (
            f"BoardState(player={self._current_player.name}, cursor={self._cursor}, "
            f"origin={self._origin}, destination={self._destination})"
        )
