from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from blobwars.errors import BoardShapeError

from .rules import blob, chebyshev_distance, legal_destinations
from .state import CellState, JumpRecord, Player, Position

logger = logging.getLogger(__name__)

CellArray = NDArray[np.int8]

_VALID_CELLS = np.array([int(state) for state in CellState], dtype=np.int8)


class Board:
    """Rectangular blob wars grid.

    Cells are stored row-major in a flat ``int8`` array holding ``CellState``
    values. The score is kept in step with every mutation and is never
    recomputed after construction.
    """

    def __init__(self, height: int, width: int, cells: CellArray) -> None:
        # Copied so the board owns its storage outright.
        cells = np.array(cells, dtype=np.int8, copy=True)
        if height < 0 or width < 0:
            raise BoardShapeError(f"Board dimensions must be non-negative, got {height}x{width}.")
        if cells.ndim != 1 or cells.shape[0] != height * width:
            raise BoardShapeError(
                f"Expected {height * width} cells for a {height}x{width} board, got {cells.size}."
            )
        if not np.isin(cells, _VALID_CELLS).all():
            raise BoardShapeError("Cells must only contain CellState values.")

        self._height = height
        self._width = width
        self._cells = cells
        self._score = np.zeros(len(Player), dtype=np.int64)
        for player in Player:
            self._score[player.value - 1] = np.count_nonzero(cells == player.value)
        self.last_jump: Optional[JumpRecord] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def free(cls, height: int, width: int) -> "Board":
        return cls(height, width, np.zeros(max(height, 0) * max(width, 0), dtype=np.int8))

    @classmethod
    def from_cells(cls, height: int, width: int, cells: Iterable[CellState]) -> "Board":
        array = np.fromiter((int(cell) for cell in cells), dtype=np.int8)
        return cls(height, width, array)

    def copy(self) -> "Board":
        clone = Board(self._height, self._width, self._cells.copy())
        clone.last_jump = self.last_jump
        return clone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._height, self._width)

    @property
    def score(self) -> Dict[Player, int]:
        return {player: int(self._score[player.value - 1]) for player in Player}

    def score_of(self, player: Player) -> int:
        return int(self._score[player.value - 1])

    def count(self, player: Player) -> int:
        """Count ``player`` pieces by scanning the grid."""
        return int(np.count_nonzero(self._cells == player.value))

    def __len__(self) -> int:
        return int(self._cells.shape[0])

    def is_empty(self) -> bool:
        return len(self) == 0

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def get(self, row: int, col: int) -> Optional[CellState]:
        if not self.contains(row, col):
            return None
        return CellState(int(self._cells[row * self._width + col]))

    def __iter__(self) -> Iterator[CellState]:
        for value in self._cells:
            yield CellState(int(value))

    def cells(self) -> CellArray:
        """Read-only 2-D view of the grid."""
        view = self._cells.reshape(self._height, self._width).view()
        view.flags.writeable = False
        return view

    def jump_distance(self, origin: Position, destination: Position) -> Optional[int]:
        if not (self.contains(*origin) and self.contains(*destination)):
            return None
        distance = chebyshev_distance(origin, destination)
        if distance not in (1, 2):
            return None
        return distance

    def legal_jumps(self, player: Player) -> List[Tuple[Position, Position]]:
        jumps: List[Tuple[Position, Position]] = []
        for flat_index in np.flatnonzero(self._cells == player.value):
            origin = divmod(int(flat_index), self._width)
            for destination in legal_destinations(self, origin):
                jumps.append((origin, destination))
        return jumps

    def has_legal_jump(self, player: Player) -> bool:
        for flat_index in np.flatnonzero(self._cells == player.value):
            origin = divmod(int(flat_index), self._width)
            if legal_destinations(self, origin):
                return True
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def jump(self, origin: Position, destination: Position) -> bool:
        """Move a blob from ``origin`` to ``destination``.

        A distance of 1 clones the blob, a distance of 2 relocates it. The
        landing blob then captures its opponent neighbours. Returns ``False``
        and leaves the board untouched when the move is illegal.
        """
        distance = self.jump_distance(origin, destination)
        if distance is None:
            logger.debug("Rejected jump %s -> %s: bad distance", origin, destination)
            return False

        mover = self.get(*origin).player
        if mover is None:
            logger.debug("Rejected jump %s -> %s: origin is not playable", origin, destination)
            return False

        if not self.get(*destination).is_free():
            logger.debug("Rejected jump %s -> %s: destination is not free", origin, destination)
            return False

        self._set(destination, CellState.from_player(mover))
        if distance == 2:
            self._set(origin, CellState.FREE)
        else:
            self._score[mover.value - 1] += 1

        captured = blob(self, *destination)
        self.last_jump = JumpRecord(
            origin=tuple(origin),
            destination=tuple(destination),
            mover=mover,
            distance=distance,
            captured_positions=captured,
        )
        logger.debug(
            "%s jumped %s -> %s (distance %d), captured %d",
            mover.name,
            origin,
            destination,
            distance,
            len(captured),
        )
        return True

    def _set(self, position: Position, state: CellState) -> None:
        row, col = position
        self._cells[row * self._width + col] = int(state)

    def flip_opponents(self, rows: slice, cols: slice, mover: Player) -> Tuple[Position, ...]:
        """Turn every opponent blob inside the window to ``mover``.

        The score of both players is adjusted. Returns the converted positions
        in row-major order.
        """
        opponent = -mover
        view = self._cells.reshape(self._height, self._width)[rows, cols]
        mask = view == CellState.from_player(opponent).value
        count = int(np.count_nonzero(mask))
        if count == 0:
            return ()

        row_offset = rows.start or 0
        col_offset = cols.start or 0
        captured = tuple((int(r) + row_offset, int(c) + col_offset) for r, c in np.argwhere(mask))
        view[mask] = CellState.from_player(mover).value
        self._score[mover.value - 1] += count
        self._score[opponent.value - 1] -= count
        return captured

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.shape == other.shape
            and np.array_equal(self._cells, other._cells)
            and np.array_equal(self._score, other._score)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        symbols = {0: ".", 1: "R", 2: "B", 3: "#"}
        grid = self._cells.reshape(self._height, self._width)
        board_str = "\n".join("".join(symbols[int(cell)] for cell in row) for row in grid)
        return (
            f"Board({self._height}x{self._width}, red={self.score_of(Player.RED)}, "
            f"blue={self.score_of(Player.BLUE)})\n"
            f"{board_str}"
        )
