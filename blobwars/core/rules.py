from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from .state import CellState, Position

if TYPE_CHECKING:
    from .board import Board

CAPTURE_RADIUS = 1
MAX_JUMP_DISTANCE = 2

Window = Tuple[slice, slice]


def chebyshev_distance(a: Position, b: Position) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def neighbor_window(row: int, col: int, radius: int, height: int, width: int) -> Optional[Window]:
    """Return the slices of the square of ``radius`` around ``(row, col)``.

    The square is clamped to the grid on each side independently, so an
    edge only shortens the span on its own side. ``None`` is returned when the
    center lies outside the grid.
    """
    if not (0 <= row < height and 0 <= col < width):
        return None
    rows = slice(max(row - radius, 0), min(row + radius + 1, height))
    cols = slice(max(col - radius, 0), min(col + radius + 1, width))
    return rows, cols


def blob(board: "Board", row: int, col: int) -> Tuple[Position, ...]:
    """Convert the opponents around the blob standing at ``(row, col)``.

    Only the immediate neighbourhood is affected; converted cells do not
    spread further. Returns the captured positions in row-major order.
    """
    centre = board.get(row, col)
    if centre is None or not centre.is_playable():
        return ()
    window = neighbor_window(row, col, CAPTURE_RADIUS, board.height, board.width)
    if window is None:
        return ()

    rows, cols = window
    return board.flip_opponents(rows, cols, centre.player)


def legal_destinations(board: "Board", origin: Position) -> List[Position]:
    """Every cell a blob at ``origin`` may clone or jump to."""
    cell = board.get(*origin)
    if cell is None or not cell.is_playable():
        return []
    row, col = origin
    rows, cols = neighbor_window(row, col, MAX_JUMP_DISTANCE, board.height, board.width)
    view = board.cells()[rows, cols]
    return [
        (int(r) + rows.start, int(c) + cols.start)
        for r, c in np.argwhere(view == int(CellState.FREE))
    ]
