from __future__ import annotations

from typing import Dict, List, Sequence

from blobwars.errors import LayoutError

from .board import Board
from .state import CellState, Player

LAYOUT_SYMBOLS: Dict[str, CellState] = {
    ".": CellState.FREE,
    "#": CellState.RESTRICTED,
    "R": CellState.RED,
    "B": CellState.BLUE,
}
SYMBOL_FOR_STATE: Dict[CellState, str] = {state: symbol for symbol, state in LAYOUT_SYMBOLS.items()}

DEFAULT_LAYOUT: Sequence[str] = (
    "R.......",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
    ".......B",
)
DEFAULT_FIRST_PLAYER = Player.BLUE


def parse_layout(rows: Sequence[str]) -> Board:
    """Build a board from text rows (``R``/``B`` blobs, ``.`` free, ``#`` restricted)."""
    rows = [row.strip() for row in rows]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if height == 0 or width == 0:
        raise LayoutError("A layout needs at least one row and one column.")

    cells: List[CellState] = []
    for index, row in enumerate(rows):
        if len(row) != width:
            raise LayoutError(f"Row {index} has {len(row)} cells, expected {width}.")
        for symbol in row:
            state = LAYOUT_SYMBOLS.get(symbol.upper())
            if state is None:
                raise LayoutError(f"Unknown layout symbol {symbol!r} in row {index}.")
            cells.append(state)
    return Board.from_cells(height, width, cells)


def format_layout(board: Board) -> List[str]:
    symbols = [SYMBOL_FOR_STATE[cell] for cell in board]
    return ["".join(symbols[r * board.width : (r + 1) * board.width]) for r in range(board.height)]


def default_board() -> Board:
    return parse_layout(DEFAULT_LAYOUT)
