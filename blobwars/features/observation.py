from __future__ import annotations

from typing import Tuple

import numpy as np

from blobwars.core import CellState, Player
from blobwars.session import BoardState

CELL_CHANNELS = (CellState.RED, CellState.BLUE, CellState.FREE, CellState.RESTRICTED)
BOARD_CHANNELS = len(CELL_CHANNELS) + 3  # cell one-hot + cursor, origin, destination
AUX_VECTOR_SIZE = 5  # current player one-hot (2) + scores (2) + origin pending (1)

CURSOR_CHANNEL = len(CELL_CHANNELS)
ORIGIN_CHANNEL = CURSOR_CHANNEL + 1
DESTINATION_CHANNEL = CURSOR_CHANNEL + 2


def build_board_tensor(state: BoardState) -> np.ndarray:
    """Return board tensor with shape (BOARD_CHANNELS, height, width) channel-first."""
    grid = state.board.cells()
    tensor = np.zeros((BOARD_CHANNELS, state.height, state.width), dtype=np.float32)
    for channel, cell in enumerate(CELL_CHANNELS):
        tensor[channel] = grid == int(cell)
    if state.height and state.width:
        tensor[(CURSOR_CHANNEL, *state.cursor)] = 1.0
    if state.origin is not None:
        tensor[(ORIGIN_CHANNEL, *state.origin)] = 1.0
    if state.destination is not None:
        tensor[(DESTINATION_CHANNEL, *state.destination)] = 1.0
    return tensor


def build_aux_vector(state: BoardState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[state.current_player.value - 1] = 1.0
    total = max(len(state.board), 1)
    for player in Player:
        aux[1 + player.value] = state.board.score_of(player) / total
    aux[4] = 1.0 if state.origin is not None else 0.0
    return aux


def state_to_numpy(state: BoardState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)
