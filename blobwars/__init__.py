"""Blob wars: a two-player territory capture game."""

from . import core, env, errors, features, session
from .config import SessionConfig, load_config
from .core import Board, CellState, JumpRecord, Player, parse_layout
from .env import BlobwarsEnv
from .errors import BlobwarsError, BoardShapeError, ConfigError, LayoutError, UnknownKeyError
from .features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_aux_vector, build_board_tensor, state_to_numpy
from .session import ApplicationState, BoardState, Command, Screen

__all__ = [
    "core",
    "env",
    "errors",
    "features",
    "session",
    "SessionConfig",
    "load_config",
    "Board",
    "CellState",
    "JumpRecord",
    "Player",
    "parse_layout",
    "BlobwarsEnv",
    "BlobwarsError",
    "BoardShapeError",
    "ConfigError",
    "LayoutError",
    "UnknownKeyError",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_aux_vector",
    "build_board_tensor",
    "state_to_numpy",
    "ApplicationState",
    "BoardState",
    "Command",
    "Screen",
]
