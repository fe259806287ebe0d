from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

import yaml

from blobwars.core import DEFAULT_FIRST_PLAYER, DEFAULT_LAYOUT, Board, Player, parse_layout
from blobwars.errors import ConfigError, LayoutError

if TYPE_CHECKING:
    from blobwars.session.board_state import BoardState

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    layout: List[str] = field(default_factory=lambda: list(DEFAULT_LAYOUT))
    first_player: Player = DEFAULT_FIRST_PLAYER
    always_advance_turn: bool = True
    selected_symbol: str = "V"
    unselected_symbol: str = "O"
    color: bool = True

    def new_board(self) -> Board:
        return parse_layout(self.layout)

    def new_board_state(self) -> "BoardState":
        from blobwars.session.board_state import BoardState

        return BoardState(
            self.new_board(),
            self.first_player,
            always_advance_turn=self.always_advance_turn,
        )


def _parse_player(value: object) -> Player:
    if isinstance(value, Player):
        return value
    if isinstance(value, str):
        try:
            return Player[value.strip().upper()]
        except KeyError:
            pass
    raise ConfigError(f"Unknown player {value!r}; expected 'red' or 'blue'.")


def config_from_dict(data: dict) -> SessionConfig:
    known = {f.name for f in fields(SessionConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    cfg = SessionConfig()
    if "layout" in data:
        layout = data["layout"]
        if not isinstance(layout, list) or not all(isinstance(row, str) for row in layout):
            raise ConfigError("layout must be a list of strings.")
        try:
            parse_layout(layout)
        except LayoutError as exc:
            raise ConfigError(f"Invalid layout: {exc}") from exc
        cfg.layout = list(layout)
    if "first_player" in data:
        cfg.first_player = _parse_player(data["first_player"])
    for key in ("always_advance_turn", "color"):
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be a boolean.")
            setattr(cfg, key, data[key])
    for key in ("selected_symbol", "unselected_symbol"):
        if key in data:
            if not isinstance(data[key], str) or len(data[key]) != 1:
                raise ConfigError(f"{key} must be a single character.")
            setattr(cfg, key, data[key])
    return cfg


def load_config(path: Optional[Union[str, Path]]) -> SessionConfig:
    if not path:
        return SessionConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.info("Config %s not found, using defaults", cfg_path)
        return SessionConfig()
    try:
        data = yaml.safe_load(cfg_path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping at the top level.")
    logger.debug("Loaded config from %s", cfg_path)
    return config_from_dict(data)
