from __future__ import annotations

from typing import Dict, Optional, Sequence

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from blobwars.config import SessionConfig
from blobwars.core import Player
from blobwars.features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_aux_vector, build_board_tensor
from blobwars.render import render_board, render_score
from blobwars.session import BoardState, Command

# Commands that act on a running session; BACK and EXIT belong to the screens.
ENV_COMMANDS: Sequence[Command] = (
    Command.LEFT,
    Command.RIGHT,
    Command.UP,
    Command.DOWN,
    Command.SELECT,
    Command.RESET,
)


class BlobwarsEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 2}

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        *,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or SessionConfig()
        self.render_mode = render_mode

        self._state: BoardState = self.config.new_board_state()
        board_shape = (BOARD_CHANNELS, self._state.height, self._state.width)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(len(ENV_COMMANDS))

    @property
    def state(self) -> BoardState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._state = self.config.new_board_state()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        before = self._score_balance()
        self._state.handle_command(ENV_COMMANDS[int(action_index)])
        reward = float(self._score_balance() - before)

        terminated = not (
            self._state.board.has_legal_jump(Player.RED) or self._state.board.has_legal_jump(Player.BLUE)
        )
        truncated = False
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return "\n\n".join(
            [
                render_board(
                    self._state,
                    self.config.selected_symbol,
                    self.config.unselected_symbol,
                    color=False,
                ),
                render_score(self._state, color=False),
            ]
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _score_balance(self) -> int:
        score = self._state.board.score
        return score[Player.RED] - score[Player.BLUE]

    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_tensor(self._state), "aux": build_aux_vector(self._state)}

    def _build_info(self) -> Dict[str, object]:
        return {
            "score": self._state.board.score,
            "current_player": self._state.current_player,
        }
