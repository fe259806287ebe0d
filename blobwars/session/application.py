from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from blobwars.config import SessionConfig

from .board_state import BoardState
from .commands import Command

logger = logging.getLogger(__name__)


class Screen(Enum):
    LOGO = "logo"
    BOARD = "board"
    EXIT = "exit"


class ApplicationState:
    """Top-level screen state machine.

    The logo screen is shown first; selecting on it starts a new session built
    from ``config``. Going back from a session discards it.
    """

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        self.config = config or SessionConfig()
        self.screen = Screen.LOGO
        self.board_state: Optional[BoardState] = None

    def has_exited(self) -> bool:
        return self.screen == Screen.EXIT

    def handle_command(self, command: Command) -> None:
        if command is Command.EXIT:
            self._switch(Screen.EXIT)
        elif command is Command.BACK:
            if self.screen == Screen.BOARD:
                self._switch(Screen.LOGO)
            elif self.screen == Screen.LOGO:
                self._switch(Screen.EXIT)
        elif self.screen == Screen.BOARD:
            self.board_state.handle_command(command)
        elif self.screen == Screen.LOGO and command is Command.SELECT:
            self.board_state = self.config.new_board_state()
            self._switch(Screen.BOARD)

    def _switch(self, screen: Screen) -> None:
        if screen != Screen.BOARD:
            self.board_state = None
        logger.debug("Screen %s -> %s", self.screen.value, screen.value)
        self.screen = screen
