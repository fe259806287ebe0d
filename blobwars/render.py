"""Plain-text rendering of the application screens."""

from __future__ import annotations

from typing import Dict, List, Optional

from blobwars.config import SessionConfig
from blobwars.core import CellState, Player
from blobwars.session import ApplicationState, BoardState, Screen

RESET = "\x1b[0m"
CELL_COLORS: Dict[CellState, str] = {
    CellState.RED: "\x1b[31m",
    CellState.BLUE: "\x1b[34m",
    CellState.FREE: "",
    CellState.RESTRICTED: "\x1b[38;2;255;165;0m",
}
PLAYER_COLORS: Dict[Player, str] = {
    Player.RED: CELL_COLORS[CellState.RED],
    Player.BLUE: CELL_COLORS[CellState.BLUE],
}

LOGO = "\n".join(
    [
        r" ____  _       _      __        __             ",
        r"| __ )| | ___ | |__   \ \      / /_ _ _ __ ___ ",
        r"|  _ \| |/ _ \| '_ \   \ \ /\ / / _` | '__/ __|",
        r"| |_) | | (_) | |_) |   \ V  V / (_| | |  \__ \ ",
        r"|____/|_|\___/|_.__/     \_/\_/ \__,_|_|  |___/",
        "",
        "Press enter to play, esc to quit.",
    ]
)

CREDITS = "\n".join(
    [
        "Credits",
        "blobwars is free software licensed under GPL-3.0-or-later.",
        "This program comes with ABSOLUTELY NO WARRANTY.",
    ]
)

HELP = "Keys: w/a/s/d or arrows move, enter selects, x cancels, esc goes back, q quits."


def _paint(text: str, code: str, color: bool) -> str:
    if not color or not code:
        return text
    return f"{code}{text}{RESET}"


def render_board(
    state: BoardState,
    selected_symbol: str = "V",
    unselected_symbol: str = "O",
    *,
    color: bool = True,
) -> str:
    """One line per row, the cursor cell drawn with ``selected_symbol``.

    Without color, cells show their layout content instead (``R``, ``B``,
    ``.``, ``#``) and the cursor is bracketed.
    """
    plain = {CellState.RED: "R", CellState.BLUE: "B", CellState.FREE: ".", CellState.RESTRICTED: "#"}
    lines: List[str] = []
    cells = iter(state.board)
    for row in range(state.height):
        tokens = []
        for col in range(state.width):
            cell = next(cells)
            selected = (row, col) == state.cursor
            if color:
                symbol = selected_symbol if selected else unselected_symbol
                tokens.append(_paint(symbol, CELL_COLORS[cell], color))
            else:
                tokens.append(f"[{plain[cell]}]" if selected else f" {plain[cell]} ")
        lines.append((" " if color else "").join(tokens))
    return "\n".join(lines)


def render_score(state: BoardState, *, color: bool = True) -> str:
    score = state.board.score
    lines = ["Score"]
    for player in Player:
        marker = ">" if player == state.current_player else " "
        lines.append(f"{marker} {_paint(player.name.title(), PLAYER_COLORS[player], color)}: {score[player]}")
    return "\n".join(lines)


def render_selection(state: BoardState) -> str:
    parts = [f"cursor={state.cursor}"]
    if state.origin is not None:
        parts.append(f"from={state.origin}")
    if state.destination is not None:
        parts.append(f"to={state.destination}")
    return " ".join(parts)


def render_application(app: ApplicationState, config: Optional[SessionConfig] = None) -> str:
    config = config or app.config
    if app.screen == Screen.LOGO:
        return LOGO
    if app.screen == Screen.EXIT:
        return ""
    state = app.board_state
    return "\n\n".join(
        [
            render_board(
                state,
                config.selected_symbol,
                config.unselected_symbol,
                color=config.color,
            ),
            render_score(state, color=config.color),
            render_selection(state),
            CREDITS,
            HELP,
        ]
    )
