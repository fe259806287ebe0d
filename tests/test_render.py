from blobwars import ApplicationState, Command, Player, SessionConfig
from blobwars.core import parse_layout
from blobwars.render import LOGO, RESET, render_application, render_board, render_score
from blobwars.session import BoardState


def make_state() -> BoardState:
    return BoardState(parse_layout(["R.", "#B"]), Player.RED)


def test_render_board_colored_symbols() -> None:
    state = make_state()
    state.right()

    lines = render_board(state).splitlines()

    assert lines[0] == f"\x1b[31mO{RESET} V"
    assert lines[1] == f"\x1b[38;2;255;165;0mO{RESET} \x1b[34mO{RESET}"


def test_render_board_plain() -> None:
    state = make_state()

    assert render_board(state, color=False).splitlines() == ["[R] . ", " #  B "]


def test_render_score_marks_current_player() -> None:
    text = render_score(make_state(), color=False)

    assert text.splitlines() == ["Score", "> Red: 1", "  Blue: 1"]


def test_render_application_screens() -> None:
    app = ApplicationState(SessionConfig(color=False))
    assert render_application(app) == LOGO

    app.handle_command(Command.SELECT)
    text = render_application(app)
    assert "Score" in text and "cursor=(0, 0)" in text

    app.handle_command(Command.EXIT)
    assert render_application(app) == ""
