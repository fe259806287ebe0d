from blobwars.core import CellState, Player


def test_opponent_is_involutive() -> None:
    assert -Player.RED == Player.BLUE
    assert -Player.BLUE == Player.RED
    for player in Player:
        assert -(-player) == player
        assert player.opponent == -player


def test_cell_predicates() -> None:
    assert CellState.FREE.is_free()
    assert CellState.RESTRICTED.is_restricted()
    assert CellState.RED.is_red() and CellState.BLUE.is_blue()

    for cell in (CellState.RED, CellState.BLUE):
        assert cell.is_occupied()
        assert cell.is_playable()
    for cell in (CellState.FREE, CellState.RESTRICTED):
        assert not cell.is_occupied()
        assert not cell.is_playable()


def test_is_opponent_of() -> None:
    assert CellState.RED.is_opponent_of(CellState.BLUE)
    assert CellState.BLUE.is_opponent_of(CellState.RED)
    assert not CellState.RED.is_opponent_of(CellState.RED)
    for other in CellState:
        assert not CellState.FREE.is_opponent_of(other)
        assert not CellState.RESTRICTED.is_opponent_of(other)
        assert not other.is_opponent_of(CellState.FREE)
        assert not other.is_opponent_of(CellState.RESTRICTED)


def test_player_cell_conversion() -> None:
    for player in Player:
        cell = CellState.from_player(player)
        assert cell.is_playable()
        assert cell.player == player
    assert CellState.FREE.player is None
    assert CellState.RESTRICTED.player is None


def test_players_and_cells_are_distinct_keys() -> None:
    assert Player.RED != CellState.RED
    assert Player.BLUE != CellState.BLUE

    by_player = {Player.RED: "red"}
    assert CellState.RED not in by_player
    assert CellState.from_player(Player.RED) == CellState.RED
