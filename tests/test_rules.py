import pytest

from blobwars.core import Board, CellState, Player, blob, legal_destinations, neighbor_window, parse_layout


def window_cells(row: int, col: int, height: int = 5, width: int = 5):
    window = neighbor_window(row, col, 1, height, width)
    if window is None:
        return set()
    rows, cols = window
    return {(r, c) for r in range(rows.start, rows.stop) for c in range(cols.start, cols.stop)}


def square(rows, cols):
    return {(r, c) for r in rows for c in cols}


@pytest.mark.parametrize(
    "centre, expected",
    [
        ((2, 2), square(range(1, 4), range(1, 4))),
        ((0, 2), square(range(0, 2), range(1, 4))),
        ((4, 2), square(range(3, 5), range(1, 4))),
        ((2, 0), square(range(1, 4), range(0, 2))),
        ((2, 4), square(range(1, 4), range(3, 5))),
        ((0, 0), square(range(0, 2), range(0, 2))),
        ((4, 0), square(range(3, 5), range(0, 2))),
        ((0, 4), square(range(0, 2), range(3, 5))),
        ((4, 4), square(range(3, 5), range(3, 5))),
    ],
)
def test_neighbor_window_clamps_to_grid(centre, expected) -> None:
    assert window_cells(*centre) == expected


@pytest.mark.parametrize("centre", [(0, 5), (5, 0), (-1, 2), (2, -1)])
def test_neighbor_window_out_of_bounds_is_empty(centre) -> None:
    assert neighbor_window(*centre, 1, 5, 5) is None


def test_neighbor_window_on_non_square_grid() -> None:
    assert window_cells(0, 6, height=2, width=7) == square(range(0, 2), range(5, 7))
    assert neighbor_window(1, 1, 2, 3, 3) == (slice(0, 3), slice(0, 3))


def test_blob_converts_every_adjacent_opponent() -> None:
    board = parse_layout(
        (
            "BBB..",
            "BRB..",
            "BBB..",
            ".....",
            ".....",
        )
    )

    captured = blob(board, 1, 1)

    assert len(captured) == 8
    assert board.score == {Player.RED: 9, Player.BLUE: 0}


def test_blob_is_single_layer() -> None:
    board = parse_layout(
        (
            "R.B..",
            ".B...",
            "..B..",
            ".....",
            ".....",
        )
    )

    captured = blob(board, 0, 0)

    assert captured == ((1, 1),)
    assert board.get(0, 2) == CellState.BLUE
    assert board.get(2, 2) == CellState.BLUE
    assert board.score == {Player.RED: 2, Player.BLUE: 2}


def test_blob_ignores_free_restricted_and_own_cells() -> None:
    board = parse_layout(("#R.", "RB#", ".R."))
    before = board.copy()

    captured = blob(board, 1, 1)

    assert set(captured) == {(0, 1), (1, 0), (2, 1)}
    assert board.get(0, 0) == CellState.RESTRICTED
    assert board.get(1, 2) == CellState.RESTRICTED
    assert board.get(0, 2) == CellState.FREE
    assert board.score_of(Player.BLUE) == before.score_of(Player.BLUE) + 3
    assert board.score_of(Player.RED) == 0


def test_blob_noop_on_empty_or_outside_centre() -> None:
    board = parse_layout(("RB", ".."))
    before = board.copy()

    assert blob(board, 1, 0) == ()
    assert blob(board, 3, 3) == ()
    assert board == before


def test_legal_destinations() -> None:
    board = parse_layout(
        (
            "R.#",
            "B..",
            "...",
        )
    )

    assert legal_destinations(board, (0, 0)) == [(0, 1), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)]
    assert legal_destinations(board, (0, 1)) == []
    assert legal_destinations(Board.free(2, 2), (5, 5)) == []
