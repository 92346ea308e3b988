import numpy as np
import pytest

from termsweeper.engine import Minefield, NUM_COLUMNS, NUM_MINES, NUM_ROWS, OutOfBoundsError
from termsweeper.view import mine_mask, revealed_mask


def brute_force_counts(mines: np.ndarray) -> np.ndarray:
    rows, cols = mines.shape
    counts = np.zeros((rows, cols), dtype=int)
    for r in range(rows):
        for c in range(cols):
            window = mines[max(0, r - 1):r + 2, max(0, c - 1):c + 2]
            counts[r, c] = int(window.sum()) - int(mines[r, c])
    return counts


@pytest.mark.parametrize("seed", range(25))
def test_generated_board_has_exact_distinct_mines(seed):
    board = Minefield(NUM_ROWS, NUM_COLUMNS, NUM_MINES, seed=seed)
    assert len(board.mines) == NUM_MINES
    assert int(mine_mask(board).sum()) == NUM_MINES
    assert not revealed_mask(board).any()


@pytest.mark.parametrize("seed", range(25))
def test_adjacency_matches_brute_force(seed):
    board = Minefield(6, 9, 20, seed=seed)
    mines = mine_mask(board)
    expected = brute_force_counts(mines)
    for r in range(board.rows):
        for c in range(board.columns):
            if not mines[r, c]:
                assert board.grid[r][c].adj_mines == expected[r, c]


def test_same_seed_same_mines():
    a = Minefield(8, 8, 8, seed=42)
    b = Minefield(8, 8, 8, seed=42)
    assert a.mines == b.mines


def test_neighbors_are_clipped_at_edges():
    board = Minefield(8, 8, 0)
    assert sorted(board.neighbors(0, 0)) == [(0, 1), (1, 0), (1, 1)]
    assert len(board.neighbors(3, 3)) == 8
    assert len(board.neighbors(7, 4)) == 5


def test_flood_fill_stops_at_numbered_border():
    # Column 2 is a wall of mines
    board = Minefield.from_mines(5, 5, [(r, 2) for r in range(5)])
    opened = board.reveal(0, 0)
    expected = {(r, c) for r in range(5) for c in (0, 1)}
    assert set(opened) == expected
    assert len(opened) == len(expected)
    shown = revealed_mask(board)
    assert shown[:, :2].all()
    assert not shown[:, 2:].any()


def test_single_corner_mine_is_not_revealed_by_cascade():
    board = Minefield.from_mines(8, 8, [(0, 0)])
    assert board.grid[7][7].adj_mines == 0
    board.reveal(7, 7)
    assert not board.grid[0][0].is_revealed
    assert board.is_complete()


def test_numbered_cell_reveals_only_itself():
    board = Minefield.from_mines(8, 8, [(0, 0)])
    assert board.reveal(1, 1) == [(1, 1)]
    assert int(revealed_mask(board).sum()) == 1


def test_revealing_a_mine_does_not_cascade():
    board = Minefield.from_mines(8, 8, [(0, 0), (4, 4), (7, 7)])
    assert board.reveal(4, 4) == [(4, 4)]
    assert int(revealed_mask(board).sum()) == 1
    assert not board.grid[0][0].is_revealed
    board.reveal_all_mines()
    assert np.array_equal(revealed_mask(board), mine_mask(board))


def test_reveal_is_idempotent():
    board = Minefield.from_mines(8, 8, [(0, 0)])
    board.reveal(1, 1)
    assert board.reveal(1, 1) == []


def test_is_complete_ignores_mine_state():
    board = Minefield.from_mines(4, 4, [(0, 0), (3, 3)])
    assert not board.is_complete()
    for row in board.grid:
        for c in row:
            if not c.is_mine:
                c.is_revealed = True
    assert board.is_complete()
    board.reveal_all_mines()
    assert board.is_complete()
    board.grid[1][2].is_revealed = False
    assert not board.is_complete()
    assert board.hidden_safe_count() == 1


def test_empty_board_completes_on_first_reveal():
    board = Minefield(NUM_ROWS, NUM_COLUMNS, 0)
    board.reveal(3, 4)
    assert board.is_complete()


def test_out_of_bounds_reveal_raises():
    board = Minefield(8, 8, 8, seed=1)
    with pytest.raises(OutOfBoundsError):
        board.reveal(8, 0)
    with pytest.raises(IndexError):
        board.reveal(0, -1)


def test_too_many_mines_rejected():
    with pytest.raises(AssertionError):
        Minefield(2, 2, 4)
