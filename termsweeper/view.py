from __future__ import annotations
import numpy as np

# What the player is allowed to see, one int per cell:
# - HIDDEN for anything not yet revealed
# - MINE for a revealed mine
# - 0..8 adjacency count for a revealed safe cell

HIDDEN = -2
MINE = -1


def revealed_mask(board) -> np.ndarray:
    return np.array([[c.is_revealed for c in row] for row in board.grid], dtype=bool)


def mine_mask(board) -> np.ndarray:
    return np.array([[c.is_mine for c in row] for row in board.grid], dtype=bool)


def board_view(board) -> np.ndarray:
    counts = np.array([[c.adj_mines for c in row] for row in board.grid], dtype=np.int8)
    view = np.full((board.rows, board.columns), HIDDEN, dtype=np.int8)
    shown = revealed_mask(board)
    mines = mine_mask(board)
    view[shown & ~mines] = counts[shown & ~mines]
    view[shown & mines] = MINE
    return view
