from __future__ import annotations
import random
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

Coordinate = Tuple[int, int]

NUM_ROWS = 8
NUM_COLUMNS = 8
NUM_MINES = 8


class OutOfBoundsError(IndexError):
    def __init__(self, row: int, col: int, rows: int, columns: int):
        super().__init__(f"({row},{col}) is outside the {rows}x{columns} board")
        self.row = row
        self.col = col


@dataclass
class Cell:
    is_mine: bool = False
    is_revealed: bool = False
    adj_mines: int = 0


class Minefield:
    """Grid of cells with mines placed up front.

    Coordinates are (row, col). Mines are drawn by rejection sampling as soon
    as the board is built, so every cell already knows its adjacency count
    before the first reveal.
    """

    def __init__(self, rows: int, columns: int, num_mines: int, seed: Optional[int] = None,
                 mines: Optional[Iterable[Coordinate]] = None):
        assert 0 <= num_mines < rows * columns
        self.rows = rows
        self.columns = columns
        self.num_mines = num_mines
        self.rng = random.Random(int(seed)) if seed is not None else random.Random()
        self.grid: List[List[Cell]] = [[Cell() for _ in range(columns)] for _ in range(rows)]
        if mines is None:
            mines = self._draw_mines()
        else:
            mines = set(mines)
            assert len(mines) == num_mines
            for (r, c) in mines:
                if not self.in_bounds(r, c):
                    raise OutOfBoundsError(r, c, rows, columns)
        self._place_mines(mines)

    @classmethod
    def from_mines(cls, rows: int, columns: int, mines: Iterable[Coordinate]) -> "Minefield":
        mines = set(mines)
        return cls(rows, columns, len(mines), mines=mines)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        coords = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if self.in_bounds(nr, nc):
                    coords.append((nr, nc))
        return coords

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.columns)
        return self.grid[row][col]

    def _draw_mines(self) -> List[Coordinate]:
        chosen: List[Coordinate] = []
        taken = set()
        while len(chosen) < self.num_mines:
            coord = (self.rng.randrange(self.rows), self.rng.randrange(self.columns))
            # Redraw on collision
            if coord in taken:
                continue
            taken.add(coord)
            chosen.append(coord)
        return chosen

    def _place_mines(self, mines: Iterable[Coordinate]):
        for (r, c) in mines:
            self.grid[r][c].is_mine = True
        # Compute adjacencies
        for r in range(self.rows):
            for c in range(self.columns):
                if self.grid[r][c].is_mine:
                    continue
                self.grid[r][c].adj_mines = sum(1 for (nr, nc) in self.neighbors(r, c) if self.grid[nr][nc].is_mine)

    @property
    def mines(self) -> FrozenSet[Coordinate]:
        return frozenset((r, c) for r in range(self.rows) for c in range(self.columns) if self.grid[r][c].is_mine)

    def reveal(self, row: int, col: int) -> List[Coordinate]:
        """Reveal a cell and return the coordinates that flipped to revealed.

        A mine only reveals itself. A safe cell with no adjacent mines opens
        its connected zero region together with the numbered cells bordering
        it; mines are never opened by the cascade.
        """
        c = self.cell(row, col)
        if c.is_revealed:
            return []
        c.is_revealed = True
        opened = [(row, col)]
        if c.is_mine or c.adj_mines > 0:
            return opened
        stack = [(row, col)]
        while stack:
            r, cc = stack.pop()
            for (nr, nc) in self.neighbors(r, cc):
                n = self.grid[nr][nc]
                if n.is_revealed or n.is_mine:
                    continue
                n.is_revealed = True
                opened.append((nr, nc))
                if n.adj_mines == 0:
                    stack.append((nr, nc))
        return opened

    def reveal_all_mines(self) -> None:
        for row in self.grid:
            for c in row:
                if c.is_mine:
                    c.is_revealed = True

    def hidden_safe_count(self) -> int:
        return sum(1 for row in self.grid for c in row if not c.is_mine and not c.is_revealed)

    def is_complete(self) -> bool:
        return self.hidden_safe_count() == 0
