from __future__ import annotations
from .view import HIDDEN, MINE, board_view

MINE_GLYPH = '*'
CELL_WIDTH = 7
ROW_LABEL_PADDING = '  '


def render(board) -> str:
    """Draw the board as a text grid.

    Hidden cells print their own "row,col" so the player can read off the
    move to type. Revealed cells print the mine glyph or the adjacency count.
    """
    view = board_view(board)
    divider = ROW_LABEL_PADDING + '-' * (CELL_WIDTH * board.columns)

    lines = [ROW_LABEL_PADDING + ''.join(f'  {col}    ' for col in range(board.columns)).rstrip(), divider]
    for r in range(board.rows):
        cells = []
        for c in range(board.columns):
            value = int(view[r, c])
            if value == HIDDEN:
                cells.append(f' {r},{c}  |')
            elif value == MINE:
                cells.append(f'  {MINE_GLYPH}   |')
            else:
                cells.append(f'  {value}   |')
        lines.append(f'{r}|' + ''.join(cells))
        lines.append(divider)
    return '\n'.join(lines)
