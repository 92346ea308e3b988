from __future__ import annotations
import random
import re
from enum import Enum
from typing import Callable, List, Optional

from .engine import Coordinate, Minefield, NUM_COLUMNS, NUM_MINES, NUM_ROWS, OutOfBoundsError
from .render import render

MOVE_PROMPT = 'Enter the row,column where you would like to move next:\n'
LOST_PROMPT = 'You have lost! Play again? (y or n)\n'
WON_PROMPT = 'You won! Play again? (y or n)\n'

_MOVE_RE = re.compile(r'^\s*(\d+)\s*,\s*(\d+)\s*$')
_REPLAY_RE = re.compile(r'^\s*([yn])\s*$', re.IGNORECASE)


class Outcome(Enum):
    IN_PROGRESS = 'in_progress'
    LOST = 'lost'
    WON = 'won'


class InvalidMoveFormat(ValueError):
    pass


class InvalidReplayAnswer(ValueError):
    pass


def parse_move(text: str, rows: int, columns: int) -> Coordinate:
    m = _MOVE_RE.match(text)
    if m is None:
        raise InvalidMoveFormat(f"'{text}' is not of the form row,column")
    row, col = int(m.group(1)), int(m.group(2))
    if not (0 <= row < rows and 0 <= col < columns):
        raise OutOfBoundsError(row, col, rows, columns)
    return row, col


def parse_replay_answer(text: str) -> bool:
    m = _REPLAY_RE.match(text)
    if m is None:
        raise InvalidReplayAnswer(f"'{text}' is not y or n")
    return m.group(1).lower() == 'y'


class Session:
    """Runs rounds of the game against a line prompt and a display sink.

    ``ask_line(prompt)`` must return one line of player input and
    ``write_screen(text)`` shows a block of text. Boards for each round are
    seeded from the session RNG, so a seeded session replays identically.
    """

    def __init__(self, ask_line: Callable[[str], str], write_screen: Callable[[str], None],
                 rows: int = NUM_ROWS, columns: int = NUM_COLUMNS, num_mines: int = NUM_MINES,
                 seed: Optional[int] = None):
        self.ask_line = ask_line
        self.write_screen = write_screen
        self.rows = rows
        self.columns = columns
        self.num_mines = num_mines
        self.rng = random.Random(int(seed)) if seed is not None else random.Random()
        self.outcomes: List[Outcome] = []

    def new_board(self) -> Minefield:
        return Minefield(self.rows, self.columns, self.num_mines, seed=self.rng.getrandbits(32))

    def ask_move(self, board: Minefield) -> Coordinate:
        prompt = MOVE_PROMPT
        while True:
            answer = self.ask_line(prompt)
            try:
                return parse_move(answer, board.rows, board.columns)
            except (InvalidMoveFormat, OutOfBoundsError) as e:
                prompt = f'{e}. {MOVE_PROMPT}'

    def ask_replay(self, outcome: Outcome) -> bool:
        question = LOST_PROMPT if outcome is Outcome.LOST else WON_PROMPT
        prompt = question
        while True:
            answer = self.ask_line(prompt)
            try:
                return parse_replay_answer(answer)
            except InvalidReplayAnswer as e:
                prompt = f'{e}. {question}'

    def play_turn(self, board: Minefield) -> Outcome:
        self.write_screen(render(board))
        row, col = self.ask_move(board)
        if board.cell(row, col).is_mine:
            board.reveal_all_mines()
            return Outcome.LOST
        board.reveal(row, col)
        if board.is_complete():
            return Outcome.WON
        return Outcome.IN_PROGRESS

    def play_round(self, board: Optional[Minefield] = None) -> Outcome:
        if board is None:
            board = self.new_board()
        outcome = Outcome.IN_PROGRESS
        while outcome is Outcome.IN_PROGRESS:
            outcome = self.play_turn(board)
        # Final board: every mine on a loss, fully cleared on a win
        self.write_screen(render(board))
        return outcome

    def run(self) -> List[Outcome]:
        while True:
            outcome = self.play_round()
            self.outcomes.append(outcome)
            if not self.ask_replay(outcome):
                return self.outcomes
