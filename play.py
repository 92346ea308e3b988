from __future__ import annotations
import argparse
from termsweeper.session import Outcome, Session

CLEAR_SCREEN = '\x1b[2J\x1b[0f'


def write_screen(text: str) -> None:
    print(CLEAR_SCREEN, end='')
    print(text)


def main():
    parser = argparse.ArgumentParser(description='Minesweeper on an 8x8 board with 8 mines.')
    parser.add_argument('--seed', type=int, default=-1, help='Base RNG seed; <0 uses OS entropy (random every run)')
    args = parser.parse_args()

    session = Session(input, write_screen, seed=(None if args.seed < 0 else args.seed))
    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        # stdin closed or interrupted mid-prompt
        print()

    print('Thanks for playing!')
    outcomes = session.outcomes
    wins = sum(1 for o in outcomes if o is Outcome.WON)
    print(f"[play] Rounds: {len(outcomes)}  won: {wins}  lost: {len(outcomes) - wins}")
    if args.seed >= 0:
        print(f"[play] Seed: {args.seed}")


if __name__ == '__main__':
    main()
