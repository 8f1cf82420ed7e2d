"""
Solve a Boggle board from the command line.

Usage:
    python -m boggle.solve [--letters TEXT] [--size 4|5] [--dictionary PATH]

Examples:
    python -m boggle.solve --dictionary words.txt
    python -m boggle.solve --letters SERSPATGLINESERS --dictionary words.txt
    python -m boggle.solve --size 5 --seed 7 --max-results 20

Without --letters a board is rolled from the standard dice.
"""
import argparse
import logging
import sys

import numpy as np

from boggle.board import Board, BoardConfigError, BoardSize
from boggle.dictionary import load_trie
from boggle.game import GameRound, score
from boggle.settings import settings

logger = logging.getLogger("boggle")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find every word on a Boggle board")
    parser.add_argument("--letters", "-l", type=str, default=None,
                        help="Board letters, row-major (16 for 4x4, 25 for 5x5)")
    parser.add_argument("--size", type=int, choices=[4, 5], default=settings.BOARD_SIZE,
                        help=f"Board size (default: {settings.BOARD_SIZE})")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help="Word list with one word per line (default: $DICTIONARY_PATH, "
                             "else dictionary.txt at the root of a source checkout)")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Random seed for rolling the board")
    parser.add_argument("--max-results", type=int, default=settings.MAX_RESULTS,
                        help="Print at most this many words (0 = all)")
    parser.add_argument("--verbose", "-v", action="store_true", default=settings.DEBUG,
                        help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    size = BoardSize(args.size)
    try:
        if args.letters is not None:
            board = Board.from_config(args.letters, size)
        else:
            board = Board.roll(size, np.random.default_rng(args.seed))
    except BoardConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        trie = load_trie(args.dictionary)
    except OSError as e:
        print(f"Error: could not read dictionary {args.dictionary}: {e}", file=sys.stderr)
        return 1

    game = GameRound(board, trie)
    found = game.computer_turn()

    for row in board.rows():
        print(" ".join(row))
    print()

    words = sorted((d.word for d in found), key=lambda w: (-len(w), w))
    if args.max_results > 0:
        words = words[:args.max_results]
    for w in words:
        print(f"{w:<16} {score(w)}")
    print(f"\n{len(found)} words, {game.computer_score} points")
    return 0


if __name__ == "__main__":
    sys.exit(main())
