"""CLI entry point for the daily word grid."""

from __future__ import annotations

import argparse
import logging
import sys

from daily_boggle.constants import GAME_SECONDS
from daily_boggle.dictionary import DictionaryIndex, load_default_dictionary, load_dictionary
from daily_boggle.display import print_grid, print_solutions, print_summary
from daily_boggle.grid import Grid
from daily_boggle.puzzle import (
    GameSession,
    Puzzle,
    SessionClosedError,
    parse_puzzle_date,
    puzzle_id_for,
    today_puzzle_id,
)
from daily_boggle.scoring import SubmissionStatus
from daily_boggle.solver import find_path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Daily Boggle: generate, solve and play the puzzle of the day",
    )
    which = parser.add_mutually_exclusive_group()
    which.add_argument(
        "--date", "-d",
        type=str,
        help="Puzzle date as YYYY-MM-DD (default: today in Paris)",
    )
    which.add_argument(
        "--puzzle-id",
        type=str,
        help='Explicit puzzle id, e.g. "2024-01-15-v1"',
    )
    which.add_argument(
        "--grid", "-g",
        type=str,
        help='Solve a given grid instead, e.g. "b,d,a,qu,qu,e,r,i,..." (16 tiles)',
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        help="Word list, one word per line (default: data/words.txt)",
    )
    parser.add_argument(
        "--play", "-p",
        action="store_true",
        help="Play the puzzle interactively",
    )
    parser.add_argument(
        "--time-limit", "-t",
        type=float,
        default=GAME_SECONDS,
        help=f"Game length in seconds (default: {GAME_SECONDS})",
    )
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Show a tile path for every solution word",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def load_index(path: str | None) -> DictionaryIndex:
    """Load the requested word list; without one, fall back to the default."""
    if path is None:
        index = load_default_dictionary()
        if not index.loaded:
            print("Unable to load dictionary. Game may be limited.")
        return index
    return load_dictionary(path)


def build_puzzle(args: argparse.Namespace, index: DictionaryIndex) -> Puzzle:
    if args.grid:
        grid = Grid.from_letters(args.grid)
        return Puzzle.from_grid("custom", 0, grid, index)
    if args.puzzle_id:
        puzzle_id = args.puzzle_id
    elif args.date:
        puzzle_id = puzzle_id_for(parse_puzzle_date(args.date))
    else:
        puzzle_id = today_puzzle_id()
    return Puzzle.build(puzzle_id, index)


def play_loop(session: GameSession) -> None:
    """Read words from the terminal until time runs out or the player quits."""
    print(f"\nYou have {session.time_limit:.0f}s. Type words, or Q to quit.")
    session.start()

    while not session.is_finished():
        try:
            raw = input(f"[{session.time_left():3.0f}s | {session.score} pts] > ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if raw.upper() == "Q":
            break
        if not raw:
            continue

        try:
            submission = session.submit(raw)
        except SessionClosedError:
            print("Time's up!")
            break

        if submission.status is SubmissionStatus.NEW:
            print(f"  {submission.word}: +{submission.delta}")
        elif submission.status is SubmissionStatus.DUPLICATE:
            print(f"  {submission.word}: already found ({submission.delta})")
        else:
            print(f"  {submission.word}: not on this grid ({submission.delta})")

    session.finish()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # 1. Load dictionary
    try:
        index = load_index(args.dictionary)
    except OSError as e:
        print(f"Could not read dictionary: {e}")
        sys.exit(1)

    # 2. Build the puzzle
    try:
        puzzle = build_puzzle(args, index)
    except ValueError as e:
        print(e)
        sys.exit(1)

    if args.grid:
        print("\nCustom grid")
    else:
        print(f"\nPuzzle {puzzle.puzzle_id} (seed {puzzle.seed})")
    print_grid(puzzle.grid)

    # 3. Play, or just show the answers
    found: list[str] = []
    if args.play:
        session = GameSession(puzzle, time_limit=args.time_limit)
        play_loop(session)
        print_summary(session)
        found = session.found_words

    paths = None
    if args.paths:
        paths = {w: find_path(puzzle.grid, w) for w in puzzle.solutions}
    print_solutions(puzzle.solutions, found=found, paths=paths)


if __name__ == "__main__":
    main()
