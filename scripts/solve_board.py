"""
Command-line driver for the word grid solver.

Usage:
    python -m scripts.solve_board <letters> [--rows R --cols C] [--check WORD]

Examples:
    python -m scripts.solve_board "CATS REPO BONE DIGS"
    python -m scripts.solve_board ABCDEF --rows 2 --cols 3 --min-len 3
    python -m scripts.solve_board "QITE SARN DOLE MPUG" --check quit

This will:
  1. Load the dictionary and build the prefix index
  2. Find every word on the board and print them longest first
  3. Optionally trace one typed word (--check) and print its paths
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordgrid.board import Board
from wordgrid.errors import WordGridError
from wordgrid.metrics import SolveTimer
from wordgrid.paths import find_word_paths
from wordgrid.settings import settings
from wordgrid.solver import rank_words, solve
from wordgrid.trie import load_index
from wordgrid.validator import validate_input

logger = logging.getLogger("wordgrid")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Word Grid Solver")
    parser.add_argument("letters", help="Board letters in row-major order (Q becomes Qu)")
    parser.add_argument("--rows", type=int, default=None, help="Board rows (default: square)")
    parser.add_argument("--cols", type=int, default=None, help="Board columns (default: square)")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help="Word list, one word per line (default: %(default)s)")
    parser.add_argument("--min-len", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--max-results", type=int, default=settings.MAX_RESULTS,
                        help=f"Words to print, 0 for all (default: {settings.MAX_RESULTS})")
    parser.add_argument("--check", type=str, default=None,
                        help="Trace a typed word on the board and print its paths")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        board = Board.from_letters(args.letters, args.rows, args.cols)
    except WordGridError as e:
        print(f"Error: {e}")
        return 1

    if board.size > settings.MAX_CELLS:
        print(f"Error: board has {board.size} cells (max {settings.MAX_CELLS})")
        return 1

    print(f"Board {board.rows}x{board.cols}:")
    for row in board.as_rows():
        print("  " + " ".join(f"{tile:<2}" for tile in row))

    timer = SolveTimer(board)
    try:
        with timer.stage("load_dictionary") as facts:
            index = load_index(args.dictionary, settings.INDEX_MIN_LENGTH)
            facts["words"] = len(index)
            facts["nodes"] = index.node_count
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    with timer.stage("solve") as facts:
        found = solve(board, index, args.min_len)
        facts["words"] = len(found)

    words = rank_words(found, args.max_results)
    print(f"\n--- {len(found)} words (showing {len(words)}) ---")
    for word in words:
        print(f"  {word}")

    if args.check:
        with timer.stage("validate") as facts:
            result = validate_input(args.check, board)
            facts["status"] = result.status.value
            facts["complete"] = len(result.complete_paths)
            facts["partial"] = len(result.partial_paths)
        print(f"\n--- Check '{args.check}' ---")
        print(f"Status: {result.status.value}")
        if result.is_valid:
            print(f"In dictionary: {'yes' if args.check in index else 'no'}")
            for path in find_word_paths(args.check, board):
                print(f"  path {path}")
        elif result.partial_paths:
            deepest = result.deepest_partial()
            print(f"Traceable up to '{board.spell(deepest)}' via {deepest}")

    summary = timer.summary()
    print(f"\nTimings (ms): " + ", ".join(f"{name}={stage['ms']}" for name, stage in summary["stages"].items())
          + f", total={summary['total_ms']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
