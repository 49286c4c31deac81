"""Command line Sudoku solver for puzzles stored in text files."""
from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from errors import InvalidPuzzleError, PuzzleFormatError, SearchAbortedError, UnsolvableError
from puzzle_io import format_grid, read_puzzle
from solver import SudokuSolver
from utils import DEFAULT_CELL_SIZE, save_grid_image

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2
EXIT_BAD_OUTPUT = 3

log = logging.getLogger(__name__)


def run(
    puzzle_path: str,
    image_path: Optional[str] = None,
    image_width: Optional[int] = None,
    max_branches: Optional[int] = None,
    time_limit: Optional[float] = None,
) -> int:
    try:
        puzzle = read_puzzle(puzzle_path)
    except (PuzzleFormatError, InvalidPuzzleError) as exc:
        print(f"Invalid puzzle: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    print(format_grid(puzzle))

    solver = SudokuSolver(max_branches=max_branches, time_limit=time_limit)
    started = time.perf_counter()
    try:
        solution = solver.solve(puzzle)
    except UnsolvableError:
        print("The puzzle has no solution.", file=sys.stderr)
        return EXIT_UNSOLVED
    except SearchAbortedError as exc:
        print(f"Search aborted: {exc}", file=sys.stderr)
        return EXIT_UNSOLVED
    elapsed = time.perf_counter() - started

    print("\nSOLUTION: ")
    print(format_grid(solution))
    print(f"Calculated in {elapsed:.3f} seconds.")
    log.debug("Solver stats: %s", solver.stats)

    if image_path:
        try:
            saved = save_grid_image(
                image_path, solution, given=puzzle, cell_size=DEFAULT_CELL_SIZE, width=image_width
            )
        except OSError as exc:
            print(f"Image not saved: {exc}", file=sys.stderr)
            return EXIT_BAD_OUTPUT
        print(f"Image written to {saved}")
    return EXIT_OK


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve generalized Sudoku puzzles read from a text file")
    parser.add_argument("puzzle", type=str, help="Path to a puzzle file (block size line followed by rows)")
    parser.add_argument("--image", type=str, default=None, help="Also save the solution as an image")
    parser.add_argument("--image-width", type=int, default=None, help="Resize the saved image to this width")
    parser.add_argument("--max-branches", type=int, default=None, help="Give up after this many guesses")
    parser.add_argument("--time-limit", type=float, default=None, help="Give up after this many seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return run(
        args.puzzle,
        args.image,
        image_width=args.image_width,
        max_branches=args.max_branches,
        time_limit=args.time_limit,
    )


if __name__ == "__main__":
    sys.exit(main())
