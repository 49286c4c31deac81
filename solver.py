"""Propagation and backtracking Sudoku solver."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Set, Tuple

from errors import GridShapeError, InvalidPuzzleError, InvalidSymbolError, SearchAbortedError, UnsolvableError
from grid import EMPTY, Grid, Rows
from puzzle_io import check_rules

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    propagation_passes: int = 0
    assignments: int = 0
    branches: int = 0
    backtracks: int = 0
    max_depth: int = 0


def candidates(grid: Grid, x: int, y: int) -> Set[int]:
    """Return the symbols not excluded by the row, column and block of ``(x, y)``.

    An assigned cell is only compatible with its own value.
    """
    value = grid.get(x, y)
    if value != EMPTY:
        return {value}
    used = set(grid.block_of(x, y))
    used.update(grid.column(x))
    used.update(grid.row(y))
    return {symbol for symbol in grid.symbols if symbol not in used}


def propagate(grid: Grid, stats: Optional[SolverStats] = None) -> int:
    """Run one naked-single pass over the empty cells in row-major order.

    Every forced value is written immediately, so cells later in the pass
    already see it. Cells without any candidate are left alone. Returns the
    number of assignments made.
    """
    assigned = 0
    for x, y in grid.empty_cells():
        options = candidates(grid, x, y)
        if len(options) == 1:
            grid.set_value(x, y, next(iter(options)))
            assigned += 1
    if stats is not None:
        stats.propagation_passes += 1
        stats.assignments += assigned
    return assigned


class SudokuSolver:
    """Deduction-first solver falling back to minimum-remaining-values guessing.

    ``max_branches`` and ``time_limit`` (seconds) bound the search; both are
    checked before every guess and raise :class:`SearchAbortedError` when hit.
    """

    def __init__(self, max_branches: Optional[int] = None, time_limit: Optional[float] = None) -> None:
        self.max_branches = max_branches
        self.time_limit = time_limit
        self.stats = SolverStats()
        self.last_status: str = "idle"
        self._deadline: Optional[float] = None

    def _reset_state(self) -> None:
        self.stats = SolverStats()
        self.last_status = "idle"
        self._deadline = None if self.time_limit is None else time.monotonic() + self.time_limit

    def solve(self, grid: Grid) -> Grid:
        """Return a solved copy of ``grid``; the argument itself is left untouched."""
        self._reset_state()
        try:
            solved = self._search(grid.snapshot(), depth=0)
        except UnsolvableError:
            self.last_status = "unsolvable"
            log.info("No solution after %d branches", self.stats.branches)
            raise
        except SearchAbortedError as exc:
            self.last_status = "aborted"
            log.info("Search aborted: %s", exc)
            raise
        self.last_status = "solved"
        log.info(
            "Solved %dx%d grid: %d passes, %d assignments, %d branches, %d backtracks",
            solved.width,
            solved.height,
            self.stats.propagation_passes,
            self.stats.assignments,
            self.stats.branches,
            self.stats.backtracks,
        )
        return solved

    def solve_board(
        self, board: Sequence[Sequence[int]], block_width: int = 3, block_height: int = 3
    ) -> Optional[Rows]:
        """Solve plain row lists, returning ``None`` on failure; see ``last_status``."""
        try:
            grid = Grid.from_rows(board, block_width, block_height)
            check_rules(grid)
        except (GridShapeError, InvalidSymbolError, InvalidPuzzleError) as exc:
            self._reset_state()
            self.last_status = "invalid"
            log.info("Rejected board: %s", exc)
            return None
        try:
            return self.solve(grid).to_rows()
        except (UnsolvableError, SearchAbortedError):
            return None

    def _check_budget(self) -> None:
        if self.max_branches is not None and self.stats.branches >= self.max_branches:
            raise SearchAbortedError(f"Branch limit of {self.max_branches} reached.")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise SearchAbortedError(f"Time limit of {self.time_limit} seconds reached.")

    def _select_cell(self, grid: Grid) -> Tuple[int, int, Set[int]]:
        best: Optional[Tuple[int, int, Set[int]]] = None
        for x, y in grid.empty_cells():
            options = candidates(grid, x, y)
            if best is None or len(options) < len(best[2]):
                best = (x, y, options)
                if not options:
                    break
        if best is None:
            raise ValueError("The grid has no empty cell to branch on.")
        return best

    def _search(self, grid: Grid, depth: int) -> Grid:
        while not grid.is_complete():
            if not propagate(grid, self.stats):
                break
        if grid.is_complete():
            return grid

        x, y, options = self._select_cell(grid)
        if not options:
            log.debug("Dead end at depth %d: no candidates for x = %d | y = %d", depth, x, y)
            raise UnsolvableError(f"No value fits the cell at x = {x} | y = {y}.")

        log.debug("Depth %d: guessing x = %d | y = %d from %s", depth, x, y, sorted(options))
        for value in sorted(options):
            self._check_budget()
            self.stats.branches += 1
            self.stats.max_depth = max(self.stats.max_depth, depth + 1)
            branch = grid.snapshot()
            branch.set_value(x, y, value)
            try:
                return self._search(branch, depth + 1)
            except UnsolvableError:
                self.stats.backtracks += 1
        raise UnsolvableError(f"Every candidate for the cell at x = {x} | y = {y} failed.")


def solve(grid: Grid) -> Grid:
    return SudokuSolver().solve(grid)
