"""Exception hierarchy for the Sudoku solver.

Every project-specific exception inherits from :class:`SudokuError`, so callers
that only care whether something went wrong can catch a single base class.
"""


class SudokuError(Exception):
    """Base exception for all solver operations."""


class OutOfRangeError(SudokuError, IndexError):
    """Raised when a cell coordinate lies outside the grid."""


class InvalidSymbolError(SudokuError, ValueError):
    """Raised when a value is not a symbol of the grid."""


class AlreadyAssignedError(SudokuError):
    """Raised when writing to a cell that already holds a value.

    The engine only ever assigns empty cells, so seeing this from inside
    the solver points at a bug rather than at bad puzzle data.
    """


class GridShapeError(SudokuError, ValueError):
    """Raised when block or grid dimensions are not usable."""


class UnsolvableError(SudokuError):
    """Raised when no assignment reachable from the current grid solves it."""


class SearchAbortedError(SudokuError):
    """Raised when the search exceeds its branch or time budget.

    Unlike :class:`UnsolvableError` this says nothing about whether a
    solution exists.
    """


class PuzzleFormatError(SudokuError, ValueError):
    """Raised when puzzle text cannot be parsed."""


class InvalidPuzzleError(SudokuError, ValueError):
    """Raised when a puzzle repeats a value inside a row, column or block."""
