"""Reading, validating and printing Sudoku puzzles in the plain-text format.

The format is line based::

    # comment lines and blank lines are ignored
    3 3                 <- block width and block height
    5 3 0 0 7 0 0 0 0   <- one line per grid row, 0 marks an empty cell
    ...
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Set, Tuple, Union

from errors import GridShapeError, InvalidPuzzleError, InvalidSymbolError, PuzzleFormatError
from grid import EMPTY, Grid

Conflict = Tuple[int, int, int]


def _significant_lines(text: str) -> List[Tuple[int, List[str]]]:
    lines = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        lines.append((line_number, stripped.split()))
    return lines


def _parse_header(tokens: List[str]) -> Tuple[int, int]:
    if len(tokens) < 2:
        raise PuzzleFormatError("Too few arguments for the block specifications were given.")
    if len(tokens) > 2:
        raise PuzzleFormatError("Too many arguments for the block specifications were given.")
    try:
        block_width = int(tokens[0])
    except ValueError:
        raise PuzzleFormatError("The given block width is not a number.") from None
    try:
        block_height = int(tokens[1])
    except ValueError:
        raise PuzzleFormatError("The given block height is not a number.") from None
    return block_width, block_height


def parse_puzzle(text: str) -> Grid:
    """Parse puzzle text into a validated :class:`Grid`."""
    lines = _significant_lines(text)
    if not lines:
        raise PuzzleFormatError("The puzzle is missing the block specifications.")
    block_width, block_height = _parse_header(lines[0][1])

    rows: List[List[int]] = []
    for y, (_line_number, tokens) in enumerate(lines[1:], start=1):
        if rows and len(tokens) != len(rows[0]):
            raise PuzzleFormatError("The rows of the puzzle do not all have the same size.")
        row: List[int] = []
        for x, token in enumerate(tokens, start=1):
            try:
                row.append(int(token))
            except ValueError:
                raise PuzzleFormatError(f"The value '{token}' at x = {x} | y = {y} is not a number.") from None
        rows.append(row)
    if not rows:
        raise PuzzleFormatError("The puzzle does not contain any rows.")

    try:
        grid = Grid.from_rows(rows, block_width, block_height)
    except (GridShapeError, InvalidSymbolError) as exc:
        raise PuzzleFormatError(str(exc)) from exc
    check_rules(grid)
    return grid


def read_puzzle(path: Union[str, Path]) -> Grid:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise PuzzleFormatError(f"The file at '{path}' could not be found.") from None
    except UnicodeDecodeError:
        raise PuzzleFormatError(f"The file at '{path}' is not UTF-8 text.") from None
    except OSError as exc:
        raise PuzzleFormatError(f"The file at '{path}' could not be read: {exc.strerror}.") from None
    return parse_puzzle(text)


def _scan_duplicates(grid: Grid, units: List[List[Tuple[int, int]]]) -> List[Conflict]:
    conflicts: List[Conflict] = []
    for unit in units:
        seen: Set[int] = set()
        for x, y in unit:
            value = grid.get(x, y)
            if value == EMPTY:
                continue
            if value in seen:
                conflicts.append((x, y, value))
            seen.add(value)
    return conflicts


def _units(grid: Grid) -> Dict[str, List[List[Tuple[int, int]]]]:
    rows = [[(x, y) for x in range(grid.width)] for y in range(grid.height)]
    columns = [[(x, y) for y in range(grid.height)] for x in range(grid.width)]
    blocks = []
    for by in range(grid.blocks_y):
        for bx in range(grid.blocks_x):
            blocks.append(
                [
                    (bx * grid.block_width + dx, by * grid.block_height + dy)
                    for dy in range(grid.block_height)
                    for dx in range(grid.block_width)
                ]
            )
    return {"row": rows, "column": columns, "block": blocks}


def find_conflicts(grid: Grid) -> List[Conflict]:
    """Return every repeated ``(x, y, value)`` in rows, then columns, then blocks."""
    conflicts: List[Conflict] = []
    for units in _units(grid).values():
        conflicts.extend(_scan_duplicates(grid, units))
    return conflicts


def check_rules(grid: Grid) -> None:
    """Raise :class:`InvalidPuzzleError` at the first value repeated in a unit."""
    for kind, units in _units(grid).items():
        duplicates = _scan_duplicates(grid, units)
        if duplicates:
            x, y, value = duplicates[0]
            raise InvalidPuzzleError(
                f"Sudoku contains duplicate value {value} in a {kind} at x = {x + 1} | y = {y + 1}."
            )


def is_solved(grid: Grid) -> bool:
    return grid.is_complete() and not find_conflicts(grid)


def format_grid(grid: Grid) -> str:
    """Render ``grid`` as text with ``|`` and dashed lines between blocks."""
    field_length = grid.symbol_count // 10 + 1
    blocks_x = grid.blocks_x
    separator = "-" * max(0, blocks_x * (grid.block_width * (field_length + 1) + 1) + (blocks_x - 1))

    lines = [separator]
    for y in range(grid.height):
        line = " "
        for x in range(grid.width):
            line += f"{grid.get(x, y):>{field_length}} "
            if x < grid.width - 1 and (x + 1) % grid.block_width == 0:
                line += "| "
        lines.append(line)
        if y < grid.height - 1 and (y + 1) % grid.block_height == 0:
            lines.append(separator)
    lines.append(separator)
    return "\n".join(lines)
