"""Grid model for generalized Sudoku boards."""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from errors import AlreadyAssignedError, GridShapeError, InvalidSymbolError, OutOfRangeError

EMPTY = 0
Rows = List[List[int]]


def _check_block_size(block_width: int, block_height: int) -> None:
    if block_width < 2:
        raise GridShapeError("The block width can not be smaller than 2.")
    if block_height < 2:
        raise GridShapeError("The block height can not be smaller than 2.")


class Grid:
    """Rectangular board split into ``blocks_x * blocks_y`` equal blocks.

    Cells are stored in a ``(height, width)`` integer array, ``EMPTY`` marks
    an unassigned cell. Coordinates are ``(x, y)``: column first, row second.
    """

    def __init__(self, block_width: int, block_height: int, blocks_x: int, blocks_y: int) -> None:
        _check_block_size(block_width, block_height)
        if blocks_x < 1 or blocks_y < 1:
            raise GridShapeError("The grid needs at least one block in each direction.")
        self._block_width = block_width
        self._block_height = block_height
        self._blocks_x = blocks_x
        self._blocks_y = blocks_y
        self._cells = np.zeros((blocks_y * block_height, blocks_x * block_width), dtype=np.int32)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], block_width: int, block_height: int) -> Grid:
        """Build a grid from row lists, ``0`` meaning empty."""
        _check_block_size(block_width, block_height)
        if not rows or not rows[0]:
            raise GridShapeError("The grid needs at least one row and one column.")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise GridShapeError("The rows of the grid do not all have the same size.")
        if width % block_width != 0:
            raise GridShapeError(f"The width {width} has to be a multiple of the block width {block_width}.")
        if len(rows) % block_height != 0:
            raise GridShapeError(
                f"The height {len(rows)} has to be a multiple of the block height {block_height}."
            )

        grid = cls(block_width, block_height, width // block_width, len(rows) // block_height)
        limit = grid.symbol_count
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                value = int(value)
                if value < EMPTY or value > limit:
                    raise InvalidSymbolError(
                        f"The value {value} at x = {x + 1} | y = {y + 1} is out of bounds [1,{limit}]."
                    )
                grid._cells[y, x] = value
        return grid

    @property
    def block_width(self) -> int:
        return self._block_width

    @property
    def block_height(self) -> int:
        return self._block_height

    @property
    def blocks_x(self) -> int:
        return self._blocks_x

    @property
    def blocks_y(self) -> int:
        return self._blocks_y

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def symbol_count(self) -> int:
        return self._block_width * self._block_height

    @property
    def symbols(self) -> range:
        return range(1, self.symbol_count + 1)

    def _check_coordinates(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeError(f"The cell at x = {x} | y = {y} is not available.")

    def get(self, x: int, y: int) -> int:
        self._check_coordinates(x, y)
        return int(self._cells[y, x])

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) == EMPTY

    def set_value(self, x: int, y: int, value: int) -> None:
        """Assign ``value`` to an empty cell."""
        self._check_coordinates(x, y)
        if self._cells[y, x] != EMPTY:
            raise AlreadyAssignedError(f"The value of the cell at x = {x} | y = {y} can not be overwritten.")
        try:
            is_integer = int(value) == value
        except (TypeError, ValueError):
            is_integer = False
        if not is_integer or not 1 <= value <= self.symbol_count:
            raise InvalidSymbolError(
                f"The value {value} at x = {x + 1} | y = {y + 1} is out of bounds [1,{self.symbol_count}]."
            )
        self._cells[y, x] = value

    def is_complete(self) -> bool:
        return bool(np.all(self._cells != EMPTY))

    def snapshot(self) -> Grid:
        clone = type(self).__new__(type(self))
        clone._block_width = self._block_width
        clone._block_height = self._block_height
        clone._blocks_x = self._blocks_x
        clone._blocks_y = self._blocks_y
        clone._cells = self._cells.copy()
        return clone

    def block_index(self, x: int, y: int) -> Tuple[int, int]:
        return x // self._block_width, y // self._block_height

    def row(self, y: int) -> List[int]:
        self._check_coordinates(0, y)
        return [int(value) for value in self._cells[y, :]]

    def column(self, x: int) -> List[int]:
        self._check_coordinates(x, 0)
        return [int(value) for value in self._cells[:, x]]

    def block_of(self, x: int, y: int) -> List[int]:
        """Values of the block containing ``(x, y)``, row by row."""
        self._check_coordinates(x, y)
        bx, by = self.block_index(x, y)
        start_x = bx * self._block_width
        start_y = by * self._block_height
        block = self._cells[start_y : start_y + self._block_height, start_x : start_x + self._block_width]
        return [int(value) for value in block.ravel()]

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the coordinates of every empty cell in row-major order."""
        ys, xs = np.nonzero(self._cells == EMPTY)
        for y, x in zip(ys, xs):
            yield int(x), int(y)

    def count_empty(self) -> int:
        return int(np.count_nonzero(self._cells == EMPTY))

    def to_rows(self) -> Rows:
        return [[int(value) for value in row] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._block_width == other._block_width
            and self._block_height == other._block_height
            and np.array_equal(self._cells, other._cells)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Grid(block_width={self._block_width}, block_height={self._block_height}, "
            f"blocks_x={self._blocks_x}, blocks_y={self._blocks_y}, empty={self.count_empty()})"
        )
