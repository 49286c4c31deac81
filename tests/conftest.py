from pathlib import Path

import pytest

PUZZLE_DIR = Path(__file__).resolve().parents[1] / "puzzles"

CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

SMALL = [
    [1, 0, 0, 4],
    [0, 0, 1, 0],
    [0, 1, 0, 0],
    [4, 0, 0, 1],
]

RECTANGULAR_SOLUTION = [
    [1, 2, 3, 4, 5, 6],
    [4, 5, 6, 1, 2, 3],
    [2, 3, 1, 5, 6, 4],
    [5, 6, 4, 2, 3, 1],
    [3, 1, 2, 6, 4, 5],
    [6, 4, 5, 3, 1, 2],
]

# x = 0 has zero candidates in the top row: 2, 3 and 4 sit in its row, 1 in its column.
DEAD_END = [
    [0, 2, 3, 4],
    [0, 0, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 0, 0],
]


@pytest.fixture
def classic_rows():
    return [list(row) for row in CLASSIC]


@pytest.fixture
def classic_solution():
    return [list(row) for row in CLASSIC_SOLUTION]


@pytest.fixture
def small_rows():
    return [list(row) for row in SMALL]


@pytest.fixture
def rectangular_solution():
    return [list(row) for row in RECTANGULAR_SOLUTION]


@pytest.fixture
def dead_end_rows():
    return [list(row) for row in DEAD_END]


@pytest.fixture
def propagation_only_rows():
    """Known solution with the top row and the rest of the diagonal cleared.

    Each diagonal cell is the only gap in its row, and once those are filled
    every top-row cell is the only gap in its column.
    """
    rows = [list(row) for row in CLASSIC_SOLUTION]
    rows[0] = [0] * 9
    for i in range(1, 9):
        rows[i][i] = 0
    return rows


@pytest.fixture
def puzzle_dir():
    return PUZZLE_DIR


HARD = [
    [8, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 3, 6, 0, 0, 0, 0, 0],
    [0, 7, 0, 0, 9, 0, 2, 0, 0],
    [0, 5, 0, 0, 0, 7, 0, 0, 0],
    [0, 0, 0, 0, 4, 5, 7, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 3, 0],
    [0, 0, 1, 0, 0, 0, 0, 6, 8],
    [0, 0, 8, 5, 0, 0, 0, 1, 0],
    [0, 9, 0, 0, 0, 0, 4, 0, 0],
]

HARD_SOLUTION = [
    [8, 1, 2, 7, 5, 3, 6, 4, 9],
    [9, 4, 3, 6, 8, 2, 1, 7, 5],
    [6, 7, 5, 4, 9, 1, 2, 8, 3],
    [1, 5, 4, 2, 3, 7, 8, 9, 6],
    [3, 6, 9, 8, 4, 5, 7, 2, 1],
    [2, 8, 7, 1, 6, 9, 5, 3, 4],
    [5, 2, 1, 9, 7, 4, 3, 6, 8],
    [4, 3, 8, 5, 2, 6, 9, 1, 7],
    [7, 9, 6, 3, 1, 8, 4, 5, 2],
]


@pytest.fixture
def hard_rows():
    return [list(row) for row in HARD]


@pytest.fixture
def hard_solution():
    return [list(row) for row in HARD_SOLUTION]
