"""Image rendering helpers for puzzles and solutions."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import cv2
import imutils
import numpy as np
from matplotlib import colormaps

from grid import EMPTY, Grid

DEFAULT_CELL_SIZE = 60
GIVEN_COLOR = (0, 0, 0)
LINE_COLOR = (40, 40, 40)
BACKGROUND = 255


def symbol_palette(symbol_count: int) -> np.ndarray:
    """BGR colors for solver-filled digits, indexed by symbol."""
    rgb = colormaps["Greens"](np.linspace(0.45, 0.95, symbol_count + 1))[:, :3]
    return (rgb[:, ::-1] * 255).astype("uint8")


def _draw_lines(image: np.ndarray, grid: Grid, cell_size: int) -> None:
    bottom = grid.height * cell_size
    right = grid.width * cell_size
    for x in range(grid.width + 1):
        thickness = 3 if x % grid.block_width == 0 else 1
        cv2.line(image, (x * cell_size, 0), (x * cell_size, bottom), LINE_COLOR, thickness)
    for y in range(grid.height + 1):
        thickness = 3 if y % grid.block_height == 0 else 1
        cv2.line(image, (0, y * cell_size), (right, y * cell_size), LINE_COLOR, thickness)


def render_grid_image(
    grid: Grid,
    given: Optional[Grid] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
    width: Optional[int] = None,
) -> np.ndarray:
    """Draw ``grid`` on a white canvas.

    Values that are also present in ``given`` are drawn in black, the rest
    use the green palette. Without ``given`` every value counts as a clue.
    """
    image = np.full((grid.height * cell_size + 1, grid.width * cell_size + 1, 3), BACKGROUND, dtype="uint8")
    _draw_lines(image, grid, cell_size)
    palette = symbol_palette(grid.symbol_count)

    for y in range(grid.height):
        for x in range(grid.width):
            value = grid.get(x, y)
            if value == EMPTY:
                continue
            if given is None or given.get(x, y) != EMPTY:
                color = GIVEN_COLOR
            else:
                color = tuple(int(channel) for channel in palette[value])
            text = str(value)
            scale = 0.9 * cell_size / DEFAULT_CELL_SIZE
            if len(text) > 1:
                scale *= 0.75
            text_size, _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
            text_x = int(x * cell_size + (cell_size - text_size[0]) / 2)
            text_y = int(y * cell_size + (cell_size + text_size[1]) / 2)
            cv2.putText(image, text, (text_x, text_y), cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2, cv2.LINE_AA)

    if width is not None:
        image = imutils.resize(image, width=width)
    return image


def save_grid_image(
    path: Union[str, Path],
    grid: Grid,
    given: Optional[Grid] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
    width: Optional[int] = None,
) -> Path:
    path = Path(path)
    image = render_grid_image(grid, given, cell_size=cell_size, width=width)
    try:
        written = cv2.imwrite(str(path), image)
    except cv2.error as exc:
        raise OSError(f"Unable to write image to {path}") from exc
    if not written:
        raise OSError(f"Unable to write image to {path}")
    return path
