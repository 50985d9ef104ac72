"""Grid geometry helpers.

Pure functions converting row-major cell indices into canvas coordinates.
Used by the pixel mapper and by the text preview.
"""

from typing import Iterable

import numpy as np
import numpy.typing as npt

from identicon.components import Cell, Point, Rectangle
from identicon.config import CANVAS_SIZE, CELL_SIZE, GRID_SIZE

BoolArray = npt.NDArray[np.bool_]


def cell_origin(index: int) -> Point:
    """Return the top-left pixel of the cell at row-major ``index``."""
    return Point((index % GRID_SIZE) * CELL_SIZE, (index // GRID_SIZE) * CELL_SIZE)


def cell_rectangle(index: int) -> Rectangle:
    """Return the canvas rectangle covered by the cell at ``index``.

    Example:
        >>> cell_rectangle(7)
        Rectangle(top_left=Point(x=100, y=50), bottom_right=Point(x=150, y=100))
    """
    origin = cell_origin(index)
    return Rectangle(origin, Point(origin.x + CELL_SIZE, origin.y + CELL_SIZE))


def is_in_canvas(point: Point) -> bool:
    """Return True if ``point`` lies on the canvas or on its far edge."""
    return 0 <= point.x <= CANVAS_SIZE and 0 <= point.y <= CANVAS_SIZE


def cell_mask(grid: Iterable[Cell]) -> BoolArray:
    """Boolean ``GRID_SIZE`` × ``GRID_SIZE`` array marking the cells in ``grid``.

    Rows index the vertical position, columns the horizontal one.
    """
    mask: BoolArray = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.bool_)
    for cell in grid:
        mask[cell.index // GRID_SIZE, cell.index % GRID_SIZE] = True
    return mask
