"""Pixel geometry components.

Immutable integer canvas coordinates, with the origin at the top-left corner.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Pixel column (0 at left).
        y: Pixel row (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Rectangle:
    """Axis aligned region of the canvas.

    ``bottom_right`` is the corner *after* the last painted pixel, so a cell
    rectangle spans exactly ``CELL_SIZE`` pixels in both directions.
    """

    top_left: Point
    bottom_right: Point
