"""Grid cell component.

A cell pairs a digest byte with its row-major position in the 5×5 grid. The
position is assigned once by the grid builder and survives filtering
unchanged, so a retained cell always knows where it belongs on the canvas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """Grid entry.

    Attributes:
        value: Digest byte (0-255) that decides whether the cell is painted.
        index: Row-major position in the grid (0-24).
    """

    value: int
    index: int
