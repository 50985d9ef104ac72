"""Fixed rendering constants.

These values are read-only and shared by every invocation. The canvas is a
square of ``GRID_SIZE`` × ``GRID_SIZE`` cells, each ``CELL_SIZE`` pixels wide.
"""

from typing import Tuple

ROW_SEED_LENGTH = 3
GRID_SIZE = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE

BACKGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)
IMAGE_FORMAT = "PNG"
FILE_SUFFIX = ".png"
