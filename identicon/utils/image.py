import io
from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from identicon.config import CELL_SIZE, GRID_SIZE

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


def decode_image(data: bytes) -> UInt8Array:
    """
    Decode encoded image bytes into an H x W x 3 uint8 RGB array.
    """
    with Image.open(io.BytesIO(data)) as image:
        return np.array(image.convert("RGB"), dtype=np.uint8)


def filled_cells(pixels: UInt8Array, color: Tuple[int, int, int]) -> BoolArray:
    """
    Report which grid cells are painted entirely with ``color``.

    The array is split into GRID_SIZE x GRID_SIZE blocks of CELL_SIZE pixels;
    a block counts as filled only if every one of its pixels matches.
    """
    target: UInt8Array = np.array(color, dtype=np.uint8)
    matches: BoolArray = np.all(pixels == target, axis=-1)
    blocks = matches[: GRID_SIZE * CELL_SIZE, : GRID_SIZE * CELL_SIZE].reshape(
        GRID_SIZE, CELL_SIZE, GRID_SIZE, CELL_SIZE
    )
    return blocks.all(axis=(1, 3))
