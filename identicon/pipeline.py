"""Pipeline orchestration.

This module wires the systems together in their fixed order. :func:`build`
runs the pure stages and :func:`generate` adds the two I/O boundaries,
encoding and persistence:

1. ``hash_system`` creates the state from the input digest.
2. ``color_system`` picks the fill color from the digest.
3. ``grid_system`` folds the digest into 25 mirrored cells.
4. ``filter_system`` keeps even cells only.
5. ``pixel_map_system`` maps kept cells to canvas rectangles.
6. ``draw_image`` rasterizes and encodes; the sink stores the bytes.

Nothing is retried: an exception from any stage aborts the call.
"""

import logging
from typing import Optional

from identicon.renderer.png import draw_image
from identicon.sink import save_image
from identicon.state import ImageState
from identicon.systems.color import color_system
from identicon.systems.digest import hash_system
from identicon.systems.filter import filter_system
from identicon.systems.grid import grid_system
from identicon.systems.pixel_map import pixel_map_system
from identicon.types import Encoder, SinkFn

logger = logging.getLogger(__name__)


def build(input: str) -> ImageState:
    """Run the pure stages for ``input``.

    Args:
        input (str): Any string, including the empty string.

    Returns:
        ImageState: State with digest, color, filtered grid and pixel map set.
    """
    state = hash_system(input)
    state = color_system(state)
    state = grid_system(state)
    state = filter_system(state)
    state = pixel_map_system(state)
    return state


def generate(
    input: str,
    encoder: Optional[Encoder] = None,
    sink: Optional[SinkFn] = None,
) -> bytes:
    """Derive, encode and store the identicon for ``input``.

    Args:
        input (str): Any string, including the empty string.
        encoder (Encoder | None): Image encoder. Defaults to PNG via Pillow.
        sink (SinkFn | None): Receives ``(image_bytes, input)``. Defaults to
            :func:`identicon.sink.save_image`, which writes ``<input>.png`` to
            the working directory.

    Returns:
        bytes: The encoded image handed to the sink.

    Raises:
        EncodingError: If the encoder cannot render the canvas.
        OSError: If the default sink cannot write the file.
    """
    state = build(input)
    logger.debug("Drawing %d cells in %s", len(state.pixel_map), state.color)
    image = draw_image(state, encoder)
    (sink or save_image)(image, input)
    return image
