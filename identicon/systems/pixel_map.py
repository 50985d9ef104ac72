"""Pixel mapping system."""

from dataclasses import replace

from pyrsistent import pvector

from identicon.state import ImageState
from identicon.utils.grid import cell_rectangle


def pixel_map_system(state: ImageState) -> ImageState:
    """Map every grid cell to the canvas rectangle at its original index.

    Args:
        state (ImageState): State with a (usually filtered) ``grid``.

    Returns:
        ImageState: New state whose ``pixel_map`` has one rectangle per cell,
            in grid order.
    """
    return replace(
        state, pixel_map=pvector(cell_rectangle(cell.index) for cell in state.grid)
    )
