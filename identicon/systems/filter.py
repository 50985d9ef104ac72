"""Parity filtering system.

Only cells with an even value are painted. Filtering drops cells but keeps the
survivors' original indices, so the rendered pattern keeps its gaps.
"""

import logging
from dataclasses import replace

from pyrsistent import pvector

from identicon.state import ImageState

logger = logging.getLogger(__name__)


def filter_system(state: ImageState) -> ImageState:
    """Replace ``grid`` with its even-valued cells, order preserved.

    The result may be empty when every value is odd.
    """
    grid = pvector(cell for cell in state.grid if cell.value % 2 == 0)
    logger.debug("Kept %d of %d cells", len(grid), len(state.grid))
    return replace(state, grid=grid)
