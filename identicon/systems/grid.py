"""Grid construction system.

Folds the digest into a horizontally symmetric 5×5 grid. The digest is split
into rows of three bytes; each row ``[a, b, c]`` is mirrored into
``[a, b, c, b, a]`` so only the second and first bytes are repeated, with the
third byte as the center column. The trailing digest byte that does not fill
a row is dropped.
"""

from dataclasses import replace
from typing import List, Sequence

from pyrsistent import pvector

from identicon.components import Cell
from identicon.config import GRID_SIZE, ROW_SEED_LENGTH
from identicon.state import ImageState


def mirror_row(row: Sequence[int]) -> List[int]:
    """Append the second and then the first value of ``row`` to it.

    Example:
        >>> mirror_row([145, 46, 200])
        [145, 46, 200, 46, 145]
    """
    first, second = row[0], row[1]
    return [*row, second, first]


def chunk_rows(values: Sequence[int], size: int = ROW_SEED_LENGTH) -> List[List[int]]:
    """Split ``values`` into consecutive rows of ``size``; a short tail is dropped."""
    return [list(values[i : i + size]) for i in range(0, len(values) - size + 1, size)]


def grid_system(state: ImageState) -> ImageState:
    """Populate ``grid`` with 25 cells derived from the digest.

    Args:
        state (ImageState): State with ``digest`` set.

    Returns:
        ImageState: New state whose ``grid`` holds the mirrored rows flattened
            in row-major order, each value paired with its position.

    Raises:
        ValueError: If the digest has fewer than ``GRID_SIZE * ROW_SEED_LENGTH``
            bytes.
    """
    rows = chunk_rows(state.digest)[:GRID_SIZE]
    if len(rows) < GRID_SIZE:
        raise ValueError(
            f"Digest of {len(state.digest)} bytes cannot fill {GRID_SIZE} rows"
        )
    values = [value for row in rows for value in mirror_row(row)]
    return replace(
        state,
        grid=pvector(Cell(value, index) for index, value in enumerate(values)),
    )
