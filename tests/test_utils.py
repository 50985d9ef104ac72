from typing import List, Optional, Sequence, Tuple

from pyrsistent import pvector

from identicon.components import Cell, Point, Rectangle
from identicon.state import ImageState
from identicon.systems.color import color_system
from identicon.systems.filter import filter_system
from identicon.systems.grid import grid_system
from identicon.systems.pixel_map import pixel_map_system

# MD5("asdf")
ASDF_DIGEST: List[int] = [
    145, 46, 200, 3, 178, 206, 73, 228, 165, 65, 6, 141, 73, 90, 181, 112,
]
ASDF_COLOR: Tuple[int, int, int] = (145, 46, 200)
ASDF_GRID: List[Tuple[int, int]] = [
    (145, 0), (46, 1), (200, 2), (46, 3), (145, 4),
    (3, 5), (178, 6), (206, 7), (178, 8), (3, 9),
    (73, 10), (228, 11), (165, 12), (228, 13), (73, 14),
    (65, 15), (6, 16), (141, 17), (6, 18), (65, 19),
    (73, 20), (90, 21), (181, 22), (90, 23), (73, 24),
]
ASDF_FILTERED_GRID: List[Tuple[int, int]] = [
    (46, 1), (200, 2), (46, 3),
    (178, 6), (206, 7), (178, 8),
    (228, 11), (228, 13),
    (6, 16), (6, 18),
    (90, 21), (90, 23),
]

# Every byte odd: nothing survives the parity filter.
ODD_DIGEST: List[int] = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25, 27, 29, 31]


def make_cells(pairs: Sequence[Tuple[int, int]]) -> List[Cell]:
    return [Cell(value, index) for value, index in pairs]


def make_rectangle(x0: int, y0: int, x1: int, y1: int) -> Rectangle:
    return Rectangle(Point(x0, y0), Point(x1, y1))


def make_state(
    digest: Sequence[int] = ASDF_DIGEST,
    grid: Optional[Sequence[Tuple[int, int]]] = None,
) -> ImageState:
    """State with only ``digest`` (and optionally ``grid``) populated."""
    state = ImageState(digest=pvector(digest))
    if grid is not None:
        state = ImageState(digest=state.digest, grid=pvector(make_cells(grid)))
    return state


def run_systems(digest: Sequence[int]) -> ImageState:
    """Run every pure stage after hashing on a hand-picked digest."""
    state = make_state(digest)
    state = color_system(state)
    state = grid_system(state)
    state = filter_system(state)
    return pixel_map_system(state)
