import numpy as np
import pytest

from identicon.components import Cell, Point
from identicon.utils.grid import cell_mask, cell_origin, cell_rectangle, is_in_canvas
from tests.test_utils import make_rectangle


@pytest.mark.parametrize("index", range(25))
def test_cell_rectangle_formula(index: int) -> None:
    x, y = index % 5 * 50, index // 5 * 50
    assert cell_origin(index) == Point(x, y)
    assert cell_rectangle(index) == make_rectangle(x, y, x + 50, y + 50)


def test_cell_rectangles_stay_on_canvas() -> None:
    for index in range(25):
        rectangle = cell_rectangle(index)
        assert is_in_canvas(rectangle.top_left)
        assert is_in_canvas(rectangle.bottom_right)


def test_is_in_canvas_bounds() -> None:
    assert is_in_canvas(Point(0, 0))
    assert is_in_canvas(Point(250, 250))
    assert not is_in_canvas(Point(-1, 0))
    assert not is_in_canvas(Point(0, 251))


def test_cell_mask() -> None:
    mask = cell_mask([Cell(2, 1), Cell(4, 3), Cell(6, 24)])
    expected = np.zeros((5, 5), dtype=bool)
    expected[0, 1] = expected[0, 3] = expected[4, 4] = True
    assert mask.shape == (5, 5)
    assert np.array_equal(mask, expected)


def test_cell_mask_empty() -> None:
    assert not cell_mask([]).any()
