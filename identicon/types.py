"""Common type aliases and extension points.

``Encoder`` and ``SinkFn`` are the two boundaries of the pipeline: everything
before them is pure, everything behind them may fail with I/O errors.
"""

from typing import Any, Callable, Protocol, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from identicon.components import Point

Color = Tuple[int, int, int]

SinkFn = Callable[[bytes, str], Any]


class Encoder(Protocol):
    """Image encoding capability used by the rasterizer.

    ``Canvas`` is whatever object the implementation draws on; the rasterizer
    only passes it back to the same encoder.
    """

    def create_canvas(self, width: int, height: int) -> Any: ...

    def fill_rectangle(
        self, canvas: Any, top_left: "Point", bottom_right: "Point", color: Color
    ) -> None: ...

    def render(self, canvas: Any) -> bytes: ...
