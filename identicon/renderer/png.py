import io
from typing import Optional

from PIL import Image, ImageDraw

from identicon.components import Point
from identicon.config import BACKGROUND_COLOR, CANVAS_SIZE, IMAGE_FORMAT
from identicon.state import ImageState
from identicon.types import Color, Encoder
from identicon.utils.grid import is_in_canvas


class EncodingError(RuntimeError):
    """Raised when a canvas cannot be rendered to bytes."""


def create_canvas(width: int, height: int) -> Image.Image:
    return Image.new("RGB", (width, height), BACKGROUND_COLOR)


def fill_rectangle(
    canvas: Image.Image, top_left: Point, bottom_right: Point, color: Color
) -> None:
    """
    Paint a solid rectangle. ``bottom_right`` is exclusive; Pillow's rectangle
    is inclusive on both ends, hence the minus one.
    """
    ImageDraw.Draw(canvas).rectangle(
        [top_left.x, top_left.y, bottom_right.x - 1, bottom_right.y - 1], fill=color
    )


def render_canvas(
    canvas: Image.Image, image_format: str = IMAGE_FORMAT
) -> bytes:
    buffer = io.BytesIO()
    try:
        canvas.save(buffer, format=image_format)
    except (KeyError, OSError, ValueError) as exc:
        raise EncodingError(f"Could not encode canvas as {image_format}") from exc
    return buffer.getvalue()


class PngEncoder:
    image_format: str

    def __init__(self, image_format: str = IMAGE_FORMAT):
        self.image_format = image_format

    def create_canvas(self, width: int, height: int) -> Image.Image:
        return create_canvas(width, height)

    def fill_rectangle(
        self, canvas: Image.Image, top_left: Point, bottom_right: Point, color: Color
    ) -> None:
        fill_rectangle(canvas, top_left, bottom_right, color)

    def render(self, canvas: Image.Image) -> bytes:
        return render_canvas(canvas, self.image_format)


def draw_image(state: ImageState, encoder: Optional[Encoder] = None) -> bytes:
    """
    Rasterize ``state.pixel_map`` in ``state.color`` onto a blank canvas and
    return the encoded bytes. An empty pixel map yields a blank canvas;
    a rectangle reaching outside the canvas is rejected before drawing.
    """
    if state.color is None:
        raise ValueError("State has no color; run color_system first")

    for rectangle in state.pixel_map:
        if not (
            is_in_canvas(rectangle.top_left) and is_in_canvas(rectangle.bottom_right)
        ):
            raise ValueError(f"Rectangle outside the canvas: {rectangle}")

    encoder = encoder or PngEncoder()
    canvas = encoder.create_canvas(CANVAS_SIZE, CANVAS_SIZE)
    for rectangle in state.pixel_map:
        encoder.fill_rectangle(
            canvas, rectangle.top_left, rectangle.bottom_right, state.color
        )
    return encoder.render(canvas)
