"""Rendering subpackage.

Turns a finished :class:`identicon.state.ImageState` into encoded image bytes.
The rasterizer only talks to an :class:`identicon.types.Encoder`, so tests can
swap in a recording encoder while the default writes PNG through Pillow.

See :mod:`identicon.renderer.png` for the canvas primitives and
:func:`identicon.renderer.png.draw_image`.
"""

from .png import EncodingError, PngEncoder, draw_image

__all__ = ["EncodingError", "PngEncoder", "draw_image"]
