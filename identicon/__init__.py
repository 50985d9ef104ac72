"""identicon
============

Deterministic identicon generation. An input string is hashed, the digest is
folded into a mirrored 5×5 grid, even cells are kept and painted with a color
taken from the digest onto a 250×250 canvas.

Typical use::

    from identicon import generate

    png_bytes = generate("asdf")  # also writes ``asdf.png``

The pure stages live in :mod:`identicon.systems`; :mod:`identicon.pipeline`
composes them and :mod:`identicon.renderer` turns the result into bytes.
"""

from identicon.pipeline import build, generate
from identicon.state import ImageState

__all__ = ["ImageState", "build", "generate"]
