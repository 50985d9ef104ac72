"""Color selection system.

The fill color is read straight from the digest, so it does not depend on
which cells survive filtering.
"""

from dataclasses import replace

from identicon.state import ImageState


def color_system(state: ImageState) -> ImageState:
    """Set ``color`` to the first three digest bytes (red, green, blue).

    Raises:
        ValueError: If the digest holds fewer than three bytes.
    """
    if len(state.digest) < 3:
        raise ValueError(f"Digest too short to pick a color: {len(state.digest)} bytes")
    r, g, b = state.digest[:3]
    return replace(state, color=(r, g, b))
