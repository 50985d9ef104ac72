"""identicon.components
=======================

Value objects carried by :class:`identicon.state.ImageState`. They hold no
behavior; systems build and replace them during the pipeline::

    from identicon.components import Cell, Point, Rectangle
"""

from .cell import Cell
from .rectangle import Point, Rectangle

__all__ = ["Cell", "Point", "Rectangle"]
