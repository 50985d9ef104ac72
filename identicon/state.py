"""Core immutable ``ImageState`` dataclass.

This module defines the frozen :class:`ImageState` record threaded through the
identicon pipeline. Every system is a pure function that takes a previous
``ImageState`` and returns a *new* one with exactly one field replaced; no
mutation happens in-place. This makes each stage deterministic and testable
on its own.

Design notes:

* Sequence fields are **persistent vectors** (``pyrsistent.PVector``) so a
    stage can hand its result on without copying defensively.
* ``color`` is derived straight from the digest and never from ``grid``;
    filtering cells cannot change it.
* ``grid`` is written twice: first by the grid builder (25 cells), then by the
    filter (the even subsequence). Cell indices are never renumbered.

See :mod:`identicon.pipeline` for the order in which systems run.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from identicon.components import Cell, Rectangle
from identicon.types import Color


@dataclass(frozen=True)
class ImageState:
    """Immutable identicon derivation state.

    Instances are *value objects*; every stage creates a new ``ImageState``.
    A state is created per call and discarded once the image bytes exist.

    Attributes:
        digest (PVector[int]): Hash bytes of the input, 16 entries.
        color (tuple[int, int, int] | None): Fill color taken from the first
            three digest bytes.
        grid (PVector[Cell]): Grid cells in row-major order, possibly filtered.
        pixel_map (PVector[Rectangle]): One canvas rectangle per grid cell, in
            grid order.
    """

    digest: PVector[int] = pvector()
    color: Optional[Color] = None
    grid: PVector[Cell] = pvector()
    pixel_map: PVector[Rectangle] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for every
            field that is not empty or ``None``.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or (isinstance(value, type(pvector())) and len(value) == 0):
                continue
            description = description.set(field, value)
        return description
