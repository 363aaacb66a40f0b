from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

import numpy as np

from .shapes import COLS, Color, Shape


def rotate_clockwise(shape: Shape) -> Shape:
    """Rotate a shape matrix 90 degrees clockwise.

    ``rotated[c][h - 1 - r] == shape[r][c]``; an ``h x w`` input gives a ``w x h``
    result. The input is never modified.
    """
    rotated = np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))
    rotated.setflags(write=False)
    return rotated


@dataclass(frozen=True, eq=False)
class Piece:
    shape: Shape
    color: Color
    x: int
    y: int

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the board (x, y) of every occupied cell."""
        for dy, dx in zip(*np.nonzero(self.shape)):
            yield self.x + int(dx), self.y + int(dy)

    def with_shape(self, shape: Shape) -> "Piece":
        return replace(self, shape=shape)


def spawn(shape: Shape, color: Color, cols: int = COLS) -> Piece:
    """Place a shape at the top of the board, horizontally centred."""
    x = cols // 2 - int(shape.shape[1]) // 2
    return Piece(shape=shape, color=color, x=x, y=0)


def translate(piece: Piece, dx: int, dy: int) -> Piece:
    return replace(piece, x=piece.x + dx, y=piece.y + dy)
