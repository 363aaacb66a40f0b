from __future__ import annotations

import random
from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


COLS = 10
ROWS = 20

Shape = np.ndarray


class Color(IntEnum):
    CYAN = 1
    BLUE = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    PURPLE = 6
    RED = 7

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return RGB[self]


RGB: Dict[Color, Tuple[int, int, int]] = {
    Color.CYAN: (0, 240, 240),
    Color.BLUE: (0, 0, 240),
    Color.ORANGE: (240, 160, 0),
    Color.YELLOW: (240, 240, 0),
    Color.GREEN: (0, 240, 0),
    Color.PURPLE: (160, 0, 240),
    Color.RED: (240, 0, 0),
}


def _frozen(rows) -> Shape:
    shape = np.array(rows, dtype=np.bool_)
    shape.setflags(write=False)
    return shape


# Catalog order fixes the color of each shape: I, T, L, J, O, Z, S
SHAPES: Tuple[Shape, ...] = (
    _frozen([[1, 1, 1, 1]]),
    _frozen([[1, 1, 1], [0, 1, 0]]),
    _frozen([[1, 1, 1], [1, 0, 0]]),
    _frozen([[1, 1, 1], [0, 0, 1]]),
    _frozen([[1, 1], [1, 1]]),
    _frozen([[1, 1, 0], [0, 1, 1]]),
    _frozen([[0, 1, 1], [1, 1, 0]]),
)

COLORS: Tuple[Color, ...] = tuple(Color)


def shape_for(color: Color) -> Shape:
    """Canonical shape paired with `color` in the catalog."""
    return SHAPES[COLORS.index(color)]


def random_shape(rng: random.Random) -> Tuple[Shape, Color]:
    """Pick one catalog shape uniformly at random, with its fixed color."""
    index = rng.randrange(len(SHAPES))
    return SHAPES[index], COLORS[index]
