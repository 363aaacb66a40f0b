from __future__ import annotations

import random

import numpy as np
import pytest

from falling_blocks_rl.game import COLORS, SHAPES, Color, rotate_clockwise, shape_for, spawn, translate
from falling_blocks_rl.game.shapes import random_shape


def test_catalog_has_seven_shapes_with_fixed_colors():
    assert len(SHAPES) == 7
    assert COLORS == (Color.CYAN, Color.BLUE, Color.ORANGE, Color.YELLOW,
                      Color.GREEN, Color.PURPLE, Color.RED)
    assert shape_for(Color.GREEN).tolist() == [[True, True], [True, True]]
    assert shape_for(Color.YELLOW).tolist() == [[True, True, True], [False, False, True]]


def test_catalog_shapes_are_read_only():
    with pytest.raises(ValueError):
        SHAPES[0][0, 0] = False


def test_random_shape_returns_catalog_pair():
    rng = random.Random(7)
    seen = set()
    for _ in range(200):
        shape, color = random_shape(rng)
        assert shape is shape_for(color)
        seen.add(color)
    assert seen == set(Color)


def test_spawn_centres_piece_on_top_row():
    i_piece = spawn(SHAPES[0], Color.CYAN)
    assert (i_piece.x, i_piece.y) == (3, 0)
    o_piece = spawn(SHAPES[4], Color.GREEN)
    assert (o_piece.x, o_piece.y) == (4, 0)
    t_piece = spawn(SHAPES[1], Color.BLUE)
    assert (t_piece.x, t_piece.y) == (4, 0)


def test_rotate_clockwise_matches_index_rule():
    t_shape = SHAPES[1]
    rotated = rotate_clockwise(t_shape)
    h, w = t_shape.shape
    assert rotated.shape == (w, h)
    for r in range(h):
        for c in range(w):
            assert rotated[c, h - 1 - r] == t_shape[r, c]
    assert rotated.tolist() == [[False, True], [True, True], [False, True]]


def test_rotate_line_piece_transposes_dimensions():
    vertical = rotate_clockwise(SHAPES[0])
    assert vertical.shape == (4, 1)
    assert vertical.all()


@pytest.mark.parametrize("index", range(7))
def test_four_rotations_return_original(index):
    shape = SHAPES[index]
    half = rotate_clockwise(rotate_clockwise(shape))
    full = rotate_clockwise(rotate_clockwise(half))
    assert np.array_equal(full, shape)
    assert full.dtype == shape.dtype


def test_rotate_does_not_touch_input():
    before = SHAPES[2].copy()
    rotate_clockwise(SHAPES[2])
    assert np.array_equal(SHAPES[2], before)


def test_translate_is_pure():
    piece = spawn(SHAPES[5], Color.PURPLE)
    moved = translate(piece, -2, 3)
    assert (moved.x, moved.y) == (piece.x - 2, 3)
    assert (piece.x, piece.y) == (4, 0)
    assert moved.shape is piece.shape


def test_cells_are_absolute_coordinates():
    piece = translate(spawn(SHAPES[6], Color.RED), 0, 5)
    # S: [[0,1,1],[1,1,0]] at x=4
    assert sorted(piece.cells()) == [(4, 6), (5, 5), (5, 6), (6, 5)]
