"""Game module for Falling Blocks RL.

Exports the core game engine and supporting classes:
- Board: Well grid with collision, merging and line clearing
- Piece: Positioned shape with rotation and translation helpers
- Color / random_shape: The fixed shape catalog
- ScoringRules: Line-clear scoring, level threshold and drop interval curve
- FallingBlocksGame: State machine for a single game
- TickDriver: Wall-clock adapter that advances gravity
"""

from .shapes import COLS, ROWS, COLORS, SHAPES, Color, random_shape, shape_for
from .pieces import Piece, rotate_clockwise, spawn, translate
from .board import Board
from .rules import ScoringRules
from .core import Command, FallingBlocksGame, GameConfig, GameSnapshot, Status
from .clock import TickDriver

__all__ = [
    "COLS",
    "ROWS",
    "COLORS",
    "SHAPES",
    "Color",
    "random_shape",
    "shape_for",
    "Piece",
    "rotate_clockwise",
    "spawn",
    "translate",
    "Board",
    "ScoringRules",
    "Command",
    "FallingBlocksGame",
    "GameConfig",
    "GameSnapshot",
    "Status",
    "TickDriver",
]
