from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .board import Board
from .pieces import Piece, rotate_clockwise, spawn, translate
from .rules import ScoringRules
from .shapes import COLS, ROWS, SHAPES, random_shape

logger = logging.getLogger(__name__)


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3
    HARD_DROP = 4


class Status(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    cols: int = COLS
    rows: int = ROWS
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"board must have positive dimensions, got {self.cols}x{self.rows}")
        widest = max(max(s.shape) for s in SHAPES)
        if self.cols < widest:
            raise ValueError(f"board needs at least {widest} columns, got {self.cols}")


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    board: np.ndarray
    current: Optional[Piece]
    next: Optional[Piece]
    score: int
    level: int
    drop_interval: int
    lines_cleared_total: int
    game_over: bool
    paused: bool


class FallingBlocksGame:
    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.board = Board(self.config.cols, self.config.rows)
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.level = 1
        self.drop_interval = self.rules.drop_interval(1)
        self.drop_counter = 0.0
        self.lines_cleared_total = 0
        self.pieces_placed = 0
        self.game_over = False
        self.paused = False
        self._resumed = False
        self.reset()

    @property
    def started(self) -> bool:
        return self.current is not None

    @property
    def status(self) -> Status:
        if self.game_over:
            return Status.GAME_OVER
        if not self.started:
            return Status.READY
        return Status.PAUSED if self.paused else Status.RUNNING

    @property
    def accepts_input(self) -> bool:
        return self.status is Status.RUNNING

    # Lifecycle

    def reset(self) -> None:
        self.board.reset()
        self.current = None
        self.next = None
        self.score = 0
        self.level = 1
        self.drop_interval = self.rules.drop_interval(1)
        self.drop_counter = 0.0
        self.lines_cleared_total = 0
        self.pieces_placed = 0
        self.game_over = False
        self.paused = False
        self._resumed = False

    def start(self) -> None:
        self.reset()
        self.next = self._random_piece()
        self.spawn_next()
        logger.debug("Game started with %s", self.current.color.name if self.current else None)

    def toggle_pause(self) -> None:
        if self.game_over or not self.started:
            return
        self.paused = not self.paused
        if not self.paused:
            self._resumed = True

    def consume_resume(self) -> bool:
        """Return True once after the game has been resumed from a pause."""
        resumed = self._resumed
        self._resumed = False
        return resumed

    # Pieces

    def _random_piece(self) -> Piece:
        shape, color = random_shape(self.rng)
        return spawn(shape, color, self.board.cols)

    def spawn_next(self) -> None:
        if self.next is None:
            self.next = self._random_piece()
        self.current = self.next
        self.next = self._random_piece()
        # Immediate collision check: if overlaps, game over
        if self.board.collides(self.current):
            self.game_over = True
            logger.info("Game over: score=%d level=%d lines=%d", self.score, self.level, self.lines_cleared_total)

    def move(self, direction: int) -> bool:
        if self.current is None:
            return False
        candidate = translate(self.current, direction, 0)
        if self.board.collides(candidate):
            return False
        self.current = candidate
        return True

    def rotate(self) -> bool:
        if self.current is None:
            return False
        candidate = self.current.with_shape(rotate_clockwise(self.current.shape))
        if self.board.collides(candidate):
            return False
        self.current = candidate
        return True

    def soft_drop(self) -> bool:
        """Move the piece down one row, or lock it if it has landed.

        Returns True if the piece moved and False if it locked.
        """
        if self.current is None:
            return False
        self.drop_counter = 0.0
        candidate = translate(self.current, 0, 1)
        if not self.board.collides(candidate):
            self.current = candidate
            return True
        self._lock_piece()
        return False

    def hard_drop(self) -> int:
        """Drop the piece to its landing row and lock it. Returns rows fallen."""
        if self.current is None:
            return 0
        fallen = 0
        while not self.board.collides(translate(self.current, 0, fallen + 1)):
            fallen += 1
        self.current = translate(self.current, 0, fallen)
        self.drop_counter = 0.0
        self._lock_piece()
        return fallen

    def _lock_piece(self) -> int:
        assert self.current is not None
        self.board.merge(self.current)
        self.pieces_placed += 1
        lines = self.board.clear_lines()
        logger.debug("Locked %s at (%d, %d), cleared %d", self.current.color.name,
                     self.current.x, self.current.y, lines)
        self._apply_line_clear(lines)
        self.spawn_next()
        return lines

    def _apply_line_clear(self, lines: int) -> None:
        if lines <= 0:
            return
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines, self.level)
        # Checked once per clear, so a big jump still advances a single level
        if self.rules.should_level_up(self.score, self.level):
            self.level += 1
            self.drop_interval = self.rules.drop_interval(self.level)
            logger.info("Level up: level=%d interval=%dms", self.level, self.drop_interval)

    # External interface

    def handle_command(self, command: Command) -> None:
        if not self.accepts_input:
            return
        if command == Command.MOVE_LEFT:
            self.move(-1)
        elif command == Command.MOVE_RIGHT:
            self.move(1)
        elif command == Command.SOFT_DROP:
            self.soft_drop()
        elif command == Command.ROTATE:
            self.rotate()
        elif command == Command.HARD_DROP:
            self.hard_drop()

    def tick(self, elapsed_ms: float) -> None:
        if not self.accepts_input:
            return
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.drop_interval:
            self.soft_drop()

    def snapshot(self) -> GameSnapshot:
        board = self.board.clone_state()
        board.setflags(write=False)
        return GameSnapshot(
            board=board,
            current=self.current,
            next=self.next,
            score=self.score,
            level=self.level,
            drop_interval=self.drop_interval,
            lines_cleared_total=self.lines_cleared_total,
            game_over=self.game_over,
            paused=self.paused,
        )
