from __future__ import annotations

import numpy as np

from .pieces import Piece


class Board:
    """Fixed-size well of locked cells.

    The grid uses 0 for empty cells and ``Color`` values for locked ones. Row 0 is
    the top of the well. Pieces may hang above it (negative ``y``) while spawning.
    """

    def __init__(self, cols: int, rows: int) -> None:
        self.cols = int(cols)
        self.rows = int(rows)
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def collides(self, piece: Piece) -> bool:
        for x, y in piece.cells():
            if x < 0 or x >= self.cols or y >= self.rows:
                return True
            # Rows above the well only matter for the side walls
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def merge(self, piece: Piece) -> None:
        value = int(piece.color)
        for x, y in piece.cells():
            if y >= 0:
                self.grid[y, x] = value

    def clear_lines(self) -> int:
        """Remove full rows, shift the rest down and return how many were removed."""
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.cols), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def is_empty(self) -> bool:
        return not self.grid.any()

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.rows - int(non_empty_rows[0])

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.cols):
            seen_block = False
            for cell in self.grid[:, x]:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
