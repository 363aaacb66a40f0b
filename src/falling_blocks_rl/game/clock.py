from __future__ import annotations

from typing import Optional

from .core import FallingBlocksGame


class TickDriver:
    """Feeds wall-clock frame timestamps to the engine as elapsed-time ticks.

    The first frame after a start or a resume only sets the baseline, so time
    spent paused never turns into one large gravity step.
    """

    def __init__(self, game: FallingBlocksGame) -> None:
        self.game = game
        self.last_ms: Optional[float] = None

    def restart(self) -> None:
        self.last_ms = None

    def advance(self, now_ms: float) -> float:
        if self.game.consume_resume():
            self.last_ms = None
        if self.game.paused or self.game.game_over:
            self.last_ms = None
            return 0.0
        if self.last_ms is None:
            delta = 0.0
        else:
            delta = max(0.0, now_ms - self.last_ms)
        self.last_ms = now_ms
        self.game.tick(delta)
        return delta
