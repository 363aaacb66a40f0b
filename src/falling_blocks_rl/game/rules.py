from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_points: int = 100
    level_threshold: int = 1000
    base_interval_ms: int = 1000
    interval_step_ms: int = 100
    min_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_points * level

    def should_level_up(self, score: int, level: int) -> bool:
        return score >= level * self.level_threshold

    def drop_interval(self, level: int) -> int:
        """Milliseconds between forced drops at `level`."""
        return max(self.min_interval_ms, self.base_interval_ms - (level - 1) * self.interval_step_ms)
