from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks_rl.game import Color, Command, FallingBlocksGame, GameConfig

# Actions 0..4 are the engine commands; the last one lets gravity act alone
NOOP_ACTION = len(Command)


class FallingBlocksEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 frame_ms: float = 1000.0 / 60.0,
                 reward_weights: Optional[Dict[str, float]] = None,
                 terminal_penalty: float = -10.0) -> None:
        super().__init__()
        self.game = FallingBlocksGame(config)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.terminal_penalty = float(terminal_penalty)
        self.reward_weights: Dict[str, float] = {
            "score": 0.01,   # reward per engine score point
            "holes": 0.5,    # penalize holes created
            "height": 0.1,   # penalize max height increase
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        rows, cols = self.game.config.rows, self.game.config.cols

        # 0 empty, 1 locked, 2 falling piece
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8),
                "next_piece": spaces.Discrete(len(Color) + 1),
                "level": spaces.Box(low=1, high=np.iinfo(np.int32).max, shape=(1,), dtype=np.int32),
            }
        )
        self.action_space = spaces.Discrete(NOOP_ACTION + 1)

    def _get_obs(self) -> Dict[str, Any]:
        board = (self.game.board.grid != 0).astype(np.int8)
        piece = self.game.current
        if piece is not None and not self.game.game_over:
            for x, y in piece.cells():
                if 0 <= y < self.game.board.rows and 0 <= x < self.game.board.cols:
                    board[y, x] = 2
        nxt = self.game.next
        return {
            "board": board,
            "next_piece": int(nxt.color) if nxt is not None else 0,
            "level": np.array([self.game.level], dtype=np.int32),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_placed": self.game.pieces_placed,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.start()
        obs = self._get_obs()
        return obs, self._get_info()

    def step(self, action):
        action = int(action)
        if not self.action_space.contains(action):
            raise ValueError(f"invalid action {action!r}")

        score_before = self.game.score
        holes_before = self.game.board.count_holes()
        height_before = self.game.board.get_max_height()

        if action != NOOP_ACTION:
            self.game.handle_command(Command(action))
        self.game.tick(self.frame_ms)

        reward_components: Dict[str, float] = {
            "score": self.reward_weights["score"] * float(self.game.score - score_before),
            "holes": -self.reward_weights["holes"] * float(
                max(0, self.game.board.count_holes() - holes_before)),
            "height": -self.reward_weights["height"] * float(
                max(0, self.game.board.get_max_height() - height_before)),
        }
        terminated = bool(self.game.game_over)
        if terminated:
            reward_components["terminal"] = self.terminal_penalty
        reward = float(sum(reward_components.values()))

        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        return obs, reward, terminated, False, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.game.board.clone_state()
        piece = self.game.current
        if piece is not None:
            for x, y in piece.cells():
                if 0 <= y < grid.shape[0] and 0 <= x < grid.shape[1]:
                    grid[y, x] = int(piece.color)
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = int(grid[y, x])
                color = Color(v).rgb if v else (30, 30, 36)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
