from __future__ import annotations

import gymnasium as gym
import numpy as np
import pytest

import falling_blocks_rl.env  # noqa: F401
from falling_blocks_rl.env.falling_blocks_env import NOOP_ACTION, FallingBlocksEnv
from falling_blocks_rl.game import Command, Status


def test_reset_starts_game_with_piece_overlay():
    env = FallingBlocksEnv()
    obs, info = env.reset(seed=0)
    assert env.game.status is Status.RUNNING
    assert obs["board"].shape == (20, 10)
    assert np.count_nonzero(obs["board"] == 2) == 4
    assert 1 <= obs["next_piece"] <= 7
    assert env.observation_space.contains(obs)
    assert info["score"] == 0


def test_same_seed_same_pieces():
    a, b = FallingBlocksEnv(), FallingBlocksEnv()
    obs_a, _ = a.reset(seed=42)
    obs_b, _ = b.reset(seed=42)
    assert np.array_equal(obs_a["board"], obs_b["board"])
    assert obs_a["next_piece"] == obs_b["next_piece"]


def test_step_applies_command_and_gravity():
    env = FallingBlocksEnv(frame_ms=600.0)
    env.reset(seed=1)
    x0 = env.game.current.x
    env.step(int(Command.MOVE_LEFT))
    assert env.game.current.x == x0 - 1
    assert env.game.current.y == 0
    obs, reward, terminated, truncated, info = env.step(NOOP_ACTION)
    assert env.game.current.y == 1
    assert not terminated and not truncated
    assert "reward_components" in info


def test_hard_drops_terminate_episode():
    env = FallingBlocksEnv()
    env.reset(seed=5)
    terminated = False
    reward = 0.0
    for _ in range(200):
        obs, reward, terminated, truncated, info = env.step(int(Command.HARD_DROP))
        if terminated:
            break
    assert terminated
    assert reward <= env.terminal_penalty
    assert not (obs["board"] == 2).any()


def test_invalid_action_raises():
    env = FallingBlocksEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(99)


def test_rgb_render():
    env = FallingBlocksEnv(render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8


def test_registered_env_runs():
    env = gym.make("FallingBlocks-10x20-v0")
    obs, info = env.reset(seed=3)
    obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
    assert isinstance(reward, float)
    env.close()
