"""Gymnasium environments for Falling Blocks RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default 10x20 falling blocks environment
register(
    id="FallingBlocks-10x20-v0",
    entry_point="falling_blocks_rl.env.falling_blocks_env:FallingBlocksEnv",
    max_episode_steps=20_000,
)

__all__ = ["FallingBlocks-10x20-v0"]
