from __future__ import annotations

import argparse

import gymnasium as gym
import pygame

import falling_blocks_rl.env  # ensure registration
from falling_blocks_rl.visualization.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--steps", type=int, default=5000)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    from stable_baselines3 import PPO

    env = gym.make("FallingBlocks-10x20-v0")
    model = PPO.load(args.model, device="auto")

    game = env.unwrapped.game
    renderer = Renderer(cell_size=24)

    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size(game.config.cols, game.config.rows))
        pygame.display.set_caption("Falling Blocks - Agent Eval")
        clock = pygame.time.Clock()

        obs, info = env.reset(seed=args.seed)
        total_reward = 0.0
        episodes = 0
        steps = 0
        while steps < args.steps:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return

            action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            steps += 1

            renderer.draw(screen, env.unwrapped.game.snapshot())
            pygame.display.flip()
            clock.tick(args.fps)

            if terminated or truncated:
                episodes += 1
                print(f"Episode {episodes}: score={info['score']} level={info['level']} "
                      f"lines={info['lines_cleared_total']}")
                obs, info = env.reset()
        print(f"{steps} steps, {episodes} finished episodes, total reward {total_reward:.1f}")
    finally:
        pygame.quit()
        env.close()


if __name__ == "__main__":  # pragma: no cover
    main()
