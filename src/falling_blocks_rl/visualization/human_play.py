from __future__ import annotations

import argparse
import logging
from typing import Dict

import pygame

from falling_blocks_rl.game import Command, FallingBlocksGame, GameConfig, TickDriver
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play falling blocks with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO")
    return p


def run(seed: int | None = None, cell_size: int = 30, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(GameConfig(random_seed=seed))
        driver = TickDriver(game)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.config.cols, game.config.rows))
        pygame.display.set_caption("Falling Blocks - Human Play")

        game.start()
        driver.restart()
        reported = False

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        logger.info("Restarting game")
                        game.start()
                        driver.restart()
                        reported = False
                    elif event.key == pygame.K_p:
                        game.toggle_pause()
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.handle_command(command)

            driver.advance(pygame.time.get_ticks())

            if game.game_over and not reported:
                print(f"Game over! Score: {game.score}  Level: {game.level}  Lines: {game.lines_cleared_total}")
                reported = True

            renderer.draw(screen, game.snapshot())
            pygame.display.flip()
            clock.tick(fps)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
