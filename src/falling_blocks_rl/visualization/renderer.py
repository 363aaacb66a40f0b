from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_blocks_rl.game import Color, GameSnapshot, Piece


BACKGROUND = (10, 10, 14)
WELL = (30, 30, 36)
EMPTY = (20, 20, 26)
TEXT = (230, 230, 230)


def _color_for_value(v: int) -> Tuple[int, int, int]:
    if v == 0:
        return EMPTY
    return Color(v).rgb


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 6) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, cols: int, rows: int) -> Tuple[int, int]:
        width = self.margin * 3 + (cols + self.panel_cells) * self.cell_size
        height = self.margin * 2 + rows * self.cell_size
        return width, height

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _block(self, surf: pygame.Surface, x: int, y: int, color: Tuple[int, int, int],
               offset: Tuple[int, int] = (0, 0)) -> None:
        rect = pygame.Rect(
            offset[0] + x * self.cell_size,
            offset[1] + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )
        pygame.draw.rect(surf, color, rect)

    def _board_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        h, w = snapshot.board.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill(WELL)
        for y in range(h):
            for x in range(w):
                self._block(surf, x, y, _color_for_value(int(snapshot.board[y, x])))
        piece = snapshot.current
        if piece is not None:
            for x, y in piece.cells():
                if 0 <= y < h and 0 <= x < w:
                    self._block(surf, x, y, piece.color.rgb)
        return surf

    def _draw_preview(self, screen: pygame.Surface, piece: Optional[Piece], origin: Tuple[int, int]) -> None:
        box = self.panel_cells * self.cell_size
        pygame.draw.rect(screen, WELL, pygame.Rect(origin[0], origin[1], box, box))
        if piece is None:
            return
        # Centre the shape inside the preview box
        off_x = origin[0] + (box - piece.width * self.cell_size) // 2
        off_y = origin[1] + (box - piece.height * self.cell_size) // 2
        for py in range(piece.height):
            for px in range(piece.width):
                if piece.shape[py, px]:
                    self._block(screen, px, py, piece.color.rgb, (off_x, off_y))

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        screen.fill(BACKGROUND)
        board_surf = self._board_surface(snapshot)
        screen.blit(board_surf, (self.margin, self.margin))

        panel_x = self.margin * 2 + board_surf.get_width()
        self._draw_preview(screen, snapshot.next, (panel_x, self.margin))

        font = self._font_obj()
        y_text = self.margin * 2 + self.panel_cells * self.cell_size
        lines = [
            f"Score: {snapshot.score}",
            f"Level: {snapshot.level}",
            f"Lines: {snapshot.lines_cleared_total}",
            "P: pause  R: restart",
        ]
        for i, txt in enumerate(lines):
            screen.blit(font.render(txt, True, TEXT), (panel_x, y_text + i * 26))

        if snapshot.paused:
            self._banner(screen, "Paused")
        elif snapshot.game_over:
            self._banner(screen, f"Game Over - score {snapshot.score}")

    def _banner(self, screen: pygame.Surface, message: str) -> None:
        text = self._font_obj().render(message, True, (255, 100, 100))
        rect = text.get_rect(center=(screen.get_width() // 2, self.margin // 2 + 2))
        screen.blit(text, rect)
