"""Simple ``pygame`` window for drawing grid cells and text."""

from __future__ import annotations

import pygame

from ..config import CONFIG


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int] | None = None, *, resizable: bool = True) -> None:
        if size is None:
            size = CONFIG.gui.window_size

        self.size = (int(size[0]), int(size[1]))
        flags = pygame.RESIZABLE if resizable else 0

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size, flags)
        pygame.display.set_caption("Grid Pathfinder")

        try:
            self._font = pygame.font.SysFont(None, 20)
        except pygame.error:
            self._font = pygame.font.Font(None, 20)

    def resize(self, size: tuple[int, int]) -> None:
        self.size = (int(size[0]), int(size[1]))

    def draw_rect(
        self, x: int, y: int, w: int, h: int, colour: tuple[int, int, int]
    ) -> None:
        pygame.draw.rect(self._surface, colour, (x, y, w, h))

    def draw_text(
        self, text: str, x: int, y: int, colour: tuple[int, int, int] = (255, 255, 255)
    ) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: tuple[int, int, int] = (0, 0, 0)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
