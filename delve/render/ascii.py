"""Pygame-based cell renderer for the dungeon."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

from delve import config

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class KeyPress:
    key: int
    mods: int = 0


class AsciiRenderer:
    """A grid of ``screen_width x screen_height`` cells in a pygame window.

    Drawing goes to an offscreen console surface; ``present()`` blits it to
    the window, flips, and clears the console for the next frame.
    """

    def __init__(self, cfg: config.GameConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.tile = cfg.tile_size
        self.width = cfg.screen_width * self.tile
        self.height = cfg.screen_height * self.tile
        self.bg = (0, 0, 0)
        self.surface = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("delve")
        self.console = pygame.Surface((self.width, self.height))
        self.console.fill(self.bg)
        self.font = pygame.font.SysFont(cfg.font_name, self.tile)
        self.clock = pygame.time.Clock()
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.tile, y * self.tile, self.tile, self.tile)

    def _glyph(self, char: str, color: Color) -> pygame.Surface:
        key = (char, color)
        surf = self._glyph_cache.get(key)
        if surf is None:
            surf = self.font.render(char, True, color)
            self._glyph_cache[key] = surf
        return surf

    # --- display collaborator ---

    def set_background(self, x: int, y: int, color: Color) -> None:
        self.console.fill(color, self._cell_rect(x, y))

    def draw_glyph(self, x: int, y: int, char: str, color: Color) -> None:
        text = self._glyph(char, color)
        rect = text.get_rect(center=self._cell_rect(x, y).center)
        self.console.blit(text, rect)

    def present(self) -> None:
        self.surface.blit(self.console, (0, 0))
        pygame.display.flip()
        self.console.fill(self.bg)
        self.clock.tick(self.cfg.limit_fps)

    def toggle_fullscreen(self) -> None:
        pygame.display.toggle_fullscreen()

    # --- input collaborator ---

    def wait_for_key(self) -> Optional[KeyPress]:
        """Block until a key is pressed. None means the window was closed."""
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN:
                return KeyPress(event.key, event.mod)

    def teardown(self) -> None:
        pygame.quit()
