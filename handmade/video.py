"""Window painting: a moving gradient, a border and debug text."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
import pygame

from handmade.resources import locate_asset
from handmade.world import Vec2, WorldState

C_WHITE = (255, 255, 255, 255)
C_BLACK = (0, 0, 0, 255)
BORDER_COLOR = (100, 0, 150, 255)
BACKGROUND_COLOR = (230, 230, 230, 255)

WINDOW_TITLE = "Handmade!"
WINDOW_SIZE = (640, 480)
DEBUG_FONT = "fonts/Hack-Regular.ttf"
DEBUG_FONT_SIZE = 12
_DEBUG_TEXT_LIMIT = 255


def paint_gradient(pos: Vec2, width: int, height: int) -> np.ndarray:
    """Return a ``(height, width, 3)`` RGB gradient offset by ``pos``."""
    x_off = np.arange(width, dtype=np.int64) - int(pos.x)
    y_off = np.arange(height, dtype=np.int64) - int(pos.y)
    image = np.empty((height, width, 3), dtype=np.uint8)
    image[:, :, 0] = (3 + x_off)[np.newaxis, :] & 0xFF
    image[:, :, 1] = (x_off[np.newaxis, :] + y_off[:, np.newaxis] + 13) & 0xFF
    image[:, :, 2] = (5 + y_off)[:, np.newaxis] & 0xFF
    return image


def format_debug_text(world: WorldState) -> str:
    """Describe the world's motion in the on-screen debug overlay."""
    text = (
        f"Position: ({world.pos.x:.1f}, {world.pos.y:.1f})\n"
        f"Velocity: ({world.vel.x:.1f}, {world.vel.y:.1f})\n"
        f"Accel: ({world.last_acc.x:.1f}, {world.last_acc.y:.1f})\n"
        f"Time: {world.time_s:.1f}"
    )
    return text[:_DEBUG_TEXT_LIMIT]


@dataclass
class VideoState:
    """The window, its off-screen buffer and the debug font."""

    window: pygame.Surface
    font: pygame.font.Font
    screen_buffer: pygame.Surface | None = None
    draw_color: tuple[int, int, int, int] = C_BLACK
    present: Callable[[], None] = pygame.display.flip

    def _resize_buffer(self, width: int, height: int) -> None:
        if self.screen_buffer is not None and self.screen_buffer.get_size() == (width, height):
            return
        self.screen_buffer = pygame.Surface((width, height))

    def render_text(
        self,
        text: str,
        x: int,
        y: int,
        color: tuple[int, int, int, int] = C_WHITE,
    ) -> pygame.Rect:
        """Draw ``text`` line by line at ``(x, y)``; return the covered area."""
        area = pygame.Rect(x, y, 0, 0)
        line_height = self.font.get_linesize()
        for row, line in enumerate(text.split("\n")):
            rendered = self.font.render(line, True, color)
            area.union_ip(self.window.blit(rendered, (x, y + row * line_height)))
        return area

    def paint_window(self, world: WorldState) -> None:
        """Paint one frame of the world and show it."""
        self.window.fill(self.draw_color)
        width, height = self.window.get_size()
        self._resize_buffer(width, height)

        pixels = paint_gradient(world.pos, width, height)
        pygame.surfarray.blit_array(self.screen_buffer, pixels.transpose(1, 0, 2))
        self.window.blit(self.screen_buffer, (0, 0))

        pygame.draw.rect(self.window, BORDER_COLOR, pygame.Rect(5, 5, width - 10, height - 10), 1)
        self.draw_color = BACKGROUND_COLOR

        self.render_text(format_debug_text(world), 10, 10, C_WHITE)
        self.present()


def init_video(asset_root: str | os.PathLike[str] | None = None) -> VideoState:
    """Open the resizable game window and load the debug font."""
    font_path = locate_asset(DEBUG_FONT, asset_root)
    pygame.font.init()
    if not pygame.font.get_init():
        raise RuntimeError("Failed to initialize the font system")
    try:
        window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    except pygame.error as exc:
        raise RuntimeError(f"Failed to open window: {exc}") from exc
    pygame.display.set_caption(WINDOW_TITLE)
    try:
        font = pygame.font.Font(str(font_path), DEBUG_FONT_SIZE)
    except (pygame.error, OSError) as exc:
        raise RuntimeError(f"Failed to load debug font: {exc}") from exc
    return VideoState(window=window, font=font)