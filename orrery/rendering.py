#!/usr/bin/env python3
"""
Pygame adapters for the simulator's drawing surface and frame clock.

PygameSurface draws discs and labels on a pygame display surface. PygameFrameClock keeps
the single pending frame callback and paces frames with pygame.time.Clock; the
application loop decides when to run it, so everything stays on one thread.
"""
import logging
from typing import Callable, Dict, Optional, Tuple

import pygame
from pygame import gfxdraw

from .constants import (
    BACKGROUND_COLOR,
    DEFAULT_FPS,
    FALLBACK_BODY_COLOR,
    LABEL_COLOR,
    LABEL_FONT_SIZE,
    SAFE_COORD_LIMIT,
)
from .data_models import Color

logger = logging.getLogger(__name__)


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(round(pt[0])), int(round(pt[1]))
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameSurface:
    """
    DrawSurface backed by a pygame Surface.
    """

    def __init__(self, surface: "pygame.Surface", background=BACKGROUND_COLOR,
                 label_color=LABEL_COLOR, font_size: int = LABEL_FONT_SIZE):
        self.surface = surface
        self.background = background
        self.label_color = label_color
        self.font_size = font_size
        self._font = None
        self._colors: Dict[Color, pygame.Color] = {}

    def resolve_color(self, color: Color) -> pygame.Color:
        """Colour name or RGB tuple to a pygame.Color; unknown names fall back to a default."""
        key = color if isinstance(color, str) else tuple(color)
        cached = self._colors.get(key)
        if cached is not None:
            return cached
        try:
            resolved = pygame.Color(color) if isinstance(color, str) else pygame.Color(*key)
        except (ValueError, TypeError):
            logger.warning("Unknown color %r, using fallback", color)
            resolved = pygame.Color(*FALLBACK_BODY_COLOR)
        self._colors[key] = resolved
        return resolved

    @property
    def font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._font = pygame.font.SysFont("arial", self.font_size)
            except (pygame.error, OSError):
                self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def clear(self) -> None:
        self.surface.fill(self.background)

    def draw_disc(self, center, radius, color) -> None:
        pos = _safe_point(center)
        if pos is None:
            return
        r = max(1, int(round(radius)))
        c = self.resolve_color(color)
        gfxdraw.filled_circle(self.surface, pos[0], pos[1], r, c)
        gfxdraw.aacircle(self.surface, pos[0], pos[1], r, c)

    def draw_label(self, text: str, position) -> None:
        pos = _safe_point(position)
        if pos is None:
            return
        img = self.font.render(text, True, self.label_color)
        # Vertically centre on the anchor so the label sits beside the disc
        self.surface.blit(img, (pos[0], pos[1] - img.get_height() // 2))


class PygameFrameClock:
    """
    FrameClock that holds the next frame callback until the loop asks for it.
    """

    def __init__(self, fps: int = DEFAULT_FPS):
        self.fps = fps
        self._pending: Optional[Callable[[], None]] = None
        self._clock = pygame.time.Clock()

    def schedule_next(self, callback: Callable[[], None]) -> None:
        self._pending = callback

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def run_pending(self) -> bool:
        """Run the scheduled callback once. Returns False if nothing was scheduled."""
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback()
        return True

    def wait(self) -> int:
        """Sleep until the next frame is due; returns milliseconds since the last call."""
        return self._clock.tick(self.fps)
