"""Moving obstacles spelled out as a row or column of letter tiles."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from jacksnake.collision import Rect


class Obstacle:
    """A line of tiles, one per character, that bounces between the walls."""

    def __init__(
        self,
        text: str,
        start_x: int,
        start_y: int,
        size: int,
        move_horizontal: bool,
        speed: int,
        textures: Sequence[pygame.Surface] | None = None,
    ) -> None:
        self.move_horizontal = move_horizontal
        self.speed = speed
        self.textures: list[pygame.Surface] = list(textures or [])
        if move_horizontal:
            self.rects = [
                Rect(start_x + i * size, start_y, size, size) for i in range(len(text))
            ]
        else:
            self.rects = [
                Rect(start_x, start_y + i * size, size, size) for i in range(len(text))
            ]

    def _touches_wall(self, rect: Rect, screen_width: int, screen_height: int) -> bool:
        if self.move_horizontal:
            return rect.x <= 0 or rect.x + rect.w >= screen_width
        return rect.y <= 0 or rect.y + rect.h >= screen_height

    def move(self, screen_width: int, screen_height: int) -> None:
        """Step along the axis, reversing first if any tile touches a wall."""
        if any(self._touches_wall(r, screen_width, screen_height) for r in self.rects):
            self.speed = -self.speed
        if self.move_horizontal:
            self.rects = [Rect(r.x + self.speed, r.y, r.w, r.h) for r in self.rects]
        else:
            self.rects = [Rect(r.x, r.y + self.speed, r.w, r.h) for r in self.rects]

    def render(self, surface: pygame.Surface) -> None:
        """Draw each tile with its texture."""
        for texture, rect in zip(self.textures, self.rects):
            scaled = pygame.transform.scale(texture, (rect.w, rect.h))
            surface.blit(scaled, (rect.x, rect.y))