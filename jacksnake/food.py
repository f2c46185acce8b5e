"""The food item that the snake eats."""

from __future__ import annotations

import random
from collections.abc import Sequence

import pygame

from jacksnake.collision import Rect

FIELD_WIDTH = 640
FIELD_HEIGHT = 480
CELL = 20


class Food:
    """A piece of food occupying one grid cell."""

    def __init__(self, x: int, y: int, size: int) -> None:
        self.rect = Rect(x, y, size, size)
        self.texture: pygame.Surface | None = None

    def respawn(
        self, snake_body: Sequence[Rect], rng: random.Random | None = None
    ) -> None:
        """Move to a random grid cell not covered by the snake.

        If every cell is covered the food stays where it is.
        """
        free = [
            (x, y)
            for x in range(0, FIELD_WIDTH, CELL)
            for y in range(0, FIELD_HEIGHT, CELL)
            if not any(Rect(x, y, CELL, CELL).intersects(s) for s in snake_body)
        ]
        if not free:
            return
        x, y = (rng or random).choice(free)
        self.rect = Rect(x, y, self.rect.w, self.rect.h)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the food as one grid cell, if it has a texture."""
        if self.texture is None:
            return
        scaled = pygame.transform.scale(self.texture, (CELL, CELL))
        surface.blit(scaled, (self.rect.x, self.rect.y))