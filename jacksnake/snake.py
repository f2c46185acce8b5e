"""The snake, Jack: a chain of grid segments led by its head."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

import pygame

from jacksnake.collision import Rect, check_self_collision

log = logging.getLogger(__name__)

STEP = 20
START = Rect(100, 100, 20, 20)


class Direction(Enum):
    """A heading, as a unit vector in screen coordinates."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Jack:
    """The player's snake."""

    def __init__(self) -> None:
        self.body: list[Rect] = [START]
        self.x_vel = STEP
        self.y_vel = 0
        self.dead = False
        self.head_texture: pygame.Surface | None = None
        self.body_texture: pygame.Surface | None = None

    @property
    def head(self) -> Rect:
        return self.body[0]

    def turn(self, direction: Direction) -> None:
        """Head in a new direction unless it would reverse onto the body."""
        dx, dy = direction.value
        new_vel = (dx * STEP, dy * STEP)
        if (self.x_vel, self.y_vel) == (-new_vel[0], -new_vel[1]):
            return
        self.x_vel, self.y_vel = new_vel

    def move(self) -> None:
        """Advance one step: each segment takes the place of the one before."""
        head = self.body[0]
        new_head = replace(head, x=head.x + self.x_vel, y=head.y + self.y_vel)
        self.body = [new_head, *self.body[:-1]]

    def grow(self) -> None:
        """Add a segment on top of the tail; it separates on the next move."""
        self.body.append(self.body[-1])

    def check_self_collision(self) -> bool:
        """Mark the snake dead if its head overlaps its body; return the flag."""
        if check_self_collision(self.body):
            log.info("Jack hit his own tail")
            self.dead = True
        return self.dead

    def render(self, surface: pygame.Surface) -> None:
        """Draw the head and body segments onto the surface."""
        for index, segment in enumerate(self.body):
            texture = self.head_texture if index == 0 else self.body_texture
            if texture is None:
                continue
            scaled = pygame.transform.scale(texture, (segment.w, segment.h))
            surface.blit(scaled, (segment.x, segment.y))