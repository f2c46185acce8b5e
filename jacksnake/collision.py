"""Axis-aligned rectangles and the collision checks that end a round."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An integer rectangle on the playing field."""

    x: int
    y: int
    w: int
    h: int

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share any area.

        Empty rectangles never intersect, and rectangles that only touch
        along an edge do not count as intersecting.
        """
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )


def check_wall_collision(head: Rect, screen_width: int, screen_height: int) -> bool:
    """Return True if the head's origin lies outside the screen."""
    return not (0 <= head.x < screen_width and 0 <= head.y < screen_height)


def check_self_collision(body: Sequence[Rect]) -> bool:
    """Return True if the first segment overlaps any later segment."""
    if not body:
        return False
    head = body[0]
    return any(head.intersects(segment) for segment in body[1:])