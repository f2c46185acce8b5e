import pygame

from jacksnake.collision import Rect
from jacksnake.obstacle import Obstacle


def test_vertical_layout():
    obstacle = Obstacle("K-ICM", 100, 100, 20, False, 5)
    assert len(obstacle.rects) == 5
    assert all(r.x == 100 and r.w == 20 and r.h == 20 for r in obstacle.rects)
    ys = [r.y for r in obstacle.rects]
    assert ys[0] == 100
    assert all(b - a == 20 for a, b in zip(ys, ys[1:]))


def test_horizontal_layout():
    obstacle = Obstacle("AB", 200, 200, 20, True, 5)
    assert obstacle.rects == [Rect(200, 200, 20, 20), Rect(220, 200, 20, 20)]


def test_move_horizontal_advances_by_speed():
    obstacle = Obstacle("AB", 200, 200, 20, True, 5)
    before = list(obstacle.rects)
    obstacle.move(640, 480)
    assert [r.x - b.x for r, b in zip(obstacle.rects, before)] == [5, 5]
    assert [r.y for r in obstacle.rects] == [200, 200]


def test_move_vertical_advances_by_speed():
    obstacle = Obstacle("AB", 100, 100, 20, False, 5)
    before = list(obstacle.rects)
    obstacle.move(640, 480)
    assert [r.y - b.y for r, b in zip(obstacle.rects, before)] == [5, 5]
    assert [r.x for r in obstacle.rects] == [100, 100]


def test_reverses_at_right_wall():
    obstacle = Obstacle("AB", 600, 200, 20, True, 5)
    before = list(obstacle.rects)
    obstacle.move(640, 480)
    assert obstacle.speed == -5
    assert [b.x - r.x for r, b in zip(obstacle.rects, before)] == [5, 5]


def test_reverses_at_top_wall():
    obstacle = Obstacle("AB", 100, 0, 20, False, -5)
    obstacle.move(640, 480)
    assert obstacle.speed == 5
    assert obstacle.rects[0].y == 5


def test_stays_within_screen_over_many_moves():
    obstacle = Obstacle("K-ICM", 100, 100, 20, False, 5)
    for _ in range(500):
        obstacle.move(640, 480)
        assert all(-5 <= r.y and r.y + r.h <= 485 for r in obstacle.rects)


def test_render_draws_textures_in_order():
    red = pygame.Surface((3, 3))
    red.fill((255, 0, 0))
    blue = pygame.Surface((3, 3))
    blue.fill((0, 0, 255))
    obstacle = Obstacle("AB", 200, 200, 20, True, 5, textures=[red, blue])
    screen = pygame.Surface((640, 480))
    obstacle.render(screen)
    assert screen.get_at((210, 210))[:3] == (255, 0, 0)
    assert screen.get_at((230, 210))[:3] == (0, 0, 255)