import pytest

from jacksnake.collision import Rect, check_self_collision, check_wall_collision


def test_overlapping_rects_intersect():
    a = Rect(100, 100, 20, 20)
    b = Rect(110, 110, 20, 20)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Rect(100, 100, 20, 20)
    assert not a.intersects(Rect(120, 100, 20, 20))
    assert not a.intersects(Rect(100, 120, 20, 20))


def test_identical_rects_intersect():
    assert Rect(0, 0, 20, 20).intersects(Rect(0, 0, 20, 20))


@pytest.mark.parametrize("empty", [Rect(100, 100, 0, 20), Rect(100, 100, 20, 0)])
def test_empty_rect_never_intersects(empty):
    assert not empty.intersects(Rect(90, 90, 40, 40))
    assert not Rect(90, 90, 40, 40).intersects(empty)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, False),
        (620, 460, False),
        (-20, 100, True),
        (100, -20, True),
        (640, 100, True),
        (100, 480, True),
    ],
)
def test_wall_collision(x, y, expected):
    assert check_wall_collision(Rect(x, y, 20, 20), 640, 480) is expected


def test_self_collision_detects_overlap():
    body = [Rect(100, 100, 20, 20), Rect(80, 100, 20, 20), Rect(100, 100, 20, 20)]
    assert check_self_collision(body)


def test_self_collision_false_for_straight_body():
    body = [Rect(100, 100, 20, 20), Rect(80, 100, 20, 20), Rect(60, 100, 20, 20)]
    assert not check_self_collision(body)


def test_self_collision_single_segment_and_empty():
    assert not check_self_collision([Rect(100, 100, 20, 20)])
    assert not check_self_collision([])