from daniengine.math import Vec2
from daniengine.physics import Aabb, Body


def test_overlapping_boxes_intersect_symmetrically():
    a = Aabb(0.0, 0.0, 10.0, 10.0)
    b = Aabb(5.0, 5.0, 10.0, 10.0)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Aabb(0.0, 0.0, 10.0, 10.0)
    b = Aabb(10.0, 0.0, 10.0, 10.0)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_separated_vertically_do_not_intersect():
    a = Aabb(0.0, 0.0, 10.0, 10.0)
    b = Aabb(0.0, 20.0, 10.0, 10.0)
    assert not a.intersects(b)


def test_contained_box_intersects():
    outer = Aabb(0.0, 0.0, 100.0, 100.0)
    inner = Aabb(40.0, 40.0, 2.0, 2.0)
    assert outer.intersects(inner)
    assert inner.intersects(outer)


def test_update_with_zero_dt_keeps_position():
    body = Body(Vec2(3.0, 4.0), Vec2(60.0, 45.0), Vec2(10.0, 10.0))
    body.update(0.0)
    assert body.pos == Vec2(3.0, 4.0)


def test_two_half_steps_equal_one_full_step():
    a = Body(Vec2(1.0, 2.0), Vec2(8.0, -16.0), Vec2(1.0, 1.0))
    b = Body(Vec2(1.0, 2.0), Vec2(8.0, -16.0), Vec2(1.0, 1.0))
    a.update(0.25)
    a.update(0.25)
    b.update(0.5)
    assert a.pos == b.pos


def test_update_keeps_velocity_and_size():
    body = Body(Vec2(0.0, 0.0), Vec2(2.0, 3.0), Vec2(5.0, 6.0))
    body.update(1.0)
    assert body.vel == Vec2(2.0, 3.0)
    assert body.size == Vec2(5.0, 6.0)


def test_aabb_matches_position_and_size():
    body = Body(Vec2(7.0, 9.0), Vec2(), Vec2(18.0, 12.0))
    assert body.aabb() == Aabb(7.0, 9.0, 18.0, 12.0)