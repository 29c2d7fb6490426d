import pytest

from daniengine.math import Vec2


def test_default_is_origin():
    assert Vec2() == Vec2(0.0, 0.0)


def test_add_is_commutative():
    a = Vec2(1.5, -2.25)
    b = Vec2(0.5, 4.0)
    assert a.add(b) == b.add(a)


def test_add_zero_is_identity():
    v = Vec2(3.5, -7.25)
    assert v.add(Vec2()) == v


def test_mul_by_one_is_identity():
    v = Vec2(3.5, -7.25)
    assert v.mul(1.0) == v


def test_mul_by_zero_gives_origin():
    assert Vec2(3.5, -7.25).mul(0.0) == Vec2()


@pytest.mark.parametrize("x, y", [(1.0, 2.0), (-0.5, 8.0), (0.0, 0.0)])
def test_self_add_equals_double(x, y):
    v = Vec2(x, y)
    assert v.add(v) == v.mul(2.0)


def test_operations_do_not_mutate():
    v = Vec2(1.0, 2.0)
    v.add(Vec2(5.0, 5.0))
    v.mul(3.0)
    assert v == Vec2(1.0, 2.0)