"""Unit tests for Vec2."""

import pytest

from topopt.Vec2 import Vec2


class TestArithmetic:

    def test_add_subtract(self):
        a = Vec2(1, 2)
        b = Vec2(3, -1)
        assert a.add(b) == Vec2(4, 1)
        assert a.subtract(b) == Vec2(-2, 3)
        assert a + b == Vec2(4, 1)
        assert a - b == Vec2(-2, 3)

    def test_scale(self):
        v = Vec2(1.5, -2)
        assert v.scale_by(2) == Vec2(3, -4)
        assert v * 2 == Vec2(3, -4)
        assert 2 * v == Vec2(3, -4)
        assert v / 2 == Vec2(0.75, -1)
        assert -v == Vec2(-1.5, 2)

    def test_operations_return_new_values(self):
        a = Vec2(1, 1)
        b = a + Vec2(1, 0)
        assert a == Vec2(1, 1)
        assert b is not a


class TestMagnitude:

    def test_pythagorean(self):
        assert Vec2(3, 4).magnitude() == pytest.approx(5.0)

    def test_zero(self):
        assert Vec2().magnitude() == 0.0

    def test_never_negative(self):
        assert Vec2(-3, -4).magnitude() == pytest.approx(5.0)

    def test_normalize(self):
        n = Vec2(0, -2).normalize()
        assert n == Vec2(0, -1)
        assert Vec2(0, 0).normalize() == Vec2(0, 0)


class TestValueSemantics:

    def test_immutable(self):
        v = Vec2(1, 2)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_hash_and_unpack(self):
        assert hash(Vec2(1, 2)) == hash(Vec2(1.0, 2.0))
        x, y = Vec2(1, 2)
        assert (x, y) == (1.0, 2.0)
        assert Vec2(1, 2).to_tuple() == (1.0, 2.0)

    def test_not_equal_to_other_types(self):
        assert Vec2(1, 2) != (1, 2)
        assert Vec2(1, 2) != None  # noqa: E711

    def test_clamp(self):
        lo, hi = Vec2(-1, -1), Vec2(1, 1)
        assert Vec2(2, -3).clamp(lo, hi) == Vec2(1, -1)
        assert Vec2(0.5, 0.25).clamp(lo, hi) == Vec2(0.5, 0.25)
