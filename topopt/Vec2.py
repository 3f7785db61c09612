import math


class Vec2:
    """Immutable 2D vector. Every operation returns a new Vec2."""

    __slots__ = ("_x", "_y")

    def __init__(self, x=0.0, y=0.0):
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def add(self, other):
        return Vec2(self._x + other.x, self._y + other.y)

    def subtract(self, other):
        return Vec2(self._x - other.x, self._y - other.y)

    def scale_by(self, scalar):
        return Vec2(self._x * scalar, self._y * scalar)

    def magnitude(self):
        return math.hypot(self._x, self._y)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, scalar):
        return self.scale_by(scalar)

    def __rmul__(self, scalar):
        return self.scale_by(scalar)

    def __truediv__(self, scalar):
        return Vec2(self._x / scalar, self._y / scalar)

    def __neg__(self):
        return Vec2(-self._x, -self._y)

    def normalize(self):
        l = self.magnitude()
        if l > 0.0:
            return Vec2(self._x / l, self._y / l)
        return Vec2(0.0, 0.0)

    def clamp(self, minv, maxv):
        """Clamp each component independently into [minv, maxv]."""
        return Vec2(min(max(self._x, minv.x), maxv.x),
                    min(max(self._y, minv.y), maxv.y))

    def to_tuple(self):
        return (self._x, self._y)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self._x == other.x and self._y == other.y

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Vec2({self._x:g}, {self._y:g})"
