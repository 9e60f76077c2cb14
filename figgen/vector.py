from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import InvalidGeometryError

Vec3 = Tuple[float, float, float]


# -----------------------------
# Point value type
# -----------------------------

@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y, -self.z)

    def __mul__(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)


ORIGIN = Point(0.0, 0.0, 0.0)


# -----------------------------
# Small vector utilities
# -----------------------------

def norm(p: Point) -> float:
    return math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)


def dist(a: Point, b: Point) -> float:
    return norm(b - a)


def cross(a: Point, b: Point) -> Point:
    return Point(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(p: Point) -> Point:
    """Scale ``p`` to unit length. Zero, infinite and NaN vectors have no direction."""
    length = norm(p)
    if length == 0 or not math.isfinite(length):
        raise InvalidGeometryError(f"cannot normalize vector {p.as_tuple()}")
    return (1.0 / length) * p
