"""
Shape descriptors consumed by the generators.

Every descriptor is an immutable value. Revolution shapes check their
parameters on construction, so a generator never sees a cone with two slices
or a sphere with a negative radius.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import InvalidGeometryError, MalformedInputError
from .vector import Point

PATCH_SIZE = 16

PatchIndices = Tuple[int, ...]


@dataclass(frozen=True)
class Triangle:
    p1: Point
    p2: Point
    p3: Point

    def points(self) -> Tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)


@dataclass(frozen=True)
class Rectangle:
    """
    Planar quad laid out as::

        P1 ---- P3
        |        |
        P2 ---- P4

    P1-P2 is parallel to P3-P4 and P1-P3 to P2-P4. Coplanarity is not checked.
    """

    p1: Point
    p2: Point
    p3: Point
    p4: Point


@dataclass(frozen=True)
class Box:
    top: Rectangle
    bottom: Rectangle


def _require_positive(kind: str, name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidGeometryError(f"{kind} {name} must be finite and > 0 (got {value})")


def _require_revolution(kind: str, radius: float, slices: int, stacks: int) -> None:
    _require_positive(kind, "radius", radius)
    if slices < 3:
        raise InvalidGeometryError(f"{kind} slices must be >= 3 (got {slices})")
    if stacks < 1:
        raise InvalidGeometryError(f"{kind} stacks must be >= 1 (got {stacks})")


@dataclass(frozen=True)
class Cone:
    radius: float
    height: float
    slices: int
    stacks: int

    def __post_init__(self) -> None:
        _require_revolution("cone", self.radius, self.slices, self.stacks)
        _require_positive("cone", "height", self.height)


@dataclass(frozen=True)
class Cylinder:
    radius: float
    height: float
    slices: int
    stacks: int

    def __post_init__(self) -> None:
        _require_revolution("cylinder", self.radius, self.slices, self.stacks)
        _require_positive("cylinder", "height", self.height)


@dataclass(frozen=True)
class Sphere:
    radius: float
    slices: int
    stacks: int

    def __post_init__(self) -> None:
        _require_revolution("sphere", self.radius, self.slices, self.stacks)


@dataclass(frozen=True)
class BezierSurface:
    """Control points plus patches of 16 row-major indices into them."""

    control_points: Tuple[Point, ...]
    patches: Tuple[PatchIndices, ...]

    def __post_init__(self) -> None:
        count = len(self.control_points)
        for n, patch in enumerate(self.patches):
            if len(patch) != PATCH_SIZE:
                raise MalformedInputError(
                    f"patch {n} has {len(patch)} indices, expected {PATCH_SIZE}"
                )
            for idx in patch:
                if not 0 <= idx < count:
                    raise MalformedInputError(
                        f"patch {n} references control point {idx}, "
                        f"but only {count} are defined"
                    )

    @classmethod
    def from_sequences(
        cls, control_points: Sequence[Point], patches: Sequence[Sequence[int]]
    ) -> "BezierSurface":
        return cls(tuple(control_points), tuple(tuple(p) for p in patches))


# -----------------------
# Builders
# -----------------------

def rectangle_from_wd(width: float, depth: float) -> Rectangle:
    """Rectangle centred on the origin in the XZ plane."""
    w = width / 2
    d = depth / 2
    return Rectangle(
        Point(-w, 0.0, -d),
        Point(-w, 0.0, d),
        Point(w, 0.0, -d),
        Point(w, 0.0, d),
    )


def box_from_whd(width: float, height: float, depth: float) -> Box:
    """Axis-aligned box centred on the origin."""
    w = width / 2
    h = height / 2
    d = depth / 2
    return Box(
        Rectangle(
            Point(-w, h, -d),
            Point(-w, h, d),
            Point(w, h, -d),
            Point(w, h, d),
        ),
        Rectangle(
            Point(-w, -h, -d),
            Point(-w, -h, d),
            Point(w, -h, -d),
            Point(w, -h, d),
        ),
    )
