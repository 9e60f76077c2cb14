"""
Planar generators: single triangle, subdivided rectangle and box.

Cell layout used by ``subdivide`` (shown for n = 2)::

    P1 ---- P13 ---- P3
    |        |        |
    |   R1   |   R3   |
    |        |        |
    P12 ---- PM ---- P34
    |        |        |
    |   R2   |   R4   |
    |        |        |
    P2 ---- P24 ---- P4
"""
from __future__ import annotations

import logging
from typing import List

from .errors import InvalidGeometryError
from .mesh import Mesh
from .shapes import Box, Rectangle, Triangle
from .vector import cross, dist, norm, normalize

logger = logging.getLogger(__name__)

# minimum sine of the angle between the two edge directions
AREA_EPSILON = 1e-9


def split_rectangle(rect: Rectangle) -> List[Triangle]:
    """Two triangles sharing the P2-P3 diagonal, both wound like (P1, P2, P3)."""
    return [
        Triangle(rect.p1, rect.p2, rect.p3),
        Triangle(rect.p3, rect.p2, rect.p4),
    ]


def subdivide(rect: Rectangle, divisions: int) -> List[Triangle]:
    """Split ``rect`` into a ``divisions x divisions`` grid, 2 triangles per cell."""
    if divisions < 1:
        raise InvalidGeometryError(f"divisions must be >= 1 (got {divisions})")

    vw = normalize(rect.p3 - rect.p1)
    vh = normalize(rect.p2 - rect.p1)
    if norm(cross(vw, vh)) < AREA_EPSILON:
        raise InvalidGeometryError("rectangle edges P1-P2 and P1-P3 are collinear; the quad has no area")
    w = dist(rect.p3, rect.p1) / divisions
    h = dist(rect.p2, rect.p1) / divisions

    out: List[Triangle] = []
    for i in range(1, divisions + 1):
        for j in range(1, divisions + 1):
            p1 = rect.p1 + ((i - 1) * w) * vw + ((j - 1) * h) * vh
            p2 = rect.p1 + ((i - 1) * w) * vw + (j * h) * vh
            p3 = rect.p1 + (i * w) * vw + ((j - 1) * h) * vh
            p4 = rect.p1 + (i * w) * vw + (j * h) * vh
            out.extend(split_rectangle(Rectangle(p1, p2, p3, p4)))
    return out


def triangle(tri: Triangle) -> Mesh:
    return Mesh("triangle", [tri])


def rectangle(rect: Rectangle, divisions: int = 1) -> Mesh:
    mesh = Mesh("rectangle", subdivide(rect, divisions))
    logger.debug("rectangle divisions=%d -> %d triangles", divisions, len(mesh))
    return mesh


def box_faces(shape: Box) -> List[Rectangle]:
    """The six faces of ``shape`` with corners paired so every face winds outward."""
    t1, t2, t3, t4 = shape.top.p1, shape.top.p2, shape.top.p3, shape.top.p4
    b1, b2, b3, b4 = shape.bottom.p1, shape.bottom.p2, shape.bottom.p3, shape.bottom.p4
    return [
        Rectangle(t1, b1, t2, b2),  # back left
        Rectangle(t3, b3, t1, b1),  # back right
        Rectangle(b3, b4, b1, b2),  # base
        Rectangle(t2, b2, t4, b4),  # front left
        Rectangle(t4, b4, t3, b3),  # front right
        shape.top,
    ]


def box(shape: Box, divisions: int = 1) -> Mesh:
    if divisions < 1:
        raise InvalidGeometryError(f"divisions must be >= 1 (got {divisions})")
    mesh = Mesh("box")
    for face in box_faces(shape):
        mesh.add(subdivide(face, divisions))
    logger.debug("box divisions=%d -> %d triangles", divisions, len(mesh))
    return mesh
