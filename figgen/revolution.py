r"""
Surfaces of revolution around the Y axis: cone, cylinder and sphere.

Cone and cylinder walk ``slices`` angular steps of 2*pi/slices and emit a ring
of triangles per step. Ring points sit at (r*sin(k*a), y, r*cos(k*a)).

Cone profile::

          ^
         /|\
        / | \
       /  |  \     <- stack j at y_j = h*j/stacks, radius r_j = r*(stacks-j)/stacks
      /  h|   \
     /    |    \
    ------+------
       r

The topmost stack is a single tip triangle per slice reaching the apex.
"""
from __future__ import annotations

import logging
import math
from typing import List

from .mesh import Mesh
from .planar import split_rectangle
from .shapes import Cone, Cylinder, Rectangle, Sphere, Triangle
from .vector import ORIGIN, Point, normalize

logger = logging.getLogger(__name__)


def _ring_point(r: float, angle: float, y: float) -> Point:
    return Point(r * math.sin(angle), y, r * math.cos(angle))


def cone(c: Cone) -> Mesh:
    a = 2 * math.pi / c.slices
    st = float(c.stacks)
    apex = Point(0.0, c.height, 0.0)
    tip_r = c.radius / st
    tip_h = c.height * (st - 1) / st

    mesh = Mesh("cone")
    for i in range(c.slices):
        a0 = i * a
        a1 = (i + 1) * a

        mesh.add([
            Triangle(apex, _ring_point(tip_r, a0, tip_h), _ring_point(tip_r, a1, tip_h)),
            Triangle(_ring_point(c.radius, a0, 0.0), ORIGIN, _ring_point(c.radius, a1, 0.0)),
        ])

        for j in range(c.stacks - 1):
            y = c.height * j / st
            y1 = c.height * (j + 1) / st
            r = c.radius * (st - j) / st
            r1 = c.radius * (st - j - 1) / st
            mesh.add(split_rectangle(Rectangle(
                _ring_point(r1, a0, y1),
                _ring_point(r, a0, y),
                _ring_point(r1, a1, y1),
                _ring_point(r, a1, y),
            )))

    logger.debug("cone slices=%d stacks=%d -> %d triangles", c.slices, c.stacks, len(mesh))
    return mesh


def cylinder(c: Cylinder) -> Mesh:
    a = 2 * math.pi / c.slices
    half = c.height / 2
    dh = c.height / c.stacks
    bottom = Point(0.0, -half, 0.0)
    top = Point(0.0, half, 0.0)

    mesh = Mesh("cylinder")
    for i in range(c.slices):
        base0 = _ring_point(c.radius, i * a, -half)
        base1 = _ring_point(c.radius, (i + 1) * a, -half)

        # base and top fans wind in opposite directions
        mesh.add([Triangle(base0, bottom, base1)])

        for j in range(c.stacks):
            lo = Point(0.0, j * dh, 0.0)
            hi = Point(0.0, (j + 1) * dh, 0.0)
            mesh.add(split_rectangle(Rectangle(base0 + hi, base0 + lo, base1 + hi, base1 + lo)))

        top0 = _ring_point(c.radius, i * a, half)
        top1 = _ring_point(c.radius, (i + 1) * a, half)
        mesh.add([Triangle(top, top0, top1)])

    logger.debug("cylinder slices=%d stacks=%d -> %d triangles", c.slices, c.stacks, len(mesh))
    return mesh


def _sphere_grid(s: Sphere) -> List[Point]:
    # (stacks + 1) rows of (slices + 1) vertices, longitude fastest
    verts: List[Point] = []
    for i in range(s.stacks + 1):
        lat = i / s.stacks * math.pi
        clat, slat = math.cos(lat), math.sin(lat)
        for j in range(s.slices + 1):
            lon = j / s.slices * 2 * math.pi
            clon, slon = math.cos(lon), math.sin(lon)
            verts.append(Point(s.radius * clon * slat, s.radius * clat, s.radius * slon * slat))
    return verts


def _sphere_walk(grid: List[Point], slices: int, stacks: int) -> List[Triangle]:
    last = len(grid) - 1

    def at(k: int) -> Point:
        # the walk runs past the final row when slices > stacks; clamp onto the pole
        return grid[min(k, last)]

    out: List[Triangle] = []
    for i in range(slices * stacks + slices):
        p1 = at(i)
        p2 = at(i + slices + 1)
        p3 = at(i + slices)
        p4 = at(i + 1)
        out.append(Triangle(p1, p2, p3))
        out.append(Triangle(p2, p1, p4))
    return out


def sphere(s: Sphere) -> Mesh:
    """
    UV sphere centred on the origin, with per-vertex normals.

    The normals list mirrors the triangle list index-for-index: both are
    produced by the same walk, once over positions and once over normals.
    """
    verts = _sphere_grid(s)
    normals = [normalize(v) for v in verts]

    mesh = Mesh(
        "sphere",
        _sphere_walk(verts, s.slices, s.stacks),
        _sphere_walk(normals, s.slices, s.stacks),
    )
    logger.debug("sphere slices=%d stacks=%d -> %d triangles", s.slices, s.stacks, len(mesh))
    return mesh
