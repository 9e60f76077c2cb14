import math
import warnings
from pathlib import Path

import pytest

from figgen import revolution
from figgen.errors import InvalidGeometryError
from figgen.revolution import cone, cylinder, sphere
from figgen.shapes import Cone, Cylinder, Sphere
from figgen.vector import norm


def _outward(t):
    a = t.p2 - t.p1
    b = t.p3 - t.p1
    n = (a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)
    c = (t.p1 + t.p2 + t.p3) * (1 / 3)
    return n[0] * c.x + n[1] * c.y + n[2] * c.z


# -----------------------
# Cylinder
# -----------------------

def test_cylinder_triangle_count():
    mesh = cylinder(Cylinder(1, 2, 4, 1))
    assert mesh.kind == "cylinder"
    assert len(mesh) == 16


@pytest.mark.parametrize("slices,stacks", [(3, 1), (8, 3), (17, 5)])
def test_cylinder_counts(slices, stacks):
    assert len(cylinder(Cylinder(0.5, 3, slices, stacks))) == slices * (2 + 2 * stacks)


def test_cylinder_extent_and_radius():
    mesh = cylinder(Cylinder(1.5, 4, 12, 3))
    (x0, y0, z0), (x1, y1, z1) = mesh.bounds()
    assert y0 == pytest.approx(-2) and y1 == pytest.approx(2)
    assert x1 == pytest.approx(1.5)
    for p in mesh.vertices():
        r = math.hypot(p.x, p.z)
        assert r == pytest.approx(0.0, abs=1e-12) or r == pytest.approx(1.5)


def test_cylinder_slice_order():
    mesh = cylinder(Cylinder(1, 2, 4, 2))
    # per slice: base fan, two triangles per stack, top fan
    base, top = mesh.triangles[0], mesh.triangles[5]
    assert base.p2.y == pytest.approx(-1) and base.p2.x == 0 and base.p2.z == 0
    assert top.p1.y == pytest.approx(1) and top.p1.x == 0 and top.p1.z == 0


def test_cylinder_faces_point_outward():
    mesh = cylinder(Cylinder(1, 2, 10, 3))
    assert all(_outward(t) > 0 for t in mesh.triangles)


# -----------------------
# Cone
# -----------------------

@pytest.mark.parametrize("slices,stacks", [(3, 1), (4, 2), (10, 10)])
def test_cone_counts(slices, stacks):
    assert len(cone(Cone(1, 2, slices, stacks))) == 2 * slices * stacks


def test_cone_apex_and_base():
    mesh = cone(Cone(2, 3, 8, 4))
    (x0, y0, z0), (x1, y1, z1) = mesh.bounds()
    assert y0 == 0 and y1 == pytest.approx(3)
    assert x1 == pytest.approx(2)
    tip = mesh.triangles[0]
    assert tip.p1.y == 3
    assert math.hypot(tip.p2.x, tip.p2.z) == pytest.approx(0.5)
    assert tip.p2.y == pytest.approx(2.25)


def test_cone_profile_radius_shrinks_with_height():
    c = Cone(1, 1, 6, 5)
    for p in cone(c).vertices():
        if 0 < p.y < c.height:
            # every ring sits on the fraction-of-radius profile
            stack = round(p.y * c.stacks)
            r = math.hypot(p.x, p.z)
            assert r == pytest.approx(c.radius * (c.stacks - stack) / c.stacks)


def test_cone_single_stack_is_a_plain_cone():
    mesh = cone(Cone(1, 1, 5, 1))
    assert len(mesh) == 10
    tip = mesh.triangles[0]
    assert tip.p2.y == 0
    assert math.hypot(tip.p2.x, tip.p2.z) == pytest.approx(1)


def test_cone_lateral_faces_point_outward():
    mesh = cone(Cone(1, 2, 12, 4))
    for t in mesh.triangles:
        if t.p1.y == 0 and t.p2.y == 0 and t.p3.y == 0:
            continue  # base fan
        a = t.p2 - t.p1
        b = t.p3 - t.p1
        nx = a.y * b.z - a.z * b.y
        nz = a.x * b.y - a.y * b.x
        c = (t.p1 + t.p2 + t.p3) * (1 / 3)
        assert nx * c.x + nz * c.z > 0


# -----------------------
# Sphere
# -----------------------

@pytest.mark.parametrize("slices,stacks", [(4, 4), (3, 1), (10, 20), (16, 8)])
def test_sphere_counts(slices, stacks):
    mesh = sphere(Sphere(1, slices, stacks))
    expected = 2 * (slices * stacks + slices)
    assert len(mesh.triangles) == expected
    assert len(mesh.normals) == expected


def test_sphere_vertices_on_surface():
    mesh = sphere(Sphere(2.5, 12, 6))
    for p in mesh.vertices():
        assert norm(p) == pytest.approx(2.5)


def test_sphere_normals_are_unit_and_aligned():
    mesh = sphere(Sphere(3, 9, 7))
    for tri, ntri in zip(mesh.triangles, mesh.normals):
        for p, n in zip(tri.points(), ntri.points()):
            assert norm(n) == pytest.approx(1.0)
            assert n.x == pytest.approx(p.x / 3, abs=1e-9)
            assert n.y == pytest.approx(p.y / 3, abs=1e-9)
            assert n.z == pytest.approx(p.z / 3, abs=1e-9)


def test_sphere_first_triangle_from_north_pole():
    mesh = sphere(Sphere(1, 4, 4))
    first = mesh.triangles[0]
    assert first.p1.y == 1.0
    assert first.p2.y == pytest.approx(math.cos(math.pi / 4))


# -----------------------
# Parameter validation
# -----------------------

@pytest.mark.parametrize("factory", [
    lambda: Cone(0, 1, 4, 1),
    lambda: Cone(1, 0, 4, 1),
    lambda: Cone(1, 1, 2, 1),
    lambda: Cylinder(1, 1, 4, 0),
    lambda: Cylinder(-1, 1, 4, 1),
    lambda: Sphere(1, 2, 4),
    lambda: Sphere(1, 4, 0),
    lambda: Sphere(0, 4, 4),
    lambda: Sphere(float("nan"), 4, 4),
    lambda: Sphere(float("inf"), 4, 4),
    lambda: Cylinder(float("inf"), 1, 4, 1),
    lambda: Cylinder(1, float("nan"), 4, 1),
    lambda: Cone(float("nan"), 1, 4, 1),
    lambda: Cone(1, float("inf"), 4, 1),
])
def test_degenerate_parameters_rejected(factory):
    with pytest.raises(InvalidGeometryError):
        factory()


def test_module_source_compiles_cleanly():
    path = Path(revolution.__file__)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(path.read_text(encoding="utf-8"), str(path), "exec")
