"""
Bicubic Bezier patches read from a patch file.

Patch file layout::

    <number of patches>
    i0, i1, ..., i15        16 row-major 4x4 control indices per patch
    <number of control points>
    x, y, z                 3 coordinates per control point

Fields are separated by commas and/or any whitespace, so a record may wrap
across lines; only the declared counts delimit records.

Each patch is blended once (M · P · Mᵗ with the Bezier basis M) and then
sampled on a regular (4t + 1) x (4t + 1) grid of (u, v) values, t being the
tessellation level.
"""
from __future__ import annotations

import logging
import math
import os
import re
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple, Union

import numpy as np

from .errors import InvalidGeometryError, MalformedInputError, MeshIOError
from .matrix import BEZIER_BASIS, blend, control_matrix, power_basis
from .mesh import Mesh
from .planar import split_rectangle
from .shapes import PATCH_SIZE, BezierSurface, Rectangle
from .vector import Point

logger = logging.getLogger(__name__)

PathOrFile = Union[str, os.PathLike, TextIO]

SAMPLES_PER_LEVEL = 4

_SEPARATORS = re.compile(r"[,\s]+")


# -----------------
# Patch file reader
# -----------------

def _tokens(stream: TextIO) -> Iterator[Tuple[int, str]]:
    for lineno, raw in enumerate(stream, start=1):
        for tok in _SEPARATORS.split(raw):
            if tok:
                yield lineno, tok


class _TokenReader:
    def __init__(self, stream: TextIO) -> None:
        self._tokens = _tokens(stream)

    def next(self, what: str) -> Tuple[int, str]:
        try:
            return next(self._tokens)
        except StopIteration:
            raise MalformedInputError(f"unexpected end of file while reading {what}") from None

    def unsigned(self, what: str) -> Tuple[int, int]:
        lineno, tok = self.next(what)
        try:
            n = int(tok)
        except ValueError:
            raise MalformedInputError(f"expected {what}, got {tok!r}", lineno) from None
        if n < 0:
            raise MalformedInputError(f"{what} must not be negative (got {n})", lineno)
        return lineno, n

    def real(self, what: str) -> float:
        lineno, tok = self.next(what)
        try:
            value = float(tok)
        except ValueError:
            raise MalformedInputError(f"non-numeric coordinate {tok!r} in {what}", lineno) from None
        if not math.isfinite(value):
            raise MalformedInputError(f"coordinate {tok!r} in {what} is not finite", lineno)
        return value

    def leftover(self) -> Optional[Tuple[int, str]]:
        return next(self._tokens, None)


def parse_patches(stream: TextIO) -> BezierSurface:
    reader = _TokenReader(stream)

    _, npatches = reader.unsigned("the patch count")
    # each index keeps the line it came from for error reporting
    patches: List[List[Tuple[int, int]]] = []
    for n in range(npatches):
        patches.append([reader.unsigned(f"an index of patch {n}") for _ in range(PATCH_SIZE)])

    _, npoints = reader.unsigned("the control point count")
    points: List[Point] = []
    for n in range(npoints):
        what = f"control point {n}"
        points.append(Point(reader.real(what), reader.real(what), reader.real(what)))

    extra = reader.leftover()
    if extra is not None:
        raise MalformedInputError(
            f"unexpected data after {npoints} declared control points: {extra[1]!r}", extra[0]
        )

    for patch in patches:
        for lineno, i in patch:
            if i >= npoints:
                raise MalformedInputError(
                    f"control point index {i} out of range (0..{npoints - 1})", lineno
                )

    return BezierSurface(
        tuple(points),
        tuple(tuple(i for _, i in patch) for patch in patches),
    )


def read_patch_file(path_or_file: PathOrFile) -> BezierSurface:
    """Read a patch file from a path or an open text stream."""
    if hasattr(path_or_file, "read"):
        surface = parse_patches(path_or_file)  # type: ignore[arg-type]
        source = getattr(path_or_file, "name", "<stream>")
    else:
        try:
            with open(path_or_file, "r", encoding="utf-8") as f:
                surface = parse_patches(f)
        except OSError as e:
            raise MeshIOError(f"cannot read patch file {path_or_file}: {e}") from e
        source = str(path_or_file)

    logger.info(
        "Read %d patches and %d control points from %s",
        len(surface.patches), len(surface.control_points), source,
    )
    return surface


# ---------------
# Patch evaluator
# ---------------

def evaluate(mpm: np.ndarray, u: float, v: float) -> Point:
    """
    Point on a blended patch at (u, v).

    ``u`` weights the columns of ``mpm`` and ``v`` its rows.
    """
    x, y, z = np.einsum("i,ijc,j->c", power_basis(v), mpm, power_basis(u))
    return Point(float(x), float(y), float(z))


def _sample_grid(mpm: np.ndarray, samples: int) -> np.ndarray:
    # grid[a, b] = S(u_a, v_b) for u_a = a / samples, v_b = b / samples
    t = np.arange(samples + 1) / samples
    basis = power_basis(t)
    return np.einsum("bi,ijc,aj->abc", basis, mpm, basis)


def tessellate_patch(control_points: Sequence[Point], tessellation: int) -> Mesh:
    """Triangulate a single patch given its 16 row-major control points."""
    if tessellation < 1:
        raise InvalidGeometryError(f"tessellation must be >= 1 (got {tessellation})")

    samples = SAMPLES_PER_LEVEL * tessellation
    mpm = blend(BEZIER_BASIS, control_matrix(control_points))
    grid = _sample_grid(mpm, samples)

    def S(a: int, b: int) -> Point:
        x, y, z = grid[a, b]
        return Point(float(x), float(y), float(z))

    mesh = Mesh("bezier")
    for i in range(1, samples + 1):
        for j in range(1, samples + 1):
            mesh.add(split_rectangle(Rectangle(S(i, j - 1), S(i, j), S(i - 1, j - 1), S(i - 1, j))))
    return mesh


def bezier(surface: BezierSurface, tessellation: int) -> Mesh:
    if tessellation < 1:
        raise InvalidGeometryError(f"tessellation must be >= 1 (got {tessellation})")

    mesh = Mesh("bezier")
    for patch in surface.patches:
        cps = [surface.control_points[i] for i in patch]
        mesh.add(tessellate_patch(cps, tessellation).triangles)

    logger.debug(
        "bezier patches=%d tessellation=%d -> %d triangles",
        len(surface.patches), tessellation, len(mesh),
    )
    return mesh


def bezier_from_file(path_or_file: PathOrFile, tessellation: int) -> Mesh:
    return bezier(read_patch_file(path_or_file), tessellation)
