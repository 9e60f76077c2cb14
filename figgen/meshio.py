"""
Plain-text triangle list format shared by every generator.

A file starts with the shape kind on its own line, followed by one
``x y z`` line per triangle corner in emission order. Meshes that carry
normals append a ``normals`` line and then the normal of every corner, in
the same order as the positions.
"""
from __future__ import annotations

import logging
import os
from typing import Iterable, List, NamedTuple, TextIO, Union

from .errors import MalformedInputError, MeshIOError
from .mesh import KINDS, Mesh
from .shapes import Triangle
from .vector import Point

logger = logging.getLogger(__name__)

PathOrFile = Union[str, os.PathLike, TextIO]

NORMALS_MARKER = "normals"
COORD_FORMAT = "{:.6f} {:.6f} {:.6f}"


# ----------
# Writing
# ----------

def format_point(p: Point) -> str:
    return COORD_FORMAT.format(p.x, p.y, p.z)


def _triangle_lines(tris: Iterable[Triangle]) -> List[str]:
    return [format_point(p) for tri in tris for p in tri.points()]


def render_mesh(mesh: Mesh) -> str:
    lines = [mesh.kind]
    lines += _triangle_lines(mesh.triangles)
    if mesh.normals is not None:
        lines.append(NORMALS_MARKER)
        lines += _triangle_lines(mesh.normals)
    return "\n".join(lines) + "\n"


def write_mesh(mesh: Mesh, path_or_file: PathOrFile) -> None:
    """Write ``mesh`` to a path or an open text stream."""
    text = render_mesh(mesh)

    if hasattr(path_or_file, "write"):
        path_or_file.write(text)  # type: ignore[union-attr]
        target = getattr(path_or_file, "name", "<stream>")
    else:
        try:
            with open(path_or_file, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise MeshIOError(f"cannot write mesh to {path_or_file}: {e}") from e
        target = str(path_or_file)

    logger.info("Wrote %s mesh with %d triangles to %s", mesh.kind, len(mesh), target)


# ----------
# Reading
# ----------

class MeshData(NamedTuple):
    kind: str
    vertices: List[Point]
    normals: List[Point]

    def to_mesh(self) -> Mesh:
        """Regroup the corners into triangles."""
        if self.kind not in KINDS:
            raise MalformedInputError(f"unknown mesh kind {self.kind!r}", 1)
        if len(self.vertices) % 3:
            raise MalformedInputError(f"{len(self.vertices)} vertices do not form whole triangles")
        if self.normals and len(self.normals) != len(self.vertices):
            raise MalformedInputError(
                f"{len(self.normals)} normals for {len(self.vertices)} vertices"
            )
        return Mesh(
            self.kind,
            _group(self.vertices),
            _group(self.normals) if self.normals else None,
        )


def _group(points: List[Point]) -> List[Triangle]:
    return [Triangle(*points[k:k + 3]) for k in range(0, len(points), 3)]


def parse_point(line: str, lineno: int = 0) -> Point:
    fields = line.split()
    if len(fields) != 3:
        raise MalformedInputError(f"expected 3 coordinates, got {line.strip()!r}", lineno or None)
    try:
        x, y, z = (float(tok) for tok in fields)
    except ValueError:
        raise MalformedInputError(f"non-numeric coordinate in {line.strip()!r}", lineno or None) from None
    return Point(x, y, z)


def parse_mesh(stream: TextIO) -> MeshData:
    kind = stream.readline().strip()
    if not kind:
        raise MalformedInputError("missing header line", 1)
    vertices: List[Point] = []
    normals: List[Point] = []
    target = vertices

    for lineno, raw in enumerate(stream, start=2):
        line = raw.strip()
        if not line:
            continue
        if line == NORMALS_MARKER and target is vertices:
            target = normals
            continue
        target.append(parse_point(line, lineno))

    return MeshData(kind, vertices, normals)


def read_mesh(path_or_file: PathOrFile) -> MeshData:
    """Read a mesh previously written by ``write_mesh``."""
    if hasattr(path_or_file, "read"):
        data = parse_mesh(path_or_file)  # type: ignore[arg-type]
        source = getattr(path_or_file, "name", "<stream>")
    else:
        try:
            with open(path_or_file, "r", encoding="utf-8") as f:
                data = parse_mesh(f)
        except OSError as e:
            raise MeshIOError(f"cannot read mesh from {path_or_file}: {e}") from e
        source = str(path_or_file)

    logger.info(
        "Read %s mesh from %s: %d vertices, %d normals",
        data.kind, source, len(data.vertices), len(data.normals),
    )
    return data
