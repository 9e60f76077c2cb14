from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .shapes import Triangle
from .vector import Point, Vec3

KINDS = ("triangle", "rectangle", "box", "cone", "cylinder", "sphere", "bezier")


# --------------
# Mesh container
# --------------

@dataclass
class Mesh:
    """
    Ordered triangle soup for one shape.

    ``normals`` is either None or a list of triangles aligned 1:1 with
    ``triangles``; corner k of normal triangle i belongs to corner k of
    triangle i.
    """

    kind: str
    triangles: List[Triangle] = field(default_factory=list)
    normals: Optional[List[Triangle]] = None

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"unknown mesh kind: {self.kind!r}")

    def __len__(self) -> int:
        return len(self.triangles)

    def add(self, tris: Iterable[Triangle]) -> "Mesh":
        self.triangles.extend(tris)
        return self

    # ---- analysis ----
    def vertices(self) -> List[Point]:
        return [p for tri in self.triangles for p in tri.points()]

    def normal_vertices(self) -> List[Point]:
        if self.normals is None:
            return []
        return [p for tri in self.normals for p in tri.points()]

    def bounds(self) -> Tuple[Vec3, Vec3]:
        verts = self.vertices()
        if not verts:
            raise ValueError("bounds of an empty mesh are undefined")
        xs = [v.x for v in verts]
        ys = [v.y for v in verts]
        zs = [v.z for v in verts]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))
