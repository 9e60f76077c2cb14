"""
figgen: procedural triangle meshes for a vertex-triplet renderer.

Generators return a ``Mesh``; ``write_mesh`` turns it into the text format.
"""
from .bezier import bezier_from_file, read_patch_file
from .errors import FigureError, InvalidGeometryError, MalformedInputError, MeshIOError
from .mesh import Mesh
from .meshio import MeshData, read_mesh, write_mesh
from .planar import box, rectangle, subdivide, triangle
from .revolution import cone, cylinder, sphere
from .shapes import (
    BezierSurface,
    Box,
    Cone,
    Cylinder,
    Rectangle,
    Sphere,
    Triangle,
    box_from_whd,
    rectangle_from_wd,
)
from .vector import Point

__version__ = "0.1.0"
