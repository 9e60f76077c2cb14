from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .bezier import bezier_from_file
from .errors import FigureError
from .logging_config import setup_logging
from .mesh import Mesh
from .meshio import write_mesh
from .planar import box, rectangle
from .revolution import cone, cylinder, sphere
from .shapes import Cone, Cylinder, Sphere, box_from_whd, rectangle_from_wd

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  figgen plane 2 2 -d 4 plane.3d
  figgen box 2 3 2 -d 3 box.3d
  figgen cone 1 2 10 10 cone.3d
  figgen cylinder 1 2 16 4 cylinder.3d
  figgen sphere 1 20 20 sphere.3d
  figgen bezier teapot.patch 10 teapot.3d
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="figgen", description="figgen: triangulated primitive generator",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", help="Also write log records to this file")

    sub = p.add_subparsers(dest="shape", required=True)

    s = sub.add_parser("plane", help="Subdivided rectangle in the XZ plane")
    s.add_argument("width", type=float)
    s.add_argument("depth", type=float)
    s.add_argument("-d", "--divisions", type=int, default=1)
    s.add_argument("output")

    s = sub.add_parser("box", help="Box centred on the origin")
    s.add_argument("width", type=float)
    s.add_argument("height", type=float)
    s.add_argument("depth", type=float)
    s.add_argument("-d", "--divisions", type=int, default=1)
    s.add_argument("output")

    for name in ("cone", "cylinder"):
        s = sub.add_parser(name, help=f"{name.capitalize()} around the Y axis")
        s.add_argument("radius", type=float)
        s.add_argument("height", type=float)
        s.add_argument("slices", type=int)
        s.add_argument("stacks", type=int)
        s.add_argument("output")

    s = sub.add_parser("sphere", help="UV sphere with normals")
    s.add_argument("radius", type=float)
    s.add_argument("slices", type=int)
    s.add_argument("stacks", type=int)
    s.add_argument("output")

    s = sub.add_parser("bezier", help="Bezier patches from a patch file")
    s.add_argument("patch_file")
    s.add_argument("tessellation", type=int)
    s.add_argument("output")

    return p


def _generate(args: argparse.Namespace) -> Mesh:
    if args.shape == "plane":
        return rectangle(rectangle_from_wd(args.width, args.depth), args.divisions)
    elif args.shape == "box":
        return box(box_from_whd(args.width, args.height, args.depth), args.divisions)
    elif args.shape == "cone":
        return cone(Cone(args.radius, args.height, args.slices, args.stacks))
    elif args.shape == "cylinder":
        return cylinder(Cylinder(args.radius, args.height, args.slices, args.stacks))
    elif args.shape == "sphere":
        return sphere(Sphere(args.radius, args.slices, args.stacks))
    # argparse only admits the subcommands above, so this is "bezier"
    return bezier_from_file(args.patch_file, args.tessellation)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        mesh = _generate(args)
        write_mesh(mesh, args.output)
    except FigureError as e:
        logger.error("%s: %s", args.shape, e)
        return 1
    return 0
