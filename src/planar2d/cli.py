"""Command line front end for quick vector calculations.

Examples::

    planar2d angle 0 1 --from 1 0
    planar2d compare 1 0 0 1 --eps 1e-9
    planar2d project 3 4 --onto 1 0
    planar2d rotate 1 0 90
    planar2d normalize 3 4
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Callable, Dict, List, Optional, Sequence

from . import __version__
from .config import AppConfig, load_config
from .logging_utils import configure_logging, get_logger
from .utils.scalars import degrees_to_radians, radians_to_degrees
from .vector import Vector

logger = get_logger(__name__)


class _Context:
    def __init__(self, cfg: AppConfig, degrees: bool) -> None:
        self.cfg = cfg
        self.degrees = degrees

    @property
    def unit(self) -> str:
        return "deg" if self.degrees else "rad"

    def num(self, value: float) -> str:
        return f"{value:.{self.cfg.display.precision}f}"

    def vec(self, v: Vector) -> str:
        return f"({self.num(v.dx)}, {self.num(v.dy)})"

    def angle_out(self, radians: float) -> str:
        value = radians_to_degrees(radians) if self.degrees else radians
        return f"{self.num(value)} {self.unit}"

    def angle_in(self, value: float) -> float:
        return degrees_to_radians(value) if self.degrees else value


def _vector(values: Sequence[float]) -> Vector:
    return Vector(float(values[0]), float(values[1]))


def _cmd_angle(args: argparse.Namespace, ctx: _Context) -> int:
    v = _vector(args.vector)
    if args.from_vector is not None:
        other = _vector(args.from_vector)
        angle = v.angle_from(other)
        logger.debug("angle from %s to %s = %r rad", other, v, angle)
    elif args.axis == "y":
        angle = v.angle_from_y()
    else:
        angle = v.angle_from_x()
    print(ctx.angle_out(angle))
    return 0


def _cmd_compare(args: argparse.Namespace, ctx: _Context) -> int:
    u = _vector(args.u)
    v = _vector(args.v)
    eps = ctx.cfg.tolerance.eps if args.eps is None else args.eps
    print(f"equal: {u.is_equal_to(v, within=eps)}")
    print(f"parallel: {u.is_parallel_to(v, within=eps)}")
    print(f"perpendicular: {u.is_perpendicular_to(v, within=eps)}")
    print(f"angle: {ctx.angle_out(v.angle_from(u))}")
    return 0


def _cmd_project(args: argparse.Namespace, ctx: _Context) -> int:
    v = _vector(args.vector)
    onto = _vector(args.onto)
    print(f"parallel: {ctx.vec(v.parallel_projection_to(onto))}")
    print(f"perpendicular: {ctx.vec(v.perpendicular_projection_to(onto))}")
    return 0


def _cmd_rotate(args: argparse.Namespace, ctx: _Context) -> int:
    v = _vector(args.vector)
    radians = ctx.angle_in(args.angle)
    if args.clockwise:
        rotated = v.clockwise_rotate(radians)
    else:
        rotated = v.counter_clockwise_rotate(radians)
    print(ctx.vec(rotated))
    return 0


def _cmd_normalize(args: argparse.Namespace, ctx: _Context) -> int:
    v = _vector(args.vector)
    unit = v.normalize()
    if unit is None:
        print(f"error: {v} is not normalizable", file=sys.stderr)
        return 1
    print(ctx.vec(unit))
    return 0


_COMMANDS: Dict[str, Callable[[argparse.Namespace, _Context], int]] = {
    "angle": _cmd_angle,
    "compare": _cmd_compare,
    "project": _cmd_project,
    "rotate": _cmd_rotate,
    "normalize": _cmd_normalize,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planar2d", description="2D vector angle and projection helper."
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--config", type=Path, default=None, help="config file to read"
    )
    parser.add_argument(
        "--radians",
        action="store_true",
        help="read and print angles in radians instead of degrees",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("angle", help="oriented angle in [0, 360)")
    p.add_argument("vector", nargs=2, type=float, metavar=("DX", "DY"))
    p.add_argument(
        "--from",
        dest="from_vector",
        nargs=2,
        type=float,
        metavar=("DX", "DY"),
        help="measure from this vector instead of an axis",
    )
    p.add_argument("--axis", choices=("x", "y"), default="x")

    p = sub.add_parser("compare", help="equality, parallelism, perpendicularity")
    p.add_argument("u", nargs=2, type=float, metavar=("UX", "UY"))
    p.add_argument("v", nargs=2, type=float, metavar=("VX", "VY"))
    p.add_argument("--eps", type=float, default=None)

    p = sub.add_parser("project", help="parallel and perpendicular parts")
    p.add_argument("vector", nargs=2, type=float, metavar=("DX", "DY"))
    p.add_argument(
        "--onto", nargs=2, type=float, metavar=("DX", "DY"), required=True
    )

    p = sub.add_parser("rotate", help="rotate a vector")
    p.add_argument("vector", nargs=2, type=float, metavar=("DX", "DY"))
    p.add_argument("angle", type=float)
    p.add_argument("--clockwise", action="store_true")

    p = sub.add_parser("normalize", help="unit vector along DX DY")
    p.add_argument("vector", nargs=2, type=float, metavar=("DX", "DY"))

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    cfg = load_config(args.config)
    ctx = _Context(cfg, degrees=cfg.display.degrees and not args.radians)
    if args.command == "compare" and args.eps is not None and args.eps < 0:
        parser.error("--eps must be non-negative")
    return _COMMANDS[args.command](args, ctx)


__all__ = ["build_parser", "main"]
