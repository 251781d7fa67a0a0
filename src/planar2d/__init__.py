"""planar2d: 2D points and vectors with explicit angle and tolerance conventions."""

from __future__ import annotations

import logging

from ._version import get_version
from .point import ORIGIN, Point
from .vector import EPS, UNIT_VECTOR_X, UNIT_VECTOR_Y, ZERO_VECTOR, Vector

__version__ = get_version()

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main() -> None:
    """Entry point for ``python -m planar2d`` and the console script."""
    from .cli import main as _main

    raise SystemExit(_main())


__all__ = [
    "EPS",
    "ORIGIN",
    "Point",
    "UNIT_VECTOR_X",
    "UNIT_VECTOR_Y",
    "Vector",
    "ZERO_VECTOR",
    "main",
    "__version__",
    "get_version",
]
