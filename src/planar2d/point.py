"""Positions in the plane and their affine combinations with vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

from .vector import EPS, Vector

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class Point:
    """An immutable 2D position ``(x, y)``.

    Points compare with the same tolerance as :class:`~planar2d.vector.Vector`.
    ``point - point`` is the vector from the right operand to the left one,
    ``point + vector`` and ``vector + point`` translate the point.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_vector(cls, vector: Vector) -> Point:
        """Point at ``vector`` relative to the origin."""
        return cls(vector.dx, vector.dy)

    def translated(self, vector: Vector, scalar: float = 1.0) -> Point:
        """Return ``self + scalar * vector``.

        Handy for explicit integration steps, e.g.
        ``position.translated(velocity, dt)``.
        """
        return Point(self.x + scalar * vector.dx, self.y + scalar * vector.dy)

    def distance_to(self, other: Point) -> float:
        return (self - other).magnitude()

    def distance_squared_to(self, other: Point) -> float:
        return (self - other).magnitude_squared()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) <= EPS and abs(self.y - other.y) <= EPS

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.translated(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector.from_points(other, self)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"(x: {self.x}, y: {self.y})"

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


ORIGIN = Point(0.0, 0.0)


__all__ = ["Point", "ORIGIN"]
