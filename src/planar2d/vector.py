"""Free displacement vectors in the plane.

All oriented angles are measured counter-clockwise and reported in the
half-open range ``[0, 2π)``. The angle from the X axis is the primitive;
the Y-axis variants and the angle between two arbitrary vectors are
derived from it.

Zero-vector conventions
-----------------------
The zero vector is a valid value and gets explicit conventions kept for
compatibility with existing callers:

* it is *parallel* and *perpendicular* to every vector, itself included,
  because both its cross and dot product with anything are zero;
* its angle from the X axis is ``0``, with ``sin = 0`` and ``cos = 1``;
* projecting it, or projecting onto it, returns the projected vector
  unchanged.

A zero vector being simultaneously parallel and perpendicular to
everything is unusual but intentional. Callers that need a direction
must check ``is_normalizable()`` first.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import TYPE_CHECKING, Iterator, Optional

import numpy as np

from .logging_utils import get_logger
from .utils.scalars import random_uniform

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    import numpy.typing as npt

    from .point import Point

logger = get_logger(__name__)

EPS: float = 1e-12
TWO_PI: float = 2.0 * math.pi
_THREE_HALVES_PI: float = 1.5 * math.pi


def _check_tolerance(epsilon: float) -> None:
    if epsilon < 0:
        raise ValueError(f"Resolution must be non-negative, got {epsilon!r}.")


def _wrap_angle(angle: float) -> float:
    """Shift ``angle`` from ``(-2π, 2π)`` into ``[0, 2π)``."""
    if angle < 0:
        angle += TWO_PI
    # a tiny negative angle plus 2π rounds to exactly 2π
    if angle >= TWO_PI:
        angle = 0.0
    return angle


@dataclass(frozen=True, eq=False)
class Vector:
    """An immutable 2D vector ``(dx, dy)`` with tolerance-based equality."""

    dx: float = 0.0
    dy: float = 0.0

    # ------------------------------------------------------------ factories

    @classmethod
    def from_polar(cls, magnitude: float, radians: float) -> Vector:
        """Build a vector from a magnitude and an angle from the X axis."""
        if magnitude < 0:
            raise ValueError(
                "Attempt to initialize a vector with a negative magnitude."
            )
        return cls(magnitude * math.cos(radians), magnitude * math.sin(radians))

    @classmethod
    def from_sin_cos(cls, magnitude: float, sin_a: float, cos_a: float) -> Vector:
        """Build a vector from a magnitude and the sine/cosine of its angle.

        The pair is used as given; ``sin_a**2 + cos_a**2`` is not checked.
        """
        if magnitude < 0:
            raise ValueError(
                "Attempt to initialize a vector with a negative magnitude."
            )
        return cls(magnitude * cos_a, magnitude * sin_a)

    @classmethod
    def from_point(cls, point: Point) -> Vector:
        """Position vector of ``point`` relative to the origin."""
        return cls(point.x, point.y)

    @classmethod
    def from_points(cls, start: Point, end: Point) -> Vector:
        """Vector going from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def random_uniform(
        cls, a: float, b: float, rng: Optional[np.random.Generator] = None
    ) -> Vector:
        """Vector whose components are uniform in ``[min(a, b), max(a, b)]``."""
        return cls(random_uniform(a, b, rng), random_uniform(a, b, rng))

    def clone(self) -> Vector:
        return Vector(self.dx, self.dy)

    # ----------------------------------------------------------- comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return abs(self.dx - other.dx) <= EPS and abs(self.dy - other.dy) <= EPS

    # tolerant equality is not transitive, so no hash can be consistent with it
    __hash__ = None  # type: ignore[assignment]

    def is_zero(self, within: Optional[float] = None) -> bool:
        """Return whether the vector is zero.

        Without ``within`` both components must be exactly zero. With a
        resolution, the magnitude must not exceed it.
        """
        if within is None:
            return self.dx == 0 and self.dy == 0
        _check_tolerance(within)
        return self.magnitude_squared() <= within * within

    def is_equal_to(self, other: Vector, within: float) -> bool:
        """Return whether ``|self - other| <= within``."""
        _check_tolerance(within)
        return (self - other).magnitude_squared() <= within * within

    # ------------------------------------------------------------ algebra

    def __add__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.dx + other.dx, self.dy + other.dy)
        # Vector + Point is handled by Point.__radd__
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.dx - other.dx, self.dy - other.dy)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.dx * scalar, self.dy * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Attempt to divide a vector by 0.")
        return Vector(self.dx / scalar, self.dy / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    def __iter__(self) -> Iterator[float]:
        yield self.dx
        yield self.dy

    def __str__(self) -> str:
        return f"(dx: {self.dx}, dy: {self.dy}, mag: {self.magnitude()})"

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.dx, self.dy], dtype=np.float64)

    # --------------------------------------------- magnitude and scaling

    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def magnitude_squared(self) -> float:
        return self.dx * self.dx + self.dy * self.dy

    def is_normalizable(self) -> bool:
        return self != ZERO_VECTOR

    def normalize(self) -> Optional[Vector]:
        """Return the unit vector along ``self``, or ``None`` for the zero vector."""
        m = self.magnitude()
        if m == 0:
            logger.debug("Vector %s is not normalizable.", self)
            return None
        return Vector(self.dx / m, self.dy / m)

    def scale_to(self, value: float) -> Vector:
        """Return a vector of magnitude ``|value|`` along ``self``.

        A negative ``value`` also reverses the direction. The zero vector is
        returned as is.
        """
        m = self.magnitude()
        if m > 0:
            return self * (value / m)
        return self.clone()

    def truncate_to(self, max_value: float) -> Vector:
        """Scale ``self`` down to ``max_value`` if it is longer than that."""
        if max_value < 0:
            raise ValueError("Attempt to truncate vector to a negative magnitude.")
        m = self.magnitude()
        if m > max_value:
            return self * (max_value / m)
        return self.clone()

    # ---------------------------------------------------- products and tests

    def dot(self, other: Vector) -> float:
        return self.dx * other.dx + self.dy * other.dy

    def cross(self, other: Vector) -> float:
        """Signed perp-dot product, positive when ``other`` is counter-clockwise."""
        return self.dx * other.dy - self.dy * other.dx

    def is_parallel_to(self, other: Vector, within: float = EPS) -> bool:
        """Return whether ``|self x other| <= within``.

        True whenever either vector is zero (see the module docstring).
        """
        _check_tolerance(within)
        return abs(self.cross(other)) <= within

    def is_perpendicular_to(self, other: Vector, within: float = EPS) -> bool:
        """Return whether ``|self . other| <= within``.

        True whenever either vector is zero (see the module docstring).
        """
        _check_tolerance(within)
        return abs(self.dot(other)) <= within

    # ------------------------------------------------------- X-axis angles

    def sin_angle_from_x(self) -> float:
        m = self.magnitude()
        if m == 0:
            return 0.0
        return self.dy / m

    def cos_angle_from_x(self) -> float:
        m = self.magnitude()
        if m == 0:
            # the zero vector counts as aligned with the X axis
            return 1.0
        return self.dx / m

    def tan_angle_from_x(self) -> float:
        """``dy / dx``; signed infinity when ``dx == 0``, ``0`` for the zero vector."""
        if self.dx == 0:
            if self.dy > 0:
                return math.inf
            if self.dy < 0:
                return -math.inf
            return 0.0
        return self.dy / self.dx

    def angle_from_x(self) -> float:
        """Oriented angle from the X axis to ``self`` in ``[0, 2π)``."""
        return _wrap_angle(math.atan2(self.dy, self.dx))

    # ------------------------------------------------------- Y-axis angles

    def sin_angle_from_y(self) -> float:
        return -self.cos_angle_from_x()

    def cos_angle_from_y(self) -> float:
        return self.sin_angle_from_x()

    def tan_angle_from_y(self) -> float:
        """``-dx / dy``; ``-inf`` for the zero vector."""
        if self.dy == 0:
            if self.dx >= 0:
                return -math.inf
            return math.inf
        return -self.dx / self.dy

    def angle_from_y(self) -> float:
        """Oriented angle from the Y axis to ``self``; ``3π/2`` for zero."""
        return (self.angle_from_x() + _THREE_HALVES_PI) % TWO_PI

    # ------------------------------------------- angles between two vectors

    def sin_angle_from(self, other: Vector) -> float:
        # zero -> u gives +u.sin_angle_from_x(), u -> zero gives the opposite
        return math.sin(self.angle_from_x() - other.angle_from_x())

    def cos_angle_from(self, other: Vector) -> float:
        return math.cos(self.angle_from_x() - other.angle_from_x())

    def tan_angle_from(self, other: Vector) -> float:
        if other.dot(self) == 0:
            c = other.cross(self)
            if c > 0:
                return math.inf
            if c < 0:
                return -math.inf
            # at least one operand is the zero vector
            if self == ZERO_VECTOR:
                if other == ZERO_VECTOR:
                    return 0.0
                return -other.tan_angle_from_x()
            return self.tan_angle_from_x()
        return math.tan(self.angle_from_x() - other.angle_from_x())

    def angle_from(self, other: Vector) -> float:
        """Oriented angle from ``other`` to ``self`` in ``[0, 2π)``."""
        return _wrap_angle(self.angle_from_x() - other.angle_from_x())

    # ------------------------------------------------ projection, rotation

    def parallel_projection_to(self, other: Vector) -> Vector:
        """Component of ``self`` parallel to ``other``.

        Returns a copy of ``self`` when either vector is zero.
        """
        if self == ZERO_VECTOR or other == ZERO_VECTOR:
            return self.clone()
        return (self.dot(other) / other.magnitude_squared()) * other

    def perpendicular_projection_to(self, other: Vector) -> Vector:
        """Component of ``self`` perpendicular to ``other``.

        Returns a copy of ``self`` when either vector is zero.
        """
        if self == ZERO_VECTOR or other == ZERO_VECTOR:
            return self.clone()
        return self - self.parallel_projection_to(other)

    def counter_clockwise_rotate_sin_cos(self, sin_a: float, cos_a: float) -> Vector:
        return Vector(
            self.dx * cos_a - self.dy * sin_a,
            self.dy * cos_a + self.dx * sin_a,
        )

    def counter_clockwise_rotate(self, radians: float) -> Vector:
        return self.counter_clockwise_rotate_sin_cos(
            math.sin(radians), math.cos(radians)
        )

    def clockwise_rotate_sin_cos(self, sin_a: float, cos_a: float) -> Vector:
        return self.counter_clockwise_rotate_sin_cos(-sin_a, cos_a)

    def clockwise_rotate(self, radians: float) -> Vector:
        return self.counter_clockwise_rotate_sin_cos(
            -math.sin(radians), math.cos(radians)
        )


ZERO_VECTOR = Vector(0.0, 0.0)
UNIT_VECTOR_X = Vector(1.0, 0.0)
UNIT_VECTOR_Y = Vector(0.0, 1.0)


__all__ = [
    "EPS",
    "TWO_PI",
    "Vector",
    "ZERO_VECTOR",
    "UNIT_VECTOR_X",
    "UNIT_VECTOR_Y",
]
