"""Scalar helpers consumed by the vector and point types."""

import math
from typing import Optional

import numpy as np

_DEFAULT_RNG: Optional[np.random.Generator] = None


def degrees_to_radians(degrees: float) -> float:
    """Convert ``degrees`` to radians."""
    return math.radians(degrees)


def radians_to_degrees(radians: float) -> float:
    """Convert ``radians`` to degrees."""
    return math.degrees(radians)


def default_rng() -> np.random.Generator:
    """Return the shared generator used when callers do not supply one."""
    global _DEFAULT_RNG
    if _DEFAULT_RNG is None:
        _DEFAULT_RNG = np.random.default_rng()
    return _DEFAULT_RNG


def random_uniform01(rng: Optional[np.random.Generator] = None) -> float:
    """Return a uniformly distributed random float in ``[0, 1]``."""
    gen = rng if rng is not None else default_rng()
    return float(gen.random())


def random_uniform(
    a: float, b: float, rng: Optional[np.random.Generator] = None
) -> float:
    """Return a uniform random float in ``[min(a, b), max(a, b)]``.

    The bounds may be given in either order.
    """
    value = a + (b - a) * random_uniform01(rng)
    lo, hi = min(a, b), max(a, b)
    # a + (b - a) * u can land one ulp outside the range
    return max(lo, min(hi, value))


def random_bool(rng: Optional[np.random.Generator] = None) -> bool:
    """Return a uniformly distributed random boolean."""
    return random_uniform01(rng) <= 0.5


__all__ = [
    "degrees_to_radians",
    "radians_to_degrees",
    "default_rng",
    "random_uniform01",
    "random_uniform",
    "random_bool",
]
