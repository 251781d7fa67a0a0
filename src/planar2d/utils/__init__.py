"""Scalar utilities shared across planar2d."""

from .scalars import (
    default_rng,
    degrees_to_radians,
    radians_to_degrees,
    random_bool,
    random_uniform,
    random_uniform01,
)

__all__ = [
    "degrees_to_radians",
    "radians_to_degrees",
    "default_rng",
    "random_uniform01",
    "random_uniform",
    "random_bool",
]
