"""Ray data structure and ray transformation.

A ray starts at a point and travels along a direction vector. The direction
need not be unit length; intersection parameters ``t`` are measured in
multiples of it.

Example:
    >>> from src.whitted.core.ray import Ray, position_at
    >>> from src.whitted.core.tuples import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> position_at(ray, 2.5) == point(4.5, 3, 4)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.whitted.core.matrix import Matrix, multiply_tuple
from src.whitted.core.tuples import Tuple, point, vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray.
    """

    origin: Tuple = field(default_factory=lambda: point(0.0, 0.0, 0.0))
    direction: Tuple = field(default_factory=lambda: vector(1.0, 0.0, 0.0))

    def __rmatmul__(self, m: Matrix) -> Ray:
        return transform_ray(self, m)

    __rmul__ = __rmatmul__


def position_at(ray: Ray, t: float) -> Tuple:
    """Compute the point ray.origin + t * ray.direction."""
    return ray.origin + ray.direction * t


def transform_ray(ray: Ray, m: Matrix) -> Ray:
    """Apply a 4x4 matrix to both the origin and the direction of a ray."""
    return Ray(multiply_tuple(m, ray.origin), multiply_tuple(m, ray.direction))
