"""Shape primitives: a closed set of variants sharing a transform and a material.

Every shape lives in its own object space. The sphere is centered at the
origin with the given radius (1 by default) and the cube is axis aligned,
spanning [-half_extent, half_extent] on each axis. Positioning, scaling and
rotation are expressed entirely through ``transform`` (world-from-object).

The functions here work in object space only; the world-space wrappers live
in ``scene.intersection`` and ``core.integrator``. Dispatch is by structural
pattern matching over the ``Shape`` union, so adding a variant means adding a
case to each function below.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.geometry.shapes import Sphere, local_intersect
    >>> local_intersect(Sphere(), Ray(point(0, 0, -5), vector(0, 0, 1)))
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from src.whitted.core.matrix import Matrix, identity
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import ORIGIN, Tuple, dot, vector
from src.whitted.materials.phong import Material


@dataclass(frozen=True)
class Sphere:
    """A sphere centered at the object-space origin.

    Attributes:
        transform: World-from-object transform.
        material: Surface material.
        radius: Object-space radius (positive, 1 for the unit sphere).
    """

    transform: Matrix = field(default_factory=identity)
    material: Material = field(default_factory=Material)
    radius: float = 1.0

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class Cube:
    """An axis-aligned cube centered at the object-space origin.

    Attributes:
        transform: World-from-object transform.
        material: Surface material.
        half_extent: Distance from the center to each face.
    """

    transform: Matrix = field(default_factory=identity)
    material: Material = field(default_factory=Material)
    half_extent: float = 1.0

    def __post_init__(self) -> None:
        if self.half_extent <= 0.0:
            raise ValueError(f"Cube half extent must be positive, got {self.half_extent}")


Shape = Union[Sphere, Cube]


# =============================================================================
# Object-space intersection
# =============================================================================


def _intersect_sphere(sphere: Sphere, local_ray: Ray) -> list[float]:
    """Solve |origin + t * direction|^2 = radius^2 for t.

    Both roots are returned, smallest first, even when negative or equal.
    """
    sphere_to_ray = local_ray.origin - ORIGIN
    direction = local_ray.direction
    a = dot(direction, direction)
    b = 2.0 * dot(direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - sphere.radius * sphere.radius
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []
    sqrt_d = math.sqrt(discriminant)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)
    return [t1, t2]


def _slab(origin: float, direction: float, half_extent: float) -> tuple[float, float]:
    """Entry and exit parameters of a ray against one pair of parallel faces."""
    tmin_numerator = -half_extent - origin
    tmax_numerator = half_extent - origin
    if direction != 0.0:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        # Parallel to the faces: either always between them or never.
        tmin = -math.inf if tmin_numerator <= 0.0 else math.inf
        tmax = math.inf if tmax_numerator >= 0.0 else -math.inf
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


def _intersect_cube(cube: Cube, local_ray: Ray) -> list[float]:
    o, d = local_ray.origin, local_ray.direction
    xtmin, xtmax = _slab(o.x, d.x, cube.half_extent)
    ytmin, ytmax = _slab(o.y, d.y, cube.half_extent)
    ztmin, ztmax = _slab(o.z, d.z, cube.half_extent)
    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)
    if tmin > tmax:
        return []
    return [tmin, tmax]


def local_intersect(shape: Shape, local_ray: Ray) -> list[float]:
    """Intersect an object-space ray with a shape.

    Args:
        shape: The shape to test.
        local_ray: The ray already transformed into the shape's object space.

    Returns:
        The intersection parameters in ascending order (possibly empty).
    """
    match shape:
        case Sphere():
            return _intersect_sphere(shape, local_ray)
        case Cube():
            return _intersect_cube(shape, local_ray)
        case _:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")


def local_normal_at(shape: Shape, local_point: Tuple) -> Tuple:
    """Object-space surface normal at a point on the shape (not normalized)."""
    match shape:
        case Sphere():
            return local_point - ORIGIN
        case Cube():
            ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
            largest = max(ax, ay, az)
            if largest == ax:
                return vector(local_point.x, 0.0, 0.0)
            if largest == ay:
                return vector(0.0, local_point.y, 0.0)
            return vector(0.0, 0.0, local_point.z)
        case _:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
