"""Ray-shape and ray-world intersection, and visible hit selection.

An ``Intersection`` pairs a ray parameter ``t`` with the handle of the shape
that was hit. Intersections never own shape data; they are resolved through
the world that produced them.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.scene.intersection import hit, intersect_world
    >>> from src.whitted.scene.world import default_world
    >>> xs = intersect_world(default_world(), Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [x.t for x in xs]
    [4.0, 6.0, 4.5, 5.5]
    >>> hit(xs).t
    4.0
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrix import inverse
from src.whitted.core.ray import Ray, transform_ray
from src.whitted.core.tolerance import approx_equal
from src.whitted.geometry.shapes import Shape, local_intersect
from src.whitted.scene.world import ShapeHandle, World


@dataclass(frozen=True, eq=False)
class Intersection:
    """A hit of a ray at parameter ``t`` on the shape behind ``handle``.

    Attributes:
        t: Parameter along the ray (may be negative).
        handle: Handle of the intersected shape in its world.
    """

    t: float
    handle: ShapeHandle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.handle == other.handle and approx_equal(self.t, other.t)

    __hash__ = None  # type: ignore[assignment]


Intersections = list[Intersection]


def intersections(*items: Intersection) -> Intersections:
    """Collect intersections in the given order."""
    return list(items)


def intersect(shape: Shape, ray: Ray, handle: ShapeHandle) -> Intersections:
    """Intersect a world-space ray with one shape.

    The ray is moved into object space with the inverse of the shape's
    transform and solved analytically there.

    Args:
        shape: The shape to test.
        ray: World-space ray.
        handle: Handle of ``shape`` in its world, as returned by
            ``World.add_shape``; every intersection is tagged with it.

    Returns:
        The intersections in ascending ``t`` (two for a sphere hit, equal when
        tangent; none for a miss).

    Raises:
        NonInvertibleMatrixError: If the shape's transform is singular.
    """
    local_ray = transform_ray(ray, inverse(shape.transform))
    return [Intersection(t, handle) for t in local_intersect(shape, local_ray)]


def intersect_world(world: World, ray: Ray) -> Intersections:
    """Concatenate the intersections of every shape, in world insertion order.

    The result is not sorted.
    """
    result: Intersections = []
    for handle, shape in world.shape_items():
        result.extend(intersect(shape, ray, handle))
    return result


def hit(xs: Intersections) -> Intersection | None:
    """Select the visible intersection: the smallest non-negative ``t``.

    Ties keep the earliest intersection in ``xs``.

    Returns:
        The hit, or None when ``xs`` is empty or every ``t`` is negative.
    """
    best: Intersection | None = None
    for candidate in xs:
        if candidate.t < 0.0:
            continue
        if best is None or candidate.t < best.t:
            best = candidate
    return best
