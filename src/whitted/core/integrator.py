"""Whitted-style shading: from a ray to the color it sees.

The pipeline for one ray is:

    intersect_world -> hit -> prepare_computations -> shade_hit -> color

``prepare_computations`` derives the world-space hit point, the eye vector
and the surface normal (flipped when the eye is inside the shape).
``shade_hit`` sums the Phong contribution of every light, testing each light
for shadows with a ray cast from just above the surface.

Geometric failures (a singular shape transform, a zero-length vector) are
raised to the caller; ``core.renderer`` decides whether they abort the render.

Example:
    >>> from src.whitted.core.integrator import color_at
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.scene.world import default_world
    >>> c = color_at(default_world(), Ray(point(0, 0, -5), vector(0, 0, 1)))
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrix import inverse, multiply_tuple, transpose
from src.whitted.core.ray import Ray, position_at
from src.whitted.core.tolerance import EPSILON
from src.whitted.core.tuples import BLACK, Tuple, dot, mag, normalize
from src.whitted.geometry.shapes import Shape, local_normal_at
from src.whitted.materials.phong import lighting
from src.whitted.scene.intersection import Intersection, hit, intersect_world
from src.whitted.scene.lights import PointLight
from src.whitted.scene.world import ShapeHandle, World

# Color returned for rays that hit nothing
BACKGROUND_COLOR = BLACK


@dataclass(frozen=True)
class PreparedComputation:
    """Per-hit values consumed by shading.

    Attributes:
        t: Ray parameter of the hit.
        handle: Handle of the hit shape.
        point: World-space hit point.
        over_point: ``point`` nudged along the normal, used as the origin of
            shadow rays so a surface does not shadow itself.
        eye: Unit vector from the hit point back toward the ray origin.
        normal: Unit surface normal, facing the eye.
        inside: True when the ray origin is inside the shape.
    """

    t: float
    handle: ShapeHandle
    point: Tuple
    over_point: Tuple
    eye: Tuple
    normal: Tuple
    inside: bool


def normal_at(shape: Shape, world_point: Tuple) -> Tuple:
    """World-space unit normal of ``shape`` at ``world_point``.

    The point is moved into object space, the object-space normal is taken
    there, and it is carried back with the transpose of the inverse transform.

    Raises:
        NonInvertibleMatrixError: If the shape's transform is singular.
        DegenerateVectorError: If the normal collapses to zero length.
    """
    inv = inverse(shape.transform)
    local_point = multiply_tuple(inv, world_point)
    local_normal = local_normal_at(shape, local_point)
    world_normal = multiply_tuple(transpose(inv), local_normal)
    # Translations leak into w through the transposed inverse.
    world_normal = Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0)
    return normalize(world_normal)


def prepare_computations(
    intersection: Intersection, ray: Ray, world: World
) -> PreparedComputation:
    """Derive the shading inputs for one intersection.

    Args:
        intersection: The hit to shade.
        ray: The ray that produced it.
        world: The world that owns the intersected shape.

    Returns:
        The prepared computation for ``intersection``.
    """
    shape = world.shape(intersection.handle)
    hit_point = position_at(ray, intersection.t)
    eye = -ray.direction
    normal = normal_at(shape, hit_point)

    inside = False
    if dot(normal, eye) < 0.0:
        inside = True
        normal = -normal

    return PreparedComputation(
        t=intersection.t,
        handle=intersection.handle,
        point=hit_point,
        over_point=hit_point + normal * EPSILON,
        eye=eye,
        normal=normal,
        inside=inside,
    )


def _shadowed_by(world: World, point: Tuple, light: PointLight) -> bool:
    to_light = light.position - point
    distance = mag(to_light)
    shadow_ray = Ray(point, normalize(to_light))
    blocker = hit(intersect_world(world, shadow_ray))
    return blocker is not None and 0.0 < blocker.t < distance


def is_shadowed(world: World, point: Tuple, light: PointLight | None = None) -> bool:
    """Test whether something lies between ``point`` and a light.

    Args:
        world: The world to test against.
        point: World-space point being shaded.
        light: The light to test. When omitted, the point counts as shadowed
            if any light in the world is blocked.

    Returns:
        True when an intersection lies strictly between the point and the light.
    """
    if light is not None:
        return _shadowed_by(world, point, light)
    return any(_shadowed_by(world, point, each) for each in world.lights)


def shade_hit(world: World, comps: PreparedComputation) -> Tuple:
    """Sum the Phong contribution of every light at a prepared hit."""
    material = world.shape(comps.handle).material
    result = BLACK
    for light in world.lights:
        shadowed = is_shadowed(world, comps.over_point, light)
        result = result + lighting(
            material, light, comps.point, comps.eye, comps.normal, shadowed
        )
    return result


def color_at(world: World, ray: Ray) -> Tuple:
    """Color seen along ``ray``: the shaded hit, or the background on a miss."""
    visible = hit(intersect_world(world, ray))
    if visible is None:
        return BACKGROUND_COLOR
    comps = prepare_computations(visible, ray, world)
    return shade_hit(world, comps)
