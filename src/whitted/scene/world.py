"""World: the arena that owns every shape and light of a scene.

Shapes are referenced elsewhere (intersections, prepared computations) by a
``ShapeHandle``, the shape's insertion index. Handles are only meaningful for
the world that issued them.

A world is built once, then frozen before rendering; adding objects to a
frozen world, or calling ``set`` on one of its shape transforms, raises
``RuntimeError``.

Example:
    >>> from src.whitted.scene.world import World
    >>> from src.whitted.geometry.shapes import Sphere
    >>> world = World()
    >>> handle = world.add_shape(Sphere())
    >>> world.shape(handle)
    Sphere(...)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NewType

from src.whitted.core.transforms import scaling
from src.whitted.core.tuples import color, point
from src.whitted.geometry.shapes import Shape, Sphere
from src.whitted.materials.phong import Material
from src.whitted.scene.lights import PointLight

ShapeHandle = NewType("ShapeHandle", int)


class World:
    """An owning collection of shapes plus an owning collection of lights.

    Insertion order is preserved and is the order in which shapes are
    intersected.
    """

    def __init__(self) -> None:
        self._shapes: list[Shape] = []
        self._lights: list[PointLight] = []
        self._frozen = False

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Cannot modify a frozen world")

    def add_shape(self, shape: Shape) -> ShapeHandle:
        """Add a shape and return the handle that refers to it."""
        self._check_mutable()
        self._shapes.append(shape)
        return ShapeHandle(len(self._shapes) - 1)

    def add_light(self, light: PointLight) -> int:
        """Add a light and return its index."""
        self._check_mutable()
        self._lights.append(light)
        return len(self._lights) - 1

    def shape(self, handle: ShapeHandle) -> Shape:
        """Resolve a handle to the shape it refers to.

        Raises:
            KeyError: If the handle was not issued by this world.
        """
        if not 0 <= handle < len(self._shapes):
            raise KeyError(f"Unknown shape handle {handle}")
        return self._shapes[handle]

    def shape_items(self) -> Iterator[tuple[ShapeHandle, Shape]]:
        """Iterate over (handle, shape) pairs in insertion order."""
        for index, shape in enumerate(self._shapes):
            yield ShapeHandle(index), shape

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def lights(self) -> tuple[PointLight, ...]:
        return tuple(self._lights)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> World:
        """Mark the world and its shape transforms read-only. Returns self for chaining."""
        for shape in self._shapes:
            shape.transform.freeze()
        self._frozen = True
        return self

    def __len__(self) -> int:
        return len(self._shapes)


def default_world() -> World:
    """The standard two-sphere, one-light test world.

    A white light at (-10, 10, -10); an outer unit sphere with a green-yellow
    material; an inner sphere scaled to half size.
    """
    world = World()
    world.add_light(PointLight(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0)))
    world.add_shape(
        Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    )
    world.add_shape(Sphere(transform=scaling(0.5, 0.5, 0.5)))
    return world
