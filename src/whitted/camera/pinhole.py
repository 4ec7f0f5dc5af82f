"""Pinhole camera model for perspective projection ray generation.

The camera sits at the origin of its own space, looking down -z, with the
image plane at z = -1. ``transform`` maps world space into camera space
(usually built with ``view_transform``); its inverse carries pixel positions
and the eye back into the world.

The canvas spans ``half_width`` to the left and right of the view axis and
``half_height`` above and below it, with the longer image side covering the
full field of view:

    half_view = tan(field_of_view / 2)
    aspect    = hsize / vsize
    aspect >= 1:  half_width = half_view,           half_height = half_view / aspect
    aspect <  1:  half_width = half_view * aspect,  half_height = half_view

Example:
    >>> import math
    >>> from src.whitted.camera.pinhole import Camera, ray_for_pixel
    >>> camera = Camera(201, 101, math.pi / 2)
    >>> ray = ray_for_pixel(camera, 100, 50)  # Ray through the canvas center
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from src.whitted.core.matrix import Matrix, identity, inverse, multiply_tuple
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import normalize, point


@dataclass
class Camera:
    """Configuration for a pinhole camera.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle covered by the longer image side, in radians.
        transform: World-to-camera transform, identity by default.
    The derived ``half_width``, ``half_height`` and ``pixel_size`` are
    recomputed from the current size and field of view on every access, so
    reassigning ``hsize``, ``vsize`` or ``field_of_view`` keeps them in step.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Matrix = field(default_factory=identity)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {self.hsize}x{self.vsize}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(
                f"Field of view must be in (0, pi) radians, got {self.field_of_view}"
            )

    def _half_extents(self) -> tuple[float, float]:
        self._validate()
        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            return half_view, half_view / aspect
        return half_view * aspect, half_view

    @property
    def half_width(self) -> float:
        """Half the canvas width at unit distance."""
        return self._half_extents()[0]

    @property
    def half_height(self) -> float:
        """Half the canvas height at unit distance."""
        return self._half_extents()[1]

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel at unit distance."""
        return (self.half_width * 2.0) / self.hsize


def ray_for_pixel(camera: Camera, px: int, py: int) -> Ray:
    """Generate the ray from the eye through the center of pixel (px, py).

    Args:
        camera: The camera to shoot from.
        px: Pixel column, 0 at the left edge.
        py: Pixel row, 0 at the top edge.

    Returns:
        A world-space ray with unit direction.

    Raises:
        NonInvertibleMatrixError: If the camera transform is singular.
    """
    # Offset from the canvas edge to the pixel's center
    x_offset = (px + 0.5) * camera.pixel_size
    y_offset = (py + 0.5) * camera.pixel_size

    # Camera looks toward -z, so +x is to the *left*
    world_x = camera.half_width - x_offset
    world_y = camera.half_height - y_offset

    inv = inverse(camera.transform)
    pixel = multiply_tuple(inv, point(world_x, world_y, -1.0))
    origin = multiply_tuple(inv, point(0.0, 0.0, 0.0))
    direction = normalize(pixel - origin)
    return Ray(origin, direction)
