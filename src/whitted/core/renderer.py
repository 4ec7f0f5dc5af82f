"""Render loop: one ray per pixel, one color per canvas cell.

Every pixel is an independent function of the (frozen) world and the
camera, so the loop has no ordering constraints beyond writing each result
into its own cell.

Failure handling is chosen by the caller:

    on_error="raise"       geometric errors propagate and abort the render
    on_error="background"  the failing pixel gets the background color, the
                           substitution is counted on the canvas and logged

Example:
    >>> import math
    >>> from src.whitted.camera.pinhole import Camera
    >>> from src.whitted.core.renderer import render
    >>> from src.whitted.core.transforms import view_transform
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.scene.world import default_world
    >>> camera = Camera(11, 11, math.pi / 2)
    >>> camera.transform = view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    >>> canvas = render(camera, default_world())
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Literal

from src.whitted.camera.pinhole import Camera, ray_for_pixel
from src.whitted.core.canvas import Canvas
from src.whitted.core.errors import RayTracerError, RenderCancelledError
from src.whitted.core.integrator import BACKGROUND_COLOR, color_at
from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

# Polled once per pixel; returning True stops the render
CancelCheck = Callable[[], bool]

ErrorPolicy = Literal["raise", "background"]


def render(
    camera: Camera,
    world: World,
    *,
    on_error: ErrorPolicy = "raise",
    callback: ProgressCallback | None = None,
    should_cancel: CancelCheck | None = None,
) -> Canvas:
    """Render ``world`` as seen by ``camera``.

    The world is frozen before the first ray is cast.

    Args:
        camera: The camera generating primary rays.
        world: The scene to render.
        on_error: "raise" to propagate geometric failures, "background" to
            substitute the background color for the failing pixel.
        callback: Optional progress callback, called after each row.
        should_cancel: Optional check polled before every pixel.

    Returns:
        A canvas of size camera.hsize x camera.vsize.

    Raises:
        RayTracerError: A geometric failure under on_error="raise".
        RenderCancelledError: If ``should_cancel`` returned True.
        ValueError: If ``on_error`` is not a known policy.
    """
    if on_error not in ("raise", "background"):
        raise ValueError(f"Unknown error policy: {on_error!r}")

    world.freeze()
    canvas = Canvas(camera.hsize, camera.vsize)
    logger.info(
        "Rendering %dx%d image of %d shapes and %d lights",
        camera.hsize,
        camera.vsize,
        len(world),
        len(world.lights),
    )
    start_time = time.perf_counter()

    pixels_done = 0
    for y in range(camera.vsize):
        for x in range(camera.hsize):
            if should_cancel is not None and should_cancel():
                logger.info("Render cancelled after %d pixels", pixels_done)
                raise RenderCancelledError(pixels_done)
            canvas.write_pixel(x, y, _render_pixel(camera, world, x, y, on_error, canvas))
            pixels_done += 1
        logger.debug("Finished row %d/%d", y + 1, camera.vsize)
        if callback is not None:
            callback(y + 1, camera.vsize)

    if canvas.substituted_pixels:
        logger.warning(
            "%d pixels fell back to the background color", canvas.substituted_pixels
        )
    logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
    return canvas


def _render_pixel(
    camera: Camera, world: World, x: int, y: int, on_error: ErrorPolicy, canvas: Canvas
):
    try:
        return color_at(world, ray_for_pixel(camera, x, y))
    except RayTracerError as exc:
        if on_error == "raise":
            raise
        logger.debug("Pixel (%d, %d) substituted: %s", x, y, exc)
        canvas.substituted_pixels += 1
        return BACKGROUND_COLOR
