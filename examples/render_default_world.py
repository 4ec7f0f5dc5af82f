#!/usr/bin/env python3
"""Render a scene with the Whitted ray tracer.

Renders the default two-sphere world, or a scene loaded from a JSON file, and
saves the result as PNG or PPM (chosen by the output file extension).

Usage:
    python -m examples.render_default_world [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --fov DEGREES       Field of view in degrees (default: 60)
    --scene PATH        JSON scene file (default: built-in default world)
    --output OUTPUT     Output file path, .png or .ppm (default: default_world.png)
    --lenient           Render failing pixels as background instead of aborting
    --verbose           Log per-row progress

Example:
    python -m examples.render_default_world --width 320 --height 160 --output world.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger("render_default_world")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=200, help="Image width (default: 200)")
    parser.add_argument("--height", type=int, default=100, help="Image height (default: 100)")
    parser.add_argument(
        "--fov", type=float, default=60.0, help="Field of view in degrees (default: 60)"
    )
    parser.add_argument("--scene", type=str, default=None, help="JSON scene file")
    parser.add_argument(
        "--output",
        type=str,
        default="default_world.png",
        help="Output file path, .png or .ppm (default: default_world.png)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Render failing pixels as background instead of aborting",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-row progress")
    return parser.parse_args()


def render_scene(
    width: int = 200,
    height: int = 100,
    fov_degrees: float = 60.0,
    scene_path: str | None = None,
    output_path: str = "default_world.png",
    lenient: bool = False,
) -> Path:
    """Render a scene and save it to ``output_path``.

    A camera stored in the scene file takes precedence over the size and
    field-of-view arguments.

    Returns:
        Path to the saved image file.
    """
    from src.whitted.camera.pinhole import Camera
    from src.whitted.core.renderer import render
    from src.whitted.core.transforms import view_transform
    from src.whitted.core.tuples import point, radians, vector
    from src.whitted.preview.export import save_png, save_ppm
    from src.whitted.scene.config import camera_from_config, load_scene, world_from_config
    from src.whitted.scene.world import default_world

    camera = None
    if scene_path is not None:
        config = load_scene(scene_path)
        world = world_from_config(config)
        if config.camera is not None:
            camera = camera_from_config(config.camera)
    else:
        world = default_world()

    if camera is None:
        camera = Camera(width, height, radians(fov_degrees))
        camera.transform = view_transform(
            point(0.0, 1.5, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)
        )

    def progress_callback(current: int, total: int) -> None:
        if current == total or current % max(1, total // 10) == 0:
            logger.info("Progress: %d/%d rows (%.0f%%)", current, total, 100.0 * current / total)

    canvas = render(
        camera,
        world,
        on_error="background" if lenient else "raise",
        callback=progress_callback,
    )

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)
    logger.info("Saved to: %s", output_file.absolute())
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not 0.0 < args.fov < 180.0:
        logger.error("Field of view must be between 0 and 180 degrees")
        return 2

    try:
        render_scene(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            scene_path=args.scene,
            output_path=args.output,
            lenient=args.lenient,
        )
        return 0
    except (OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
