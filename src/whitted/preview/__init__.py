"""Preview module for canvas output.

Components:
    export: PNG (Pillow) and plain PPM export, PPM import
"""

from .export import (
    canvas_to_ppm,
    canvas_to_uint8,
    load_ppm,
    ppm_to_canvas,
    save_png,
    save_ppm,
)

__all__ = [
    "canvas_to_uint8",
    "save_png",
    "canvas_to_ppm",
    "save_ppm",
    "ppm_to_canvas",
    "load_ppm",
]
