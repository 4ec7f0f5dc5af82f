"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole (perspective) camera with per-pixel rays
"""

from .pinhole import Camera, ray_for_pixel

__all__ = ["Camera", "ray_for_pixel"]
