"""Geometry module for shape primitives.

Components:
    shapes: Sphere and cube variants with object-space intersection and normals

World-space intersection (applying each shape's transform) lives in
``scene.intersection``.
"""

from .shapes import Cube, Shape, Sphere, local_intersect, local_normal_at

__all__ = [
    "Sphere",
    "Cube",
    "Shape",
    "local_intersect",
    "local_normal_at",
]
