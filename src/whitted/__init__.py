"""Whitted-style CPU ray tracer.

This package turns a scene of transformable shapes and point lights into a
grid of pixel colors, using analytic ray-shape intersection and Phong shading.

Subpackages:
    core: Tuples, matrices, transforms, rays, the shading integrator and the render loop
    geometry: Shape primitives and their object-space intersection and normals
    materials: Phong material and lighting model
    scene: World, lights, intersections and scene serialization
    camera: Pinhole camera with per-pixel ray generation
    preview: Canvas export (PNG, PPM)
"""

__version__ = "0.1.0"
