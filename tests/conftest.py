"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules.
"""

import math

import pytest


@pytest.fixture
def default_world():
    """Create a fresh default two-sphere world for each test."""
    from src.whitted.scene.world import default_world

    return default_world()


@pytest.fixture
def front_ray():
    """Ray from z=-5 travelling down +z toward the origin."""
    from src.whitted.core.ray import Ray
    from src.whitted.core.tuples import point, vector

    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))


@pytest.fixture
def center_camera():
    """11x11 camera at (0, 0, -5) looking at the origin."""
    from src.whitted.camera.pinhole import Camera
    from src.whitted.core.transforms import view_transform
    from src.whitted.core.tuples import point, vector

    camera = Camera(11, 11, math.pi / 2)
    camera.transform = view_transform(
        point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)
    )
    return camera
