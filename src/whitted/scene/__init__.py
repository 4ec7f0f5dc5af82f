"""Scene module for world management and ray-scene queries.

Components:
    world: Arena owning shapes and lights, addressed by shape handles
    lights: Point light sources
    intersection: Intersection records, world intersection and hit selection
    config: Scene serialization to dicts and JSON files
"""

from .config import (
    SceneConfig,
    camera_from_config,
    camera_to_config,
    load_scene,
    save_scene,
    world_from_config,
    world_to_config,
)
from .intersection import (
    Intersection,
    Intersections,
    hit,
    intersect,
    intersect_world,
    intersections,
)
from .lights import PointLight
from .world import ShapeHandle, World, default_world

__all__ = [
    "World",
    "ShapeHandle",
    "default_world",
    "PointLight",
    "Intersection",
    "Intersections",
    "intersections",
    "intersect",
    "intersect_world",
    "hit",
    "SceneConfig",
    "world_to_config",
    "world_from_config",
    "camera_to_config",
    "camera_from_config",
    "save_scene",
    "load_scene",
]
