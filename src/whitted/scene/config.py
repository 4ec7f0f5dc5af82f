"""Scene serialization to and from plain dictionaries and JSON files.

A scene configuration holds lists of plain dicts so that it maps one to one
onto JSON:

    {
        "shapes": [
            {"type": "sphere", "radius": 1.0,
             "transform": [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]],
             "material": {"color": [1, 0.2, 1], "ambient": 0.1, ...}},
            {"type": "cube", "half_extent": 1.0, ...}
        ],
        "lights": [{"position": [-10, 10, -10], "intensity": [1, 1, 1]}],
        "camera": {"hsize": 100, "vsize": 50, "field_of_view": 1.047,
                   "view": {"from": [0, 1.5, -5], "to": [0, 1, 0], "up": [0, 1, 0]}}
    }

A camera may give either an explicit 4x4 ``transform`` or a ``view`` block,
which is turned into a transform with ``view_transform``.

Example:
    >>> from src.whitted.scene.config import load_scene, world_from_config
    >>> config = load_scene("scene.json")
    >>> world = world_from_config(config)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.whitted.camera.pinhole import Camera
from src.whitted.core.matrix import Matrix, identity
from src.whitted.core.transforms import view_transform
from src.whitted.core.tuples import Tuple, color, point, rgb, vector
from src.whitted.geometry.shapes import Cube, Shape, Sphere
from src.whitted.materials.phong import Material
from src.whitted.scene.lights import PointLight
from src.whitted.scene.world import World


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        shapes: List of shape configurations.
        lights: List of light configurations.
        camera: Optional camera configuration.
    """

    shapes: list[dict[str, Any]] = field(default_factory=list)
    lights: list[dict[str, Any]] = field(default_factory=list)
    camera: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"shapes": self.shapes, "lights": self.lights}
        if self.camera is not None:
            data["camera"] = self.camera
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneConfig:
        return cls(
            shapes=data.get("shapes", []),
            lights=data.get("lights", []),
            camera=data.get("camera"),
        )


def _triple(values: Any, name: str) -> tuple[float, float, float]:
    if len(values) != 3:
        raise ValueError(f"{name} needs 3 components, got {values!r}")
    return (float(values[0]), float(values[1]), float(values[2]))


def _xyz(t: Tuple) -> list[float]:
    return [t.x, t.y, t.z]


# =============================================================================
# Materials and shapes
# =============================================================================


def material_to_config(material: Material) -> dict[str, Any]:
    return {
        "color": list(rgb(material.color)),
        "ambient": material.ambient,
        "diffuse": material.diffuse,
        "specular": material.specular,
        "shininess": material.shininess,
    }


def material_from_config(data: dict[str, Any]) -> Material:
    defaults = Material()
    return Material(
        color=color(*_triple(data.get("color", list(rgb(defaults.color))), "color")),
        ambient=float(data.get("ambient", defaults.ambient)),
        diffuse=float(data.get("diffuse", defaults.diffuse)),
        specular=float(data.get("specular", defaults.specular)),
        shininess=float(data.get("shininess", defaults.shininess)),
    )


def shape_to_config(shape: Shape) -> dict[str, Any]:
    match shape:
        case Sphere():
            data: dict[str, Any] = {"type": "sphere", "radius": shape.radius}
        case Cube():
            data = {"type": "cube", "half_extent": shape.half_extent}
        case _:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
    data["transform"] = shape.transform.rows()
    data["material"] = material_to_config(shape.material)
    return data


def shape_from_config(data: dict[str, Any]) -> Shape:
    """Build a shape from its configuration.

    Raises:
        ValueError: If the shape type is unknown or a field is malformed.
    """
    transform = Matrix(data["transform"]) if "transform" in data else identity()
    material = material_from_config(data.get("material", {}))
    shape_type = data.get("type", "").lower()
    if shape_type == "sphere":
        return Sphere(transform, material, float(data.get("radius", 1.0)))
    if shape_type == "cube":
        return Cube(transform, material, float(data.get("half_extent", 1.0)))
    raise ValueError(f"Unknown shape type: {shape_type}")


# =============================================================================
# Lights and cameras
# =============================================================================


def light_to_config(light: PointLight) -> dict[str, Any]:
    return {"position": _xyz(light.position), "intensity": _xyz(light.intensity)}


def light_from_config(data: dict[str, Any]) -> PointLight:
    position = _triple(data.get("position", [0.0, 0.0, 0.0]), "position")
    intensity = _triple(data.get("intensity", [1.0, 1.0, 1.0]), "intensity")
    return PointLight(point(*position), color(*intensity))


def camera_to_config(camera: Camera) -> dict[str, Any]:
    return {
        "hsize": camera.hsize,
        "vsize": camera.vsize,
        "field_of_view": camera.field_of_view,
        "transform": camera.transform.rows(),
    }


def camera_from_config(data: dict[str, Any]) -> Camera:
    """Build a camera from its configuration.

    Raises:
        KeyError: If hsize, vsize or field_of_view is missing.
        ValueError: If both ``transform`` and ``view`` are given.
    """
    if "transform" in data and "view" in data:
        raise ValueError("Camera config may give 'transform' or 'view', not both")
    if "view" in data:
        view = data["view"]
        transform = view_transform(
            point(*_triple(view["from"], "view.from")),
            point(*_triple(view["to"], "view.to")),
            vector(*_triple(view.get("up", [0.0, 1.0, 0.0]), "view.up")),
        )
    elif "transform" in data:
        transform = Matrix(data["transform"])
    else:
        transform = identity()
    return Camera(
        hsize=int(data["hsize"]),
        vsize=int(data["vsize"]),
        field_of_view=float(data["field_of_view"]),
        transform=transform,
    )


# =============================================================================
# Worlds and files
# =============================================================================


def world_to_config(world: World, camera: Camera | None = None) -> SceneConfig:
    """Export a world (and optionally a camera) to a configuration object."""
    return SceneConfig(
        shapes=[shape_to_config(shape) for shape in world.shapes],
        lights=[light_to_config(light) for light in world.lights],
        camera=camera_to_config(camera) if camera is not None else None,
    )


def world_from_config(config: SceneConfig) -> World:
    """Build a new world from a configuration object.

    Shapes are added in configuration order, so handles follow list indices.
    """
    world = World()
    for light_config in config.lights:
        world.add_light(light_from_config(light_config))
    for shape_config in config.shapes:
        world.add_shape(shape_from_config(shape_config))
    return world


def save_scene(config: SceneConfig, filepath: str | Path) -> None:
    Path(filepath).write_text(json.dumps(config.to_dict(), indent=2))


def load_scene(filepath: str | Path) -> SceneConfig:
    """Read a scene configuration from a JSON file."""
    data = json.loads(Path(filepath).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Scene file {filepath} must contain a JSON object")
    return SceneConfig.from_dict(data)
