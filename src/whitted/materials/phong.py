"""Phong surface material and the Phong lighting model.

The reflected color at a point is the sum of three terms:

    ambient  = color * light.intensity * ambient
    diffuse  = color * light.intensity * diffuse * dot(light_dir, normal)
    specular = light.intensity * specular * dot(reflect_dir, eye) ** shininess

Diffuse and specular drop to black when the light sits behind the surface or
in shadow; specular also drops out when the reflection points away from the eye.

Example:
    >>> from src.whitted.materials.phong import Material, lighting
    >>> from src.whitted.scene.lights import PointLight
    >>> from src.whitted.core.tuples import point, vector, color
    >>> light = PointLight(point(0, 0, -10), color(1, 1, 1))
    >>> c = lighting(Material(), light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    >>> c == color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.whitted.core.tolerance import approx_equal
from src.whitted.core.tuples import BLACK, WHITE, Tuple, dot, normalize, reflect

if TYPE_CHECKING:
    from src.whitted.scene.lights import PointLight


@dataclass(frozen=True, eq=False)
class Material:
    """Phong material properties.

    Attributes:
        color: Base surface color.
        ambient: Fraction of ambient light reflected, typically in [0, 1].
        diffuse: Fraction of diffuse light reflected, typically in [0, 1].
        specular: Strength of the specular highlight, typically in [0, 1].
        shininess: Highlight tightness, typically in [10, 200].
    """

    color: Tuple = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.color == other.color
            and approx_equal(self.ambient, other.ambient)
            and approx_equal(self.diffuse, other.diffuse)
            and approx_equal(self.specular, other.specular)
            and approx_equal(self.shininess, other.shininess)
        )

    __hash__ = None  # type: ignore[assignment]


def lighting(
    material: Material,
    light: PointLight,
    position: Tuple,
    eye: Tuple,
    normal: Tuple,
    in_shadow: bool = False,
) -> Tuple:
    """Shade one point lit by one point light.

    Args:
        material: Material of the surface being shaded.
        light: The light source.
        position: World-space point being shaded.
        eye: Unit vector from the point toward the eye.
        normal: Unit surface normal at the point.
        in_shadow: When True only the ambient term is returned.

    Returns:
        The color contributed by this light.
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    light_dir = normalize(light.position - position)
    light_dot_normal = dot(light_dir, normal)
    if light_dot_normal < 0.0:
        # Light is on the other side of the surface.
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)
    specular = BLACK
    reflect_dir = reflect(-light_dir, normal)
    reflect_dot_eye = dot(reflect_dir, eye)
    if reflect_dot_eye > 0.0:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
