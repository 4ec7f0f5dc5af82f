"""Point light sources."""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.tuples import Tuple


@dataclass(frozen=True)
class PointLight:
    """A light with no size, radiating equally in every direction.

    Attributes:
        position: World-space point where the light sits.
        intensity: Color and brightness of the light.
    """

    position: Tuple
    intensity: Tuple
