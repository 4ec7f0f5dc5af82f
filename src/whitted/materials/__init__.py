"""Materials module for the Phong reflection model."""

from .phong import Material, lighting

__all__ = ["Material", "lighting"]
