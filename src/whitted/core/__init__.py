"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tolerance: Shared epsilon comparison
    errors: Exception taxonomy for geometric failures
    tuples: Points, vectors and colors
    matrix: Square matrices with cofactor determinant and adjugate inverse
    transforms: Translation, scaling, rotation, shearing and view transforms
    ray: Ray data structure and transformation
    canvas: Color buffer produced by rendering
    integrator: Shading pipeline (prepare computations, shadows, Phong)
    renderer: Per-pixel render loop
"""

from .canvas import Canvas
from .errors import (
    DegenerateVectorError,
    MatrixDimensionError,
    NonInvertibleMatrixError,
    RayTracerError,
    RenderCancelledError,
)
from .matrix import (
    Invertibility,
    Matrix,
    cofactor,
    determinant,
    identity,
    inverse,
    is_invertible,
    minor,
    multiply,
    multiply_tuple,
    submatrix,
    transpose,
)
from .ray import Ray, position_at, transform_ray
from .tolerance import EPSILON, approx_equal
from .transforms import (
    rotate_x,
    rotate_y,
    rotate_z,
    scaling,
    shearing,
    translate_scale_rotate,
    translation,
    view_transform,
)
from .tuples import (
    BLACK,
    WHITE,
    Tuple,
    color,
    cross,
    dot,
    hadamard,
    mag,
    mag_squared,
    normalize,
    point,
    reflect,
    vector,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from src.whitted.core.integrator or src.whitted.core.renderer.

__all__ = [
    "Canvas",
    "RayTracerError",
    "NonInvertibleMatrixError",
    "DegenerateVectorError",
    "MatrixDimensionError",
    "RenderCancelledError",
    "Matrix",
    "Invertibility",
    "identity",
    "transpose",
    "multiply",
    "multiply_tuple",
    "submatrix",
    "minor",
    "cofactor",
    "determinant",
    "is_invertible",
    "inverse",
    "Ray",
    "position_at",
    "transform_ray",
    "EPSILON",
    "approx_equal",
    "translation",
    "scaling",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "shearing",
    "translate_scale_rotate",
    "view_transform",
    "Tuple",
    "point",
    "vector",
    "color",
    "BLACK",
    "WHITE",
    "dot",
    "cross",
    "hadamard",
    "mag",
    "mag_squared",
    "normalize",
    "reflect",
]
