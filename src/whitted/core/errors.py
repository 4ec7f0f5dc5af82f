"""Exceptions raised by the ray tracing core.

Geometric failures are reported to the immediate caller instead of being
folded into degenerate values (a zero matrix, a NaN vector). The renderer
decides whether such a failure aborts the render or falls back to the
background color.
"""


class RayTracerError(Exception):
    """Base class for all ray tracer failures."""


class NonInvertibleMatrixError(RayTracerError, ValueError):
    """Raised when inverting a matrix whose determinant is within epsilon of zero.

    Attributes:
        determinant: The determinant that made the inversion impossible.
    """

    def __init__(self, determinant: float) -> None:
        super().__init__(f"Matrix is not invertible (determinant={determinant:g})")
        self.determinant = determinant


class DegenerateVectorError(RayTracerError, ValueError):
    """Raised when normalizing a zero-length vector."""


class MatrixDimensionError(RayTracerError, ValueError):
    """Raised when a matrix operation receives a matrix of the wrong size."""


class RenderCancelledError(RayTracerError):
    """Raised when a render is cancelled before every pixel was computed.

    Attributes:
        pixels_done: Number of pixels computed before cancellation.
    """

    def __init__(self, pixels_done: int) -> None:
        super().__init__(f"Render cancelled after {pixels_done} pixels")
        self.pixels_done = pixels_done
