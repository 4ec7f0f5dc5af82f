"""Four-component tuples for points, vectors and colors.

A single Tuple type carries every 4-slot value in the tracer. The ``w``
component tells points (w=1) from vectors (w=0); colors reuse the first three
slots as red, green and blue and are read through the channel helpers below.

Arithmetic follows the usual homogeneous-coordinate rules:

    point + vector  -> point
    point - point   -> vector
    vector + vector -> vector

Example:
    >>> from src.whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0) + vector(0.0, 0.0, 1.0)
    >>> p.is_point()
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.whitted.core.errors import DegenerateVectorError
from src.whitted.core.tolerance import EPSILON, approx_equal


@dataclass(frozen=True, eq=False, slots=True)
class Tuple:
    """A plain 4-slot numeric value.

    Attributes:
        x: First component (red for colors).
        y: Second component (green for colors).
        z: Third component (blue for colors).
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index: int) -> float:
        return self.as_list()[index]

    def __add__(self, other: Tuple) -> Tuple:
        return add(self, other)

    def __sub__(self, other: Tuple) -> Tuple:
        return sub(self, other)

    def __neg__(self) -> Tuple:
        return negate(self)

    def __mul__(self, other: Tuple | float) -> Tuple:
        if isinstance(other, Tuple):
            return hadamard(self, other)
        return scale(self, other)

    def __rmul__(self, other: float) -> Tuple:
        return scale(self, other)

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]


# =============================================================================
# Constructors
# =============================================================================


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a direction vector (w = 0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


def color(r: float, g: float, b: float) -> Tuple:
    """Create a color from its red, green and blue channels."""
    return Tuple(float(r), float(g), float(b), 0.0)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
ORIGIN = point(0.0, 0.0, 0.0)


def red(c: Tuple) -> float:
    return c.x


def green(c: Tuple) -> float:
    return c.y


def blue(c: Tuple) -> float:
    return c.z


def rgb(c: Tuple) -> tuple[float, float, float]:
    """Read a color tuple as an (r, g, b) triple."""
    return (c.x, c.y, c.z)


def radians(degrees: float) -> float:
    return math.radians(degrees)


# =============================================================================
# Arithmetic
# =============================================================================


def add(a: Tuple, b: Tuple) -> Tuple:
    return Tuple(a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w)


def sub(a: Tuple, b: Tuple) -> Tuple:
    return Tuple(a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w)


def negate(a: Tuple) -> Tuple:
    return Tuple(-a.x, -a.y, -a.z, -a.w)


def scale(a: Tuple, s: float) -> Tuple:
    """Multiply every component by a scalar."""
    return Tuple(a.x * s, a.y * s, a.z * s, a.w * s)


def hadamard(a: Tuple, b: Tuple) -> Tuple:
    """Elementwise (Hadamard/Schur) product, used to blend colors."""
    return Tuple(a.x * b.x, a.y * b.y, a.z * b.z, a.w * b.w)


def dot(a: Tuple, b: Tuple) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Cross product of the xyz parts. The result is always a vector."""
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def mag_squared(a: Tuple) -> float:
    return dot(a, a)


def mag(a: Tuple) -> float:
    return math.sqrt(mag_squared(a))


def normalize(a: Tuple) -> Tuple:
    """Scale a tuple to unit length.

    Raises:
        DegenerateVectorError: If the tuple has zero length.
    """
    length = mag(a)
    if length == 0.0:
        raise DegenerateVectorError(f"Cannot normalize zero-length tuple {a!r}")
    return Tuple(a.x / length, a.y / length, a.z / length, a.w / length)


def reflect(incident: Tuple, normal: Tuple) -> Tuple:
    """Reflect an incoming vector about a normal: in - 2 * dot(in, n) * n."""
    return incident - normal * (2.0 * dot(incident, normal))


def equal(a: Tuple, b: Tuple, epsilon: float = EPSILON) -> bool:
    """Elementwise comparison within epsilon."""
    return (
        approx_equal(a.x, b.x, epsilon)
        and approx_equal(a.y, b.y, epsilon)
        and approx_equal(a.z, b.z, epsilon)
        and approx_equal(a.w, b.w, epsilon)
    )
