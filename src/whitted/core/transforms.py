"""Named 4x4 transformation constructors.

All rotations are right-handed and take radians. Transforms compose right to
left: in ``translation(...) @ scaling(...) @ rotate_x(...)`` the rotation is
applied first.
"""

import math

from src.whitted.core.matrix import Matrix, identity
from src.whitted.core.tuples import Tuple, cross, normalize


def translation(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m.set(0, 3, x)
    m.set(1, 3, y)
    m.set(2, 3, z)
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m.set(0, 0, x)
    m.set(1, 1, y)
    m.set(2, 2, z)
    return m


def rotate_x(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_y(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_z(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each coordinate in proportion to the other two.

    ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z, and
    so on.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def translate_scale_rotate(
    trans_x: float,
    trans_y: float,
    trans_z: float,
    scale_x: float,
    scale_y: float,
    scale_z: float,
    alpha_x: float,
    alpha_y: float,
    alpha_z: float,
) -> Matrix:
    """Compose an object-to-world transform in one call.

    The rotation is applied first (about x, then y, then z), followed by the
    scaling and finally the translation.

    Args:
        trans_x: Translation along x.
        trans_y: Translation along y.
        trans_z: Translation along z.
        scale_x: Scale factor along x.
        scale_y: Scale factor along y.
        scale_z: Scale factor along z.
        alpha_x: Rotation about x in radians.
        alpha_y: Rotation about y in radians.
        alpha_z: Rotation about z in radians.

    Returns:
        translation @ scaling @ rotate_z @ rotate_y @ rotate_x.
    """
    rotation = rotate_z(alpha_z) @ rotate_y(alpha_y) @ rotate_x(alpha_x)
    return translation(trans_x, trans_y, trans_z) @ scaling(scale_x, scale_y, scale_z) @ rotation


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the world-to-camera matrix for an eye at ``from_point``.

    The camera looks toward ``to_point`` with ``up`` roughly pointing up.
    The orientation rows are (left, true_up, forward); the eye is then moved
    to the origin.

    Raises:
        DegenerateVectorError: If from and to coincide or up is parallel to
            the view direction.
    """
    forward = normalize(from_point - to_point)
    left = normalize(cross(normalize(up), forward))
    true_up = cross(forward, left)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [forward.x, forward.y, forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
