"""Tolerance-based comparison shared by scalars, tuples and matrices.

Two values compare equal when they differ by less than ``EPSILON``.
Singularity of a matrix is judged separately, against ``SINGULAR_EPSILON``.
"""

EPSILON = 0.0035

# |det| at or below this counts as singular; uniform scales down to about 1e-3 stay invertible
SINGULAR_EPSILON = 1e-9


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return True when two scalars differ by less than epsilon."""
    return abs(a - b) < epsilon
