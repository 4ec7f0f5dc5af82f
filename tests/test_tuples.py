"""Unit tests for tuple algebra.

Tests cover:
- Point and vector construction and the w convention
- Arithmetic between points and vectors
- Scalar, Hadamard, dot and cross products
- Magnitude, normalization and reflection
- Tolerance-based equality
"""

import math

import pytest


class TestConstruction:
    """Tests for point, vector and color constructors."""

    def test_point_has_w_one(self):
        """Test that points carry w = 1."""
        from src.whitted.core.tuples import point

        p = point(4.3, -4.2, 3.1)
        assert p.w == 1.0
        assert p.is_point()
        assert not p.is_vector()

    def test_vector_has_w_zero(self):
        """Test that vectors carry w = 0."""
        from src.whitted.core.tuples import vector

        v = vector(4.3, -4.2, 3.1)
        assert v.w == 0.0
        assert v.is_vector()
        assert not v.is_point()

    def test_color_channels(self):
        """Test that color channels read the first three slots."""
        from src.whitted.core.tuples import blue, color, green, red, rgb

        c = color(-0.5, 0.4, 1.7)
        assert red(c) == -0.5
        assert green(c) == 0.4
        assert blue(c) == 1.7
        assert rgb(c) == (-0.5, 0.4, 1.7)

    def test_radians(self):
        """Test degree to radian conversion."""
        from src.whitted.core.tuples import radians

        assert radians(180.0) == pytest.approx(math.pi)
        assert radians(90.0) == pytest.approx(math.pi / 2)


class TestArithmetic:
    """Tests for addition, subtraction and negation."""

    def test_point_plus_vector_is_point(self):
        """Test point + vector = point."""
        from src.whitted.core.tuples import Tuple

        result = Tuple(3, -2, 5, 1) + Tuple(-2, 3, 1, 0)
        assert result == Tuple(1, 1, 6, 1)
        assert result.is_point()

    def test_point_minus_point_is_vector(self):
        """Test point - point = vector."""
        from src.whitted.core.tuples import point, vector

        result = point(3, 2, 1) - point(5, 6, 7)
        assert result == vector(-2, -4, -6)
        assert result.is_vector()

    def test_point_minus_vector_is_point(self):
        """Test point - vector = point."""
        from src.whitted.core.tuples import point, vector

        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_vector_plus_vector_is_vector(self):
        """Test vector + vector = vector."""
        from src.whitted.core.tuples import vector

        result = vector(3, 2, 1) + vector(5, 6, 7)
        assert result == vector(8, 8, 8)
        assert result.is_vector()

    def test_negate(self):
        """Test negating every component."""
        from src.whitted.core.tuples import Tuple, negate

        assert negate(Tuple(1, -2, 3, -4)) == Tuple(-1, 2, -3, 4)
        assert -Tuple(1, -2, 3, -4) == Tuple(-1, 2, -3, 4)

    def test_scalar_multiplication_and_division(self):
        """Test multiplying and dividing by scalars."""
        from src.whitted.core.tuples import Tuple

        a = Tuple(1, -2, 3, -4)
        assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
        assert 0.5 * a == Tuple(0.5, -1, 1.5, -2)
        assert a / 2 == Tuple(0.5, -1, 1.5, -2)


class TestColors:
    """Tests for color arithmetic (same operations as tuples)."""

    def test_adding_colors(self):
        from src.whitted.core.tuples import color

        assert color(0.9, 0.6, 0.75) + color(0.7, 0.1, 0.25) == color(1.6, 0.7, 1.0)

    def test_subtracting_colors(self):
        from src.whitted.core.tuples import color

        assert color(0.9, 0.6, 0.75) - color(0.7, 0.1, 0.25) == color(0.2, 0.5, 0.5)

    def test_hadamard_product(self):
        """Test blending two colors channel by channel."""
        from src.whitted.core.tuples import color, hadamard

        c1 = color(1, 0.2, 0.4)
        c2 = color(0.9, 1, 0.1)
        assert hadamard(c1, c2) == color(0.9, 0.2, 0.04)
        assert c1 * c2 == color(0.9, 0.2, 0.04)


class TestProducts:
    """Tests for dot and cross products."""

    def test_dot(self):
        from src.whitted.core.tuples import dot, vector

        assert dot(vector(1, 2, 3), vector(2, 3, 4)) == pytest.approx(20.0)

    def test_cross(self):
        """Test that the cross product is anti-commutative."""
        from src.whitted.core.tuples import cross, vector

        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert cross(a, b) == vector(-1, 2, -1)
        assert cross(b, a) == vector(1, -2, 1)


class TestMagnitude:
    """Tests for magnitude and normalization."""

    @pytest.mark.parametrize(
        "components, expected",
        [
            ((1, 0, 0), 1.0),
            ((0, 1, 0), 1.0),
            ((1, 2, 3), math.sqrt(14)),
            ((-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_mag(self, components, expected):
        from src.whitted.core.tuples import mag, mag_squared, vector

        v = vector(*components)
        assert mag(v) == pytest.approx(expected)
        assert mag_squared(v) == pytest.approx(expected * expected)

    def test_normalize(self):
        from src.whitted.core.tuples import normalize, vector

        assert normalize(vector(4, 0, 0)) == vector(1, 0, 0)
        assert normalize(vector(1, 2, 3)) == vector(0.26726, 0.53452, 0.80178)

    def test_normalized_vector_has_unit_length(self):
        from src.whitted.core.tuples import mag, normalize, vector

        for v in (vector(1, 2, 3), vector(-7, 0.01, 12), vector(0, 0, 1e-3)):
            assert mag(normalize(v)) == pytest.approx(1.0)

    def test_normalize_zero_vector_raises(self):
        """Test that a zero-length vector cannot be normalized."""
        from src.whitted.core.errors import DegenerateVectorError
        from src.whitted.core.tuples import normalize, vector

        with pytest.raises(DegenerateVectorError):
            normalize(vector(0, 0, 0))


class TestReflect:
    """Tests for reflecting vectors about normals."""

    def test_reflect_at_45_degrees(self):
        from src.whitted.core.tuples import reflect, vector

        assert reflect(vector(1, -1, 0), vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        from src.whitted.core.tuples import reflect, vector

        half = math.sqrt(2) / 2
        assert reflect(vector(0, -1, 0), vector(half, half, 0)) == vector(1, 0, 0)


class TestEquality:
    """Tests for tolerance-based equality."""

    def test_equal_within_epsilon(self):
        from src.whitted.core.tolerance import EPSILON
        from src.whitted.core.tuples import point

        assert point(1, 2, 3) == point(1 + EPSILON / 2, 2, 3)

    def test_not_equal_beyond_epsilon(self):
        from src.whitted.core.tolerance import EPSILON
        from src.whitted.core.tuples import point

        assert point(1, 2, 3) != point(1 + EPSILON * 2, 2, 3)

    def test_point_is_not_vector(self):
        from src.whitted.core.tuples import point, vector

        assert point(1, 2, 3) != vector(1, 2, 3)

    def test_approx_equal_scalars(self):
        from src.whitted.core.tolerance import approx_equal

        assert approx_equal(1.0, 1.001)
        assert not approx_equal(1.0, 1.01)
        assert approx_equal(1.0, 1.01, epsilon=0.1)
