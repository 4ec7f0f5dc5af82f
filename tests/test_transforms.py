"""Unit tests for transformation constructors.

Tests cover:
- Translation, scaling, rotation and shearing of points and vectors
- Chaining transforms and the combined translate/scale/rotate helper
- The view transform
"""

import math

import pytest


class TestTranslation:
    """Tests for translation matrices."""

    def test_translate_point(self):
        from src.whitted.core.transforms import translation
        from src.whitted.core.tuples import point

        assert translation(5, -3, 2) @ point(-3, 4, 5) == point(2, 1, 7)

    def test_inverse_translation(self):
        from src.whitted.core.matrix import inverse
        from src.whitted.core.transforms import translation
        from src.whitted.core.tuples import point

        assert inverse(translation(5, -3, 2)) @ point(-3, 4, 5) == point(-8, 7, 3)

    def test_translation_ignores_vectors(self):
        """Test that w = 0 keeps vectors unaffected by translation."""
        from src.whitted.core.transforms import translation
        from src.whitted.core.tuples import vector

        v = vector(-3, 4, 5)
        assert translation(5, -3, 2) @ v == v


class TestScaling:
    """Tests for scaling matrices."""

    def test_scale_point_and_vector(self):
        from src.whitted.core.transforms import scaling
        from src.whitted.core.tuples import point, vector

        s = scaling(2, 3, 4)
        assert s @ point(-4, 6, 8) == point(-8, 18, 32)
        assert s @ vector(-4, 6, 8) == vector(-8, 18, 32)

    def test_inverse_scaling(self):
        from src.whitted.core.matrix import inverse
        from src.whitted.core.transforms import scaling
        from src.whitted.core.tuples import vector

        assert inverse(scaling(2, 3, 4)) @ vector(-4, 6, 8) == vector(-2, 2, 2)

    def test_reflection_is_negative_scale(self):
        from src.whitted.core.transforms import scaling
        from src.whitted.core.tuples import point

        assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)


class TestRotation:
    """Tests for rotations about the principal axes."""

    def test_rotate_x(self):
        from src.whitted.core.transforms import rotate_x
        from src.whitted.core.tuples import point

        p = point(0, 1, 0)
        half = math.sqrt(2) / 2
        assert rotate_x(math.pi / 4) @ p == point(0, half, half)
        assert rotate_x(math.pi / 2) @ p == point(0, 0, 1)

    def test_inverse_rotate_x(self):
        from src.whitted.core.matrix import inverse
        from src.whitted.core.transforms import rotate_x
        from src.whitted.core.tuples import point

        half = math.sqrt(2) / 2
        assert inverse(rotate_x(math.pi / 4)) @ point(0, 1, 0) == point(0, half, -half)

    def test_rotate_y(self):
        from src.whitted.core.transforms import rotate_y
        from src.whitted.core.tuples import point

        p = point(0, 0, 1)
        half = math.sqrt(2) / 2
        assert rotate_y(math.pi / 4) @ p == point(half, 0, half)
        assert rotate_y(math.pi / 2) @ p == point(1, 0, 0)

    def test_rotate_z(self):
        from src.whitted.core.transforms import rotate_z
        from src.whitted.core.tuples import point

        p = point(0, 1, 0)
        half = math.sqrt(2) / 2
        assert rotate_z(math.pi / 4) @ p == point(-half, half, 0)
        assert rotate_z(math.pi / 2) @ p == point(-1, 0, 0)


class TestShearing:
    """Tests for shearing matrices."""

    @pytest.mark.parametrize(
        "params, expected",
        [
            ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
        ],
    )
    def test_shearing(self, params, expected):
        from src.whitted.core.transforms import shearing
        from src.whitted.core.tuples import point

        assert shearing(*params) @ point(2, 3, 4) == point(*expected)


class TestChaining:
    """Tests for composing transforms."""

    def test_individual_transforms_in_sequence(self):
        from src.whitted.core.transforms import rotate_x, scaling, translation
        from src.whitted.core.tuples import point

        p = point(1, 0, 1)
        p2 = rotate_x(math.pi / 2) @ p
        assert p2 == point(1, -1, 0)
        p3 = scaling(5, 5, 5) @ p2
        assert p3 == point(5, -5, 0)
        p4 = translation(10, 5, 7) @ p3
        assert p4 == point(15, 0, 7)

    def test_chained_transforms_apply_right_to_left(self):
        from src.whitted.core.transforms import rotate_x, scaling, translation
        from src.whitted.core.tuples import point

        t = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotate_x(math.pi / 2)
        assert t @ point(1, 0, 1) == point(15, 0, 7)

    def test_translate_scale_rotate(self):
        from src.whitted.core.transforms import translate_scale_rotate
        from src.whitted.core.tuples import point

        t = translate_scale_rotate(10, 5, 7, 5, 5, 5, math.pi / 2, 0, 0)
        assert t @ point(1, 0, 1) == point(15, 0, 7)

    def test_translate_scale_rotate_identity(self):
        from src.whitted.core.matrix import identity
        from src.whitted.core.transforms import translate_scale_rotate

        assert translate_scale_rotate(0, 0, 0, 1, 1, 1, 0, 0, 0) == identity()

    def test_translate_scale_rotate_rotation_order(self):
        """Test that x rotation is applied before z rotation."""
        from src.whitted.core.transforms import rotate_x, rotate_z, translate_scale_rotate

        t = translate_scale_rotate(0, 0, 0, 1, 1, 1, math.pi / 2, 0, math.pi / 2)
        assert t == rotate_z(math.pi / 2) @ rotate_x(math.pi / 2)


class TestViewTransform:
    """Tests for the camera view transform."""

    def test_default_orientation_is_identity(self):
        from src.whitted.core.matrix import identity
        from src.whitted.core.transforms import view_transform
        from src.whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        assert t == identity()

    def test_looking_in_positive_z(self):
        from src.whitted.core.transforms import scaling, view_transform
        from src.whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        assert t == scaling(-1, 1, -1)

    def test_view_transform_moves_the_world(self):
        from src.whitted.core.transforms import translation, view_transform
        from src.whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        assert t == translation(0, 0, -8)

    def test_arbitrary_view_transform(self):
        from src.whitted.core.matrix import Matrix
        from src.whitted.core.transforms import view_transform
        from src.whitted.core.tuples import point, vector

        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        assert t == Matrix(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def test_up_parallel_to_view_direction_raises(self):
        from src.whitted.core.errors import DegenerateVectorError
        from src.whitted.core.transforms import view_transform
        from src.whitted.core.tuples import point, vector

        with pytest.raises(DegenerateVectorError):
            view_transform(point(0, 0, 0), point(0, 5, 0), vector(0, 1, 0))

    def test_eye_at_target_raises(self):
        from src.whitted.core.errors import DegenerateVectorError
        from src.whitted.core.transforms import view_transform
        from src.whitted.core.tuples import point, vector

        with pytest.raises(DegenerateVectorError):
            view_transform(point(1, 1, 1), point(1, 1, 1), vector(0, 1, 0))
