"""
Test vector and quaternion algebra.
"""

import math
import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.geometry import Vector3D, Quaternion, ZERO


def assert_vec_close(actual, expected, atol=1e-12):
    np.testing.assert_allclose(actual.to_array(), expected.to_array(), rtol=0, atol=atol)


class TestVector3D:
    """Test Vector3D operations."""

    def test_arithmetic(self):
        a = Vector3D(1.0, 2.0, 3.0)
        b = Vector3D(-1.0, 0.5, 2.0)

        assert a + b == Vector3D(0.0, 2.5, 5.0)
        assert a - b == Vector3D(2.0, 1.5, 1.0)
        assert -a == Vector3D(-1.0, -2.0, -3.0)
        assert a * 2 == Vector3D(2.0, 4.0, 6.0)
        assert 2 * a == a * 2
        assert a / 2 == Vector3D(0.5, 1.0, 1.5)

    def test_dot_and_cross(self):
        v1 = Vector3D(1.0, 0.0, 0.0)
        v2 = Vector3D(0.0, 1.0, 0.0)

        assert v1.dot(v2) == 0.0
        assert v1.cross(v2) == Vector3D(0.0, 0.0, 1.0)
        assert v2.cross(v1) == Vector3D(0.0, 0.0, -1.0)

    def test_magnitude_and_normalize(self):
        v = Vector3D(3.0, 4.0, 0.0)

        assert v.magnitude() == 5.0
        assert v.magnitude_squared() == 25.0
        assert abs(v.normalize().magnitude() - 1.0) < 1e-12

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ValueError):
            ZERO.normalize()

    def test_divide_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vector3D(1.0, 0.0, 0.0) / 0.0

    def test_array_round_trip(self):
        v = Vector3D(1.5, -2.0, 0.25)
        arr = v.to_array()
        np.testing.assert_array_equal(arr, [1.5, -2.0, 0.25])
        assert Vector3D.from_array(arr) == v

    def test_from_array_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Vector3D.from_array(np.zeros(2))

    def test_value_semantics(self):
        v = Vector3D(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    @pytest.mark.parametrize("v", [
        Vector3D(1.0, 0.0, 0.0),
        Vector3D(0.0, 0.0, 2.0),
        Vector3D(1.0, 1.0, 1.0),
        Vector3D(-3.0, 0.2, 0.1),
    ])
    def test_any_unit_normal(self, v):
        n = Vector3D.any_unit_normal(v)
        assert abs(n.magnitude() - 1.0) < 1e-12
        assert abs(n.dot(v)) < 1e-12


class TestQuaternion:
    """Test rotation quaternions."""

    def test_hamilton_product_is_not_commutative(self):
        i = Quaternion(0.0, 1.0, 0.0, 0.0)
        j = Quaternion(0.0, 0.0, 1.0, 0.0)

        assert i * j == Quaternion(0.0, 0.0, 0.0, 1.0)
        assert j * i == Quaternion(0.0, 0.0, 0.0, -1.0)

    def test_from_angle_axis_is_unit(self):
        q = Quaternion.from_angle_axis(1.234, Vector3D(0.0, 0.0, 5.0))
        assert abs(q.norm() - 1.0) < 1e-12

    def test_quarter_turn_about_z(self):
        q = Quaternion.from_angle_axis(math.pi / 2, Vector3D(0.0, 0.0, 1.0))
        rotated = Vector3D(1.0, 0.0, 0.0).rotate_by(q)
        assert_vec_close(rotated, Vector3D(0.0, 1.0, 0.0))

    def test_rotation_follows_right_hand_rule(self):
        q = Quaternion.from_angle_axis(math.pi / 2, Vector3D(1.0, 0.0, 0.0))
        assert_vec_close(Vector3D(0.0, 1.0, 0.0).rotate_by(q), Vector3D(0.0, 0.0, 1.0))

    @pytest.mark.parametrize("angle", [0.0, 0.1, 1.0, math.pi, 4.0, -2.5, 10.0])
    @pytest.mark.parametrize("axis", [
        Vector3D(0.0, 0.0, 1.0),
        Vector3D(1.0, 1.0, 0.0).normalize(),
        Vector3D(0.3, -0.5, 0.8).normalize(),
    ])
    def test_conjugate_undoes_rotation(self, angle, axis):
        q = Quaternion.from_angle_axis(angle, axis)
        v = Vector3D(0.6, 0.0, 0.8)

        restored = v.rotate_by(q).rotate_by(q.conjugate())
        assert_vec_close(restored, v)

    def test_rotation_preserves_length(self):
        q = Quaternion.from_angle_axis(0.7, Vector3D(1.0, 2.0, 3.0))
        v = Vector3D(4.0, -1.0, 2.0)
        assert abs(v.rotate_by(q).magnitude() - v.magnitude()) < 1e-12

    def test_composition(self):
        axis = Vector3D(0.0, 0.0, 1.0)
        q1 = Quaternion.from_angle_axis(0.3, axis)
        q2 = Quaternion.from_angle_axis(0.5, axis)
        v = Vector3D(1.0, 0.0, 0.0)

        composed = v.rotate_by(q2 * q1)
        sequential = v.rotate_by(q1).rotate_by(q2)
        direct = v.rotate_by(Quaternion.from_angle_axis(0.8, axis))

        assert_vec_close(composed, sequential)
        assert_vec_close(composed, direct)

    def test_identity(self):
        v = Vector3D(1.0, 2.0, 3.0)
        assert_vec_close(v.rotate_by(Quaternion.identity()), v)


if __name__ == "__main__":
    # Run tests
    pytest.main([__file__, "-v"])
