"""
Test curve integration: line segments, arcs, helices, toroids.
"""

import math
import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.geometry import (
    Arc,
    LineSegment,
    Spiral,
    Toroid,
    Vector3D,
    ZERO,
    integrate,
    partition,
)
from postprocessing import sample_manifold


def differential(s, ds):
    return ds


def arc_length(s, ds):
    return Vector3D(ds.magnitude(), 0.0, 0.0)


class TestPartition:
    """Test the whole-steps-plus-remainder walk."""

    def test_exact_multiple(self):
        parts = list(partition(1.0, 0.25))
        assert parts == [(0.0, 0.25), (0.25, 0.25), (0.5, 0.25), (0.75, 0.25)]

    def test_partial_last_step(self):
        parts = list(partition(1.0, 0.3))
        assert len(parts) == 4
        assert all(width == 0.3 for _, width in parts[:3])
        assert parts[-1][1] == pytest.approx(0.1)
        assert sum(width for _, width in parts) == pytest.approx(1.0, abs=1e-15)

    def test_step_longer_than_extent(self):
        assert list(partition(0.5, 2.0)) == [(0.0, 0.5)]

    def test_empty_extent(self):
        assert list(partition(0.0, 0.1)) == []

    def test_negative_extent(self):
        assert list(partition(-1.0, 0.3)) == []

    def test_negative_arc_angle_covers_nothing(self):
        arc = Arc(ZERO, Vector3D(1.0, 0.0, 0.0), Vector3D(0.0, 0.0, 1.0), -1.0)
        assert arc.integrate(arc_length, 0.3) == ZERO

    def test_non_positive_step_rejected(self):
        with pytest.raises(ValueError):
            list(partition(1.0, 0.0))


class TestLineSegment:
    """Test LineSegment."""

    @pytest.mark.parametrize("step", [0.3, 0.1, 0.07, 1.0, 5.0, 7.0])
    def test_differentials_telescope(self, step):
        a = Vector3D(1.0, 2.0, 3.0)
        b = Vector3D(4.0, -2.0, 3.0)

        total = LineSegment(a, b).integrate(differential, step)
        np.testing.assert_allclose(total.to_array(), (b - a).to_array(), atol=1e-12)

    def test_length(self):
        line = LineSegment(Vector3D(0.0, 0.0, 0.0), Vector3D(0.0, 0.0, 2.5))
        total = line.integrate(arc_length, 0.2)
        assert total.x == pytest.approx(2.5, abs=1e-12)
        assert line.length == 2.5

    def test_sample_positions(self):
        a = Vector3D(0.0, 0.0, 0.0)
        b = Vector3D(5.0, 0.0, 0.0)
        samples = sample_manifold(LineSegment(a, b), 0.3)

        # 16 whole steps plus one partial step
        assert len(samples) == 17
        assert samples[0][0] == a
        assert samples[1][0].x == pytest.approx(0.3)
        assert samples[-1][1].x == pytest.approx(5.0 - 16 * 0.3)

    def test_metadata(self):
        line = LineSegment(Vector3D(), Vector3D(1.0, 0.0, 0.0))
        assert line.name == "LineSegment"
        assert line.dimension == 1

    def test_degenerate_segment_propagates(self):
        p = Vector3D(1.0, 1.0, 1.0)
        with pytest.raises(ZeroDivisionError):
            LineSegment(p, p).integrate(differential, 0.1)


class TestArc:
    """Test Arc."""

    def make_circle(self, r=2.0):
        return Arc(
            center=Vector3D(1.0, -1.0, 0.5),
            radius=Vector3D(r, 0.0, 0.0),
            normal=Vector3D(0.0, 0.0, 1.0),
            angle=2 * math.pi,
        )

    @pytest.mark.parametrize("step", [0.1, 0.03, 0.01])
    def test_full_circle_closes(self, step):
        total = self.make_circle().integrate(differential, step)
        assert total.magnitude() < 2 * step

    @pytest.mark.parametrize("step", [0.1, 0.03, 0.01])
    def test_circumference(self, step):
        total = self.make_circle(r=2.0).integrate(arc_length, step)
        assert total.x == pytest.approx(2 * math.pi * 2.0, rel=1e-9)

    def test_quarter_arc_chord(self):
        arc = Arc(
            center=ZERO,
            radius=Vector3D(1.0, 0.0, 0.0),
            normal=Vector3D(0.0, 0.0, 1.0),
            angle=math.pi / 2,
        )
        step = 0.01
        total = arc.integrate(differential, step)
        np.testing.assert_allclose(total.to_array(), [-1.0, 1.0, 0.0], atol=step)

    def test_first_sample_and_direction(self):
        arc = self.make_circle(r=1.0)
        s, ds = sample_manifold(arc, 0.1)[0]

        np.testing.assert_allclose(s.to_array(), [2.0, -1.0, 0.5])
        # normal x radius: counter-clockwise about +z
        np.testing.assert_allclose(ds.to_array(), [0.0, 0.1, 0.0], atol=1e-15)

    def test_samples_stay_on_circle(self):
        arc = self.make_circle(r=2.0)
        for s, _ in sample_manifold(arc, 0.05):
            assert (s - arc.center).magnitude() == pytest.approx(2.0, rel=1e-9)

    def test_multiple_turns(self):
        arc = Arc(ZERO, Vector3D(1.0, 0.0, 0.0), Vector3D(0.0, 0.0, 1.0), 3 * 2 * math.pi)
        total = arc.integrate(arc_length, 0.05)
        assert total.x == pytest.approx(6 * math.pi, rel=1e-9)


class TestSpiral:
    """Test Spiral (helix)."""

    def make_helix(self, pitch=0.5, turns=3):
        return Spiral(
            origin=ZERO,
            radius=Vector3D(1.0, 0.0, 0.0),
            normal=Vector3D(0.0, 0.0, 1.0),
            angle=turns * 2 * math.pi,
            pitch=pitch,
        )

    def test_axial_advance(self):
        total = self.make_helix(pitch=0.5, turns=3).integrate(differential, 0.05)
        assert total.z == pytest.approx(1.5, rel=1e-9)
        assert math.hypot(total.x, total.y) < 0.1

    def test_samples_climb(self):
        samples = sample_manifold(self.make_helix(pitch=0.5, turns=3), 0.05)
        zs = [s.z for s, _ in samples]
        assert zs == sorted(zs)
        assert zs[-1] == pytest.approx(1.5, abs=0.01)

        for s, _ in samples:
            assert math.hypot(s.x, s.y) == pytest.approx(1.0, rel=1e-9)

    def test_zero_pitch_matches_arc(self):
        helix = self.make_helix(pitch=0.0, turns=1)
        arc = Arc(ZERO, Vector3D(1.0, 0.0, 0.0), Vector3D(0.0, 0.0, 1.0), 2 * math.pi)

        def probe(s, ds):
            return s * ds.magnitude()

        np.testing.assert_allclose(
            helix.integrate(probe, 0.07).to_array(),
            arc.integrate(probe, 0.07).to_array(),
            atol=1e-12,
        )

    def test_name(self):
        assert self.make_helix().name == "Solenoid"
        assert self.make_helix().dimension == 1


class TestToroid:
    """Test Toroid."""

    def make_toroid(self, pitch=2 * math.pi / 10):
        return Toroid(
            origin=ZERO,
            major_radius=Vector3D(1.0, 0.0, 0.0),
            major_normal=Vector3D(0.0, 0.0, 1.0),
            major_angle=2 * math.pi,
            minor_radius=0.1,
            pitch=pitch,
        )

    def test_samples_on_torus(self):
        for s, _ in sample_manifold(self.make_toroid(), 0.01):
            rho = math.hypot(s.x, s.y)
            assert (rho - 1.0) ** 2 + s.z ** 2 == pytest.approx(0.01, rel=1e-6)

    def test_step_length(self):
        for _, ds in sample_manifold(self.make_toroid(), 0.01):
            assert ds.magnitude() == pytest.approx(0.01, rel=1e-9)

    def test_sample_count(self):
        step = 0.01
        pitch = 2 * math.pi / 10
        turn_parallel = pitch * 1.0
        turn_length = math.hypot(turn_parallel, 2 * math.pi * 0.1)
        major_dtheta = step * turn_parallel / turn_length

        samples = sample_manifold(self.make_toroid(pitch), step)
        assert abs(len(samples) - 2 * math.pi / major_dtheta) <= 1.0

    def test_winding_is_closed(self):
        # whole number of turns around a full revolution: the wire ends
        # near where it started
        total = self.make_toroid().integrate(differential, 0.005)
        assert total.magnitude() < 0.05

    def test_zero_pitch_rejected(self):
        with pytest.raises(ValueError):
            self.make_toroid(pitch=0.0).integrate(differential, 0.1)


class TestDispatch:
    """Test the generic integrate() entry point."""

    def test_rejects_non_manifold(self):
        with pytest.raises(TypeError):
            integrate(object(), differential, 0.1)

    def test_rejects_non_positive_step(self):
        line = LineSegment(ZERO, Vector3D(1.0, 0.0, 0.0))
        with pytest.raises(ValueError):
            integrate(line, differential, 0.0)

    def test_calls_are_independent(self):
        arc = Arc(ZERO, Vector3D(1.0, 0.0, 0.0), Vector3D(0.0, 0.0, 1.0), math.pi)
        first = integrate(arc, differential, 0.05)
        second = integrate(arc, differential, 0.05)
        assert first == second


if __name__ == "__main__":
    # Run tests
    pytest.main([__file__, "-v"])
