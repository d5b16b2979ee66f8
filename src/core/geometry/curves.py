"""
Curves (1-manifolds): line segments, arcs, helices and toroidal coils.

Each curve walks its parametric domain in steps of arc length `step` and
hands the integrand the sample position together with the local
displacement vector ds. Circular motion is done by rotating a radius vector
with a precomputed quaternion instead of evaluating sin/cos every step.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar
import math

from .primitives import Quaternion, Vector3D, ZERO
from .stepping import Integrand, partition


@dataclass(frozen=True)
class LineSegment:
    """Straight segment from a to b; ds points from a towards b."""
    a: Vector3D
    b: Vector3D

    name: ClassVar[str] = "LineSegment"
    dimension: ClassVar[int] = 1

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        diff = self.b - self.a
        length = diff.magnitude()
        ds = diff / length * step

        total = ZERO
        s = self.a
        for _, width in partition(length, step):
            # the last step lands exactly on b
            d = ds if width == step else self.b - s
            total = total + integrand(s, d)
            s = s + d
        return total

    @property
    def length(self) -> float:
        return (self.b - self.a).magnitude()


@dataclass(frozen=True)
class Arc:
    """
    Circular arc about `center`.

    Attributes:
        center: Arc center
        radius: Vector from center to the start point (orthogonal to normal)
        normal: Rotation axis; the arc runs counter-clockwise about it
        angle: Swept angle in radians (may exceed 2*pi)
    """
    center: Vector3D
    radius: Vector3D
    normal: Vector3D
    angle: float

    name: ClassVar[str] = "Arc"
    dimension: ClassVar[int] = 1

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        r_len = self.radius.magnitude()
        axis = self.normal.normalize()
        dtheta = step / r_len
        rot = Quaternion.from_angle_axis(dtheta, axis)

        total = ZERO
        r = self.radius
        for _, width in partition(self.angle, dtheta):
            if width < dtheta:
                # sample the leftover sliver at its midpoint
                r_mid = r.rotate_by(Quaternion.from_angle_axis(width / 2.0, axis))
                tangent = axis.cross(r_mid).normalize()
                total = total + integrand(self.center + r_mid, tangent * (width * r_len))
                break

            tangent = axis.cross(r).normalize()
            total = total + integrand(self.center + r, tangent * step)
            r = r.rotate_by(rot)
        return total


@dataclass(frozen=True)
class Spiral:
    """
    Helix (solenoid winding) starting at origin + radius.

    `pitch` is the axial distance advanced along `normal` per full turn.
    """
    origin: Vector3D
    radius: Vector3D
    normal: Vector3D
    angle: float
    pitch: float

    name: ClassVar[str] = "Solenoid"
    dimension: ClassVar[int] = 1

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        r_len = self.radius.magnitude()
        axis = self.normal.normalize()
        dtheta = step / r_len
        rot = Quaternion.from_angle_axis(dtheta, axis)

        # axial advance per angular step
        dp = axis * (dtheta * self.pitch / (2.0 * math.pi))

        total = ZERO
        r = self.radius
        offset = ZERO
        for _, width in partition(self.angle, dtheta):
            if width < dtheta:
                fraction = width / dtheta
                r_mid = r.rotate_by(Quaternion.from_angle_axis(width / 2.0, axis))
                tangent = axis.cross(r_mid).normalize()
                position = self.origin + offset + dp * (fraction / 2.0) + r_mid
                total = total + integrand(position, tangent * (width * r_len) + dp * fraction)
                break

            tangent = axis.cross(r).normalize()
            total = total + integrand(self.origin + offset + r, tangent * step + dp)
            offset = offset + dp
            r = r.rotate_by(rot)
        return total


@dataclass(frozen=True)
class Toroid:
    """
    Wire wound helically around a torus.

    Attributes:
        origin: Center of the torus
        major_radius: Vector from origin to the center of the tube at the start
        major_normal: Axis of the torus
        major_angle: How far around the torus the winding extends (radians)
        minor_radius: Tube radius
        pitch: Major angle advanced during one full turn of the winding

    Every step of length `step` is split into a component along the major
    circle and one around the tube. The swept length is the flat
    (unrolled) approximation and no partial step closes the last turn, so
    results are approximate by construction.
    """
    origin: Vector3D
    major_radius: Vector3D
    major_normal: Vector3D
    major_angle: float
    minor_radius: float
    pitch: float

    name: ClassVar[str] = "Toroid"
    dimension: ClassVar[int] = 1

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        if self.pitch == 0:
            raise ValueError("Toroid pitch must be non-zero")

        big_r = self.major_radius.magnitude()
        axis = self.major_normal.normalize()

        # one turn of the winding unrolled into a right triangle
        turn_parallel = abs(self.pitch) * big_r
        turn_perpendicular = 2.0 * math.pi * self.minor_radius
        turn_length = math.hypot(turn_parallel, turn_perpendicular)

        dpar = step * turn_parallel / turn_length
        dper = math.sqrt(max(step * step - dpar * dpar, 0.0))

        major_dtheta = dpar / big_r
        minor_dtheta = dper / self.minor_radius

        total = ZERO
        major = self.major_radius
        minor = self.major_radius.normalize() * self.minor_radius
        swept = 0.0
        while swept < self.major_angle:
            minor_axis = axis.cross(major).normalize()
            tangent_minor = minor_axis.cross(minor).normalize()
            ds = minor_axis * dpar + tangent_minor * dper

            total = total + integrand(self.origin + major + minor, ds)

            # the tube axis co-rotates with the major sweep
            major_rot = Quaternion.from_angle_axis(major_dtheta, axis)
            major = major.rotate_by(major_rot)
            minor = minor.rotate_by(major_rot)

            minor_rot = Quaternion.from_angle_axis(minor_dtheta, axis.cross(major))
            minor = minor.rotate_by(minor_rot)

            swept += major_dtheta
        return total
