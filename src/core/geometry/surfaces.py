"""
Surfaces (2-manifolds): planes, disks, spheres and cylinders.

The exact meaning of `step` is surface dependent (see each class); in all
cases the sum converges to the surface integral as step -> 0. The area
vector dA handed to the integrand follows the right-hand rule with respect
to the surface's declared normal/axis.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Tuple
import math

from .primitives import Quaternion, Vector3D, ZERO
from .stepping import Integrand, partition

_Y_AXIS = Vector3D(0.0, 1.0, 0.0)
_Z_AXIS = Vector3D(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Plane:
    """
    Parallelogram p = p0 + s*v1 + t*v2 with 0 <= s, t < 1.

    v1 and v2 must not be parallel; they need not be orthogonal or unit.
    step = ds = dt, and dA points along v1 x v2.
    """
    p0: Vector3D
    v1: Vector3D
    v2: Vector3D

    name: ClassVar[str] = "Plane"
    dimension: ClassVar[int] = 2

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        total = ZERO
        for s, ds in partition(1.0, step):
            for t, dt in partition(1.0, step):
                p = self.p0 + self.v1 * s + self.v2 * t
                dA = (self.v1 * ds).cross(self.v2 * dt)
                total = total + integrand(p, dA)
        return total


@dataclass(frozen=True)
class Disk:
    """
    Flat circular disk, or a sector of one when angle < 2*pi.

    step = dr, and d_theta = dr / |radius| so the area elements on the
    outermost ring are square. dA points along the normal.
    """
    center: Vector3D
    radius: Vector3D
    normal: Vector3D
    angle: float

    name: ClassVar[str] = "Disk"
    dimension: ClassVar[int] = 2

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        r_max = self.radius.magnitude()
        radnorm = self.radius.normalize()
        axis = self.normal.normalize()

        dtheta = step / r_max
        rot = Quaternion.from_angle_axis(dtheta, axis)

        total = ZERO
        for r, dr in partition(r_max, step):
            s = radnorm * r
            for _, width in partition(self.angle, dtheta):
                total = total + integrand(self.center + s, axis * (r * dr * width))
                s = s.rotate_by(rot)
        return total


@dataclass(frozen=True)
class Sphere:
    """Hollow spherical shell; step = d_phi = d_theta."""
    center: Vector3D
    radius: float

    name: ClassVar[str] = "Sphere"
    dimension: ClassVar[int] = 2

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        #  z
        #  |  y
        #  | /
        #  O---- x
        #
        # The polar vector starts on +z and is tilted about +y by d_phi per
        # outer step; each ring is then swept about +z.
        rad = _Z_AXIS
        r_sq = self.radius * self.radius

        roty = Quaternion.from_angle_axis(step, _Y_AXIS)
        rotz = Quaternion.from_angle_axis(step, _Z_AXIS)

        total = ZERO
        for phi, dphi in partition(math.pi, step):
            # work on a copy so ring round-off does not feed back into rad
            rad2 = rad

            # Jacobian: dA = r^2 sin(phi) dphi dtheta
            weight = r_sq * math.sin(phi) * dphi
            for _, dtheta in partition(2.0 * math.pi, step):
                total = total + integrand(self.center + rad2 * self.radius, rad2 * (weight * dtheta))
                rad2 = rad2.rotate_by(rotz)

            rad = rad.rotate_by(roty)
        return total


@dataclass(frozen=True)
class OpenCylinder:
    """
    Cylinder wall without end caps.

             ___________________
            / \\                 \\
           origin ---------------> axis
            \\_/_________________/

    step is both the axial increment and the angular increment (radians).
    The differential handed to the integrand is the unit outward radial
    direction.
    """
    origin: Vector3D
    axis: Vector3D
    radius: float

    name: ClassVar[str] = "OpenCylinder"
    dimension: ClassVar[int] = 2

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        v = Vector3D.any_unit_normal(self.axis)
        rot = Quaternion.from_angle_axis(step, self.axis)

        axis_len = self.axis.magnitude()
        norm_axis = self.axis.normalize()

        total = ZERO
        for l, _ in partition(axis_len, step):
            rad = v
            for _, _ in partition(2.0 * math.pi, step):
                total = total + integrand(self.origin + norm_axis * l + rad * self.radius, rad)
                rad = rad.rotate_by(rot)
        return total


@dataclass(frozen=True)
class ClosedCylinder:
    """Cylinder wall plus two end caps whose normals point outward."""
    origin: Vector3D
    axis: Vector3D
    radius: float

    wall: OpenCylinder = field(init=False, repr=False, compare=False)
    caps: Tuple[Disk, Disk] = field(init=False, repr=False, compare=False)

    name: ClassVar[str] = "ClosedCylinder"
    dimension: ClassVar[int] = 2

    def __post_init__(self):
        cap_radius = Vector3D.any_unit_normal(self.axis) * self.radius
        norm_axis = self.axis.normalize()
        object.__setattr__(self, "wall", OpenCylinder(self.origin, self.axis, self.radius))
        object.__setattr__(self, "caps", (
            Disk(self.origin, cap_radius, -norm_axis, 2.0 * math.pi),
            Disk(self.origin + self.axis, cap_radius, norm_axis, 2.0 * math.pi),
        ))

    def integrate(self, integrand: Integrand, step: float) -> Vector3D:
        total = self.wall.integrate(integrand, step)
        for cap in self.caps:
            total = total + cap.integrate(integrand, step)
        return total
