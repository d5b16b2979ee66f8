"""Vector algebra and integrable shapes (curves and surfaces)."""

from .primitives import Vector3D, Quaternion, ZERO
from .stepping import Integrand, partition
from .curves import LineSegment, Arc, Spiral, Toroid
from .surfaces import Plane, Disk, Sphere, OpenCylinder, ClosedCylinder
from .manifold import (
    Curve,
    Surface,
    Manifold,
    CURVE_TYPES,
    SURFACE_TYPES,
    MANIFOLD_TYPES,
    is_manifold,
    integrate,
    describe,
)

__all__ = [
    "Vector3D",
    "Quaternion",
    "ZERO",
    "Integrand",
    "partition",
    "LineSegment",
    "Arc",
    "Spiral",
    "Toroid",
    "Plane",
    "Disk",
    "Sphere",
    "OpenCylinder",
    "ClosedCylinder",
    "Curve",
    "Surface",
    "Manifold",
    "CURVE_TYPES",
    "SURFACE_TYPES",
    "MANIFOLD_TYPES",
    "is_manifold",
    "integrate",
    "describe",
]
