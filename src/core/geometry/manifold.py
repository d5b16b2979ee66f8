"""
The closed set of integrable shapes.

Every manifold is an immutable dataclass exposing:
    integrate(integrand, step) -> Vector3D
    name       display name
    dimension  1 for curves, 2 for surfaces

No state survives between integrate() calls; each call walks the whole
parametric domain again.
"""

from __future__ import annotations
from typing import Union

from .curves import Arc, LineSegment, Spiral, Toroid
from .primitives import Vector3D
from .stepping import Integrand
from .surfaces import ClosedCylinder, Disk, OpenCylinder, Plane, Sphere

Curve = Union[LineSegment, Arc, Spiral, Toroid]
Surface = Union[Plane, Disk, Sphere, OpenCylinder, ClosedCylinder]
Manifold = Union[Curve, Surface]

CURVE_TYPES = (LineSegment, Arc, Spiral, Toroid)
SURFACE_TYPES = (Plane, Disk, Sphere, OpenCylinder, ClosedCylinder)
MANIFOLD_TYPES = CURVE_TYPES + SURFACE_TYPES


def is_manifold(obj) -> bool:
    return isinstance(obj, MANIFOLD_TYPES)


def integrate(manifold: Manifold, integrand: Integrand, step: float) -> Vector3D:
    """
    Integrate `integrand` over `manifold` with discretization `step`.

    Raises:
        TypeError: If `manifold` is not one of the known shapes
        ValueError: If step is not positive
    """
    if not is_manifold(manifold):
        raise TypeError(f"Not a manifold: {type(manifold).__name__}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return manifold.integrate(integrand, step)


def describe(manifold: Manifold) -> str:
    """Short human-readable label, e.g. 'Arc (1-manifold)'."""
    return f"{manifold.name} ({manifold.dimension}-manifold)"
