"""
Sampling entry points: manifold points, field lattices, field lines.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Tuple
import numpy as np
from numpy.typing import NDArray

from core.geometry import Manifold, Vector3D, ZERO, integrate
from solvers.superposition.entities import FieldKind
from solvers.superposition.solver import SuperpositionSolver

from .fields import VectorField3D

logger = logging.getLogger(__name__)

FIELD_UNITS = {FieldKind.E: "V/m", FieldKind.B: "T"}

# Slack when deciding whether the upper corner lies on the lattice.
_LATTICE_TOLERANCE = 1e-9


def sample_manifold(manifold: Manifold, step: float) -> List[Tuple[Vector3D, Vector3D]]:
    """
    Record every (position, differential) pair a manifold visits.

    Args:
        manifold: Shape to walk
        step: Integration step

    Returns:
        Samples in visiting order
    """
    samples: List[Tuple[Vector3D, Vector3D]] = []

    def record(s: Vector3D, ds: Vector3D) -> Vector3D:
        samples.append((s, ds))
        return ZERO

    integrate(manifold, record, step)
    return samples


def lattice_axis(lower: float, upper: float, spacing: float) -> NDArray[np.float64]:
    """
    Coordinates lower, lower + spacing, ... up to and including upper when
    upper falls on the lattice.
    """
    if spacing <= 0:
        raise ValueError(f"spacing must be positive, got {spacing}")
    if upper < lower:
        raise ValueError(f"upper ({upper}) must not be below lower ({lower})")

    count = int(np.floor((upper - lower) / spacing + _LATTICE_TOLERANCE)) + 1
    return lower + spacing * np.arange(count, dtype=np.float64)


def lattice_points(lower: Vector3D, upper: Vector3D, spacing: float) -> Iterator[Vector3D]:
    """Regular lattice inside the box [lower, upper]; x varies fastest, z slowest."""
    xs = lattice_axis(lower.x, upper.x, spacing)
    ys = lattice_axis(lower.y, upper.y, spacing)
    zs = lattice_axis(lower.z, upper.z, spacing)
    for z in zs:
        for y in ys:
            for x in xs:
                yield Vector3D(float(x), float(y), float(z))


def sample_region(solver: SuperpositionSolver,
                  kind: FieldKind,
                  lower: Vector3D,
                  upper: Vector3D,
                  spacing: float) -> VectorField3D:
    """
    Evaluate a field on every lattice point of an axis-aligned box.

    Args:
        solver: Source registry
        kind: FieldKind.E or FieldKind.B
        lower, upper: Opposite box corners (lower <= upper on every axis)
        spacing: Lattice spacing

    Returns:
        Sampled field, one entry per lattice point
    """
    kind = FieldKind(kind)
    samples = [(pt, solver.compute(kind, pt)) for pt in lattice_points(lower, upper, spacing)]
    logger.debug("Sampled %s field at %d points", kind.value, len(samples))
    return VectorField3D.from_samples(samples, name=kind.value, units=FIELD_UNITS[kind])


def sample_along_line(solver: SuperpositionSolver,
                      kind: FieldKind,
                      start: Vector3D,
                      delta: Vector3D,
                      count: int) -> VectorField3D:
    """Field at start + k * delta for k = 0 .. count - 1."""
    kind = FieldKind(kind)
    samples = []
    point = start
    for _ in range(count):
        samples.append((point, solver.compute(kind, point)))
        point = point + delta
    return VectorField3D.from_samples(samples, name=kind.value, units=FIELD_UNITS[kind])


def trace_field_line(solver: SuperpositionSolver,
                     start: Vector3D,
                     length: float,
                     delta: float = 0.1,
                     kind: FieldKind = FieldKind.B) -> List[Vector3D]:
    """
    Follow a field line from `start` with forward Euler steps.

    Each step moves `delta` along the local field direction until `length`
    has been covered. Tracing stops early where the field vanishes.

    Returns:
        Visited points, starting with `start`
    """
    if delta <= 0:
        raise ValueError(f"delta must be positive, got {delta}")

    kind = FieldKind(kind)
    points = []
    point = start
    remaining = length
    while remaining > 0:
        points.append(point)

        field = solver.compute(kind, point)
        magnitude = field.magnitude()
        if magnitude == 0.0:
            logger.info("Field line stopped at a null point %s", point)
            break

        point = point + field * (delta / magnitude)
        remaining -= delta
    return points
