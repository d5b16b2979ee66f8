"""
Post-processing module.

Turns a populated SuperpositionSolver into sampled data: manifold sample
points, field values on lattices and along lines, and traced field lines.

Key pieces:
- VectorField3D: Container for a sampled vector field
- sample_manifold: (position, differential) pairs visited by a manifold
- sample_region: Field on a regular lattice inside a box
- trace_field_line: Field line following by forward Euler steps
"""

from .fields import VectorField3D
from .sampling import (
    FIELD_UNITS,
    lattice_axis,
    lattice_points,
    sample_manifold,
    sample_region,
    sample_along_line,
    trace_field_line,
)

__all__ = [
    # Field containers
    "VectorField3D",
    # Sampling
    "FIELD_UNITS",
    "lattice_axis",
    "lattice_points",
    "sample_manifold",
    "sample_region",
    "sample_along_line",
    "trace_field_line",
]
