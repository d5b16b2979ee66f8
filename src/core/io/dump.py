"""
Plain-text dumps for plotting tools.

Every line is "x y z dx dy dz": a position followed by a differential or
field vector, space separated. Two consecutive blank lines end each
entity's block, which gnuplot reads as a new data set index.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, TextIO, Tuple

from ..geometry import Manifold, Vector3D
from postprocessing.fields import VectorField3D
from postprocessing.sampling import sample_manifold, sample_region
from solvers.superposition.entities import EntityKind, FieldKind
from solvers.superposition.solver import SuperpositionSolver

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


def format_vector(v: Vector3D) -> str:
    return f"{v.x:g} {v.y:g} {v.z:g}"


def write_samples(out: TextIO, samples: Iterable[Tuple[Vector3D, Vector3D]]) -> int:
    """
    Write (position, vector) pairs, one per line.

    Returns:
        Number of lines written
    """
    count = 0
    for position, vector in samples:
        out.write(f"{format_vector(position)} {format_vector(vector)}\n")
        count += 1
    return count


def dump_manifold(out: TextIO, manifold: Manifold, step: float) -> int:
    """Write every sample point of a manifold with its differential vector."""
    return write_samples(out, sample_manifold(manifold, step))


def dump_entities(out: TextIO,
                  solver: SuperpositionSolver,
                  kinds: EntityKind = EntityKind.ALL) -> int:
    """
    Write one block per selected source.

    Returns:
        Number of blocks written
    """
    count = 0
    for entity_id, entity in solver.entities(kinds):
        lines = dump_manifold(out, entity.manifold, solver.step_size)
        out.write(BLOCK_SEPARATOR)
        logger.debug("Dumped entity %d (%s, %d points)", entity_id, entity.manifold.name, lines)
        count += 1
    return count


def dump_field(out: TextIO,
               solver: SuperpositionSolver,
               kind: FieldKind,
               lower: Vector3D,
               upper: Vector3D,
               spacing: float,
               arrow_length: Optional[float] = 0.1) -> VectorField3D:
    """
    Sample a field on a lattice and write one line per lattice point.

    Args:
        out: Destination stream
        solver: Source registry
        kind: FieldKind.E or FieldKind.B
        lower, upper: Box corners, both included in the lattice
        spacing: Lattice spacing
        arrow_length: If set, vectors are written as arrows of this length
            (direction only); None writes raw field values

    Returns:
        The sampled (unscaled) field
    """
    field = sample_region(solver, kind, lower, upper, spacing)
    written = field if arrow_length is None else field.scaled_to(arrow_length)
    write_samples(out, written)
    logger.info("Wrote %s field at %d lattice points", field.name, field.num_points)
    return field


def dump_field_line(out: TextIO, points: List[Vector3D]) -> int:
    """Write a traced field line, one "x y z" point per line."""
    for point in points:
        out.write(format_vector(point) + "\n")
    return len(points)
