import logging
import math
from typing import Dict, Iterator, Optional, Tuple

from core.geometry import Manifold, Vector3D, ZERO, integrate, is_manifold

from .constants import DEFAULT_STEP_SIZE, K_E, K_M
from .entities import Charge, Current, Entity, EntityKind, FieldKind

logger = logging.getLogger(__name__)


def biot_savart_integrand(point: Vector3D):
    """
    dB integrand (ds x r_hat) / |r|^2 for an observation point.

    r points from the source sample to `point`. A sample coinciding with
    `point` raises ZeroDivisionError.
    """
    def dB(s: Vector3D, ds: Vector3D) -> Vector3D:
        r = point - s
        r2 = r.magnitude_squared()
        rnorm = r / math.sqrt(r2)
        return ds.cross(rnorm) / r2
    return dB


def coulomb_integrand(point: Vector3D):
    """dE integrand r_hat * |ds| / |r|^2 for an observation point."""
    def dE(s: Vector3D, ds: Vector3D) -> Vector3D:
        r = point - s
        r2 = r.magnitude_squared()
        rnorm = r / math.sqrt(r2)
        return rnorm * (ds.magnitude() / r2)
    return dE


class SuperpositionSolver:
    """
    Static E and B fields of a set of charge and current distributions.

    Sources live in an insertion-ordered registry keyed by integer ids that
    are never reused. Each field query integrates every relevant source's
    manifold with the current step size and sums the scaled results:

        B(x) = sum over currents  K_M * I      * integral (ds x r_hat) / r^2
        E(x) = sum over charges   K_E * lambda * integral r_hat |ds| / r^2
    """

    def __init__(self, step_size: float = DEFAULT_STEP_SIZE):
        """
        Initialize an empty solver.

        Args:
            step_size: Integration step for all manifolds (must be > 0)
        """
        if step_size <= 0:
            raise ValueError(f"step_size must be positive, got {step_size}")

        self._entities: Dict[int, Entity] = {}
        self._next_id = 0
        self._step_size = step_size

    # ------------------------------------------------------------------
    # Step size
    # ------------------------------------------------------------------

    @property
    def step_size(self) -> float:
        return self._step_size

    def set_step_size(self, value: float) -> bool:
        """
        Change the integration step.

        A non-positive value is rejected and the previous step is kept.

        Returns:
            True if the new value was applied
        """
        if not value > 0:
            logger.warning(
                "Rejected step size %s (must be positive), keeping %s", value, self._step_size
            )
            return False
        self._step_size = float(value)
        logger.debug("Step size set to %s", self._step_size)
        return True

    def reset_step_size(self) -> None:
        self._step_size = DEFAULT_STEP_SIZE

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add_entity(self, entity: Entity) -> int:
        """Register a source and return its new id."""
        if not is_manifold(entity.manifold):
            raise TypeError(f"Not a manifold: {type(entity.manifold).__name__}")

        entity_id = self._next_id
        self._entities[entity_id] = entity
        self._next_id += 1

        logger.debug(
            "Added %s %d on %s (magnitude %g)",
            entity.kind.name.lower(), entity_id, entity.manifold.name, entity.magnitude
        )
        return entity_id

    def add_current(self, current: float, manifold: Manifold) -> int:
        return self.add_entity(Current(current=float(current), manifold=manifold))

    def add_charge(self, density: float, manifold: Manifold) -> int:
        return self.add_entity(Charge(density=float(density), manifold=manifold))

    def remove(self, entity_id: int) -> bool:
        """
        Delete a source.

        Returns:
            False if no source has this id
        """
        if entity_id not in self._entities:
            logger.warning("No entity %s", entity_id)
            return False
        del self._entities[entity_id]
        logger.debug("Deleted entity %d", entity_id)
        return True

    def get(self, entity_id: int) -> Entity:
        """
        Look up a source by id.

        Raises:
            KeyError: If no source has this id
        """
        try:
            return self._entities[entity_id]
        except KeyError:
            raise KeyError(f"Entity {entity_id} not found") from None

    def entities(self, kinds: EntityKind = EntityKind.ALL) -> Iterator[Tuple[int, Entity]]:
        """Iterate (id, entity) pairs of the selected kinds in insertion order."""
        for entity_id, entity in self._entities.items():
            if entity.kind & kinds:
                yield entity_id, entity

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._entities

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def compute_b(self, point: Vector3D, step: Optional[float] = None) -> Vector3D:
        """Magnetic field at `point` from all currents."""
        step = self._step_size if step is None else step
        dB = biot_savart_integrand(point)

        B = ZERO
        for _, entity in self.entities(EntityKind.CURRENT):
            B = B + integrate(entity.manifold, dB, step) * (K_M * entity.current)
        return B

    def compute_e(self, point: Vector3D, step: Optional[float] = None) -> Vector3D:
        """Electric field at `point` from all charges."""
        step = self._step_size if step is None else step
        dE = coulomb_integrand(point)

        E = ZERO
        for _, entity in self.entities(EntityKind.CHARGE):
            E = E + integrate(entity.manifold, dE, step) * (K_E * entity.density)
        return E

    def compute(self, kind: FieldKind, point: Vector3D, step: Optional[float] = None) -> Vector3D:
        """Dispatch to compute_e / compute_b."""
        if FieldKind(kind) is FieldKind.E:
            return self.compute_e(point, step)
        return self.compute_b(point, step)

    def __repr__(self) -> str:
        charges = sum(1 for _ in self.entities(EntityKind.CHARGE))
        currents = sum(1 for _ in self.entities(EntityKind.CURRENT))
        return (
            f"SuperpositionSolver(charges={charges}, currents={currents}, "
            f"step_size={self._step_size})"
        )
