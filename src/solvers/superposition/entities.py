"""
Field sources: a charge or a current distributed over one manifold.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Union

from core.geometry import Manifold


class EntityKind(Flag):
    """Source kinds; combine with | to select several at once."""
    CHARGE = 1
    CURRENT = 2
    ALL = CHARGE | CURRENT


class FieldKind(str, Enum):
    """Field produced by a kind of source."""
    E = "E"
    B = "B"

    @property
    def source_kind(self) -> EntityKind:
        return EntityKind.CHARGE if self is FieldKind.E else EntityKind.CURRENT


@dataclass(frozen=True)
class Charge:
    """
    Charge spread over a manifold.

    Attributes:
        density: Charge per unit length (curves) or area (surfaces)
        manifold: Shape carrying the charge (shared, never owned)
    """
    density: float
    manifold: Manifold

    kind = EntityKind.CHARGE

    @property
    def magnitude(self) -> float:
        return self.density


@dataclass(frozen=True)
class Current:
    """Steady current flowing along a manifold in its ds direction."""
    current: float
    manifold: Manifold

    kind = EntityKind.CURRENT

    @property
    def magnitude(self) -> float:
        return self.current


Entity = Union[Charge, Current]
