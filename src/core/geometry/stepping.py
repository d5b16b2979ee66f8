"""
Shared pieces of the manifold integration contract.

An integrand is called once per sample as integrand(position, differential)
and returns a Vector3D; the manifold sums the returned vectors. The
differential is the local displacement (curves) or area vector (surfaces).
"""

from __future__ import annotations
from typing import Callable, Iterator, Tuple

from .primitives import Vector3D

Integrand = Callable[[Vector3D, Vector3D], Vector3D]

# Leftovers smaller than this fraction of a step are treated as round-off.
_REMAINDER_TOLERANCE = 1e-9


def partition(extent: float, step: float) -> Iterator[Tuple[float, float]]:
    """
    Cover [0, extent) with whole steps plus one final partial step.

    Args:
        extent: Length (or angle) of the parametric domain
        step: Positive step size

    Yields:
        (offset, width) pairs. Every width equals `step` except possibly the
        last one, which is the leftover `extent - n * step`.
        A zero or negative extent yields nothing.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if extent <= 0:
        return

    count = int(extent // step)
    for i in range(count):
        yield i * step, step

    remainder = extent - count * step
    if remainder > step * _REMAINDER_TOLERANCE:
        yield count * step, remainder
