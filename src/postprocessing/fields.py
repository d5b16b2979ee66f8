"""
Field data containers for post-processing.

Sampled fields are stored as flat point/vector arrays so they can be written
out line by line or handed to any plotting tool.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import numpy as np
from numpy.typing import NDArray

from core.geometry import Vector3D


@dataclass
class VectorField3D:
    """
    A 3D vector field sampled at scattered points.

    Attributes:
        points: Sample positions (N, 3)
        vectors: Field vectors at each position (N, 3)
        name: Field name (e.g. "E", "B")
        units: Physical units (e.g. "V/m", "T")
    """
    points: NDArray[np.float64]
    vectors: NDArray[np.float64]
    name: str
    units: str = ""

    def __post_init__(self):
        """Validate array shapes."""
        self.points = np.asarray(self.points, dtype=np.float64).reshape(-1, 3)
        self.vectors = np.asarray(self.vectors, dtype=np.float64).reshape(-1, 3)
        if self.points.shape != self.vectors.shape:
            raise ValueError(
                f"points and vectors must have the same shape, "
                f"got {self.points.shape} and {self.vectors.shape}"
            )

    @classmethod
    def from_samples(cls, samples, name: str, units: str = "") -> VectorField3D:
        """Build from an iterable of (position, vector) Vector3D pairs."""
        samples = list(samples)
        points = np.array([p.to_array() for p, _ in samples], dtype=np.float64).reshape(-1, 3)
        vectors = np.array([v.to_array() for _, v in samples], dtype=np.float64).reshape(-1, 3)
        return cls(points=points, vectors=vectors, name=name, units=units)

    @property
    def num_points(self) -> int:
        return self.points.shape[0]

    @property
    def magnitude(self) -> NDArray[np.float64]:
        """|V| at every sample."""
        return np.linalg.norm(self.vectors, axis=1)

    def scaled_to(self, length: float) -> VectorField3D:
        """
        Same field with every non-zero vector rescaled to `length`.

        Useful for arrow plots where only the direction matters. Zero vectors
        stay zero.
        """
        mag = self.magnitude
        safe = np.where(mag > 0.0, mag, 1.0)
        vectors = self.vectors * (length / safe)[:, None]
        vectors[mag == 0.0] = 0.0
        return VectorField3D(points=self.points.copy(), vectors=vectors, name=self.name, units=self.units)

    def __iter__(self) -> Iterator[Tuple[Vector3D, Vector3D]]:
        for p, v in zip(self.points, self.vectors):
            yield Vector3D.from_array(p), Vector3D.from_array(v)

    def __len__(self) -> int:
        return self.num_points

    def __repr__(self) -> str:
        if self.num_points == 0:
            return f"VectorField3D({self.name}, empty)"
        mag = self.magnitude
        return (
            f"VectorField3D({self.name}, points={self.num_points}, "
            f"|V| range=[{np.nanmin(mag):.4g}, {np.nanmax(mag):.4g}] {self.units})"
        )
