"""Configuration schemas for validation."""

from .schemas import (
    EntityType,
    EntityConfig,
    FieldRegionConfig,
    FieldLineConfig,
    OutputConfig,
    SimulationConfig,
)

__all__ = [
    "EntityType",
    "EntityConfig",
    "FieldRegionConfig",
    "FieldLineConfig",
    "OutputConfig",
    "SimulationConfig",
]
