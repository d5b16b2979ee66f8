"""
Pydantic schemas for configuration validation.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Tuple, Optional, Literal
from enum import Enum


class EntityType(str, Enum):
    """Valid source types."""
    CHARGE = "charge"
    CURRENT = "current"


Vector = Tuple[float, float, float]


class EntityConfig(BaseModel):
    """A charge or current distributed over one shape."""
    name: Optional[str] = Field(
        default=None,
        description="Optional label used in logs"
    )
    kind: EntityType = Field(..., description="'charge' or 'current'")
    magnitude: float = Field(
        ...,
        description="Linear/surface charge density [C/m, C/m²] or current [A]"
    )
    shape: str = Field(
        ...,
        description="Shape description, e.g. 'line 0 -10 0 0 10 0'"
    )

    @field_validator('kind', mode='before')
    @classmethod
    def normalize_kind(cls, v):
        """Accept 'Q'/'I' shorthands and any case."""
        if isinstance(v, str):
            v = v.strip().lower()
            return {"q": "charge", "i": "current"}.get(v, v)
        return v

    @field_validator('shape')
    @classmethod
    def validate_shape(cls, v):
        """Check the shape text parses."""
        from ..io.shape_parser import parse_manifold

        parse_manifold(v)
        return v.strip()


class FieldRegionConfig(BaseModel):
    """Box in which a field is sampled on a regular lattice."""
    field: Literal["E", "B"] = Field(..., description="Field to sample")
    lower: Vector = Field(..., description="Lower box corner (x, y, z)")
    upper: Vector = Field(..., description="Upper box corner (x, y, z)")
    spacing: float = Field(..., gt=0, description="Lattice spacing")
    arrow_length: Optional[float] = Field(
        default=0.1,
        gt=0,
        description="Write unit arrows of this length (None = raw field values)"
    )
    filename: Optional[str] = Field(
        default=None,
        description="Output file name (default: field_<index>_<field>.dat)"
    )

    @field_validator('field', mode='before')
    @classmethod
    def upper_case_field(cls, v):
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode='after')
    def check_corners(self):
        """Ensure lower <= upper on every axis."""
        for axis, lo, hi in zip("xyz", self.lower, self.upper):
            if lo > hi:
                raise ValueError(f"lower.{axis} ({lo}) exceeds upper.{axis} ({hi})")
        return self


class FieldLineConfig(BaseModel):
    """Field line traced from a seed point."""
    start: Vector = Field(..., description="Seed point (x, y, z)")
    length: float = Field(..., gt=0, description="Length of the traced line")
    delta: float = Field(default=0.1, gt=0, description="Euler step length")
    field: Literal["E", "B"] = Field(default="B", description="Field to follow")
    filename: Optional[str] = Field(
        default=None,
        description="Output file name (default: fieldline_<index>.dat)"
    )

    @field_validator('field', mode='before')
    @classmethod
    def upper_case_field(cls, v):
        return v.upper() if isinstance(v, str) else v


class OutputConfig(BaseModel):
    """Output configuration."""
    directory: str = Field(
        default="./results",
        description="Output directory path"
    )
    write_entities: bool = Field(
        default=True,
        description="Dump the sample points of every source"
    )
    entities_filename: str = Field(
        default="entities.dat",
        description="File name for the source dump"
    )


class SimulationConfig(BaseModel):
    """Top-level simulation configuration."""
    name: str = Field(..., description="Simulation name")
    description: str = Field(default="", description="Case description")

    step_size: float = Field(
        default=0.1,
        gt=0,
        description="Integration step for every manifold (smaller is finer but slower)"
    )

    entities: List[EntityConfig] = Field(
        default_factory=list,
        description="Charge and current distributions"
    )

    field_regions: List[FieldRegionConfig] = Field(
        default_factory=list,
        description="Boxes in which to sample E or B"
    )

    field_lines: List[FieldLineConfig] = Field(
        default_factory=list,
        description="Field lines to trace"
    )

    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output settings"
    )

    class Config:
        """Pydantic config."""
        extra = "forbid"  # Catch typos in YAML
        validate_assignment = True

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Check name is not blank."""
        if not v or not v.strip():
            raise ValueError("Simulation name cannot be empty")
        return v.strip()
