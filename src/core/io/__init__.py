"""IO utilities: shape grammar, case loader, text dumps."""

from .shape_parser import (
    KEYWORDS,
    ShapeParseError,
    UnknownShapeError,
    parse_manifold,
    parse_vector,
)
from .case_loader import CaseLoader
from .dump import (
    dump_entities,
    dump_field,
    dump_field_line,
    dump_manifold,
    write_samples,
)

__all__ = [
    "KEYWORDS",
    "ShapeParseError",
    "UnknownShapeError",
    "parse_manifold",
    "parse_vector",
    "CaseLoader",
    "dump_entities",
    "dump_field",
    "dump_field_line",
    "dump_manifold",
    "write_samples",
]
