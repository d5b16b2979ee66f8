"""
Text grammar for constructing manifolds.

A shape is a keyword followed by whitespace-separated numbers, where a
<vector> is three numbers:

    line <a> <b>
    arc <center> <radius> <normal> angle
    spiral|solenoid <origin> <radius> <normal> angle pitch
    toroid <origin> <major_radius> <major_normal> minor_radius major_angle pitch
    plane <origin> <v1> <v2>
    disk <center> <radius> <normal> angle
    sphere <center> radius
    opencylinder|closedcylinder <origin> <axis> radius

Commas and parentheses are treated as whitespace, so "(0, 0, 1)" and
"0 0 1" are the same vector. Keywords are case-insensitive.
"""

from __future__ import annotations
import re
from typing import Callable, Dict, List, Tuple

from ..geometry import (
    Arc,
    ClosedCylinder,
    Disk,
    LineSegment,
    Manifold,
    OpenCylinder,
    Plane,
    Sphere,
    Spiral,
    Toroid,
    Vector3D,
)


class ShapeParseError(ValueError):
    """Shape text could not be turned into a manifold."""


class UnknownShapeError(ShapeParseError):
    """The leading keyword names no known shape."""


_SEPARATORS = re.compile(r"[\s,()]+")

# keyword -> (argument layout, constructor); 'v' is a vector, 's' a scalar
_GRAMMAR: Dict[str, Tuple[str, Callable[..., Manifold]]] = {
    "line": ("vv", LineSegment),
    "linesegment": ("vv", LineSegment),
    "arc": ("vvvs", Arc),
    "spiral": ("vvvss", Spiral),
    "solenoid": ("vvvss", Spiral),
    "toroid": ("vvvsss", lambda o, r, n, min_r, maj_a, p: Toroid(o, r, n, maj_a, min_r, p)),
    "plane": ("vvv", Plane),
    "disk": ("vvvs", Disk),
    "sphere": ("vs", Sphere),
    "opencylinder": ("vvs", OpenCylinder),
    "closedcylinder": ("vvs", ClosedCylinder),
}

KEYWORDS = tuple(_GRAMMAR)


def tokenize(text: str) -> List[str]:
    return [tok for tok in _SEPARATORS.split(text.strip()) if tok]


def parse_vector(text: str) -> Vector3D:
    """Parse "x y z" (or "(x, y, z)") into a vector."""
    tokens = tokenize(text)
    if len(tokens) != 3:
        raise ShapeParseError(f"Expected 3 components, got {len(tokens)}: {text!r}")
    return Vector3D(*_numbers(tokens))


def parse_manifold(text: str) -> Manifold:
    """
    Build a manifold from its textual description.

    Args:
        text: e.g. "arc 0 0 0  1 0 0  0 0 1  6.283185"

    Returns:
        The constructed manifold

    Raises:
        UnknownShapeError: Unrecognized keyword
        ShapeParseError: Wrong number of arguments or a non-numeric token
    """
    tokens = tokenize(text)
    if not tokens:
        raise ShapeParseError("Empty shape description")

    keyword = tokens[0].lower()
    if keyword not in _GRAMMAR:
        raise UnknownShapeError(
            f"Unknown shape '{tokens[0]}' (must be one of: {', '.join(KEYWORDS)})"
        )

    layout, constructor = _GRAMMAR[keyword]
    expected = sum(3 if kind == "v" else 1 for kind in layout)
    values = _numbers(tokens[1:])
    if len(values) != expected:
        raise ShapeParseError(
            f"'{keyword}' takes {expected} numbers ({_describe_layout(layout)}), got {len(values)}"
        )

    args = []
    pos = 0
    for kind in layout:
        if kind == "v":
            args.append(Vector3D(*values[pos:pos + 3]))
            pos += 3
        else:
            args.append(values[pos])
            pos += 1

    return constructor(*args)


def _numbers(tokens: List[str]) -> List[float]:
    values = []
    for tok in tokens:
        try:
            values.append(float(tok))
        except ValueError:
            raise ShapeParseError(f"Not a number: {tok!r}") from None
    return values


def _describe_layout(layout: str) -> str:
    return " ".join("<vector>" if kind == "v" else "scalar" for kind in layout)
