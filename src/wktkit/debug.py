"""--debug geometry dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from wktkit.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from wktkit.writer import format_number


def dump_geometry(geometry: Geometry, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable geometry tree to *file*."""
    _dump(geometry, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _coord(c: Coordinate) -> str:
    return "(" + " ".join(format_number(v) for v in c) + ")"


def _dump(geometry: Geometry, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{type(geometry).__name__} {geometry.layout.value}")
    if geometry.is_empty:
        f.write(" EMPTY\n")
        return
    f.write("\n")

    if isinstance(geometry, Point):
        f.write(f"{_indent(depth + 1)}{_coord(geometry.coordinates)}\n")
    elif isinstance(geometry, (LineString, MultiPoint)):
        for c in geometry.coordinates:
            f.write(f"{_indent(depth + 1)}{_coord(c)}\n")
    elif isinstance(geometry, Polygon):
        for ring in geometry.rings:
            _dump(ring, depth + 1, f)
    elif isinstance(geometry, MultiLineString):
        for line in geometry.line_strings:
            _dump(line, depth + 1, f)
    elif isinstance(geometry, MultiPolygon):
        for polygon in geometry.polygons:
            _dump(polygon, depth + 1, f)
    elif isinstance(geometry, GeometryCollection):
        for child in geometry.geometries:
            _dump(child, depth + 1, f)
