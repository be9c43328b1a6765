"""WKT writer — serializes geometry values to canonical WKT text."""

from __future__ import annotations

from typing import assert_never

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
    is_empty_coordinate,
)
from wktkit.parser import EMPTY
from wktkit.registry import type_of


def encode(geometry: Geometry) -> str:
    """Encode a geometry as WKT.

    The body is rendered first; an empty body becomes ``<TYPE> EMPTY``.
    A non-XY layout adds its dimension tag after the keyword.
    """
    typedef = type_of(geometry)
    body = _encode_body(geometry)

    head = typedef.keyword
    tag = geometry.layout.tag
    if tag:
        head += " " + tag

    if not body:
        return f"{head} {EMPTY}"
    return f"{head}({body})"


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float, without a trailing '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


# ---------------------------------------------------------------------------
# Body rendering
# ---------------------------------------------------------------------------


def _encode_body(geometry: Geometry) -> str:
    match geometry:
        case Point():
            return _point(geometry.coordinates)
        case LineString():
            return _coordinate_list(geometry.coordinates)
        case Polygon() | MultiLineString():
            return ",".join(_wrap(_coordinate_list(line)) for line in geometry.coordinates)
        case MultiPoint():
            return ",".join(_wrap(_point(c)) for c in geometry.coordinates)
        case MultiPolygon():
            return ",".join(_wrap(_polygon(p)) for p in geometry.coordinates)
        case GeometryCollection():
            return ",".join(encode(g) for g in geometry.geometries)
        case _:
            assert_never(geometry)


def _wrap(body: str) -> str:
    """Parenthesize a nested body; an empty one is written as EMPTY."""
    if not body:
        return EMPTY
    return f"({body})"


def _point(coordinate: Coordinate) -> str:
    """Point or MultiPoint member; the empty marker renders as nothing."""
    if not coordinate or is_empty_coordinate(coordinate):
        return ""
    return _coordinate(coordinate)


def _coordinate(coordinate: Coordinate) -> str:
    return " ".join(format_number(v) for v in coordinate)


def _coordinate_list(coordinates: tuple[Coordinate, ...]) -> str:
    return ",".join(_coordinate(c) for c in coordinates)


def _polygon(rings: tuple[tuple[Coordinate, ...], ...]) -> str:
    return ",".join(_wrap(_coordinate_list(ring)) for ring in rings)


def write_wkt(geometry: Geometry) -> str:
    """Convenience alias for encode()."""
    return encode(geometry)
