"""Geometry type registry — type keywords, body grammar kinds, constructors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable

from wktkit.geometry import (
    Geometry,
    GeometryCollection,
    Layout,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


class BodyKind(Enum):
    """Shape of the parenthesized body that follows a type keyword."""

    POINT = auto()
    LINE = auto()
    POLYGON = auto()
    MULTI_POINT = auto()
    MULTI_LINE = auto()
    MULTI_POLYGON = auto()
    COLLECTION = auto()


@dataclass(frozen=True, slots=True)
class GeometryTypeDef:
    """Definition of a supported WKT geometry type.

    There is no encoder slot: encoding dispatches on ``cls`` in
    ``writer._encode_body``.
    """

    keyword: str
    body: BodyKind
    cls: type
    constructor: Callable[[Any, Layout], Geometry]


def _make_registry() -> dict[str, GeometryTypeDef]:
    defs: dict[str, GeometryTypeDef] = {}

    def d(keyword: str, body: BodyKind, cls: type) -> None:
        defs[keyword] = GeometryTypeDef(keyword, body, cls, cls.from_coordinates)

    d("POINT", BodyKind.POINT, Point)
    d("LINESTRING", BodyKind.LINE, LineString)
    d("POLYGON", BodyKind.POLYGON, Polygon)
    d("MULTIPOINT", BodyKind.MULTI_POINT, MultiPoint)
    d("MULTILINESTRING", BodyKind.MULTI_LINE, MultiLineString)
    d("MULTIPOLYGON", BodyKind.MULTI_POLYGON, MultiPolygon)
    d("GEOMETRYCOLLECTION", BodyKind.COLLECTION, GeometryCollection)

    return defs


GEOMETRY_TYPES: dict[str, GeometryTypeDef] = _make_registry()

_BY_CLASS: dict[type, GeometryTypeDef] = {t.cls: t for t in GEOMETRY_TYPES.values()}


def lookup_keyword(keyword: str) -> GeometryTypeDef | None:
    """Return the definition for an upper-case type keyword, if supported."""
    return GEOMETRY_TYPES.get(keyword)


def type_of(geometry: Geometry) -> GeometryTypeDef:
    """Return the definition for a geometry value's class."""
    try:
        return _BY_CLASS[type(geometry)]
    except KeyError:
        raise TypeError(f"not a WKT geometry: {type(geometry).__name__}") from None
