"""Geometry value types produced by the parser and consumed by the writer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

Coordinate = tuple[float, ...]


class Layout(Enum):
    """Coordinate dimensionality of a geometry."""

    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"

    @property
    def arity(self) -> int:
        """Number of ordinates per coordinate."""
        return len(self.value)

    @property
    def tag(self) -> str:
        """WKT dimension tag: "", "Z", "M" or "ZM"."""
        return self.value[2:]

    @classmethod
    def from_tag(cls, tag: str) -> Layout | None:
        """Return the layout for a dimension tag, or None if tag is not one."""
        return _LAYOUT_BY_TAG.get(tag)


_LAYOUT_BY_TAG: dict[str, Layout] = {
    "Z": Layout.XYZ,
    "M": Layout.XYM,
    "ZM": Layout.XYZM,
}

# Point EMPTY is always two NaN ordinates, whatever the declared layout.
EMPTY_COORDINATE: Coordinate = (math.nan, math.nan)


def is_empty_coordinate(coordinate: Coordinate) -> bool:
    return all(math.isnan(v) for v in coordinate)


def _coord(values) -> Coordinate:
    return tuple(float(v) for v in values)


def _coords(values) -> tuple[Coordinate, ...]:
    return tuple(_coord(c) for c in values)


def check_coordinate(coordinate: Coordinate, layout: Layout, allow_empty: bool = False) -> None:
    """Raise ValueError unless coordinate has layout.arity finite ordinates.

    With allow_empty, the two-NaN empty point marker is also accepted.
    """
    if allow_empty and len(coordinate) == 2 and is_empty_coordinate(coordinate):
        return
    if len(coordinate) != layout.arity:
        raise ValueError(
            f"{layout.value} coordinate needs {layout.arity} ordinates, "
            f"got {len(coordinate)}: {coordinate!r}"
        )
    for v in coordinate:
        if not math.isfinite(v):
            raise ValueError(f"coordinate has a non-finite ordinate: {coordinate!r}")


def _check_coordinates(coordinates: tuple[Coordinate, ...], layout: Layout) -> None:
    for c in coordinates:
        check_coordinate(c, layout)


@dataclass(frozen=True, slots=True)
class Point:
    coordinates: Coordinate = EMPTY_COORDINATE
    layout: Layout = Layout.XY

    def __post_init__(self) -> None:
        check_coordinate(self.coordinates, self.layout, allow_empty=True)

    @classmethod
    def from_coordinates(cls, coordinates, layout: Layout = Layout.XY) -> Point:
        if coordinates is None:
            return cls(EMPTY_COORDINATE, layout)
        return cls(_coord(coordinates), layout)

    @property
    def is_empty(self) -> bool:
        return is_empty_coordinate(self.coordinates)


@dataclass(frozen=True, slots=True)
class LineString:
    coordinates: tuple[Coordinate, ...] = ()
    layout: Layout = Layout.XY

    def __post_init__(self) -> None:
        _check_coordinates(self.coordinates, self.layout)

    @classmethod
    def from_coordinates(cls, coordinates, layout: Layout = Layout.XY) -> LineString:
        return cls(_coords(coordinates), layout)

    @property
    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass(frozen=True, slots=True)
class Polygon:
    """Ordered linear rings; closure and orientation are not checked."""

    coordinates: tuple[tuple[Coordinate, ...], ...] = ()
    layout: Layout = Layout.XY

    def __post_init__(self) -> None:
        for ring in self.coordinates:
            _check_coordinates(ring, self.layout)

    @classmethod
    def from_coordinates(cls, coordinates, layout: Layout = Layout.XY) -> Polygon:
        return cls(tuple(_coords(ring) for ring in coordinates), layout)

    @property
    def rings(self) -> tuple[LineString, ...]:
        return tuple(LineString(ring, self.layout) for ring in self.coordinates)

    @property
    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass(frozen=True, slots=True)
class MultiPoint:
    coordinates: tuple[Coordinate, ...] = ()
    layout: Layout = Layout.XY

    def __post_init__(self) -> None:
        for c in self.coordinates:
            check_coordinate(c, self.layout, allow_empty=True)

    @classmethod
    def from_coordinates(cls, coordinates, layout: Layout = Layout.XY) -> MultiPoint:
        return cls(_coords(coordinates), layout)

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(Point(c, self.layout) for c in self.coordinates)

    @property
    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass(frozen=True, slots=True)
class MultiLineString:
    coordinates: tuple[tuple[Coordinate, ...], ...] = ()
    layout: Layout = Layout.XY

    def __post_init__(self) -> None:
        for line in self.coordinates:
            _check_coordinates(line, self.layout)

    @classmethod
    def from_coordinates(cls, coordinates, layout: Layout = Layout.XY) -> MultiLineString:
        return cls(tuple(_coords(line) for line in coordinates), layout)

    @property
    def line_strings(self) -> tuple[LineString, ...]:
        return tuple(LineString(line, self.layout) for line in self.coordinates)

    @property
    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    coordinates: tuple[tuple[tuple[Coordinate, ...], ...], ...] = ()
    layout: Layout = Layout.XY

    def __post_init__(self) -> None:
        for polygon in self.coordinates:
            for ring in polygon:
                _check_coordinates(ring, self.layout)

    @classmethod
    def from_coordinates(cls, coordinates, layout: Layout = Layout.XY) -> MultiPolygon:
        return cls(
            tuple(tuple(_coords(ring) for ring in polygon) for polygon in coordinates),
            layout,
        )

    @property
    def polygons(self) -> tuple[Polygon, ...]:
        return tuple(Polygon(polygon, self.layout) for polygon in self.coordinates)

    @property
    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """Heterogeneous children, each keeping its own layout."""

    geometries: tuple[Geometry, ...] = ()
    layout: Layout = Layout.XY

    @classmethod
    def from_coordinates(cls, geometries, layout: Layout = Layout.XY) -> GeometryCollection:
        return cls(tuple(geometries), layout)

    @property
    def is_empty(self) -> bool:
        return not self.geometries


Geometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]
