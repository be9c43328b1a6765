"""Tests for geometry value construction: arity, finiteness, empty markers."""

from __future__ import annotations

import math

import pytest

from wktkit.geometry import (
    EMPTY_COORDINATE,
    GeometryCollection,
    Layout,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    check_coordinate,
)

from .conftest import assert_nan_coordinate


class TestLayout:
    @pytest.mark.parametrize(
        "layout, arity, tag",
        [(Layout.XY, 2, ""), (Layout.XYZ, 3, "Z"), (Layout.XYM, 3, "M"), (Layout.XYZM, 4, "ZM")],
    )
    def test_arity_and_tag(self, layout, arity, tag):
        assert layout.arity == arity
        assert layout.tag == tag

    def test_from_tag(self):
        assert Layout.from_tag("ZM") is Layout.XYZM
        assert Layout.from_tag("EMPTY") is None


class TestArity:
    def test_point_too_short_for_layout(self):
        with pytest.raises(ValueError, match="XYZ coordinate needs 3 ordinates, got 2"):
            Point((1, 2), Layout.XYZ)

    def test_point_too_long_for_layout(self):
        with pytest.raises(ValueError, match="needs 2 ordinates"):
            Point((1, 2, 3))

    def test_line_string_vertex(self):
        with pytest.raises(ValueError):
            LineString.from_coordinates([[0, 0, 0], [1, 1]], Layout.XYM)

    def test_polygon_ring_vertex(self):
        with pytest.raises(ValueError):
            Polygon.from_coordinates([[[0, 0], [1, 0], [0, 0, 0]]])

    def test_multi_point_member(self):
        with pytest.raises(ValueError):
            MultiPoint.from_coordinates([[1, 2], [3, 4]], Layout.XYZM)

    def test_multi_line_string_member(self):
        with pytest.raises(ValueError):
            MultiLineString.from_coordinates([[[1, 2], [3, 4]], [[5, 6, 7]]])

    def test_multi_polygon_member(self):
        with pytest.raises(ValueError):
            MultiPolygon.from_coordinates([[[[0, 0, 1], [1, 0, 1], [0, 0, 1]]]])

    def test_matching_arity_accepted(self):
        g = LineString.from_coordinates([[0, 0, 1, 2], [1, 1, 3, 4]], Layout.XYZM)
        assert g.coordinates[1] == (1.0, 1.0, 3.0, 4.0)

    def test_collection_children_keep_their_own_layout(self):
        g = GeometryCollection((Point((1, 2, 3), Layout.XYZ), Point((1, 2))))
        assert [child.layout for child in g.geometries] == [Layout.XYZ, Layout.XY]


class TestEmptyMarker:
    def test_default_point_is_empty(self):
        assert Point().is_empty

    @pytest.mark.parametrize("layout", list(Layout))
    def test_two_nans_accepted_for_any_layout(self, layout):
        g = Point(EMPTY_COORDINATE, layout)
        assert g.is_empty
        assert_nan_coordinate(g.coordinates)

    def test_from_none(self):
        g = Point.from_coordinates(None, Layout.XYZM)
        assert g.is_empty
        assert g.layout is Layout.XYZM

    def test_three_nans_rejected(self):
        with pytest.raises(ValueError):
            Point((math.nan, math.nan, math.nan), Layout.XYZ)

    def test_multi_point_empty_member(self):
        g = MultiPoint.from_coordinates([[math.nan, math.nan], [1, 2, 3]], Layout.XYZ)
        assert g.points[0].is_empty
        assert g.points[1].coordinates == (1.0, 2.0, 3.0)

    def test_line_string_rejects_empty_marker_vertex(self):
        with pytest.raises(ValueError, match="non-finite"):
            LineString(((math.nan, math.nan), (1.0, 2.0)))

    def test_polygon_rejects_empty_marker_vertex(self):
        with pytest.raises(ValueError, match="non-finite"):
            Polygon.from_coordinates([[[0, 0], [math.nan, math.nan], [0, 0]]])


class TestFiniteness:
    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_point_rejects_non_finite(self, value):
        with pytest.raises(ValueError, match="non-finite"):
            Point((value, 1.0))

    def test_multi_line_string_rejects_infinity(self):
        with pytest.raises(ValueError):
            MultiLineString.from_coordinates([[[0, 0], [math.inf, 1]]])

    def test_check_coordinate_directly(self):
        check_coordinate((1.0, 2.0, 3.0), Layout.XYM)
        check_coordinate(EMPTY_COORDINATE, Layout.XYZ, allow_empty=True)
        with pytest.raises(ValueError):
            check_coordinate(EMPTY_COORDINATE, Layout.XY)
