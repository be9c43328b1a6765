"""Tests for the --debug geometry tree dump."""

from __future__ import annotations

import io

from wktkit.debug import dump_geometry
from wktkit.parser import parse


def _dump(source: str) -> str:
    out = io.StringIO()
    dump_geometry(parse(source), file=out)
    return out.getvalue()


class TestDump:
    def test_point(self):
        assert _dump("POINT Z(1 2.5 3)") == "Point XYZ\n  (1 2.5 3)\n"

    def test_empty(self):
        assert _dump("LINESTRING EMPTY") == "LineString XY EMPTY\n"

    def test_polygon_rings_are_indented(self):
        text = _dump("POLYGON((0 0,1 0,0 0))")
        lines = text.splitlines()
        assert lines[0] == "Polygon XY"
        assert lines[1] == "  LineString XY"
        assert lines[2] == "    (0 0)"

    def test_collection(self):
        text = _dump("GEOMETRYCOLLECTION(POINT EMPTY, MULTIPOINT((1 2)))")
        assert text.splitlines() == [
            "GeometryCollection XY",
            "  Point XY EMPTY",
            "  MultiPoint XY",
            "    (1 2)",
        ]
