"""Well-Known Text (WKT) geometry reader and writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wktkit.geometry import Geometry

__version__ = "0.1.0"


def parse_wkt(text: str) -> Geometry:
    """Parse a WKT string into a geometry value."""
    from wktkit.parser import parse

    return parse(text)


def write_wkt(geometry: Geometry) -> str:
    """Encode a geometry value as canonical WKT."""
    from wktkit.writer import encode

    return encode(geometry)
