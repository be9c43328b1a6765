"""Feature-level reading and writing around the WKT core."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from wktkit.geometry import Geometry, GeometryCollection
from wktkit.parser import DEFAULT_MAX_DEPTH, parse
from wktkit.writer import encode

logger = logging.getLogger(__name__)

# (geometry, is_writing, options) -> geometry
Transform = Callable[[Geometry, bool, Any], Geometry]


def identity_transform(
    geometry: Geometry, is_writing: bool, options: Mapping[str, Any] | None
) -> Geometry:
    return geometry


@dataclass
class Feature:
    """A geometry with identity and attributes."""

    geometry: Geometry | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    id: str | int | None = None


@dataclass
class WKTFormat:
    """Read and write features as WKT.

    ``transform`` is applied after parsing (``is_writing=False``) and before
    encoding (``is_writing=True``), e.g. to reproject coordinates. With
    ``split_collection`` set, reading a GEOMETRYCOLLECTION yields one feature
    per child instead of a single feature.
    """

    split_collection: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    transform: Transform = identity_transform

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read_geometry(self, text: str, options: Mapping[str, Any] | None = None) -> Geometry:
        geometry = parse(text, max_depth=self.max_depth)
        logger.debug("read %s from %d characters", type(geometry).__name__, len(text))
        return self.transform(geometry, False, options)

    def read_feature(self, text: str, options: Mapping[str, Any] | None = None) -> Feature:
        return Feature(self.read_geometry(text, options))

    def read_features(
        self, text: str, options: Mapping[str, Any] | None = None
    ) -> list[Feature]:
        return [Feature(g) for g in self.split(self.read_geometry(text, options))]

    def split(self, geometry: Geometry) -> Sequence[Geometry]:
        """Return a collection's members when splitting is enabled, else the geometry."""
        if self.split_collection and isinstance(geometry, GeometryCollection):
            logger.debug("split collection into %d members", len(geometry.geometries))
            return geometry.geometries
        return (geometry,)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write_geometry(
        self, geometry: Geometry, options: Mapping[str, Any] | None = None
    ) -> str:
        return encode(self.transform(geometry, True, options))

    def write_feature(self, feature: Feature, options: Mapping[str, Any] | None = None) -> str:
        """Encode a feature's geometry; a feature without one yields ""."""
        if feature.geometry is None:
            return ""
        return self.write_geometry(feature.geometry, options)

    def write_features(
        self, features: Sequence[Feature], options: Mapping[str, Any] | None = None
    ) -> str:
        """Encode one feature directly, or several as a GEOMETRYCOLLECTION.

        Features without a geometry are left out of the collection.
        """
        if len(features) == 1:
            return self.write_feature(features[0], options)
        geometries = tuple(f.geometry for f in features if f.geometry is not None)
        if len(geometries) < len(features):
            logger.debug("skipped %d features without geometry", len(features) - len(geometries))
        return self.write_geometry(GeometryCollection(geometries), options)
