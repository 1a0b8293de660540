"""Geometry types produced by the geocoder.

Points and multi-points come from shapely. GeocodePoint pairs a point
with the candidate metadata ArcGIS returned for it.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, Union

from shapely.geometry import MultiPoint, Point, mapping

from geocoder_arcgis.core.geocoding.constants import ALTERNATIVES_KEY


class GeometryFactory(Protocol):
    """Builds points and merges them into a collection."""

    def make_point(self, x: float, y: float) -> Point: ...

    def merge_to_collection(self, points: Sequence[Point]) -> MultiPoint: ...


class ShapelyGeometryFactory:
    """GeometryFactory returning shapely geometries."""

    def make_point(self, x: float, y: float) -> Point:
        return Point(x, y)

    def merge_to_collection(self, points: Sequence[Point]) -> MultiPoint:
        """Merge *points* into a MultiPoint, keeping order and duplicates."""
        return MultiPoint(list(points))


@dataclass
class GeocodePoint:
    """A geocoded point with its ArcGIS metadata.

    ``data`` holds ``score`` and ``address``; the canonical result also
    holds ``alternatives`` when other valid candidates were returned.
    """

    point: Point
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    @property
    def alternatives(self) -> list["GeocodePoint"]:
        return self.data.get(ALTERNATIVES_KEY, [])

    def to_feature(self) -> dict[str, Any]:
        """Render as a GeoJSON Feature, alternatives nested in properties."""
        properties = {
            key: value for key, value in self.data.items() if key != ALTERNATIVES_KEY
        }
        if self.alternatives:
            properties[ALTERNATIVES_KEY] = [
                alternative.to_feature() for alternative in self.alternatives
            ]
        return {
            "type": "Feature",
            "geometry": mapping(self.point),
            "properties": properties,
        }


GeocodeResult = Union[GeocodePoint, MultiPoint]


def to_geojson(result: GeocodeResult) -> dict[str, Any]:
    """Render a geocode result as a GeoJSON mapping.

    Args:
        result: A GeocodePoint or a merged MultiPoint

    Returns:
        A Feature for a GeocodePoint, a MultiPoint geometry otherwise
    """
    if isinstance(result, GeocodePoint):
        return result.to_feature()
    return dict(mapping(result))
