"""Tests for geocoder geometry types."""

import json

from shapely.geometry import MultiPoint, Point

from geocoder_arcgis.core.geocoding import (
    GeocodePoint,
    ShapelyGeometryFactory,
    to_geojson,
)


class TestShapelyGeometryFactory:
    """Tests for the shapely geometry factory."""

    def test_make_point(self):
        """Test that points keep x and y."""
        point = ShapelyGeometryFactory().make_point(3.58, 51.45)

        assert isinstance(point, Point)
        assert (point.x, point.y) == (3.58, 51.45)

    def test_merge_keeps_order_and_duplicates(self):
        """Test that merging keeps every point in order."""
        factory = ShapelyGeometryFactory()
        points = [Point(1, 1), Point(2, 2), Point(1, 1)]

        merged = factory.merge_to_collection(points)

        assert isinstance(merged, MultiPoint)
        assert [(p.x, p.y) for p in merged.geoms] == [(1, 1), (2, 2), (1, 1)]


class TestGeocodePoint:
    """Tests for GeocodePoint."""

    def test_coordinates(self):
        """Test that x and y come from the wrapped point."""
        point = GeocodePoint(Point(3.58, 51.45), {"score": 99.29, "address": "A"})

        assert point.x == 3.58
        assert point.y == 51.45
        assert point.alternatives == []

    def test_to_feature(self):
        """Test GeoJSON rendering with nested alternatives."""
        alternative = GeocodePoint(Point(2, 2), {"score": 80, "address": "B"})
        best = GeocodePoint(
            Point(1, 1),
            {"score": 99, "address": "A", "alternatives": [alternative]},
        )

        feature = best.to_feature()

        assert feature["type"] == "Feature"
        assert feature["geometry"] == {"type": "Point", "coordinates": (1.0, 1.0)}
        assert feature["properties"]["score"] == 99
        assert feature["properties"]["address"] == "A"
        assert feature["properties"]["alternatives"] == [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": (2.0, 2.0)},
                "properties": {"score": 80, "address": "B"},
            }
        ]

    def test_to_feature_without_alternatives(self):
        """Test that features omit alternatives when there are none."""
        feature = GeocodePoint(Point(1, 1), {"score": 99, "address": "A"}).to_feature()

        assert "alternatives" not in feature["properties"]


class TestToGeojson:
    """Tests for to_geojson."""

    def test_point_result(self):
        """Test that a GeocodePoint renders as a Feature."""
        result = GeocodePoint(Point(1, 1), {"score": 99, "address": "A"})

        assert to_geojson(result)["type"] == "Feature"

    def test_multipoint_result(self):
        """Test that a MultiPoint renders as a JSON-serialisable geometry."""
        geojson = to_geojson(MultiPoint([(1, 1), (2, 2)]))

        assert geojson["type"] == "MultiPoint"
        assert json.loads(json.dumps(geojson))["coordinates"] == [[1, 1], [2, 2]]
