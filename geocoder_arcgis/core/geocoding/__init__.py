"""ArcGIS geocoding module.

This package provides address geocoding against the ArcGIS World
GeocodeServer including:
- The geocoder and its options
- Candidate validation and score filtering
- Injectable HTTP transport and geometry factory
- Typed errors for failed lookups
"""

# Import main components for easy access
from geocoder_arcgis.core.geocoding.exceptions import (
    ArcgisGeocodingError,
    NoCandidates,
    NoValidCandidates,
    RequestFailed,
)
from geocoder_arcgis.core.geocoding.geometry import (
    GeocodePoint,
    GeocodeResult,
    GeometryFactory,
    ShapelyGeometryFactory,
    to_geojson,
)
from geocoder_arcgis.core.geocoding.options import GeocodeOptions
from geocoder_arcgis.core.geocoding.service import ArcgisGeocoder, get_geocoder
from geocoder_arcgis.core.geocoding.transport import (
    RequestsTransport,
    Transport,
    TransportResult,
)
from geocoder_arcgis.core.geocoding.validator import CandidateValidator

__all__ = [
    "ArcgisGeocoder",
    "get_geocoder",
    "GeocodeOptions",
    "GeocodePoint",
    "GeocodeResult",
    "GeometryFactory",
    "ShapelyGeometryFactory",
    "to_geojson",
    "Transport",
    "TransportResult",
    "RequestsTransport",
    "CandidateValidator",
    "ArcgisGeocodingError",
    "RequestFailed",
    "NoCandidates",
    "NoValidCandidates",
]
