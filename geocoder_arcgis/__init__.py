"""geocoder_arcgis: resolve free-form addresses to points with ArcGIS."""

from geocoder_arcgis.core.geocoding import (
    ArcgisGeocoder,
    ArcgisGeocodingError,
    GeocodeOptions,
    GeocodePoint,
    NoCandidates,
    NoValidCandidates,
    RequestFailed,
    get_geocoder,
)

__all__ = [
    "ArcgisGeocoder",
    "get_geocoder",
    "GeocodeOptions",
    "GeocodePoint",
    "ArcgisGeocodingError",
    "RequestFailed",
    "NoCandidates",
    "NoValidCandidates",
]
