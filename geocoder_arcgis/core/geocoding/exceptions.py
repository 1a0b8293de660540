"""Exception hierarchy for ArcGIS geocoding failures."""


class ArcgisGeocodingError(Exception):
    """Base exception for all geocoding failures."""


class RequestFailed(ArcgisGeocodingError):  # noqa: N818
    """The transport reported an error for the ArcGIS request."""

    def __init__(self, message: str, code: int, error: str):
        self.code = code
        self.error = error
        super().__init__(message)


class NoCandidates(ArcgisGeocodingError):  # noqa: N818
    """The response did not contain any candidates."""


class NoValidCandidates(ArcgisGeocodingError):  # noqa: N818
    """Every candidate was malformed or scored below the threshold."""
