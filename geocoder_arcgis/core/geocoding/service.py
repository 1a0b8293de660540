"""ArcGIS geocoding service.

This module turns a single-line address into coordinates using the ArcGIS
World GeocodeServer findAddressCandidates operation:
- Builds the request URL and delegates the GET to a Transport
- Rejects failed requests and empty candidate lists
- Filters candidates by structure and score threshold
- Returns the best match with its alternatives, or all matches merged
"""

import json
from typing import Any
from urllib.parse import urlencode

from geocoder_arcgis.core.config import settings
from geocoder_arcgis.core.geocoding import messages
from geocoder_arcgis.core.geocoding.constants import (
    ADDRESS_KEY,
    ALTERNATIVES_KEY,
    ARCGIS_HOST,
    CANDIDATES_FIELD,
    FIND_ADDRESS_CANDIDATES_PATH,
    FORMAT_PARAM,
    RESPONSE_FORMAT,
    SCORE_KEY,
    SINGLE_LINE_PARAM,
)
from geocoder_arcgis.core.geocoding.exceptions import (
    NoCandidates,
    NoValidCandidates,
    RequestFailed,
)
from geocoder_arcgis.core.geocoding.geometry import (
    GeocodePoint,
    GeocodeResult,
    GeometryFactory,
    ShapelyGeometryFactory,
)
from geocoder_arcgis.core.geocoding.options import GeocodeOptions
from geocoder_arcgis.core.geocoding.transport import RequestsTransport, Transport
from geocoder_arcgis.core.geocoding.validator import CandidateValidator
from geocoder_arcgis.core.logging import get_logger

logger = get_logger(__name__, module="arcgis_geocoder")


class ArcgisGeocoder:
    """Geocodes addresses with the ArcGIS findAddressCandidates endpoint."""

    def __init__(
        self,
        transport: Transport,
        options: GeocodeOptions | None = None,
        geometry_factory: GeometryFactory | None = None,
        translate: messages.Translator = messages.format_message,
    ):
        """Initialize the geocoder.

        Args:
            transport: Performs the HTTP GET against ArcGIS
            options: Request and selection options, defaults when omitted
            geometry_factory: Builds points and multi-points
            translate: Formats error messages, identity formatting by default
        """
        self.transport = transport
        self.options = options or GeocodeOptions()
        self.geometry_factory = geometry_factory or ShapelyGeometryFactory()
        self.translate = translate
        self.validator = CandidateValidator(self.options.score_threshold)

    def locate(self, address: str) -> GeocodeResult:
        """Geocode an address.

        Args:
            address: Free-form single-line address

        Returns:
            The best GeocodePoint with alternatives attached, or a MultiPoint
            of every valid candidate when return_all_results is set

        Raises:
            RequestFailed: The transport reported an error
            NoCandidates: ArcGIS returned no candidates
            NoValidCandidates: No candidate survived validation
        """
        points = self._retrieve_points(address)

        if self.options.return_all_results:
            return self.geometry_factory.merge_to_collection(
                [point.point for point in points]
            )

        return self._select_best_with_alternatives(points)

    def build_url(self, address: str) -> str:
        """Build the findAddressCandidates URL for *address*.

        Args:
            address: Free-form single-line address

        Returns:
            Request URL with an http or https scheme
        """
        # Default to a secure connection
        scheme = "https" if self.options.use_secure_transport else "http"
        query = urlencode({SINGLE_LINE_PARAM: address, FORMAT_PARAM: RESPONSE_FORMAT})
        return f"{scheme}://{ARCGIS_HOST}{FIND_ADDRESS_CANDIDATES_PATH}?{query}"

    def _retrieve_points(self, address: str) -> list[GeocodePoint]:
        body = self._request(address)
        candidates = self._decode_candidates(body)

        points = [
            self._create_point(candidate)
            for candidate in self.validator.filter(candidates)
        ]
        if not points:
            raise NoValidCandidates(self.translate(messages.NO_VALID_CANDIDATES))

        logger.debug(
            "ArcGIS candidates accepted",
            received=len(candidates),
            accepted=len(points),
        )
        return points

    def _request(self, address: str) -> str:
        url = self.build_url(address)
        logger.debug("Requesting ArcGIS candidates", url=url)

        result = self.transport.get(url)
        if result.failed:
            message = self.translate(
                messages.REQUEST_FAILED, code=result.code, error=result.error
            )
            raise RequestFailed(message, code=result.code, error=result.error or "")

        return result.body

    def _decode_candidates(self, body: str) -> list[Any]:
        """Decode the response body and return its candidate list.

        Raises NoCandidates when the body is not a JSON object or holds no
        candidates.
        """
        try:
            data = json.loads(body)
        except (TypeError, ValueError):
            data = None

        candidates = data.get(CANDIDATES_FIELD) if isinstance(data, dict) else None
        if not candidates or not isinstance(candidates, list):
            raise NoCandidates(self.translate(messages.NO_CANDIDATES))

        return candidates

    def _create_point(self, candidate: dict[str, Any]) -> GeocodePoint:
        location = candidate["location"]
        point = self.geometry_factory.make_point(location["x"], location["y"])

        # Add additional metadata to the geometry
        return GeocodePoint(
            point=point,
            data={SCORE_KEY: candidate["score"], ADDRESS_KEY: candidate["address"]},
        )

    def _select_best_with_alternatives(
        self, points: list[GeocodePoint]
    ) -> GeocodePoint:
        # ArcGIS orders candidates best match first
        best, *alternatives = points
        if alternatives:
            best.data[ALTERNATIVES_KEY] = alternatives
        return best


# Singleton instance
_geocoder: ArcgisGeocoder | None = None


def get_geocoder() -> ArcgisGeocoder:
    """Get or create the singleton geocoder configured from settings.

    Returns:
        ArcgisGeocoder instance
    """
    global _geocoder
    if _geocoder is None:
        _geocoder = ArcgisGeocoder(
            transport=RequestsTransport(timeout=settings.ARCGIS_TIMEOUT),
            options=GeocodeOptions.from_settings(settings),
        )
    return _geocoder
