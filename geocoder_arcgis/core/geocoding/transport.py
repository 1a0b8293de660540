"""HTTP transport used by the geocoder.

The geocoder only needs a synchronous GET that reports failures on the
returned value instead of raising, so any client can be plugged in.
"""

from dataclasses import dataclass
from typing import Protocol

import requests

from geocoder_arcgis.core.logging import get_logger

logger = get_logger(__name__, module="arcgis_transport")


@dataclass(frozen=True)
class TransportResult:
    """Outcome of one GET request.

    A non-empty ``error`` marks the request as failed; ``code`` then holds
    the HTTP status or 0 when no response was received.
    """

    body: str = ""
    code: int = 0
    error: str | None = None

    @property
    def failed(self) -> bool:
        return bool(self.error)


class Transport(Protocol):
    """Performs a single synchronous GET request."""

    def get(self, url: str) -> TransportResult: ...


class RequestsTransport:
    """Transport backed by the requests library."""

    def __init__(
        self, timeout: float = 10, session: requests.Session | None = None
    ):
        """Initialize the transport.

        Args:
            timeout: Seconds to wait for the provider before giving up
            session: Optional session to reuse connections across calls
        """
        self.timeout = timeout
        self.session = session

    def get(self, url: str) -> TransportResult:
        """GET *url* and wrap the outcome in a TransportResult.

        Args:
            url: Fully built request URL

        Returns:
            TransportResult with the body, or with code and error set
        """
        client = self.session or requests
        try:
            response = client.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 0
            reason = e.response.reason if e.response is not None else ""
            logger.debug("ArcGIS responded with an error status", status=status)
            return TransportResult(code=status, error=reason or str(e))
        except requests.RequestException as e:
            logger.debug("ArcGIS request failed", error=str(e))
            return TransportResult(code=0, error=str(e))

        return TransportResult(body=response.text, code=response.status_code)
