"""Test configuration."""

from collections.abc import Callable
from pathlib import Path

import pytest

from geocoder_arcgis.core.geocoding import (
    ArcgisGeocoder,
    GeocodeOptions,
    TransportResult,
)
from geocoder_arcgis.core.logging import configure_logging

FIXTURES_DIR = Path(__file__).parent / "fixtures"

fixture = pytest.fixture


class FakeTransport:
    """Transport returning a canned result and recording requested URLs."""

    def __init__(self, result: TransportResult):
        self.result = result
        self.urls: list[str] = []

    def get(self, url: str) -> TransportResult:
        self.urls.append(url)
        return self.result


@fixture(scope="session", autouse=True)
def setup_test_logging() -> None:
    """Configure console logging once for the test session."""
    configure_logging(testing=True, level="debug")


@fixture(scope="session")
def candidates_body() -> str:
    """Raw findAddressCandidates response for 'Gildeweg 39a, Vlissingen'."""
    return (FIXTURES_DIR / "arcgis_candidates.json").read_text(encoding="utf-8")


@fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Factory for fake transports."""

    def _make(body: str = "", code: int = 200, error: str | None = None):
        return FakeTransport(TransportResult(body=body, code=code, error=error))

    return _make


@fixture
def make_geocoder(
    make_transport: Callable[..., FakeTransport], candidates_body: str
) -> Callable[..., tuple[ArcgisGeocoder, FakeTransport]]:
    """Factory returning a geocoder wired to a fake transport.

    The transport serves the Vlissingen fixture unless told otherwise.
    """

    def _make(
        body: str | None = None,
        code: int = 200,
        error: str | None = None,
        **options,
    ) -> tuple[ArcgisGeocoder, FakeTransport]:
        transport = make_transport(
            body=candidates_body if body is None else body, code=code, error=error
        )
        geocoder = ArcgisGeocoder(transport, options=GeocodeOptions(**options))
        return geocoder, transport

    return _make
