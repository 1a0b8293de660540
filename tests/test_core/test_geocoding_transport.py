"""Tests for the requests-backed transport."""

from unittest.mock import Mock

import requests

from geocoder_arcgis.core.geocoding import RequestsTransport, TransportResult

URL = (
    "https://geocode.arcgis.com/arcgis/rest/services/World/GeocodeServer/"
    "findAddressCandidates?singleLine=test&f=json"
)


def _response(status_code=200, text='{"candidates":[]}', reason="OK"):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    response.reason = reason
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


class TestRequestsTransport:
    """Tests for RequestsTransport.get."""

    def test_success(self, mocker):
        """Test that a successful GET returns the body."""
        mock_get = mocker.patch(
            "geocoder_arcgis.core.geocoding.transport.requests.get",
            return_value=_response(),
        )

        result = RequestsTransport(timeout=5).get(URL)

        assert result == TransportResult(body='{"candidates":[]}', code=200)
        assert result.failed is False
        mock_get.assert_called_once_with(URL, timeout=5)

    def test_http_error_status(self, mocker):
        """Test that an error status maps to code and reason."""
        mocker.patch(
            "geocoder_arcgis.core.geocoding.transport.requests.get",
            return_value=_response(status_code=503, text="", reason="Service Unavailable"),
        )

        result = RequestsTransport().get(URL)

        assert result.failed is True
        assert result.code == 503
        assert result.error == "Service Unavailable"

    def test_connection_error(self, mocker):
        """Test that a connection failure maps to code 0."""
        mocker.patch(
            "geocoder_arcgis.core.geocoding.transport.requests.get",
            side_effect=requests.ConnectionError("Name or service not known"),
        )

        result = RequestsTransport().get(URL)

        assert result.failed is True
        assert result.code == 0
        assert result.error == "Name or service not known"

    def test_timeout(self, mocker):
        """Test that a timeout is reported on the result."""
        mocker.patch(
            "geocoder_arcgis.core.geocoding.transport.requests.get",
            side_effect=requests.Timeout("Read timed out"),
        )

        result = RequestsTransport(timeout=1).get(URL)

        assert result == TransportResult(code=0, error="Read timed out")

    def test_uses_session(self):
        """Test that a given session performs the request."""
        session = Mock(spec=requests.Session)
        session.get.return_value = _response(text='{"candidates":[1]}')

        result = RequestsTransport(timeout=3, session=session).get(URL)

        session.get.assert_called_once_with(URL, timeout=3)
        assert result.body == '{"candidates":[1]}'
