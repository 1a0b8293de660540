"""Constants for the ArcGIS World GeocodeServer.

Endpoint location, query parameter names and the metadata keys attached
to geocoded points.
"""

ARCGIS_HOST = "geocode.arcgis.com"
FIND_ADDRESS_CANDIDATES_PATH = (
    "/arcgis/rest/services/World/GeocodeServer/findAddressCandidates"
)

# Query parameters
SINGLE_LINE_PARAM = "singleLine"
FORMAT_PARAM = "f"
RESPONSE_FORMAT = "json"

# Response fields
CANDIDATES_FIELD = "candidates"

# Metadata keys on GeocodePoint.data
SCORE_KEY = "score"
ADDRESS_KEY = "address"
ALTERNATIVES_KEY = "alternatives"
