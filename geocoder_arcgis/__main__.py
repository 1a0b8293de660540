"""Geocoder CLI interface."""

import argparse
import json
import sys

from pydantic import ValidationError

from geocoder_arcgis.core.config import settings
from geocoder_arcgis.core.geocoding import (
    ArcgisGeocoder,
    ArcgisGeocodingError,
    GeocodeOptions,
    RequestsTransport,
    to_geojson,
)
from geocoder_arcgis.core.logging import configure_logging, get_logger

logger = get_logger(__name__, module="cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from settings."""
    parser = argparse.ArgumentParser(
        prog="geocoder_arcgis",
        description="Geocode an address with the ArcGIS World GeocodeServer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Best match with alternatives
  python -m geocoder_arcgis "Gildeweg 39a, Vlissingen"

  # Only candidates scoring 90 or more, merged into one MultiPoint
  python -m geocoder_arcgis "Gildeweg 39a, Vlissingen" --score-threshold 90 --all-results
""",
    )
    parser.add_argument("address", help="Single-line address to geocode")
    parser.add_argument(
        "--score-threshold",
        type=float,
        default=settings.ARCGIS_SCORE_THRESHOLD,
        help="Minimum candidate score (0-100)",
    )
    parser.add_argument(
        "--no-score-threshold",
        dest="score_threshold",
        action="store_const",
        const=None,
        help="Keep every well-formed candidate regardless of score",
    )
    parser.add_argument(
        "--all-results",
        action=argparse.BooleanOptionalAction,
        default=settings.ARCGIS_ALL_RESULTS,
        help="Merge all valid candidates into a MultiPoint",
    )
    parser.add_argument(
        "--https",
        action=argparse.BooleanOptionalAction,
        default=settings.ARCGIS_USE_HTTPS,
        help="Request over https; --no-https uses http",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.ARCGIS_TIMEOUT,
        help="Request timeout in seconds",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        options = GeocodeOptions(
            use_secure_transport=args.https,
            score_threshold=args.score_threshold,
            return_all_results=args.all_results,
        )
    except ValidationError as e:
        parser.error(f"invalid options: {e.errors()[0]['msg']}")

    geocoder = ArcgisGeocoder(
        transport=RequestsTransport(timeout=args.timeout), options=options
    )

    try:
        result = geocoder.locate(args.address)
    except ArcgisGeocodingError as e:
        logger.warning("Geocoding failed", address=args.address, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_geojson(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
