"""Print the FEMA National Risk Index summary for a home address.

Usage:
    python -m home_risk --apiKey=YOUR_GOOGLE_MAPS_KEY
    home-risk --apiKey=... --number 350 --street "5th Ave" --city "New York" --state NY
"""

import argparse
import asyncio
import logging
import sys

from home_risk.config import settings
from home_risk.data.geocode import GoogleGeocoder
from home_risk.data.nri import RiskQueryClient
from home_risk.engine.report import render_report
from home_risk.errors import GeocodingFailure, HomeRiskError
from home_risk.models.property import Address, DEFAULT_ADDRESS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FEMA National Risk Index lookup for a home address")
    parser.add_argument(
        "--apiKey", "--api-key", dest="api_key", default="",
        help="Google Maps Geocoding API key - see https://developers.google.com/maps/documentation/geocoding/get-api-key",
    )
    parser.add_argument("--street", default=DEFAULT_ADDRESS.street, help=f"Street name (default: {DEFAULT_ADDRESS.street})")
    parser.add_argument("--number", type=int, default=DEFAULT_ADDRESS.number, help=f"Street number (default: {DEFAULT_ADDRESS.number})")
    parser.add_argument("--city", default=DEFAULT_ADDRESS.city, help=f"City (default: {DEFAULT_ADDRESS.city})")
    parser.add_argument("--state", default=DEFAULT_ADDRESS.state, help=f"State (default: {DEFAULT_ADDRESS.state})")
    parser.add_argument("--country", default=DEFAULT_ADDRESS.country, help=f"Country (default: {DEFAULT_ADDRESS.country})")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def run(address: Address, api_key: str, timeout: float | None = None) -> str:
    """Resolve the address, query NRI and return the rendered report."""
    geocoder = GoogleGeocoder(api_key, timeout=timeout)
    try:
        coordinate = await geocoder.resolve(address)
    except GeocodingFailure as e:
        raise GeocodingFailure(f"error getting geometry for address: {e}") from e

    attrs = await RiskQueryClient(timeout=timeout).query(coordinate)
    logger.info("Found NRI record for %s County, %s", attrs.county, attrs.state)
    return render_report(attrs)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.api_key:
        print("please provide a value for --apiKey", file=sys.stderr)
        return 1

    address = Address(
        street=args.street,
        number=args.number,
        city=args.city,
        state=args.state,
        country=args.country,
    )

    try:
        report = asyncio.run(run(address, args.api_key, timeout=args.timeout))
    except HomeRiskError as e:
        print(e, file=sys.stderr)
        return 1

    print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
