"""Address geocoding via the Google Maps Geocoding API (requires an API key).

The resolver turns an Address into a Web Mercator Coordinate ready for the
risk query: geocode to WGS84, then project.
"""

import logging

import httpx

from home_risk.config import settings
from home_risk.engine.projection import to_web_mercator
from home_risk.errors import GeocodingFailure
from home_risk.models.geometry import Coordinate, GeoPoint
from home_risk.models.property import Address

logger = logging.getLogger(__name__)


class GoogleGeocoder:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise GeocodingFailure("an API key is required for the Google Maps Geocoding API")
        self.api_key = api_key
        self.base_url = base_url or settings.geocode_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    async def _get(self, params: dict) -> dict:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(self.base_url, params={**params, "key": self.api_key})
            resp.raise_for_status()
            return resp.json()

    async def geocode(self, address: Address) -> GeoPoint:
        """Look up the WGS84 location of an address."""
        try:
            data = await self._get({"address": address.full})
        except httpx.HTTPStatusError as e:
            raise GeocodingFailure(
                f"failed to get coords from google maps: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise GeocodingFailure(f"failed to get coords from google maps: {e}") from e
        except ValueError as e:
            raise GeocodingFailure(f"failed to get coords from google maps: invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise GeocodingFailure("failed to get coords from google maps: unexpected response shape")

        status = data.get("status", "")
        if status != "OK":
            detail = data.get("error_message") or ""
            logger.warning("Geocoding %r returned status %s %s", address.full, status, detail)
            message = f"failed to get coords from google maps: status {status or 'missing'}"
            if detail:
                message = f"{message}: {detail}"
            raise GeocodingFailure(message)

        results = data.get("results") or []
        if not results:
            raise GeocodingFailure(f"failed to get coords from google maps: no results for {address.full}")

        match = results[0]
        try:
            location = match["geometry"]["location"]
            point = GeoPoint(
                latitude=float(location["lat"]),
                longitude=float(location["lng"]),
                formatted_address=match.get("formatted_address", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingFailure(f"failed to get coords from google maps: malformed result ({e})") from e

        logger.debug(
            "Geocoded %r -> %s (%.6f, %.6f)",
            address.full, point.formatted_address, point.latitude, point.longitude,
        )
        return point

    async def resolve(self, address: Address) -> Coordinate:
        """Geocode an address and project it into Web Mercator."""
        point = await self.geocode(address)
        try:
            return to_web_mercator(point.latitude, point.longitude)
        except ValueError as e:
            raise GeocodingFailure(f"cannot project {address.full}: {e}") from e
