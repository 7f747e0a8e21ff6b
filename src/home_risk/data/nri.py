"""FEMA National Risk Index (NRI) county lookup.

Queries the NRI counties FeatureServer for the county polygon that contains a
Web Mercator point. Free, no API key required.
"""

import json
import logging

import httpx
from pydantic import ValidationError

from home_risk.config import settings
from home_risk.errors import DecodeFailure, RequestBuildFailure, TransportFailure, UnexpectedResultCount
from home_risk.models.geometry import Coordinate
from home_risk.models.risk import RiskAttributes, RiskQueryResult

logger = logging.getLogger(__name__)

# Requests and returns points in ESRI's Web Mercator WKID
QUERY_WKID = "102100"


class RiskQueryClient:
    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.nri_query_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    def build_params(self, coordinate: Coordinate) -> dict[str, str]:
        try:
            geometry = coordinate.to_query_param()
        except ValueError as e:
            raise RequestBuildFailure(f"error marshaling geometry: {e}") from e

        return {
            "geometry": geometry,
            "f": "json",
            "outFields": "*",
            "spatialRel": "esriSpatialRelIntersects",
            "where": "1=1",
            "geometryType": "esriGeometryPoint",
            "inSR": QUERY_WKID,
            "outSR": QUERY_WKID,
        }

    def build_url(self, coordinate: Coordinate) -> str:
        params = self.build_params(coordinate)
        try:
            url = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise RequestBuildFailure(f"error parsing arcgis url: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise RequestBuildFailure(f"error parsing arcgis url: {self.base_url!r} is not an absolute http(s) URL")
        return str(url.copy_merge_params(params))

    def decode(self, body: bytes) -> RiskAttributes:
        """Decode a query response and return the single feature's attributes."""
        try:
            result = RiskQueryResult.model_validate_json(body)
        except ValidationError as e:
            raise DecodeFailure(f"error unmarshaling response: {_describe_invalid(body, e)}") from e

        count = len(result.features)
        logger.debug("NRI query returned %d feature(s)", count)
        if count != 1:
            raise UnexpectedResultCount(count)
        return result.features[0].attributes

    async def query(self, coordinate: Coordinate) -> RiskAttributes:
        """Fetch the NRI county record containing the coordinate."""
        url = self.build_url(coordinate)
        logger.debug("Querying NRI: %s", url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                body = resp.content
        except httpx.HTTPStatusError as e:
            raise TransportFailure(f"error querying arcgis: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportFailure(f"error querying arcgis: {e}") from e

        return self.decode(body)


def _describe_invalid(body: bytes, error: ValidationError) -> str:
    if any(detail["type"] == "json_invalid" for detail in error.errors()):
        return f"invalid JSON: {error.errors()[0]['msg']}"

    # ArcGIS reports failures as HTTP 200 with an {"error": {...}} envelope
    payload = json.loads(body)
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        service_error = payload["error"]
        return f"service error {service_error.get('code', '?')}: {service_error.get('message', '')}"

    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "body"
    return f"{location}: {first['msg']}"
