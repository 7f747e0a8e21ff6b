"""Shared fixtures: the default address and a realistic NRI county payload."""

import json

import httpx
import pytest

from home_risk.models.geometry import Coordinate
from home_risk.models.property import DEFAULT_ADDRESS, Address
from home_risk.models.risk import RiskAttributes


@pytest.fixture
def sample_address() -> Address:
    return DEFAULT_ADDRESS


@pytest.fixture
def dummy_coordinate() -> Coordinate:
    """Point in Web Mercator taken from the NRI map viewer."""
    return Coordinate(x=-11677620.771308051, y=4854685.755719238)


@pytest.fixture
def nri_attributes() -> dict:
    """One feature's attributes as the service returns them for outFields=*."""
    return {
        "OBJECTID": 1862,
        "STATE": "New York",
        "STATEABBRV": "NY",
        "COUNTY": "New York",
        "COUNTYFIPS": "061",
        "RISK_SCORE": 12.345,
        "RISK_RATNG": "Relatively Low",
        "DRGT_RISKS": 1.0,
        "DRGT_RISKR": "Very Low",
        "ERQK_RISKS": 2.5,
        "ERQK_RISKR": "Low",
        "TRND_RISKS": 0.0,
        "TRND_RISKR": "Very Low",
    }


@pytest.fixture
def risk_attributes(nri_attributes) -> RiskAttributes:
    return RiskAttributes.model_validate(nri_attributes)


@pytest.fixture
def nri_body(nri_attributes) -> bytes:
    return json.dumps({"features": [{"attributes": nri_attributes}]}).encode()


@pytest.fixture
def json_transport():
    """Build an httpx.MockTransport answering with a fixed body, plus the list of requests it saw."""

    def _build(body, status_code: int = 200):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler), seen

    return _build
