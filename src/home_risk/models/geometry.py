"""Geographic and projected point types.

Coordinates handed to the risk query are always in Web Mercator, which ESRI
identifies as WKID 102100 with EPSG 3857 as its latest WKID.
"""

import json
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float
    formatted_address: str = ""


class SpatialReference(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latest_wkid: int = Field(alias="latestWkid")
    wkid: int


WEB_MERCATOR = SpatialReference(latest_wkid=3857, wkid=102100)


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    spatial_reference: SpatialReference = Field(default=WEB_MERCATOR, alias="spatialReference")
    x: float
    y: float

    def to_query_param(self) -> str:
        """Serialize as an ESRI point geometry for the ``geometry`` query parameter.

        Key order and compact separators match what the feature service
        documents: ``{"spatialReference":{"latestWkid":..,"wkid":..},"x":..,"y":..}``.
        Raises ValueError for NaN or infinite coordinates.
        """
        payload = {
            "spatialReference": {
                "latestWkid": self.spatial_reference.latest_wkid,
                "wkid": self.spatial_reference.wkid,
            },
            "x": self.x,
            "y": self.y,
        }
        return json.dumps(payload, separators=(",", ":"), allow_nan=False)
