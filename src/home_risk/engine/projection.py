"""WGS84 <-> Web Mercator conversion.

The NRI feature service takes points in ESRI WKID 102100 (EPSG:3857), the
spherical Mercator used by web maps: x = R * lon, y = R * ln(tan(pi/4 + lat/2))
with R = 6378137 m and angles in radians.
"""

import logging
from functools import lru_cache

from pyproj import Transformer

from home_risk.models.geometry import Coordinate, WEB_MERCATOR

logger = logging.getLogger(__name__)

EARTH_RADIUS_M = 6378137.0
# Latitude at which the square Web Mercator world ends
MAX_LATITUDE = 85.05112877980659


@lru_cache(maxsize=None)
def _transformer(inverse: bool = False) -> Transformer:
    if inverse:
        return Transformer.from_crs("EPSG:3857", "EPSG:4326", always_xy=True)
    return Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True)


def to_web_mercator(latitude: float, longitude: float) -> Coordinate:
    """Project a WGS84 latitude/longitude into a Web Mercator coordinate.

    Raises ValueError when the point lies outside the projection's domain.
    """
    if not -MAX_LATITUDE <= latitude <= MAX_LATITUDE:
        raise ValueError(f"latitude {latitude} is outside the Web Mercator range (±{MAX_LATITUDE:.4f})")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"longitude {longitude} is outside [-180, 180]")

    x, y = _transformer().transform(longitude, latitude)
    logger.debug("Projected (%.6f, %.6f) -> x=%s y=%s", latitude, longitude, x, y)
    return Coordinate(spatial_reference=WEB_MERCATOR, x=x, y=y)


def from_web_mercator(coordinate: Coordinate) -> tuple[float, float]:
    """Inverse of to_web_mercator. Returns (latitude, longitude)."""
    lon, lat = _transformer(inverse=True).transform(coordinate.x, coordinate.y)
    return lat, lon
