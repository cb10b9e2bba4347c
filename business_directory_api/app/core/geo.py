"""Great-circle distance between coordinates."""

import math
from typing import Optional

from ..schemas.business import Coordinate

EARTH_RADIUS_METERS = 6_371_000.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance between ``a`` and ``b`` in meters."""
    if a.latitude == b.latitude and a.longitude == b.longitude:
        return 0.0
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(h)))


def format_distance(meters: Optional[float]) -> str:
    """Render a distance the way listing cards show it (``850 m``, ``2.4 km``)."""
    if meters is None:
        return ""
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{meters / 1000:.1f} km"
