"""
Great-circle distance math for geographic coordinates.

All coordinates are WGS84 latitude/longitude in decimal degrees, treated as
points on a sphere of the Earth's mean radius.
"""

import math
from typing import Any

# Mean Earth radius in meters. Every distance produced by this package scales
# linearly with this value.
EARTH_RADIUS_M = 6371000.0


def haversine_distance(point_a: Any, point_b: Any) -> float:
    """
    Calculate the great-circle distance between two points.

    Uses the atan2 form of the haversine formula, which stays within the
    domain of the inverse trig function for identical and antipodal points.

    Args:
        point_a: First point (any object with ``lat`` and ``lon`` attributes)
        point_b: Second point

    Returns:
        Distance in meters, or NaN if any coordinate is not finite
    """
    coords = (point_a.lat, point_a.lon, point_b.lat, point_b.lon)
    if not all(math.isfinite(value) for value in coords):
        return math.nan

    lat1, lon1 = math.radians(point_a.lat), math.radians(point_a.lon)
    lat2, lon2 = math.radians(point_b.lat), math.radians(point_b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a fractionally above 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def is_valid_coordinate(lat: float, lon: float) -> bool:
    """Return True if lat/lon lie within -90..90 and -180..180 degrees."""
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0
