#!/usr/bin/env python3
"""
Trackpoint data model for route statistics.
"""

from datetime import datetime
from typing import NamedTuple, Optional


class GeoPoint(NamedTuple):
    """
    One recorded track sample, as stored in a route.

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        elevation: Elevation in meters
        distance: Distance in meters from the previous point of the route
                  (0 for the first point)
        time: Timestamp of the sample, if the track recorded one
    """

    lat: float
    lon: float
    elevation: float
    distance: float = 0.0
    time: Optional[datetime] = None
