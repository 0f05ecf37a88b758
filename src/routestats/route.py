#!/usr/bin/env python3
"""
Route model that folds trackpoints into running distance and elevation totals.
"""

from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple
import logging
import math

from .geometry import GeoPoint
from .geometry_utils import haversine_distance, is_valid_coordinate

logger = logging.getLogger(__name__)

# Ascent meters per 1000 distance meters: 1000 m ascent over 100 km is 10.
HILLINESS_SCALE = 1000


class GeoRoute:
    """Represents a recorded route with running distance, ascent and descent totals."""

    def __init__(self) -> None:
        """Initializes an empty route."""
        self._points: List[GeoPoint] = []
        self.start_point: Optional[GeoPoint] = None
        self.total_distance = 0
        self.total_ascent = 0.0
        self.total_descent = 0.0

    @property
    def points(self) -> Tuple[GeoPoint, ...]:
        """The route's points in insertion order."""
        return tuple(self._points)

    @property
    def last_point(self) -> Optional[GeoPoint]:
        """The most recently added point, or None for an empty route."""
        return self._points[-1] if self._points else None

    def add_point(
        self,
        lat: float,
        lon: float,
        elevation: float,
        time: Optional[datetime] = None,
    ) -> None:
        """
        Append a point to the route and update the running totals.

        The new point's ``distance`` keeps the full-precision haversine distance
        from the previous point, while ``total_distance`` accumulates each leg
        rounded to the nearest meter.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees
            elevation: Elevation in meters
            time: Optional timestamp of the sample
        """
        if not is_valid_coordinate(lat, lon):
            logger.warning(
                f"Point {len(self._points)} has out-of-range coordinates "
                f"({lat}, {lon}); distances involving it are not meaningful"
            )

        last_point = self.last_point
        new_point = GeoPoint(lat, lon, elevation, 0.0, time)

        if last_point is None:
            self.start_point = new_point
            self._points.append(new_point)
            return

        distance = haversine_distance(last_point, new_point)
        new_point = new_point._replace(distance=distance)
        if math.isfinite(distance):
            self.total_distance += round(distance)
        self._points.append(new_point)

        self.process_elevation_delta(last_point, new_point)

    def process_elevation_delta(
        self, last_point: Optional[GeoPoint], next_point: GeoPoint
    ) -> None:
        """
        Add the elevation change between two consecutive points to the
        ascent or descent total.

        Args:
            last_point: The previous point, or None if there is none
            next_point: The point being added
        """
        if last_point is None:
            return

        delta = next_point.elevation - last_point.elevation
        if delta > 0:
            self.total_ascent += delta
        elif delta < 0:
            self.total_descent += abs(delta)

    def hilliness(self) -> float:
        """
        Ascent in meters per kilometer of distance.

        Returns:
            Hilliness score, or 0 when the route has no distance
        """
        if self.total_distance == 0:
            return 0
        return self.total_ascent * HILLINESS_SCALE / self.total_distance

    @property
    def total_distance_km(self) -> float:
        """Total distance in kilometers."""
        return self.total_distance / 1000.0

    @property
    def started_at(self) -> Optional[datetime]:
        """Timestamp of the first point, if recorded."""
        return self.start_point.time if self.start_point is not None else None

    @property
    def ended_at(self) -> Optional[datetime]:
        """Timestamp of the last point, if recorded."""
        last_point = self.last_point
        return last_point.time if last_point is not None else None

    @property
    def total_time(self) -> Optional[float]:
        """Seconds between the first and last timestamps, if both are known."""
        if self.started_at is None or self.ended_at is None:
            return None
        return (self.ended_at - self.started_at).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        """Summarize the route statistics as a plain dictionary."""
        start = None
        if self.start_point is not None:
            start = {
                "lat": self.start_point.lat,
                "lon": self.start_point.lon,
                "elevation": self.start_point.elevation,
            }

        return {
            "start_point": start,
            "points": len(self._points),
            "total_distance": self.total_distance,
            "total_ascent": self.total_ascent,
            "total_descent": self.total_descent,
            "hilliness": self.hilliness(),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "total_time": self.total_time,
        }

    def __len__(self) -> int:
        """Return number of points in route."""
        return len(self._points)

    def __getitem__(self, index):
        """Allow indexing into points."""
        return self._points[index]

    def __iter__(self) -> Iterator[GeoPoint]:
        """Allow iteration over points."""
        return iter(self._points)
