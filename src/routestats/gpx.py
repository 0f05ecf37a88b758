#!/usr/bin/env python3
"""
GPX track loading for route statistics.
"""

from typing import IO, Optional, Union
import logging
import math

import gpxpy
import gpxpy.gpx

from .errors import ParseError
from .route import GeoRoute

logger = logging.getLogger(__name__)


class GpxTrack:
    """Loads the trackpoints of a GPX document into a GeoRoute."""

    def __init__(self, default_elevation: Optional[float] = None):
        """
        Args:
            default_elevation: Elevation in meters to use for trackpoints that
                have no <ele> element. If None, such trackpoints raise ParseError.
        """
        self.default_elevation = default_elevation

    def load(self, file_input: Union[IO, str], route: GeoRoute) -> GeoRoute:
        """
        Parse a GPX document and add every trackpoint to the route, in
        document order. All tracks and segments are concatenated.

        Args:
            file_input: File-like object (or string) containing GPX data
            route: Route to populate; it is modified in place

        Returns:
            The same route object, for convenience

        Raises:
            ParseError: If the document is malformed or a trackpoint lacks
                coordinates or elevation. The route may then be partially
                populated and should be discarded.
        """
        try:
            gpx_data = gpxpy.parse(file_input)
        except (gpxpy.gpx.GPXException, ValueError) as e:
            raise ParseError(f"Invalid GPX document: {e}") from e

        segment_count = sum(len(track.segments) for track in gpx_data.tracks)
        if len(gpx_data.tracks) > 1 or segment_count > 1:
            logger.debug(
                f"Concatenating {segment_count} segments from "
                f"{len(gpx_data.tracks)} tracks into a single route"
            )

        index = 0
        for track in gpx_data.tracks:
            for segment in track.segments:
                for point in segment.points:
                    route.add_point(
                        *self._coordinates(point, index), time=point.time
                    )
                    index += 1

        if index == 0:
            logger.warning("No track points found in GPX document")
        else:
            logger.debug(f"Parsed {index} track points from GPX document")

        return route

    def _coordinates(self, point: gpxpy.gpx.GPXTrackPoint, index: int):
        """Return (lat, lon, elevation) for a trackpoint or raise ParseError."""
        if point.latitude is None or point.longitude is None:
            raise ParseError(f"Track point {index} is missing lat or lon")

        elevation = point.elevation
        if elevation is None:
            if self.default_elevation is None:
                raise ParseError(f"Track point {index} has no elevation")
            logger.debug(
                f"Track point {index} has no elevation, using {self.default_elevation}"
            )
            elevation = self.default_elevation

        if not all(
            math.isfinite(value)
            for value in (point.latitude, point.longitude, elevation)
        ):
            raise ParseError(f"Track point {index} has a non-finite coordinate or elevation")

        return point.latitude, point.longitude, elevation
