#!/usr/bin/env python3
"""
Routestats - aggregate statistics for recorded GPS tracks.

This package loads a recorded track (GPX) and folds its trackpoints into a
route that keeps running totals of distance, ascent and descent, and derives
a normalized hilliness score from them.
"""
import importlib.metadata

__version__ = importlib.metadata.version("routestats")

# Import main classes for public API
from .errors import ParseError, RouteStatsError, UnsupportedFormatError
from .formats import FORMATS, from_file
from .geometry import GeoPoint
from .geometry_utils import haversine_distance
from .gpx import GpxTrack
from .route import GeoRoute

__all__ = [
    "FORMATS",
    "GeoPoint",
    "GeoRoute",
    "GpxTrack",
    "ParseError",
    "RouteStatsError",
    "UnsupportedFormatError",
    "from_file",
    "haversine_distance",
]
