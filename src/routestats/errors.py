"""
Exceptions raised while loading tracks into routes.
"""


class RouteStatsError(Exception):
    """Base class for routestats errors."""

    pass


class ParseError(RouteStatsError):
    """Raised when a track document is malformed or a trackpoint is incomplete."""

    pass


class UnsupportedFormatError(RouteStatsError):
    """Raised when no loader is registered for a format identifier."""

    pass
