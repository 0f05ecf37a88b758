#!/usr/bin/env python3
"""
Format dispatch: map a format identifier to its loader and build a route.
"""

from typing import IO, Dict, Type, Union
import logging
import os
import sys

from .errors import UnsupportedFormatError
from .gpx import GpxTrack
from .route import GeoRoute

logger = logging.getLogger(__name__)

FORMATS: Dict[str, Type[GpxTrack]] = {
    "gpx_track": GpxTrack,
}


def get_loader(format_identifier: str, **options) -> GpxTrack:
    """
    Look up and instantiate the loader for a format identifier.

    Args:
        format_identifier: Symbolic format name, e.g. "gpx_track"
        **options: Keyword arguments passed to the loader's constructor

    Returns:
        Loader instance

    Raises:
        UnsupportedFormatError: If no loader is registered for the identifier
    """
    try:
        loader_class = FORMATS[format_identifier]
    except (KeyError, TypeError):
        supported = ", ".join(sorted(FORMATS))
        raise UnsupportedFormatError(
            f"Unsupported format {format_identifier!r} (supported: {supported})"
        ) from None
    return loader_class(**options)


def from_file(
    source: Union[IO, str, os.PathLike],
    format_identifier: str = "gpx_track",
    **options,
) -> GeoRoute:
    """
    Load a track into a new route.

    Args:
        source: Open file-like object, path to a file, or "-" for stdin
        format_identifier: Symbolic format name selecting the loader
        **options: Keyword arguments passed to the loader's constructor

    Returns:
        Populated GeoRoute

    Raises:
        UnsupportedFormatError: If the format identifier is unknown. Raised
            before the source is opened or read.
        ParseError: If the document is malformed.
        FileNotFoundError: If a path is given and the file doesn't exist.
        PermissionError: If a path is given and the file can't be read.
    """
    loader = get_loader(format_identifier, **options)
    route = GeoRoute()

    if source == "-":
        logger.debug("Reading track from stdin")
        return loader.load(sys.stdin, route)

    if isinstance(source, (str, os.PathLike)):
        logger.debug(f"Reading track file: {source}")
        with open(source, "r", encoding="utf-8") as f:
            return loader.load(f, route)

    return loader.load(source, route)
