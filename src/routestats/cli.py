#!/usr/bin/env python3
"""
Route statistics tool.
This script loads a recorded GPS track and prints the route's distance,
ascent, descent and hilliness.

Requirements:
    pip install gpxpy

"""

import argparse
import json
import logging
import sys

from . import __version__
from .config import RouteStatsConfig
from .errors import ParseError, UnsupportedFormatError
from .formats import FORMATS, from_file
from .route import GeoRoute

# Configure logging
logger = logging.getLogger("routestats")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Route statistics for recorded GPS tracks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="Track file to process (use - for stdin)",
    )
    parser.add_argument(
        "--format",
        type=str,
        default="gpx_track",
        help=f"Track format (default: gpx_track; known: {', '.join(sorted(FORMATS))})",
    )
    parser.add_argument(
        "--default-elevation",
        type=float,
        default=None,
        help="Elevation in meters for trackpoints without one (default: reject them)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the statistics as JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"routestats {__version__}",
    )
    return parser


def setup_logging(config: RouteStatsConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if getattr(handler, "routestats_console", False):
            root_logger.removeHandler(handler)
    console_handler.routestats_console = True
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def format_summary(route: GeoRoute) -> str:
    """Render the route statistics as aligned text lines."""
    lines = [f"Points:     {len(route)}"]
    if route.start_point is not None:
        lines.append(
            f"Start:      {route.start_point.lat:.7f}, {route.start_point.lon:.7f}"
        )
    lines.append(f"Distance:   {route.total_distance_km:.3f} km")
    lines.append(f"Ascent:     {route.total_ascent:.0f} m")
    lines.append(f"Descent:    {route.total_descent:.0f} m")
    lines.append(f"Hilliness:  {route.hilliness():.2f}")
    if route.total_time is not None:
        hours, remainder = divmod(int(route.total_time), 3600)
        minutes, seconds = divmod(remainder, 60)
        lines.append(f"Duration:   {hours}:{minutes:02d}:{seconds:02d}")
    return "\n".join(lines)


def main(argv=None):
    """
    Parses command-line arguments, loads the track file
    and prints its route statistics.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.filename:
        parser.print_help()
        sys.exit(1)

    config = RouteStatsConfig.from_args(args)

    # Setup logging
    setup_logging(config)

    # Load and parse the track file into a route
    try:
        route = from_file(args.filename, config.format, **config.loader_options())
    except UnsupportedFormatError as e:
        logger.error(str(e))
        sys.exit(1)
    except FileNotFoundError:
        logger.error(f"Track file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read track file (permission denied): {args.filename}")
        sys.exit(1)
    except ParseError as e:
        logger.error(f"Invalid track file: {e}")
        sys.exit(1)
    logger.info(f"Loaded route with {len(route)} points")

    if config.json:
        print(json.dumps(route.to_dict(), indent=2))
    else:
        print(format_summary(route))


if __name__ == "__main__":
    main()
