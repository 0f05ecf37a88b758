import argparse
from dataclasses import dataclass
from typing import Optional


@dataclass
class RouteStatsConfig:
    """Configuration for the routestats CLI."""

    format: str = "gpx_track"
    default_elevation: Optional[float] = None
    log_level: str = "WARNING"
    json: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RouteStatsConfig":
        """Build a configuration from parsed command-line arguments."""
        return cls(
            format=args.format,
            default_elevation=args.default_elevation,
            log_level=args.log_level,
            json=args.json,
        )

    def loader_options(self) -> dict:
        """Keyword options for the track loader."""
        return {"default_elevation": self.default_elevation}
