#!/usr/bin/env python3
"""
Command line driver for terrain-path.

Examples:
  terrain-path path --coords 48.424236 -123.383191 48.431202 -123.355085 --dir data/srtm
  terrain-path path --demo
  terrain-path tiles --coords 48.42 -123.38 49.26 -123.24 --dir data/srtm
  terrain-path inspect data/srtm/N48W124.HGT
"""

from __future__ import annotations

import argparse
import logging
import pprint
import sys
from pathlib import Path

from . import config
from .coordinates import LatLon
from .elevation_path import get_elevation_path
from .error_handling import TerrainPathError, error_handler
from .tile_stats import coverage_report, find_tile_files, inspect_tile_file

logger = logging.getLogger(__name__)

# Victoria harbour to Burrard Inlet, crossing the N48W124, N49W124 and
# N49W123 tiles.
DEMO_FLIGHT_PATH = [
    (48.424236, -123.383191),  # Victoria harbour
    (48.431202, -123.355085),  # Victoria downtown
    (48.493261, -123.344507),  # Mount Douglas
    (48.530120, -123.397746),  # Elk Lake
    (48.612521, -123.443495),  # Mount Newton
    (48.630709, -123.509374),  # Saanich Inlet
    (49.263011, -123.248966),  # UBC
    (49.281924, -123.119978),  # Downtown Vancouver
    (49.277937, -122.918611),  # Simon Fraser University
    (49.284007, -122.835490),  # Burrard Inlet
]


def _parse_flight_path(parser: argparse.ArgumentParser, args: argparse.Namespace) -> list[LatLon]:
    if getattr(args, "demo", False):
        return [LatLon(lat, lon) for lat, lon in DEMO_FLIGHT_PATH]

    vals = args.coords or []
    if not vals:
        parser.error("provide --coords (lat lon pairs)")
    if len(vals) % 2 != 0:
        parser.error("provide an even number of values for --coords (lat lon pairs)")
    return [LatLon(vals[i], vals[i + 1]) for i in range(0, len(vals), 2)]


def cmd_path(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    flight_path = _parse_flight_path(parser, args)
    elevation_path = get_elevation_path(flight_path, args.dir)
    for point, elevation in zip(flight_path, elevation_path):
        print(f"Elevation at lat-long {point.lat}, {point.lon} is: {elevation}")
    return 0


def cmd_tiles(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    flight_path = _parse_flight_path(parser, args)
    report = coverage_report(flight_path, args.dir)
    for name, path in report.items():
        print(f"{name} -> {path if path is not None else 'MISSING'}")
    return 0 if all(path is not None for path in report.values()) else 1


def cmd_inspect(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    files: list[Path] = []
    for target in args.paths:
        files.extend(find_tile_files(target) if target.is_dir() else [target])
    for file_path in files:
        pprint.pprint(inspect_tile_file(file_path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terrain-path",
        description="Terrain elevation under a flight path, from SRTM-3 .hgt tiles",
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_path_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--coords", type=float, nargs="+", metavar="DEG",
                       help="List of lat lon pairs (e.g., 48.42 -123.38 49.26 -123.24)")
        p.add_argument("--dir", type=Path, default=None,
                       help="Directory containing the .hgt tiles (default: $HGT_DATA_DIR or cwd)")

    p_path = sub.add_parser("path", help="Print the elevation under each point")
    add_path_args(p_path)
    p_path.add_argument("--demo", action="store_true",
                        help="Use the built-in Victoria to Vancouver flight path")
    p_path.set_defaults(func=cmd_path)

    p_tiles = sub.add_parser("tiles", help="List the tiles a flight path needs")
    add_path_args(p_tiles)
    p_tiles.add_argument("--demo", action="store_true",
                         help="Use the built-in Victoria to Vancouver flight path")
    p_tiles.set_defaults(func=cmd_tiles)

    p_inspect = sub.add_parser("inspect", help="Print statistics for tile files")
    p_inspect.add_argument("paths", type=Path, nargs="+", help=".hgt files or directories")
    p_inspect.set_defaults(func=cmd_inspect)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format=config.LOG_FORMAT, level=args.log_level.upper())

    try:
        return args.func(parser, args)
    except TerrainPathError as e:
        error_handler.log_error(e, {"command": args.command})
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
