"""
Terrain elevation path for a flight path.

Consecutive readings of a flight path almost always fall in the same tile, so
the path is split into runs of same-tile points and each tile file is opened
once per run to read all of that run's samples.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .coordinates import LatLon, TileId
from .hgt_reader import read_elevations
from .resolver import resolve_tile_file

logger = logging.getLogger(__name__)


def group_by_tile(points: Iterable[LatLon]) -> Iterator[tuple[TileId, list[LatLon]]]:
    """Yield ``(tile, run)`` for each maximal run of consecutive same-tile points."""
    run_tile = None
    run: list[LatLon] = []
    for point in points:
        tile = TileId.from_latlon(point)
        if run and tile != run_tile:
            yield run_tile, run
            run = []
        if not run:
            run_tile = tile
        run.append(point)
    if run:
        yield run_tile, run


def get_elevations_from_tile(
    tile: TileId,
    points: list[LatLon],
    data_dir: Path | str | None = None,
    extension: str | None = None,
) -> list[int]:
    """Resolve the file for ``tile`` and read every point of the run from it."""
    file_path = resolve_tile_file(tile, data_dir, extension)
    return read_elevations(file_path, points)


def get_elevation_path(
    flight_path: Iterable[LatLon],
    data_dir: Path | str | None = None,
    extension: str | None = None,
) -> list[int]:
    """Return the terrain elevation in meters under each point of ``flight_path``.

    The result has one entry per input point, in input order. The .hgt tile
    files for the area must be present in ``data_dir`` (default: the configured
    data directory, else the working directory). Any missing or malformed
    tile aborts the whole computation; no partial path is returned.
    """
    elevation_path: list[int] = []
    runs = 0
    for tile, run in group_by_tile(flight_path):
        logger.debug(f"Run {runs}: {len(run)} point(s) in tile {tile.name}")
        elevation_path.extend(get_elevations_from_tile(tile, run, data_dir, extension))
        runs += 1

    if runs:
        logger.info(f"Elevation path of {len(elevation_path)} point(s) read from {runs} tile run(s)")
    return elevation_path


def get_elevation(
    point: LatLon,
    data_dir: Path | str | None = None,
    extension: str | None = None,
) -> int:
    """Elevation under a single point, without any grouping."""
    tile = TileId.from_latlon(point)
    return get_elevations_from_tile(tile, [point], data_dir, extension)[0]
