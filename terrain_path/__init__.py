"""Terrain elevation paths from SRTM-3 .hgt tiles."""

from .coordinates import LatLon, TileId
from .elevation_path import get_elevation, get_elevation_path, group_by_tile
from .error_handling import (
    InvalidCoordinateError,
    MalformedTileFileError,
    TerrainPathError,
    TileFileNotFoundError,
)
from .hgt_reader import read_elevations
from .offsets import entry_offset, sample_index
from .resolver import resolve_tile_file

__all__ = [
    "InvalidCoordinateError",
    "LatLon",
    "MalformedTileFileError",
    "TerrainPathError",
    "TileFileNotFoundError",
    "TileId",
    "entry_offset",
    "get_elevation",
    "get_elevation_path",
    "group_by_tile",
    "read_elevations",
    "resolve_tile_file",
    "sample_index",
]
