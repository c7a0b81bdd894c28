"""Helpers to check which tiles a flight path needs and to sanity check tile files.

These functions are **read-only** – they never mutate the data on disk. They
work on whole tiles with numpy, unlike the path builder which reads single
samples.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import numpy as np

from . import config
from .coordinates import LatLon, TileId
from .error_handling import MalformedTileFileError, TileFileNotFoundError
from .resolver import resolve_tile_file

# ---------------------------------------------------------------------------
# Tile files
# ---------------------------------------------------------------------------


def load_tile(file_path: Path) -> np.ndarray:
    """Load a whole .hgt file as a (1201, 1201) big-endian int16 array."""
    size = file_path.stat().st_size
    if size != config.HGT_FILE_SIZE:
        raise MalformedTileFileError(file_path, size)

    arr = np.fromfile(file_path, dtype=config.HGT_DTYPE)
    return arr.reshape(config.SAMPLES_PER_SIDE, config.SAMPLES_PER_SIDE)


def inspect_tile_file(file_path: Path) -> dict:
    """Load and summarise a single tile.

    ``min``/``max`` ignore void samples and are None when the tile is all void.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(file_path)

    arr = load_tile(file_path)
    valid = arr[arr != config.NODATA_VALUE]

    return {
        "file": file_path.name,
        "min": int(valid.min()) if valid.size else None,
        "max": int(valid.max()) if valid.size else None,
        "nodata_pct": float(np.count_nonzero(arr == config.NODATA_VALUE) / arr.size * 100.0),
        "zero_pct": float(np.count_nonzero(arr == 0) / arr.size * 100.0),
    }


def find_tile_files(data_dir: Path) -> list[Path]:
    """All .hgt files in ``data_dir`` regardless of extension case, sorted by name."""
    return sorted(
        p for p in Path(data_dir).iterdir()
        if p.is_file() and p.suffix.lower() == ".hgt"
    )


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------


def required_tiles(flight_path: Iterable[LatLon]) -> list[TileId]:
    """Distinct tiles touched by the flight path, in first-seen order."""
    seen: dict[TileId, None] = {}
    for point in flight_path:
        seen.setdefault(TileId.from_latlon(point), None)
    return list(seen)


def coverage_report(
    flight_path: Iterable[LatLon],
    data_dir: Path | str | None = None,
    extension: str | None = None,
) -> dict[str, Path | None]:
    """Map each required tile name to its resolved file, or None when missing."""
    report: dict[str, Path | None] = {}
    for tile in required_tiles(flight_path):
        try:
            report[tile.name] = resolve_tile_file(tile, data_dir, extension)
        except TileFileNotFoundError:
            report[tile.name] = None
    return report
