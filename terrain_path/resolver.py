"""
Map a tile to the .hgt file holding it.

Tile sets come in two naming conventions: N48W124.HGT (two latitude digits)
and N048W124.HGT (three latitude digits). The short name is tried first.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import config
from .coordinates import TileId
from .error_handling import TileFileNotFoundError

logger = logging.getLogger(__name__)


def hgt_file_name(tile: TileId, extension: str | None = None) -> str:
    """Seven character tile name plus extension, e.g. N48W124.HGT."""
    if extension is None:
        extension = config.HGT_FILE_EXTENSION
    return f"{tile.name}{extension}"


def extended_file_name(file_name: str) -> str:
    """Widen the latitude field to three digits: N48W124.HGT -> N048W124.HGT."""
    return f"{file_name[:1]}0{file_name[1:]}"


def _case_variants(file_name: str, extension: str) -> list[str]:
    # Configured spelling first, then the other-case extension.
    stem = file_name[: len(file_name) - len(extension)]
    variants = [file_name]
    for ext in (extension.upper(), extension.lower()):
        candidate = f"{stem}{ext}"
        if candidate not in variants:
            variants.append(candidate)
    return variants


def _find_existing(directory: Path, file_name: str, extension: str) -> Path | None:
    for candidate in _case_variants(file_name, extension):
        path = directory / candidate
        if path.is_file():
            return path
    return None


def resolve_tile_file(
    tile: TileId,
    data_dir: Path | str | None = None,
    extension: str | None = None,
) -> Path:
    """Return the path of an existing tile file for ``tile``.

    Raises:
        TileFileNotFoundError: neither naming convention matches a file in
            ``data_dir`` (defaults to the configured data directory).
    """
    directory = Path(data_dir) if data_dir is not None else config.default_data_dir()
    if extension is None:
        extension = config.HGT_FILE_EXTENSION

    short_name = hgt_file_name(tile, extension)
    path = _find_existing(directory, short_name, extension)
    if path is not None:
        logger.debug(f"Tile {tile.name} resolved to {path}")
        return path

    long_name = extended_file_name(short_name)
    path = _find_existing(directory, long_name, extension)
    if path is not None:
        logger.debug(f"Tile {tile.name} resolved to {path} (3-digit latitude name)")
        return path

    raise TileFileNotFoundError(short_name, long_name, directory.resolve())
