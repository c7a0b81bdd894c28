"""
Read individual elevation samples out of an SRTM-3 .hgt file.

The file is opened once per call and each sample is fetched with a seek and
a two byte read, so callers can ask for points in any order.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

import numpy as np

from . import config
from .coordinates import LatLon
from .error_handling import MalformedTileFileError
from .offsets import entry_offset

logger = logging.getLogger(__name__)


def decode_sample(entry: bytes) -> int:
    """Decode one big-endian int16 sample, whatever the host byte order."""
    return int(np.frombuffer(entry, dtype=config.HGT_DTYPE, count=1)[0])


def read_elevations(file_path: Path | str, points: Iterable[LatLon]) -> list[int]:
    """Return the elevation in meters of each point, in the order given.

    All points must lie in the tile stored at ``file_path``.

    Raises:
        MalformedTileFileError: the file is not exactly ``HGT_FILE_SIZE`` bytes
            or ends before a requested sample.
    """
    file_path = Path(file_path)
    elevations: list[int] = []

    with open(file_path, "rb") as fh:
        size = os.fstat(fh.fileno()).st_size
        if size != config.HGT_FILE_SIZE:
            raise MalformedTileFileError(file_path, size)

        for point in points:
            offset = entry_offset(point)
            fh.seek(offset)
            entry = fh.read(config.BYTES_PER_SAMPLE)
            if len(entry) != config.BYTES_PER_SAMPLE:
                # File shrank after the size check
                raise MalformedTileFileError(
                    file_path,
                    offset + len(entry),
                    message=f"Short read at offset {offset} in {file_path}",
                )
            elevations.append(decode_sample(entry))

    logger.debug(f"Read {len(elevations)} samples from {file_path.name}")
    return elevations
