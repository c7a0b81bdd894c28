"""
Locate a coordinate's sample inside its SRTM-3 tile file.

Samples are 3 arc-seconds apart. Row 0 is the northern edge of the tile and
column 0 the western edge, so the row count runs against latitude.

Indices are rounded with Python's built-in ``round`` (half to even). An exact
half-sample boundary therefore resolves to the even index; this must not be
changed, it decides which of two neighbouring samples is returned.
"""

import math

from . import config
from .coordinates import LatLon


def _arcseconds_into_degree(value: float) -> float:
    return (value - math.floor(value)) * config.ARCSECONDS_PER_DEGREE


def sample_index(point: LatLon) -> tuple[int, int]:
    """Return ``(row, column)`` for ``point``.

    ``row`` is 1-based and counted down from the northern edge (1201 is the
    southern edge); ``column`` is 0-based from the western edge.
    """
    arcsec_lat = _arcseconds_into_degree(point.lat)
    row = config.SAMPLES_PER_SIDE - round(arcsec_lat / config.ARCSECONDS_PER_SAMPLE)

    arcsec_lon = _arcseconds_into_degree(point.lon)
    column = round(arcsec_lon / config.ARCSECONDS_PER_SAMPLE)
    return row, column


def entry_offset(point: LatLon) -> int:
    """Number of bytes between the start of the tile file and the sample."""
    row, column = sample_index(point)
    return ((row - 1) * config.SAMPLES_PER_SIDE + column) * config.BYTES_PER_SAMPLE
