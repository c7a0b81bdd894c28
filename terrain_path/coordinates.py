"""Geographic points and the 1° tiles they fall in."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .error_handling import validate_coordinates


@dataclass(frozen=True)
class LatLon:
    """A point on the surface of the earth, validated on construction."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        validate_coordinates(self.lat, self.lon)


@dataclass(frozen=True)
class TileId:
    """A 1-degree SRTM tile, referenced by its SW corner."""

    lat: int
    lon: int  # signed (west negative)

    @classmethod
    def from_latlon(cls, point: LatLon) -> TileId:
        # Tiles are named by the integer-degree of their SW corner.
        # There is no tile 90 or 180; those edges belong to 89 and 179.
        lat = 89 if point.lat == 90.0 else math.floor(point.lat)
        lon = 179 if point.lon == 180.0 else math.floor(point.lon)
        return cls(lat=lat, lon=lon)

    @property
    def name(self) -> str:
        """Skadi style base name, e.g. N48W124."""
        lat_letter = "N" if self.lat >= 0 else "S"
        lon_letter = "E" if self.lon >= 0 else "W"
        return f"{lat_letter}{abs(self.lat):02d}{lon_letter}{abs(self.lon):03d}"
