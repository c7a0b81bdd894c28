"""
Centralized configuration for terrain-path.
Environment variables and SRTM format constants are defined here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Extension appended to tile names; lookups also try the other-case spelling
HGT_FILE_EXTENSION = os.getenv("HGT_FILE_EXTENSION", ".HGT")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(filename)s:%(lineno)d - %(message)s"

# SRTM-3 tile layout: 1°x1°, 3 arc-second spacing, 1201x1201 int16 samples
ARCSECONDS_PER_DEGREE = 3600
ARCSECONDS_PER_SAMPLE = 3
SAMPLES_PER_SIDE = 1201
BYTES_PER_SAMPLE = 2
HGT_FILE_SIZE = SAMPLES_PER_SIDE * SAMPLES_PER_SIDE * BYTES_PER_SAMPLE
HGT_DTYPE = ">i2"  # big-endian signed 16-bit, independent of host byte order

# Void marker used by SRTM; passed through untouched
NODATA_VALUE = -32768

# Coordinate ranges
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def default_data_dir() -> Path:
    """Directory searched for tile files when the caller does not pass one.

    HGT_DATA_DIR is read on every call; unset means the working directory.
    """
    env_dir = os.getenv("HGT_DATA_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.cwd()
