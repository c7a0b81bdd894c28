"""
Error handling framework for terrain-path.
Provides structured errors, coordinate validation and contextual logging.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Union

from . import config


class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Input validation errors
    INVALID_COORDINATES = "INVALID_COORDINATES"

    # Tile data errors
    TILE_FILE_NOT_FOUND = "TILE_FILE_NOT_FOUND"
    TILE_FILE_MALFORMED = "TILE_FILE_MALFORMED"


class TerrainPathError(Exception):
    """Base exception class for terrain-path errors."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        user_message: str = None,
        details: Dict[str, Any] = None,
        suggestions: list = None,
        cause: Exception = None,
    ):
        self.error_code = error_code
        self.message = message
        self.user_message = user_message or self._get_default_user_message(error_code)
        self.details = details or {}
        self.suggestions = suggestions or []
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

        super().__init__(self.message)

    def _get_default_user_message(self, error_code: ErrorCode) -> str:
        """Get default user-friendly message for error codes."""
        messages = {
            ErrorCode.INVALID_COORDINATES: "The provided coordinates are not valid.",
            ErrorCode.TILE_FILE_NOT_FOUND: "Elevation data is not available for this location.",
            ErrorCode.TILE_FILE_MALFORMED: "An elevation tile file is damaged or not an SRTM-3 tile.",
        }
        return messages.get(error_code, "An error occurred while computing the elevation path.")

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary for structured output."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
            "suggestions": self.suggestions,
            "timestamp": self.timestamp,
        }


class ValidationError(TerrainPathError):
    """Input validation errors."""
    pass


class InvalidCoordinateError(ValidationError):
    """Latitude or longitude outside the valid range."""

    def __init__(self, latitude: float, longitude: float, message: str = None):
        super().__init__(
            ErrorCode.INVALID_COORDINATES,
            message or f"Invalid LatLon value: [lat: {latitude}, lon: {longitude}]",
            details={"latitude": latitude, "longitude": longitude},
            suggestions=[
                "Ensure latitude is between -90 and 90 degrees",
                "Ensure longitude is between -180 and 180 degrees",
            ],
        )


class TileDataError(TerrainPathError):
    """Errors related to tile files on disk."""
    pass


class TileFileNotFoundError(TileDataError):
    """Neither naming convention resolved to an existing tile file."""

    def __init__(self, short_name: str, long_name: str, directory):
        super().__init__(
            ErrorCode.TILE_FILE_NOT_FOUND,
            f"Require a file named either {short_name} or {long_name} "
            f"in directory: {directory}",
            details={
                "attempted": [short_name, long_name],
                "directory": str(directory),
            },
            suggestions=[
                "Download the SRTM-3 tile covering this area",
                "Point HGT_DATA_DIR at the directory holding the tiles",
            ],
        )
        self.attempted = (short_name, long_name)
        self.directory = directory


class MalformedTileFileError(TileDataError):
    """An existing tile file does not have the SRTM-3 layout."""

    def __init__(self, path, actual_size: int, expected_size: int = config.HGT_FILE_SIZE, message: str = None):
        super().__init__(
            ErrorCode.TILE_FILE_MALFORMED,
            message
            or f"The file with name {path} does not contain the required "
            f"{expected_size} bytes (found {actual_size}).",
            details={
                "file": str(path),
                "expected_size": expected_size,
                "actual_size": actual_size,
            },
        )
        self.path = path
        self.expected_size = expected_size
        self.actual_size = actual_size


class ErrorHandler:
    """Centralized error logging."""

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)

    def log_error(
        self,
        error: Union[TerrainPathError, Exception],
        extra_context: Dict[str, Any] = None,
    ) -> None:
        """Log error with structured context."""

        context = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        if isinstance(error, TerrainPathError):
            context.update({
                "error_code": error.error_code.value,
                "user_message": error.user_message,
                "details": error.details,
            })

        if extra_context:
            context.update(extra_context)

        # Log with appropriate level
        if isinstance(error, TerrainPathError):
            if error.error_code == ErrorCode.TILE_FILE_MALFORMED:
                self.logger.error(f"terrain-path error: {error}", extra={"context": context}, exc_info=error.cause)
            else:
                self.logger.warning(f"terrain-path error: {error}", extra={"context": context})
        else:
            self.logger.error(f"Unhandled error: {error}", extra={"context": context}, exc_info=error)


# Global error handler instance
error_handler = ErrorHandler()


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Validate geographic coordinates."""
    if not (config.MIN_LATITUDE <= latitude <= config.MAX_LATITUDE):
        raise InvalidCoordinateError(
            latitude,
            longitude,
            f"Latitude {latitude} is out of valid range (-90 to 90)",
        )

    if not (config.MIN_LONGITUDE <= longitude <= config.MAX_LONGITUDE):
        raise InvalidCoordinateError(
            latitude,
            longitude,
            f"Longitude {longitude} is out of valid range (-180 to 180)",
        )
