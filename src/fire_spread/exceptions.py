"""Exceptions raised by the fire_spread package."""

from typing import Any, Optional


class FireSpreadError(Exception):
    """Base exception for all fire_spread errors.

    Catch this to handle any error raised by the simulation itself.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDimensionError(FireSpreadError, ValueError):
    """Raised when a grid is built with a non-positive width or height,
    or from a state sequence whose length does not match its size."""

    def __init__(
        self,
        width: int,
        height: int,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"Grid dimensions must be positive, got {width}x{height}"
        details = details or {}
        details.update({"width": width, "height": height})
        super().__init__(message=message, details=details)
        self.width = width
        self.height = height


class IndexOutOfRangeError(FireSpreadError, IndexError):
    """Raised when a cell index is outside [0, width * height)."""

    def __init__(self, index: int, size: int, details: Optional[dict[str, Any]] = None):
        message = f"Cell index {index} out of range for grid of {size} cells"
        details = details or {}
        details.update({"index": index, "size": size})
        super().__init__(message=message, details=details)
        self.index = index
        self.size = size
