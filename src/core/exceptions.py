"""
Custom exceptions for the meme compositor.
Provides consistent error reporting across the compositing engine.
"""

from typing import Dict, Optional, Tuple


class CompositorException(Exception):
    """Base exception for the meme compositor."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DimensionError(CompositorException):
    """Exception raised when an overlay does not fit the destination at the given offset."""

    def __init__(self, base_size: Tuple[int, int], overlay_size: Tuple[int, int], x: int, y: int):
        super().__init__(
            message=(
                f"Overlay of size {overlay_size[0]}x{overlay_size[1]} at ({x}, {y}) "
                f"does not fit destination of size {base_size[0]}x{base_size[1]}"
            ),
            details={"base_size": base_size, "overlay_size": overlay_size, "x": x, "y": y},
        )


class EncodeError(CompositorException):
    """Exception raised when encoding a buffer or an animation fails."""

    def __init__(self, format: str, reason: str):
        super().__init__(
            message=f"Failed to encode {format}: {reason}",
            details={"format": format, "reason": reason},
        )


class InvalidRasterError(CompositorException):
    """Exception raised when a raster buffer cannot be built from the given data."""

    def __init__(self, reason: str):
        super().__init__(message=f"Invalid raster: {reason}", details={"reason": reason})


class UnsupportedMemeKindError(CompositorException):
    """Exception raised when a meme kind is not one of the supported templates."""

    def __init__(self, kind: str):
        super().__init__(
            message=f"Unsupported meme kind: {kind}",
            details={"kind": kind},
        )
