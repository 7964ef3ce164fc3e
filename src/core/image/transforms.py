"""
Dimension-changing raster operations.

Handles image manipulation tasks using OpenCV:
- Exact resizing
- Horizontal flipping
"""

import logging

import cv2
import numpy as np

from core.exceptions import InvalidRasterError
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


def resize_exact(img: RasterBuffer, width: int, height: int) -> RasterBuffer:
    """
    Resize to exact dimensions, ignoring aspect ratio.

    Shrinking averages every covered source pixel (area interpolation), so
    fine detail is filtered rather than skipped. Enlarging, or enlarging one
    axis while shrinking the other, uses bilinear interpolation.

    Args:
        img: Source buffer
        width: Target width in pixels
        height: Target height in pixels

    Returns:
        New RasterBuffer of the requested size

    Raises:
        InvalidRasterError: If the source is empty or the target size is not positive
    """
    if width <= 0 or height <= 0:
        raise InvalidRasterError(f"cannot resize to {width}x{height}")
    if img.is_empty:
        raise InvalidRasterError("cannot resize an empty buffer")

    if img.size == (width, height):
        return img.copy()

    shrinking = width <= img.width and height <= img.height
    interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR

    resized = cv2.resize(img.pixels, (width, height), interpolation=interpolation)
    logger.debug(f"Resized {img.size} to {width}x{height} ({'area' if shrinking else 'linear'})")
    return RasterBuffer(np.ascontiguousarray(resized, dtype=np.uint8))


def flip_horizontal(img: RasterBuffer) -> RasterBuffer:
    """Mirror a buffer left to right into a new buffer."""
    return RasterBuffer(img.pixels[:, ::-1].copy())
