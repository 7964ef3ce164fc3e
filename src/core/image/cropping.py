"""
Boundary-aware cropping.

Simplifies overlaying an image with varying position and size onto a fixed
canvas: the part of the image that would land outside the canvas is cropped
away and the placement is adjusted to stay non-negative.
"""

import logging
from typing import NamedTuple, Tuple

from common.base import Placement
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


class CropResult(NamedTuple):
    """Cropped image and the offset to place it at."""

    image: RasterBuffer
    x: int
    y: int


def _fit_axis(position: int, size: int, limit: int) -> Tuple[int, int, int]:
    """
    Resolve one axis of a placement against a canvas edge.

    Args:
        position: Signed placement of the image's leading edge
        size: Image extent on this axis
        limit: Canvas extent on this axis

    Returns:
        Tuple of (crop start within the image, kept length, adjusted placement)
    """
    placed_at = min(max(position, 0), limit)
    crop_start = min(max(-position, 0), size)
    far_edge = min(position + size, limit)
    length = max(far_edge - placed_at, 0)
    return crop_start, length, placed_at


def fit_within_bounds(
    img: RasterBuffer, placement: Placement, max_width: int, max_height: int
) -> CropResult:
    """
    Crop an image so it lies entirely within [0, max_width) x [0, max_height).

    Each axis is handled independently:
    - far edge past the canvas: the trailing edge is cropped to reach the
      boundary exactly, the placement keeps its (non-negative) value
    - negative placement: the leading |placement| pixels are cropped and the
      placement becomes 0
    - otherwise the axis is left untouched

    An axis that falls entirely outside the canvas yields a zero-size image
    rather than an error.

    Args:
        img: Image to place
        placement: Intended top-left corner, may be negative
        max_width: Canvas width
        max_height: Canvas height

    Returns:
        CropResult with the cropped image and adjusted (x, y)
    """
    crop_x, new_width, x_pos = _fit_axis(placement.x, img.width, max_width)
    crop_y, new_height, y_pos = _fit_axis(placement.y, img.height, max_height)

    if new_width == 0 or new_height == 0:
        logger.debug(
            f"Image {img.size} at {placement.as_tuple()} lies outside "
            f"{max_width}x{max_height} canvas, clipped to empty"
        )

    if (crop_x, crop_y, new_width, new_height) == (0, 0, img.width, img.height):
        image = img
    else:
        image = img.crop(crop_x, crop_y, new_width, new_height)

    logger.debug(
        f"Fitted image {img.size} at {placement.as_tuple()} to {image.size} at ({x_pos}, {y_pos})"
    )
    return CropResult(image, x_pos, y_pos)
