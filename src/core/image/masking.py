"""
Alpha masking operations.

Clears samples to fully transparent in place:
- Circular cutout (largest inscribed circle)
- Alpha threshold cleanup
"""

import logging

import numpy as np

from common.constants import CompositorConstants
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


def mask_to_circle(img: RasterBuffer) -> None:
    """
    Clear every sample outside the largest circle inscribed in the buffer.

    The radius and centre use floor division: radius = min(width, height) // 2,
    centre = (width // 2, height // 2). A sample at (w, h) is cleared when
    (w - cx)^2 + (h - cy)^2 > radius^2. Offsets are computed as signed
    integers so samples left of or above the centre square correctly.

    Args:
        img: Buffer to mask, modified in place
    """
    if img.is_empty:
        return

    radius_squared = (min(img.width, img.height) // 2) ** 2

    dx = np.arange(img.width, dtype=np.int64) - img.width // 2
    dy = np.arange(img.height, dtype=np.int64) - img.height // 2
    distance_squared = dy[:, np.newaxis] ** 2 + dx[np.newaxis, :] ** 2

    outside = distance_squared > radius_squared
    img.pixels[outside] = CompositorConstants.CLEAR_PIXEL


def apply_alpha_threshold(img: RasterBuffer, threshold: int) -> None:
    """
    Clear every sample whose alpha is strictly below the threshold.

    Args:
        img: Buffer to clean up, modified in place
        threshold: Minimum alpha a sample needs to survive (0-255)
    """
    below = img.pixels[:, :, CompositorConstants.ALPHA_CHANNEL] < threshold
    img.pixels[below] = CompositorConstants.CLEAR_PIXEL
    logger.debug(f"Cleared {int(below.sum())} samples below alpha {threshold}")
