"""
Alpha-threshold compositing.

Overlays one raster onto another at a fixed offset:
- Stamp mode: samples above the alpha threshold overwrite the destination,
  the rest are skipped
- Blend mode: samples above the threshold overwrite, the rest are
  source-over blended into the destination
"""

import logging

import numpy as np

from common.constants import CompositorConstants
from common.enums import BlendMode
from core.exceptions import DimensionError
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


def _check_fits(base: RasterBuffer, overlay: RasterBuffer, x: int, y: int) -> None:
    # NumPy slicing clips silently, so bounds are checked before any write
    if x < 0 or y < 0 or base.width < overlay.width + x or base.height < overlay.height + y:
        logger.error(f"Overlay {overlay.size} at ({x}, {y}) does not fit base {base.size}")
        raise DimensionError(base.size, overlay.size, x, y)


def _blend_source_over(background: np.ndarray, foreground: np.ndarray) -> np.ndarray:
    """
    Source-over blend of foreground samples onto background samples.

    Both inputs are (N, 4) uint8 arrays. Fully transparent foreground samples,
    and samples whose resulting alpha is zero, leave the background untouched.

    Returns:
        Blended (N, 4) uint8 array
    """
    max_value = float(CompositorConstants.MAX_CHANNEL_VALUE)
    bg = background.astype(np.float64) / max_value
    fg = foreground.astype(np.float64) / max_value

    bg_a = bg[:, 3:4]
    fg_a = fg[:, 3:4]
    alpha_final = bg_a + fg_a - bg_a * fg_a

    out_premultiplied = fg[:, :3] * fg_a + bg[:, :3] * bg_a * (1.0 - fg_a)
    with np.errstate(divide="ignore", invalid="ignore"):
        out_rgb = np.where(alpha_final > 0, out_premultiplied / alpha_final, 0.0)

    blended = np.empty_like(bg)
    blended[:, :3] = out_rgb
    blended[:, 3:4] = alpha_final
    blended = np.clip(np.trunc(blended * max_value), 0, max_value).astype(np.uint8)

    untouched = (foreground[:, 3] == 0) | (alpha_final[:, 0] == 0)
    blended[untouched] = background[untouched]
    replaced = foreground[:, 3] == CompositorConstants.MAX_CHANNEL_VALUE
    blended[replaced] = foreground[replaced]
    return blended


def composite(
    base: RasterBuffer,
    overlay: RasterBuffer,
    x: int,
    y: int,
    threshold: int = CompositorConstants.DEFAULT_ALPHA_THRESHOLD,
    mode: BlendMode = BlendMode.STAMP,
) -> None:
    """
    Copy an overlay into a base buffer while taking an alpha threshold into account.

    The overlay is placed with its top-left corner at (x, y). Overlay samples
    whose alpha is strictly greater than the threshold overwrite the
    destination, alpha included. What happens to the remaining samples depends
    on the mode.

    Args:
        base: Destination buffer, modified in place
        overlay: Source buffer, read only
        x: Destination x of the overlay's left edge
        y: Destination y of the overlay's top edge
        threshold: Alpha cutoff (0-255)
        mode: STAMP skips below-threshold samples, BLEND source-over blends them

    Raises:
        DimensionError: If the overlay does not fit the base at (x, y)
    """
    _check_fits(base, overlay, x, y)

    if overlay.is_empty:
        return

    region = base.pixels[y : y + overlay.height, x : x + overlay.width]
    source = overlay.pixels
    opaque = source[:, :, CompositorConstants.ALPHA_CHANNEL] > threshold

    if mode == BlendMode.BLEND:
        translucent = ~opaque
        if translucent.any():
            region[translucent] = _blend_source_over(region[translucent], source[translucent])

    region[opaque] = source[opaque]


def copy_within_alpha_threshold(
    base: RasterBuffer, overlay: RasterBuffer, x: int, y: int, threshold: int
) -> None:
    """Stamp an overlay onto a base buffer. See composite()."""
    composite(base, overlay, x, y, threshold, BlendMode.STAMP)


def copy_with_blend(
    base: RasterBuffer, overlay: RasterBuffer, x: int, y: int, threshold: int
) -> None:
    """Stamp opaque overlay samples and blend the rest. See composite()."""
    composite(base, overlay, x, y, threshold, BlendMode.BLEND)
