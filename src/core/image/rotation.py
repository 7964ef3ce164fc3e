"""
Forward-mapped rotation with a box-blur anti-alias pass.

This rotation is deliberately basic: every source pixel is scattered to its
rotated position, which leaves gaps and double writes that the 3x3 box blur
smooths over. It only works properly for buffers whose width and height
are (nearly) equal.
"""

import logging

import numpy as np

from common.constants import RotationConstants
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)

_NEIGHBOUR_OFFSETS = (-1, 0, 1)


def _scatter(img: RasterBuffer, degrees: int) -> np.ndarray:
    """
    Scatter every source pixel to its counter-clockwise rotated position.

    Destination coordinates are truncated toward zero, negative values
    saturate to 0 and values past the far edge clamp to the last row/column.
    Sources are visited column by column; a later write to the same
    destination wins.

    Returns:
        Scattered (height, width, 4) uint8 array, unwritten samples zeroed
    """
    width, height = img.size
    radians = degrees * np.pi / 180.0
    radius = width / 2.0
    cos, sin = np.cos(radians), np.sin(radians)

    # indexing="ij" makes ravel() walk x in the outer loop, y in the inner loop
    xs, ys = np.meshgrid(
        np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64), indexing="ij"
    )
    xs, ys = xs.ravel(), ys.ravel()

    x_new = (xs - radius) * cos - (ys - radius) * sin + radius
    y_new = (xs - radius) * sin + (ys - radius) * cos + radius

    x_dest = np.clip(np.trunc(x_new), 0, width - 1).astype(np.intp)
    y_dest = np.clip(np.trunc(y_new), 0, height - 1).astype(np.intp)

    scattered = np.zeros_like(img.pixels)
    scattered[y_dest, x_dest] = img.pixels[ys.astype(np.intp), xs.astype(np.intp)]
    return scattered


def _kernel_weight() -> float:
    # Accumulated the same way the blur accumulates samples, so it comes out
    # slightly above 1.0
    weight = 1.0 / RotationConstants.KERNEL_DIVISOR
    total = 0.0
    for _ in range(RotationConstants.KERNEL_SIZE * RotationConstants.KERNEL_SIZE):
        total += weight
    return total


def _box_blur(pixels: np.ndarray, normalize_edges: bool) -> np.ndarray:
    """
    Unweighted 3x3 average of the RGB channels, written back in place.

    Pixels are visited column by column (x outer, y inner) and every result
    is stored before the next pixel is read, so each pixel averages the
    already blurred neighbours on its left and above it. Each in-range
    neighbour contributes a ninth of its value and the sum is divided by the
    accumulated kernel weight, then truncated. Out-of-range neighbours
    contribute nothing, which darkens edge and corner pixels. With
    normalize_edges the plain neighbour sum is divided by the in-range count
    instead. Alpha is forced opaque.

    Pixels on one line 2x + y = t never read each other, and every neighbour
    they read on an earlier line is already final in that visiting order, so
    each line is blurred in a single vectorised step.
    """
    height, width = pixels.shape[:2]
    blurred = pixels.copy()
    weight = 1.0 / RotationConstants.KERNEL_DIVISOR
    kernel_weight = _kernel_weight()

    for line in range(2 * (width - 1) + height):
        xs = np.arange(max(0, (line - height + 2) // 2), min(width - 1, line // 2) + 1)
        ys = line - 2 * xs

        total = np.zeros((xs.size, 3))
        count = np.zeros((xs.size, 1))
        for dx in _NEIGHBOUR_OFFSETS:
            for dy in _NEIGHBOUR_OFFSETS:
                nx, ny = xs + dx, ys + dy
                inside = ((nx >= 0) & (nx < width) & (ny >= 0) & (ny < height))[:, np.newaxis]
                samples = blurred[np.clip(ny, 0, height - 1), np.clip(nx, 0, width - 1), :3]
                if normalize_edges:
                    total += np.where(inside, samples, 0.0)
                    count += inside
                else:
                    total += np.where(inside, samples * weight, 0.0)

        averaged = total / count if normalize_edges else total / kernel_weight
        blurred[ys, xs, :3] = np.clip(np.trunc(averaged), 0, 255).astype(np.uint8)

    blurred[:, :, 3] = RotationConstants.OUTPUT_ALPHA
    return blurred


def rotate(img: RasterBuffer, degrees: int, normalize_edges: bool = False) -> RasterBuffer:
    """
    Rotate a buffer counter-clockwise around its centre.

    The angle is reduced to [0, 360) first, so whole turns give exactly the
    same result as 0 degrees.

    Args:
        img: Square-ish buffer to rotate
        degrees: Rotation angle in degrees, counter-clockwise positive
        normalize_edges: Divide the anti-alias sum by the number of in-range
            neighbours instead of the full kernel (changes edge and corner output)

    Returns:
        New RasterBuffer of the same size, fully opaque
    """
    if img.is_empty:
        return img.copy()

    if img.width != img.height:
        logger.warning(f"Rotating non-square buffer {img.size}, output may be cropped or distorted")

    degrees = degrees % RotationConstants.FULL_TURN_DEGREES
    scattered = _scatter(img, degrees)
    return RasterBuffer(_box_blur(scattered, normalize_edges))
