"""
RGBA raster buffer shared by every compositing operation.

A RasterBuffer owns a contiguous uint8 NumPy array of shape (height, width, 4)
in RGBA channel order. Operations that keep the dimensions mutate the buffer
in place; operations that change them (crop, resize, flip) return a new buffer.
"""

from typing import Sequence, Tuple

import numpy as np

from common.constants import CompositorConstants
from core.exceptions import InvalidRasterError


CHANNELS = 4


class RasterBuffer:
    """Width x height grid of 8-bit RGBA samples."""

    def __init__(self, pixels: np.ndarray):
        if not isinstance(pixels, np.ndarray):
            raise InvalidRasterError(f"expected numpy array, got {type(pixels).__name__}")
        if pixels.dtype != np.uint8:
            raise InvalidRasterError(f"expected uint8 samples, got {pixels.dtype}")
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise InvalidRasterError(f"expected shape (height, width, 4), got {pixels.shape}")
        self.pixels = np.ascontiguousarray(pixels)

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        fill: Sequence[int] = CompositorConstants.CLEAR_PIXEL,
    ) -> "RasterBuffer":
        """
        Allocate a buffer filled with a single RGBA value.

        Args:
            width: Buffer width in pixels
            height: Buffer height in pixels
            fill: RGBA sample used for every pixel

        Returns:
            New RasterBuffer

        Raises:
            InvalidRasterError: If a dimension is negative or fill is not RGBA
        """
        if width < 0 or height < 0:
            raise InvalidRasterError(f"negative dimensions {width}x{height}")
        if len(fill) != CHANNELS:
            raise InvalidRasterError(f"fill must have 4 channels, got {len(fill)}")
        pixels = np.empty((height, width, CHANNELS), dtype=np.uint8)
        pixels[:, :] = fill
        return cls(pixels)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RasterBuffer":
        """Create a buffer holding a copy of an existing (height, width, 4) array."""
        return cls(np.array(array, copy=True))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """Get dimensions as (width, height) tuple."""
        return (self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """True when either dimension is zero."""
        return self.width == 0 or self.height == 0

    def copy(self) -> "RasterBuffer":
        return RasterBuffer(self.pixels.copy())

    def crop(self, x: int, y: int, width: int, height: int) -> "RasterBuffer":
        """
        Copy a rectangular region into a new buffer.

        Args:
            x: Left edge of the region
            y: Top edge of the region
            width: Region width (may be zero)
            height: Region height (may be zero)

        Returns:
            New RasterBuffer holding the region

        Raises:
            InvalidRasterError: If the region is not inside the buffer
        """
        if x < 0 or y < 0 or width < 0 or height < 0:
            raise InvalidRasterError(f"negative crop region ({x}, {y}, {width}, {height})")
        if x + width > self.width or y + height > self.height:
            raise InvalidRasterError(
                f"crop region ({x}, {y}, {width}, {height}) exceeds "
                f"buffer of size {self.width}x{self.height}"
            )
        return RasterBuffer(self.pixels[y : y + height, x : x + width].copy())

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def put_pixel(self, x: int, y: int, rgba: Sequence[int]) -> None:
        self.pixels[y, x] = rgba

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and bool(
            np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"RasterBuffer(width={self.width}, height={self.height})"
