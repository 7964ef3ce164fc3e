"""
Core modules for the meme compositor
"""

from .exceptions import (
    CompositorException,
    DimensionError,
    EncodeError,
    InvalidRasterError,
    UnsupportedMemeKindError,
)
from .raster import RasterBuffer

__all__ = [
    "RasterBuffer",
    "CompositorException",
    "DimensionError",
    "EncodeError",
    "InvalidRasterError",
    "UnsupportedMemeKindError",
]
