"""
Types package - fundamental types without project dependencies.

This package contains basic types that are used throughout the system:
- Enums (BlendMode, ImageFormat, MemeKind)
- Constants (CompositorConstants, EncoderConstants, etc.)
- Base models (Placement, EncodedImage, MemeRecipe)

IMPORTANT: This package must NOT import from core or config
to avoid circular dependencies.
"""

# Export base models
from common.base import EncodedImage, MemeRecipe, Placement

# Export all constants
from common.constants import (
    CompositorConstants,
    EncoderConstants,
    MemeConstants,
    RotationConstants,
    SystemConstants,
)

# Export all enums
from common.enums import BlendMode, ImageFormat, MemeKind

__all__ = [
    # Base models
    "Placement",
    "EncodedImage",
    "MemeRecipe",
    # Constants
    "CompositorConstants",
    "EncoderConstants",
    "MemeConstants",
    "RotationConstants",
    "SystemConstants",
    # Enums
    "BlendMode",
    "ImageFormat",
    "MemeKind",
]
