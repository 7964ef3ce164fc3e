"""
Base data models - fundamental types without dependencies.

This module contains basic Pydantic models used throughout the system:
- Placement: signed offset of a smaller image on a larger canvas
- EncodedImage: finished byte stream with its format tag
- MemeRecipe: template name and avatar placement for one meme kind

IMPORTANT: This module must NOT import from core or config
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from common.constants import EncoderConstants
from common.enums import ImageFormat, MemeKind


class Placement(BaseModel):
    """
    Intended top-left corner of an overlay on a canvas.

    Either coordinate may be negative or push the overlay past the canvas edge.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        """Get placement as (x, y) tuple."""
        return (self.x, self.y)


class EncodedImage(BaseModel):
    """Immutable encoded image bytes tagged with their format."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    format: ImageFormat

    @property
    def content_type(self) -> str:
        """MIME type for the encoded stream."""
        if self.format == ImageFormat.GIF:
            return EncoderConstants.GIF_CONTENT_TYPE
        return EncoderConstants.PNG_CONTENT_TYPE

    def __len__(self) -> int:
        return len(self.data)


class MemeRecipe(BaseModel):
    """
    Placement constants for one meme template.

    Coordinates and sizes are expressed for the large template variant;
    the small variant is derived by scaling them down.
    """

    model_config = ConfigDict(frozen=True)

    kind: MemeKind
    template_name: str
    avatar_x: int = Field(..., ge=0, description="Avatar X coordinate on the large template")
    avatar_y: int = Field(..., ge=0, description="Avatar Y coordinate on the large template")
    avatar_size: int = Field(..., gt=0, description="Avatar edge length on the large template")
    threshold: int = Field(..., ge=0, le=255, description="Alpha threshold for stamping")
