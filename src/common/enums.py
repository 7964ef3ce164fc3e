"""
Centralized enums for the meme compositor.

This module contains all enumeration types used throughout the system,
providing a single source of truth for enum definitions.
"""

from enum import Enum


# Compositing enums
class BlendMode(str, Enum):
    """How below-threshold overlay samples are treated."""

    STAMP = "stamp"
    BLEND = "blend"


# Encoding enums
class ImageFormat(str, Enum):
    """Encoded output formats."""

    PNG = "png"
    GIF = "gif"


# Meme enums
class MemeKind(str, Enum):
    """Supported meme templates."""

    ENTER = "enter"
    EXIT = "exit"
