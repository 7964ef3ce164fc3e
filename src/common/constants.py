"""
Constants and configuration values for the meme compositor.
Centralizes all magic numbers and configuration constants.
"""


# Compositing Constants
class CompositorConstants:
    """Constants related to alpha compositing."""

    # Alpha channel
    ALPHA_CHANNEL = 3
    MAX_CHANNEL_VALUE = 255
    DEFAULT_ALPHA_THRESHOLD = 128

    # Fully transparent sample written by masking operations
    CLEAR_PIXEL = (0, 0, 0, 0)


# Rotation Constants
class RotationConstants:
    """Constants related to the forward rotation filter."""

    # Anti-aliasing box blur
    KERNEL_SIZE = 3
    KERNEL_DIVISOR = 9.0
    OUTPUT_ALPHA = 255

    FULL_TURN_DEGREES = 360


# Encoder Constants
class EncoderConstants:
    """Constants related to PNG and GIF encoding."""

    # PNG (OpenCV compression level, 0-9)
    DEFAULT_PNG_COMPRESSION = 3
    MIN_PNG_COMPRESSION = 0
    MAX_PNG_COMPRESSION = 9

    # GIF
    DEFAULT_FRAME_DELAY_MS = 50
    MAX_FRAME_DELAY_MS = 655350  # GIF stores delays as 16-bit centiseconds

    # Content types
    PNG_CONTENT_TYPE = "image/png"
    GIF_CONTENT_TYPE = "image/gif"


# Meme Template Constants
class MemeConstants:
    """Constants related to meme templates and avatar placement."""

    # Template variants
    LARGE_TEMPLATE_SIZE = 1000
    SMALL_TEMPLATE_SIZE = 250
    SMALL_SCALE_DIVISOR = 4

    # Avatar placement (large variant coordinates)
    DOOR_AVATAR_X = 35
    DOOR_AVATAR_Y = 397
    DOOR_AVATAR_SIZE = 603
    DOOR_ALPHA_THRESHOLD = 128


# System Constants
class SystemConstants:
    """System-wide constants."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    VALID_ENVIRONMENTS = ["development", "staging", "production", "test"]
