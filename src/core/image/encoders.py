"""
Encoders turning finished rasters into byte streams.

- PNG through OpenCV
- Animated GIF through Pillow, with frames produced by a caller-supplied
  generator
"""

import copy
import io
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import cv2
import numpy as np
from PIL import Image

from common.base import EncodedImage
from common.constants import EncoderConstants
from common.enums import ImageFormat
from core.exceptions import EncodeError
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)

FrameGenerator = Callable[[int, Any, Any], RasterBuffer]


@dataclass(frozen=True)
class AnimationSpec:
    """
    Description of an animated GIF.

    The generator is called once per frame index with deep copies of the two
    ingredients and must return the frame as a RasterBuffer.

    loop_count: None loops forever, 0 plays once, n repeats n times.
    """

    generator: FrameGenerator
    frame_count: int
    overlayed: Any = None
    overlaying: Any = None
    frame_delay_ms: int = EncoderConstants.DEFAULT_FRAME_DELAY_MS
    loop_count: Optional[int] = None


def encode_png(
    img: RasterBuffer, compression: int = EncoderConstants.DEFAULT_PNG_COMPRESSION
) -> EncodedImage:
    """
    Encode a buffer as a single PNG stream.

    Args:
        img: Buffer to encode
        compression: zlib compression level (0-9)

    Returns:
        EncodedImage tagged as PNG

    Raises:
        EncodeError: If the codec rejects the buffer
    """
    min_level = EncoderConstants.MIN_PNG_COMPRESSION
    max_level = EncoderConstants.MAX_PNG_COMPRESSION
    if not min_level <= compression <= max_level:
        raise EncodeError("PNG", f"compression level {compression} outside 0-9")
    if img.is_empty:
        raise EncodeError("PNG", f"cannot encode empty buffer {img.size}")

    try:
        # OpenCV expects BGRA channel order
        bgra = cv2.cvtColor(img.pixels, cv2.COLOR_RGBA2BGRA)
        success, buffer = cv2.imencode(".png", bgra, [cv2.IMWRITE_PNG_COMPRESSION, compression])
    except cv2.error as e:
        logger.error(f"Failed to encode PNG: {e}")
        raise EncodeError("PNG", str(e)) from e

    if not success:
        logger.error(f"Failed to encode PNG for buffer {img.size}")
        raise EncodeError("PNG", "encoder reported failure")

    return EncodedImage(data=buffer.tobytes(), format=ImageFormat.PNG)


def _render_frames(spec: AnimationSpec) -> List[RasterBuffer]:
    frames = []
    for index in range(spec.frame_count):
        try:
            frame = spec.generator(
                index, copy.deepcopy(spec.overlayed), copy.deepcopy(spec.overlaying)
            )
        except Exception as e:
            logger.error(f"Frame generator failed at frame {index}: {e}")
            raise EncodeError("GIF", f"frame {index} generator failed: {e}") from e

        if not isinstance(frame, RasterBuffer):
            raise EncodeError(
                "GIF", f"frame {index} generator returned {type(frame).__name__}, not a raster"
            )
        if frame.is_empty:
            raise EncodeError("GIF", f"frame {index} is empty")

        frames.append(frame)
    return frames


def _count_repeated_frames(frames: List[RasterBuffer]) -> int:
    return sum(1 for previous, frame in zip(frames, frames[1:]) if previous == frame)


def encode_gif(spec: AnimationSpec) -> EncodedImage:
    """
    Build every frame of an animation and encode them as one GIF stream.

    Frames are produced in index order and written with the same delay. A
    frame identical to the one before it is not stored again: Pillow extends
    the previous frame's delay instead, so playback timing is unchanged but
    the stream holds fewer frames than the generator produced. The stream is
    only returned once every frame has been encoded; on failure nothing is
    returned.

    Args:
        spec: Animation description

    Returns:
        EncodedImage tagged as GIF

    Raises:
        EncodeError: If a frame cannot be generated or the codec rejects it
    """
    if spec.frame_count <= 0:
        raise EncodeError("GIF", f"animation needs at least one frame, got {spec.frame_count}")
    if not 0 <= spec.frame_delay_ms <= EncoderConstants.MAX_FRAME_DELAY_MS:
        raise EncodeError("GIF", f"frame delay {spec.frame_delay_ms}ms out of range")
    if spec.loop_count is not None and spec.loop_count < 0:
        raise EncodeError("GIF", f"loop count {spec.loop_count} is negative")

    frames = _render_frames(spec)
    logger.debug(f"Encoding {len(frames)} GIF frames at {spec.frame_delay_ms}ms")
    repeated = _count_repeated_frames(frames)
    if repeated:
        logger.debug(f"{repeated} GIF frames repeat the previous frame and extend its delay")
    images = [Image.fromarray(np.ascontiguousarray(frame.pixels)) for frame in frames]

    options = {
        "save_all": True,
        "append_images": images[1:],
        "duration": spec.frame_delay_ms,
        "disposal": 2,
    }
    if spec.loop_count is None:
        options["loop"] = 0
    elif spec.loop_count > 0:
        options["loop"] = spec.loop_count

    buffer = io.BytesIO()
    try:
        images[0].save(buffer, "gif", **options)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to encode GIF: {e}")
        raise EncodeError("GIF", str(e)) from e

    return EncodedImage(data=buffer.getvalue(), format=ImageFormat.GIF)
