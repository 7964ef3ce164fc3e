"""
Meme recipes - avatar-on-template compositions.

Each supported MemeKind has one recipe holding its template asset name and
the avatar placement on the large (1000px) template. The small (250px)
template uses the same recipe scaled down by 4.

Resolving the template name to decoded pixels is the caller's job; this
module only consumes RasterBuffers.
"""

import logging
from typing import Dict, Optional, Tuple, Union

from common.base import EncodedImage, MemeRecipe
from common.constants import MemeConstants
from common.enums import MemeKind
from config import Settings, get_settings
from core.exceptions import UnsupportedMemeKindError
from core.image.compositing import copy_within_alpha_threshold
from core.image.encoders import encode_png
from core.image.masking import mask_to_circle
from core.image.transforms import flip_horizontal, resize_exact
from core.raster import RasterBuffer
from core.utils import timer

logger = logging.getLogger(__name__)

RECIPES: Dict[MemeKind, MemeRecipe] = {
    MemeKind.ENTER: MemeRecipe(
        kind=MemeKind.ENTER,
        template_name="enter.png",
        avatar_x=MemeConstants.DOOR_AVATAR_X,
        avatar_y=MemeConstants.DOOR_AVATAR_Y,
        avatar_size=MemeConstants.DOOR_AVATAR_SIZE,
        threshold=MemeConstants.DOOR_ALPHA_THRESHOLD,
    ),
    MemeKind.EXIT: MemeRecipe(
        kind=MemeKind.EXIT,
        template_name="exit.png",
        avatar_x=MemeConstants.DOOR_AVATAR_X,
        avatar_y=MemeConstants.DOOR_AVATAR_Y,
        avatar_size=MemeConstants.DOOR_AVATAR_SIZE,
        threshold=MemeConstants.DOOR_ALPHA_THRESHOLD,
    ),
}


def parse_meme_kind(key: str) -> MemeKind:
    """
    Convert a string key into a MemeKind.

    Raises:
        UnsupportedMemeKindError: If the key names no supported meme
    """
    try:
        return MemeKind(key)
    except ValueError:
        logger.warning(f"Requested unsupported meme kind: {key!r}")
        raise UnsupportedMemeKindError(key) from None


def recipe_for(kind: Union[MemeKind, str]) -> MemeRecipe:
    """Look up the recipe for a meme kind or its string key."""
    if not isinstance(kind, MemeKind):
        kind = parse_meme_kind(kind)
    return RECIPES[kind]


def smallify(value: int, large: bool) -> int:
    """If the large option is false, divide the given number by 4."""
    if large:
        return value
    return value // MemeConstants.SMALL_SCALE_DIVISOR


def template_size(large: bool) -> int:
    """Edge length of the large or small template variant."""
    if large:
        return MemeConstants.LARGE_TEMPLATE_SIZE
    return MemeConstants.SMALL_TEMPLATE_SIZE


def scaled_placement(recipe: MemeRecipe, large: bool) -> Tuple[int, int, int]:
    """
    Avatar placement for the chosen template variant.

    Returns:
        Tuple of (x, y, avatar edge length)
    """
    return (
        smallify(recipe.avatar_x, large),
        smallify(recipe.avatar_y, large),
        smallify(recipe.avatar_size, large),
    )


def render_meme(
    kind: Union[MemeKind, str],
    avatar: RasterBuffer,
    template: RasterBuffer,
    large: bool = False,
    flip: bool = False,
    settings: Optional[Settings] = None,
) -> EncodedImage:
    """
    Compose a round avatar onto a meme template and encode it as PNG.

    Args:
        kind: Meme kind or its string key
        avatar: Decoded avatar, any size
        template: Decoded template for the chosen variant, left unmodified
        large: Use large-variant coordinates instead of small ones
        flip: Mirror the avatar horizontally first
        settings: Render settings (defaults to the cached application settings)

    Returns:
        PNG EncodedImage

    Raises:
        UnsupportedMemeKindError: If the kind is unknown
        DimensionError: If the template is too small for the placement
        EncodeError: If PNG encoding fails
    """
    settings = settings or get_settings()
    recipe = recipe_for(kind)
    x, y, size = scaled_placement(recipe, large)

    expected = template_size(large)
    if template.size != (expected, expected):
        logger.warning(
            f"Template for {recipe.kind.value} is {template.size}, expected {expected}x{expected}"
        )

    with timer() as t:
        if flip:
            avatar = flip_horizontal(avatar)

        avatar = resize_exact(avatar, size, size)
        mask_to_circle(avatar)

        canvas = template.copy()
        copy_within_alpha_threshold(canvas, avatar, x, y, recipe.threshold)
        encoded = encode_png(canvas, compression=settings.render.png_compression)

    variant = "large" if large else "small"
    logger.info(f"Rendered {recipe.kind.value} meme ({variant}) in {t['ms']}ms")
    return encoded
