"""
Image compositing utilities - functional architecture.

This package provides the compositing engine as pure functions over RasterBuffers:
- compositing: Alpha-threshold stamp and source-over blend
- masking: Circular cutout and alpha threshold cleanup
- cropping: Boundary-aware crop and placement
- rotation: Forward rotation with box-blur anti-aliasing
- transforms: Exact resize and horizontal flip
- encoders: PNG and animated GIF output

All utilities are re-exported from this module for convenient access.
"""

# Compositing functions
from core.image.compositing import composite, copy_with_blend, copy_within_alpha_threshold

# Cropping functions
from core.image.cropping import CropResult, fit_within_bounds

# Encoder functions
from core.image.encoders import AnimationSpec, encode_gif, encode_png

# Masking functions
from core.image.masking import apply_alpha_threshold, mask_to_circle

# Rotation functions
from core.image.rotation import rotate

# Transform functions
from core.image.transforms import flip_horizontal, resize_exact

__all__ = [
    # Compositing functions
    "composite",
    "copy_within_alpha_threshold",
    "copy_with_blend",
    # Masking functions
    "mask_to_circle",
    "apply_alpha_threshold",
    # Cropping functions
    "CropResult",
    "fit_within_bounds",
    # Rotation functions
    "rotate",
    # Transform functions
    "resize_exact",
    "flip_horizontal",
    # Encoder functions
    "AnimationSpec",
    "encode_png",
    "encode_gif",
]
