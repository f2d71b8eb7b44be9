"""Utility modules for sprite-spotter."""

from sprite_spotter.utils.cv_utils import (
    # Dataclasses
    ImageInfo,
    # Type aliases
    RGBAImage,
    get_image_info,
    # Image I/O
    load_image,
    save_image,
    # Conversion
    to_rgba,
)

__all__ = [
    # Type aliases
    "RGBAImage",
    # Dataclasses
    "ImageInfo",
    # Image I/O
    "load_image",
    "save_image",
    "get_image_info",
    # Conversion
    "to_rgba",
]
