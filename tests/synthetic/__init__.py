"""Synthetic sprite images with known ground truth.

Usage:
    from tests.synthetic import blank_image, render_sprite, write_png
"""

from .renderer import (
    BACKGROUND_COLOR,
    BODY_COLOR,
    VISOR_COLOR,
    blank_image,
    render_sprite,
    write_png,
)

__all__ = [
    "BACKGROUND_COLOR",
    "BODY_COLOR",
    "VISOR_COLOR",
    "blank_image",
    "render_sprite",
    "write_png",
]
