"""Output compositing: matched footprints keep their color, everything else is dimmed."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from sprite_spotter import config


def dim(image: NDArray[np.uint8], divisor: int = config.DIM_DIVISOR) -> NDArray[np.uint8]:
    """Integer-divide RGB by ``divisor``; alpha is preserved."""
    if divisor < 1:
        raise ValueError(f"divisor must be >= 1, got {divisor}")
    dimmed = image.copy()
    dimmed[..., :3] //= divisor
    return dimmed


def composite(
    image: NDArray[np.uint8],
    claimed: NDArray[np.bool_],
    divisor: int = config.DIM_DIVISOR,
) -> NDArray[np.uint8]:
    """
    Build the output canvas.

    Every pixel ends up in exactly one state: claimed pixels carry the source
    color, all others the dimmed source color.
    """
    if claimed.shape != image.shape[:2]:
        raise ValueError(
            f"claimed mask shape {claimed.shape} does not match image {image.shape[:2]}"
        )
    canvas = dim(image, divisor)
    canvas[claimed] = image[claimed]
    return canvas
