"""RGBA color distance and tolerance comparison."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


def color_distance(
    a: ArrayLike,
    b: ArrayLike,
    out: NDArray[np.int32] | None = None,
) -> NDArray[Any] | int:
    """
    Manhattan distance over the R, G, B and A channels.

    Accepts single colors (4-sequences) or arrays whose last axis is RGBA.
    Channels are widened before subtracting so the result never wraps.

    Args:
        a, b: Colors or color arrays
        out: Optional int32 scratch buffer with the broadcast shape of
            ``a`` and ``b``; receives the per-channel differences
    """
    diff = np.subtract(np.asarray(a, dtype=np.int32), np.asarray(b, dtype=np.int32), out=out)
    np.abs(diff, out=diff)
    total = diff.sum(axis=-1)
    if np.ndim(total) == 0:
        return int(total)
    return total


def is_same(
    a: ArrayLike,
    b: ArrayLike,
    tolerance: int,
    out: NDArray[np.int32] | None = None,
) -> NDArray[np.bool_] | bool:
    """True where the two colors are strictly closer than ``tolerance``."""
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    return color_distance(a, b, out=out) < tolerance
