"""
OpenCV helpers for the PNG boundary.

Images cross this boundary as (H, W, 4) uint8 RGBA arrays. All functions
follow the Result | ProcessingError pattern for error handling.
"""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

import cv2
import numpy as np
from numpy.typing import NDArray

from sprite_spotter import config
from sprite_spotter.models import ProcessingError, ProcessingStage

# =============================================================================
# TYPE ALIASES
# =============================================================================

RGBAImage: TypeAlias = NDArray[np.uint8]  # (H, W, 4), channel order R, G, B, A


# =============================================================================
# RESULT DATACLASSES
# =============================================================================


@dataclass(frozen=True)
class ImageInfo:
    """Information about a decoded image."""

    height: int
    width: int
    channels: int
    has_alpha: bool


# =============================================================================
# CONVERSION
# =============================================================================


def _to_uint8(img: NDArray[Any]) -> NDArray[np.uint8]:
    if img.dtype == np.uint8:
        return img
    if img.dtype == np.uint16:
        # Keep the high byte, as 16-bit PNG samples are scaled to 8 bits
        return (img >> 8).astype(np.uint8)
    raise ValueError(f"unsupported sample type {img.dtype}")


def to_rgba(img: NDArray[Any]) -> RGBAImage:
    """
    Convert a cv2-decoded array (gray, gray+alpha, BGR or BGRA) to RGBA uint8.

    Raises ValueError for layouts that cannot be interpreted.
    """
    img = _to_uint8(img)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.ndim != 3:
        raise ValueError(f"unsupported image shape {img.shape}")

    channels = img.shape[2]
    if channels == 1:
        return cv2.cvtColor(img[:, :, 0], cv2.COLOR_GRAY2RGBA)
    if channels == 2:
        # Gray + alpha
        rgba = cv2.cvtColor(np.ascontiguousarray(img[:, :, 0]), cv2.COLOR_GRAY2RGBA)
        rgba[:, :, 3] = img[:, :, 1]
        return rgba
    if channels == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    raise ValueError(f"unsupported channel count {channels}")


# =============================================================================
# IMAGE I/O
# =============================================================================


def load_image(
    path: str | Path,
    stage: ProcessingStage = ProcessingStage.DECODE,
) -> RGBAImage | ProcessingError:
    """
    Read and decode an image into RGBA.

    Args:
        path: Path to image file
        stage: Processing stage for error reporting

    Returns:
        RGBA image array, or ProcessingError with error_type
        "input_unreadable" (cannot read the file) or "decode_failure"
        (bytes are not a decodable image)
    """
    path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        return ProcessingError(
            stage=ProcessingStage.INPUT,
            error_type="input_unreadable",
            recoverable=False,
            message=f"Failed to read file {path}: {e}",
            details={"path": str(path), "error": str(e)},
        )

    buffer = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED) if buffer.size else None
    if img is None:
        return ProcessingError(
            stage=stage,
            error_type="decode_failure",
            recoverable=False,
            message=f"Failed to decode image: {path}",
            details={"path": str(path)},
        )

    try:
        return to_rgba(img)
    except (ValueError, cv2.error) as e:
        return ProcessingError(
            stage=stage,
            error_type="decode_failure",
            recoverable=False,
            message=f"Unsupported image layout in {path}: {e}",
            details={"path": str(path), "shape": list(img.shape), "dtype": str(img.dtype)},
        )


def save_image(
    image: RGBAImage,
    path: str | Path,
    stage: ProcessingStage = ProcessingStage.ENCODE,
) -> Path | ProcessingError:
    """
    Encode an RGBA image as PNG and write it to ``path``.

    The file is only created once encoding has succeeded.

    Returns:
        Path to saved file or ProcessingError with error_type "encode_failure"
    """
    path = Path(path)

    if image.ndim != 3 or image.shape[2] != 4 or image.dtype != np.uint8:
        return ProcessingError(
            stage=stage,
            error_type="encode_failure",
            recoverable=False,
            message=f"Expected an (H, W, 4) uint8 RGBA image, got {image.shape} {image.dtype}",
            details={"path": str(path), "shape": list(image.shape), "dtype": str(image.dtype)},
        )

    try:
        bgra = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
        success, encoded = cv2.imencode(config.OUTPUT_EXTENSION, bgra)
    except cv2.error as e:
        return ProcessingError(
            stage=stage,
            error_type="encode_failure",
            recoverable=False,
            message=f"Failed to encode png: {e}",
            details={"path": str(path), "error": str(e)},
        )
    if not success:
        return ProcessingError(
            stage=stage,
            error_type="encode_failure",
            recoverable=False,
            message="Failed to encode png",
            details={"path": str(path)},
        )

    # Write beside the target, then swap it in so a failed write leaves no partial file
    tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex[:8]}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(encoded.tobytes())
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path.exists():
            tmp_path.unlink()
        return ProcessingError(
            stage=stage,
            error_type="encode_failure",
            recoverable=False,
            message=f"Failed to write {path}: {e}",
            details={"path": str(path), "error": str(e)},
        )
    return path


def get_image_info(image: NDArray[Any]) -> ImageInfo:
    """Dimensions and channel layout of an image array."""
    if image.ndim == 2:
        height, width = image.shape
        channels = 1
    else:
        height, width, channels = image.shape

    return ImageInfo(
        height=height,
        width=width,
        channels=channels,
        has_alpha=channels in (2, 4),
    )
