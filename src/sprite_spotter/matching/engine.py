"""
Scan/match engine.

Every origin (x, y) is tested against each template variant in library order.
A variant hits when its footprint fits inside the image, its body and visor
reference colors are distinct, and every cell passes its role's color test.
Hits are computed per variant over all origins at once; claims are then
resolved origin by origin in x-outer, y-inner order, which makes the first
match at an origin and the earlier claim between origins win.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from sprite_spotter.models import MatchRecord, ScanConfig

from .color import is_same
from .compositor import composite
from .library import LIBRARY, TemplateVariant
from .template import Role

logger = logging.getLogger(__name__)

CLAIMABLE = Role.BODY | Role.VISOR


@dataclass
class ScanResult:
    canvas: NDArray[np.uint8]
    claimed: NDArray[np.bool_]
    matches: list[MatchRecord] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matches)


def _check_rgba(image: NDArray[Any]) -> None:
    if image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"expected an (H, W, 4) RGBA image, got shape {image.shape}")


def variant_hits(
    image: NDArray[Any],
    variant: TemplateVariant,
    config: ScanConfig | None = None,
) -> NDArray[np.bool_]:
    """
    Boolean (H, W) map of origins where ``variant`` matches.

    Origins whose footprint would extend past the image edge never match.
    ``image`` may already be widened to int32, in which case it is used as is.
    """
    cfg = config or ScanConfig()
    _check_rgba(image)
    height, width = image.shape[:2]
    hits = np.zeros((height, width), dtype=bool)

    template = variant.template
    out_h = height - template.height + 1
    out_w = width - template.width + 1
    if out_h <= 0 or out_w <= 0:
        return hits

    pixels = np.asarray(image, dtype=np.int32)

    def window(dx: int, dy: int) -> NDArray[np.int32]:
        return pixels[dy : dy + out_h, dx : dx + out_w]

    body = window(*variant.body_anchor)
    visor = window(*variant.visor_anchor)
    scratch = np.empty((out_h, out_w, 4), dtype=np.int32)

    ok = ~is_same(body, visor, cfg.distinct_tolerance, out=scratch)
    for dx, dy, role in template.cells():
        if role == Role.WILDCARD:
            continue
        pixel = window(dx, dy)
        cell_ok = np.zeros_like(ok)
        if Role.BODY in role:
            cell_ok |= is_same(pixel, body, cfg.body_tolerance, out=scratch)
        if Role.VISOR in role:
            cell_ok |= is_same(pixel, visor, cfg.visor_tolerance, out=scratch)
        if Role.BACKGROUND in role:
            # Background must stand apart from the body color
            cell_ok |= ~is_same(pixel, body, cfg.background_tolerance, out=scratch)
        ok &= cell_ok
        if not ok.any():
            break

    hits[:out_h, :out_w] = ok
    return hits


def claim_cells(variant: TemplateVariant, x: int, y: int) -> list[tuple[int, int]]:
    """Image coordinates of the body and visor cells of ``variant`` placed at (x, y)."""
    return [
        (x + dx, y + dy)
        for dx, dy, role in variant.template.cells()
        if role & CLAIMABLE
    ]


def scan(
    image: NDArray[np.uint8],
    library: Sequence[TemplateVariant] = LIBRARY,
    config: ScanConfig | None = None,
) -> ScanResult:
    """
    Match ``library`` against ``image`` and composite the output canvas.

    Args:
        image: (H, W, 4) uint8 RGBA source
        library: Variants in priority order
        config: Tolerances, dim divisor and overlap policy

    Returns:
        ScanResult with the canvas, the claimed mask and the accepted matches
    """
    cfg = config or ScanConfig()
    _check_rgba(image)
    height, width = image.shape[:2]
    claimed = np.zeros((height, width), dtype=bool)
    matches: list[MatchRecord] = []

    if library:
        # Widen once; every variant reads windows of the same int32 buffer
        pixels = image.astype(np.int32)
        hits = np.stack([variant_hits(pixels, v, cfg) for v in library])
    else:
        hits = np.zeros((0, height, width), dtype=bool)

    # argwhere over the transposed map yields (x, y) sorted x-outer, y-inner
    for x, y in np.argwhere(hits.any(axis=0).T):
        x, y = int(x), int(y)
        if claimed[y, x]:
            continue
        for position in np.flatnonzero(hits[:, y, x]):
            variant = library[int(position)]
            cells = claim_cells(variant, x, y)
            if cfg.full_footprint_check and any(claimed[py, px] for px, py in cells):
                continue
            for px, py in cells:
                claimed[py, px] = True
            matches.append(
                MatchRecord(x=x, y=y, variant_index=variant.index, variant_name=variant.name)
            )
            break

    logger.info("Scan of %dx%d image found %d matches", width, height, len(matches))
    return ScanResult(
        canvas=composite(image, claimed, cfg.dim_divisor),
        claimed=claimed,
        matches=matches,
    )
