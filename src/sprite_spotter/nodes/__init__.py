"""Pipeline nodes for sprite scanning.

This module uses lazy imports so that importing the package does not load
OpenCV until a node actually runs.
"""

from __future__ import annotations

from sprite_spotter.models import PipelineState


def decode(state: PipelineState) -> PipelineState:
    from sprite_spotter.nodes.decode import decode as _decode

    return _decode(state)


def scan(state: PipelineState) -> PipelineState:
    from sprite_spotter.nodes.scan import scan as _scan

    return _scan(state)


def encode(state: PipelineState) -> PipelineState:
    from sprite_spotter.nodes.encode import encode as _encode

    return _encode(state)


__all__ = [
    "decode",
    "encode",
    "scan",
]
