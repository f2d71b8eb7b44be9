from .scan_output import (
    MatchRecord,
    ProcessingError,
    ProcessingStage,
    ScanOutput,
)
from .state import PipelineState, ScanConfig

__all__ = [
    "MatchRecord",
    "PipelineState",
    "ProcessingError",
    "ProcessingStage",
    "ScanConfig",
    "ScanOutput",
]
