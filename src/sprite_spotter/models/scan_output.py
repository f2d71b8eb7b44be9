from enum import Enum
from typing import Any

from pydantic import BaseModel, computed_field


class ProcessingStage(str, Enum):
    INPUT = "input"
    DECODE = "decode"
    SCAN = "scan"
    ENCODE = "encode"


class ProcessingError(BaseModel):
    stage: ProcessingStage
    error_type: str
    recoverable: bool
    message: str
    details: dict[str, Any] = {}


class MatchRecord(BaseModel):
    x: int
    y: int
    variant_index: int
    variant_name: str


class ScanOutput(BaseModel):
    width: int
    height: int
    matches: list[MatchRecord] = []
    output_path: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def match_count(self) -> int:
        return len(self.matches)
