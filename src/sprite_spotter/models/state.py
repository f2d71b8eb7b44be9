from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sprite_spotter import config

from .scan_output import ProcessingError, ScanOutput


class ScanConfig(BaseModel):
    distinct_tolerance: int = Field(default=config.DISTINCT_TOLERANCE, ge=0)
    body_tolerance: int = Field(default=config.BODY_TOLERANCE, ge=0)
    visor_tolerance: int = Field(default=config.VISOR_TOLERANCE, ge=0)
    background_tolerance: int = Field(default=config.BACKGROUND_TOLERANCE, ge=0)

    dim_divisor: int = Field(default=config.DIM_DIVISOR, ge=1, le=255)

    # Reject a match whose claimable cells overlap an earlier claim
    full_footprint_check: bool = config.FULL_FOOTPRINT_CHECK


class PipelineState(BaseModel):
    # Pixel buffers are numpy arrays
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image_path: str
    output_path: str = config.DEFAULT_OUTPUT_PATH
    config: ScanConfig = ScanConfig()

    image: Any | None = None
    canvas: Any | None = None

    output: ScanOutput | None = None

    errors: list[ProcessingError] = []
