"""Scan node: match the template library and composite the output canvas."""

from sprite_spotter.matching import LIBRARY
from sprite_spotter.matching import scan as scan_image
from sprite_spotter.models import PipelineState, ProcessingError, ProcessingStage


def scan(state: PipelineState) -> PipelineState:
    if state.image is None or state.output is None:
        return state.model_copy(update={"errors": state.errors + [ProcessingError(
            stage=ProcessingStage.SCAN,
            error_type="no_image",
            recoverable=False,
            message="Scan reached without a decoded image",
        )]})

    result = scan_image(state.image, LIBRARY, state.config)
    return state.model_copy(update={
        "canvas": result.canvas,
        "output": state.output.model_copy(update={"matches": result.matches}),
    })
