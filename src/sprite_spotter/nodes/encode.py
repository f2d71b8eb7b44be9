"""Encode node: write the composited canvas as PNG."""

from sprite_spotter.models import PipelineState, ProcessingError, ProcessingStage
from sprite_spotter.utils import cv_utils


def encode(state: PipelineState) -> PipelineState:
    if state.canvas is None or state.output is None:
        return state.model_copy(update={"errors": state.errors + [ProcessingError(
            stage=ProcessingStage.ENCODE,
            error_type="no_canvas",
            recoverable=False,
            message="Encode reached without a composited canvas",
        )]})

    saved = cv_utils.save_image(state.canvas, state.output_path)
    if isinstance(saved, ProcessingError):
        return state.model_copy(update={"errors": state.errors + [saved]})

    return state.model_copy(update={
        "output": state.output.model_copy(update={"output_path": str(saved)}),
    })
