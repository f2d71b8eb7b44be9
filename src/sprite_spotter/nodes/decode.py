"""Decode node: read the input file into an RGBA pixel grid."""

from sprite_spotter.models import PipelineState, ProcessingError, ScanOutput
from sprite_spotter.utils import cv_utils


def decode(state: PipelineState) -> PipelineState:
    """
    Load and decode ``state.image_path``.

    Updates state with:
    - image: RGBA uint8 array
    - output: ScanOutput carrying the image dimensions
    - errors: input_unreadable / decode_failure on failure
    """
    image = cv_utils.load_image(state.image_path)
    if isinstance(image, ProcessingError):
        return state.model_copy(update={"errors": state.errors + [image]})

    info = cv_utils.get_image_info(image)
    return state.model_copy(update={
        "image": image,
        "output": ScanOutput(width=info.width, height=info.height),
    })
