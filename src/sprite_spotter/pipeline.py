"""LangGraph pipeline: decode -> scan -> encode."""

from collections.abc import Iterator

from langgraph.graph import END, StateGraph

from sprite_spotter import config as defaults
from sprite_spotter.models import PipelineState, ProcessingStage, ScanConfig
from sprite_spotter.nodes import decode, encode, scan


def _has_fatal(state: PipelineState, *stages: ProcessingStage) -> bool:
    return any(err.stage in stages and not err.recoverable for err in state.errors)


def _route_decode(state: PipelineState) -> str:
    if _has_fatal(state, ProcessingStage.INPUT, ProcessingStage.DECODE):
        return END
    if state.image is not None:
        return "scan"
    return END


def _route_scan(state: PipelineState) -> str:
    if _has_fatal(state, ProcessingStage.SCAN):
        return END
    if state.canvas is not None:
        return "encode"
    return END


def create_pipeline():
    graph = StateGraph(PipelineState)

    graph.add_node("decode", decode)
    graph.add_node("scan", scan)
    graph.add_node("encode", encode)

    graph.set_entry_point("decode")

    graph.add_conditional_edges("decode", _route_decode, {"scan": "scan", END: END})
    graph.add_conditional_edges("scan", _route_scan, {"encode": "encode", END: END})
    graph.add_edge("encode", END)

    return graph.compile()


def _coerce(result: object) -> PipelineState:
    return result if isinstance(result, PipelineState) else PipelineState(**result)


def stream_pipeline(
    image_path: str,
    output_path: str = defaults.DEFAULT_OUTPUT_PATH,
    config: ScanConfig | None = None,
) -> Iterator[PipelineState]:
    """Yield the full state after each step, starting with the initial state."""
    initial = PipelineState(
        image_path=image_path,
        output_path=output_path,
        config=config or ScanConfig(),
    )
    for values in pipeline.stream(initial, stream_mode="values"):
        yield _coerce(values)


def run_pipeline(
    image_path: str,
    output_path: str = defaults.DEFAULT_OUTPUT_PATH,
    config: ScanConfig | None = None,
) -> PipelineState:
    initial = PipelineState(
        image_path=image_path,
        output_path=output_path,
        config=config or ScanConfig(),
    )
    return _coerce(pipeline.invoke(initial))


pipeline = create_pipeline()
