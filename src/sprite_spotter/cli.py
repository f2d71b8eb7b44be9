"""CLI for finding sprites in a PNG and writing the annotated copy."""

import json
import logging
import sys
from pathlib import Path

import click

from sprite_spotter import config
from sprite_spotter.models import PipelineState, ScanConfig
from sprite_spotter.pipeline import stream_pipeline


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _report_errors(state: PipelineState) -> None:
    for e in state.errors:
        click.echo(f"[{e.stage.value}] {e.message}", err=True)


@click.command()
@click.argument("image", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.DEFAULT_OUTPUT_PATH,
    show_default=True,
    help="Output PNG file",
)
@click.option(
    "--report",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write match records as JSON",
)
@click.option(
    "--full-footprint",
    is_flag=True,
    help="Reject matches that overlap any earlier claim, not just at the origin",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.pass_context
def main(
    ctx: click.Context,
    image: Path | None,
    output: Path,
    report: Path | None,
    full_footprint: bool,
    verbose: bool,
) -> None:
    """Find sprites in IMAGE and write a copy with everything else dimmed."""
    if image is None:
        click.echo(ctx.get_usage())
        return

    _configure_logging(verbose)
    scan_config = ScanConfig(full_footprint_check=full_footprint)

    state: PipelineState | None = None
    bounds_reported = False
    for state in stream_pipeline(str(image), str(output), scan_config):
        if state.output is not None and not bounds_reported:
            click.echo(f"Bounds: {state.output.width} {state.output.height}")
            bounds_reported = True

    if state is None or state.errors or state.output is None:
        click.echo(f"Error processing {image}:", err=True)
        if state is not None:
            _report_errors(state)
        sys.exit(1)

    if report:
        report.write_text(json.dumps(state.output.model_dump(mode="json"), indent=2))
        if verbose:
            click.echo(f"  Report: {report}")

    click.echo(f"Found {state.output.match_count}")


if __name__ == "__main__":
    main()
