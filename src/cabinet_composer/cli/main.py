"""Typer CLI for cabinet layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_composer.application import (
    BuildLayoutCommand,
    CabinetInput,
    CabinetInputError,
    LayoutSession,
)
from cabinet_composer.application.config import (
    ConfigError,
    config_to_cabinet_input,
    config_to_placements,
    load_config,
)
from cabinet_composer.cli.commands import validate_command
from cabinet_composer.domain import Point3D
from cabinet_composer.infrastructure import (
    JsonExporter,
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
)

OUTPUT_FORMATS = ("all", "summary", "diagram", "json")

app = typer.Typer(
    name="cabinet-composer",
    help="Compose cabinet interiors from shelves, vertical shelves and drawers.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every fit and placement decision"),
    ] = False,
) -> None:
    """Compose cabinet interiors from shelves, vertical shelves and drawers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_or_exit(config_file: Path):
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def build(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, summary, diagram, json"),
    ] = "all",
) -> None:
    """Replay a layout file and show the resulting cabinet."""
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    config = _load_or_exit(config_file)
    result = BuildLayoutCommand().execute(
        config_to_cabinet_input(config), config_to_placements(config)
    )

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export(result))
    elif output_format == "diagram":
        typer.echo(LayoutDiagramFormatter().format(result.cabinet, result.partitions))
    elif output_format == "summary":
        typer.echo(LayoutSummaryFormatter().format(result))
    else:  # "all"
        typer.echo(LayoutDiagramFormatter().format(result.cabinet, result.partitions))
        typer.echo()
        typer.echo(LayoutSummaryFormatter().format(result))


@app.command()
def span(
    x: Annotated[float, typer.Option("--x", help="Query x in meters from the center")],
    y: Annotated[float, typer.Option("--y", help="Query y in meters from the floor")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Layout file whose placements bound the span"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Cabinet width in cm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Cabinet height in cm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Cabinet depth in cm")
    ] = None,
    wall_thickness: Annotated[
        float, typer.Option("--wall-thickness", "-t", help="Wall thickness in meters")
    ] = 0.02,
) -> None:
    """Show the free width and height available at a point."""
    session = LayoutSession()

    if config_file is not None:
        config = _load_or_exit(config_file)
        result = BuildLayoutCommand().execute(
            config_to_cabinet_input(config), config_to_placements(config), session=session
        )
        if not result.is_valid:
            for error in result.errors:
                typer.echo(f"Error: {error}", err=True)
            raise typer.Exit(code=1)
    else:
        if width is None or height is None or depth is None:
            typer.echo("Error: --width, --height and --depth are required without --config", err=True)
            raise typer.Exit(code=1)
        cabinet_input = CabinetInput(
            width_cm=width, height_cm=height, depth_cm=depth, wall_thickness=wall_thickness
        )
        try:
            session.build_cabinet(cabinet_input.to_cabinet())
        except CabinetInputError as e:
            for error in e.errors:
                typer.echo(f"Error: {error}", err=True)
            raise typer.Exit(code=1)

    free_width, free_height = session.span_at(Point3D(x, y, 0.0))
    typer.echo(f"Available width:  {free_width:.4f} m")
    typer.echo(f"Available height: {free_height:.4f} m")


if __name__ == "__main__":
    app()
