"""The `validate` command.

Loads a layout file, replays it and reports what would go wrong. Warnings
are grouped by placement; each group is headed by the part being dragged
and the point where it is released, which is where its verdict is taken.
"""

from itertools import groupby
from pathlib import Path
from typing import Annotated

import typer

from cabinet_composer.application.config import (
    ConfigError,
    LayoutConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)


def placement_heading(config: LayoutConfiguration, index: int) -> str:
    """Describe a scripted drag by its kind and release point.

    Example:
        'placement 3: horizontal shelf released at (0.002, 1.000, 0.000)'
    """
    placement = config.placements[index]
    x, y, z = placement.path[-1]
    kind = placement.kind.display_name.lower()
    return f"placement {index + 1}: {kind} released at ({x:.3f}, {y:.3f}, {z:.3f})"


def _report_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "json_parse":
        typer.echo(f"  Invalid JSON syntax in {error.path}", err=True)
        for detail in error.details:
            typer.echo(
                f"    line {detail['line']}, column {detail['column']}: {detail['message']}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail['where']}: {detail['message']}", err=True)
            if detail.get("value") is not None:
                typer.echo(f"    got {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
    typer.echo(err=True)
    typer.echo("Layout cannot be built.", err=True)


def _report_result(config: LayoutConfiguration, result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo(err=True)

    if result.warnings:
        typer.echo("Warnings:")
        ordered = sorted(
            result.warnings,
            key=lambda w: -1 if w.placement is None else w.placement,
        )
        for index, warnings in groupby(ordered, key=lambda w: w.placement):
            if index is not None:
                typer.echo(f"  {placement_heading(config, index)}")
            for warning in warnings:
                typer.echo(f"    {warning.path}: {warning.message}")
                if warning.suggestion:
                    typer.echo(f"      hint: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        affected = len({w.placement for w in result.warnings if w.placement is not None})
        typer.echo(
            f"Validation passed with {len(result.warnings)} warning(s) "
            f"across {affected} of {len(config.placements)} placement(s)"
        )
    else:
        typer.echo("Validation passed. Layout is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout file to validate"),
    ],
) -> None:
    """Validate a layout file.

    Reports JSON and schema problems, cursor points outside the cabinet and
    placements that would be rejected when the layout is replayed.

    Exit codes:
        0 - Layout is valid with no warnings
        1 - Layout has errors (cannot be used)
        2 - Layout is valid but has warnings

    Example:
        cabinet-composer validate my-layout.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _report_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report_result(config, result)
    raise typer.Exit(code=result.exit_code)
