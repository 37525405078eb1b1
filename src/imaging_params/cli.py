"""Typer CLI for inspecting imaging parameters.

Commands:
  list-parameters  List every parameter with its conventional shape
  explain          Explain a single parameter
  show             Assemble parameters from the environment and --set options
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from imaging_params.config import ImagingParamsConfig, LoggingConfig
from imaging_params.errors import InvalidArgumentError, ParameterError
from imaging_params.parameters import ImagingParametersBuilder
from imaging_params.registry import ParameterEntry, ValueShape, build_default_registry
from imaging_params.types import Parameter
from imaging_params.values import ImageFormat

logger = logging.getLogger("imaging_params.cli")

app = typer.Typer(
    name="imaging-params",
    help="Inspect and assemble typed imaging parameters",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (default from env)")
    ] = None,
) -> None:
    """Imaging parameters CLI."""
    level = (log_level or LoggingConfig().log_level).upper()
    if level not in logging.getLevelNamesMapping():
        console.print(f"[red]Error: unknown log level '{escape(level)}'[/red]")
        raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _coerce_value(entry: ParameterEntry, raw: str) -> object:
    """Convert a command-line string to the first shape the parameter accepts."""
    shape = entry.value_shapes[0]
    lower = raw.strip().lower()
    match shape:
        case ValueShape.BOOL:
            if lower in ("true", "1", "yes"):
                return True
            if lower in ("false", "0", "no"):
                return False
            raise InvalidArgumentError(f"'{raw}' is not a boolean")
        case ValueShape.INT:
            try:
                return int(raw)
            except ValueError:
                raise InvalidArgumentError(f"'{raw}' is not an integer") from None
        case ValueShape.STR:
            return raw
        case ValueShape.IMAGE_FORMAT:
            try:
                return ImageFormat(lower)
            except ValueError:
                raise InvalidArgumentError(f"'{raw}' is not a known image format") from None
        case _:
            raise InvalidArgumentError(
                f"Parameter '{entry.parameter.value}' cannot be set from the command line"
            )


def _apply_assignments(builder: ImagingParametersBuilder, assignments: list[str]) -> None:
    registry = build_default_registry()
    for item in assignments:
        if "=" not in item:
            raise InvalidArgumentError(f"Invalid assignment '{item}'. Use key=value")
        key, raw = item.split("=", 1)
        parameter = Parameter.parse(key)
        entry = registry.get(parameter)
        if entry is None:
            raise InvalidArgumentError(f"Parameter '{parameter.value}' is not registered")
        builder.set(parameter, _coerce_value(entry, raw))


@app.command("list-parameters")
def list_parameters() -> None:
    """List every known parameter."""
    table = Table(title="Imaging Parameters")
    table.add_column("Name", style="cyan")
    table.add_column("Shape", style="green")
    table.add_column("Codec default")
    table.add_column("Description")

    for entry in build_default_registry().all_entries():
        table.add_row(
            entry.parameter.value,
            " | ".join(s.value for s in entry.value_shapes),
            entry.codec_default or "-",
            entry.description,
        )

    console.print(table)


@app.command()
def explain(
    key: Annotated[str, typer.Argument(help="Parameter name, e.g. strict or pixel-density")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Explain a single parameter."""
    try:
        parameter = Parameter.parse(key)
    except ParameterError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    entry = build_default_registry().get(parameter)
    if entry is None:
        console.print(f"[red]Error: parameter '{parameter.value}' is not registered[/red]")
        raise typer.Exit(1)
    console.print(entry.to_json() if format == "json" else entry.to_text())


@app.command()
def show(
    assignment: Annotated[
        list[str] | None, typer.Option("--set", "-s", help="Parameter value (key=value)")
    ] = None,
    from_env: Annotated[
        bool, typer.Option("--from-env", help="Start from IMAGING_PARAMS_* environment variables")
    ] = False,
) -> None:
    """Assemble parameters and show which are present."""
    try:
        builder = ImagingParamsConfig().to_builder() if from_env else ImagingParametersBuilder()
        _apply_assignments(builder, assignment or [])
    except (ParameterError, ValidationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    parameters = builder.get()
    registry = build_default_registry()
    nonconforming = set(registry.nonconforming(parameters))
    logger.info("Assembled %d parameters", len(parameters))

    table = Table(title="Assembled Parameters")
    table.add_column("Name", style="cyan")
    table.add_column("Present")
    table.add_column("Value", style="green")

    for parameter in Parameter:
        if parameter in parameters:
            value = parameters.value(parameter, object)
            marker = " [yellow](unexpected shape)[/yellow]" if parameter in nonconforming else ""
            table.add_row(parameter.value, "yes", escape(repr(value)) + marker)
        else:
            table.add_row(parameter.value, "no", "-")

    console.print(table)
