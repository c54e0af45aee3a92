"""Typer CLI for window shape measurement and pricing."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from fenestration.application import QuoteWindowCommand
from fenestration.application.config import (
    ConfigError,
    config_to_pricing,
    config_to_shape,
    config_to_window,
    load_config,
    load_pricing_config,
    pricing_schema_to_domain,
    pricing_to_config,
    schema_to_dict,
)
from fenestration.cli.commands import display_load_error, validate_command
from fenestration.domain import DEFAULT_PRICING, PricingConfig, ShapeType, WindowConfig
from fenestration.domain.value_objects import GlassType, HardwareType, OpeningType
from fenestration.infrastructure import (
    JsonExporter,
    QuoteFormatter,
    ShapeReportFormatter,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="fenestration",
    help="Measure custom window shapes and estimate their price.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Measure custom window shapes and estimate their price."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def parse_dimensions(values: list[str]) -> dict[str, float]:
    """Parse repeated ``name=value`` options into a dimension mapping.

    Raises:
        typer.BadParameter: If an entry is not ``name=number``.
    """
    dims: dict[str, float] = {}
    for entry in values:
        name, sep, raw = entry.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected name=value, got '{entry}'")
        try:
            dims[name.strip()] = float(raw)
        except ValueError:
            raise typer.BadParameter(f"Dimension '{name}' must be a number, got '{raw}'")
    return dims


def _load_pricing(pricing_file: Path | None) -> PricingConfig:
    if pricing_file is None:
        return DEFAULT_PRICING
    try:
        return pricing_schema_to_domain(load_pricing_config(pricing_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


@app.command()
def shape(
    shape_type: Annotated[
        ShapeType, typer.Option("--shape", "-s", help="Window outline shape")
    ],
    dim: Annotated[
        Optional[list[str]],
        typer.Option(
            "--dim",
            "-d",
            help="Dimension as name=inches, e.g. flat_to_flat_height=24 (repeatable)",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
) -> None:
    """Show vertices, bounding box and area of a window shape."""
    dims = parse_dimensions(dim or [])
    output = QuoteWindowCommand().measure_shape(shape_type, dims)

    if output_format == OutputFormat.JSON:
        typer.echo(JsonExporter().export(output))
    else:
        typer.echo(ShapeReportFormatter().format(output))


@app.command()
def price(
    width: Annotated[float, typer.Option("--width", "-w", help="Width in inches")] = 48.0,
    height: Annotated[float, typer.Option("--height", "-h", help="Height in inches")] = 60.0,
    opening: Annotated[
        str, typer.Option("--opening", help="Opening type code")
    ] = OpeningType.IN_SWING.value,
    glass: Annotated[
        str, typer.Option("--glass", help="Glass type code")
    ] = GlassType.DOUBLE_PANE.value,
    color: Annotated[str, typer.Option("--color", help="Frame color")] = "white",
    hardware: Annotated[
        str, typer.Option("--hardware", help="Hardware tier")
    ] = HardwareType.STANDARD.value,
    vertical_panes: Annotated[
        int, typer.Option("--vertical-panes", min=1, help="Pane divisions across")
    ] = 1,
    horizontal_panes: Annotated[
        int, typer.Option("--horizontal-panes", min=1, help="Pane divisions down")
    ] = 1,
    thermal_break: Annotated[
        bool, typer.Option("--thermal-break", help="Add a thermal break")
    ] = False,
    screens: Annotated[bool, typer.Option("--screens", help="Include screens")] = False,
    pricing_file: Annotated[
        Optional[Path],
        typer.Option("--pricing", "-p", help="JSON pricing table (defaults to standard rates)"),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
) -> None:
    """Price a rectangular window."""
    window = WindowConfig(
        width=width,
        height=height,
        opening_type=opening,
        glass_type=glass,
        thermal_break=thermal_break,
        color=color,
        vertical_panes=vertical_panes,
        horizontal_panes=horizontal_panes,
        hardware_type=hardware,
        screens=screens,
    )
    command = QuoteWindowCommand(_load_pricing(pricing_file))
    output = command.price(window)

    if output_format == OutputFormat.JSON:
        typer.echo(JsonExporter().export(output))
    else:
        typer.echo(QuoteFormatter().format(output))


@app.command()
def quote(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON quote configuration")
    ],
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
) -> None:
    """Quote a window from a configuration file.

    A configured shape is priced by its area; otherwise the window width and
    height are used.
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    command = QuoteWindowCommand(config_to_pricing(config))
    output = command.execute(config_to_window(config), config_to_shape(config))

    if output_format == OutputFormat.JSON:
        typer.echo(JsonExporter().export(output))
    else:
        typer.echo(QuoteFormatter().format(output))


@app.command()
def pricing(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the table to this file"),
    ] = None,
) -> None:
    """Dump the default pricing table as JSON."""
    content = json.dumps(schema_to_dict(pricing_to_config(DEFAULT_PRICING)), indent=2)
    if output is None:
        typer.echo(content)
        return
    output.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"Pricing table written to {output}")


if __name__ == "__main__":
    app()
