"""Formatting commands."""

import typer

from geocoord_formatter.cli.main import app
from geocoord_formatter.formatter import (
    format_coordinate,
    format_latitude,
    format_longitude,
    format_number,
)

# Lets negative values such as -12.5 through as arguments
_NUMERIC_ARGS = {"ignore_unknown_options": True}


@app.command("number", context_settings=_NUMERIC_ARGS)
def number_command(
    ctx: typer.Context,
    value: float = typer.Argument(..., help="Decimal degrees"),
) -> None:
    """Format a value without hemisphere suffix."""
    typer.echo(format_number(value, ctx.obj))


@app.command("latitude", context_settings=_NUMERIC_ARGS)
def latitude_command(
    ctx: typer.Context,
    value: float = typer.Argument(..., help="Latitude in decimal degrees"),
) -> None:
    """Format a latitude (N/S)."""
    typer.echo(format_latitude(value, ctx.obj))


@app.command("longitude", context_settings=_NUMERIC_ARGS)
def longitude_command(
    ctx: typer.Context,
    value: float = typer.Argument(..., help="Longitude in decimal degrees"),
) -> None:
    """Format a longitude (E/W)."""
    typer.echo(format_longitude(value, ctx.obj))


@app.command("coordinate", context_settings=_NUMERIC_ARGS)
def coordinate_command(
    ctx: typer.Context,
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees"),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees"),
) -> None:
    """
    Format a latitude/longitude pair.

    Example:
        geocoord --unit seconds coordinate -- -49.937888 15.628472
    """
    typer.echo(format_coordinate(latitude, longitude, ctx.obj))
