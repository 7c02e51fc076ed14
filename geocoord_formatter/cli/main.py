"""Main Typer CLI application for coordinate formatting."""

import logging
from pathlib import Path

import typer
from babel import UnknownLocaleError

from geocoord_formatter.config import CoordinateUnit, FormatConfig, get_default_config
from geocoord_formatter.rendering import parse_locale

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Format decimal degrees as degrees, minutes and seconds",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file with a 'coordinate_format' section"
    ),
    unit: CoordinateUnit | None = typer.Option(None, help="Smallest unit to print"),
    digits: int | None = typer.Option(
        None, help="Fractional digits beyond integer degrees"
    ),
    locale: str | None = typer.Option(None, help="Locale for decimal separators (e.g. de_DE)"),
    separator: str | None = typer.Option(None, help="Separator between components"),
    minus_sign: str | None = typer.Option(None, help="Minus sign used without suffixes"),
    suffix: bool | None = typer.Option(
        None, "--suffix/--no-suffix", help="Append N/S/E/W instead of a minus sign"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Format decimal degrees as degrees, minutes and seconds.

    Options given on the command line override values from --config.

    Example:
        geocoord latitude 12.5
        geocoord --unit seconds --digits 5 coordinate -- -49.937888 15.628472
        geocoord --no-suffix --minus-sign - longitude -- -27.729
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = FormatConfig.from_yaml(str(config_file)) if config_file else get_default_config()
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    overrides = {
        'smallest_unit': unit,
        'fractional_digits': digits,
        'locale': locale,
        'component_separator': separator,
        'minus_sign': minus_sign,
        'uses_hemisphere_suffixes': suffix,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        config = config.replace(**overrides)

    try:
        parse_locale(config.locale)
    except (UnknownLocaleError, ValueError) as e:
        typer.echo(f"Error: invalid locale '{config.locale}': {e}", err=True)
        raise typer.Exit(1)

    logger.debug("Using configuration: %s", config)
    ctx.obj = config


def _register_commands() -> None:
    """Import command modules so their decorators register with the app."""
    from geocoord_formatter.cli import commands

    _ = commands


_register_commands()


if __name__ == "__main__":
    app()
