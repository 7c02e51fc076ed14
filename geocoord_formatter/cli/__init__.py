"""CLI module for coordinate formatting.

Provides the `geocoord` command-line interface.
"""

from geocoord_formatter.cli.main import app

__all__ = ["app"]
