"""CLI command groups."""

import sys
from pathlib import Path

import click
from rich.markup import escape

from ..autoloader import Autoloader
from ..bootstrap import create_autoloader
from ..bootstrap import load_config
from ..console import console
from ..errors import ConfigurationError


def autoloader_from_context(ctx: click.Context, install: bool = True) -> Autoloader:
    """Build an autoloader from the settings selected on the command line."""
    config_file: Path | None = (ctx.obj or {}).get("config_file")
    try:
        config = load_config(config_file)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    return create_autoloader(config, install=install)
