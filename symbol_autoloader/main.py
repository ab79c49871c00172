"""symbol-autoloader command line interface."""

import logging
from pathlib import Path

import click

from .commands.resolve import explain_cmd
from .commands.resolve import resolve_cmd
from .commands.rules import paths_cmd
from .commands.rules import show_cmd
from .logging_setup import init_json_logging
from .logging_setup import resolve_level


@click.group(invoke_without_command=True)
@click.version_option(package_name="symbol-autoloader")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Settings file to use instead of the standard scopes",
)
@click.option("--log-level", default=None, help="Log level (default: $SYMBOL_AUTOLOADER_LOG_LEVEL or INFO)")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Write JSONL logs to this file")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, log_level: str | None, log_file: str | None):
    """Inspect and trace lazy symbol resolution."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file

    if log_file:
        init_json_logging(log_file, log_level)
    elif log_level:
        logging.getLogger().setLevel(resolve_level(log_level))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(paths_cmd)
cli.add_command(show_cmd)
cli.add_command(explain_cmd)
cli.add_command(resolve_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
