"""Commands that trace how a symbol resolves."""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from ..console import console
from ..engine import Outcome
from ..engine import Resolution
from ..errors import AutoloaderError
from . import autoloader_from_context

_OUTCOME_STYLE = {
    Outcome.ALIASED: "cyan",
    Outcome.FOUND: "green",
    Outcome.NOT_FOUND: "yellow",
}


def print_resolution(resolution: Resolution, show_probes: bool = True) -> None:
    """Render a single resolution trace."""
    style = _OUTCOME_STYLE[resolution.outcome]
    console.print(
        f"[bold]{escape(resolution.symbol)}[/bold]: "
        f"[{style}]{resolution.outcome.value}[/{style}] via {resolution.via}"
    )
    if resolution.target:
        console.print(f"  alias of: {escape(resolution.target)}", soft_wrap=True)
    if resolution.path:
        console.print(f"  file: {escape(resolution.path)}", soft_wrap=True)
    for prefix in resolution.activated:
        console.print(f"  activated bundle: {escape(prefix)}")
    if resolution.pending_activation:
        console.print(f"  would activate bundle: {escape(resolution.pending_activation)}")
    if show_probes and resolution.probes:
        console.print("  probes:")
        for path in resolution.probes:
            console.print(f"    [dim]{escape(path)}[/dim]", soft_wrap=True)


@click.command("explain")
@click.argument("symbol")
@click.option("--probes/--no-probes", default=True, help="List every probed path")
@click.pass_context
def explain_cmd(ctx: click.Context, symbol: str, probes: bool):
    """Show how SYMBOL would resolve without loading anything."""
    autoloader = autoloader_from_context(ctx)
    resolution = autoloader.explain(symbol)
    print_resolution(resolution, show_probes=probes)

    if resolution.outcome is Outcome.NOT_FOUND:
        sys.exit(1)


@click.command("resolve")
@click.argument("symbol")
@click.option("--probes/--no-probes", default=False, help="List every probed path")
@click.pass_context
def resolve_cmd(ctx: click.Context, symbol: str, probes: bool):
    """Resolve SYMBOL, loading its source file, and show what was defined."""
    autoloader = autoloader_from_context(ctx, install=False)

    trace: list[Resolution] = []

    def traced_load(name: str) -> Resolution:
        resolution = autoloader.load(name)
        trace.append(resolution)
        return resolution

    autoloader.space.register_autoloader(traced_load)

    try:
        obj = autoloader.space.lookup(symbol)
    except AutoloaderError as e:
        for resolution in trace:
            print_resolution(resolution, show_probes=probes)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as exc:
        for resolution in trace:
            print_resolution(resolution, show_probes=probes)
        reason = escape(f"{type(exc).__name__}: {exc}")
        console.print(f"[red]Error:[/red] Failed to load {escape(symbol)}: {reason}", soft_wrap=True)
        sys.exit(1)

    for resolution in trace:
        print_resolution(resolution, show_probes=probes)
    console.print(f"[green]Resolved[/green] {escape(symbol)} -> {escape(repr(obj))}", soft_wrap=True)
