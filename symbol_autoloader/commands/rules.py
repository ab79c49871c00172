"""Commands that display registered autoload rules."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from ..bundles import BundleManager
from ..console import console
from . import autoloader_from_context


@click.command("paths")
@click.pass_context
def paths_cmd(ctx: click.Context):
    """List convention roots in search order."""
    autoloader = autoloader_from_context(ctx)
    roots = autoloader.registry.convention_roots

    if not roots:
        console.print("[dim]No convention roots registered[/dim]")
        return

    table = Table(title="Convention Roots", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Directory", style="green", overflow="fold")
    for index, root in enumerate(roots, 1):
        table.add_row(str(index), escape(root))
    console.print(table)


@click.command("show")
@click.pass_context
def show_cmd(ctx: click.Context):
    """Show every registered mapping, alias, namespace and bundle."""
    autoloader = autoloader_from_context(ctx)
    registry = autoloader.registry

    _print_pairs("Mappings", "Symbol", "File", registry.mappings)
    _print_pairs("Aliases", "Alias", "Real Name", registry.aliases)
    _print_pairs("Namespaces", "Prefix", "Directory", registry.namespaces)

    gate = autoloader.gate
    if not isinstance(gate, BundleManager) or not gate.names():
        console.print("[dim]No bundles registered[/dim]")
        return

    table = Table(title="Bundles", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="green")
    table.add_column("Location", style="magenta", overflow="fold")
    table.add_column("Active")
    for name in gate.names():
        spec = gate.get(name)
        active = "yes" if gate.is_activated(name) else "no"
        table.add_row(escape(name), escape(spec.location), active)
    console.print(table)


def _print_pairs(title: str, key_label: str, value_label: str, pairs) -> None:
    if not pairs:
        console.print(f"[dim]No {title.lower()} registered[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(key_label, style="green")
    table.add_column(value_label, style="magenta", overflow="fold")
    for key, value in sorted(pairs.items()):
        table.add_row(escape(key), escape(value))
    console.print(table)
