"""CLI commands for particle masses and list variables."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from kinecalc.cli.common import fail, fmt_number
from kinecalc.core.errors import KineCalcError
from kinecalc.core.lists import LIST_VARIABLES, check_list_variables, resolve_list_variable
from kinecalc.core.masses import get_group, list_groups
from kinecalc.core.registry import FunctionRegistry


@click.command("masses")
@click.option("--group", "-g", default=None, help="Only show this group.")
@click.pass_context
def masses_cmd(ctx: click.Context, group: str | None) -> None:
    """Show the bundled particle masses by group."""
    console: Console = ctx.obj.get("console", Console())
    registry: FunctionRegistry = ctx.obj["registry"]
    precision: int = ctx.obj["config"].precision

    if group is not None:
        try:
            groups = {group: get_group(group)}
        except KeyError as exc:
            console.print(f"[red]Error:[/red] {exc.args[0]}", highlight=False)
            raise SystemExit(1)
    else:
        groups = {name: get_group(name) for name in list_groups()}

    for title, entries in groups.items():
        table = Table(title=title)
        table.add_column("Particle", style="cyan")
        table.add_column("Mass [MeV/c²]", style="green", justify="right")
        for key in entries:
            if key in registry.masses.table:
                mass = fmt_number(registry.masses.table[key], precision)
            else:
                mass = "—"
            table.add_row(key, mass)
        console.print(table)


@click.command("lists")
@click.pass_context
def lists(ctx: click.Context) -> None:
    """Show list variables and their resolved values."""
    console: Console = ctx.obj.get("console", Console())
    registry: FunctionRegistry = ctx.obj["registry"]
    precision: int = ctx.obj["config"].precision

    check = check_list_variables(registry)
    for msg in check.errors:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}", highlight=False)

    table = Table(title="List Variables")
    table.add_column("Name", style="cyan")
    table.add_column("Entries", style="dim")
    table.add_column("Values", style="green")
    for name, entries in LIST_VARIABLES.items():
        try:
            values = resolve_list_variable(name, registry)
        except KineCalcError as exc:
            fail(console, exc)
            return
        table.add_row(name, ", ".join(entries), ", ".join(fmt_number(v, precision) for v in values))
    console.print(table)
