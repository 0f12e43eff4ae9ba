"""CLI command for physical constants."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from kinecalc.cli.common import fail, fmt_number
from kinecalc.core.constants import default_constants
from kinecalc.core.errors import KineCalcError


@click.command("constants")
@click.argument("name", required=False)
@click.pass_context
def constants(ctx: click.Context, name: str | None) -> None:
    """Show all constants, or the value of NAME."""
    console: Console = ctx.obj.get("console", Console())
    precision: int = ctx.obj["config"].precision
    consts = default_constants()

    if name is not None:
        try:
            value = consts.get(name)
        except KineCalcError as exc:
            fail(console, exc)
            return
        console.print(fmt_number(value, precision), highlight=False)
        return

    table = Table(title="Physical Constants")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    table.add_column("Kind", style="yellow")
    table.add_column("Description")

    for const_name in consts.names():
        info = consts.info(const_name)
        units = getattr(info, "stored_units", info.units)
        table.add_row(
            const_name,
            fmt_number(consts.get(const_name), precision),
            units,
            "derived" if consts.is_derived(const_name) else "primary",
            info.description,
        )
    console.print(table)
