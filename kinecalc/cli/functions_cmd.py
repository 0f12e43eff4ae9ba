"""CLI commands for listing and invoking registered functions."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.table import Table

from kinecalc.cli.common import fail, fmt_number
from kinecalc.core.errors import InvalidArgumentError, KineCalcError
from kinecalc.core.lists import resolve_list_variable
from kinecalc.core.registry import FunctionRegistry, ParamKind


def parse_argument(token: str, kind: ParamKind | None, registry: FunctionRegistry) -> Any:
    """Turn one command-line token into a function argument of *kind*.

    STRING arguments are passed through untouched. For LIST arguments
    ``@Name`` expands a list variable and ``a,b,c`` or ``[a,b,c]`` is a list
    of numbers. NUMBER arguments go through float(); a token that does not
    parse is passed on as-is so the registry reports the mismatch.
    """
    if kind is ParamKind.STRING:
        return token

    if kind is ParamKind.LIST:
        if token.startswith("@"):
            try:
                return resolve_list_variable(token[1:], registry)
            except KeyError as exc:
                raise InvalidArgumentError(exc.args[0]) from exc
        body = token.strip("[]").strip()
        if not body:
            return []
        try:
            return [float(item) for item in body.split(",")]
        except ValueError as exc:
            raise InvalidArgumentError(f"Cannot parse list {token!r}: {exc}") from exc

    try:
        return float(token)
    except ValueError:
        return token


@click.command("functions")
@click.pass_context
def functions(ctx: click.Context) -> None:
    """List registered functions."""
    console: Console = ctx.obj.get("console", Console())
    registry: FunctionRegistry = ctx.obj["registry"]

    table = Table(title="Registered Functions")
    table.add_column("Name", style="cyan")
    table.add_column("Signature", style="green")
    table.add_column("Description", style="dim")
    for row in registry.summary():
        table.add_row(row["name"], row["signature"], row["description"])
    console.print(table)


@click.command("call")
@click.argument("name")
@click.argument("args", nargs=-1)
@click.pass_context
def call(ctx: click.Context, name: str, args: tuple[str, ...]) -> None:
    """Invoke function NAME with ARGS.

    \b
    Examples:
      kinecalc call m p
      kinecalc call triangleFn 1,2,3
      kinecalc call TwoParticleDecayEnergy 10 3 4 1
      kinecalc call DecayProductMaxEnergy 10 3 2,4
    """
    console: Console = ctx.obj.get("console", Console())
    registry: FunctionRegistry = ctx.obj["registry"]
    precision: int = ctx.obj["config"].precision

    try:
        entry = registry.get(name)
        kinds = entry.params + (None,) * max(0, len(args) - entry.arity)
        values = [parse_argument(token, kind, registry) for token, kind in zip(args, kinds)]
        result = entry(*values)
    except KineCalcError as exc:
        fail(console, exc)
        return

    console.print(fmt_number(result, precision), highlight=False)
