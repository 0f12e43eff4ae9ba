"""KineCalc command-line interface.

Entry point for the ``kinecalc`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.markup import escape

from kinecalc import __app_name__, __version__
from kinecalc.core.config import CalculatorConfig, build_registry, load_config
from kinecalc.utils.logging import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Calculator settings (JSON).",
)
@click.option(
    "--masses",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Particle mass table (JSON, grouped or flat). Overrides the config file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, masses: str | None, verbose: bool) -> None:
    """KineCalc — particle kinematics formulas and physical constants.

    Evaluate decay kinematics with the bundled particle masses and look up
    primary and derived physical constants.
    """
    try:
        config = load_config(config_path) if config_path else CalculatorConfig()
        if masses is not None:
            config.mass_file = masses
        configure_logging(logging.DEBUG if verbose else config.log_level)
        registry = build_registry(config)
    except (ValueError, TypeError, OSError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["config"] = config
    ctx.obj["registry"] = registry


# Import and register sub-commands
from kinecalc.cli.constants_cmd import constants  # noqa: E402
from kinecalc.cli.functions_cmd import call, functions  # noqa: E402
from kinecalc.cli.masses_cmd import lists, masses_cmd  # noqa: E402

cli.add_command(functions)
cli.add_command(call)
cli.add_command(constants)
cli.add_command(masses_cmd)
cli.add_command(lists)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
