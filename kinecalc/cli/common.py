"""Helpers shared by KineCalc CLI commands."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

from kinecalc.core.errors import KineCalcError


def fail(console: Console, exc: KineCalcError) -> None:
    """Report a calculator error and exit with status 1."""
    console.print(f"[red]Error ({exc.kind}):[/red] {escape(str(exc))}", highlight=False)
    raise SystemExit(1)


def fmt_number(value: Any, precision: int) -> str:
    """Format a number with *precision* significant digits."""
    return f"{value:.{precision}g}"
