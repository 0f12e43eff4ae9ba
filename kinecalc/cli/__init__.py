"""KineCalc command-line interface package.

Supports ``python -m kinecalc.cli`` as an alternative to the ``kinecalc`` entry point.
"""

from kinecalc.cli.main import cli, main

__all__ = ["cli", "main"]
