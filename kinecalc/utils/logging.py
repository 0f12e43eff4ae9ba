"""Package-wide logging setup using Rich for console output.

Usage::

    from kinecalc.utils.logging import configure_logging
    configure_logging(logging.DEBUG)

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed by the application (the CLI) through ``configure_logging``.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Install a single Rich handler on the root logger.

    Repeated calls only adjust the level.
    """
    global _CONFIGURED
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    if _CONFIGURED:
        logging.getLogger().setLevel(level)
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        markup=False,
        show_time=True,
        show_path=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    logging.basicConfig(level=level, handlers=[handler], format="%(message)s")

    # pint logs unit-definition noise at import
    logging.getLogger("pint").setLevel(max(level, logging.WARNING))

    _CONFIGURED = True

