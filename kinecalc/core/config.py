"""Calculator configuration and session start-up.

Settings live in a small JSON file. A custom particle-mass table can be
supplied as grouped (``{group: {particle: mass}}``) or flat
(``{particle: mass}``) JSON; otherwise the bundled masses are used.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from kinecalc.core.masses import default_masses, flatten_masses
from kinecalc.core.registry import FunctionRegistry, create_registry

logger = logging.getLogger(__name__)


@dataclass
class CalculatorConfig:
    """Settings for a calculator session."""

    mass_file: str | None = None  # JSON mass table; bundled masses if None
    log_level: str = "WARNING"
    precision: int = 6  # significant digits in CLI output

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")


def load_config(path: str | Path) -> CalculatorConfig:
    """Load settings from a JSON file.

    Relative ``mass_file`` paths are resolved against the config file's
    directory.

    Raises:
        ValueError: If the file contains unknown keys.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    known = {f.name for f in fields(CalculatorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")

    config = CalculatorConfig(**data)
    if config.mass_file is not None and not Path(config.mass_file).is_absolute():
        config.mass_file = str(path.parent / config.mass_file)
    logger.info("Loaded config from %s", path)
    return config


def load_mass_file(path: str | Path) -> dict[str, Any]:
    """Read a grouped or flat JSON mass table and return it flat."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Mass file {path} must contain a JSON object")

    if data and all(isinstance(v, dict) for v in data.values()):
        masses = flatten_masses(data)
    else:
        masses = data
    logger.info("Read %d masses from %s", len(masses), path)
    return masses


def build_registry(config: CalculatorConfig | None = None) -> FunctionRegistry:
    """Create a registry and inject the configured mass table."""
    config = config or CalculatorConfig()
    if config.mass_file is not None:
        masses = load_mass_file(config.mass_file)
    else:
        masses = default_masses()
    return create_registry(masses)
