"""Particle rest-mass database for KineCalc.

Loads the bundled grouped mass table (MeV/c²) and flattens it into the
single mapping that ``FunctionRegistry.set_masses_data`` expects. Groups
exist for presentation only; lookups use the flat mapping.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_MASSES_DB_PATH = _DATA_DIR / "masses.json"


@lru_cache(maxsize=1)
def _load_masses_db() -> dict[str, dict[str, Any]]:
    if not _MASSES_DB_PATH.exists():
        raise FileNotFoundError(f"Bundled mass database not found at {_MASSES_DB_PATH}")
    with open(_MASSES_DB_PATH, encoding="utf-8") as f:
        db = json.load(f)
    logger.debug("Loaded %d mass groups from %s", len(db), _MASSES_DB_PATH)
    return db


def load_mass_groups() -> dict[str, dict[str, Any]]:
    """Return a copy of the bundled grouped mass table."""
    return copy.deepcopy(_load_masses_db())


def list_groups() -> list[str]:
    """Return all group names in the bundled table."""
    return list(_load_masses_db().keys())


def get_group(name: str) -> dict[str, Any]:
    """Return the masses of one group.

    Raises:
        KeyError: If no group matches *name* (case-insensitive).
    """
    db = _load_masses_db()
    for key, val in db.items():
        if key.lower() == name.lower():
            return dict(val)
    raise KeyError(f"Mass group '{name}' not found. Available: {list(db.keys())}")


def flatten_masses(groups: Mapping[str, Mapping[str, Any]]) -> dict[str, Any]:
    """Merge grouped masses into one ``{particle: mass}`` mapping.

    Raises:
        ValueError: If a particle key appears in more than one group.
    """
    flat: dict[str, Any] = {}
    owner: dict[str, str] = {}
    for group, entries in groups.items():
        for key, value in entries.items():
            if key in flat:
                raise ValueError(
                    f"Particle '{key}' appears in both '{owner[key]}' and '{group}'"
                )
            flat[key] = value
            owner[key] = group
    return flat


def default_masses() -> dict[str, Any]:
    """Flat mapping of the bundled masses."""
    return flatten_masses(_load_masses_db())
