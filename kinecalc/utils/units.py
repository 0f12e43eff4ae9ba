"""Unit handling for KineCalc.

Constant literals may be written in a convenient unit (degrees for the weak
mixing angle) and are converted once, through pint, when the constant table
is built.
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()

Q_ = _ureg.Quantity


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
