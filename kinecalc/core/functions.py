"""Kinematics formulas exposed to the expression evaluator.

All masses are rest masses in MeV/c² and all energies are in MeV, measured
in the parent's rest frame.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from kinecalc.core.errors import (
    ForbiddenDecayError,
    InvalidArgumentError,
    InvalidMassValueError,
    UnknownParticleError,
    ZeroParentMassError,
)
from kinecalc.utils.validation import is_finite_real, require_number, require_sequence


def lookup_mass(table: Mapping[str, Any], key: str) -> float:
    """Look up the rest mass of a particle.

    Args:
        table: Flat ``{particle: mass}`` mapping.
        key: Particle identifier (e.g. ``"p"`` for the proton).

    Raises:
        InvalidArgumentError: If *key* is not a string.
        UnknownParticleError: If *key* is not in *table*.
        InvalidMassValueError: If the stored value is not a finite number.
    """
    if not isinstance(key, str):
        raise InvalidArgumentError(f"Particle key must be a string, got {key!r}")
    if key not in table:
        raise UnknownParticleError(key)
    mass = table[key]
    if not is_finite_real(mass):
        raise InvalidMassValueError(f"Mass for particle '{key}' is invalid: {mass!r}")
    return float(mass)


def triangle_fn(values: Sequence[float]) -> float:
    """Generalised triangle expression for n variables.

    ``Σ xᵢ² − 2·Σ_{i<j} xᵢ·xⱼ``, accumulated term by term: first the squares
    in index order, then the products over pairs ``i < j`` in index order.
    For three values this is the Källén function λ(x, y, z).

    Raises:
        InvalidArgumentError: If *values* is not a list of at least two numbers.
    """
    xs = require_sequence("values", values, min_length=2)
    n = len(xs)

    sum_of_squares = 0.0
    for i in range(n):
        sum_of_squares += xs[i] * xs[i]

    sum_of_products = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            sum_of_products += xs[i] * xs[j]

    return sum_of_squares - 2 * sum_of_products


def _check_decay(m: float, m1: float, m2: float) -> None:
    if m < m1 + m2:
        raise ForbiddenDecayError(
            f"Decay is forbidden: parent mass {m} < product masses {m1} + {m2}"
        )
    if m == 0:
        raise ZeroParentMassError("Parent mass (m) cannot be zero for this calculation")


def two_particle_decay_energy(m: float, m1: float, m2: float, n: int) -> float:
    """Total energy of one product of a two-body decay.

    Args:
        m: Parent rest mass.
        m1: Rest mass of product 1.
        m2: Rest mass of product 2.
        n: 1 for the energy of product 1, 2 for product 2.

    Returns:
        ``(m² + m1² − m2²) / 2m`` for ``n=1``, ``(m² − m1² + m2²) / 2m`` for ``n=2``.

    Raises:
        ForbiddenDecayError: If ``m < m1 + m2``.
        ZeroParentMassError: If ``m == 0``.
        InvalidArgumentError: If *n* is not 1 or 2, or an argument is not a number.
    """
    m = require_number("m", m)
    m1 = require_number("m1", m1)
    m2 = require_number("m2", m2)
    if not is_finite_real(n):
        raise InvalidArgumentError(f"Argument 'n' must be 1 or 2, got {n!r}")

    _check_decay(m, m1, m2)

    m_sq = m * m
    m1_sq = m1 * m1
    m2_sq = m2 * m2

    if n == 1:
        numerator = m_sq + m1_sq - m2_sq
    elif n == 2:
        numerator = m_sq - m1_sq + m2_sq
    else:
        raise InvalidArgumentError(f"Argument 'n' must be 1 (for E1) or 2 (for E2), got {n!r}")

    return numerator / (2 * m)


def decay_product_max_energy(m: float, m1: float, products: Sequence[float]) -> float:
    """Maximum total energy of product 1 in a many-body decay.

    The remaining products are treated as a single recoiling mass
    ``M = Σ products``, which gives the endpoint ``(m² + m1² − M²) / 2m``.

    Raises:
        ForbiddenDecayError: If ``m < m1 + M``.
        ZeroParentMassError: If ``m == 0``.
        InvalidArgumentError: If *products* is not a list of numbers.
    """
    m = require_number("m", m)
    m1 = require_number("m1", m1)
    recoil = 0.0
    for mass in require_sequence("products", products):
        recoil += mass

    _check_decay(m, m1, recoil)

    numerator = m * m + m1 * m1 - recoil * recoil
    return numerator / (2 * m)
