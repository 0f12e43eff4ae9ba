"""Physical constants for KineCalc.

Primary constants are stored as exact decimal literals and parsed to float
once, when a ``ConstantTable`` is built. Derived constants are formulas over
primary constants and earlier derived constants; each is computed on first
read and cached for the lifetime of the table.

A derived constant may only depend on names that already exist when it is
defined, so the dependency graph cannot contain a cycle.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import lru_cache

from kinecalc.core.errors import ConstantDefinitionError, UnknownConstantError
from kinecalc.utils.units import convert

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimaryConstant:
    """A named constant with a literal value.

    ``literal`` is either a decimal (``"6.62607015e-34"``) or a quotient of
    two decimals (``"1/137.035999177"``). When ``convert_to`` is given the
    value is converted from ``units`` to that unit on parse.
    """

    name: str
    literal: str
    units: str = "dimensionless"
    description: str = ""
    convert_to: str | None = None

    @property
    def stored_units(self) -> str:
        return self.convert_to or self.units

    def parse(self) -> float:
        """Convert the literal to a float in ``stored_units``."""
        text = self.literal.strip()
        try:
            if "/" in text:
                num, den = text.split("/", 1)
                value = float(num) / float(den)
            else:
                value = float(text)
        except (ValueError, ZeroDivisionError) as exc:
            raise ConstantDefinitionError(
                f"Cannot parse literal {self.literal!r} for constant '{self.name}': {exc}"
            ) from exc

        if self.convert_to is not None:
            value = convert(value, self.units, self.convert_to)
        return value


@dataclass(frozen=True)
class DerivedConstant:
    """A constant computed from other constants.

    ``formula`` receives the values of ``depends_on`` positionally, in order.
    """

    name: str
    depends_on: tuple[str, ...]
    formula: Callable[..., float]
    units: str = "dimensionless"
    description: str = ""


class ConstantTable:
    """Primary and derived constants with memoized evaluation.

    Args:
        primary: Primary constant definitions.
        derived: Derived constant definitions, in dependency order.

    Raises:
        ConstantDefinitionError: On a duplicate name, an unparseable literal,
            or a derived constant referring to a constant not defined before it.
    """

    def __init__(
        self,
        primary: Iterable[PrimaryConstant],
        derived: Iterable[DerivedConstant] = (),
    ) -> None:
        self._primary: dict[str, PrimaryConstant] = {}
        self._values: dict[str, float] = {}
        self._derived: dict[str, DerivedConstant] = {}
        self._cache: dict[str, float] = {}
        self._lock = threading.Lock()

        for const in primary:
            if const.name in self._primary:
                raise ConstantDefinitionError(f"Constant '{const.name}' is defined twice")
            self._primary[const.name] = const
            self._values[const.name] = const.parse()

        for const in derived:
            self.define(const)

    def define(self, const: DerivedConstant) -> None:
        """Add a derived constant after checking its dependencies exist."""
        if const.name in self:
            raise ConstantDefinitionError(f"Constant '{const.name}' is defined twice")
        missing = [dep for dep in const.depends_on if dep not in self]
        if missing:
            raise ConstantDefinitionError(
                f"Derived constant '{const.name}' depends on {missing}, "
                "which must be defined before it"
            )
        self._derived[const.name] = const
        logger.debug("Defined derived constant %s from %s", const.name, const.depends_on)

    def get(self, name: str) -> float:
        """Return the value of a constant.

        Raises:
            UnknownConstantError: If *name* is not defined.
        """
        if name in self._values:
            return self._values[name]
        if name in self._cache:
            return self._cache[name]

        const = self._derived.get(name)
        if const is None:
            raise UnknownConstantError(name)

        args = [self.get(dep) for dep in const.depends_on]
        with self._lock:
            if name not in self._cache:
                self._cache[name] = float(const.formula(*args))
                logger.debug("Evaluated %s = %r", name, self._cache[name])
            return self._cache[name]

    def __getitem__(self, name: str) -> float:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._primary or name in self._derived

    def __len__(self) -> int:
        return len(self._primary) + len(self._derived)

    def names(self) -> list[str]:
        """Primary names followed by derived names, in definition order."""
        return list(self._primary) + list(self._derived)

    def is_derived(self, name: str) -> bool:
        if name not in self:
            raise UnknownConstantError(name)
        return name in self._derived

    def info(self, name: str) -> PrimaryConstant | DerivedConstant:
        """Return the definition record for *name*."""
        if name in self._primary:
            return self._primary[name]
        if name in self._derived:
            return self._derived[name]
        raise UnknownConstantError(name)

    def as_dict(self) -> dict[str, float]:
        """Resolve every constant."""
        return {name: self.get(name) for name in self.names()}


# --- Literal tables ---

PRIMARY_CONSTANTS: tuple[PrimaryConstant, ...] = (
    PrimaryConstant("e", "1.602176634e-19", "C", "Elementary charge"),
    PrimaryConstant("c", "299792458", "m/s", "Speed of light in vacuum"),
    PrimaryConstant("h", "6.62607015e-34", "J*s", "Planck constant"),
    PrimaryConstant("R", "8.3144621", "J/(mol*K)", "Molar gas constant"),
    PrimaryConstant("G", "6.6743e-11", "m^3/(kg*s^2)", "Gravitational constant"),
    PrimaryConstant("m_e", "9.1093837015e-31", "kg", "Electron mass"),
    PrimaryConstant("ℏ", "1.05457e-34", "J*s", "Reduced Planck constant"),
    PrimaryConstant("ℏ_MeV", "6.58212e-22", "MeV*s", "Reduced Planck constant"),
    PrimaryConstant("α", "1/137.035999177", "dimensionless", "Fine-structure constant"),
    PrimaryConstant("θw", "28.76", "degree", "Weak mixing angle", convert_to="radian"),
    PrimaryConstant("gg", "1.214", "dimensionless", "Strong coupling constant"),
)

DERIVED_CONSTANTS: tuple[DerivedConstant, ...] = (
    DerivedConstant(
        "ε0",
        ("e", "α", "ℏ", "c"),
        lambda e, alpha, hbar, c: e**2 / (alpha * hbar * c * 4 * math.pi),
        "F/m",
        "Vacuum permittivity",
    ),
    DerivedConstant(
        "ge",
        ("α",),
        lambda alpha: math.sqrt(4 * math.pi * alpha),
        "dimensionless",
        "Electromagnetic coupling",
    ),
    DerivedConstant(
        "gW",
        ("ge", "θw"),
        lambda ge, theta_w: ge / math.sin(theta_w),
        "dimensionless",
        "Weak (charged-current) coupling",
    ),
    DerivedConstant(
        "gZ",
        ("ge", "θw"),
        lambda ge, theta_w: ge / (math.sin(theta_w) * math.cos(theta_w)),
        "dimensionless",
        "Neutral-current coupling",
    ),
)


@lru_cache(maxsize=1)
def default_constants() -> ConstantTable:
    """Return the shared table built from the bundled literals."""
    return ConstantTable(PRIMARY_CONSTANTS, DERIVED_CONSTANTS)
