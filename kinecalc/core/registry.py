"""Function registry for KineCalc.

Maps function names to validated numeric operations and owns the one piece
of mutable state, the injected particle-mass table.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from kinecalc.core.errors import InvalidArgumentError, UnknownFunctionError
from kinecalc.core.functions import (
    decay_product_max_energy,
    lookup_mass,
    triangle_fn,
    two_particle_decay_energy,
)
from kinecalc.utils.validation import is_finite_real, require_sequence, validate_mass_table

logger = logging.getLogger(__name__)


class ParamKind(Enum):
    """Shape of a single positional argument."""

    NUMBER = "number"
    STRING = "string"
    LIST = "list"


@dataclass(frozen=True)
class RegisteredFunction:
    """A named function with its argument contract."""

    name: str
    func: Callable[..., float]
    params: tuple[ParamKind, ...]
    description: str = ""

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def signature(self) -> str:
        return f"{self.name}({', '.join(p.value for p in self.params)})"

    def check_args(self, args: tuple[Any, ...]) -> None:
        """Validate argument count and kinds.

        Raises:
            InvalidArgumentError: On a count or kind mismatch.
        """
        if len(args) != self.arity:
            raise InvalidArgumentError(
                f"{self.name} takes {self.arity} argument(s), got {len(args)}"
            )
        for i, (kind, value) in enumerate(zip(self.params, args)):
            if kind is ParamKind.NUMBER and not is_finite_real(value):
                raise InvalidArgumentError(
                    f"{self.name}: argument {i + 1} must be a finite number, got {value!r}"
                )
            if kind is ParamKind.STRING and not isinstance(value, str):
                raise InvalidArgumentError(
                    f"{self.name}: argument {i + 1} must be a string, got {value!r}"
                )
            if kind is ParamKind.LIST:
                require_sequence(f"{self.name} argument {i + 1}", value)

    def __call__(self, *args: Any) -> float:
        self.check_args(args)
        return self.func(*args)


class MassContext:
    """Holder for the active particle-mass table.

    Replacement is wholesale: the new table is copied into a read-only
    mapping and swapped in with a single assignment, so a reader holds
    either the old table or the new one, never a mix.
    """

    def __init__(self, table: Mapping[str, Any] | None = None) -> None:
        self._table: Mapping[str, Any] = MappingProxyType({})
        if table is not None:
            self.replace(table)

    @property
    def table(self) -> Mapping[str, Any]:
        return self._table

    @property
    def is_initialized(self) -> bool:
        return len(self._table) > 0

    def replace(self, table: Mapping[str, Any]) -> None:
        if not isinstance(table, Mapping):
            raise InvalidArgumentError("Mass data must be a mapping of particle -> mass")
        self._table = MappingProxyType(dict(table))

    def lookup(self, key: str) -> float:
        return lookup_mass(self._table, key)


class FunctionRegistry:
    """Registry of named calculator functions.

    Usage::

        registry = create_registry()
        registry.set_masses_data(default_masses())
        registry.call("TwoParticleDecayEnergy", registry.m("K+"), 105.66, 0.0, 1)

    """

    def __init__(self, masses: MassContext | None = None) -> None:
        self._registry: dict[str, RegisteredFunction] = {}
        self.masses = masses if masses is not None else MassContext()

    def register(
        self,
        name: str,
        func: Callable[..., float],
        params: tuple[ParamKind, ...],
        description: str = "",
    ) -> RegisteredFunction:
        """Register a function under *name*.

        Raises:
            TypeError: If *func* is not callable.
            ValueError: If *name* is already registered.
        """
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        if name in self._registry:
            raise ValueError(f"Function '{name}' is already registered")

        entry = RegisteredFunction(name=name, func=func, params=tuple(params), description=description)
        self._registry[name] = entry
        logger.debug("Registered function: %s", entry.signature)
        return entry

    def get(self, name: str) -> RegisteredFunction:
        """Resolve a function name.

        Raises:
            UnknownFunctionError: If *name* is not registered.
        """
        if name not in self._registry:
            raise UnknownFunctionError(name)
        return self._registry[name]

    def call(self, name: str, *args: Any) -> float:
        """Invoke a registered function positionally."""
        entry = self.get(name)
        logger.debug("Calling %s%r", name, args)
        return entry(*args)

    def list_functions(self) -> list[str]:
        """Return names of all registered functions."""
        return list(self._registry.keys())

    def summary(self) -> list[dict[str, Any]]:
        """Return a summary of all registered functions."""
        return [
            {
                "name": entry.name,
                "signature": entry.signature,
                "description": entry.description,
            }
            for entry in self._registry.values()
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    # --- Particle masses ---

    def set_masses_data(self, table: Mapping[str, Any]) -> None:
        """Replace the active mass table.

        The previous table is discarded, not merged. Entries that ``m()``
        would reject are logged but still stored; lookups of them fail.
        """
        self.masses.replace(table)
        result = validate_mass_table(table)
        for msg in result.errors + result.warnings:
            logger.warning("Mass table: %s", msg.message)
        logger.info("Loaded %d particle masses", len(self.masses.table))

    def m(self, key: str) -> float:
        """Rest mass of particle *key* in MeV/c²."""
        return self.call("m", key)


def create_registry(masses: Mapping[str, Any] | None = None) -> FunctionRegistry:
    """Build a registry holding the built-in functions.

    Args:
        masses: Optional flat mass table to inject immediately. Without it,
            every ``m()`` lookup fails until ``set_masses_data`` is called.
    """
    registry = FunctionRegistry()
    registry.register(
        "m",
        lambda key: registry.masses.lookup(key),
        (ParamKind.STRING,),
        "Rest mass of a particle [MeV/c²]",
    )
    registry.register(
        "triangleFn",
        triangle_fn,
        (ParamKind.LIST,),
        "Σ x_i² − 2 Σ_{i<j} x_i x_j",
    )
    registry.register(
        "TwoParticleDecayEnergy",
        two_particle_decay_energy,
        (ParamKind.NUMBER, ParamKind.NUMBER, ParamKind.NUMBER, ParamKind.NUMBER),
        "Energy of product n in a two-body decay m → m1 + m2 [MeV]",
    )
    registry.register(
        "DecayProductMaxEnergy",
        decay_product_max_energy,
        (ParamKind.NUMBER, ParamKind.NUMBER, ParamKind.LIST),
        "Maximum energy of product m1 when the rest recoil as Σ products [MeV]",
    )
    if masses is not None:
        registry.set_masses_data(masses)
    return registry
