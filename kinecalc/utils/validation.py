"""Argument checks and mass-table validation for KineCalc."""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from kinecalc.core.errors import InvalidArgumentError


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)


# --- Fail-fast argument checks ---


def is_finite_real(value: Any) -> bool:
    """True for finite real numbers; ``bool`` is not a number here."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def require_number(name: str, value: Any) -> float:
    """Return *value* as a float or raise InvalidArgumentError."""
    if not is_finite_real(value):
        raise InvalidArgumentError(f"Argument '{name}' must be a finite number, got {value!r}")
    return float(value)


def require_sequence(name: str, values: Any, min_length: int = 0) -> list[float]:
    """Return *values* as a list of floats.

    Accepts lists, tuples and 1-D numpy arrays of finite numbers.

    Raises:
        InvalidArgumentError: Wrong container, too short, or a non-numeric item.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidArgumentError(
                f"Argument '{name}' must be a 1-D list, got array of shape {values.shape}"
            )
        values = values.tolist()
    elif not isinstance(values, (list, tuple)):
        raise InvalidArgumentError(f"Argument '{name}' must be a list of numbers")

    if len(values) < min_length:
        raise InvalidArgumentError(
            f"Argument '{name}' requires a list of at least {min_length} numbers, "
            f"got {len(values)}"
        )
    return [require_number(f"{name}[{i}]", x) for i, x in enumerate(values)]


# --- Mass table checks ---


def validate_mass_table(table: Mapping[Any, Any]) -> ValidationResult:
    """Check an injected particle-mass table.

    Entries that ``m()`` would reject are errors; negative masses are
    warnings; massless entries are noted.
    """
    result = ValidationResult()
    for key, value in table.items():
        if not isinstance(key, str):
            result.error(str(key), f"Particle key {key!r} is not a string", value=value)
            continue
        if not is_finite_real(value):
            result.error(key, f"Mass of '{key}' is not a finite number", value=value)
        elif value < 0:
            result.warning(key, f"Mass of '{key}' is negative ({value} MeV)", value=value)
        elif value == 0:
            result.info(key, f"'{key}' is massless", value=value)
    return result
