"""Error kinds raised by KineCalc functions and tables.

Every error carries a ``kind`` naming the failure so an evaluator can show
it to the user as-is. Each class also derives from the closest builtin
exception, so ``except ValueError`` and friends keep working.
"""

from __future__ import annotations


class KineCalcError(Exception):
    """Base class for all KineCalc errors."""

    kind: str = "KineCalcError"


class InvalidArgumentError(KineCalcError, ValueError):
    """Raised when arguments have the wrong shape, type or count."""

    kind = "InvalidArgument"


class UnknownParticleError(KineCalcError, LookupError):
    """Raised when a particle key is absent from the active mass table."""

    kind = "UnknownParticle"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Mass for particle '{key}' not found")


class InvalidMassValueError(KineCalcError, ValueError):
    """Raised when a mass table entry is not a finite number."""

    kind = "InvalidMassValue"


class UnknownConstantError(KineCalcError, LookupError):
    """Raised when a constant name is neither primary nor derived."""

    kind = "UnknownConstant"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Constant '{name}' is not defined")


class ForbiddenDecayError(KineCalcError, ValueError):
    """Raised when the parent mass is below the sum of the product masses."""

    kind = "ForbiddenDecay"


class ZeroParentMassError(KineCalcError, ZeroDivisionError):
    """Raised when a decay formula would divide by a zero parent mass."""

    kind = "ZeroParentMass"


class UnknownFunctionError(KineCalcError, LookupError):
    """Raised when a function name is not registered."""

    kind = "UnknownFunction"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Function '{name}' is not registered")


class ConstantDefinitionError(KineCalcError, ValueError):
    """Raised when a derived constant refers to an undefined or later constant."""

    kind = "ConstantDefinition"
