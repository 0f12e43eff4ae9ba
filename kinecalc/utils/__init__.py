"""Utility modules for KineCalc."""

from kinecalc.utils.units import convert
from kinecalc.utils.validation import ValidationResult, validate_mass_table

__all__ = ["ValidationResult", "convert", "validate_mass_table"]
