"""KineCalc — particle kinematics formulas and physical constants."""

__app_name__ = "KineCalc"
__version__ = "0.1.0"
