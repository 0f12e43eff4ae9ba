"""Core calculation modules for KineCalc.

This package contains the pieces an expression evaluator calls into:
- constants: primary and derived physical constants
- masses: bundled particle rest-mass database (MeV/c²)
- functions: decay kinematics and the pairwise triangle identity
- registry: named, validated functions plus the injected mass table
- lists: named list variables built from registry calls
- config: calculator settings and session start-up
"""
