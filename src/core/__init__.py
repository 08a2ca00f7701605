"""
Core domain models, algebra and numerical primitives.

Complex numbers as pairs of reals: the value type, field operations,
polar conversion and wire contracts. Everything here is pure and
independent of external systems.
"""
