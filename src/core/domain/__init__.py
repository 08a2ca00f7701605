"""
Domain models and value objects.

Contains the Complex value type and its distinguished constants.
"""

from src.core.domain.complex_number import I, ONE, ZERO, Complex

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
]
