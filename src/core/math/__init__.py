"""
Core math modules

Численные примитивы: толерантные сравнения и проверки конечности.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Epsilon comparisons
    is_close,
    # Validation
    is_valid_float,
    validate_finite,
    validate_tolerance,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_finite",
    "validate_tolerance",
]
