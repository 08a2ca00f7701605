"""
Contract Validation Module

Модуль для валидации JSON wire-представлений Complex и полярной формы.
"""

from .validators import (
    ComplexValueValidator,
    ContractValidator,
    FiniteNumberValidator,
    PolarCoordinatesValidator,
    SchemaLoader,
    default_loader,
    validate_complex_value,
    validate_polar_coordinates,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FiniteNumberValidator",
    "ComplexValueValidator",
    "PolarCoordinatesValidator",
    # Functions
    "default_loader",
    "validate_complex_value",
    "validate_polar_coordinates",
]
