"""
Algebra modules

Арифметика комплексных чисел, поле Complex, проверка аксиом поля
и полярная конверсия.
"""

# Complex Arithmetic
from src.core.algebra.complex_arithmetic import (
    DomainError,
    add,
    conj,
    div,
    inv,
    mul,
    neg,
    norm_sq,
    of_real,
    sub,
)

# Field
from src.core.algebra.field import COMPLEX_FIELD, ComplexField, Field

# Field Axioms
from src.core.algebra.axioms import (
    Axiom,
    AxiomCheckConfig,
    AxiomCheckResult,
    FieldAxiomReport,
    check_field_axioms,
)

# Polar
from src.core.algebra.polar import (
    PolarCoordinates,
    from_polar,
    is_principal,
    round_trip_holds,
    to_polar,
)

__all__ = [
    # Complex Arithmetic — Exceptions
    "DomainError",
    # Complex Arithmetic — Functions
    "add",
    "conj",
    "div",
    "inv",
    "mul",
    "neg",
    "norm_sq",
    "of_real",
    "sub",
    # Field — Types
    "Field",
    "ComplexField",
    "COMPLEX_FIELD",
    # Field Axioms — Types
    "Axiom",
    "AxiomCheckConfig",
    "AxiomCheckResult",
    "FieldAxiomReport",
    # Field Axioms — Functions
    "check_field_axioms",
    # Polar — Types
    "PolarCoordinates",
    # Polar — Functions
    "from_polar",
    "is_principal",
    "round_trip_holds",
    "to_polar",
]
