"""
Polar — конверсия Complex ↔ (angle, radius)

ФОРМУЛЫ:
    to_polar(c)              = (atan(c.im / c.re), hypot(c.re, c.im))
    from_polar(angle, radius) = (radius * cos(angle), radius * sin(angle))

ОГРАНИЧЕНИЕ: угол вычисляется одноаргументным арктангенсом отношения
im / re, поэтому информация о квадранте теряется при re < 0, а угол
всегда лежит в [-π/2, π/2]. Это сознательное поведение, не atan2.

Свойство to_polar(from_polar(angle, radius)) == (angle, radius) выполняется
только в главной области: -π/2 < angle < π/2 и radius >= 0. Вне её
round-trip расходится (см. is_principal / round_trip_holds).

Случай re == 0: угол равен пределу atan(±inf) = copysign(π/2, im); в начале
координат угол равен 0.0.
"""

import math
from typing import NamedTuple

from src.core.domain.complex_number import Complex
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
)


# =============================================================================
# TYPES
# =============================================================================


class PolarCoordinates(NamedTuple):
    """Полярная форма: угол (радианы) и радиус."""

    angle: float
    radius: float


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_polar(c: Complex) -> PolarCoordinates:
    """
    Прямоугольная форма → полярная.

    Args:
        c: Комплексное значение

    Returns:
        PolarCoordinates(angle, radius), angle ∈ [-π/2, π/2]

    Examples:
        >>> to_polar(Complex(1, 1))
        PolarCoordinates(angle=0.7853981633974483, radius=1.4142135623730951)
        >>> to_polar(Complex(-1, -1)).angle  # квадрант потерян
        0.7853981633974483
    """
    radius = math.hypot(c.re, c.im)

    if c.re == 0.0:
        if c.im == 0.0:
            return PolarCoordinates(0.0, radius)
        return PolarCoordinates(math.copysign(math.pi / 2, c.im), radius)

    return PolarCoordinates(math.atan(c.im / c.re), radius)


def from_polar(angle: float, radius: float) -> Complex:
    """
    Полярная форма → прямоугольная. Тотальна (radius может быть отрицательным).

    Бесконечный или NaN угол даёт NaN-компоненты.
    """
    if not is_valid_float(angle):
        return Complex(math.nan, math.nan)

    return Complex(radius * math.cos(angle), radius * math.sin(angle))


# =============================================================================
# ROUND-TRIP
# =============================================================================


def is_principal(angle: float, radius: float) -> bool:
    """
    Проверка главной области, где round-trip ожидаемо выполняется.

    Returns:
        True если -π/2 < angle < π/2 и radius >= 0
    """
    return -math.pi / 2 < angle < math.pi / 2 and radius >= 0.0


def round_trip_holds(
    angle: float,
    radius: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Проверка свойства to_polar(from_polar(angle, radius)) ≈ (angle, radius).

    Свойство ложно в общем случае: вне главной области, а также при
    radius == 0 с ненулевым углом (начало координат → угол 0.0).

    Args:
        angle: Исходный угол
        radius: Исходный радиус
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если обе компоненты восстановлены в пределах толерантности
    """
    back = to_polar(from_polar(angle, radius))
    return is_close(back.angle, angle, rel_tol, abs_tol) and is_close(
        back.radius, radius, rel_tol, abs_tol
    )
