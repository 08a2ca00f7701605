"""
Complex — Модель комплексного числа

Immutable Pydantic модель: пара вещественных чисел (re, im).

Семантика значения: два Complex равны тогда и только тогда, когда равны
обе компоненты. Идентичности кроме значения нет, все операции создают
новый экземпляр.

Wire-формат: {"re": <number>, "im": <number>} (контракт complex_value).
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from src.core.contracts import validate_complex_value
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число в прямоугольной форме re + im·i.

    Immutable модель (frozen=True): изменение полей запрещено,
    любая операция возвращает новый экземпляр.

    Допускает позиционную конструкцию: Complex(1, 2) == Complex(re=1, im=2).
    """

    re: float = Field(0.0, description="Вещественная часть")
    im: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, re: float = 0.0, im: float = 0.0, **data: Any) -> None:
        super().__init__(re=re, im=im, **data)

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с учётом погрешности float.

        Args:
            other: Второе значение
            rel_tol: Относительная толерантность
            abs_tol: Абсолютная толерантность

        Returns:
            True если обе компоненты близки
        """
        return is_close(self.re, other.re, rel_tol, abs_tol) and is_close(
            self.im, other.im, rel_tol, abs_tol
        )

    def to_dict(self) -> Dict[str, float]:
        """Wire-представление {"re": ..., "im": ...}."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Complex":
        """
        Создание из wire-представления с проверкой контракта.

        Raises:
            jsonschema.ValidationError: Если data не соответствует complex_value
        """
        validate_complex_value(data)
        return cls(data["re"], data["im"])

    def __str__(self) -> str:
        sign = "-" if self.im < 0 else "+"
        return f"{self.re:g}{sign}{abs(self.im):g}i"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Complex = Complex(0.0, 0.0)
ONE: Complex = Complex(1.0, 0.0)
I: Complex = Complex(0.0, 1.0)
