"""
Field — интерфейс поля и его реализация над Complex

Поле здесь задано как набор именованных операций (capability bundle) с контрактом
аксиом: коммутативность, ассоциативность, дистрибутивность, нейтральные
элементы, обратные элементы. Аксиомы не доказываются рантаймом: они
выполняются по построению арифметики и проверяются тестами и
src.core.algebra.axioms.check_field_axioms.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.core.algebra import complex_arithmetic
from src.core.domain.complex_number import ONE, ZERO, Complex

T = TypeVar("T")


# =============================================================================
# FIELD INTERFACE
# =============================================================================


class Field(ABC, Generic[T]):
    """
    Интерфейс поля над элементами типа T.

    Обязательные операции: zero, one, add, neg, mul, inv.
    Производные: sub, div.
    """

    @property
    @abstractmethod
    def zero(self) -> T:
        """Нейтральный элемент сложения."""

    @property
    @abstractmethod
    def one(self) -> T:
        """Нейтральный элемент умножения."""

    @abstractmethod
    def add(self, a: T, b: T) -> T:
        """Сложение."""

    @abstractmethod
    def neg(self, a: T) -> T:
        """Аддитивный обратный."""

    @abstractmethod
    def mul(self, a: T, b: T) -> T:
        """Умножение."""

    @abstractmethod
    def inv(self, a: T) -> T:
        """Мультипликативный обратный (не определён для zero)."""

    @abstractmethod
    def is_invertible(self, a: T) -> bool:
        """Определён ли inv(a)."""

    def sub(self, a: T, b: T) -> T:
        return self.add(a, self.neg(b))

    def div(self, a: T, b: T) -> T:
        return self.mul(a, self.inv(b))


# =============================================================================
# COMPLEX FIELD
# =============================================================================


class ComplexField(Field[Complex]):
    """Поле комплексных чисел: делегирует в complex_arithmetic."""

    @property
    def zero(self) -> Complex:
        return ZERO

    @property
    def one(self) -> Complex:
        return ONE

    def add(self, a: Complex, b: Complex) -> Complex:
        return complex_arithmetic.add(a, b)

    def neg(self, a: Complex) -> Complex:
        return complex_arithmetic.neg(a)

    def mul(self, a: Complex, b: Complex) -> Complex:
        return complex_arithmetic.mul(a, b)

    def inv(self, a: Complex) -> Complex:
        """
        Raises:
            DomainError: если квадрат модуля a равен нулю
        """
        return complex_arithmetic.inv(a)

    def is_invertible(self, a: Complex) -> bool:
        return complex_arithmetic.norm_sq(a) != 0.0


# Глобальный экземпляр поля
COMPLEX_FIELD = ComplexField()
