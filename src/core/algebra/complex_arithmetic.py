"""
Complex Arithmetic — операции поля над Complex

Чистые функции над immutable значениями:
- add, neg, mul: тотальные, не могут завершиться ошибкой
- inv: не определена для нулевого квадрата модуля → DomainError
- sub, div, conj, norm_sq, of_real: производные операции

ФОРМУЛЫ:
    add(a, b) = (a.re + b.re, a.im + b.im)
    neg(a)    = (-a.re, -a.im)
    mul(a, b) = (a.re*b.re - a.im*b.im, a.re*b.im + a.im*b.re)
    inv(a)    = (a.re / n, -a.im / n),  n = a.re^2 + a.im^2
              (вычисляется с масштабированием на max(|re|, |im|))

Квадрат модуля сравнивается с нулём точно (n == 0.0): значения, чей n
теряется в underflow, тоже считаются необратимыми.
"""

import structlog

from src.core.domain.complex_number import Complex

logger = structlog.get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainError(Exception):
    """
    Операция вызвана вне своей области определения.

    Возникает при обращении (или делении на) значения с нулевым
    квадратом модуля.
    """

    pass


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: Complex, b: Complex) -> Complex:
    """Покомпонентная сумма."""
    return Complex(a.re + b.re, a.im + b.im)


def neg(a: Complex) -> Complex:
    """Покомпонентное отрицание."""
    return Complex(-a.re, -a.im)


def mul(a: Complex, b: Complex) -> Complex:
    """
    Комплексное умножение.

    Examples:
        >>> mul(Complex(1, 2), Complex(3, -1))
        Complex(re=5.0, im=5.0)
    """
    return Complex(
        a.re * b.re - a.im * b.im,
        a.re * b.im + a.im * b.re,
    )


def norm_sq(a: Complex) -> float:
    """Квадрат модуля re^2 + im^2 (знаменатель обращения)."""
    return a.re * a.re + a.im * a.im


def inv(a: Complex) -> Complex:
    """
    Мультипликативное обращение.

    Компоненты предварительно делятся на s = max(|re|, |im|), поэтому
    n не переполняется для больших конечных значений:
        r = re / s, i = im / s, m = r^2 + i^2 ∈ [1, 2]
        inv(a) = ((r / m) / s, (-i / m) / s)

    Args:
        a: Обращаемое значение

    Returns:
        (a.re / n, -a.im / n), где n = a.re^2 + a.im^2

    Raises:
        DomainError: если n == 0.0
    """
    n = norm_sq(a)

    if n == 0.0:
        logger.warning(
            "complex_inverse_domain_violation",
            re=a.re,
            im=a.im,
        )
        raise DomainError(
            f"Multiplicative inverse undefined: squared magnitude of "
            f"{a.re!r}{a.im:+}i is zero"
        )

    s = max(abs(a.re), abs(a.im))
    r = a.re / s
    i = a.im / s
    m = r * r + i * i

    return Complex((r / m) / s, (-i / m) / s)


# =============================================================================
# ПРОИЗВОДНЫЕ ОПЕРАЦИИ
# =============================================================================


def sub(a: Complex, b: Complex) -> Complex:
    """Разность a - b = add(a, neg(b))."""
    return add(a, neg(b))


def div(a: Complex, b: Complex) -> Complex:
    """
    Частное a / b = mul(a, inv(b)).

    Raises:
        DomainError: если квадрат модуля b равен нулю
    """
    return mul(a, inv(b))


def conj(a: Complex) -> Complex:
    """Комплексное сопряжение."""
    return Complex(a.re, -a.im)


def of_real(x: float) -> Complex:
    """Вложение вещественного числа: x → (x, 0)."""
    return Complex(x, 0.0)
