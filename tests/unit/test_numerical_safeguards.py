"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-константы
2. NaN/Inf проверки
3. Epsilon-сравнения float
4. Валидацию толерантностей
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_finite,
    validate_tolerance,
)


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestEpsilonConstants:
    """Тесты epsilon-констант"""

    def test_constants_positive(self) -> None:
        """Все толерантности положительные"""
        assert EPS_FLOAT_COMPARE_REL > 0
        assert EPS_FLOAT_COMPARE_ABS > 0

    def test_abs_tighter_than_rel(self) -> None:
        """Абсолютная толерантность строже относительной"""
        assert EPS_FLOAT_COMPARE_ABS < EPS_FLOAT_COMPARE_REL


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_finite_passes(self) -> None:
        validate_finite(3.0, "x")

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(ValueError, match="x must be a valid float"):
            validate_finite(value, "x")


class TestValidateTolerance:
    """Тесты для validate_tolerance"""

    def test_positive_passes(self) -> None:
        validate_tolerance(1e-9, "rel_tol")

    @pytest.mark.parametrize("value", [0.0, -1e-9])
    def test_non_positive_raises(self, value: float) -> None:
        with pytest.raises(ValueError, match="rel_tol must be positive"):
            validate_tolerance(value, "rel_tol")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_tolerance(math.nan, "abs_tol")


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_equal_values(self) -> None:
        assert is_close(1.0, 1.0)

    def test_within_relative_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1e10, 1e10 + 1.0)

    def test_outside_tolerance(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_near_zero_uses_abs_tol(self) -> None:
        """Около нуля работает абсолютная толерантность"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-11)

    def test_custom_tolerances(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 0.01, abs_tol=0.1)

    def test_nan_never_close(self) -> None:
        assert not is_close(math.nan, math.nan)
