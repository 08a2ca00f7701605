"""
Тесты для доменной модели Complex

Проверяет:
1. Создание (позиционное и именованное) и коэрцию int → float
2. Семантику значения (равенство, хеширование)
3. Immutability (frozen=True)
4. Толерантное сравнение is_close
5. Wire-сериализацию to_dict/from_dict
6. Строковое представление
"""

import pytest
from jsonschema import ValidationError as ContractValidationError
from pydantic import ValidationError

from src.core.domain import I, ONE, ZERO, Complex


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestComplexCreation:
    """Тесты создания Complex"""

    def test_positional(self) -> None:
        c = Complex(1.5, -2.0)
        assert c.re == 1.5
        assert c.im == -2.0

    def test_keyword(self) -> None:
        assert Complex(re=1.0, im=2.0) == Complex(1.0, 2.0)

    def test_defaults_to_zero(self) -> None:
        assert Complex() == ZERO

    def test_int_coerced_to_float(self) -> None:
        c = Complex(3, 4)
        assert isinstance(c.re, float)
        assert isinstance(c.im, float)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Complex("abc", 0.0)  # type: ignore[arg-type]

    def test_constants(self) -> None:
        assert ZERO == Complex(0.0, 0.0)
        assert ONE == Complex(1.0, 0.0)
        assert I == Complex(0.0, 1.0)


# =============================================================================
# СЕМАНТИКА ЗНАЧЕНИЯ
# =============================================================================


class TestComplexValueSemantics:
    """Тесты семантики значения"""

    def test_equal_by_value(self) -> None:
        assert Complex(1.0, 2.0) == Complex(1.0, 2.0)
        assert Complex(1.0, 2.0) is not Complex(1.0, 2.0)

    def test_not_equal_when_any_component_differs(self) -> None:
        assert Complex(1.0, 2.0) != Complex(1.0, 2.5)
        assert Complex(1.0, 2.0) != Complex(1.5, 2.0)

    def test_hashable(self) -> None:
        """Frozen модель хешируется по значению"""
        values = {Complex(1.0, 2.0), Complex(1.0, 2.0), Complex(0.0, 1.0)}
        assert len(values) == 2

    def test_immutable(self) -> None:
        """Complex должен быть immutable (frozen=True)"""
        c = Complex(1.0, 2.0)
        with pytest.raises(ValidationError):
            c.re = 5.0  # type: ignore[misc]
        assert c.re == 1.0


# =============================================================================
# ТОЛЕРАНТНОЕ СРАВНЕНИЕ
# =============================================================================


class TestComplexIsClose:
    """Тесты для Complex.is_close"""

    def test_close_values(self) -> None:
        assert Complex(1.0, 2.0).is_close(Complex(1.0 + 1e-12, 2.0 - 1e-12))

    def test_far_values(self) -> None:
        assert not Complex(1.0, 2.0).is_close(Complex(1.0, 2.1))

    def test_custom_tolerance(self) -> None:
        assert Complex(1.0, 2.0).is_close(Complex(1.01, 2.0), rel_tol=0.1)

    def test_near_zero(self) -> None:
        assert ZERO.is_close(Complex(1e-13, -1e-13))


# =============================================================================
# WIRE-СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestComplexSerialization:
    """Тесты to_dict/from_dict"""

    def test_to_dict(self) -> None:
        assert Complex(1.0, -2.0).to_dict() == {"re": 1.0, "im": -2.0}

    def test_from_dict(self) -> None:
        assert Complex.from_dict({"re": 3, "im": 4.5}) == Complex(3.0, 4.5)

    def test_from_dict_missing_field(self) -> None:
        with pytest.raises(ContractValidationError):
            Complex.from_dict({"re": 1.0})

    def test_from_dict_wrong_type(self) -> None:
        with pytest.raises(ContractValidationError):
            Complex.from_dict({"re": "1.0", "im": 0.0})

    def test_from_dict_extra_field(self) -> None:
        with pytest.raises(ContractValidationError):
            Complex.from_dict({"re": 1.0, "im": 0.0, "mod": 1.0})

    @pytest.mark.parametrize(
        "payload",
        [
            {"re": float("nan"), "im": 0.0},
            {"re": 0.0, "im": float("inf")},
            {"re": float("-inf"), "im": float("nan")},
        ],
    )
    def test_from_dict_non_finite_rejected(self, payload: dict) -> None:
        with pytest.raises(ContractValidationError):
            Complex.from_dict(payload)

    def test_json_round_trip(self) -> None:
        c = Complex(0.25, -7.5)
        assert Complex.model_validate_json(c.model_dump_json()) == c


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestComplexStr:
    """Тесты строкового представления"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Complex(1, 2), "1+2i"),
            (Complex(1, -2), "1-2i"),
            (Complex(0, 0), "0+0i"),
            (Complex(-0.5, 0.25), "-0.5+0.25i"),
        ],
    )
    def test_str(self, value: Complex, expected: str) -> None:
        assert str(value) == expected
