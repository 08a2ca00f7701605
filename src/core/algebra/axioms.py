"""
Field Axioms — рантайм-проверка аксиом поля на выборке

Проверяет, что реализация Field[Complex] удовлетворяет аксиомам поля на
всех наборах элементов из заданной выборки:
- Коммутативность и ассоциативность сложения и умножения
- Нейтральные элементы (zero, one)
- Обратные элементы (аддитивный; мультипликативный только для
  обратимых элементов)
- Дистрибутивность умножения относительно сложения
- Нетривиальность (zero != one)

Равенство сравнивается с толерантностью (Complex.is_close), так как
ассоциативность и дистрибутивность float выполняются лишь приближённо.

Это не доказательство: проверка покрывает только переданную выборку.
"""

from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Callable, Optional, Sequence

import structlog

from src.core.algebra.field import Field
from src.core.domain.complex_number import Complex
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    validate_tolerance,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Axiom(str, Enum):
    """Аксиомы поля"""

    ADD_COMMUTATIVE = "add_commutative"
    ADD_ASSOCIATIVE = "add_associative"
    ADD_IDENTITY = "add_identity"
    ADD_INVERSE = "add_inverse"
    MUL_COMMUTATIVE = "mul_commutative"
    MUL_ASSOCIATIVE = "mul_associative"
    MUL_IDENTITY = "mul_identity"
    MUL_INVERSE = "mul_inverse"
    DISTRIBUTIVE = "distributive"
    NONTRIVIAL = "nontrivial"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AxiomCheckConfig:
    """Конфигурация проверки аксиом.

    Толерантности для сравнения левой и правой частей тождеств.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_tolerance(self.rel_tol, "rel_tol")
        validate_tolerance(self.abs_tol, "abs_tol")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AxiomCheckResult:
    """Результат проверки одной аксиомы."""

    axiom: Axiom
    holds: bool
    checked_cases: int

    # Первый найденный контрпример (аргументы тождества)
    counterexample: Optional[tuple[Complex, ...]] = None


@dataclass(frozen=True)
class FieldAxiomReport:
    """Сводный результат проверки всех аксиом."""

    results: tuple[AxiomCheckResult, ...]

    @property
    def all_hold(self) -> bool:
        return all(r.holds for r in self.results)

    def failed(self) -> tuple[AxiomCheckResult, ...]:
        return tuple(r for r in self.results if not r.holds)

    def result_for(self, axiom: Axiom) -> AxiomCheckResult:
        for r in self.results:
            if r.axiom == axiom:
                return r
        raise KeyError(axiom)


# =============================================================================
# CHECKER
# =============================================================================


def _check_identity(
    axiom: Axiom,
    arity: int,
    samples: Sequence[Complex],
    identity: Callable[..., tuple[Complex, Complex]],
    config: AxiomCheckConfig,
) -> AxiomCheckResult:
    """Проверка тождества lhs(args) ≈ rhs(args) на всех наборах из samples."""
    checked = 0
    for args in product(samples, repeat=arity):
        lhs, rhs = identity(*args)
        checked += 1
        if not lhs.is_close(rhs, config.rel_tol, config.abs_tol):
            return AxiomCheckResult(axiom, False, checked, tuple(args))
    return AxiomCheckResult(axiom, True, checked)


def check_field_axioms(
    field: Field[Complex],
    samples: Sequence[Complex],
    config: AxiomCheckConfig | None = None,
) -> FieldAxiomReport:
    """
    Проверка аксиом поля на выборке.

    Трёхместные аксиомы перебирают len(samples)^3 наборов: выборка
    должна быть небольшой.

    Args:
        field: Проверяемая реализация поля
        samples: Элементы для подстановки в тождества
        config: Толерантности (опционально, используется default)

    Returns:
        FieldAxiomReport с результатом по каждой аксиоме
    """
    config = config or AxiomCheckConfig()
    f = field

    identities: list[tuple[Axiom, int, Callable[..., tuple[Complex, Complex]]]] = [
        (Axiom.ADD_COMMUTATIVE, 2, lambda a, b: (f.add(a, b), f.add(b, a))),
        (
            Axiom.ADD_ASSOCIATIVE,
            3,
            lambda a, b, c: (f.add(f.add(a, b), c), f.add(a, f.add(b, c))),
        ),
        (Axiom.ADD_IDENTITY, 1, lambda a: (f.add(a, f.zero), a)),
        (Axiom.ADD_INVERSE, 1, lambda a: (f.add(a, f.neg(a)), f.zero)),
        (Axiom.MUL_COMMUTATIVE, 2, lambda a, b: (f.mul(a, b), f.mul(b, a))),
        (
            Axiom.MUL_ASSOCIATIVE,
            3,
            lambda a, b, c: (f.mul(f.mul(a, b), c), f.mul(a, f.mul(b, c))),
        ),
        (Axiom.MUL_IDENTITY, 1, lambda a: (f.mul(a, f.one), a)),
        (
            Axiom.DISTRIBUTIVE,
            3,
            lambda a, b, c: (f.mul(a, f.add(b, c)), f.add(f.mul(a, b), f.mul(a, c))),
        ),
    ]

    results = [
        _check_identity(axiom, arity, samples, identity, config)
        for axiom, arity, identity in identities
    ]

    invertible = [a for a in samples if f.is_invertible(a)]
    results.append(
        _check_identity(
            Axiom.MUL_INVERSE,
            1,
            invertible,
            lambda a: (f.mul(a, f.inv(a)), f.one),
            config,
        )
    )

    nontrivial = not f.zero.is_close(f.one, config.rel_tol, config.abs_tol)
    results.append(AxiomCheckResult(Axiom.NONTRIVIAL, nontrivial, 1))

    for r in results:
        if not r.holds:
            logger.warning(
                "field_axiom_failed",
                axiom=r.axiom.value,
                counterexample=[str(c) for c in r.counterexample or ()],
            )

    report = FieldAxiomReport(results=tuple(results))
    logger.debug(
        "field_axioms_checked",
        samples=len(samples),
        all_hold=report.all_hold,
    )
    return report
