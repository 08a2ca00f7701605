"""
Wire-контракты Complex и полярной формы

JSON Schema (Draft 2020-12) поставляются внутри пакета (schema/*.json)
и читаются через importlib.resources при первом обращении, а не при
импорте модуля.

Схемы:
- complex_value.json      ({"re": number, "im": number})
- polar_coordinates.json  ({"angle": number, "radius": number})

Тип "number" сужен до конечных чисел: стандартный type checker
jsonschema принимает float('nan') и float('inf').
"""

import json
import math
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, validators

SCHEMA_PACKAGE = "src.core.contracts"


# =============================================================================
# FINITE NUMBER VALIDATOR
# =============================================================================


def _is_finite_number(checker: Any, instance: Any) -> bool:
    """Тип number без NaN/Inf; int проверяется только базовым checker."""
    if not Draft202012Validator.TYPE_CHECKER.is_type(instance, "number"):
        return False
    return not isinstance(instance, float) or math.isfinite(instance)


FiniteNumberValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine(
        "number", _is_finite_number
    ),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш схем.

    По умолчанию читает ресурсы пакета; schema_dir (любой объект с
    is_dir/joinpath/read_text, например pathlib.Path) подменяет источник.
    """

    def __init__(self, schema_dir=None):
        self._schema_dir = schema_dir or files(SCHEMA_PACKAGE).joinpath("schema")
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения, с meta-validation.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = self._schema_dir.joinpath(f"{schema_name}.json")
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            FiniteNumberValidator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик ресурсов пакета, создаётся при первом вызове."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка словаря против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = FiniteNumberValidator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class ComplexValueValidator(ContractValidator):
    def __init__(self):
        super().__init__("complex_value")


class PolarCoordinatesValidator(ContractValidator):
    def __init__(self):
        super().__init__("polar_coordinates")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_value(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не complex_value."""
    ComplexValueValidator().validate(data)


def validate_polar_coordinates(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не polar_coordinates."""
    PolarCoordinatesValidator().validate(data)
