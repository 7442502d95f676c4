"""
Big Integer Contract Validators

Проверка JSON снапшота BigInteger в два уровня:
1. Структура по JSON Schema (contracts/schema/big_integer.json): поля,
   типы, диапазон limb, каноническая форма decimal, знак нуля
2. Представление: старший limb ненулевой и decimal совпадает с limbs.
   JSON Schema не умеет адресовать последний элемент массива и не
   вычисляет значение, поэтому эти правила проверяются здесь и
   сообщаются тем же jsonschema.ValidationError

Оба уровня вместе принимают ровно те payload, что принимает
BigIntegerSnapshot.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError

from src.core.math.decimal_text import format_decimal

# Корень проекта: 4 уровня вверх от этого файла
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

BIG_INTEGER_SCHEMA: Final[str] = "big_integer"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик контрактов из каталога схем.

    Кэширует скомпилированные Draft 2020-12 валидаторы: схема читается
    и проходит meta-validation один раз на имя.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR) -> None:
        self._schema_dir = schema_dir
        self._validators: Dict[str, Draft202012Validator] = {}

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """
        Скомпилированный валидатор для схемы.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        validator = Draft202012Validator(schema)
        self._validators[schema_name] = validator
        return validator

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """Схема как dict (тот же объект при повторных вызовах)."""
        return self.validator_for(schema_name).schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# BIG INTEGER VALIDATOR
# =============================================================================


class BigIntegerValidator:
    """
    Валидатор снапшота BigInteger (big_integer.json + правила представления).

    Examples:
        >>> BigIntegerValidator().is_valid(
        ...     {"schema_version": "1", "limbs": [5, 0], "negative": False, "decimal": "5"}
        ... )
        False
    """

    def __init__(self, loader: Optional[SchemaLoader] = None) -> None:
        self._validator = (loader or _SCHEMA_LOADER).validator_for(BIG_INTEGER_SCHEMA)

    @property
    def schema(self) -> Dict[str, Any]:
        return self._validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Полная проверка снапшота.

        Структурные ошибки сообщаются раньше ошибок представления:
        правила представления полагаются на уже проверенные типы.

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        self._validator.validate(data)
        self._check_representation(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка без exception."""
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    @staticmethod
    def _check_representation(data: Dict[str, Any]) -> None:
        limbs = data["limbs"]
        if limbs and limbs[-1] == 0:
            raise ValidationError(
                f"limbs must not end with a zero limb: {limbs}",
                validator="normalized",
                path=["limbs", len(limbs) - 1],
                instance=limbs,
            )

        expected = format_decimal(limbs, data["negative"])
        if data["decimal"] != expected:
            raise ValidationError(
                f"decimal {data['decimal']!r} does not match limbs (expected {expected!r})",
                validator="matches_limbs",
                path=["decimal"],
                instance=data["decimal"],
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота big_integer.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    BigIntegerValidator().validate(data)
