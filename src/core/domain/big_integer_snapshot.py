"""
BigIntegerSnapshot: сериализуемый снапшот значения BigInteger

Immutable Pydantic модель, фиксирующая внутреннее представление
(limbs + знак) вместе с канонической десятичной записью.
Полная совместимость с JSON Schema (contracts/schema/big_integer.json).

ИНВАРИАНТЫ (проверяются model_validator):
1. Нет старшего нулевого limb (нормализация)
2. Ноль никогда не отрицательный
3. decimal совпадает с десятичной записью limbs
"""

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from src.core.math.big_integer import BigInteger
from src.core.math.decimal_text import format_decimal
from src.core.math.limbs import LIMB_MASK

Limb = Annotated[int, Field(ge=0, le=LIMB_MASK)]


class BigIntegerSnapshot(BaseModel):
    """
    Снапшот значения BigInteger.

    Используется для передачи значения между процессами и хранения
    в JSON: limbs позволяют восстановить значение без разбора строки,
    decimal даёт человекочитаемую форму и контроль целостности.
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    limbs: list[Limb] = Field(
        default_factory=list,
        description="Magnitude по основанию 2^32, младший limb первым",
    )
    negative: bool = Field(False, description="Знак (True для отрицательных)")
    decimal: str = Field(
        ...,
        pattern="^(0|-?[1-9][0-9]*)$",
        description="Каноническая десятичная запись",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_representation(self) -> "BigIntegerSnapshot":
        """Проверка нормализации и согласованности decimal с limbs"""
        if self.limbs and self.limbs[-1] == 0:
            raise ValueError(f"limbs must not end with a zero limb: {self.limbs}")

        if self.negative and not self.limbs:
            raise ValueError("zero must not be negative")

        expected = format_decimal(self.limbs, self.negative)
        if self.decimal != expected:
            raise ValueError(
                f"decimal {self.decimal!r} does not match limbs (expected {expected!r})"
            )

        return self

    @classmethod
    def from_big_integer(cls, value: BigInteger) -> "BigIntegerSnapshot":
        """Снапшот текущего значения (копия limbs)."""
        return cls(
            limbs=list(value.limbs()),
            negative=value.is_negative(),
            decimal=value.to_string(),
        )

    def to_big_integer(self) -> BigInteger:
        """Восстановление нового экземпляра BigInteger."""
        return BigInteger.from_limbs(self.limbs, self.negative)
