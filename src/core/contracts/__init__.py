"""
Contract Validation Module

Модуль для валидации JSON контрактов (JSON Schema, Draft 2020-12).
"""

from .validators import (
    BIG_INTEGER_SCHEMA,
    SCHEMA_DIR,
    BigIntegerValidator,
    SchemaLoader,
    validate_big_integer,
)

__all__ = [
    # Constants
    "BIG_INTEGER_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "BigIntegerValidator",
    # Functions
    "validate_big_integer",
]
