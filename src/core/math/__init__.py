"""
Core math modules

Целочисленная арифметика произвольной точности над limbs по 32 бита.
"""

# Errors
from src.core.math.errors import (
    BigIntegerError,
    DivisionByZeroError,
    MalformedNumberError,
)

# Limb primitives
from src.core.math.limbs import (
    DECIMAL_CHUNK_BASE,
    DECIMAL_CHUNK_DIGITS,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    abs_greater_or_equal,
    add_at,
    compare_magnitudes,
    div_limb_inplace,
    is_normalized,
    limbs_from_int,
    limbs_to_int,
    mul_limb,
    mul_magnitudes,
    sub_at,
    trim,
)

# Division (Knuth algorithm D)
from src.core.math.division import (
    DivisionMode,
    divide_magnitudes,
    divmod_magnitudes,
)

# Two's complement
from src.core.math.twos_complement import (
    BitwiseOp,
    bitwise_combine,
    from_twos_complement,
    shift_left_magnitude,
    shift_right,
    to_twos_complement,
)

# Decimal text
from src.core.math.decimal_text import format_decimal, parse_decimal

# BigInteger
from src.core.math.big_integer import BigInteger, to_string

__all__ = [
    # Errors
    "BigIntegerError",
    "DivisionByZeroError",
    "MalformedNumberError",
    # Limbs: constants
    "DECIMAL_CHUNK_BASE",
    "DECIMAL_CHUNK_DIGITS",
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Limbs: functions
    "abs_greater_or_equal",
    "add_at",
    "compare_magnitudes",
    "div_limb_inplace",
    "is_normalized",
    "limbs_from_int",
    "limbs_to_int",
    "mul_limb",
    "mul_magnitudes",
    "sub_at",
    "trim",
    # Division
    "DivisionMode",
    "divide_magnitudes",
    "divmod_magnitudes",
    # Two's complement
    "BitwiseOp",
    "bitwise_combine",
    "from_twos_complement",
    "shift_left_magnitude",
    "shift_right",
    "to_twos_complement",
    # Decimal text
    "format_decimal",
    "parse_decimal",
    # BigInteger
    "BigInteger",
    "to_string",
]
