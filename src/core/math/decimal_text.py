"""
Decimal Text: десятичный разбор и форматирование magnitude

Разбор:
    [-]digits, digits = одна или более ASCII цифр '0'-'9'.
    Цифры группируются в чанки по 9 от старшего конца (последний чанк
    может быть короче); аккумулятор = аккумулятор * 10^len(chunk) + chunk.

Форматирование:
    Обратная операция: деление на 10^9, группы по 9 цифр с ведущими
    нулями (кроме старшей), минус только для ненулевых отрицательных.
"""

import logging

from src.core.math.errors import MalformedNumberError
from src.core.math.limbs import (
    DECIMAL_CHUNK_BASE,
    DECIMAL_CHUNK_DIGITS,
    add_at,
    div_limb_inplace,
    mul_limb,
    trim,
)

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def parse_decimal(text: str) -> tuple[list[int], bool]:
    """
    Разбор десятичной строки.

    Args:
        text: Строка вида "-123" или "456"

    Returns:
        (magnitude, negative); "-0" даёт ([], False)

    Raises:
        MalformedNumberError: Пустая строка, одиночный '-' или символ
            вне '0'-'9'

    Examples:
        >>> parse_decimal("4294967296")
        ([0, 1], False)
        >>> parse_decimal("-0")
        ([], False)
    """
    negative = text.startswith("-")
    body = text[1:] if negative else text

    if not body:
        logger.debug("rejected empty decimal text %r", text)
        raise MalformedNumberError(f"number must not be empty, got {text!r}")

    for ch in body:
        if ch not in _DIGITS:
            logger.debug("rejected decimal text %r at character %r", text, ch)
            raise MalformedNumberError(
                f"number must contain only digits 0-9, got {ch!r} in {text!r}"
            )

    magnitude: list[int] = []
    for start in range(0, len(body), DECIMAL_CHUNK_DIGITS):
        chunk = body[start : start + DECIMAL_CHUNK_DIGITS]
        magnitude = mul_limb(magnitude, 10 ** len(chunk))
        add_at(magnitude, [int(chunk)])
        trim(magnitude)

    return magnitude, negative and bool(magnitude)


def format_decimal(magnitude: list[int], negative: bool) -> str:
    """
    Каноническая десятичная запись.

    Без ведущих нулей (ноль печатается как "0"), минус только для
    ненулевых отрицательных значений.
    """
    if not magnitude:
        return "0"

    work = list(magnitude)
    groups: list[int] = []
    while work:
        groups.append(div_limb_inplace(work, DECIMAL_CHUNK_BASE))

    text = str(groups[-1]) + "".join(
        f"{group:0{DECIMAL_CHUNK_DIGITS}d}" for group in reversed(groups[:-1])
    )
    return "-" + text if negative else text
