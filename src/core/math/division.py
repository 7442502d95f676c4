"""
Division: деление magnitude по алгоритму D (Knuth, TAOCP vol. 2, 4.3.1)

Модуль реализует беззнаковое деление с остатком над limbs:
- Быстрый путь для делителя из одного limb (div_limb_inplace)
- Нормализация: делимое и делитель умножаются на d = BASE // (v_top + 1),
  после чего старший limb делителя >= BASE / 2
- Оценка trial-цифры частного по двум старшим limbs окна делимого
  с не более чем двумя коррекциями
- Вычитание q * divisor из окна и add-back при заёме

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются assert):
1. Trial-цифра корректируется не более двух раз
2. Перед каждым шагом старший limb окна <= старшего limb делителя
3. Перенос add-back всегда равен 1 и гасит заём вычитания
4. После шага старший limb окна обнуляется (остаток окна < делителя)
5. Остаток после денормализации делится на d без остатка
"""

import logging
from enum import Enum
from typing import Final

from src.core.math.errors import DivisionByZeroError
from src.core.math.limbs import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    add_at,
    compare_magnitudes,
    div_limb_inplace,
    mul_limb,
    sub_at,
    trim,
)

logger = logging.getLogger(__name__)

# Максимальное число коррекций trial-цифры при нормализованном делителе
MAX_TRIAL_CORRECTIONS: Final[int] = 2


class DivisionMode(str, Enum):
    """Что возвращает деление: частное или остаток."""

    QUOTIENT = "QUOTIENT"
    REMAINDER = "REMAINDER"


# =============================================================================
# АЛГОРИТМ D
# =============================================================================


def _estimate_digit(
    window_top: int,
    window_next: int,
    window_third: int,
    divisor_top: int,
    divisor_second: int,
) -> int:
    """
    Оценка trial-цифры частного по двум старшим limbs окна.

    qhat = (window_top * BASE + window_next) // divisor_top, затем
    уменьшается, пока qhat >= BASE или
    qhat * divisor_second > BASE * rhat + window_third.
    """
    numerator = (window_top << LIMB_BITS) | window_next
    qhat, rhat = divmod(numerator, divisor_top)

    corrections = 0
    while qhat >= LIMB_BASE or qhat * divisor_second > (
        (rhat << LIMB_BITS) | window_third
    ):
        qhat -= 1
        rhat += divisor_top
        corrections += 1
        assert corrections <= MAX_TRIAL_CORRECTIONS, "trial digit over-corrected"
        if rhat >= LIMB_BASE:
            break

    assert qhat <= LIMB_MASK, f"trial digit out of limb range: {qhat}"
    return qhat


def _algorithm_d(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """
    Деление нормализованных magnitude, len(divisor) >= 2, dividend >= divisor.

    Returns:
        (quotient, remainder), обе нормализованы
    """
    size_v = len(divisor)
    size_diff = len(dividend) - size_v
    assert size_v >= 2 and size_diff >= 0

    scale = LIMB_BASE // (divisor[-1] + 1)
    u = mul_limb(dividend, scale)
    v = mul_limb(divisor, scale)
    assert len(v) == size_v, "scaled divisor grew"
    assert v[-1] >= LIMB_BASE // 2, "divisor not normalized"

    # Двухлимбовый lookahead на вершине
    if len(u) == size_diff + size_v:
        u.append(0)
    assert len(u) == size_diff + size_v + 1

    v_top = v[-1]
    v_second = v[-2]
    v_extended = v + [0]
    digits: list[int] = []

    for j in range(size_diff, -1, -1):
        assert u[j + size_v] <= v_top, "window top exceeds divisor top"

        qhat = _estimate_digit(
            u[j + size_v],
            u[j + size_v - 1],
            u[j + size_v - 2],
            v_top,
            v_second,
        )

        window = u[j : j + size_v + 1]
        if sub_at(window, mul_limb(v, qhat)):
            # qhat оказался на единицу больше: возвращаем делитель
            qhat -= 1
            carry = add_at(window, v_extended, 0, keep_carry=False)
            assert carry == 1, "add-back carry must cancel the borrow"

        assert window[size_v] == 0, "window remainder not below divisor"
        u[j : j + size_v + 1] = window
        digits.append(qhat)

    digits.reverse()
    quotient = trim(digits)

    remainder = trim(u[:size_v])
    leftover = div_limb_inplace(remainder, scale)
    assert leftover == 0, "remainder not divisible by normalization scale"

    return quotient, remainder


# =============================================================================
# ПУБЛИЧНЫЙ ИНТЕРФЕЙС
# =============================================================================


def divmod_magnitudes(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """
    Беззнаковое деление с остатком.

    Args:
        dividend: Нормализованное делимое
        divisor: Нормализованный делитель

    Returns:
        (quotient, remainder) как новые нормализованные списки

    Raises:
        DivisionByZeroError: Если divisor пуст (ноль)
    """
    if not divisor:
        logger.debug("division by zero magnitude, dividend limbs=%d", len(dividend))
        raise DivisionByZeroError("division by zero")

    if compare_magnitudes(divisor, dividend) > 0:
        return [], list(dividend)

    if len(divisor) == 1:
        quotient = list(dividend)
        remainder = div_limb_inplace(quotient, divisor[0])
        return quotient, trim([remainder])

    return _algorithm_d(dividend, divisor)


def divide_magnitudes(
    dividend: list[int], divisor: list[int], mode: DivisionMode
) -> list[int]:
    """
    Беззнаковое деление, возвращающее частное или остаток.

    Args:
        dividend: Нормализованное делимое
        divisor: Нормализованный делитель
        mode: DivisionMode.QUOTIENT или DivisionMode.REMAINDER

    Returns:
        Частное или остаток (новый нормализованный список)

    Raises:
        DivisionByZeroError: Если divisor пуст (ноль)
    """
    quotient, remainder = divmod_magnitudes(dividend, divisor)
    if mode is DivisionMode.QUOTIENT:
        return quotient
    return remainder
