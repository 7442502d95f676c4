"""
Two's Complement: эмуляция побитовых операций над sign-magnitude

Хранилище BigInteger знакомагнитудное, а &, |, ^ и арифметический >>
определены на бесконечном two's-complement представлении. Модуль
изолирует это в паре stateless-преобразований:
- to_twos_complement: (magnitude, negative) -> битовый шаблон ширины width
- from_twos_complement: точное обратное преобразование

Побитовые операции только комбинируют два шаблона общей ширины и
возвращаются обратно. Общая ширина = длина большего операнда + 1 limb,
старший limb которого является чистым знаковым расширением.

Сдвиги:
- << сдвигает magnitude (знак сохраняется)
- >> отрицательного числа выполняется в two's complement с заполнением
  единицами (округление к минус бесконечности)
"""

import logging
import operator
from enum import Enum
from typing import Callable

from src.core.math.limbs import LIMB_BITS, LIMB_MASK, trim

logger = logging.getLogger(__name__)


class BitwiseOp(str, Enum):
    """Побитовая операция над двумя операндами."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"


_OPERATIONS: dict[BitwiseOp, Callable[[int, int], int]] = {
    BitwiseOp.AND: operator.and_,
    BitwiseOp.OR: operator.or_,
    BitwiseOp.XOR: operator.xor,
}


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def _negate_pattern(pattern: list[int]) -> list[int]:
    """~pattern + 1 в пределах ширины шаблона (перенос за ширину отбрасывается)."""
    result = [~limb & LIMB_MASK for limb in pattern]
    for i in range(len(result)):
        result[i] = (result[i] + 1) & LIMB_MASK
        if result[i] != 0:
            break
    return result


def to_twos_complement(magnitude: list[int], negative: bool, width: int) -> list[int]:
    """
    Sign-magnitude -> two's-complement шаблон фиксированной ширины.

    Args:
        magnitude: Нормализованная magnitude
        negative: Знак
        width: Ширина шаблона в limbs, строго больше len(magnitude)

    Returns:
        Новый список из width limbs
    """
    assert len(magnitude) < width, "no room for the sign limb"

    pattern = list(magnitude) + [0] * (width - len(magnitude))
    if negative:
        return _negate_pattern(pattern)
    return pattern


def from_twos_complement(pattern: list[int], negative: bool) -> list[int]:
    """
    Two's-complement шаблон -> нормализованная magnitude.

    Отрицание в two's complement инволютивно, поэтому обратное
    преобразование для отрицательного шаблона то же: инверсия и +1.
    """
    if negative:
        return trim(_negate_pattern(pattern))
    return trim(list(pattern))


# =============================================================================
# ПОБИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def bitwise_combine(
    a_magnitude: list[int],
    a_negative: bool,
    b_magnitude: list[int],
    b_negative: bool,
    op: BitwiseOp,
) -> tuple[list[int], bool]:
    """
    Общая реализация &, |, ^ для знаковых операндов.

    Знак результата равен той же операции над знаковыми битами.

    Returns:
        (magnitude, negative) результата
    """
    combine = _OPERATIONS[op]
    width = max(len(a_magnitude), len(b_magnitude)) + 1

    a_pattern = to_twos_complement(a_magnitude, a_negative, width)
    b_pattern = to_twos_complement(b_magnitude, b_negative, width)
    pattern = [combine(x, y) for x, y in zip(a_pattern, b_pattern)]

    negative = bool(combine(int(a_negative), int(b_negative)))
    assert pattern[-1] == (LIMB_MASK if negative else 0), "sign limb corrupted"

    magnitude = from_twos_complement(pattern, negative)
    return magnitude, negative and bool(magnitude)


# =============================================================================
# СДВИГИ
# =============================================================================


def _check_shift_count(count: int) -> None:
    if count < 0:
        logger.debug("rejected negative shift count %d", count)
        raise ValueError(f"negative shift count: {count}")


def shift_left_magnitude(magnitude: list[int], count: int) -> list[int]:
    """
    Сдвиг magnitude влево на count бит.

    Вставка count // 32 нулевых limbs, затем сдвиг внутри limb
    с переносом старших битов в следующий limb.

    Raises:
        ValueError: Если count отрицательный
    """
    _check_shift_count(count)
    if not magnitude:
        return []

    limb_shift, bit_shift = divmod(count, LIMB_BITS)
    result = [0] * limb_shift
    carry = 0
    for limb in magnitude:
        cur = (limb << bit_shift) | carry
        result.append(cur & LIMB_MASK)
        carry = cur >> LIMB_BITS

    if carry:
        result.append(carry)

    return trim(result)


def _shift_right_pattern(pattern: list[int], count: int, fill: int) -> list[int]:
    """Логический сдвиг шаблона вправо; освободившиеся биты берутся из fill."""
    limb_shift, bit_shift = divmod(count, LIMB_BITS)
    size = len(pattern)
    if limb_shift >= size:
        return []

    result = []
    for i in range(limb_shift, size):
        low = pattern[i] >> bit_shift
        high = 0
        if bit_shift:
            upper = pattern[i + 1] if i + 1 < size else fill
            high = (upper << (LIMB_BITS - bit_shift)) & LIMB_MASK
        result.append(low | high)

    return result


def shift_right(
    magnitude: list[int], negative: bool, count: int
) -> tuple[list[int], bool]:
    """
    Арифметический сдвиг вправо на count бит.

    Неотрицательные: логический сдвиг с заполнением нулями.
    Отрицательные: сдвиг two's-complement шаблона с заполнением единицами,
    результат округлён к минус бесконечности ((-7) >> 1 == -4).

    Returns:
        (magnitude, negative) результата

    Raises:
        ValueError: Если count отрицательный
    """
    _check_shift_count(count)

    if not negative:
        return trim(_shift_right_pattern(magnitude, count, 0)), False

    pattern = to_twos_complement(magnitude, True, len(magnitude) + 1)
    shifted = _shift_right_pattern(pattern, count, LIMB_MASK)
    if not shifted:
        # Все значащие биты ушли, остались только знаковые: -1
        return [1], True

    return from_twos_complement(shifted, True), True
