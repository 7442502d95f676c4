"""
Limbs: примитивы над magnitude в позиционной записи по основанию 2^32

Magnitude хранится как list[int], каждый элемент (limb) в [0, LIMB_MASK],
младший limb по индексу 0. Пустой список означает ноль.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализация: после завершения операции старший limb не равен нулю
   (trim вызывается сразу после любой операции, способной оставить нули)
2. Сравнение magnitude (длина, затем limbs от старшего к младшему)
   корректно только для нормализованных операндов
3. Произведение limb * limb + carry всегда помещается в 64 бита

Функции модуля не знают о знаке: знаковая логика живёт в BigInteger.
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# Основание позиционной записи
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска одного limb (все биты установлены)
LIMB_MASK: Final[int] = LIMB_BASE - 1

# Десятичный чанк: максимальное число цифр, укладывающееся в один limb
DECIMAL_CHUNK_DIGITS: Final[int] = 9

# 10^DECIMAL_CHUNK_DIGITS, основание для разбора и форматирования
DECIMAL_CHUNK_BASE: Final[int] = 10**DECIMAL_CHUNK_DIGITS


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def trim(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs на месте.

    Args:
        limbs: Magnitude (изменяется на месте)

    Returns:
        Тот же список (для удобства цепочек)
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def is_normalized(limbs: list[int]) -> bool:
    """
    Проверка инварианта нормализации.

    Returns:
        True если все limbs в [0, LIMB_MASK] и старший limb ненулевой
        (или список пуст)
    """
    if any(limb < 0 or limb > LIMB_MASK for limb in limbs):
        return False
    return not limbs or limbs[-1] != 0


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Трёхзначное сравнение нормализованных magnitude.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1

    return 0


def abs_greater_or_equal(a: list[int], b: list[int]) -> bool:
    """
    |a| >= |b| для нормализованных magnitude.

    Сначала сравниваются длины, затем limbs от старшего к младшему.
    Равенство даёт True: от этого зависит, какой операнд вычитание
    считает большим.

    Examples:
        >>> abs_greater_or_equal([1, 2], [5])
        True
        >>> abs_greater_or_equal([7], [7])
        True
        >>> abs_greater_or_equal([], [1])
        False
    """
    return compare_magnitudes(a, b) >= 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ СО СДВИГОМ
# =============================================================================


def add_at(
    target: list[int],
    operand: list[int],
    offset: int = 0,
    keep_carry: bool = True,
) -> int:
    """
    Прибавление operand к target начиная с limb offset (на месте).

    Перенос распространяется вверх; если он выходит за текущую длину
    target, target растёт на один limb.

    Args:
        target: Magnitude-приёмник (изменяется на месте)
        operand: Прибавляемая magnitude
        offset: Позиция младшего limb operand внутри target
        keep_carry: False отбрасывает перенос из последнего limb operand
            (используется при add-back в алгоритме D)

    Returns:
        Отброшенный перенос (0 или 1); при keep_carry=True всегда 0
    """
    carry = 0
    size = len(operand)
    i = 0
    while i < size or (carry and keep_carry):
        pos = offset + i
        if pos >= len(target):
            target.extend([0] * (pos - len(target) + 1))

        total = target[pos] + carry
        if i < size:
            total += operand[i]

        target[pos] = total & LIMB_MASK
        carry = total >> LIMB_BITS
        i += 1

    return carry


def sub_at(target: list[int], operand: list[int], offset: int = 0) -> bool:
    """
    Вычитание operand из target начиная с limb offset (на месте).

    Заём распространяется вверх до конца target. Для обычного вычитания
    вызывающий гарантирует |target| >= |operand| на этой позиции.

    Args:
        target: Уменьшаемое (изменяется на месте)
        operand: Вычитаемое
        offset: Позиция младшего limb operand внутри target

    Returns:
        True если после исчерпания target остался заём
        (target был меньше operand)
    """
    size = len(operand)
    assert offset + size <= len(target), "operand wider than target window"

    borrow = 0
    i = 0
    while i < size or borrow:
        pos = offset + i
        if pos >= len(target):
            break

        diff = target[pos] - borrow
        if i < size:
            diff -= operand[i]

        borrow = 1 if diff < 0 else 0
        target[pos] = diff & LIMB_MASK
        i += 1

    return bool(borrow)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ НА ОДИН LIMB
# =============================================================================


def mul_limb(limbs: list[int], factor: int) -> list[int]:
    """
    Произведение magnitude на один limb.

    Args:
        limbs: Magnitude
        factor: Множитель в [0, LIMB_MASK]

    Returns:
        Новая нормализованная magnitude
    """
    assert 0 <= factor <= LIMB_MASK, f"factor out of limb range: {factor}"

    result: list[int] = []
    carry = 0
    for limb in limbs:
        cur = limb * factor + carry
        result.append(cur & LIMB_MASK)
        carry = cur >> LIMB_BITS

    if carry:
        result.append(carry)

    return trim(result)


def div_limb_inplace(limbs: list[int], divisor: int) -> int:
    """
    Деление magnitude на один limb на месте.

    Идёт от старшего limb к младшему, остаток переносится вниз как
    старшая половина 64-битного делимого.

    Args:
        limbs: Делимое (заменяется частным, нормализуется)
        divisor: Делитель в [1, LIMB_MASK]

    Returns:
        Остаток в [0, divisor)
    """
    assert 0 < divisor <= LIMB_MASK, f"divisor out of limb range: {divisor}"

    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        cur = (remainder << LIMB_BITS) | limbs[i]
        limbs[i], remainder = divmod(cur, divisor)

    trim(limbs)
    return remainder


def mul_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Школьное умножение magnitude.

    Для каждого limb a[i] строка частичных произведений накапливается в
    результат со сдвигом i; перенос продолжает распространяться за
    ширину b, пока не исчерпается. Длина результата заранее равна
    len(a) + len(b), затем нормализуется.

    Returns:
        Новая нормализованная magnitude
    """
    if not a or not b:
        return []

    size_b = len(b)
    result = [0] * (len(a) + size_b)

    for i, limb_a in enumerate(a):
        carry = 0
        j = 0
        while j < size_b or carry:
            cur = result[i + j] + carry
            if j < size_b:
                cur += limb_a * b[j]
            result[i + j] = cur & LIMB_MASK
            carry = cur >> LIMB_BITS
            j += 1

    return trim(result)


# =============================================================================
# ИНТЕРОП С НАТИВНЫМ INT
# =============================================================================


def limbs_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int на limbs.

    Raises:
        ValueError: Если value отрицательный
    """
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")

    limbs: list[int] = []
    while value:
        limbs.append(value & LIMB_MASK)
        value >>= LIMB_BITS
    return limbs


def limbs_to_int(limbs: list[int]) -> int:
    """Сборка неотрицательного int из limbs."""
    value = 0
    for limb in reversed(limbs):
        value = (value << LIMB_BITS) | limb
    return value
