"""
Тесты для модуля Limbs

Проверяет:
1. Нормализацию (trim, is_normalized)
2. Сравнение magnitude (тай-брейк: равенство => True)
3. Сложение/вычитание со сдвигом и переносом/заёмом
4. Умножение и деление на один limb
5. Школьное умножение magnitude
6. Интероп с нативным int
"""

import random

import pytest

from src.core.math.limbs import (
    DECIMAL_CHUNK_BASE,
    LIMB_BASE,
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

# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalization:
    """Тесты для trim и is_normalized"""

    def test_trim_drops_trailing_zero_limbs(self) -> None:
        """Старшие нулевые limbs удаляются"""
        assert trim([1, 0, 0]) == [1]
        assert trim([0, 5, 0]) == [0, 5]

    def test_trim_all_zero_is_empty(self) -> None:
        """Все нули => пустой список (ноль)"""
        assert trim([0, 0, 0]) == []
        assert trim([]) == []

    def test_trim_in_place(self) -> None:
        """trim изменяет список на месте"""
        limbs = [7, 0]
        result = trim(limbs)
        assert result is limbs
        assert limbs == [7]

    def test_is_normalized(self) -> None:
        """Проверка инварианта нормализации"""
        assert is_normalized([])
        assert is_normalized([0, 1])
        assert not is_normalized([1, 0])
        assert not is_normalized([LIMB_BASE])
        assert not is_normalized([-1])


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestMagnitudeComparison:
    """Тесты для compare_magnitudes и abs_greater_or_equal"""

    def test_longer_is_greater(self) -> None:
        """Более длинная magnitude больше"""
        assert abs_greater_or_equal([0, 1], [LIMB_MASK])
        assert not abs_greater_or_equal([LIMB_MASK], [0, 1])

    def test_equal_is_true(self) -> None:
        """Равенство даёт True"""
        assert abs_greater_or_equal([3, 4], [3, 4])
        assert abs_greater_or_equal([], [])

    def test_most_significant_limb_decides(self) -> None:
        """Сравнение идёт от старшего limb"""
        assert abs_greater_or_equal([0, 2], [LIMB_MASK, 1])
        assert not abs_greater_or_equal([LIMB_MASK, 1], [0, 2])

    def test_lower_limb_breaks_tie(self) -> None:
        """При равных старших limbs решает младший"""
        assert compare_magnitudes([2, 9], [1, 9]) == 1
        assert compare_magnitudes([1, 9], [2, 9]) == -1

    def test_three_way(self) -> None:
        """Трёхзначное сравнение"""
        assert compare_magnitudes([], []) == 0
        assert compare_magnitudes([], [1]) == -1
        assert compare_magnitudes([1], []) == 1


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ И ВЫЧИТАНИЯ
# =============================================================================


class TestAddAt:
    """Тесты для add_at"""

    def test_carry_grows_target(self) -> None:
        """Перенос за длину target добавляет limb"""
        target = [LIMB_MASK]
        add_at(target, [1])
        assert target == [0, 1]

    def test_carry_ripples_through_full_limbs(self) -> None:
        """Перенос проходит через цепочку полных limbs"""
        target = [LIMB_MASK, LIMB_MASK, LIMB_MASK]
        add_at(target, [1])
        assert target == [0, 0, 0, 1]

    def test_offset(self) -> None:
        """Сложение со сдвигом на offset limbs"""
        target = [1]
        add_at(target, [1], offset=2)
        assert target == [1, 0, 1]

    def test_dropped_carry_returned(self) -> None:
        """keep_carry=False отбрасывает перенос и возвращает его"""
        target = [LIMB_MASK]
        carry = add_at(target, [1], keep_carry=False)
        assert target == [0]
        assert carry == 1

    def test_kept_carry_returns_zero(self) -> None:
        """keep_carry=True всегда возвращает 0"""
        target = [LIMB_MASK]
        assert add_at(target, [LIMB_MASK]) == 0
        assert target == [LIMB_MASK - 1, 1]


class TestSubAt:
    """Тесты для sub_at"""

    def test_borrow_ripples(self) -> None:
        """Заём распространяется в старший limb"""
        target = [0, 1]
        borrow = sub_at(target, [1])
        assert not borrow
        assert trim(target) == [LIMB_MASK]

    def test_borrow_out_signals_smaller_target(self) -> None:
        """Оставшийся заём сигнализирует target < operand"""
        target = [1]
        assert sub_at(target, [2])
        assert target == [LIMB_MASK]

    def test_offset(self) -> None:
        """Вычитание со сдвигом"""
        target = [5, 0, 3]
        assert not sub_at(target, [1], offset=2)
        assert target == [5, 0, 2]

    def test_operand_wider_than_target_rejected(self) -> None:
        """Operand шире окна target: нарушение контракта"""
        with pytest.raises(AssertionError):
            sub_at([1], [1, 1])


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ И ДЕЛЕНИЯ НА LIMB
# =============================================================================


class TestSingleLimbOps:
    """Тесты для mul_limb и div_limb_inplace"""

    def test_mul_limb_max_product(self) -> None:
        """(2^32-1)^2 помещается в два limb"""
        assert mul_limb([LIMB_MASK], LIMB_MASK) == [1, LIMB_MASK - 1]

    def test_mul_limb_by_zero(self) -> None:
        """Умножение на ноль даёт нормализованный ноль"""
        assert mul_limb([1, 2, 3], 0) == []

    def test_div_limb_inplace(self) -> None:
        """Деление на один limb с остатком"""
        limbs = [0, 1]
        assert div_limb_inplace(limbs, 2) == 0
        assert limbs == [1 << 31]

        limbs = [7]
        assert div_limb_inplace(limbs, 2) == 1
        assert limbs == [3]

    def test_div_limb_inplace_trims(self) -> None:
        """Частное нормализуется"""
        limbs = [5, 1]
        div_limb_inplace(limbs, LIMB_MASK)
        assert limbs == [1]

    def test_div_limb_by_decimal_chunk(self) -> None:
        """Деление на 10^9 (основание десятичного форматирования)"""
        value = 10**27 + 123
        limbs = limbs_from_int(value)
        remainder = div_limb_inplace(limbs, DECIMAL_CHUNK_BASE)
        assert remainder == 123
        assert limbs_to_int(limbs) == 10**18

    def test_div_limb_zero_divisor_rejected(self) -> None:
        """Делитель 0 вне контракта"""
        with pytest.raises(AssertionError):
            div_limb_inplace([1], 0)


class TestMulMagnitudes:
    """Тесты для mul_magnitudes"""

    def test_zero_operand(self) -> None:
        """Ноль с любой стороны даёт ноль"""
        assert mul_magnitudes([], [1, 2]) == []
        assert mul_magnitudes([1, 2], []) == []

    def test_all_ones(self) -> None:
        """Максимальные limbs не переполняют аккумулятор"""
        a = [LIMB_MASK] * 4
        b = [LIMB_MASK] * 3
        expected = (LIMB_BASE**4 - 1) * (LIMB_BASE**3 - 1)
        assert limbs_to_int(mul_magnitudes(a, b)) == expected

    def test_matches_native_product(self) -> None:
        """Сверка с нативным умножением"""
        rng = random.Random(20240611)
        for _ in range(200):
            a = rng.getrandbits(rng.randint(1, 300))
            b = rng.getrandbits(rng.randint(1, 300))
            product = mul_magnitudes(limbs_from_int(a), limbs_from_int(b))
            assert is_normalized(product)
            assert limbs_to_int(product) == a * b


# =============================================================================
# ТЕСТЫ ИНТЕРОПА
# =============================================================================


class TestNativeInterop:
    """Тесты для limbs_from_int и limbs_to_int"""

    def test_zero(self) -> None:
        """Ноль = пустой список"""
        assert limbs_from_int(0) == []
        assert limbs_to_int([]) == 0

    def test_limb_boundary(self) -> None:
        """2^32 занимает два limb"""
        assert limbs_from_int(LIMB_BASE) == [0, 1]
        assert limbs_from_int(LIMB_MASK) == [LIMB_MASK]

    def test_round_trip(self) -> None:
        """int -> limbs -> int"""
        for value in (1, 2**63 - 1, 2**64, 3**200):
            assert limbs_to_int(limbs_from_int(value)) == value

    def test_negative_rejected(self) -> None:
        """Magnitude не может быть отрицательной"""
        with pytest.raises(ValueError, match="non-negative"):
            limbs_from_int(-1)
