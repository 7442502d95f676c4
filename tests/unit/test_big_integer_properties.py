"""
Property-based тесты для BigInteger (hypothesis)

Каждое свойство сверяется с нативным int как оракулом:
1. Round-trip десятичной записи
2. Аддитивная нейтральность и обратный элемент
3. Дистрибутивность умножения
4. Закон деления с остатком и знак остатка
5. ~~a == a, закон Де Моргана
6. Законы сдвигов
7. Полный порядок
"""

from hypothesis import given, settings, strategies as st

from src.core.math.big_integer import BigInteger
from src.core.math.limbs import LIMB_BASE, LIMB_MASK

integers = st.integers(min_value=-(2**300), max_value=2**300)
native_64 = st.integers(min_value=-(2**63), max_value=2**64 - 1)
shift_counts = st.integers(min_value=0, max_value=260)


@st.composite
def divisors(draw: st.DrawFn) -> int:
    """Ненулевой делитель; часто со старшим limb около 1 или около 2^32-1."""
    limb_count = draw(st.integers(min_value=1, max_value=6))
    top = draw(
        st.one_of(
            st.integers(min_value=1, max_value=3),
            st.integers(min_value=LIMB_MASK - 2, max_value=LIMB_MASK),
            st.integers(min_value=1, max_value=LIMB_MASK),
        )
    )
    low = draw(st.integers(min_value=0, max_value=LIMB_BASE ** (limb_count - 1) - 1))
    value = top * LIMB_BASE ** (limb_count - 1) + low
    return -value if draw(st.booleans()) else value


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================


@given(native_64)
def test_string_round_trip(n: int) -> None:
    """to_string(parse(to_string(n))) == to_string(n)"""
    text = BigInteger(n).to_string()
    assert BigInteger.parse(text).to_string() == text
    assert text == str(n)


@given(integers)
def test_string_matches_native(a: int) -> None:
    """Десятичная запись совпадает с нативной"""
    assert str(BigInteger(a)) == str(a)
    assert int(BigInteger(str(a))) == a


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


@given(integers)
def test_additive_identity_and_inverse(a: int) -> None:
    """a + 0 == a, a + (-a) == 0, a - a == 0"""
    value = BigInteger(a)
    assert value + BigInteger(0) == value
    assert value + (-value) == 0
    assert value - value == 0
    assert not (value - value).is_negative()


@given(integers, integers)
def test_add_sub_match_native(a: int, b: int) -> None:
    """Сложение и вычитание совпадают с нативными"""
    assert int(BigInteger(a) + BigInteger(b)) == a + b
    assert int(BigInteger(a) - BigInteger(b)) == a - b


@given(integers, integers, integers)
@settings(max_examples=50, deadline=None)
def test_multiplication_distributes(a: int, b: int, c: int) -> None:
    """a*(b+c) == a*b + a*c"""
    big_a, big_b, big_c = BigInteger(a), BigInteger(b), BigInteger(c)
    assert big_a * (big_b + big_c) == big_a * big_b + big_a * big_c
    assert int(big_a * big_b) == a * b


@given(integers, divisors())
@settings(max_examples=300, deadline=None)
def test_division_remainder_law(a: int, b: int) -> None:
    """(a / b) * b + a % b == a, знак остатка совпадает со знаком a"""
    big_a, big_b = BigInteger(a), BigInteger(b)
    quotient = big_a / big_b
    remainder = big_a % big_b

    assert quotient * big_b + remainder == big_a
    assert remainder.is_zero() or remainder.is_negative() == big_a.is_negative()
    assert abs(remainder) < abs(big_b)
    assert (int(quotient), int(remainder)) == _trunc_divmod(a, b)


# =============================================================================
# ПОБИТОВЫЕ ОПЕРАЦИИ И СДВИГИ
# =============================================================================


@given(integers, integers)
def test_bitwise_laws(a: int, b: int) -> None:
    """~~a == a и закон Де Моргана"""
    big_a, big_b = BigInteger(a), BigInteger(b)
    assert ~(~big_a) == big_a
    assert ~(big_a & big_b) == (~big_a) | (~big_b)
    assert int(big_a ^ big_b) == a ^ b


@given(st.integers(min_value=0, max_value=2**300), shift_counts)
def test_shift_round_trip(a: int, k: int) -> None:
    """a << k >> k == a для неотрицательных a"""
    assert (BigInteger(a) << k) >> k == a


@given(st.integers(min_value=-(2**300), max_value=-1), shift_counts)
def test_negative_shift_rounds_down(a: int, k: int) -> None:
    """Для отрицательных a сдвиг вправо округляет к минус бесконечности"""
    assert int(BigInteger(a) >> k) == a >> k


# =============================================================================
# ПОРЯДОК
# =============================================================================


@given(integers, integers)
def test_total_order(a: int, b: int) -> None:
    """Ровно одно из a < b, a == b, a > b"""
    big_a, big_b = BigInteger(a), BigInteger(b)
    outcomes = [big_a < big_b, big_a == big_b, big_a > big_b]
    assert outcomes.count(True) == 1
    assert outcomes == [a < b, a == b, a > b]


@given(st.integers(min_value=0, max_value=2**200))
def test_magnitude_tie_with_opposite_signs(a: int) -> None:
    """Равные magnitude с разными знаками"""
    positive, negative = BigInteger(a), BigInteger(-a)
    if a == 0:
        assert positive == negative
    else:
        assert negative < positive
        assert positive != negative
