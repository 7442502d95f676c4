"""
BigInteger: знаковое целое произвольной точности

Представление:
- _limbs: нормализованная magnitude (list[int], limbs по 32 бита,
  младший первым, пустой список = ноль)
- _negative: знак; у нуля всегда False

Семантика операторов повторяет нативное целое фиксированной ширины,
но без ограничения разрядности:
- Составные операторы (+=, -=, *=, /=, //=, %=, &=, |=, ^=, <<=, >>=)
  изменяют экземпляр на месте и возвращают его
- Бинарные операторы копируют левый операнд и применяют составной
- / и // дают частное с усечением к нулю, % остаток со знаком делимого
  (как у decimal.Decimal), так что (a / b) * b + a % b == a
- Побитовые операции и >> работают в two's complement
- ~x == -(x + 1)

Экземпляр изменяемый, поэтому не хешируется. Операнды int приводятся
автоматически с обеих сторон оператора; bool и float не приводятся
(BigInteger(1) == True даёт False, арифметика с ними поднимает TypeError).
format() принимает десятичные спецификации int (d, ",", "_", ширина,
знак) и делегирует остальные нативному int.
"""

import logging
import re
from typing import Optional, Union

from src.core.math.decimal_text import format_decimal, parse_decimal
from src.core.math.division import DivisionMode, divide_magnitudes
from src.core.math.errors import DivisionByZeroError
from src.core.math.limbs import (
    LIMB_MASK,
    abs_greater_or_equal,
    add_at,
    compare_magnitudes,
    div_limb_inplace,
    limbs_from_int,
    limbs_to_int,
    mul_magnitudes,
    sub_at,
    trim,
)
from src.core.math.twos_complement import (
    BitwiseOp,
    bitwise_combine,
    shift_left_magnitude,
    shift_right,
)

logger = logging.getLogger(__name__)

IntegerLike = Union["BigInteger", int]

# Десятичная часть format spec int: [[fill]align][sign][0][width][grouping][d]
_DECIMAL_FORMAT_SPEC = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<zero>0)?"
    r"(?P<width>[1-9][0-9]*)?"
    r"(?P<grouping>[,_])?"
    r"d?",
    re.DOTALL,
)


def _coerce(value: object) -> Optional["BigInteger"]:
    """Приведение операнда к BigInteger; None если тип не поддерживается."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger(value)
    return None


def _is_shift_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Операнды: BigInteger или int. bool не считается целым операндом:
    конструктор поднимает TypeError, операторы возвращают NotImplemented,
    поэтому BigInteger(1) == True ложно, а BigInteger(1) + True падает.

    Examples:
        >>> BigInteger("123456789123456789") * 2
        BigInteger('246913578246913578')
        >>> BigInteger(-7) >> 1
        BigInteger('-4')
        >>> BigInteger(-5) % 3
        BigInteger('-2')
    """

    __slots__ = ("_limbs", "_negative")

    # Изменяемый value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union["BigInteger", int, str] = 0) -> None:
        """
        Args:
            value: int любой ширины, десятичная строка или другой BigInteger
                (глубокая копия)

        Raises:
            MalformedNumberError: Некорректная десятичная строка
            TypeError: Неподдерживаемый тип (включая bool и float)
        """
        if isinstance(value, BigInteger):
            limbs, negative = list(value._limbs), value._negative
        elif isinstance(value, bool):
            raise TypeError("cannot construct BigInteger from bool")
        elif isinstance(value, int):
            limbs, negative = limbs_from_int(abs(value)), value < 0
        elif isinstance(value, str):
            limbs, negative = parse_decimal(value)
        else:
            raise TypeError(
                f"cannot construct BigInteger from {type(value).__name__}"
            )

        self._limbs: list[int] = limbs
        self._negative: bool = negative

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """Разбор десятичной строки ([-]digits)."""
        return cls(text)

    @classmethod
    def from_limbs(cls, limbs: list[int], negative: bool = False) -> "BigInteger":
        """
        Сборка из limbs (младший первым).

        Старшие нулевые limbs отбрасываются, у нуля знак сбрасывается.

        Raises:
            ValueError: Если limb вне [0, 2^32)
        """
        result = cls()
        for limb in limbs:
            if not 0 <= limb <= LIMB_MASK:
                raise ValueError(f"limb out of range [0, 2^32): {limb}")
        result._adopt(trim(list(limbs)), negative)
        return result

    # =========================================================================
    # КОПИРОВАНИЕ И ПРИСВАИВАНИЕ
    # =========================================================================

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    def assign(self, other: IntegerLike) -> "BigInteger":
        """
        Присваивание значения other этому экземпляру.

        Новый список limbs строится до изменения self: при ошибке
        (включая MemoryError) self остаётся нетронутым.
        """
        source = _coerce(other)
        if source is None:
            raise TypeError(f"cannot assign {type(other).__name__} to BigInteger")

        limbs = list(source._limbs)
        self._limbs, self._negative = limbs, source._negative
        return self

    def swap(self, other: "BigInteger") -> None:
        """Обмен значениями двух экземпляров."""
        self._limbs, other._limbs = other._limbs, self._limbs
        self._negative, other._negative = other._negative, self._negative

    # =========================================================================
    # ВНУТРЕННЕЕ
    # =========================================================================

    def _adopt(self, limbs: list[int], negative: bool) -> "BigInteger":
        # Ноль всегда неотрицательный
        self._limbs = limbs
        self._negative = negative and bool(limbs)
        return self

    def _operand(self, other: object) -> Optional["BigInteger"]:
        # Операнд-алиас копируется: a += a не должен читать limbs,
        # которые уже перезаписаны
        rhs = _coerce(other)
        if rhs is self:
            return self.copy()
        return rhs

    def _add_magnitudes(self, limbs: list[int]) -> None:
        add_at(self._limbs, limbs)
        trim(self._limbs)

    def _subtract_magnitudes(self, limbs: list[int]) -> None:
        """|self| - |rhs| с коррекцией знака, если |rhs| больше."""
        if abs_greater_or_equal(self._limbs, limbs):
            borrow = sub_at(self._limbs, limbs)
            assert not borrow, "subtraction borrowed past the larger operand"
            self._adopt(trim(self._limbs), self._negative)
        else:
            result = list(limbs)
            borrow = sub_at(result, self._limbs)
            assert not borrow, "subtraction borrowed past the larger operand"
            self._adopt(trim(result), not self._negative)

    def _divide(self, rhs: "BigInteger", mode: DivisionMode) -> "BigInteger":
        if not rhs._limbs:
            logger.debug("%s by zero, dividend=%s", mode.value.lower(), self)
            raise DivisionByZeroError("division by zero")

        if len(rhs._limbs) == 1:
            quotient_limbs = list(self._limbs)
            div_limb_inplace(quotient_limbs, rhs._limbs[0])
            quotient = BigInteger()._adopt(
                quotient_limbs, self._negative != rhs._negative
            )
            if mode is DivisionMode.QUOTIENT:
                return self._adopt(quotient._limbs, quotient._negative)
            # Остаток как dividend - (dividend / divisor) * divisor
            quotient *= rhs
            return self.__isub__(quotient)

        result = divide_magnitudes(self._limbs, rhs._limbs, mode)
        if mode is DivisionMode.QUOTIENT:
            return self._adopt(result, self._negative != rhs._negative)
        return self._adopt(result, self._negative)

    def _bitwise(self, other: object, op: BitwiseOp) -> "BigInteger":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        limbs, negative = bitwise_combine(
            self._limbs, self._negative, rhs._limbs, rhs._negative, op
        )
        return self._adopt(limbs, negative)

    def _compare(self, rhs: "BigInteger") -> int:
        if self._negative != rhs._negative:
            return -1 if self._negative else 1
        result = compare_magnitudes(self._limbs, rhs._limbs)
        return -result if self._negative else result

    # =========================================================================
    # СОСТАВНОЕ ПРИСВАИВАНИЕ
    # =========================================================================

    def __iadd__(self, other: IntegerLike) -> "BigInteger":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if self._negative != rhs._negative:
            self._subtract_magnitudes(rhs._limbs)
        else:
            self._add_magnitudes(rhs._limbs)
        return self

    def __isub__(self, other: IntegerLike) -> "BigInteger":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if self._negative != rhs._negative:
            self._add_magnitudes(rhs._limbs)
        else:
            self._subtract_magnitudes(rhs._limbs)
        return self

    def __imul__(self, other: IntegerLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._adopt(
            mul_magnitudes(self._limbs, rhs._limbs), self._negative != rhs._negative
        )

    def __itruediv__(self, other: IntegerLike) -> "BigInteger":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._divide(rhs, DivisionMode.QUOTIENT)

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: IntegerLike) -> "BigInteger":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._divide(rhs, DivisionMode.REMAINDER)

    def __iand__(self, other: IntegerLike) -> "BigInteger":
        return self._bitwise(other, BitwiseOp.AND)

    def __ior__(self, other: IntegerLike) -> "BigInteger":
        return self._bitwise(other, BitwiseOp.OR)

    def __ixor__(self, other: IntegerLike) -> "BigInteger":
        return self._bitwise(other, BitwiseOp.XOR)

    def __ilshift__(self, count: int) -> "BigInteger":
        if not _is_shift_count(count):
            return NotImplemented
        return self._adopt(shift_left_magnitude(self._limbs, count), self._negative)

    def __irshift__(self, count: int) -> "BigInteger":
        if not _is_shift_count(count):
            return NotImplemented
        limbs, negative = shift_right(self._limbs, self._negative, count)
        return self._adopt(limbs, negative)

    # =========================================================================
    # БИНАРНЫЕ ОПЕРАТОРЫ (копия левого операнда + составной оператор)
    # =========================================================================

    def __add__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__iadd__(other)

    def __radd__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__iadd__(self)

    def __sub__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__isub__(other)

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__isub__(self)

    def __mul__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__imul__(other)

    def __rmul__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__imul__(self)

    def __truediv__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__itruediv__(other)

    def __rtruediv__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__itruediv__(self)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__imod__(other)

    def __rmod__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__imod__(self)

    def __divmod__(self, other: IntegerLike) -> tuple["BigInteger", "BigInteger"]:
        if _coerce(other) is None:
            return NotImplemented
        return self / other, self % other

    def __rdivmod__(self, other: int) -> tuple["BigInteger", "BigInteger"]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return divmod(lhs, self)

    def __and__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__iand__(other)

    __rand__ = __and__

    def __or__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__ior__(other)

    __ror__ = __or__

    def __xor__(self, other: IntegerLike) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.copy().__ixor__(other)

    __rxor__ = __xor__

    def __lshift__(self, count: int) -> "BigInteger":
        if not _is_shift_count(count):
            return NotImplemented
        return self.copy().__ilshift__(count)

    def __rshift__(self, count: int) -> "BigInteger":
        if not _is_shift_count(count):
            return NotImplemented
        return self.copy().__irshift__(count)

    # =========================================================================
    # УНАРНЫЕ ОПЕРАТОРЫ, ИНКРЕМЕНТ И ДЕКРЕМЕНТ
    # =========================================================================

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        return BigInteger()._adopt(list(self._limbs), not self._negative)

    def __invert__(self) -> "BigInteger":
        return -(self + 1)

    def __abs__(self) -> "BigInteger":
        return BigInteger()._adopt(list(self._limbs), False)

    def increment(self) -> "BigInteger":
        """Префиксный инкремент: изменяет экземпляр и возвращает его."""
        return self.__iadd__(1)

    def decrement(self) -> "BigInteger":
        """Префиксный декремент: изменяет экземпляр и возвращает его."""
        return self.__isub__(1)

    def post_increment(self) -> "BigInteger":
        """Постфиксный инкремент: изменяет экземпляр, возвращает прежнее значение."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный декремент: изменяет экземпляр, возвращает прежнее значение."""
        previous = self.copy()
        self.decrement()
        return previous

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) == 0

    def __ne__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) != 0

    def __lt__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def is_zero(self) -> bool:
        return not self._limbs

    def is_negative(self) -> bool:
        return self._negative

    def limbs(self) -> tuple[int, ...]:
        """Read-only копия limbs (младший первым)."""
        return tuple(self._limbs)

    def limb_count(self) -> int:
        return len(self._limbs)

    def to_string(self) -> str:
        """Каноническая десятичная запись."""
        return format_decimal(self._limbs, self._negative)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __format__(self, format_spec: str) -> str:
        """
        Форматирование по спецификации int.

        Десятичные спецификации ([[fill]align][sign][0][width][,|_][d])
        строятся из собственной десятичной записи, без ограничения на
        число цифр. Остальные (b, o, x, X, n, c, 0-заполнение вместе с
        группировкой) делегируются нативному int.

        Raises:
            ValueError: Спецификация недопустима для целого
        """
        if not format_spec:
            return self.to_string()

        match = _DECIMAL_FORMAT_SPEC.fullmatch(format_spec)
        if match is None or (match["zero"] and match["grouping"]):
            return format(int(self), format_spec)

        digits = format_decimal(self._limbs, False)
        grouping = match["grouping"]
        if grouping:
            head = len(digits) % 3 or 3
            groups = [digits[:head]]
            groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
            digits = grouping.join(groups)

        sign = match["sign"] or "-"
        prefix = "-" if self._negative else ("" if sign == "-" else sign)

        fill = match["fill"]
        align = match["align"]
        if match["zero"]:
            fill = fill or "0"
            align = align or "="
        fill = fill or " "
        align = align or ">"

        padding = max(int(match["width"] or 0) - len(prefix) - len(digits), 0)
        if align == "=":
            return prefix + fill * padding + digits
        body = prefix + digits
        if align == "<":
            return body + fill * padding
        if align == ">":
            return fill * padding + body
        left = padding // 2
        return fill * left + body + fill * (padding - left)

    def __int__(self) -> int:
        value = limbs_to_int(self._limbs)
        return -value if self._negative else value

    def __bool__(self) -> bool:
        return bool(self._limbs)


def to_string(value: BigInteger) -> str:
    """Каноническая десятичная запись BigInteger."""
    return value.to_string()
