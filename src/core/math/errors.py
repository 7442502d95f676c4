"""
Errors: таксономия ошибок BigInteger

Две пользовательские ошибки, обе являются invalid-argument (ValueError):
- MalformedNumberError: пустая строка или символ вне '0'-'9'
- DivisionByZeroError: делитель равен нулю (для любого знака делимого)

Ошибки поднимаются в точке обнаружения и не перехватываются внутри
библиотеки. Нарушение внутренних инвариантов (нормализация, коррекции
в алгоритме D) проявляется как AssertionError.
"""


class BigIntegerError(ValueError):
    """Базовая ошибка арифметики произвольной точности."""

    pass


class MalformedNumberError(BigIntegerError):
    """
    Некорректная десятичная запись числа.

    Поднимается при пустой строке, строке из одного '-' или при любом
    символе вне ASCII '0'-'9' в теле числа.
    """

    pass


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """
    Деление или взятие остатка на ноль.

    Наследует ZeroDivisionError, чтобы вести себя как встроенный int
    для кода, который ловит стандартное исключение.
    """

    pass
