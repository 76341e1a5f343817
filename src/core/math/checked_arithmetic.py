"""
Checked Arithmetic — Целочисленные примитивы с контролем переполнения

Модуль эмулирует signed 64-bit арифметику поверх int Python:
- Каждая операция вычисляется точно, затем результат проверяется на
  принадлежность диапазону [INT64_MIN, INT64_MAX]
- Выход за диапазон → FixedWidthOverflowError (без wraparound)
- НОД всегда положительный и не переполняется

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой возвращённый результат лежит в [INT64_MIN, INT64_MAX]
2. Переполнение никогда не маскируется (ни wraparound, ни long arithmetic)
3. Все операции детерминированы и не имеют побочных эффектов
"""

import logging
from typing import Final

from src.core.math.errors import FixedWidthOverflowError

logger = logging.getLogger(__name__)

# =============================================================================
# ДИАПАЗОН SIGNED 64-BIT
# =============================================================================

INT64_BITS: Final[int] = 64

# Минимальное представимое значение: -2^63
INT64_MIN: Final[int] = -(2 ** (INT64_BITS - 1))

# Максимальное представимое значение: 2^63 - 1
INT64_MAX: Final[int] = 2 ** (INT64_BITS - 1) - 1


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def is_int64(value: int) -> bool:
    """
    Проверка, представимо ли значение в signed 64-bit.

    Args:
        value: Проверяемое значение

    Returns:
        True если INT64_MIN <= value <= INT64_MAX
    """
    return INT64_MIN <= value <= INT64_MAX


def require_int64(value: int, operation: str = "value") -> int:
    """
    Возвращает value, если оно представимо в signed 64-bit.

    Args:
        value: Проверяемое значение
        operation: Описание операции (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        FixedWidthOverflowError: Если value вне [INT64_MIN, INT64_MAX]

    Examples:
        >>> require_int64(42)
        42
        >>> require_int64(2 ** 63)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FixedWidthOverflowError: long overflow: value = 9223372036854775808
    """
    if is_int64(value):
        return value

    logger.debug("int64 overflow in %s: %d", operation, value)
    raise FixedWidthOverflowError(f"long overflow: {operation} = {value}")


def _raise_overflow(operation: str, *operands: int) -> None:
    logger.debug("int64 overflow in %s%r", operation, operands)
    raise FixedWidthOverflowError(
        f"long overflow: {operation}({', '.join(str(o) for o in operands)})"
    )


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с контролем переполнения (аналог addExact).

    Raises:
        FixedWidthOverflowError: Если a + b вне signed 64-bit
    """
    result = a + b
    if not is_int64(result):
        _raise_overflow("add", a, b)
    return result


def checked_subtract(a: int, b: int) -> int:
    """
    Вычитание с контролем переполнения (аналог subtractExact).

    Raises:
        FixedWidthOverflowError: Если a - b вне signed 64-bit
    """
    result = a - b
    if not is_int64(result):
        _raise_overflow("subtract", a, b)
    return result


def checked_multiply(a: int, b: int) -> int:
    """
    Умножение с контролем переполнения (аналог multiplyExact).

    Examples:
        >>> checked_multiply(3, 4)
        12
        >>> checked_multiply(INT64_MAX, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FixedWidthOverflowError: ...

    Raises:
        FixedWidthOverflowError: Если a * b вне signed 64-bit
    """
    result = a * b
    if not is_int64(result):
        _raise_overflow("multiply", a, b)
    return result


def checked_negate(a: int) -> int:
    """
    Отрицание с контролем переполнения (аналог negateExact).

    Единственный непредставимый случай: -INT64_MIN == 2^63.

    Raises:
        FixedWidthOverflowError: Если a == INT64_MIN
    """
    if a == INT64_MIN:
        _raise_overflow("negate", a)
    return -a


def checked_abs(a: int) -> int:
    """
    Модуль с контролем переполнения (аналог absExact).

    Raises:
        FixedWidthOverflowError: Если a == INT64_MIN
    """
    if a == INT64_MIN:
        _raise_overflow("abs", a)
    return abs(a)


def checked_power(base: int, exponent: int) -> int:
    """
    Возведение в неотрицательную степень с контролем переполнения.

    Алгоритм: exponentiation by squaring, каждое умножение проверяется.
    Квадрат основания вычисляется только если он ещё понадобится, поэтому
    переполнение при возведении в квадрат означает переполнение результата.

    Args:
        base: Основание
        exponent: Показатель (>= 0)

    Returns:
        base ** exponent

    Raises:
        ValueError: Если exponent < 0
        FixedWidthOverflowError: Если промежуточный или итоговый результат
            вне signed 64-bit

    Examples:
        >>> checked_power(2, 10)
        1024
        >>> checked_power(-3, 3)
        -27
        >>> checked_power(0, 0)
        1
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = 1
    while True:
        if exponent & 1:
            result = checked_multiply(result, base)
        exponent >>= 1
        if not exponent:
            return result
        base = checked_multiply(base, base)


def gcd(a: int, b: int) -> int:
    """
    Положительный наибольший общий делитель.

    gcd(0, 0) == 0. Для любых значений signed 64-bit, кроме пары
    (INT64_MIN, INT64_MIN) и (INT64_MIN, 0), результат представим;
    в этих двух случаях выбрасывается FixedWidthOverflowError (2^63).

    Raises:
        FixedWidthOverflowError: Если НОД равен 2^63

    Examples:
        >>> gcd(12, -18)
        6
        >>> gcd(0, 5)
        5
    """
    while b:
        a, b = b, a % b
    return require_int64(abs(a), "gcd")
