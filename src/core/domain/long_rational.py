"""
LongRational — Рациональное число фиксированной разрядности

Immutable Pydantic модель: числитель и знаменатель в диапазоне signed 64-bit,
всегда в каноническом виде. Все арифметические операции создают новый
экземпляр; существующие экземпляры никогда не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются при каждом конструировании):
1. denominator > 0 — знак хранится только в числителе
2. gcd(|numerator|, denominator) == 1 при numerator != 0
3. numerator == 0 → denominator == 1 (единственное представление нуля)
4. denominator != 0 (нулевой знаменатель → ZeroDenominatorError)

ПОЛИТИКА ПЕРЕПОЛНЕНИЯ:
Каждое умножение, сложение и отрицание проверяется до использования
результата (checked_arithmetic). Переполнение → FixedWidthOverflowError,
никогда wraparound и никогда переход к длинной арифметике.

ALGORITHM (нормализация):
    1. denominator == 0            → ZeroDenominatorError
    2. numerator == 0              → (0, 1)
    3. numerator == denominator    → (1, 1)
    4. g = gcd(numerator, denominator); (numerator / g, denominator / g)
    5. denominator < 0             → (-numerator, -denominator), checked

Сокращение выполняется до смены знака, поэтому INT64_MIN в знаменателе
допустим, если он сокращается (например 2 / INT64_MIN == -1 / 2^62).
"""

import logging
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal, localcontext
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.core.domain.rational import Rational
from src.core.math.checked_arithmetic import (
    INT64_MAX,
    INT64_MIN,
    checked_abs,
    checked_add,
    checked_multiply,
    checked_negate,
    checked_power,
    checked_subtract,
    gcd,
    require_int64,
)
from src.core.math.errors import DivisionByZeroError, ZeroDenominatorError

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ DECIMAL-КОНВЕРСИИ
# =============================================================================

# Максимальное число десятичных цифр целой части значения signed 64-bit
INT64_DECIMAL_DIGITS: Final[int] = 19

# Дополнительные значащие цифры при делении перед quantize.
# Отклонение n/d от точки "ровно посередине" не меньше 1 / (2 * d * 10^scale),
# поэтому оно проявляется в первых scale + 20 знаках после запятой.
DECIMAL_GUARD_DIGITS: Final[int] = 21


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _is_exact_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _canonical_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары (numerator, denominator) к каноническому виду.

    Raises:
        FixedWidthOverflowError: Если вход вне signed 64-bit или
            смена знака непредставима
        ZeroDenominatorError: Если denominator == 0
    """
    require_int64(numerator, "numerator")
    require_int64(denominator, "denominator")

    if denominator == 0:
        logger.debug("zero denominator for numerator %d", numerator)
        raise ZeroDenominatorError(f"zero denominator: {numerator}/0")

    if numerator == 0:
        return 0, 1

    # gcd(INT64_MIN, INT64_MIN) == 2^63 непредставим
    if numerator == denominator:
        return 1, 1

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    if denominator < 0:
        numerator = checked_negate(numerator)
        denominator = checked_negate(denominator)

    return numerator, denominator


# =============================================================================
# LONG RATIONAL
# =============================================================================


class LongRational(BaseModel, Rational):
    """
    Рациональное число над signed 64-bit.

    Конструирование: LongRational(2, 3), LongRational(5) или
    LongRational(numerator=2, denominator=3). Любой путь конструирования
    проходит через нормализацию, поэтому неканонический экземпляр
    получить нельзя.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    """

    numerator: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Числитель (несёт знак)"
    )
    denominator: int = Field(
        ..., gt=0, le=INT64_MAX, description="Знаменатель (всегда положительный)"
    )

    model_config = ConfigDict(frozen=True, strict=True)

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Нормализация до field-валидации.

        Нецелые значения пропускаются без изменений — их отклоняет strict
        field-валидация (ValidationError).
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator", 1)
        if not (_is_exact_int(numerator) and _is_exact_int(denominator)):
            return data

        numerator, denominator = _canonical_pair(numerator, denominator)
        return {"numerator": numerator, "denominator": denominator}

    @classmethod
    def model_construct(cls, _fields_set: set[str] | None = None, **values: Any) -> "LongRational":
        """
        Конструирование без обхода нормализации.

        Стандартный model_construct пропускает валидацию и позволил бы создать
        неканонический экземпляр (2/4, 1/0), поэтому значения валидируются.
        """
        return cls(values.get("numerator"), values.get("denominator", 1))

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "LongRational":
        """
        Копия с изменёнными полями, нормализованная заново.

        Экземпляры неизменяемы, поэтому без update возвращается self.
        """
        if not update:
            return self
        values = {"numerator": self.numerator, "denominator": self.denominator, **update}
        return LongRational(values["numerator"], values["denominator"])

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_invertible(self) -> bool:
        return self.numerator != 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == self.denominator

    def is_unit_fraction(self) -> bool:
        return self.numerator == 1

    def is_dyadic(self) -> bool:
        return self.denominator & (self.denominator - 1) == 0

    def is_proper(self) -> bool:
        return abs(self.numerator) < self.denominator

    def is_positive(self) -> bool:
        return self.numerator > 0

    def signum(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def negate(self) -> "LongRational":
        """
        (-a)/b.

        Raises:
            FixedWidthOverflowError: Если numerator == INT64_MIN
        """
        return LongRational(checked_negate(self.numerator), self.denominator)

    def abs(self) -> "LongRational":
        """
        |a|/b.

        Raises:
            FixedWidthOverflowError: Если numerator == INT64_MIN
        """
        return LongRational(checked_abs(self.numerator), self.denominator)

    def add(self, summand: "LongRational") -> "LongRational":
        """
        a/b + c/d = (a*d + c*b) / (b*d)

        Перекрёстные произведения не сокращены заранее, поэтому результат
        проходит нормализацию.

        Raises:
            FixedWidthOverflowError: При переполнении любого шага
        """
        numerator = checked_add(
            checked_multiply(self.numerator, summand.denominator),
            checked_multiply(summand.numerator, self.denominator),
        )
        denominator = checked_multiply(self.denominator, summand.denominator)
        return LongRational(numerator, denominator)

    def subtract(self, subtrahend: "LongRational") -> "LongRational":
        """
        a/b - c/d = (a*d - c*b) / (b*d)

        Raises:
            FixedWidthOverflowError: При переполнении любого шага
        """
        numerator = checked_subtract(
            checked_multiply(self.numerator, subtrahend.denominator),
            checked_multiply(subtrahend.numerator, self.denominator),
        )
        denominator = checked_multiply(self.denominator, subtrahend.denominator)
        return LongRational(numerator, denominator)

    def multiply(self, multiplier: "LongRational") -> "LongRational":
        """
        a/b * c/d = (a*c) / (b*d)

        Raises:
            FixedWidthOverflowError: При переполнении любого шага
        """
        return LongRational(
            checked_multiply(self.numerator, multiplier.numerator),
            checked_multiply(self.denominator, multiplier.denominator),
        )

    def divide(self, divisor: "LongRational") -> "LongRational":
        """
        a/b / c/d = (a*d) / (b*c)

        Знак переносится в числитель после сокращения, поэтому делитель
        с числителем INT64_MIN допустим, если результат представим.

        Raises:
            DivisionByZeroError: Если c == 0
            FixedWidthOverflowError: При переполнении любого шага
        """
        if divisor.is_not_invertible():
            logger.debug("division by zero: %s / %s", self, divisor)
            raise DivisionByZeroError(f"division by zero: {self} / {divisor}")
        return LongRational(
            checked_multiply(self.numerator, divisor.denominator),
            checked_multiply(self.denominator, divisor.numerator),
        )

    def invert(self) -> "LongRational":
        """
        b/a.

        Raises:
            DivisionByZeroError: Если a == 0
            FixedWidthOverflowError: Если a == INT64_MIN (знак не переносится)
        """
        if self.is_not_invertible():
            logger.debug("attempt to invert zero")
            raise DivisionByZeroError(f"division by zero: {self} is not invertible")
        return LongRational(self.denominator, self.numerator)

    def power(self, exponent: int) -> "LongRational":
        """
        (a/b)^exponent

        exponent == 0 → 1/1 (в том числе для нуля).
        exponent < 0  → invert().power(-exponent).

        Raises:
            DivisionByZeroError: Если self == 0 и exponent < 0
            FixedWidthOverflowError: При переполнении
        """
        if exponent < 0:
            return self.invert().power(-exponent)
        return LongRational(
            checked_power(self.numerator, exponent),
            checked_power(self.denominator, exponent),
        )

    def increment(self) -> "LongRational":
        return self.add(ONE)

    def decrement(self) -> "LongRational":
        return self.subtract(ONE)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare_to(self, other: "LongRational") -> int:
        """
        Сравнение a/b и c/d через a*d и c*b.

        Знаменатели положительны, поэтому знак сравнения сохраняется.
        Произведения вычисляются в неограниченных int Python (до 126 бит),
        поэтому порядок корректен для любых канонических пар.
        """
        left = self.numerator * other.denominator
        right = other.numerator * self.denominator
        return (left > right) - (left < right)

    def min(self, other: "LongRational") -> "LongRational":
        return self if self.is_less_than_or_equal_to(other) else other

    def max(self, other: "LongRational") -> "LongRational":
        return self if self.is_greater_than_or_equal_to(other) else other

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LongRational):
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_decimal(self, scale: int | None = None, rounding: str = ROUND_HALF_EVEN) -> Decimal:
        """
        Конверсия в Decimal.

        Без scale: деление с точностью текущего decimal-контекста и режимом
        округления rounding.
        Со scale: результат корректно округлён до scale знаков после запятой
        (деление с усечением и запасом точности, затем quantize).

        Args:
            scale: Количество знаков после запятой (>= 0) или None
            rounding: Режим округления (decimal.ROUND_*)

        Raises:
            ValueError: Если scale < 0

        Examples:
            >>> LongRational(1, 8).to_decimal(2)
            Decimal('0.12')
            >>> LongRational(1, 8).to_decimal(2, ROUND_HALF_UP)  # doctest: +SKIP
            Decimal('0.13')
        """
        if scale is None:
            with localcontext() as ctx:
                ctx.rounding = rounding
                return Decimal(self.numerator) / Decimal(self.denominator)

        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")

        with localcontext() as ctx:
            ctx.prec = INT64_DECIMAL_DIGITS + scale + DECIMAL_GUARD_DIGITS
            ctx.rounding = ROUND_DOWN
            quotient = Decimal(self.numerator) / Decimal(self.denominator)
            return quotient.quantize(Decimal(1).scaleb(-scale), rounding=rounding)

    def __int__(self) -> int:
        """Усечение к нулю."""
        quotient = abs(self.numerator) // self.denominator
        return quotient if self.numerator >= 0 else -quotient

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


# =============================================================================
# ФАБРИКА И КОНСТАНТЫ
# =============================================================================


def make_rational(numerator: int, denominator: int = 1) -> LongRational:
    """
    Конструирование канонического LongRational.

    Args:
        numerator: Числитель (signed 64-bit)
        denominator: Знаменатель (signed 64-bit, != 0)

    Returns:
        LongRational в каноническом виде

    Raises:
        ZeroDenominatorError: Если denominator == 0
        FixedWidthOverflowError: Если нормализация требует непредставимого
            отрицания или вход вне signed 64-bit

    Examples:
        >>> make_rational(6, 9)
        LongRational(numerator=2, denominator=3)
        >>> make_rational(3, -6)
        LongRational(numerator=-1, denominator=2)
    """
    return LongRational(numerator, denominator)


# Аддитивная единица (общий экземпляр на процесс)
ZERO: Final[LongRational] = LongRational(0, 1)

# Мультипликативная единица (общий экземпляр на процесс)
ONE: Final[LongRational] = LongRational(1, 1)
