"""
Numeric — Абстрактный контракт числовых типов

Набор операций, который реализует каждый числовой тип:
- Именованные операции: negate, abs, add, subtract, multiply, divide,
  invert, power, compare_to
- Операторы Python (-x, +x, a + b, a - b, a * b, a / b, abs(x), x ** n,
  <, <=, >, >=) определены ОДИН раз здесь и безусловно делегируют
  именованным операциям

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операторы не содержат собственной логики — только делегирование
2. Конкретные типы не переопределяют операторы
3. +x возвращает тот же экземпляр (identity, а не копию)
4. Операнд другого типа → NotImplemented (стандартный протокол Python)
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

N = TypeVar("N", bound="Numeric")


class Numeric(ABC):
    """
    Базовый контракт числа.

    Состояния не хранит. Равенство и хеширование обязаны согласовываться
    (равные значения → равные хеши); это достижимо, только если конкретный
    тип хранит значение в каноническом виде.
    """

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    @abstractmethod
    def is_invertible(self) -> bool:
        """Существует ли мультипликативно обратное."""

    def is_not_invertible(self) -> bool:
        return not self.is_invertible()

    @abstractmethod
    def is_integer(self) -> bool:
        """Принадлежит ли значение кольцу целых чисел."""

    def is_not_integer(self) -> bool:
        return not self.is_integer()

    @abstractmethod
    def is_zero(self) -> bool:
        ...

    @abstractmethod
    def is_one(self) -> bool:
        ...

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @abstractmethod
    def negate(self: N) -> N:
        """Аддитивно обратное значение."""

    @abstractmethod
    def abs(self: N) -> N:
        """Модуль значения."""

    @abstractmethod
    def add(self: N, summand: N) -> N:
        """Сумма self и summand."""

    @abstractmethod
    def subtract(self: N, subtrahend: N) -> N:
        """Разность self и subtrahend."""

    @abstractmethod
    def multiply(self: N, multiplier: N) -> N:
        """Произведение self и multiplier."""

    @abstractmethod
    def divide(self: N, divisor: N) -> N:
        """
        Частное self и divisor.

        Raises:
            DivisionByZeroError: Если divisor необратим (равен нулю)
        """

    @abstractmethod
    def invert(self: N) -> N:
        """
        Мультипликативно обратное значение.

        Raises:
            DivisionByZeroError: Если self необратим (равен нулю)
        """

    @abstractmethod
    def power(self: N, exponent: int) -> N:
        """self в степени exponent."""

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    @abstractmethod
    def compare_to(self: N, other: N) -> int:
        """
        Трёхзначное сравнение.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """

    def is_less_than(self: N, other: N) -> bool:
        return self.compare_to(other) < 0

    def is_less_than_or_equal_to(self: N, other: N) -> bool:
        return self.compare_to(other) <= 0

    def is_greater_than(self: N, other: N) -> bool:
        return self.compare_to(other) > 0

    def is_greater_than_or_equal_to(self: N, other: N) -> bool:
        return self.compare_to(other) >= 0

    # =========================================================================
    # ОПЕРАТОРЫ (делегирование)
    # =========================================================================

    def _same_kind(self, other: Any) -> bool:
        return isinstance(other, type(self))

    def __neg__(self: N) -> N:
        return self.negate()

    def __pos__(self: N) -> N:
        return self

    def __abs__(self: N) -> N:
        return self.abs()

    def __add__(self, other: Any) -> Any:
        if not self._same_kind(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Any:
        if not self._same_kind(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        if not self._same_kind(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Any:
        if not self._same_kind(other):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __lt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    def __bool__(self) -> bool:
        return not self.is_zero()
