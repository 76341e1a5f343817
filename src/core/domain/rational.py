"""
Rational — Контракт рациональных чисел

Расширяет Numeric предикатами дробей (unit fraction, dyadic, proper),
знаком, min/max, increment/decrement и конверсией в Decimal.
"""

from abc import abstractmethod
from decimal import ROUND_HALF_EVEN, Decimal

from src.core.domain.numeric import N, Numeric


class Rational(Numeric):
    """Базовый контракт рационального числа."""

    @abstractmethod
    def is_unit_fraction(self) -> bool:
        """Числитель равен 1 (1/n)."""

    def is_not_unit_fraction(self) -> bool:
        return not self.is_unit_fraction()

    @abstractmethod
    def is_dyadic(self) -> bool:
        """Знаменатель — степень двойки."""

    def is_not_dyadic(self) -> bool:
        return not self.is_dyadic()

    @abstractmethod
    def is_proper(self) -> bool:
        """|числитель| < знаменатель."""

    def is_improper(self) -> bool:
        return not self.is_proper()

    @abstractmethod
    def is_positive(self) -> bool:
        ...

    def is_negative(self) -> bool:
        return not self.is_positive() and not self.is_zero()

    @abstractmethod
    def signum(self) -> int:
        """-1, 0 или +1."""

    @abstractmethod
    def min(self: N, other: N) -> N:
        ...

    @abstractmethod
    def max(self: N, other: N) -> N:
        ...

    @abstractmethod
    def increment(self: N) -> N:
        """self + 1."""

    @abstractmethod
    def decrement(self: N) -> N:
        """self - 1."""

    @abstractmethod
    def to_decimal(self, scale: int | None = None, rounding: str = ROUND_HALF_EVEN) -> Decimal:
        """
        Конверсия в Decimal.

        Args:
            scale: Количество знаков после запятой (None → точность контекста)
            rounding: Режим округления из модуля decimal

        Returns:
            Decimal-представление значения
        """
