"""
Numeric Errors — Таксономия ошибок точной арифметики

Все ошибки ядра наследуются от NumericError (ArithmeticError), поэтому
вызывающий код может перехватить их разом, но каждая конкретная ошибка
остаётся различимой.

ВАЖНО: ни одна ошибка не наследуется от ValueError. Pydantic оборачивает
ValueError в ValidationError, а ошибки ядра должны доходить до вызывающего
кода без изменений.
"""


class NumericError(ArithmeticError):
    """Базовая ошибка ядра точной арифметики."""

    pass


class ZeroDenominatorError(NumericError):
    """
    Попытка сконструировать дробь с нулевым знаменателем.

    Никогда не восстанавливается локально: значение с нулевым знаменателем
    непредставимо.
    """

    pass


class DivisionByZeroError(NumericError, ZeroDivisionError):
    """
    Деление на ноль (divide) или обращение нуля (invert).

    Наследуется от ZeroDivisionError, чтобы совпадать с семантикой
    встроенных числовых типов Python.
    """

    pass


class FixedWidthOverflowError(NumericError, OverflowError):
    """
    Переполнение фиксированной разрядности (signed 64-bit).

    Возникает в точке, где промежуточный или итоговый результат умножения,
    сложения, вычитания или отрицания выходит за [INT64_MIN, INT64_MAX].
    Молчаливый wraparound и расширение до длинной арифметики запрещены.
    """

    pass
