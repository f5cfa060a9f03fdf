"""
Value Arithmetic — внешняя арифметика домена значений

Модуль описывает минимальный набор арифметических примитивов, который
потребляет CNF-кодировщик, и предоставляет одну конкретную реализацию
над натуральными числами (неотрицательные Python int).

Потребляемые операции:
- Полный порядок и равенство (lt, le, eq)
- Константы zero, one
- add, mul
- pow(b, e): возведение основания b в степень e
- div(o, d), mod(o, d): евклидово деление и остаток
- log(b, o): наибольший e такой, что b^e <= o

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. log(b, o) = 0 при o = 0 или b <= 1
2. pow(b, log(b, o)) <= o < pow(b, log(b, o) + 1) при o != 0 и b > 1
3. mod(o, pow(b, log(b, o))) < o при o != 0 (строгое убывание остатка)
4. Все операции чистые и детерминированные
"""

import math
from typing import Any, Final, Protocol, runtime_checkable


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class ValueArithmetic(Protocol):
    """
    Интерфейс арифметики домена значений.

    Значения непрозрачны: кодировщик сравнивает и комбинирует их
    исключительно через методы этого протокола.
    """

    @property
    def zero(self) -> Any: ...

    @property
    def one(self) -> Any: ...

    def lt(self, a: Any, b: Any) -> bool: ...

    def le(self, a: Any, b: Any) -> bool: ...

    def eq(self, a: Any, b: Any) -> bool: ...

    def add(self, a: Any, b: Any) -> Any: ...

    def mul(self, a: Any, b: Any) -> Any: ...

    def pow(self, b: Any, e: Any) -> Any: ...

    def div(self, o: Any, d: Any) -> Any: ...

    def mod(self, o: Any, d: Any) -> Any: ...

    def log(self, b: Any, o: Any) -> Any: ...


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_value(value: Any, name: str) -> None:
    """
    Валидация, что значение принадлежит натуральному домену.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be a non-negative int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# NATURAL NUMBERS
# =============================================================================


class NaturalArithmetic:
    """
    Арифметика натуральных чисел (0, 1, 2, ...) поверх Python int.

    Python int имеет произвольную точность, поэтому все операции точные.
    Деление на ноль следует соглашению ординальной арифметики:
    div(o, 0) = 0, mod(o, 0) = o.
    """

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def lt(self, a: int, b: int) -> bool:
        return a < b

    def le(self, a: int, b: int) -> bool:
        return a <= b

    def eq(self, a: int, b: int) -> bool:
        return a == b

    def add(self, a: int, b: int) -> int:
        return a + b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def pow(self, b: int, e: int) -> int:
        return b**e

    def div(self, o: int, d: int) -> int:
        if d == 0:
            return 0
        return o // d

    def mod(self, o: int, d: int) -> int:
        if d == 0:
            return o
        return o % d

    def log(self, b: int, o: int) -> int:
        """
        Целочисленный логарифм по основанию b.

        Возвращает наибольший e такой, что b^e <= o.
        По соглашению log(b, 0) = 0 и log(b, o) = 0 при b <= 1.

        Examples:
            >>> NATURAL.log(2, 5)
            2
            >>> NATURAL.log(3, 9)
            2
            >>> NATURAL.log(10, 7)
            0
            >>> NATURAL.log(1, 100)
            0
        """
        if o == 0 or b <= 1:
            return 0

        if b == 2:
            return o.bit_length() - 1

        # Оценка через float, затем точная коррекция в целых числах
        e = max(int(math.log(o, b)), 0)
        while e > 0 and b**e > o:
            e -= 1
        while b ** (e + 1) <= o:
            e += 1
        return e

    def __repr__(self) -> str:
        return "NaturalArithmetic()"


# Арифметика по умолчанию для всех публичных операций
NATURAL: Final[NaturalArithmetic] = NaturalArithmetic()
