"""
CNF Recursion — well-founded рекурсия по остаткам Cantor Normal Form

Схема рекурсии "старший член + строго меньший остаток":

    C(0)  = base_case
    C(o)  = step(o, C(o mod b^log_b(o)))    при o != 0

Рекурсия реализована явным циклом: сначала строится цепочка остатков
o > r1 > r2 > ... > 0, затем step сворачивается снизу вверх. Память
O(число членов CNF), стек вызовов не растёт.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для o != 0 остаток o mod b^log_b(o) строго меньше o
2. Нарушение (1) — ошибка арифметического слоя, а не пользователя:
   поднимается CNFInvariantViolation
3. Опциональный лимит max_terms ограничивает длину цепочки
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Final, Iterator, NamedTuple, Optional, TypeVar

from ordinal_cnf.core.math.value_arithmetic import NATURAL, ValueArithmetic

logger = logging.getLogger(__name__)

R = TypeVar("R")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CNFInvariantViolation(RuntimeError):
    """
    Внутреннее нарушение инварианта CNF.

    Поднимается, когда арифметика домена нарушает контракт строго
    убывающего остатка, превышен лимит max_terms или (при включённых
    проверках) коэффициент вышел за пределы (0, b).

    Это не пользовательская ошибка: для корректной арифметики кодировщик
    тотален на всём домене.
    """

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CNFConfig:
    """Конфигурация CNF-кодировщика.

    max_terms: верхняя граница числа членов (None — без ограничения)
    check_invariants: проверять порядок и границы каждого члена
    """

    max_terms: Optional[int] = None
    check_invariants: bool = True

    def __post_init__(self) -> None:
        if self.max_terms is not None and self.max_terms < 0:
            raise ValueError(f"max_terms must be non-negative, got {self.max_terms}")


DEFAULT_CNF_CONFIG: Final[CNFConfig] = CNFConfig()


# =============================================================================
# STEP
# =============================================================================


class CNFStep(NamedTuple):
    """Один шаг разложения: o = b^exponent * (o / power) + remainder."""

    value: Any
    exponent: Any
    power: Any
    remainder: Any


def cnf_step(b: Any, o: Any, arithmetic: ValueArithmetic = NATURAL) -> CNFStep:
    """
    Один шаг разложения ненулевого o по основанию b.

    Args:
        b: Основание
        o: Ненулевое значение
        arithmetic: Арифметика домена

    Returns:
        CNFStep(o, log_b(o), b^log_b(o), o mod b^log_b(o))
    """
    exponent = arithmetic.log(b, o)
    power = arithmetic.pow(b, exponent)
    remainder = arithmetic.mod(o, power)
    return CNFStep(o, exponent, power, remainder)


def cnf_remainder(b: Any, o: Any, arithmetic: ValueArithmetic = NATURAL) -> Any:
    """
    Остаток o mod b^log_b(o) — убывающая мера рекурсии.

    Examples:
        >>> cnf_remainder(2, 5)
        1
        >>> cnf_remainder(10, 1234)
        234
    """
    return cnf_step(b, o, arithmetic).remainder


def _fault(message: str) -> CNFInvariantViolation:
    logger.error("CNF invariant violation: %s", message)
    return CNFInvariantViolation(message)


def iter_cnf_steps(
    b: Any,
    o: Any,
    *,
    arithmetic: ValueArithmetic = NATURAL,
    config: Optional[CNFConfig] = None,
) -> Iterator[CNFStep]:
    """
    Итератор по шагам разложения o, r1, r2, ... (все ненулевые).

    Каждый шаг проверяет строгое убывание остатка. Для o = 0 цепочка пуста.

    Raises:
        CNFInvariantViolation: остаток не меньше текущего значения
            или превышен config.max_terms
    """
    config = config or DEFAULT_CNF_CONFIG
    zero = arithmetic.zero
    current = o
    count = 0

    while not arithmetic.eq(current, zero):
        if config.max_terms is not None and count >= config.max_terms:
            raise _fault(
                f"CNF of base {b!r} exceeded max_terms={config.max_terms} "
                f"(remaining value {current!r})"
            )

        step = cnf_step(b, current, arithmetic)
        if not arithmetic.lt(step.remainder, current):
            raise _fault(
                f"remainder {step.remainder!r} is not smaller than {current!r} "
                f"(base {b!r}, exponent {step.exponent!r})"
            )

        yield step
        current = step.remainder
        count += 1


def cnf_rec(
    b: Any,
    o: Any,
    base_case: R,
    step: Callable[[Any, R], R],
    *,
    arithmetic: ValueArithmetic = NATURAL,
    config: Optional[CNFConfig] = None,
) -> R:
    """
    Принцип рекурсии по CNF-остаткам.

    Вычисляет C(o), где C(0) = base_case и
    C(o) = step(o, C(o mod b^log_b(o))) при o != 0.

    Args:
        b: Основание
        o: Значение
        base_case: Результат для нуля
        step: Функция (o, результат для остатка) -> результат для o
        arithmetic: Арифметика домена
        config: Конфигурация (лимит шагов)

    Returns:
        C(o)

    Examples:
        >>> cnf_rec(2, 5, 0, lambda _o, n: n + 1)  # число членов CNF
        2
    """
    chain = [s.value for s in iter_cnf_steps(b, o, arithmetic=arithmetic, config=config)]

    result = base_case
    for value in reversed(chain):
        result = step(value, result)
    return result
