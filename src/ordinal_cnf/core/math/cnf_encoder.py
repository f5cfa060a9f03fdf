"""
CNF Encoder — каноническое разложение в Cantor Normal Form

Вычисляет CNF(b, o): последовательность пар (exponent, coefficient) такую, что

    o = b^e1 * c1 + (b^e2 * c2 + (... + (b^ek * ck + 0)))

Алгоритм:
1. o = 0 → []
2. b <= 1 (вырожденное основание) → [(0, o)]
3. иначе e = log_b(o), c = o / b^e, член (e, c), продолжить с o mod b^e

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экспоненты строго убывают
2. Все коэффициенты > 0
3. При b > 1 все коэффициенты < b
4. CNF(b, o) = [] тогда и только тогда, когда o = 0
5. eval_cnf(b, cnf(b, o)) = o
6. Первая экспонента равна log_b(o), все экспоненты <= log_b(o)
"""

import logging
from typing import Any, Iterable, NamedTuple, Optional, Sequence

from ordinal_cnf.core.math.cnf_recursion import (
    CNFConfig,
    CNFInvariantViolation,
    DEFAULT_CNF_CONFIG,
    iter_cnf_steps,
)
from ordinal_cnf.core.math.value_arithmetic import (
    NATURAL,
    NaturalArithmetic,
    ValueArithmetic,
    validate_value,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TYPES
# =============================================================================


class CNFEntry(NamedTuple):
    """Член CNF: b^exponent * coefficient."""

    exponent: Any
    coefficient: Any


def _validate_inputs(b: Any, o: Any, arithmetic: ValueArithmetic) -> None:
    # Для непрозрачных доменов корректность значений — ответственность арифметики
    if isinstance(arithmetic, NaturalArithmetic):
        validate_value(b, "base")
        validate_value(o, "value")


# =============================================================================
# ENCODER
# =============================================================================


def cnf(
    b: Any,
    o: Any,
    *,
    arithmetic: ValueArithmetic = NATURAL,
    config: Optional[CNFConfig] = None,
) -> list[CNFEntry]:
    """
    Cantor Normal Form значения o по основанию b.

    Функция тотальна на домене: вырожденные основания 0 и 1 дают одну
    "цифру" (0, o), ноль даёт пустой список.

    Args:
        b: Основание
        o: Значение
        arithmetic: Арифметика домена (default: натуральные числа)
        config: Конфигурация (лимит членов, проверки инвариантов)

    Returns:
        Новый список CNFEntry со строго убывающими экспонентами

    Raises:
        CNFInvariantViolation: арифметика нарушила контракт (внутренняя ошибка)

    Examples:
        >>> cnf(2, 5)
        [CNFEntry(exponent=2, coefficient=1), CNFEntry(exponent=0, coefficient=1)]
        >>> cnf(5, 5)
        [CNFEntry(exponent=1, coefficient=1)]
        >>> cnf(1, 7)
        [CNFEntry(exponent=0, coefficient=7)]
        >>> cnf(2, 0)
        []
    """
    config = config or DEFAULT_CNF_CONFIG
    _validate_inputs(b, o, arithmetic)

    if arithmetic.eq(o, arithmetic.zero):
        return []

    if arithmetic.le(b, arithmetic.one):
        return [CNFEntry(arithmetic.zero, o)]

    entries: list[CNFEntry] = []
    for step in iter_cnf_steps(b, o, arithmetic=arithmetic, config=config):
        entry = CNFEntry(step.exponent, arithmetic.div(step.value, step.power))
        if config.check_invariants:
            _check_emitted(b, entry, entries[-1] if entries else None, arithmetic)
        entries.append(entry)

    logger.debug("cnf(base=%r): %d term(s)", b, len(entries))
    return entries


def _check_emitted(
    b: Any,
    entry: CNFEntry,
    previous: Optional[CNFEntry],
    arithmetic: ValueArithmetic,
) -> None:
    message = None
    if not arithmetic.lt(arithmetic.zero, entry.coefficient):
        message = f"coefficient {entry.coefficient!r} is not positive"
    elif not arithmetic.lt(entry.coefficient, b):
        message = f"coefficient {entry.coefficient!r} is not below base {b!r}"
    elif previous is not None and not arithmetic.lt(entry.exponent, previous.exponent):
        message = (
            f"exponent {entry.exponent!r} does not decrease "
            f"(previous {previous.exponent!r})"
        )

    if message is not None:
        logger.error("CNF invariant violation: %s", message)
        raise CNFInvariantViolation(message)


# =============================================================================
# EVALUATION
# =============================================================================


def eval_cnf(
    b: Any,
    entries: Iterable[Sequence[Any]],
    *,
    arithmetic: ValueArithmetic = NATURAL,
) -> Any:
    """
    Вычисление значения по списку членов (правая свёртка).

    foldr((e, c), acc ↦ b^e * c + acc, 0)

    Examples:
        >>> eval_cnf(2, [(2, 1), (0, 1)])
        5
        >>> eval_cnf(3, [])
        0
    """
    acc = arithmetic.zero
    for exponent, coefficient in reversed(list(entries)):
        acc = arithmetic.add(arithmetic.mul(arithmetic.pow(b, exponent), coefficient), acc)
    return acc


def leading_exponent(
    b: Any,
    o: Any,
    *,
    arithmetic: ValueArithmetic = NATURAL,
) -> Optional[Any]:
    """
    Экспонента старшего члена CNF(b, o).

    Returns:
        log_b(o) для o != 0 (0 для вырожденного основания), None для o = 0
    """
    _validate_inputs(b, o, arithmetic)
    if arithmetic.eq(o, arithmetic.zero):
        return None
    return arithmetic.log(b, o)


# =============================================================================
# ВАЛИДАЦИЯ ВНЕШНИХ ДАННЫХ
# =============================================================================


def check_cnf(
    b: Any,
    entries: Iterable[Sequence[Any]],
    *,
    arithmetic: ValueArithmetic = NATURAL,
) -> None:
    """
    Проверка, что entries является CNF своего значения по основанию b.

    Используется на границах (snapshot, JSON): данные кодировщика
    удовлетворяют инвариантам по построению.

    Raises:
        ValueError: с указанием нарушенного инварианта
    """
    items = [tuple(entry) for entry in entries]
    degenerate = arithmetic.le(b, arithmetic.one)

    if degenerate and len(items) > 1:
        raise ValueError(f"base {b!r} admits at most one term, got {len(items)}")

    previous = None
    for index, (exponent, coefficient) in enumerate(items):
        if not arithmetic.lt(arithmetic.zero, coefficient):
            raise ValueError(f"term {index}: coefficient {coefficient!r} must be positive")
        if degenerate:
            if not arithmetic.eq(exponent, arithmetic.zero):
                raise ValueError(
                    f"term {index}: base {b!r} admits only exponent 0, got {exponent!r}"
                )
        elif not arithmetic.lt(coefficient, b):
            raise ValueError(
                f"term {index}: coefficient {coefficient!r} must be below base {b!r}"
            )
        if previous is not None and not arithmetic.lt(exponent, previous):
            raise ValueError(
                f"term {index}: exponent {exponent!r} must be below previous {previous!r}"
            )
        previous = exponent


def is_cnf(
    b: Any,
    entries: Iterable[Sequence[Any]],
    *,
    arithmetic: ValueArithmetic = NATURAL,
) -> bool:
    """
    True если entries — каноническая CNF своего значения по основанию b.

    Examples:
        >>> is_cnf(2, [(2, 1), (0, 1)])
        True
        >>> is_cnf(2, [(0, 1), (2, 1)])
        False
        >>> is_cnf(10, [(1, 12)])
        False
    """
    try:
        check_cnf(b, entries, arithmetic=arithmetic)
    except ValueError:
        return False
    return True
