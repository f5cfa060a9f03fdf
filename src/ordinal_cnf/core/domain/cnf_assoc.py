"""
CNFAssoc — ассоциативное представление Cantor Normal Form

Immutable отображение exponent → coefficient поверх CNF(b, o) с сохранением
порядка членов (строго убывающие экспоненты).

Уникальность ключей — следствие строгого убывания экспонент, отдельный
проход дедупликации не нужен. Тот же порядок позволяет искать ключ
бинарным поиском через сравнение домена.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from ordinal_cnf.core.math.cnf_encoder import CNFEntry, check_cnf, cnf, eval_cnf
from ordinal_cnf.core.math.cnf_recursion import CNFConfig
from ordinal_cnf.core.math.value_arithmetic import NATURAL, ValueArithmetic


# =============================================================================
# CNF ASSOC
# =============================================================================


@dataclass(frozen=True, eq=False)
class CNFAssoc(Mapping):
    """
    CNF(b, o) как ассоциативный список с уникальными ключами.

    Итерация идёт по экспонентам в порядке CNF (от старшей к младшей).
    Обычно создаётся через CNFAssoc.of(b, o) или CNFAssoc.from_entries(b, entries);
    прямой конструктор проверяет каноническую форму entries и совпадение value.

    Равенство — как у Mapping: одинаковые пары exponent → coefficient.
    """

    base: Any
    value: Any
    entries: tuple[CNFEntry, ...]
    arithmetic: ValueArithmetic = field(default=NATURAL, repr=False)

    def __post_init__(self) -> None:
        """
        Проверка инвариантов при создании.

        Raises:
            ValueError: Если entries не является канонической CNF
                или не вычисляется в value
        """
        items = tuple(CNFEntry(e, c) for e, c in self.entries)
        object.__setattr__(self, "entries", items)

        check_cnf(self.base, items, arithmetic=self.arithmetic)
        evaluated = eval_cnf(self.base, items, arithmetic=self.arithmetic)
        if not self.arithmetic.eq(evaluated, self.value):
            raise ValueError(f"entries evaluate to {evaluated!r}, expected value {self.value!r}")

    @classmethod
    def of(
        cls,
        b: Any,
        o: Any,
        *,
        arithmetic: ValueArithmetic = NATURAL,
        config: Optional[CNFConfig] = None,
    ) -> "CNFAssoc":
        """Построение из основания и значения через кодировщик."""
        entries = cnf(b, o, arithmetic=arithmetic, config=config)
        return cls(base=b, value=o, entries=tuple(entries), arithmetic=arithmetic)

    @classmethod
    def from_entries(
        cls,
        b: Any,
        entries: Iterable[Sequence[Any]],
        *,
        arithmetic: ValueArithmetic = NATURAL,
    ) -> "CNFAssoc":
        """
        Построение из готовых членов (например, из snapshot).

        Raises:
            ValueError: Если entries не является канонической CNF
        """
        items = tuple(CNFEntry(e, c) for e, c in entries)
        value = eval_cnf(b, items, arithmetic=arithmetic)
        return cls(base=b, value=value, entries=items, arithmetic=arithmetic)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CNFAssoc):
            if len(self.entries) != len(other.entries):
                return False
            eq = self.arithmetic.eq
            return all(
                eq(a.exponent, b.exponent) and eq(a.coefficient, b.coefficient)
                for a, b in zip(self.entries, other.entries)
            )
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.entries)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def _find(self, exponent: Any) -> Optional[int]:
        lt = self.arithmetic.lt
        lo, hi = 0, len(self.entries)
        # Экспоненты убывают: ищем первую позицию с entries[i].exponent <= exponent
        while lo < hi:
            mid = (lo + hi) // 2
            if lt(exponent, self.entries[mid].exponent):
                lo = mid + 1
            else:
                hi = mid
        if lo < len(self.entries) and self.arithmetic.eq(self.entries[lo].exponent, exponent):
            return lo
        return None

    def is_empty(self) -> bool:
        """True тогда и только тогда, когда value = 0."""
        return not self.entries

    def contains_exponent(self, exponent: Any) -> bool:
        """True если exponent встречается в CNF."""
        return self._find(exponent) is not None

    def lookup(self, exponent: Any) -> Optional[Any]:
        """Коэффициент при exponent или None, если ключ отсутствует."""
        index = self._find(exponent)
        if index is None:
            return None
        return self.entries[index].coefficient

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def __getitem__(self, exponent: Any) -> Any:
        index = self._find(exponent)
        if index is None:
            raise KeyError(exponent)
        return self.entries[index].coefficient

    def __contains__(self, exponent: object) -> bool:
        return self.contains_exponent(exponent)

    def __iter__(self) -> Iterator[Any]:
        return (entry.exponent for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_list(self) -> list[CNFEntry]:
        """Копия членов в виде списка (как возвращает cnf)."""
        return list(self.entries)

    def leading_term(self) -> Optional[CNFEntry]:
        """Старший член или None для нуля."""
        return self.entries[0] if self.entries else None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def is_empty(b: Any, o: Any, *, arithmetic: ValueArithmetic = NATURAL) -> bool:
    """True тогда и только тогда, когда CNF(b, o) пуста (o = 0)."""
    return CNFAssoc.of(b, o, arithmetic=arithmetic).is_empty()


def contains_exponent(
    b: Any, o: Any, exponent: Any, *, arithmetic: ValueArithmetic = NATURAL
) -> bool:
    """True если exponent встречается в CNF(b, o)."""
    return CNFAssoc.of(b, o, arithmetic=arithmetic).contains_exponent(exponent)


def lookup(
    b: Any, o: Any, exponent: Any, *, arithmetic: ValueArithmetic = NATURAL
) -> Optional[Any]:
    """Коэффициент при exponent в CNF(b, o) или None."""
    return CNFAssoc.of(b, o, arithmetic=arithmetic).lookup(exponent)
