"""
CNFCoeffMap — коэффициенты CNF как функция с конечным носителем

get(e) = c, если (e, c) ∈ CNF(b, o)
get(e) = 0 иначе

Носитель (support) совпадает с множеством экспонент CNF(b, o).

Замкнутые формы:
- get(b, 0, ·) = 0
- b <= 1: get(b, o, e) = o при e = 0, иначе 0
- b > 1: get(b, b^k, e) = 1 при e = k, иначе 0
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ordinal_cnf.core.domain.cnf_assoc import CNFAssoc
from ordinal_cnf.core.math.cnf_encoder import CNFEntry
from ordinal_cnf.core.math.cnf_recursion import CNFConfig
from ordinal_cnf.core.math.value_arithmetic import NATURAL, ValueArithmetic


@dataclass(frozen=True)
class CNFCoeffMap:
    """
    Тотальная функция exponent → coefficient с нулём по умолчанию.

    Экземпляр вызываемый: coeff_map(e) эквивалентно coeff_map.get(e).
    """

    assoc: CNFAssoc

    @property
    def base(self) -> Any:
        return self.assoc.base

    @property
    def value(self) -> Any:
        return self.assoc.value

    def get(self, exponent: Any) -> Any:
        """Коэффициент при exponent, ноль домена если exponent вне носителя."""
        coefficient = self.assoc.lookup(exponent)
        if coefficient is None:
            return self.assoc.arithmetic.zero
        return coefficient

    def __call__(self, exponent: Any) -> Any:
        return self.get(exponent)

    def support(self) -> frozenset:
        """Множество экспонент, где значение ненулевое."""
        return frozenset(self.assoc.keys())

    def items(self) -> Iterator[CNFEntry]:
        """Ненулевые пары в порядке CNF."""
        return iter(self.assoc.entries)

    def __len__(self) -> int:
        return len(self.assoc)


def cnf_coeff(
    b: Any,
    o: Any,
    *,
    arithmetic: ValueArithmetic = NATURAL,
    config: Optional[CNFConfig] = None,
) -> CNFCoeffMap:
    """
    Функция коэффициентов CNF(b, o).

    Examples:
        >>> f = cnf_coeff(2, 5)
        >>> f(2), f(1), f(0)
        (1, 0, 1)
    """
    return CNFCoeffMap(CNFAssoc.of(b, o, arithmetic=arithmetic, config=config))


def coeff(b: Any, o: Any, exponent: Any, *, arithmetic: ValueArithmetic = NATURAL) -> Any:
    """Коэффициент при b^exponent в CNF(b, o)."""
    return cnf_coeff(b, o, arithmetic=arithmetic).get(exponent)
