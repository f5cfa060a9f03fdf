"""
ordinal-cnf — Cantor Normal Form для вполне упорядоченных числовых доменов

Публичный API:
- cnf(b, o): каноническое разложение в список (exponent, coefficient)
- cnf_coeff(b, o): функция коэффициентов с конечным носителем
- eval_cnf(b, entries): обратное вычисление значения
"""

from ordinal_cnf.core.domain import CNFAssoc, CNFCoeffMap, CNFSnapshot, cnf_coeff
from ordinal_cnf.core.math import (
    CNFConfig,
    CNFEntry,
    CNFInvariantViolation,
    NATURAL,
    NaturalArithmetic,
    ValueArithmetic,
    cnf,
    eval_cnf,
)

__version__ = "0.1.0"

__all__ = [
    "cnf",
    "cnf_coeff",
    "eval_cnf",
    "CNFEntry",
    "CNFAssoc",
    "CNFCoeffMap",
    "CNFSnapshot",
    "CNFConfig",
    "CNFInvariantViolation",
    "ValueArithmetic",
    "NaturalArithmetic",
    "NATURAL",
]
