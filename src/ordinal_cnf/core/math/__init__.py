"""
Core math modules для ordinal-cnf

Арифметика домена значений, рекурсия по CNF-остаткам и кодировщик.
"""

# Value Arithmetic
from ordinal_cnf.core.math.value_arithmetic import (
    NATURAL,
    NaturalArithmetic,
    ValueArithmetic,
    validate_value,
)

# CNF Recursion
from ordinal_cnf.core.math.cnf_recursion import (
    DEFAULT_CNF_CONFIG,
    CNFConfig,
    CNFInvariantViolation,
    CNFStep,
    cnf_rec,
    cnf_remainder,
    cnf_step,
    iter_cnf_steps,
)

# CNF Encoder
from ordinal_cnf.core.math.cnf_encoder import (
    CNFEntry,
    check_cnf,
    cnf,
    eval_cnf,
    is_cnf,
    leading_exponent,
)

__all__ = [
    # Value Arithmetic
    "NATURAL",
    "NaturalArithmetic",
    "ValueArithmetic",
    "validate_value",
    # CNF Recursion — Config
    "DEFAULT_CNF_CONFIG",
    "CNFConfig",
    # CNF Recursion — Exceptions
    "CNFInvariantViolation",
    # CNF Recursion — Types
    "CNFStep",
    # CNF Recursion — Functions
    "cnf_rec",
    "cnf_remainder",
    "cnf_step",
    "iter_cnf_steps",
    # CNF Encoder — Types
    "CNFEntry",
    # CNF Encoder — Functions
    "check_cnf",
    "cnf",
    "eval_cnf",
    "is_cnf",
    "leading_exponent",
]
