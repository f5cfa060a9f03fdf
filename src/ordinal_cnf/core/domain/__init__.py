"""
Domain models and value objects.

Contains the structures derived from a CNF: CNFAssoc, CNFCoeffMap, CNFSnapshot.
"""

from ordinal_cnf.core.domain.cnf_assoc import (
    CNFAssoc,
    contains_exponent,
    is_empty,
    lookup,
)
from ordinal_cnf.core.domain.cnf_coeff import CNFCoeffMap, cnf_coeff, coeff
from ordinal_cnf.core.domain.snapshot import CNFSnapshot, CNFTerm

__all__ = [
    # CNFAssoc
    "CNFAssoc",
    "contains_exponent",
    "is_empty",
    "lookup",
    # CNFCoeffMap
    "CNFCoeffMap",
    "cnf_coeff",
    "coeff",
    # Snapshot models
    "CNFSnapshot",
    "CNFTerm",
]
