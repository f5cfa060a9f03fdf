"""
Contract Validation Module

Модуль для валидации JSON контрактов ordinal-cnf.
"""

from .validators import (
    CNFSnapshotValidator,
    ContractValidator,
    SchemaLoader,
    validate_cnf_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CNFSnapshotValidator",
    # Functions
    "validate_cnf_snapshot",
]
