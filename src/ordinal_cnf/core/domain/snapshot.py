"""
CNFSnapshot — Immutable Pydantic модель CNF над натуральными числами

Снимок разложения (base, value, terms) для обмена и валидации внешних данных.
Соответствует схеме contracts/schema/cnf_snapshot.json.

Модель проверяет, что terms — каноническая CNF по основанию base
и что value совпадает с её значением.
"""

from pydantic import BaseModel, Field, field_validator

from ordinal_cnf.core.domain.cnf_assoc import CNFAssoc
from ordinal_cnf.core.domain.cnf_coeff import CNFCoeffMap
from ordinal_cnf.core.math.cnf_encoder import CNFEntry, check_cnf, eval_cnf
from ordinal_cnf.core.math.value_arithmetic import NATURAL


# =============================================================================
# TERM MODEL
# =============================================================================


class CNFTerm(BaseModel):
    """Член CNF: base^exponent * coefficient."""

    exponent: int = Field(..., ge=0, strict=True, description="Экспонента (степень основания)")
    coefficient: int = Field(
        ..., gt=0, strict=True, description="Коэффициент (всегда положительный)"
    )

    model_config = {"frozen": True}

    def as_entry(self) -> CNFEntry:
        return CNFEntry(self.exponent, self.coefficient)


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class CNFSnapshot(BaseModel):
    """
    Снимок CNF(base, value).

    Immutable модель (frozen=True). terms упорядочены по строго
    убывающей экспоненте.
    """

    base: int = Field(..., ge=0, strict=True, description="Основание разложения")
    value: int = Field(..., ge=0, strict=True, description="Разлагаемое значение")
    terms: tuple[CNFTerm, ...] = Field(
        default=(),
        validate_default=True,
        description="Члены CNF в порядке убывания экспонент",
    )

    model_config = {"frozen": True}

    @field_validator("terms")
    @classmethod
    def validate_canonical_terms(cls, v: tuple[CNFTerm, ...], info) -> tuple[CNFTerm, ...]:
        """
        Проверка канонической формы и совпадения значения.

        - Экспоненты строго убывают
        - При base > 1 коэффициенты < base
        - При base <= 1 не более одного члена с экспонентой 0
        - eval_cnf(base, terms) == value
        """
        if "base" not in info.data:
            return v

        base = info.data["base"]
        entries = [term.as_entry() for term in v]
        check_cnf(base, entries)

        if "value" in info.data:
            value = info.data["value"]
            evaluated = eval_cnf(base, entries)
            if evaluated != value:
                raise ValueError(f"terms evaluate to {evaluated}, expected value {value}")

        return v

    @classmethod
    def from_value(cls, base: int, value: int) -> "CNFSnapshot":
        """Снимок CNF(base, value), вычисленный кодировщиком."""
        return cls.from_assoc(CNFAssoc.of(base, value))

    @classmethod
    def from_assoc(cls, assoc: CNFAssoc) -> "CNFSnapshot":
        return cls(
            base=assoc.base,
            value=assoc.value,
            terms=tuple(
                CNFTerm(exponent=e, coefficient=c) for e, c in assoc.entries
            ),
        )

    def to_assoc(self) -> CNFAssoc:
        return CNFAssoc.from_entries(
            self.base, (term.as_entry() for term in self.terms), arithmetic=NATURAL
        )

    def to_coeff_map(self) -> CNFCoeffMap:
        return CNFCoeffMap(self.to_assoc())

    def entries(self) -> list[CNFEntry]:
        """Члены в виде списка CNFEntry (как возвращает cnf)."""
        return [term.as_entry() for term in self.terms]
