"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора cnf_snapshot:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (minimum, additionalProperties)
- Интеграция с Pydantic моделью
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from ordinal_cnf.core.contracts import (
    CNFSnapshotValidator,
    SchemaLoader,
    validate_cnf_snapshot,
)
from ordinal_cnf.core.domain import CNFSnapshot


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_cnf_snapshot():
    """Валидный cnf_snapshot: 5 = 2^2 * 1 + 2^0 * 1."""
    return {
        "base": 2,
        "value": 5,
        "terms": [
            {"exponent": 2, "coefficient": 1},
            {"exponent": 0, "coefficient": 1},
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("cnf_snapshot")
        assert schema["title"] == "cnf_snapshot"
        assert set(schema["required"]) == {"base", "value", "terms"}

    def test_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("cnf_snapshot") is loader.load_schema("cnf_snapshot")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# CNF SNAPSHOT VALIDATOR
# =============================================================================


class TestCNFSnapshotValidator:
    """Тесты структурной валидации."""

    def test_valid(self, valid_cnf_snapshot):
        validator = CNFSnapshotValidator()
        validator.validate(valid_cnf_snapshot)
        assert validator.is_valid(valid_cnf_snapshot)

    def test_empty_terms(self):
        assert CNFSnapshotValidator().is_valid({"base": 2, "value": 0, "terms": []})

    @pytest.mark.parametrize("field", ["base", "value", "terms"])
    def test_missing_required(self, valid_cnf_snapshot, field):
        del valid_cnf_snapshot[field]
        with pytest.raises(ValidationError):
            CNFSnapshotValidator().validate(valid_cnf_snapshot)

    def test_wrong_type(self, valid_cnf_snapshot):
        valid_cnf_snapshot["value"] = "5"
        assert not CNFSnapshotValidator().is_valid(valid_cnf_snapshot)

    def test_negative_base(self, valid_cnf_snapshot):
        valid_cnf_snapshot["base"] = -1
        assert not CNFSnapshotValidator().is_valid(valid_cnf_snapshot)

    def test_zero_coefficient(self, valid_cnf_snapshot):
        valid_cnf_snapshot["terms"][0]["coefficient"] = 0
        assert not CNFSnapshotValidator().is_valid(valid_cnf_snapshot)

    def test_additional_properties(self, valid_cnf_snapshot):
        valid_cnf_snapshot["extra"] = True
        valid_cnf_snapshot["terms"][1]["note"] = "x"
        errors = list(CNFSnapshotValidator().iter_errors(valid_cnf_snapshot))
        assert len(errors) == 2


# =============================================================================
# INTEGRATION
# =============================================================================


class TestValidateCNFSnapshot:
    """Структура по схеме + семантика через CNFSnapshot."""

    def test_returns_model(self, valid_cnf_snapshot):
        snapshot = validate_cnf_snapshot(valid_cnf_snapshot)
        assert snapshot == CNFSnapshot.from_value(2, 5)

    def test_structural_error(self, valid_cnf_snapshot):
        valid_cnf_snapshot["terms"] = "2^2 + 1"
        with pytest.raises(ValidationError):
            validate_cnf_snapshot(valid_cnf_snapshot)

    def test_semantic_error(self, valid_cnf_snapshot):
        """Схема проходит, но terms не являются CNF."""
        valid_cnf_snapshot["terms"].reverse()
        assert CNFSnapshotValidator().is_valid(valid_cnf_snapshot)
        with pytest.raises(PydanticValidationError):
            validate_cnf_snapshot(valid_cnf_snapshot)

    @pytest.mark.parametrize("base,value", [(0, 7), (1, 7), (2, 0), (3, 10), (10, 90210)])
    def test_model_dump_conforms(self, base, value):
        """Сериализованный снимок соответствует контракту."""
        data = json.loads(CNFSnapshot.from_value(base, value).model_dump_json())
        CNFSnapshotValidator().validate(data)
        assert validate_cnf_snapshot(data).value == value
