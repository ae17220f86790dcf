"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем (meta-validation)
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений constraints (const/enum/pattern/additionalProperties)
- Согласованность со снимком реального кэша
"""

import json

import pytest
from jsonschema import ValidationError

from bigint_dh.core.contracts import (
    MemoSnapshotValidator,
    SchemaLoader,
    validate_memo_snapshot,
)
from bigint_dh.core.domain import BigValue
from bigint_dh.core.math.karatsuba import KaratsubaMultiplier, MemoCache
from bigint_dh.storage import snapshot_document


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_memo_snapshot():
    """Валидный memo_snapshot для тестирования."""
    return {
        "schema_version": "1",
        "entries": [
            {"radix": "hex", "left": "ff", "right": "ff", "product": "fe01"},
            {"radix": "decimal", "left": "12", "right": "34", "product": "408"},
            {"radix": "hex", "left": "0", "right": "abc", "product": "0"},
        ],
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_memo_snapshot():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()

    schema = loader.load_schema("memo_snapshot")

    assert schema["properties"]["schema_version"]["const"] == "1"
    assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("memo_snapshot")
    schema2 = loader.load_schema("memo_snapshot")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    """Проверка ошибки при отсутствующем каталоге схем."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Схема, не проходящая meta-validation, отклоняется."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": "not-a-type"}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        loader.load_schema("broken")


def test_memo_snapshot_validator_uses_given_loader(tmp_path):
    """Валидатор берёт схему из переданного загрузчика."""
    (tmp_path / "memo_snapshot.json").write_text(
        json.dumps({"type": "object", "required": ["schema_version"]}), encoding="utf-8"
    )
    validator = MemoSnapshotValidator(SchemaLoader(tmp_path))

    assert validator.is_valid({"schema_version": "9"})
    assert not validator.is_valid({"entries": []})


# =============================================================================
# TESTS - MEMO SNAPSHOT VALIDATION
# =============================================================================


def test_memo_snapshot_validator_accepts_valid_data(valid_memo_snapshot):
    """Валидация правильного memo_snapshot."""
    validator = MemoSnapshotValidator()
    validator.validate(valid_memo_snapshot)  # Не должно выбросить исключение
    assert validator.is_valid(valid_memo_snapshot)


def test_memo_snapshot_validate_function(valid_memo_snapshot):
    """Проверка функции validate_memo_snapshot."""
    validate_memo_snapshot(valid_memo_snapshot)


def test_memo_snapshot_accepts_empty_entries():
    """Пустой кэш — валидный снимок."""
    validate_memo_snapshot({"schema_version": "1", "entries": []})


def test_memo_snapshot_rejects_missing_required_field(valid_memo_snapshot):
    """Валидация отклоняет данные без обязательных полей."""
    del valid_memo_snapshot["entries"]

    with pytest.raises(ValidationError, match="'entries' is a required property"):
        validate_memo_snapshot(valid_memo_snapshot)


def test_memo_snapshot_rejects_entry_without_product(valid_memo_snapshot):
    del valid_memo_snapshot["entries"][0]["product"]

    with pytest.raises(ValidationError):
        validate_memo_snapshot(valid_memo_snapshot)


def test_memo_snapshot_rejects_wrong_version(valid_memo_snapshot):
    valid_memo_snapshot["schema_version"] = "2"

    with pytest.raises(ValidationError):
        validate_memo_snapshot(valid_memo_snapshot)


def test_memo_snapshot_rejects_invalid_radix(valid_memo_snapshot):
    valid_memo_snapshot["entries"][0]["radix"] = "octal"

    with pytest.raises(ValidationError):
        validate_memo_snapshot(valid_memo_snapshot)


@pytest.mark.parametrize("text", ["FF", "00ff", "-0", "-ff", "", "0x1", " 1", 255])
def test_memo_snapshot_rejects_non_canonical_text(valid_memo_snapshot, text):
    """Тексты операндов должны быть каноническими модулями."""
    valid_memo_snapshot["entries"][0]["left"] = text

    assert not MemoSnapshotValidator().is_valid(valid_memo_snapshot)


def test_memo_snapshot_rejects_additional_properties(valid_memo_snapshot):
    valid_memo_snapshot["entries"][0]["hits"] = 3

    with pytest.raises(ValidationError):
        validate_memo_snapshot(valid_memo_snapshot)


def test_memo_snapshot_iter_errors_reports_all(valid_memo_snapshot):
    """iter_errors возвращает все нарушения."""
    valid_memo_snapshot["schema_version"] = "2"
    valid_memo_snapshot["entries"][1]["radix"] = "binary"

    errors = list(MemoSnapshotValidator().iter_errors(valid_memo_snapshot))

    assert len(errors) == 2


# =============================================================================
# TESTS - INTEGRATION WITH MEMO CACHE
# =============================================================================


def test_real_cache_snapshot_is_valid():
    """Снимок реального кэша проходит контракт."""
    cache = MemoCache()
    multiplier = KaratsubaMultiplier(cache)
    multiplier.multiply(BigValue.from_text("1234567890abcdef1"), BigValue.from_text("-fedcba9876543210f"))

    document = snapshot_document(cache)

    assert len(document["entries"]) == len(cache)
    validate_memo_snapshot(document)
