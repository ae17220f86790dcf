"""
Contract Validation Module

Валидация JSON документов bigint-dh по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    MemoSnapshotValidator,
    SchemaLoader,
    validate_memo_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MemoSnapshotValidator",
    # Functions
    "validate_memo_snapshot",
]
