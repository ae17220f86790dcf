"""
Persistence of the Karatsuba memo cache.
"""

from bigint_dh.storage.memo_store import (
    SNAPSHOT_SCHEMA_VERSION,
    MemoStoreError,
    load_memo_snapshot,
    save_memo_snapshot,
    snapshot_document,
)

__all__ = [
    "SNAPSHOT_SCHEMA_VERSION",
    "MemoStoreError",
    "snapshot_document",
    "save_memo_snapshot",
    "load_memo_snapshot",
]
