"""
Memo Store — Сохранение кэша произведений между запусками

Формат файла (JSON, контракт memo_snapshot.json):

    {
      "schema_version": "1",
      "entries": [
        {"radix": "hex", "left": "ff", "right": "ff", "product": "fe01"},
        ...
      ]
    }

Записи отсортированы по (radix, left, right), чтобы вывод был стабильным.
Все тексты без знака: кэш хранит только произведения модулей.

Снимок не нужен для корректности: запись кэша лишь заменяет пересчёт
произведения, которое она называет.

Отсутствующий файл → пустой кэш (warning). Не-JSON или нарушение
контракта → MemoStoreError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

from jsonschema import ValidationError

from bigint_dh.core.contracts import validate_memo_snapshot
from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.errors import BigValueError
from bigint_dh.core.domain.radix import Radix
from bigint_dh.core.math.karatsuba import MemoCache, MemoKey

logger = logging.getLogger(__name__)

SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class MemoStoreError(Exception):
    """Снимок кэша не читается или не соответствует контракту."""


# =============================================================================
# SAVE
# =============================================================================


def snapshot_document(cache: MemoCache) -> Dict[str, Any]:
    """Документ снимка для кэша (записи отсортированы)."""
    entries = [
        {"radix": key.radix, "left": key.left, "right": key.right, "product": product}
        for key, product in sorted(cache.items())
    ]
    return {"schema_version": SNAPSHOT_SCHEMA_VERSION, "entries": entries}


def save_memo_snapshot(cache: MemoCache, path: Path | str) -> int:
    """
    Запись кэша в JSON файл (родительские каталоги создаются).

    Returns:
        Число сохранённых записей
    """
    path = Path(path)
    document = snapshot_document(cache)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
        f.write("\n")

    count = len(document["entries"])
    logger.info("Saved %d memo entries to %s", count, path)
    return count


# =============================================================================
# LOAD
# =============================================================================


def _check_entry(entry: Dict[str, str]) -> MemoKey:
    """Ключ записи; тексты должны быть каноническими модулями для своего основания."""
    radix = Radix(entry["radix"])
    for name in ("left", "right", "product"):
        text = entry[name]
        try:
            value = BigValue.from_text(text, radix, capacity=len(text))
        except BigValueError as e:
            raise MemoStoreError(f"Invalid {name} in memo entry {entry}: {e}") from e
        if value.negative:
            raise MemoStoreError(f"Signed {name} in memo entry {entry}")
        if value.to_text() != text:
            raise MemoStoreError(f"Non-canonical {name} in memo entry {entry}")

    left, right = entry["left"], entry["right"]
    if left > right:
        left, right = right, left
    return MemoKey(radix.value, left, right)


def load_memo_snapshot(path: Path | str, cache: MemoCache) -> int:
    """
    Загрузка снимка в кэш.

    Существующие записи кэша не перезаписываются.

    Args:
        path: путь к JSON файлу
        cache: кэш-приёмник

    Returns:
        Число новых записей (0, если файла нет)

    Raises:
        MemoStoreError: если файл не JSON или не соответствует контракту
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Memo snapshot %s not found, starting with an empty cache", path)
        return 0

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise MemoStoreError(f"Memo snapshot {path} is not valid JSON: {e}") from e

    try:
        validate_memo_snapshot(document)
    except ValidationError as e:
        raise MemoStoreError(f"Memo snapshot {path} violates contract: {e.message}") from e

    keys = [(_check_entry(entry), entry["product"]) for entry in document["entries"]]

    inserted = 0
    for key, product in keys:
        if key not in cache:
            cache.put(key, product)
            inserted += 1

    logger.info("Loaded %d memo entries from %s", inserted, path)
    return inserted
