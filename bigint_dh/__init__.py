"""
bigint-dh — Арифметика больших целых фиксированной ёмкости и демонстрация
обмена ключами Diffie-Hellman.

Пакеты:
- core/      : представление значений, арифметика, конфигурация, контракты
- storage/   : сохранение кэша произведений на диск
- dh/        : обмен ключами Diffie-Hellman и XOR-шифр на общем секрете
- cli/       : командная строка (typer)
"""

from bigint_dh.core.config import EngineConfig
from bigint_dh.core.domain import BigValue, BigValueError, Radix
from bigint_dh.core.engine import BigIntEngine

__version__ = "0.1.0"

__all__ = [
    "BigIntEngine",
    "BigValue",
    "BigValueError",
    "EngineConfig",
    "Radix",
    "__version__",
]
