"""
Errors — Закрытая таксономия ошибок арифметического движка

Все ошибки движка наследуются от BigValueError и несут:
- kind: тег варианта (ErrorKind), по которому вызывающий код различает сбои
- структурированный контекст (operation, operand, capacity, requested)

Варианты:
- InvalidFormat: некорректный литерал, недопустимое число разрядов/итераций
- CapacityExceeded: литерал длиннее фиксированной ёмкости
- Overflow: результат операции не помещается в ёмкость
- DivisionByZero: деление, остаток или modPow с нулевым делителем/модулем
- UnsupportedOperand: отрицательная степень, смешение оснований,
  hex-only операция над десятичным значением

Ошибки локальны и атомарны: при сбое результат не формируется.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Тег варианта ошибки"""

    INVALID_FORMAT = "INVALID_FORMAT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    OVERFLOW = "OVERFLOW"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    UNSUPPORTED_OPERAND = "UNSUPPORTED_OPERAND"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigValueError(Exception):
    """
    Базовая ошибка движка.

    Args:
        message: человекочитаемое описание
        operation: имя операции, в которой произошёл сбой
        operand: текст операнда (если применимо)
        capacity: ёмкость в разрядах (если применимо)
        requested: запрошенное число разрядов (если применимо)
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        operand: str | None = None,
        capacity: int | None = None,
        requested: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.operand = operand
        self.capacity = capacity
        self.requested = requested

    def context(self) -> dict[str, object]:
        """Структурированный контекст ошибки (только заданные поля)."""
        fields = {
            "kind": self.kind.value,
            "operation": self.operation,
            "operand": self.operand,
            "capacity": self.capacity,
            "requested": self.requested,
        }
        return {key: value for key, value in fields.items() if value is not None}


class InvalidFormat(BigValueError, ValueError):
    """Некорректный литерал или недопустимый параметр генерации."""

    kind = ErrorKind.INVALID_FORMAT


class CapacityExceeded(BigValueError, OverflowError):
    """Нормализованный литерал длиннее фиксированной ёмкости."""

    kind = ErrorKind.CAPACITY_EXCEEDED


class Overflow(BigValueError, OverflowError):
    """Результат операции не помещается в фиксированную ёмкость."""

    kind = ErrorKind.OVERFLOW


class DivisionByZero(BigValueError, ZeroDivisionError):
    """Нулевой делитель или модуль."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, operation: str):
        super().__init__(
            f"Division by zero is not allowed ({operation})", operation=operation
        )


class UnsupportedOperand(BigValueError, ValueError):
    """Операнд допустим синтаксически, но не поддерживается операцией."""

    kind = ErrorKind.UNSUPPORTED_OPERAND
