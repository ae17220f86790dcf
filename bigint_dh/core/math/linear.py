"""
Linear Arithmetic — Сравнение, сложение и вычитание со знаком

Модуль реализует знаковую арифметику над BigValue через операции над
модулями (списки разрядов, младший первым):
- compare: -1 / 0 / +1 (less / equal / greater)
- add: при равных знаках — сложение модулей с переносом, при разных —
  вычитание модулей со знаком операнда с большим модулем
- subtract: при разных знаках — сложение с инвертированным вторым
  операндом, иначе вычитание меньшего модуля из большего с заёмом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой результат всегда неотрицателен
2. Результат длиннее ёмкости → Overflow
3. Операнды разных оснований → UnsupportedOperand

Функции уровня модулей (compare_magnitudes, add_magnitudes,
subtract_magnitudes) используются также делением и умножением.
"""

from typing import Sequence

from bigint_dh.core.domain.big_value import BigValue, strip_high_zeros
from bigint_dh.core.domain.errors import UnsupportedOperand


# =============================================================================
# МОДУЛИ (списки разрядов, младший первым)
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей без ведущих нулей.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0


def add_magnitudes(a: Sequence[int], b: Sequence[int], base: int) -> list[int]:
    """Сложение модулей с переносом."""
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i in range(len(a)):
        total = a[i] + (b[i] if i < len(b) else 0) + carry
        if total >= base:
            result.append(total - base)
            carry = 1
        else:
            result.append(total)
            carry = 0
    if carry:
        result.append(carry)
    return result


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int], base: int) -> list[int]:
    """
    Вычитание модулей с заёмом: |larger| - |smaller|.

    Требование: |larger| ≥ |smaller|.
    """
    result = []
    borrow = 0
    for i in range(len(larger)):
        diff = larger[i] - (smaller[i] if i < len(smaller) else 0) - borrow
        if diff < 0:
            result.append(diff + base)
            borrow = 1
        else:
            result.append(diff)
            borrow = 0
    if borrow:
        raise ValueError("subtract_magnitudes requires |larger| >= |smaller|")
    return strip_high_zeros(result)


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def ensure_same_radix(a: BigValue, b: BigValue, operation: str) -> None:
    """Проверка совпадения оснований операндов."""
    if a.radix is not b.radix:
        raise UnsupportedOperand(
            f"Cannot {operation} {a.radix.value} and {b.radix.value} values",
            operation=operation,
            operand=f"{a.to_text()}, {b.to_text()}",
        )


def compare(a: BigValue, b: BigValue) -> int:
    """
    Знаковое сравнение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare(BigValue.from_text("-5"), BigValue.from_text("3"))
        -1
        >>> compare(BigValue.from_text("-5"), BigValue.from_text("-3"))
        -1
    """
    ensure_same_radix(a, b, "compare")
    if a.negative != b.negative:
        return -1 if a.negative else 1
    result = compare_magnitudes(a.digits, b.digits)
    return -result if a.negative else result


def add(a: BigValue, b: BigValue) -> BigValue:
    """
    Знаковое сложение.

    Raises:
        Overflow: если длина результата больше ёмкости
        UnsupportedOperand: если основания операндов различаются
    """
    ensure_same_radix(a, b, "add")
    if a.negative == b.negative:
        digits = add_magnitudes(a.digits, b.digits, a.base)
        return BigValue.from_digits(
            digits, radix=a.radix, capacity=a.capacity, negative=a.negative, operation="addition"
        )

    # Разные знаки: вычитание модулей, знак операнда с большим модулем
    order = compare_magnitudes(a.digits, b.digits)
    if order == 0:
        return BigValue.zero(a.radix, a.capacity)
    larger, smaller = (a, b) if order > 0 else (b, a)
    digits = subtract_magnitudes(larger.digits, smaller.digits, a.base)
    return BigValue.from_digits(
        digits, radix=a.radix, capacity=a.capacity, negative=larger.negative, operation="addition"
    )


def subtract(a: BigValue, b: BigValue) -> BigValue:
    """
    Знаковое вычитание a - b.

    Raises:
        Overflow: если длина результата больше ёмкости
        UnsupportedOperand: если основания операндов различаются
    """
    ensure_same_radix(a, b, "subtract")
    if a.negative != b.negative:
        return add(a, b.negate())

    order = compare_magnitudes(a.digits, b.digits)
    if order == 0:
        return BigValue.zero(a.radix, a.capacity)
    if order > 0:
        digits = subtract_magnitudes(a.digits, b.digits, a.base)
        negative = a.negative
    else:
        # |a| < |b|: результат меняет знак
        digits = subtract_magnitudes(b.digits, a.digits, a.base)
        negative = not a.negative
    return BigValue.from_digits(
        digits, radix=a.radix, capacity=a.capacity, negative=negative, operation="subtraction"
    )
