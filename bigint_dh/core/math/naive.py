"""
Naive Multiplication — Квадратичная свёртка разрядов

Для каждой пары позиций (i, j) произведение a[i] * b[j] накапливается в
позиции i + j с распространением переноса за пределы длины второго
операнда. Знак результата — XOR знаков операндов.

Проверка переполнения консервативна: len(a) + len(b) > capacity →
Overflow, даже если фактическое произведение на разряд короче.
"""

from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.errors import Overflow
from bigint_dh.core.math.linear import ensure_same_radix


def check_product_capacity(a: BigValue, b: BigValue, operation: str) -> None:
    """
    Проверка, что произведение помещается в ёмкость.

    Raises:
        Overflow: если len(a) + len(b) > capacity
    """
    requested = a.length + b.length
    if requested > a.capacity:
        raise Overflow(
            f"Overflow occurred during {operation}",
            operation=operation,
            capacity=a.capacity,
            requested=requested,
        )


def multiply_naive(a: BigValue, b: BigValue) -> BigValue:
    """
    Наивное умножение O(len(a) * len(b)).

    Raises:
        Overflow: если len(a) + len(b) > capacity
        UnsupportedOperand: если основания операндов различаются

    Examples:
        >>> multiply_naive(BigValue.from_text("ff"), BigValue.from_text("ff")).to_text()
        'fe01'
    """
    ensure_same_radix(a, b, "multiply")
    if a.is_zero or b.is_zero:
        return BigValue.zero(a.radix, a.capacity)
    check_product_capacity(a, b, "naive multiplication")

    base = a.base
    x, y = a.digits, b.digits
    acc = [0] * (len(x) + len(y))
    for i, xi in enumerate(x):
        if xi == 0:
            continue
        carry = 0
        k = i
        for yj in y:
            total = acc[k] + xi * yj + carry
            carry, acc[k] = divmod(total, base)
            k += 1
        while carry:
            total = acc[k] + carry
            carry, acc[k] = divmod(total, base)
            k += 1

    return BigValue.from_digits(
        acc,
        radix=a.radix,
        capacity=a.capacity,
        negative=a.negative != b.negative,
        operation="naive multiplication",
    )
