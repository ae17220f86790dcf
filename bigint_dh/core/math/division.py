"""
Long Division — Деление столбиком с остатком

Алгоритм (над модулями):
    Разряды делимого просматриваются от старшего к младшему. Частичный
    остаток сдвигается на один разряд (умножение на основание) и
    дополняется очередным разрядом делимого. Разряд частного — наибольшее
    q ∈ [0, base-1] с q · |divisor| ≤ partial (двоичный поиск по q), после
    чего partial уменьшается на q · |divisor|.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После каждого шага 0 ≤ partial < |divisor|
2. dividend = quotient · divisor + remainder, 0 ≤ |remainder| < |divisor|
3. Знак частного — XOR знаков (ноль неотрицателен)
4. Знак остатка совпадает со знаком делимого (ноль неотрицателен)
5. Нулевой делитель → DivisionByZero
"""

from typing import NamedTuple, Sequence

from bigint_dh.core.domain.big_value import BigValue, strip_high_zeros
from bigint_dh.core.domain.errors import DivisionByZero
from bigint_dh.core.math.linear import compare_magnitudes, ensure_same_radix, subtract_magnitudes


# =============================================================================
# RESULT
# =============================================================================


class DivisionResult(NamedTuple):
    """Частное и остаток."""

    quotient: BigValue
    remainder: BigValue


# =============================================================================
# HELPERS
# =============================================================================


def multiply_by_digit(digits: Sequence[int], q: int, base: int) -> list[int]:
    """Произведение модуля на один разряд q ∈ [0, base)."""
    if q == 0:
        return [0]
    result = []
    carry = 0
    for d in digits:
        carry, digit = divmod(d * q + carry, base)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, base)
        result.append(digit)
    return result


def _quotient_digit(partial: list[int], divisor: Sequence[int], base: int) -> tuple[int, list[int]]:
    """
    Наибольший разряд q с q · divisor ≤ partial и новый частичный остаток.

    Требование: partial < divisor · base.
    """
    if compare_magnitudes(partial, divisor) < 0:
        return 0, partial

    lo, hi = 1, base - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if compare_magnitudes(multiply_by_digit(divisor, mid, base), partial) <= 0:
            lo = mid
        else:
            hi = mid - 1

    product = multiply_by_digit(divisor, lo, base)
    return lo, subtract_magnitudes(partial, product, base)


# =============================================================================
# DIVISION
# =============================================================================


def divide(dividend: BigValue, divisor: BigValue) -> DivisionResult:
    """
    Деление с остатком (усечение к нулю).

    Raises:
        DivisionByZero: если divisor == 0
        UnsupportedOperand: если основания операндов различаются

    Examples:
        >>> q, r = divide(BigValue.from_text("100"), BigValue.from_text("f"))
        >>> (q.to_text(), r.to_text())
        ('11', '1')
    """
    ensure_same_radix(dividend, divisor, "divide")
    if divisor.is_zero:
        raise DivisionByZero("division")

    radix, capacity, base = dividend.radix, dividend.capacity, dividend.base
    divisor_digits = divisor.digits

    quotient_msb_first = []
    partial = [0]
    for i in range(dividend.length - 1, -1, -1):
        # partial · base + очередной разряд
        if partial == [0]:
            partial = [dividend.digits[i]]
        else:
            partial.insert(0, dividend.digits[i])
        q, partial = _quotient_digit(partial, divisor_digits, base)
        quotient_msb_first.append(q)

    quotient = BigValue.from_digits(
        reversed(quotient_msb_first),
        radix=radix,
        capacity=capacity,
        negative=dividend.negative != divisor.negative,
        operation="division",
    )
    remainder = BigValue.from_digits(
        strip_high_zeros(partial),
        radix=radix,
        capacity=capacity,
        negative=dividend.negative,
        operation="division",
    )
    return DivisionResult(quotient, remainder)


def modulo(dividend: BigValue, divisor: BigValue) -> BigValue:
    """
    Остаток от деления (знак делимого).

    Raises:
        DivisionByZero: если divisor == 0
    """
    return divide(dividend, divisor).remainder


def halve(value: BigValue) -> BigValue:
    """
    Целочисленное деление на два (проход от старшего разряда с переносом).

    Examples:
        >>> halve(BigValue.from_text("1f")).to_text()
        'f'
    """
    base = value.base
    result_msb_first = []
    carry = 0
    for i in range(value.length - 1, -1, -1):
        current = value.digits[i] + carry * base
        result_msb_first.append(current // 2)
        carry = current % 2
    return BigValue.from_digits(
        reversed(result_msb_first),
        radix=value.radix,
        capacity=value.capacity,
        negative=value.negative,
        operation="halve",
    )
