"""
Modular Exponentiation — base^exponent mod modulus

Бинарное возведение в степень (square-and-multiply, справа налево) без
построения полной степени:

    result = 1
    while exponent != 0:
        if exponent нечётный: result = result · base mod modulus
        base = base · base mod modulus
        exponent = exponent // 2

Граничные случаи (в порядке проверки):
1. modulus == 0 → DivisionByZero
2. |modulus| == 1 → 0
3. exponent == 0 → 1
4. exponent < 0 → UnsupportedOperand
5. base == 0 → 0

Отрицательное основание: остаток от деления имеет знак делимого, к
отрицательному остатку прибавляется модуль. Рабочее основание всегда
в [0, |modulus|). Отрицательный модуль заменяется его модулем.
"""

from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.errors import DivisionByZero, UnsupportedOperand
from bigint_dh.core.math.division import halve, modulo
from bigint_dh.core.math.karatsuba import KaratsubaMultiplier
from bigint_dh.core.math.linear import add, ensure_same_radix


def mod_pow(
    base: BigValue,
    exponent: BigValue,
    modulus: BigValue,
    multiplier: KaratsubaMultiplier | None = None,
) -> BigValue:
    """
    Модульное возведение в степень.

    Args:
        base: основание (может быть отрицательным)
        exponent: неотрицательная степень
        modulus: ненулевой модуль
        multiplier: умножение с общим кэшем (default: новый KaratsubaMultiplier)

    Returns:
        base^exponent mod |modulus| в [0, |modulus|)

    Raises:
        DivisionByZero: если modulus == 0
        UnsupportedOperand: если exponent < 0
        Overflow: если квадрат вычета не помещается в ёмкость

    Examples:
        >>> two, e, m = (BigValue.from_text(s) for s in ("2", "10", "d"))
        >>> mod_pow(two, e, m).to_text()
        '3'
    """
    ensure_same_radix(base, exponent, "mod_pow")
    ensure_same_radix(base, modulus, "mod_pow")
    if modulus.is_zero:
        raise DivisionByZero("modular exponentiation")

    radix, capacity = base.radix, base.capacity
    modulus = modulus.abs()
    if modulus.is_one:
        return BigValue.zero(radix, capacity)
    if exponent.is_zero:
        return BigValue.one(radix, capacity)
    if exponent.negative:
        raise UnsupportedOperand(
            "Negative exponents not supported in modular exponentiation",
            operation="mod_pow",
            operand=exponent.to_text(),
        )
    if base.is_zero:
        return BigValue.zero(radix, capacity)

    if multiplier is None:
        multiplier = KaratsubaMultiplier()

    base = modulo(base, modulus)
    if base.negative:
        base = add(base, modulus)
    if base.is_zero:
        return BigValue.zero(radix, capacity)

    result = BigValue.one(radix, capacity)
    while not exponent.is_zero:
        if exponent.is_odd:
            result = modulo(multiplier.multiply(result, base), modulus)
        base = modulo(multiplier.multiply(base, base), modulus)
        exponent = halve(exponent)

    return result
