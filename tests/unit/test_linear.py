"""
Тесты для Linear Arithmetic

Проверяет:
1. Знаковое сложение и вычитание (все комбинации знаков)
2. Перенос и заём через несколько разрядов
3. Нулевой результат всегда неотрицателен
4. Сравнение (-1 / 0 / +1)
5. Overflow и смешение оснований
"""

import random

import pytest

from bigint_dh.core.domain import BigValue, Overflow, Radix, UnsupportedOperand
from bigint_dh.core.math.linear import (
    add,
    add_magnitudes,
    compare,
    compare_magnitudes,
    subtract,
    subtract_magnitudes,
)


def dec(text: str) -> BigValue:
    return BigValue.from_text(text, Radix.DECIMAL)


def hx(text: str) -> BigValue:
    return BigValue.from_text(text, Radix.HEX)


def to_hex(value: int) -> str:
    return ("-" if value < 0 else "") + format(abs(value), "x")


# =============================================================================
# ADD / SUBTRACT
# =============================================================================


class TestAdd:
    """Тесты для add"""

    def test_decimal_carry_chain(self):
        """999 + 1 = 1000"""
        assert add(dec("999"), dec("1")).to_text() == "1000"

    def test_hex_carry_chain(self):
        assert add(hx("ff"), hx("1")).to_text() == "100"

    def test_mixed_signs(self):
        """Разные знаки: знак операнда с большим модулем"""
        assert add(dec("-5"), dec("3")).to_text() == "-2"
        assert add(dec("5"), dec("-3")).to_text() == "2"
        assert add(dec("-5"), dec("-3")).to_text() == "-8"

    def test_cancellation_is_non_negative_zero(self):
        """x + (-x) = 0 без знака"""
        result = add(dec("5"), dec("-5"))
        assert result.is_zero
        assert not result.negative

    def test_overflow(self):
        """Перенос за пределы ёмкости → Overflow"""
        with pytest.raises(Overflow, match="addition"):
            add(hx("f" * 128), hx("1"))

    def test_full_capacity_without_carry(self):
        assert add(hx("f" * 127), hx("1")).to_text() == "1" + "0" * 127

    def test_radix_mismatch(self):
        with pytest.raises(UnsupportedOperand):
            add(dec("1"), hx("1"))


class TestSubtract:
    """Тесты для subtract"""

    def test_decimal_sign_flip(self):
        """500 − 700 = −200"""
        assert subtract(dec("500"), dec("700")).to_text() == "-200"

    def test_borrow_chain(self):
        assert subtract(dec("1000"), dec("1")).to_text() == "999"
        assert subtract(hx("100"), hx("1")).to_text() == "ff"

    def test_sign_combinations(self):
        assert subtract(dec("-3"), dec("5")).to_text() == "-8"
        assert subtract(dec("3"), dec("-5")).to_text() == "8"
        assert subtract(dec("-3"), dec("-5")).to_text() == "2"
        assert subtract(dec("-5"), dec("-3")).to_text() == "-2"

    def test_equal_values_give_non_negative_zero(self):
        result = subtract(dec("-5"), dec("-5"))
        assert result.to_text() == "0"
        assert not result.negative

    def test_overflow_through_addition(self):
        with pytest.raises(Overflow):
            subtract(hx("-" + "f" * 128), hx("1"))

    def test_matches_python_int(self):
        """Случайные знаковые операнды сверяются с int"""
        rng = random.Random(1234)
        for _ in range(200):
            a = rng.randrange(-(16**40), 16**40)
            b = rng.randrange(-(16**40), 16**40)
            assert add(hx(to_hex(a)), hx(to_hex(b))).to_text() == to_hex(a + b)
            assert subtract(hx(to_hex(a)), hx(to_hex(b))).to_text() == to_hex(a - b)


# =============================================================================
# COMPARE
# =============================================================================


class TestCompare:
    """Тесты для compare"""

    def test_equal(self):
        assert compare(dec("42"), dec("042")) == 0
        assert compare(dec("-0"), dec("0")) == 0

    def test_signs_decide(self):
        assert compare(dec("-5"), dec("3")) == -1
        assert compare(dec("3"), dec("-5")) == 1

    def test_length_decides(self):
        assert compare(hx("100"), hx("ff")) == 1

    def test_both_negative_inverted(self):
        """Для отрицательных больший модуль означает меньшее значение"""
        assert compare(dec("-5"), dec("-3")) == -1
        assert compare(dec("-30"), dec("-300")) == 1

    def test_matches_python_int(self):
        rng = random.Random(99)
        for _ in range(200):
            a = rng.randrange(-(10**6), 10**6)
            b = rng.choice([a, -a, rng.randrange(-(10**6), 10**6)])
            expected = (a > b) - (a < b)
            assert compare(dec(str(a)), dec(str(b))) == expected


# =============================================================================
# MAGNITUDES
# =============================================================================


class TestMagnitudes:
    """Тесты операций над модулями"""

    def test_compare_magnitudes(self):
        assert compare_magnitudes([1, 2], [2, 1]) == 1
        assert compare_magnitudes([5], [1, 1]) == -1
        assert compare_magnitudes([3, 4], [3, 4]) == 0

    def test_add_magnitudes(self):
        assert add_magnitudes([9, 9, 9], [1], 10) == [0, 0, 0, 1]

    def test_subtract_magnitudes_strips(self):
        assert subtract_magnitudes([0, 0, 1], [9, 9], 10) == [1]
        assert subtract_magnitudes([7], [7], 10) == [0]

    def test_subtract_magnitudes_requires_order(self):
        with pytest.raises(ValueError):
            subtract_magnitudes([1], [2], 10)
