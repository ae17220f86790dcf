"""
Тесты для Modular Exponentiation

Проверяет:
1. Граничные случаи в порядке проверки
2. Отрицательное основание и отрицательный модуль
3. Совпадение с pow(base, exp, mod)
4. Overflow при квадрате вычета
"""

import random

import pytest

from bigint_dh.core.domain import BigValue, DivisionByZero, Overflow, Radix, UnsupportedOperand
from bigint_dh.core.math.karatsuba import KaratsubaMultiplier, MemoCache
from bigint_dh.core.math.modpow import mod_pow


def hx(text: str) -> BigValue:
    return BigValue.from_text(text, Radix.HEX)


class TestModPowBoundaries:
    """Граничные случаи"""

    def test_example(self):
        """2^16 mod 13 = 3"""
        assert mod_pow(hx("2"), hx("10"), hx("d")).to_text() == "3"

    def test_zero_modulus(self):
        with pytest.raises(DivisionByZero, match="modular exponentiation"):
            mod_pow(hx("2"), hx("3"), hx("0"))

    def test_modulus_one(self):
        assert mod_pow(hx("5"), hx("3"), hx("1")).to_text() == "0"
        assert mod_pow(hx("5"), hx("0"), hx("1")).to_text() == "0"

    def test_zero_exponent(self):
        assert mod_pow(hx("5"), hx("0"), hx("d")).to_text() == "1"
        assert mod_pow(hx("0"), hx("0"), hx("d")).to_text() == "1"

    def test_negative_exponent(self):
        with pytest.raises(UnsupportedOperand, match="Negative exponents"):
            mod_pow(hx("2"), hx("-1"), hx("d"))

    def test_zero_base(self):
        assert mod_pow(hx("0"), hx("5"), hx("d")).to_text() == "0"

    def test_base_multiple_of_modulus(self):
        assert mod_pow(hx("1a"), hx("5"), hx("d")).to_text() == "0"

    def test_negative_base(self):
        """(-2)^3 mod 5 = 2"""
        assert mod_pow(hx("-2"), hx("3"), hx("5")).to_text() == "2"

    def test_negative_modulus_uses_magnitude(self):
        assert mod_pow(hx("3"), hx("4"), hx("-7")).to_text() == "4"

    def test_decimal(self):
        base, exponent, modulus = (BigValue.from_text(s, Radix.DECIMAL) for s in ("4", "13", "497"))
        assert mod_pow(base, exponent, modulus).to_text() == "445"


class TestModPowProperties:
    """Сверка с pow()"""

    def test_matches_builtin_pow(self):
        rng = random.Random(77)
        multiplier = KaratsubaMultiplier(MemoCache())
        for _ in range(25):
            m = rng.randrange(2, 16**16)
            b = rng.randrange(-(16**20), 16**20)
            e = rng.randrange(0, 16**8)
            base_text = ("-" if b < 0 else "") + format(abs(b), "x")
            result = mod_pow(hx(base_text), hx(format(e, "x")), hx(format(m, "x")), multiplier)
            assert result.to_text() == format(pow(b, e, m), "x")

    def test_fermat_little_theorem(self):
        """a^(p-1) mod p = 1 для простого p = 2^61 - 1"""
        p = 2**61 - 1
        assert mod_pow(hx("abcdef"), hx(format(p - 1, "x")), hx(format(p, "x"))).to_text() == "1"

    def test_overflow_when_square_exceeds_capacity(self):
        modulus = hx("1" * 65)
        base = hx("1" * 64 + "0")
        with pytest.raises(Overflow):
            mod_pow(base, hx("2"), modulus)
