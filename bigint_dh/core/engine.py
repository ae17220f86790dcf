"""
BigIntEngine — Фасад арифметического движка

Единая точка входа для front end (CLI, Diffie-Hellman):
- разбор/вывод значений с ёмкостью из EngineConfig
- add / subtract / multiply / compare для обоих оснований
- divide / modulo / mod_pow — только HEX
- generate_random для обоих оснований; miller_rabin / generate_prime — только HEX

Движок владеет кэшем произведений (MemoCache) и источником случайности;
все умножения, включая modPow внутри Miller-Rabin, идут через один
KaratsubaMultiplier с этим кэшем.
"""

import random
import secrets

from bigint_dh.core.config import EngineConfig
from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.errors import UnsupportedOperand
from bigint_dh.core.domain.radix import Radix
from bigint_dh.core.math import division, linear, modpow, primality
from bigint_dh.core.math.division import DivisionResult
from bigint_dh.core.math.karatsuba import KaratsubaMultiplier, MemoCache


class BigIntEngine:
    """
    Фасад движка.

    Args:
        config: конфигурация (default: EngineConfig())
        cache: кэш произведений (default: новый MemoCache)
        rng: источник случайности (default: secrets.SystemRandom())

    Examples:
        >>> engine = BigIntEngine()
        >>> engine.render(engine.multiply(engine.parse("ff"), engine.parse("ff")))
        'fe01'
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        cache: MemoCache | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or EngineConfig()
        self._multiplier = KaratsubaMultiplier(
            cache if cache is not None else MemoCache(), self.config.karatsuba_threshold
        )
        self.rng = rng or secrets.SystemRandom()

    @property
    def cache(self) -> MemoCache:
        return self._multiplier.cache

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def parse(self, text: str, radix: Radix = Radix.HEX) -> BigValue:
        """Разбор литерала с ёмкостью из конфигурации."""
        return BigValue.from_text(text, radix, self.config.capacity_for(radix))

    def render(self, value: BigValue) -> str:
        return value.to_text()

    # -------------------------------------------------------------------------
    # Оба основания
    # -------------------------------------------------------------------------

    def add(self, a: BigValue, b: BigValue) -> BigValue:
        return linear.add(a, b)

    def subtract(self, a: BigValue, b: BigValue) -> BigValue:
        return linear.subtract(a, b)

    def multiply(self, a: BigValue, b: BigValue) -> BigValue:
        return self._multiplier.multiply(a, b)

    def compare(self, a: BigValue, b: BigValue) -> int:
        return linear.compare(a, b)

    def generate_random(self, digit_count: int, radix: Radix = Radix.HEX) -> BigValue:
        return primality.generate_random(
            digit_count, radix, self.config.capacity_for(radix), self.rng
        )

    # -------------------------------------------------------------------------
    # Только HEX
    # -------------------------------------------------------------------------

    def divide(self, dividend: BigValue, divisor: BigValue) -> DivisionResult:
        _require_hex("division", dividend, divisor)
        return division.divide(dividend, divisor)

    def modulo(self, dividend: BigValue, divisor: BigValue) -> BigValue:
        _require_hex("modulo", dividend, divisor)
        return division.modulo(dividend, divisor)

    def mod_pow(self, base: BigValue, exponent: BigValue, modulus: BigValue) -> BigValue:
        _require_hex("modular exponentiation", base, exponent, modulus)
        return modpow.mod_pow(base, exponent, modulus, self._multiplier)

    def miller_rabin(self, value: BigValue, iterations: int | None = None) -> bool:
        _require_hex("primality testing", value)
        if iterations is None:
            iterations = self.config.miller_rabin_iterations
        return primality.miller_rabin(value, iterations, self._multiplier, self.rng)

    def generate_prime(self, digit_count: int, iterations: int | None = None) -> BigValue:
        if iterations is None:
            iterations = self.config.miller_rabin_iterations
        return primality.generate_prime(
            digit_count,
            iterations,
            radix=Radix.HEX,
            capacity=self.config.hex_capacity,
            multiplier=self._multiplier,
            rng=self.rng,
            small_primes=self.config.small_primes,
        )


def _require_hex(operation: str, *values: BigValue) -> None:
    for value in values:
        if value.radix is not Radix.HEX:
            raise UnsupportedOperand(
                f"{operation.capitalize()} is only supported for hexadecimal values",
                operation=operation,
                operand=value.to_text(),
            )
