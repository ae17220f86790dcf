"""
Diffie-Hellman Key Exchange — Демонстрация на hex-движке

Шаги:
1. p — вероятно простое из prime_digits hex-разрядов, g = 7
   (если g ≥ p, p генерируется заново с prime_digits + 2 разрядами)
2. Alice и Bob выбирают закрытые ключи a, b < p
3. Открытые ключи: A = g^a mod p, B = g^b mod p
4. Общий секрет: S_A = B^a mod p, S_B = A^b mod p
5. S_A == S_B

Демонстрация, не криптографическая библиотека: нет проверки
безопасности простого, g не проверяется как генератор подгруппы,
операции не constant-time.
"""

import logging
from dataclasses import dataclass
from typing import Final

from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.engine import BigIntEngine

logger = logging.getLogger(__name__)


# =============================================================================
# DEFAULTS
# =============================================================================

# 64 hex-разряда = 256-битный модуль; квадрат вычета занимает 128 разрядов
DH_PRIME_DIGITS_DEFAULT: Final[int] = 64

DH_GENERATOR_DEFAULT: Final[str] = "7"

# Минимальная длина закрытого ключа (hex-разрядов)
PRIVATE_KEY_MIN_DIGITS: Final[int] = 2


# =============================================================================
# TYPES
# =============================================================================


@dataclass(frozen=True)
class DHParameters:
    """Открытые параметры обмена: простой модуль p и основание g."""

    prime: BigValue
    generator: BigValue


@dataclass(frozen=True)
class DHKeyPair:
    """Ключи одной стороны и вычисленный ею общий секрет."""

    private_key: BigValue
    public_key: BigValue
    shared_secret: BigValue


@dataclass(frozen=True)
class KeyExchangeResult:
    """Результат обмена для обеих сторон."""

    parameters: DHParameters
    alice: DHKeyPair
    bob: DHKeyPair

    @property
    def secrets_match(self) -> bool:
        return self.alice.shared_secret == self.bob.shared_secret


# =============================================================================
# STEPS
# =============================================================================


def generate_parameters(
    engine: BigIntEngine,
    prime_digits: int = DH_PRIME_DIGITS_DEFAULT,
    iterations: int | None = None,
    generator: str = DH_GENERATOR_DEFAULT,
) -> DHParameters:
    """
    Генерация простого модуля p и основания g.

    Raises:
        InvalidFormat: некорректное число разрядов/итераций или литерал g
        Overflow: если квадрат вычета по модулю p не помещается в ёмкость
    """
    g = engine.parse(generator)
    logger.info("Generating %d-digit DH prime", prime_digits)
    p = engine.generate_prime(prime_digits, iterations)

    if engine.compare(g, p) >= 0:
        logger.warning("Prime %s is not larger than generator %s, regenerating", p, g)
        p = engine.generate_prime(prime_digits + 2, iterations)

    return DHParameters(prime=p, generator=g)


def private_key_digits(params: DHParameters) -> int:
    """Длина закрытого ключа: половина длины p, не меньше двух и не больше p."""
    return min(max(params.prime.length // 2, PRIVATE_KEY_MIN_DIGITS), params.prime.length)


def generate_private_key(engine: BigIntEngine, params: DHParameters) -> BigValue:
    """Случайный закрытый ключ < p (перевыбор до выполнения условия)."""
    digits = private_key_digits(params)
    key = engine.generate_random(digits)
    while engine.compare(key, params.prime) >= 0:
        key = engine.generate_random(digits)
    return key


def compute_public_key(engine: BigIntEngine, params: DHParameters, private_key: BigValue) -> BigValue:
    """A = g^a mod p."""
    return engine.mod_pow(params.generator, private_key, params.prime)


def compute_shared_secret(
    engine: BigIntEngine,
    params: DHParameters,
    private_key: BigValue,
    peer_public_key: BigValue,
) -> BigValue:
    """S = B^a mod p."""
    return engine.mod_pow(peer_public_key, private_key, params.prime)


def run_key_exchange(engine: BigIntEngine, params: DHParameters) -> KeyExchangeResult:
    """
    Полный обмен ключами между Alice и Bob.

    Returns:
        KeyExchangeResult; secrets_match == True при корректной арифметике
    """
    alice_private = generate_private_key(engine, params)
    bob_private = generate_private_key(engine, params)

    alice_public = compute_public_key(engine, params, alice_private)
    bob_public = compute_public_key(engine, params, bob_private)

    alice = DHKeyPair(
        private_key=alice_private,
        public_key=alice_public,
        shared_secret=compute_shared_secret(engine, params, alice_private, bob_public),
    )
    bob = DHKeyPair(
        private_key=bob_private,
        public_key=bob_public,
        shared_secret=compute_shared_secret(engine, params, bob_private, alice_public),
    )

    result = KeyExchangeResult(parameters=params, alice=alice, bob=bob)
    if result.secrets_match:
        logger.info("Shared secrets match")
    else:
        logger.error("Shared secrets do not match: %s != %s", alice.shared_secret, bob.shared_secret)
    return result
