"""
Primality — Miller-Rabin и генерация случайных кандидатов

Модуль обеспечивает:
- generate_random: значение ровно из digit_count разрядов, старший
  разряд ненулевой, младший нечётный (| 1)
- random_in_range: равномерное значение в [low, high] (rejection sampling)
- miller_rabin: вероятностный тест простоты со случайными свидетелями
- generate_prime: поиск вероятно простого числа с отсевом по малым простым

Miller-Rabin:
    n ≤ 1 → False; n ∈ {2, 3} → True; чётное n > 2 → False
    n − 1 = d · 2^s
    для каждого раунда: a ∈ [2, n−2], x = a^d mod n
        x ∈ {1, n−1} → раунд пройден
        иначе до s−1 возведений в квадрат: x == n−1 → раунд пройден
        раунд не пройден → n составное
    все раунды пройдены → n вероятно простое

Источник случайности — объект с интерфейсом random.Random (randrange).
По умолчанию secrets.SystemRandom().
"""

import logging
import random
import secrets

from bigint_dh.core.config import MILLER_RABIN_ITERATIONS_DEFAULT, SMALL_PRIMES
from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.errors import InvalidFormat
from bigint_dh.core.domain.radix import Radix
from bigint_dh.core.math.division import halve, modulo
from bigint_dh.core.math.karatsuba import KaratsubaMultiplier
from bigint_dh.core.math.linear import add, compare, subtract
from bigint_dh.core.math.modpow import mod_pow

logger = logging.getLogger(__name__)


def _default_rng() -> random.Random:
    return secrets.SystemRandom()


# =============================================================================
# СЛУЧАЙНЫЕ ЗНАЧЕНИЯ
# =============================================================================


def generate_random(
    digit_count: int,
    radix: Radix = Radix.HEX,
    capacity: int | None = None,
    rng: random.Random | None = None,
) -> BigValue:
    """
    Случайное нечётное значение ровно из digit_count разрядов.

    Args:
        digit_count: число разрядов в [1, capacity]
        radix: основание
        capacity: ёмкость (default: ёмкость основания)
        rng: источник случайности

    Raises:
        InvalidFormat: если digit_count вне [1, capacity]
    """
    if capacity is None:
        capacity = radix.default_capacity
    if not 1 <= digit_count <= capacity:
        raise InvalidFormat(
            f"Invalid number of digits for random generation: {digit_count} (allowed 1..{capacity})",
            operation="generate_random",
            capacity=capacity,
            requested=digit_count,
        )
    rng = rng or _default_rng()

    base = radix.base
    digits = [rng.randrange(base) for _ in range(digit_count - 1)]
    digits.append(rng.randrange(1, base))
    digits[0] |= 1
    return BigValue.from_digits(digits, radix=radix, capacity=capacity, operation="generate_random")


def random_in_range(low: BigValue, high: BigValue, rng: random.Random | None = None) -> BigValue:
    """
    Равномерное значение в [low, high].

    Разброс high − low задаёт число разрядов; кандидаты больше разброса
    отбрасываются.
    """
    span = subtract(high, low)
    if span.negative:
        low, high = high, low
        span = span.negate()
    if span.is_zero:
        return low
    rng = rng or _default_rng()

    base = span.base
    while True:
        digits = [rng.randrange(base) for _ in range(span.length)]
        candidate = BigValue.from_digits(
            digits, radix=span.radix, capacity=span.capacity, operation="random_in_range"
        )
        if compare(candidate, span) <= 0:
            return add(low, candidate)


# =============================================================================
# MILLER-RABIN
# =============================================================================


def miller_rabin(
    n: BigValue,
    iterations: int = MILLER_RABIN_ITERATIONS_DEFAULT,
    multiplier: KaratsubaMultiplier | None = None,
    rng: random.Random | None = None,
) -> bool:
    """
    Вероятностный тест простоты Miller-Rabin.

    Args:
        n: проверяемое значение
        iterations: число раундов (≥ 1)
        multiplier: умножение с общим кэшем
        rng: источник случайности для свидетелей

    Returns:
        False если n составное (точно), True если вероятно простое

    Raises:
        InvalidFormat: если iterations < 1

    Examples:
        >>> miller_rabin(BigValue.from_text("1d"), 10)
        True
        >>> miller_rabin(BigValue.from_text("1b"), 10)
        False
    """
    if iterations < 1:
        raise InvalidFormat(
            f"Miller-Rabin requires at least one iteration, got {iterations}",
            operation="miller_rabin",
            requested=iterations,
        )

    radix, capacity = n.radix, n.capacity
    one = BigValue.one(radix, capacity)
    two = BigValue.from_int(2, radix, capacity)
    three = BigValue.from_int(3, radix, capacity)

    if compare(n, one) <= 0:
        return False
    if compare(n, two) == 0 or compare(n, three) == 0:
        return True
    if n.is_even:
        return False

    multiplier = multiplier or KaratsubaMultiplier()
    rng = rng or _default_rng()

    n_minus_1 = subtract(n, one)
    n_minus_2 = subtract(n, two)
    d = n_minus_1
    s = 0
    while d.is_even:
        d = halve(d)
        s += 1

    for _ in range(iterations):
        a = random_in_range(two, n_minus_2, rng)
        x = mod_pow(a, d, n, multiplier)
        if x.is_one or x == n_minus_1:
            continue

        for _ in range(s - 1):
            x = modulo(multiplier.multiply(x, x), n)
            if x == n_minus_1:
                break
        else:
            return False

    return True


# =============================================================================
# ПОИСК ПРОСТОГО
# =============================================================================


def has_small_factor(candidate: BigValue, small_primes: tuple[int, ...] = SMALL_PRIMES) -> bool:
    """
    Делится ли кандидат на одно из малых простых.

    Кандидат, равный малому простому, фильтр проходит.
    """
    if candidate.is_even:
        return not (candidate.digits == (2,) and not candidate.negative)
    for p in small_primes:
        prime = BigValue.from_int(p, candidate.radix, candidate.capacity)
        if candidate == prime:
            return False
        if modulo(candidate, prime).is_zero:
            return True
    return False


def generate_prime(
    digit_count: int,
    iterations: int = MILLER_RABIN_ITERATIONS_DEFAULT,
    radix: Radix = Radix.HEX,
    capacity: int | None = None,
    multiplier: KaratsubaMultiplier | None = None,
    rng: random.Random | None = None,
    small_primes: tuple[int, ...] = SMALL_PRIMES,
) -> BigValue:
    """
    Вероятно простое значение ровно из digit_count разрядов.

    Случайный нечётный кандидат отсеивается по малым простым; выжившие
    проверяются Miller-Rabin. При неудаче кандидат увеличивается на два;
    если он перерос digit_count разрядов, берётся новый случайный.

    Raises:
        InvalidFormat: если digit_count вне [1, capacity] или iterations < 1
    """
    if capacity is None:
        capacity = radix.default_capacity
    if iterations < 1:
        raise InvalidFormat(
            f"Miller-Rabin requires at least one iteration, got {iterations}",
            operation="generate_prime",
            requested=iterations,
        )
    multiplier = multiplier or KaratsubaMultiplier()
    rng = rng or _default_rng()
    two = BigValue.from_int(2, radix, capacity)

    logger.info("Generating a %d-digit %s prime", digit_count, radix.value)
    candidate = generate_random(digit_count, radix, capacity, rng)
    attempts = 0
    while True:
        if candidate.length > digit_count:
            candidate = generate_random(digit_count, radix, capacity, rng)
        attempts += 1

        if has_small_factor(candidate, small_primes):
            logger.debug("Candidate %s eliminated by small prime sieve", candidate)
        elif miller_rabin(candidate, iterations, multiplier, rng):
            logger.info("Found prime %s after %d candidates", candidate, attempts)
            return candidate
        else:
            logger.debug("Candidate %s failed Miller-Rabin", candidate)

        candidate = add(candidate, two)
