"""
Karatsuba Multiplication — Рекурсивное умножение с мемоизацией

Алгоритм (над модулями):
    n = max(len(x), len(y)), округлённое вверх до чётного; m = n / 2
    low = m младших разрядов, high = остальные (дополнение нулями неявное)

    z0 = low(x) · low(y)
    z2 = high(x) · high(y)
    z1 = (low(x) + high(x)) · (low(y) + high(y)) − z2 − z0

    result = z2 · R^(2m) + z1 · R^m + z0

Базовый случай: длина любого операнда ≤ порога или нулевой операнд →
наивное умножение. Знак результата — XOR знаков исходных операндов,
применяется после рекурсии над модулями.

МЕМОИЗАЦИЯ:
- Ключ: (основание, меньший текст, больший текст) — умножение
  коммутативно, оба порядка операндов дают один ключ
- Кэш проверяется до любой рекурсивной работы; попадание восстанавливает
  произведение из текста без пересчёта
- Записи пишутся один раз и не вытесняются; lock делает чтение/вставку
  атомарными, гонка возможна только на повторном вычислении
- NullMemoCache ничего не хранит (детерминированные замеры)
"""

import threading
from typing import Final, Iterator, NamedTuple

from bigint_dh.core.config import KARATSUBA_THRESHOLD
from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.math.linear import add, ensure_same_radix, subtract
from bigint_dh.core.math.naive import check_product_capacity, multiply_naive


# =============================================================================
# MEMO CACHE
# =============================================================================


class MemoKey(NamedTuple):
    """Канонический ключ пары операндов."""

    radix: str
    left: str
    right: str


class MemoCache:
    """
    Кэш произведений: MemoKey → каноническая текстовая форма произведения.

    Явный объект с собственным временем жизни; передаётся в умножение
    по ссылке.
    """

    def __init__(self) -> None:
        self._entries: dict[MemoKey, str] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(a: BigValue, b: BigValue) -> MemoKey:
        """Ключ пары (порядок операндов не важен)."""
        left, right = a.to_text(), b.to_text()
        if left > right:
            left, right = right, left
        return MemoKey(a.radix.value, left, right)

    def get(self, key: MemoKey) -> str | None:
        with self._lock:
            product = self._entries.get(key)
            if product is None:
                self.misses += 1
            else:
                self.hits += 1
            return product

    def put(self, key: MemoKey, product: str) -> None:
        """Вставка; существующая запись не перезаписывается."""
        with self._lock:
            self._entries.setdefault(key, product)

    def items(self) -> Iterator[tuple[MemoKey, str]]:
        """Снимок записей (для сохранения на диск)."""
        with self._lock:
            snapshot = list(self._entries.items())
        return iter(snapshot)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


class NullMemoCache(MemoCache):
    """Кэш, который ничего не хранит."""

    def get(self, key: MemoKey) -> str | None:
        self.misses += 1
        return None

    def put(self, key: MemoKey, product: str) -> None:
        return None


# =============================================================================
# KARATSUBA
# =============================================================================


def karatsuba(
    x: BigValue,
    y: BigValue,
    cache: MemoCache,
    threshold: int = KARATSUBA_THRESHOLD,
) -> BigValue:
    """
    Произведение модулей |x| · |y| (результат неотрицателен).

    Args:
        x: первый операнд (знак игнорируется)
        y: второй операнд (знак игнорируется)
        cache: кэш произведений
        threshold: порог перехода к наивному умножению

    Returns:
        Неотрицательное произведение модулей
    """
    x, y = x.abs(), y.abs()

    key = cache.make_key(x, y)
    cached = cache.get(key)
    if cached is not None:
        return BigValue.from_text(cached, x.radix, x.capacity)

    if x.is_zero or y.is_zero or x.length <= threshold or y.length <= threshold:
        product = multiply_naive(x, y)
    else:
        n = max(x.length, y.length)
        n += n % 2
        m = n // 2

        x_low, x_high = x.lower(m), x.higher(m)
        y_low, y_high = y.lower(m), y.higher(m)

        z0 = karatsuba(x_low, y_low, cache, threshold)
        z2 = karatsuba(x_high, y_high, cache, threshold)
        z1 = karatsuba(add(x_low, x_high), add(y_low, y_high), cache, threshold)
        z1 = subtract(subtract(z1, z2), z0)

        product = add(add(z2.shift_left(2 * m), z1.shift_left(m)), z0)

    cache.put(key, product.to_text())
    return product


class KaratsubaMultiplier:
    """
    Знаковое умножение через Karatsuba с общим кэшем.

    Связывает кэш и порог, чтобы передавать их в modPow и Miller-Rabin
    одним объектом.
    """

    def __init__(self, cache: MemoCache | None = None, threshold: int = KARATSUBA_THRESHOLD):
        if threshold < 2:
            raise ValueError(f"threshold must be >= 2, got {threshold}")
        self.cache = cache if cache is not None else MemoCache()
        self.threshold = threshold

    def multiply(self, a: BigValue, b: BigValue) -> BigValue:
        """
        Знаковое произведение a · b.

        Raises:
            Overflow: если len(a) + len(b) > capacity
            UnsupportedOperand: если основания операндов различаются
        """
        ensure_same_radix(a, b, "multiply")
        if a.is_zero or b.is_zero:
            return BigValue.zero(a.radix, a.capacity)
        check_product_capacity(a, b, "multiplication")
        product = karatsuba(a, b, self.cache, self.threshold)
        return product.with_sign(a.negative != b.negative)

    __call__ = multiply


# Кэш по умолчанию для module-level multiply
_DEFAULT_CACHE: Final[MemoCache] = MemoCache()


def multiply(
    a: BigValue,
    b: BigValue,
    cache: MemoCache | None = None,
    threshold: int = KARATSUBA_THRESHOLD,
) -> BigValue:
    """
    Знаковое умножение (Karatsuba с откатом на наивное).

    Args:
        a: первый множитель
        b: второй множитель
        cache: кэш произведений (default: общий кэш процесса)
        threshold: порог перехода к наивному умножению

    Examples:
        >>> multiply(BigValue.from_text("-ff"), BigValue.from_text("ff")).to_text()
        '-fe01'
    """
    multiplier = KaratsubaMultiplier(cache if cache is not None else _DEFAULT_CACHE, threshold)
    return multiplier.multiply(a, b)
