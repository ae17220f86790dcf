"""
BigValue — Знаковое целое фиксированной ёмкости в виде буфера разрядов

Immutable представление, общее для десятичного и шестнадцатеричного
вариантов:
- negative: знак (True для отрицательных, ноль всегда неотрицателен)
- digits: значения разрядов, младший разряд первым
- radix: основание (DECIMAL или HEX)
- capacity: максимальное число разрядов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(digits) ≥ 1; ноль хранится как (0,) без знака
2. Старший разряд ненулевой, кроме представления нуля
3. Каждый разряд в [0, base)
4. len(digits) ≤ capacity; превышение → CapacityExceeded (разбор) или
   Overflow (операция)
5. Текстовая форма уникальна: без ведущих нулей, "0" без знака

Буфер хранит ровно значащие разряды: свободные старшие позиции не
хранятся, ёмкость проверяется явно при каждом построении.
"""

from dataclasses import dataclass, field
from typing import Iterable

from bigint_dh.core.domain.errors import CapacityExceeded, InvalidFormat, Overflow
from bigint_dh.core.domain.radix import DIGIT_CHARS, Radix


# =============================================================================
# HELPERS
# =============================================================================


def strip_high_zeros(digits: list[int]) -> list[int]:
    """
    Удаление незначащих старших нулей (in-place).

    Returns:
        Тот же список; пустой список превращается в [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


# =============================================================================
# BIG VALUE
# =============================================================================


@dataclass(frozen=True)
class BigValue:
    """
    Знаковое целое в виде буфера разрядов (младший разряд первым).

    Создаётся через from_text / from_digits / from_int / zero; прямой
    конструктор проверяет только структурные инварианты.
    """

    digits: tuple[int, ...]
    negative: bool
    radix: Radix
    capacity: int = field(compare=False)

    def __post_init__(self) -> None:
        if not self.digits:
            raise ValueError("digits must contain at least one position")
        if len(self.digits) > 1 and self.digits[-1] == 0:
            raise ValueError("digits must not carry high-order zero positions")
        if self.negative and self.digits == (0,):
            raise ValueError("zero must be non-negative")

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_text(
        cls,
        text: str,
        radix: Radix = Radix.HEX,
        capacity: int | None = None,
    ) -> "BigValue":
        """
        Разбор литерала: необязательный '-' и один или более разрядов.

        Args:
            text: литерал (hex без учёта регистра)
            radix: основание
            capacity: ёмкость (default: ёмкость основания)

        Returns:
            Каноническое значение (ведущие нули удалены)

        Raises:
            InvalidFormat: пустая строка, только знак, символ вне алфавита
            CapacityExceeded: число значащих разрядов больше ёмкости

        Examples:
            >>> BigValue.from_text("00FF").to_text()
            'ff'
            >>> BigValue.from_text("-0", Radix.DECIMAL).to_text()
            '0'
        """
        if capacity is None:
            capacity = radix.default_capacity

        negative = text.startswith("-")
        body = text[1:] if negative else text
        if not body:
            raise InvalidFormat(f"Invalid input: {text!r}", operation="parse", operand=text)

        digits = []
        for char in reversed(body):
            value = radix.digit_value(char)
            if value is None:
                raise InvalidFormat(
                    f"Invalid input: {text!r} (unexpected character {char!r} for {radix.value})",
                    operation="parse",
                    operand=text,
                )
            digits.append(value)

        strip_high_zeros(digits)
        if len(digits) > capacity:
            raise CapacityExceeded(
                f"Literal exceeds {capacity} {radix.value} digits ({len(digits)} given)",
                operation="parse",
                operand=text,
                capacity=capacity,
                requested=len(digits),
            )

        return cls._build(digits, negative, radix, capacity)

    @classmethod
    def from_digits(
        cls,
        digits: Iterable[int],
        *,
        radix: Radix,
        capacity: int,
        negative: bool = False,
        operation: str = "construction",
    ) -> "BigValue":
        """
        Построение из разрядов (младший первым) с нормализацией.

        Raises:
            Overflow: если значащих разрядов больше ёмкости
        """
        normalized = strip_high_zeros(list(digits))
        if len(normalized) > capacity:
            raise Overflow(
                f"Overflow occurred during {operation}",
                operation=operation,
                capacity=capacity,
                requested=len(normalized),
            )
        return cls._build(normalized, negative, radix, capacity)

    @classmethod
    def from_int(cls, value: int, radix: Radix = Radix.HEX, capacity: int | None = None) -> "BigValue":
        """Малая неотрицательная константа (2, n-2, малые простые и т.п.)."""
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")
        if capacity is None:
            capacity = radix.default_capacity
        base = radix.base
        digits = []
        while True:
            value, digit = divmod(value, base)
            digits.append(digit)
            if value == 0:
                break
        return cls.from_digits(digits, radix=radix, capacity=capacity, operation="from_int")

    @classmethod
    def zero(cls, radix: Radix = Radix.HEX, capacity: int | None = None) -> "BigValue":
        """Каноническое представление нуля."""
        if capacity is None:
            capacity = radix.default_capacity
        return cls((0,), False, radix, capacity)

    @classmethod
    def one(cls, radix: Radix = Radix.HEX, capacity: int | None = None) -> "BigValue":
        if capacity is None:
            capacity = radix.default_capacity
        return cls((1,), False, radix, capacity)

    @classmethod
    def _build(cls, digits: list[int], negative: bool, radix: Radix, capacity: int) -> "BigValue":
        is_zero = len(digits) == 1 and digits[0] == 0
        return cls(tuple(digits), negative and not is_zero, radix, capacity)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Число значащих разрядов (≥ 1)."""
        return len(self.digits)

    @property
    def base(self) -> int:
        return self.radix.base

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def is_one(self) -> bool:
        """Значение равно +1."""
        return self.digits == (1,) and not self.negative

    @property
    def is_odd(self) -> bool:
        # Основание чётное: чётность определяется младшим разрядом
        return self.digits[0] & 1 == 1

    @property
    def is_even(self) -> bool:
        return not self.is_odd

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    def abs(self) -> "BigValue":
        if not self.negative:
            return self
        return BigValue(self.digits, False, self.radix, self.capacity)

    def negate(self) -> "BigValue":
        if self.is_zero:
            return self
        return BigValue(self.digits, not self.negative, self.radix, self.capacity)

    def with_sign(self, negative: bool) -> "BigValue":
        """Копия с заданным знаком (ноль остаётся неотрицательным)."""
        if self.negative == negative or self.is_zero:
            return self
        return BigValue(self.digits, negative, self.radix, self.capacity)

    def shift_left(self, k: int) -> "BigValue":
        """
        Вставка k нулевых позиций в младший конец (умножение на base^k).

        Raises:
            Overflow: если результат длиннее ёмкости
        """
        if k < 0:
            raise ValueError(f"shift must be non-negative, got {k}")
        if k == 0 or self.is_zero:
            return self
        if self.length + k > self.capacity:
            raise Overflow(
                "Overflow occurred during shift left operation",
                operation="shift_left",
                capacity=self.capacity,
                requested=self.length + k,
            )
        return BigValue((0,) * k + self.digits, self.negative, self.radix, self.capacity)

    def lower(self, m: int) -> "BigValue":
        """Неотрицательное значение из m младших разрядов."""
        return BigValue.from_digits(
            self.digits[:m], radix=self.radix, capacity=self.capacity, operation="split"
        )

    def higher(self, m: int) -> "BigValue":
        """Неотрицательное значение из разрядов старше m-го (ноль, если их нет)."""
        if self.length <= m:
            return BigValue.zero(self.radix, self.capacity)
        return BigValue(self.digits[m:], False, self.radix, self.capacity)

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def magnitude_text(self) -> str:
        """Разряды от старшего к младшему, без знака."""
        return "".join(DIGIT_CHARS[d] for d in reversed(self.digits))

    def to_text(self) -> str:
        """Каноническая текстовая форма."""
        text = self.magnitude_text()
        return f"-{text}" if self.negative else text

    def __str__(self) -> str:
        return self.to_text()
