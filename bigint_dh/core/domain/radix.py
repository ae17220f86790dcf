"""
Radix — Основание системы счисления и алфавит разрядов

Два варианта BigValue различаются только основанием и алфавитом:
- DECIMAL: основание 10, алфавит '0'-'9'
- HEX: основание 16, алфавит '0'-'9', 'a'-'f' (ввод без учёта регистра)

Вывод hex-разрядов всегда в нижнем регистре.

Ёмкости по умолчанию:
- DECIMAL_CAPACITY = 618 разрядов (модули до 2048 бит ≈ 617 десятичных разрядов)
- HEX_CAPACITY = 128 разрядов (модули до 512 бит)
"""

from enum import Enum
from typing import Final


# =============================================================================
# ЁМКОСТИ ПО УМОЛЧАНИЮ
# =============================================================================

DECIMAL_CAPACITY: Final[int] = 618

HEX_CAPACITY: Final[int] = 128


# =============================================================================
# АЛФАВИТЫ
# =============================================================================

DIGIT_CHARS: Final[str] = "0123456789abcdef"

_DECIMAL_VALUES: Final[dict[str, int]] = {c: i for i, c in enumerate(DIGIT_CHARS[:10])}

_HEX_VALUES: Final[dict[str, int]] = {
    **{c: i for i, c in enumerate(DIGIT_CHARS)},
    **{c.upper(): i for i, c in enumerate(DIGIT_CHARS) if c.isalpha()},
}


# =============================================================================
# RADIX
# =============================================================================


class Radix(str, Enum):
    """Основание системы счисления"""

    DECIMAL = "decimal"
    HEX = "hex"

    @property
    def base(self) -> int:
        """Числовое основание (10 или 16)."""
        return 10 if self is Radix.DECIMAL else 16

    @property
    def default_capacity(self) -> int:
        """Ёмкость по умолчанию (разрядов)."""
        return DECIMAL_CAPACITY if self is Radix.DECIMAL else HEX_CAPACITY

    def digit_value(self, char: str) -> int | None:
        """
        Значение символа-разряда.

        Returns:
            Значение в [0, base) или None, если символ вне алфавита
        """
        values = _DECIMAL_VALUES if self is Radix.DECIMAL else _HEX_VALUES
        return values.get(char)

    def digit_char(self, value: int) -> str:
        """Символ разряда для значения в [0, base)."""
        if not 0 <= value < self.base:
            raise ValueError(f"digit value {value} out of range for {self.value}")
        return DIGIT_CHARS[value]
