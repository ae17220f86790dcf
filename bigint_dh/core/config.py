"""
EngineConfig — Конфигурация арифметического движка

Immutable Pydantic модель с параметрами ёмкости, порогом Karatsuba и
параметрами проверки простоты. Значения по умолчанию вынесены в Final
константы модуля.

Ёмкости по умолчанию берутся из radix (DECIMAL_CAPACITY, HEX_CAPACITY).

Порог Karatsuba один и тот же для выбора алгоритма и для базового случая
рекурсии: операнды длиной ≤ порога умножаются наивно.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from bigint_dh.core.domain.radix import DECIMAL_CAPACITY, HEX_CAPACITY, Radix


# =============================================================================
# DEFAULTS
# =============================================================================

# Операнд длиной ≤ порога умножается наивно
KARATSUBA_THRESHOLD: Final[int] = 8

# Число раундов Miller-Rabin по умолчанию
MILLER_RABIN_ITERATIONS_DEFAULT: Final[int] = 20

# Малые простые для предварительного отсева кандидатов
SMALL_PRIMES: Final[tuple[int, ...]] = (3, 5, 7, 11, 13, 17, 19)


# =============================================================================
# CONFIG
# =============================================================================


class EngineConfig(BaseModel):
    """
    Конфигурация движка.

    hex_capacity ≥ 2 и karatsuba_threshold ≥ 2: при меньших значениях
    суммы половин в рекурсии Karatsuba могут не поместиться в ёмкость.
    """

    decimal_capacity: int = Field(
        DECIMAL_CAPACITY, ge=1, description="Ёмкость десятичного варианта (разрядов)"
    )
    hex_capacity: int = Field(
        HEX_CAPACITY, ge=2, description="Ёмкость шестнадцатеричного варианта (разрядов)"
    )
    karatsuba_threshold: int = Field(
        KARATSUBA_THRESHOLD, ge=2, description="Порог перехода к наивному умножению"
    )
    miller_rabin_iterations: int = Field(
        MILLER_RABIN_ITERATIONS_DEFAULT, ge=1, description="Раунды Miller-Rabin"
    )
    small_primes: tuple[int, ...] = Field(
        SMALL_PRIMES, description="Малые простые для предварительного отсева"
    )

    model_config = {"frozen": True}

    @field_validator("small_primes")
    @classmethod
    def validate_small_primes(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка, что все элементы — нечётные простые ≥ 3"""
        for p in v:
            if p < 3 or any(p % d == 0 for d in range(2, int(p**0.5) + 1)):
                raise ValueError(f"small_primes must contain odd primes >= 3, got {p}")
        return v

    def capacity_for(self, radix: Radix) -> int:
        """Ёмкость для основания."""
        return self.decimal_capacity if radix is Radix.DECIMAL else self.hex_capacity
