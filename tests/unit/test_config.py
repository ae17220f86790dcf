"""
Тесты для EngineConfig
"""

import pytest
from pydantic import ValidationError

from bigint_dh.core.config import (
    KARATSUBA_THRESHOLD,
    MILLER_RABIN_ITERATIONS_DEFAULT,
    SMALL_PRIMES,
    EngineConfig,
)
from bigint_dh.core.domain import Radix


class TestEngineConfig:
    """Тесты для EngineConfig"""

    def test_defaults(self):
        config = EngineConfig()
        assert config.decimal_capacity == 618
        assert config.hex_capacity == 128
        assert config.karatsuba_threshold == KARATSUBA_THRESHOLD == 8
        assert config.miller_rabin_iterations == MILLER_RABIN_ITERATIONS_DEFAULT == 20
        assert config.small_primes == SMALL_PRIMES == (3, 5, 7, 11, 13, 17, 19)

    def test_capacity_for(self):
        config = EngineConfig(decimal_capacity=100, hex_capacity=50)
        assert config.capacity_for(Radix.DECIMAL) == 100
        assert config.capacity_for(Radix.HEX) == 50

    def test_frozen(self):
        config = EngineConfig()
        with pytest.raises(ValidationError):
            config.hex_capacity = 256

    @pytest.mark.parametrize(
        "field,value",
        [
            ("decimal_capacity", 0),
            ("hex_capacity", 1),
            ("karatsuba_threshold", 1),
            ("miller_rabin_iterations", 0),
        ],
    )
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            EngineConfig(**{field: value})

    @pytest.mark.parametrize("primes", [(2, 3), (3, 9), (1,), (-3,)])
    def test_small_primes_must_be_odd_primes(self, primes):
        with pytest.raises(ValidationError, match="odd primes"):
            EngineConfig(small_primes=primes)

    def test_custom_small_primes(self):
        assert EngineConfig(small_primes=(3, 5)).small_primes == (3, 5)
