"""
Domain value objects.

Contains the fixed-capacity BigValue, radix descriptors and the engine
error taxonomy.
"""

from bigint_dh.core.domain.big_value import BigValue, strip_high_zeros
from bigint_dh.core.domain.errors import (
    BigValueError,
    CapacityExceeded,
    DivisionByZero,
    ErrorKind,
    InvalidFormat,
    Overflow,
    UnsupportedOperand,
)
from bigint_dh.core.domain.radix import (
    DECIMAL_CAPACITY,
    DIGIT_CHARS,
    HEX_CAPACITY,
    Radix,
)

__all__ = [
    # Radix
    "DECIMAL_CAPACITY",
    "HEX_CAPACITY",
    "DIGIT_CHARS",
    "Radix",
    # Value model
    "BigValue",
    "strip_high_zeros",
    # Errors
    "ErrorKind",
    "BigValueError",
    "InvalidFormat",
    "CapacityExceeded",
    "Overflow",
    "DivisionByZero",
    "UnsupportedOperand",
]
