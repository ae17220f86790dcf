"""
Core math modules для bigint-dh

Арифметика над BigValue: от сложения с переносом до Miller-Rabin.
"""

# Linear Arithmetic
from bigint_dh.core.math.linear import (
    add,
    compare,
    ensure_same_radix,
    subtract,
)

# Multiplication
from bigint_dh.core.math.naive import multiply_naive
from bigint_dh.core.math.karatsuba import (
    KaratsubaMultiplier,
    MemoCache,
    MemoKey,
    NullMemoCache,
    karatsuba,
    multiply,
)

# Long Division
from bigint_dh.core.math.division import (
    DivisionResult,
    divide,
    halve,
    modulo,
)

# Modular Exponentiation
from bigint_dh.core.math.modpow import mod_pow

# Primality
from bigint_dh.core.math.primality import (
    generate_prime,
    generate_random,
    has_small_factor,
    miller_rabin,
    random_in_range,
)

__all__ = [
    # Linear Arithmetic
    "add",
    "subtract",
    "compare",
    "ensure_same_radix",
    # Multiplication — Types
    "MemoKey",
    "MemoCache",
    "NullMemoCache",
    "KaratsubaMultiplier",
    # Multiplication — Functions
    "multiply_naive",
    "karatsuba",
    "multiply",
    # Long Division
    "DivisionResult",
    "divide",
    "modulo",
    "halve",
    # Modular Exponentiation
    "mod_pow",
    # Primality
    "generate_random",
    "random_in_range",
    "miller_rabin",
    "has_small_factor",
    "generate_prime",
]
