"""bigint-dh CLI commands."""

from . import calc, exchange, prime

__all__ = ["calc", "exchange", "prime"]
