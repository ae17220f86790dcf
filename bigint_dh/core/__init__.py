"""
Core value model, arithmetic primitives, and engine configuration.

This package has no I/O: persistence, the key-exchange demo and the CLI
are layered on top of it.
"""
