"""
Test suite for bigint-dh

Contains:
- tests/unit/          : Unit tests for individual modules, the DH demo and the CLI
"""
