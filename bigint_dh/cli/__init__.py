"""bigint-dh command-line interface."""
