"""bigint-dh prime command."""

import random

import typer

from bigint_dh.core.config import MILLER_RABIN_ITERATIONS_DEFAULT
from bigint_dh.core.domain.errors import BigValueError
from bigint_dh.core.engine import BigIntEngine


def prime(
    digits: int = typer.Option(..., "--digits", "-n", help="Number of hexadecimal digits"),
    iterations: int = typer.Option(
        MILLER_RABIN_ITERATIONS_DEFAULT, "--iterations", "-k", help="Miller-Rabin rounds"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for a reproducible (insecure) run"),
) -> None:
    """
    Print a probable prime with the given number of hex digits.

    Examples:
        $ bigint-dh prime --digits 16
    """
    rng = random.Random(seed) if seed is not None else None
    engine = BigIntEngine(rng=rng)
    try:
        value = engine.generate_prime(digits, iterations)
    except BigValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(engine.render(value))
