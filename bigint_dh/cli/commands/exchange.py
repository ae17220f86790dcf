"""bigint-dh dh command."""

import random

import typer

from bigint_dh.core.domain.errors import BigValueError
from bigint_dh.core.engine import BigIntEngine
from bigint_dh.dh import (
    DH_PRIME_DIGITS_DEFAULT,
    decrypt_message,
    encrypt_message,
    generate_parameters,
    run_key_exchange,
)


def dh(
    prime_digits: int = typer.Option(
        DH_PRIME_DIGITS_DEFAULT, "--prime-digits", "-n", help="Hex digits of the prime modulus"
    ),
    iterations: int | None = typer.Option(None, "--iterations", "-k", help="Miller-Rabin rounds"),
    message: str | None = typer.Option(
        None, "--message", help="Encrypt and decrypt this message with the shared secret"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for a reproducible (insecure) run"),
) -> None:
    """
    Run a Diffie-Hellman key exchange between Alice and Bob.

    Examples:
        $ bigint-dh dh --prime-digits 16 --message "hello"
    """
    rng = random.Random(seed) if seed is not None else None
    engine = BigIntEngine(rng=rng)

    try:
        params = generate_parameters(engine, prime_digits, iterations)
        typer.echo(f"Prime (p): {engine.render(params.prime)}")
        typer.echo(f"Base (g): {engine.render(params.generator)}")

        result = run_key_exchange(engine, params)
    except BigValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Alice's private key (a): {engine.render(result.alice.private_key)}")
    typer.echo(f"Bob's private key (b): {engine.render(result.bob.private_key)}")
    typer.echo(f"Alice's public key (A): {engine.render(result.alice.public_key)}")
    typer.echo(f"Bob's public key (B): {engine.render(result.bob.public_key)}")
    typer.echo(f"Alice's shared secret: {engine.render(result.alice.shared_secret)}")
    typer.echo(f"Bob's shared secret: {engine.render(result.bob.shared_secret)}")

    if not result.secrets_match:
        typer.echo("Shared secrets DO NOT match.", err=True)
        raise typer.Exit(1)
    typer.echo("Shared secrets match!")

    if message is not None:
        secret = result.alice.shared_secret
        encrypted = encrypt_message(message, secret)
        typer.echo(f"Encrypted chunks: {' '.join(encrypted.chunks)}")
        typer.echo(f"Decrypted message: {decrypt_message(encrypted, secret)}")
