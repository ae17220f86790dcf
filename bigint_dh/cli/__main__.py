"""
bigint-dh CLI entry point.

Commands:
- calc  : batch calculator over hex or decimal operands
- prime : probable prime generation
- dh    : Diffie-Hellman key exchange demo
"""

import logging
import sys

import typer

from bigint_dh.cli.commands import calc, exchange, prime

app = typer.Typer(
    name="bigint-dh",
    help="Fixed-capacity big-integer arithmetic and a Diffie-Hellman demo",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
app.command(name="calc", help="Evaluate a batch of big-integer operations")(calc.calc)
app.command(name="prime", help="Generate a probable prime")(prime.prime)
app.command(name="dh", help="Run a Diffie-Hellman key exchange")(exchange.dh)


# Entry point for setuptools
def main() -> None:
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
