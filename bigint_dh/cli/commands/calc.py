"""
bigint-dh calc command.

Batch calculator. Input is whitespace-separated tokens: a test-case count,
then `<op> <a> <b>` for each case. Operators: + - * / % (/ and % are
hexadecimal only).
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, List

import typer

from bigint_dh.cli._timer import Timer
from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.errors import BigValueError
from bigint_dh.core.domain.radix import Radix
from bigint_dh.core.engine import BigIntEngine
from bigint_dh.storage import MemoStoreError, load_memo_snapshot, save_memo_snapshot

logger = logging.getLogger(__name__)

DECIMAL_DIVISION_MESSAGE = "Division/Modulo only supported for hexadecimal."


def _operators(engine: BigIntEngine) -> Dict[str, Callable[[BigValue, BigValue], BigValue]]:
    return {
        "+": engine.add,
        "-": engine.subtract,
        "*": engine.multiply,
        "/": lambda a, b: engine.divide(a, b).quotient,
        "%": engine.modulo,
    }


def evaluate(engine: BigIntEngine, op: str, left: str, right: str, radix: Radix) -> str:
    """
    One batch line rendered the way calc prints it.

    Engine errors become `Error: <message>` so the batch keeps going.
    """
    operators = _operators(engine)
    if op not in operators:
        return f"Invalid operator: {op}"
    if radix is Radix.DECIMAL and op in ("/", "%"):
        return DECIMAL_DIVISION_MESSAGE

    try:
        a = engine.parse(left, radix)
        b = engine.parse(right, radix)
        return engine.render(operators[op](a, b))
    except BigValueError as e:
        logger.debug("calc %s %s %s failed: %s", left, op, right, e.context())
        return f"Error: {e}"


def run_batch(engine: BigIntEngine, tokens: List[str], radix: Radix) -> Iterator[str]:
    """
    Evaluate a tokenized batch.

    Raises:
        ValueError: if the count is missing or not an integer, or the input
            ends before the announced number of cases
    """
    if not tokens:
        raise ValueError("Empty input: expected a test-case count")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"Invalid test-case count: {tokens[0]!r}") from None
    if count < 0:
        raise ValueError(f"Invalid test-case count: {count}")

    body = tokens[1:]
    for case in range(count):
        triple = body[3 * case : 3 * case + 3]
        if len(triple) < 3:
            raise ValueError(f"Input ended after {case} of {count} test cases")
        yield evaluate(engine, *triple, radix=radix)


def calc(
    file: Path | None = typer.Argument(
        None, help="Batch file (default: read standard input)", exists=True, dir_okay=False
    ),
    decimal: bool = typer.Option(False, "--decimal", "-d", help="Operands are decimal"),
    memo_file: Path | None = typer.Option(
        None, "--memo-file", "-m", help="Load the product cache before and save it after the batch"
    ),
    timed: bool = typer.Option(False, "--timed", "-t", help="Print elapsed batch time"),
) -> None:
    """
    Evaluate a batch of big-integer operations.

    Examples:
        $ printf '2\\n+ 999 1\\n- 500 700\\n' | bigint-dh calc --decimal
        1000
        -200
    """
    radix = Radix.DECIMAL if decimal else Radix.HEX
    engine = BigIntEngine()

    if memo_file is not None:
        try:
            load_memo_snapshot(memo_file, engine.cache)
        except MemoStoreError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    text = file.read_text(encoding="utf-8") if file is not None else typer.get_text_stream("stdin").read()

    try:
        with Timer("calc") as timer:
            for line in run_batch(engine, text.split(), radix):
                typer.echo(line)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        if memo_file is not None:
            save_memo_snapshot(engine.cache, memo_file)

    if timed:
        typer.echo(f"Elapsed: {timer.elapsed_ms:.3f} ms")
